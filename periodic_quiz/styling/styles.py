"""Qt stylesheets derived from the current theme and tile colours."""

from periodic_quiz.constants.ui_constants import TILE_SIZE_PX

from .color_palette import ColorPalette, Theme
from .element_colors import category_color, contrast_text_color


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(background: str, theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget#centralWidget {{
                background-color: {background};
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QGroupBox {{
                background-color: {ColorPalette.PANEL_BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QPushButton#primaryButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton#primaryButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_tile_style(category: str | None) -> str:
        background = category_color(category)
        return f"""
            QPushButton {{
                background-color: {background};
                color: {contrast_text_color(background)};
                border: none;
                border-radius: 6px;
                min-width: {TILE_SIZE_PX}px;
                min-height: {TILE_SIZE_PX}px;
                font-size: 10px;
            }}
            QPushButton:hover {{
                border: 2px solid {contrast_text_color(background)};
            }}
        """

    @staticmethod
    def get_feedback_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        colour = ColorPalette.SUCCESS if is_correct else ColorPalette.ERROR
        return f"color: {colour.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
