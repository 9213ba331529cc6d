"""Qt main window: the periodic table, element details and quiz launcher."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from periodic_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from periodic_quiz.constants.quiz_constants import CLICK_SOUND_FILE
from periodic_quiz.constants.ui_constants import (
    BACKGROUND_CHOICES,
    BACKGROUND_LABEL,
    DARK_MODE_BUTTON,
    DATASET_UNAVAILABLE_MESSAGE,
    ELEMENT_NOT_FOUND_MESSAGE,
    LIGHT_MODE_BUTTON,
    WINDOW_TITLE,
)
from periodic_quiz.core.models import ElementRecord
from periodic_quiz.core.quiz_manager import QuizManager
from periodic_quiz.styling.color_palette import Theme
from periodic_quiz.styling.element_colors import invert_hex
from periodic_quiz.styling.styles import Styles
from periodic_quiz.ui.components.element_details_panel import ElementDetailsPanel
from periodic_quiz.ui.components.periodic_table_grid import PeriodicTableGrid
from periodic_quiz.ui.dialog_helpers import show_error, show_info, show_warning
from periodic_quiz.ui.quiz_dialog import QuizDialog
from periodic_quiz.ui.sound_effects import load_sound_effect, play


class PeriodicTableWindow(QMainWindow):
    """Main window hosting the tile grid and the details side panel."""

    def __init__(self, quiz_manager: QuizManager, web_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self.web_url = web_url
        self._dark_mode = False
        self._background = next(iter(BACKGROUND_CHOICES.values()))
        self._click_sound = load_sound_effect(CLICK_SOUND_FILE, self)

        self._build_ui()
        self._apply_styles()
        self.reload_table()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        central_widget.setObjectName("centralWidget")
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        control_row = QHBoxLayout()
        control_row.addWidget(QLabel(BACKGROUND_LABEL, self))
        self.color_combo = QComboBox(self)
        for caption, colour in BACKGROUND_CHOICES.items():
            self.color_combo.addItem(caption, colour)
        self.color_combo.currentIndexChanged.connect(self._handle_background_changed)
        control_row.addWidget(self.color_combo)

        self.dark_mode_button = QPushButton(DARK_MODE_BUTTON, self)
        self.dark_mode_button.clicked.connect(self._toggle_dark_mode)
        control_row.addWidget(self.dark_mode_button)
        self.about_button = QPushButton("About", self)
        self.about_button.clicked.connect(self._show_about)
        control_row.addWidget(self.about_button)
        control_row.addStretch()

        if self.web_url:
            self.web_label = QLabel(f"Browser version: {self.web_url}", self)
            control_row.addWidget(self.web_label)
        root_layout.addLayout(control_row)

        content_row = QHBoxLayout()
        self.table_grid = PeriodicTableGrid(on_element_selected=self._handle_element_selected, parent=self)
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.table_grid)
        content_row.addWidget(scroll, stretch=3)

        self.details_panel = ElementDetailsPanel(on_start_quiz=self._handle_start_quiz, parent=self)
        self.details_panel.setMinimumWidth(300)
        content_row.addWidget(self.details_panel, stretch=1)
        root_layout.addLayout(content_row)

    def reload_table(self) -> None:
        elements = self.quiz_manager.list_elements()
        self.table_grid.populate(elements)
        self.details_panel.clear()
        if not elements:
            show_error(self, WINDOW_TITLE, DATASET_UNAVAILABLE_MESSAGE)

    def _handle_element_selected(self, element: ElementRecord) -> None:
        play(self._click_sound)
        self.details_panel.show_element(element)

    def _handle_start_quiz(self, symbol: str, difficulty: str) -> None:
        if not self.quiz_manager.start_quiz(symbol, difficulty):
            show_warning(self, WINDOW_TITLE, ELEMENT_NOT_FOUND_MESSAGE.format(symbol=symbol))
            return
        dialog = QuizDialog(self.quiz_manager, theme=self._theme(), parent=self)
        dialog.exec()

    def _handle_background_changed(self, _index: int) -> None:
        self._background = self.color_combo.currentData() or self._background
        self._apply_styles()

    def _toggle_dark_mode(self) -> None:
        self._dark_mode = not self._dark_mode
        self.dark_mode_button.setText(LIGHT_MODE_BUTTON if self._dark_mode else DARK_MODE_BUTTON)
        self._apply_styles()

    def _show_about(self) -> None:
        show_info(self, f"About {APP_NAME}", f"{APP_NAME} {APP_VERSION}\n\n{APP_ABOUT_TEXT}\n\n{APP_LICENSE}")

    def _theme(self) -> Theme:
        return Theme.DARK if self._dark_mode else Theme.LIGHT

    def _apply_styles(self) -> None:
        background = invert_hex(self._background) if self._dark_mode else self._background
        self.setStyleSheet(Styles.get_main_window_style(background, self._theme()))
