"""Dialog that walks through the active quiz one question at a time."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QGridLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from periodic_quiz.constants.quiz_constants import CORRECT_SOUND_FILE, WRONG_SOUND_FILE
from periodic_quiz.constants.ui_constants import BACK_TO_TABLE_BUTTON, QUIZ_WINDOW_TITLE_TEMPLATE
from periodic_quiz.core.markdown_renderer import renderer
from periodic_quiz.core.models import QuizStateError
from periodic_quiz.core.quiz_manager import QuizManager
from periodic_quiz.styling.color_palette import Theme
from periodic_quiz.styling.styles import Styles
from periodic_quiz.ui.dialog_helpers import show_warning
from periodic_quiz.ui.sound_effects import load_sound_effect, play


class QuizDialog(QDialog):
    """Renders the manager's current question or final summary after every transition."""

    def __init__(self, quiz_manager: QuizManager, theme: Theme = Theme.LIGHT, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self._theme = theme
        self._option_buttons: list[QPushButton] = []

        element = quiz_manager.get_quiz_element()
        self.setWindowTitle(QUIZ_WINDOW_TITLE_TEMPLATE.format(name=element.name if element else ""))
        self.setModal(True)
        self.setMinimumWidth(480)

        self._correct_sound = load_sound_effect(CORRECT_SOUND_FILE, self)
        self._wrong_sound = load_sound_effect(WRONG_SOUND_FILE, self)

        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.content_view = QTextBrowser(self)
        self.content_view.setMinimumHeight(160)
        layout.addWidget(self.content_view)

        self.options_layout = QGridLayout()
        layout.addLayout(self.options_layout)

        self.feedback_label = QLabel("", self)
        layout.addWidget(self.feedback_label)

        self.close_button = QPushButton(BACK_TO_TABLE_BUTTON, self)
        self.close_button.setObjectName("primaryButton")
        self.close_button.clicked.connect(self.reject)
        layout.addWidget(self.close_button)

    def refresh(self) -> None:
        """Show whatever state the session is in now."""
        self._clear_option_buttons()
        view = self.quiz_manager.get_current_view()
        if view is not None:
            self.content_view.setHtml(renderer.render_question(view))
            for idx, label in enumerate(view.options):
                button = QPushButton(label, self)
                button.clicked.connect(lambda _checked=False, value=label: self._handle_answer(value))
                self.options_layout.addWidget(button, idx // 2, idx % 2)
                self._option_buttons.append(button)
            self.close_button.setVisible(False)
            return

        summary = self.quiz_manager.get_summary()
        if summary is not None:
            self.content_view.setHtml(renderer.render_summary(summary))
        self.close_button.setVisible(True)

    def _handle_answer(self, label: str) -> None:
        try:
            is_correct = self.quiz_manager.submit_answer(label)
        except QuizStateError as exc:
            show_warning(self, "Quiz", str(exc))
            self.refresh()
            return

        play(self._correct_sound if is_correct else self._wrong_sound)
        self.feedback_label.setText("Correct!" if is_correct else "Wrong answer.")
        self.feedback_label.setStyleSheet(Styles.get_feedback_style(is_correct, self._theme))
        self.refresh()

    def _clear_option_buttons(self) -> None:
        for button in self._option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons.clear()

    def reject(self) -> None:
        self.quiz_manager.dismiss_quiz()
        super().reject()
