"""Component showing the selected element and launching its quiz."""

from __future__ import annotations

from collections.abc import Callable
import logging
from urllib.parse import quote

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices, QPixmap
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from periodic_quiz.constants.dataset_constants import READ_MORE_URL_TEMPLATE
from periodic_quiz.constants.quiz_constants import DEFAULT_DIFFICULTY, NOT_AVAILABLE
from periodic_quiz.constants.ui_constants import (
    DETAILS_PLACEHOLDER,
    DIFFICULTY_LABEL,
    ELEMENT_IMAGE_SIZE_PX,
    READ_MORE_BUTTON,
    START_QUIZ_BUTTON,
)
from periodic_quiz.core.markdown_renderer import renderer
from periodic_quiz.core.models import Difficulty, ElementRecord, option_label
from periodic_quiz.styling.styles import Styles

logger = logging.getLogger(__name__)


def _display(value: object) -> str:
    return NOT_AVAILABLE if value in (None, "") else option_label(value)


class ElementDetailsPanel(QGroupBox):
    """Side panel with element facts, difficulty picker and quiz button."""

    def __init__(
        self,
        on_start_quiz: Callable[[str, str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self._element: ElementRecord | None = None
        self._pending_image_url: str | None = None
        self._network = QNetworkAccessManager(self)
        self._network.finished.connect(self._handle_image_reply)
        self._build_ui()
        self.clear()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(DETAILS_PLACEHOLDER, self)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setFixedHeight(ELEMENT_IMAGE_SIZE_PX)
        self.image_label.setVisible(False)
        layout.addWidget(self.image_label)

        form = QFormLayout()
        self._field_labels: dict[str, QLabel] = {}
        for key, caption in (
            ("number", "Atomic number"),
            ("atomic_mass", "Atomic mass"),
            ("category", "Category"),
            ("xpos", "Group"),
            ("ypos", "Period"),
            ("electron_configuration", "Electron configuration"),
            ("phase", "State"),
        ):
            value_label = QLabel(NOT_AVAILABLE, self)
            value_label.setWordWrap(True)
            form.addRow(f"{caption}:", value_label)
            self._field_labels[key] = value_label
        layout.addLayout(form)

        self.summary_view = QTextBrowser(self)
        self.summary_view.setOpenExternalLinks(True)
        layout.addWidget(self.summary_view, stretch=1)

        quiz_row = QHBoxLayout()
        quiz_row.addWidget(QLabel(DIFFICULTY_LABEL, self))
        self.difficulty_combo = QComboBox(self)
        for tier in Difficulty:
            self.difficulty_combo.addItem(tier.value.capitalize(), tier.value)
        self.difficulty_combo.setCurrentIndex(self.difficulty_combo.findData(DEFAULT_DIFFICULTY))
        quiz_row.addWidget(self.difficulty_combo)

        self.start_quiz_button = QPushButton(START_QUIZ_BUTTON, self)
        self.start_quiz_button.setObjectName("primaryButton")
        self.start_quiz_button.clicked.connect(self._handle_start_quiz)
        quiz_row.addWidget(self.start_quiz_button)

        self.read_more_button = QPushButton(READ_MORE_BUTTON, self)
        self.read_more_button.clicked.connect(self._handle_read_more)
        quiz_row.addWidget(self.read_more_button)
        layout.addLayout(quiz_row)

    def show_element(self, element: ElementRecord) -> None:
        self._element = element
        self.title_label.setText(f"{element.name} ({element.symbol})")
        for key, label in self._field_labels.items():
            label.setText(_display(element.value_for(key)))
        self.summary_view.setHtml(renderer.render_element_summary(element))
        self._request_image(element.display_image_url())
        self.start_quiz_button.setEnabled(True)
        self.read_more_button.setEnabled(True)

    def clear(self) -> None:
        self._element = None
        self.title_label.setText(DETAILS_PLACEHOLDER)
        for label in self._field_labels.values():
            label.setText(NOT_AVAILABLE)
        self.summary_view.clear()
        self._pending_image_url = None
        self.image_label.clear()
        self.image_label.setVisible(False)
        self.start_quiz_button.setEnabled(False)
        self.read_more_button.setEnabled(False)

    def selected_difficulty(self) -> str:
        return self.difficulty_combo.currentData() or DEFAULT_DIFFICULTY

    def _handle_start_quiz(self) -> None:
        if self._element is not None:
            self.on_start_quiz(self._element.symbol, self.selected_difficulty())

    def _handle_read_more(self) -> None:
        if self._element is None:
            return
        url = self._element.source or READ_MORE_URL_TEMPLATE.format(name=quote(self._element.name))
        QDesktopServices.openUrl(QUrl(url))

    def _request_image(self, url: str) -> None:
        qurl = QUrl(url)
        self._pending_image_url = qurl.toString()
        self.image_label.clear()
        self.image_label.setVisible(False)
        self._network.get(QNetworkRequest(qurl))

    def _handle_image_reply(self, reply: QNetworkReply) -> None:
        try:
            # Replies for an element that is no longer shown are dropped.
            if reply.request().url().toString() != self._pending_image_url:
                return
            if reply.error() != QNetworkReply.NetworkError.NoError:
                logger.info("Element image unavailable: %s", reply.errorString())
                return
            pixmap = QPixmap()
            if not pixmap.loadFromData(reply.readAll()):
                logger.info("Element image at %s is not a readable picture", self._pending_image_url)
                return
            self.image_label.setPixmap(
                pixmap.scaled(
                    ELEMENT_IMAGE_SIZE_PX,
                    ELEMENT_IMAGE_SIZE_PX,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation,
                )
            )
            self.image_label.setVisible(True)
        finally:
            reply.deleteLater()
