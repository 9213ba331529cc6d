"""Application entry point for PeriodicQuiz."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from periodic_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from periodic_quiz.core.dataset_loader import load_elements
from periodic_quiz.core.models import DatasetLoadError
from periodic_quiz.core.quiz_manager import QuizManager
from periodic_quiz.core.resources import local_dataset_path
from periodic_quiz.server.api_server import start_api_server
from periodic_quiz.ui.periodic_table_window import PeriodicTableWindow
from periodic_quiz.utils.logging_config import configure_logging


def _determine_web_url(port: int) -> str:
    """Best-effort determination of the local IP for the browser URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Load the dataset, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting PeriodicQuiz")

    try:
        elements = load_elements(fallback_path=local_dataset_path())
    except DatasetLoadError:
        logger.exception("Failed to load element data; starting with an empty table")
        elements = ()

    quiz_manager = QuizManager(elements)
    start_api_server(quiz_manager=quiz_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    web_url = _determine_web_url(DEFAULT_PORT)
    logger.info("Browser version available at %s", web_url)

    app = QApplication(sys.argv)
    window = PeriodicTableWindow(quiz_manager=quiz_manager, web_url=web_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
