"""Qt UI components for the periodic table quiz."""

from .dialog_helpers import show_error, show_info, show_warning
from .periodic_table_window import PeriodicTableWindow
from .quiz_dialog import QuizDialog

__all__ = [
    "PeriodicTableWindow",
    "QuizDialog",
    "show_error",
    "show_info",
    "show_warning",
]
