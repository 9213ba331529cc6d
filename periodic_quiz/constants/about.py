"""Static metadata describing PeriodicQuiz."""

APP_NAME = "PeriodicQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "PeriodicQuiz renders an interactive periodic table from the open "
    "Periodic-Table-JSON dataset. Pick an element to read its details and "
    "take a short multiple-choice quiz about it, on the desktop or in a browser."
)
