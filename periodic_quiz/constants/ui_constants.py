"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "PeriodicQuiz"
TILE_SIZE_PX: int = 58
ELEMENT_IMAGE_SIZE_PX: int = 120
MAX_TILE_ANIMATION_DELAY_SECONDS: float = 1.5
TILE_ANIMATION_STEP_SECONDS: float = 0.015

DARK_MODE_BUTTON: str = "Dark Mode"
LIGHT_MODE_BUTTON: str = "Light Mode"
BACKGROUND_LABEL: str = "Background:"
BACKGROUND_CHOICES: dict[str, str] = {
    "Snow": "#f8fafc",
    "Sky": "#e0f2fe",
    "Mint": "#dcfce7",
    "Sand": "#fef3c7",
    "Blush": "#fce7f3",
}

DETAILS_PLACEHOLDER: str = "Select an element to see its details."
START_QUIZ_BUTTON: str = "Start Quiz"
READ_MORE_BUTTON: str = "Read More"
DIFFICULTY_LABEL: str = "Difficulty:"
BACK_TO_TABLE_BUTTON: str = "Back to Table"
QUIZ_WINDOW_TITLE_TEMPLATE: str = "Quiz: {name}"
QUESTION_HEADER_TEMPLATE: str = "Question {number} of {total}"
QUIZ_COMPLETE_TITLE: str = "Quiz Complete!"
QUIZ_RESULT_TEMPLATE: str = "You scored {score} out of {total} for **{name}**."
ELEMENT_NOT_FOUND_MESSAGE: str = "Element {symbol} is not in the loaded table."
DATASET_UNAVAILABLE_MESSAGE: str = "The periodic table data could not be loaded."
