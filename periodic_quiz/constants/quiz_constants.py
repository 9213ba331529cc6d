"""Quiz-related constants shared across UI, server and core layers."""

QUESTIONS_PER_QUIZ: int = 5
MAX_DISTRACTORS: int = 3
# Accepted (non-null, non-matching) candidates collected before deduplication.
DISTRACTOR_CANDIDATE_QUOTA: int = 15
# Draw cap is this factor times the pool size.
DISTRACTOR_ATTEMPTS_PER_ELEMENT: int = 10
NOT_AVAILABLE: str = "N/A"
SKIP_MISSING_FIELDS: bool = False
DEFAULT_DIFFICULTY: str = "easy"

# File names under periodic_quiz/data/sounds.
CLICK_SOUND_FILE: str | None = "click.wav"
CORRECT_SOUND_FILE: str | None = "correct.wav"
WRONG_SOUND_FILE: str | None = "wrong.wav"
SOUND_FILES: tuple[str | None, ...] = (CLICK_SOUND_FILE, CORRECT_SOUND_FILE, WRONG_SOUND_FILE)
