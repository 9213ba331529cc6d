"""The fixed catalog of question templates.

The catalog is an immutable tuple and is handed to the template selector
explicitly, so alternative catalogs can be used in tests or future modes.
"""

from __future__ import annotations

from periodic_quiz.core.models import Difficulty, QuestionTemplate

QUESTION_CATALOG: tuple[QuestionTemplate, ...] = (
    QuestionTemplate("What is the atomic number of {name}?", "number", Difficulty.EASY),
    QuestionTemplate("What is the chemical symbol of {name}?", "symbol", Difficulty.EASY),
    QuestionTemplate("What is the category of {name}?", "category", Difficulty.EASY),
    QuestionTemplate("Which group does {name} belong to?", "xpos", Difficulty.MEDIUM),
    QuestionTemplate("In which period is {name} located?", "ypos", Difficulty.MEDIUM),
    QuestionTemplate("State of {name} at room temperature?", "phase", Difficulty.MEDIUM),
    QuestionTemplate("What is the atomic mass of {name}?", "atomic_mass", Difficulty.HARD),
    QuestionTemplate("What is the density of {name}?", "density", Difficulty.HARD),
    QuestionTemplate("Boiling point of {name}?", "boil", Difficulty.HARD),
)
