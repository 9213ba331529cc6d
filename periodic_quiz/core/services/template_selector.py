"""Service for choosing which question templates make up a quiz."""

from __future__ import annotations

import random
from collections.abc import Iterable

from periodic_quiz.constants.quiz_constants import QUESTIONS_PER_QUIZ
from periodic_quiz.core.models import Difficulty, ElementRecord, QuestionTemplate

_LEVELS_BY_DIFFICULTY: dict[Difficulty, frozenset[Difficulty]] = {
    Difficulty.EASY: frozenset({Difficulty.EASY}),
    Difficulty.MEDIUM: frozenset({Difficulty.EASY, Difficulty.MEDIUM}),
    Difficulty.HARD: frozenset(Difficulty),
}


def eligible_levels(difficulty: str | Difficulty) -> frozenset[Difficulty]:
    """Levels a quiz at ``difficulty`` may draw from."""
    return _LEVELS_BY_DIFFICULTY[Difficulty.parse(difficulty)]


def filter_templates(
    catalog: Iterable[QuestionTemplate],
    difficulty: str | Difficulty,
) -> list[QuestionTemplate]:
    """Keep the templates whose level is eligible, preserving catalog order."""
    levels = eligible_levels(difficulty)
    return [template for template in catalog if template.level in levels]


def select_templates(
    catalog: Iterable[QuestionTemplate],
    difficulty: str | Difficulty,
    target: int = QUESTIONS_PER_QUIZ,
    element: ElementRecord | None = None,
    rng: random.Random | None = None,
    skip_missing: bool = False,
) -> list[QuestionTemplate]:
    """Return a random subset of ``min(target, eligible)`` distinct templates.

    Templates whose field is absent on ``element`` stay eligible unless
    ``skip_missing`` is set; those questions then carry the placeholder answer.
    """
    rng = rng or random.Random()
    eligible = filter_templates(catalog, difficulty)
    if skip_missing and element is not None:
        eligible = [t for t in eligible if element.value_for(t.field_key) is not None]

    count = min(max(target, 0), len(eligible))
    return rng.sample(eligible, count)
