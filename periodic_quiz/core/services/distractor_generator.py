"""Service for synthesizing wrong-but-plausible answer options."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Any

from periodic_quiz.constants.quiz_constants import (
    DISTRACTOR_ATTEMPTS_PER_ELEMENT,
    DISTRACTOR_CANDIDATE_QUOTA,
    MAX_DISTRACTORS,
)
from periodic_quiz.core.models import ElementRecord, option_label

logger = logging.getLogger(__name__)


def collect_candidates(
    correct_value: Any,
    field_key: str,
    pool: Sequence[ElementRecord],
    rng: random.Random,
    candidate_quota: int = DISTRACTOR_CANDIDATE_QUOTA,
    max_attempts: int | None = None,
) -> list[Any]:
    """Draw records with replacement until ``candidate_quota`` values are accepted.

    A value is accepted when it is present and its label differs from the
    correct answer's label. The number of draws never exceeds
    ``max_attempts`` (default: ``DISTRACTOR_ATTEMPTS_PER_ELEMENT`` per record
    in the pool), so a small or uniform pool returns short instead of spinning.
    """
    if not pool:
        return []
    if max_attempts is None:
        max_attempts = DISTRACTOR_ATTEMPTS_PER_ELEMENT * len(pool)

    correct_label = option_label(correct_value)
    accepted: list[Any] = []
    attempts = 0
    while len(accepted) < candidate_quota and attempts < max_attempts:
        attempts += 1
        value = rng.choice(pool).value_for(field_key)
        if value is None or option_label(value) == correct_label:
            continue
        accepted.append(value)

    if len(accepted) < candidate_quota:
        logger.debug(
            "Distractor sampling for %s stopped after %d draws with %d of %d candidates",
            field_key,
            attempts,
            len(accepted),
            candidate_quota,
        )
    return accepted


def unique_by_label(values: Sequence[Any], limit: int) -> list[Any]:
    """First occurrence of each distinct label, at most ``limit`` values."""
    seen: set[str] = set()
    unique: list[Any] = []
    for value in values:
        if len(unique) >= limit:
            break
        label = option_label(value)
        if label in seen:
            continue
        seen.add(label)
        unique.append(value)
    return unique


def generate_options(
    correct_value: Any,
    field_key: str,
    pool: Sequence[ElementRecord],
    rng: random.Random | None = None,
    max_distractors: int = MAX_DISTRACTORS,
    candidate_quota: int = DISTRACTOR_CANDIDATE_QUOTA,
    max_attempts: int | None = None,
) -> list[Any]:
    """Return the correct value plus up to ``max_distractors`` distinct distractors, shuffled."""
    rng = rng or random.Random()
    candidates = collect_candidates(
        correct_value,
        field_key,
        pool,
        rng,
        candidate_quota=candidate_quota,
        max_attempts=max_attempts,
    )
    options = [correct_value, *unique_by_label(candidates, max(max_distractors, 0))]
    rng.shuffle(options)
    return options
