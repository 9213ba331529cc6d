"""Tests for difficulty filtering and template selection."""

import random

import pytest

from periodic_quiz.core.models import Difficulty, ElementRecord, QuestionTemplate
from periodic_quiz.core.question_bank import QUESTION_CATALOG
from periodic_quiz.core.services.template_selector import (
    eligible_levels,
    filter_templates,
    select_templates,
)


class TestFilterTemplates:
    """Tests for the superset progression of difficulty tiers."""

    def test_easy_only_easy(self):
        levels = {t.level for t in filter_templates(QUESTION_CATALOG, "easy")}
        assert levels == {Difficulty.EASY}

    def test_medium_includes_easy(self):
        levels = {t.level for t in filter_templates(QUESTION_CATALOG, "medium")}
        assert levels == {Difficulty.EASY, Difficulty.MEDIUM}

    def test_hard_includes_everything(self):
        assert filter_templates(QUESTION_CATALOG, "hard") == list(QUESTION_CATALOG)

    def test_unknown_difficulty_means_all_levels(self):
        assert filter_templates(QUESTION_CATALOG, "impossible") == list(QUESTION_CATALOG)
        assert eligible_levels(None) == frozenset(Difficulty)

    def test_monotonicity(self):
        easy = set(filter_templates(QUESTION_CATALOG, Difficulty.EASY))
        medium = set(filter_templates(QUESTION_CATALOG, Difficulty.MEDIUM))
        hard = set(filter_templates(QUESTION_CATALOG, Difficulty.HARD))
        assert easy <= medium <= hard
        assert len(easy) == 3
        assert len(medium) == 6
        assert len(hard) == 9


class TestSelectTemplates:
    """Tests for random selection without replacement."""

    @pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
    @pytest.mark.parametrize("target", [0, 1, 3, 5, 20])
    def test_count_and_distinctness(self, difficulty, target):
        eligible = filter_templates(QUESTION_CATALOG, difficulty)
        for seed in range(25):
            chosen = select_templates(QUESTION_CATALOG, difficulty, target=target, rng=random.Random(seed))
            assert len(chosen) == min(target, len(eligible))
            assert len({id(t) for t in chosen}) == len(chosen)
            assert all(t in eligible for t in chosen)

    def test_default_target_is_five(self):
        chosen = select_templates(QUESTION_CATALOG, "hard", rng=random.Random(3))
        assert len(chosen) == 5

    def test_easy_returns_all_three_when_target_exceeds(self):
        chosen = select_templates(QUESTION_CATALOG, "easy", target=5, rng=random.Random(7))
        assert set(chosen) == set(filter_templates(QUESTION_CATALOG, "easy"))

    def test_negative_target_is_empty(self):
        assert select_templates(QUESTION_CATALOG, "hard", target=-2) == []

    def test_empty_catalog(self):
        assert select_templates((), "hard") == []

    def test_seeded_selection_is_deterministic(self):
        first = select_templates(QUESTION_CATALOG, "hard", rng=random.Random(99))
        second = select_templates(QUESTION_CATALOG, "hard", rng=random.Random(99))
        assert first == second

    def test_missing_field_stays_eligible_by_default(self):
        element = ElementRecord(number=118, symbol="Og", name="Oganesson")
        catalog = (QuestionTemplate("Boiling point of {name}?", "boil", Difficulty.HARD),)
        assert select_templates(catalog, "hard", element=element) == list(catalog)

    def test_skip_missing_excludes_absent_fields(self):
        element = ElementRecord(number=118, symbol="Og", name="Oganesson", category="noble gas")
        chosen = select_templates(
            QUESTION_CATALOG, "hard", target=9, element=element, rng=random.Random(1), skip_missing=True
        )
        assert {t.field_key for t in chosen} == {"number", "symbol", "name", "category"} & {
            t.field_key for t in QUESTION_CATALOG
        }
