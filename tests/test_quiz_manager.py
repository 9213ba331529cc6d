"""Tests for the QuizManager facade."""

import random

import pytest

from periodic_quiz.core.models import ElementNotFoundError, QuizStateError, SessionState
from periodic_quiz.core.quiz_manager import QuizManager


class TestElements:
    """Tests for element lookup through the manager."""

    def test_elements_sorted_by_number(self, quiz_manager):
        numbers = [e.number for e in quiz_manager.list_elements()]
        assert numbers == sorted(numbers)
        assert quiz_manager.get_element_count() == 10

    def test_get_element(self, quiz_manager):
        assert quiz_manager.get_element(" Fe ").name == "Iron"

    def test_get_unknown_element_raises(self, quiz_manager):
        with pytest.raises(ElementNotFoundError):
            quiz_manager.get_element("Xx")

    def test_find_unknown_element_returns_none(self, quiz_manager):
        assert quiz_manager.find_element("Xx") is None


class TestQuizFlow:
    """Tests for the single active session."""

    def test_start_unknown_symbol_is_noop(self, quiz_manager):
        assert quiz_manager.start_quiz("Xx", "easy") is False
        assert quiz_manager.get_state() is SessionState.NOT_STARTED

    def test_start_unknown_symbol_keeps_existing_session(self, quiz_manager):
        assert quiz_manager.start_quiz("Fe", "easy") is True
        quiz_manager.submit_answer("wrong")
        assert quiz_manager.start_quiz("Xx", "hard") is False
        assert quiz_manager.get_state() is SessionState.IN_PROGRESS
        assert quiz_manager.get_current_view().number == 2

    def test_full_quiz_round_trip(self, quiz_manager):
        assert quiz_manager.start_quiz("Fe", "easy")
        answered = 0
        while not quiz_manager.is_quiz_complete():
            question = quiz_manager.get_current_question()
            quiz_manager.submit_answer(question.correct_answer)
            answered += 1
        summary = quiz_manager.get_summary()
        assert summary.score == summary.total == answered == 3
        assert summary.element_name == "Iron"

    def test_new_quiz_discards_previous(self, quiz_manager):
        quiz_manager.start_quiz("Fe", "hard")
        quiz_manager.submit_answer("wrong")
        quiz_manager.start_quiz("Cu", "easy")
        assert quiz_manager.get_quiz_element().symbol == "Cu"
        assert quiz_manager.get_score() == (0, 3)

    def test_dismiss(self, quiz_manager):
        quiz_manager.start_quiz("Fe", "easy")
        quiz_manager.dismiss_quiz()
        assert quiz_manager.get_state() is SessionState.NOT_STARTED
        with pytest.raises(QuizStateError):
            quiz_manager.submit_answer("Fe")

    def test_loading_elements_discards_session(self, quiz_manager, elements):
        quiz_manager.start_quiz("Fe", "easy")
        quiz_manager.load_elements(elements[:3])
        assert quiz_manager.get_state() is SessionState.NOT_STARTED
        assert quiz_manager.start_quiz("Fe", "easy") is False

    def test_snapshot_tracks_session(self, quiz_manager):
        snapshot = quiz_manager.get_snapshot()
        assert snapshot.state is SessionState.NOT_STARTED
        assert snapshot.view is None and snapshot.summary is None

        quiz_manager.start_quiz("Fe", "easy")
        snapshot = quiz_manager.get_snapshot()
        assert snapshot.state is SessionState.IN_PROGRESS
        assert snapshot.view.number == 1
        assert (snapshot.score, snapshot.total) == (0, 3)

    def test_answer_and_snapshot_is_one_transition(self, quiz_manager):
        quiz_manager.start_quiz("Fe", "easy")
        results = []
        for _ in range(3):
            correct = quiz_manager.get_current_question().correct_answer
            results.append(quiz_manager.submit_answer_and_snapshot(correct))

        assert [is_correct for is_correct, _ in results] == [True, True, True]
        assert [snap.score for _, snap in results] == [1, 2, 3]
        last = results[-1][1]
        assert last.state is SessionState.COMPLETE
        assert last.view is None
        assert last.summary.element_name == "Iron"

    def test_answer_and_snapshot_rejects_idle_session(self, quiz_manager):
        with pytest.raises(QuizStateError):
            quiz_manager.submit_answer_and_snapshot("26")

    def test_seeded_managers_agree(self, elements):
        first = QuizManager(elements, rng=random.Random(8))
        second = QuizManager(elements)
        second.set_random_seed(8)
        first.start_quiz("Hg", "hard")
        second.start_quiz("Hg", "hard")
        assert first.get_current_question() == second.get_current_question()

    def test_questions_per_quiz_setting(self, elements):
        manager = QuizManager(elements, questions_per_quiz=2, rng=random.Random(0))
        manager.start_quiz("Fe", "hard")
        assert manager.get_score() == (0, 2)

    def test_empty_catalog_quiz_is_complete(self, elements):
        manager = QuizManager(elements, catalog=())
        assert manager.start_quiz("Fe", "hard") is True
        assert manager.is_quiz_complete()
        summary = manager.get_summary()
        assert (summary.score, summary.total) == (0, 0)
