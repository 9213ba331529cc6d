"""Business logic for the element table and the active quiz, shared between UI and API."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from threading import Lock
from typing import Any

from periodic_quiz.constants.quiz_constants import QUESTIONS_PER_QUIZ, SKIP_MISSING_FIELDS
from periodic_quiz.core.models import (
    Difficulty,
    ElementNotFoundError,
    ElementRecord,
    Question,
    QuestionTemplate,
    QuestionView,
    QuizSnapshot,
    QuizSummary,
    SessionState,
)
from periodic_quiz.core.question_bank import QUESTION_CATALOG
from periodic_quiz.core.services.element_repository import ElementRepository
from periodic_quiz.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade over the element repository and the single active quiz session."""

    def __init__(
        self,
        elements: Iterable[ElementRecord] = (),
        catalog: Iterable[QuestionTemplate] = QUESTION_CATALOG,
        questions_per_quiz: int = QUESTIONS_PER_QUIZ,
        skip_missing_fields: bool = SKIP_MISSING_FIELDS,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = Lock()
        self._rng = rng or random.Random()
        self._catalog: tuple[QuestionTemplate, ...] = tuple(catalog)
        self._questions_per_quiz = questions_per_quiz
        self._skip_missing_fields = skip_missing_fields

        self._repository = ElementRepository(elements)
        self._session = QuizSession(rng=self._rng)

    # --- Element Repository Delegation ---

    def load_elements(self, elements: Iterable[ElementRecord]) -> None:
        with self._lock:
            self._repository.load_elements(elements)
            self._session.dismiss()

    def list_elements(self) -> tuple[ElementRecord, ...]:
        with self._lock:
            return self._repository.get_elements()

    def get_element_count(self) -> int:
        with self._lock:
            return self._repository.get_element_count()

    def get_element(self, symbol: str) -> ElementRecord:
        with self._lock:
            return self._repository.get_by_symbol(symbol)

    def find_element(self, symbol: str) -> ElementRecord | None:
        with self._lock:
            try:
                return self._repository.get_by_symbol(symbol)
            except ElementNotFoundError:
                return None

    # --- Quiz Session Delegation ---

    def start_quiz(self, symbol: str, difficulty: str | Difficulty) -> bool:
        """Start a new quiz, discarding any previous one.

        Returns False when ``symbol`` is unknown; the current session is then
        left exactly as it was.
        """
        with self._lock:
            try:
                element = self._repository.get_by_symbol(symbol)
            except ElementNotFoundError:
                logger.warning("Cannot start quiz: element %r not found", symbol)
                return False

            self._session.start(
                element,
                self._repository.get_elements(),
                difficulty,
                self._catalog,
                target=self._questions_per_quiz,
                skip_missing=self._skip_missing_fields,
            )
            return True

    def submit_answer(self, selected: Any) -> bool:
        """Answer the current question; raises QuizStateError when none is pending."""
        with self._lock:
            return self._session.answer(selected)

    def submit_answer_and_snapshot(self, selected: Any) -> tuple[bool, QuizSnapshot]:
        """Answer and capture the resulting state without releasing the lock in between."""
        with self._lock:
            is_correct = self._session.answer(selected)
            return is_correct, self._snapshot_locked()

    def dismiss_quiz(self) -> None:
        with self._lock:
            self._session.dismiss()

    def get_snapshot(self) -> QuizSnapshot:
        """Consistent view of the session for clients that render several parts at once."""
        with self._lock:
            return self._snapshot_locked()

    def _snapshot_locked(self) -> QuizSnapshot:
        session = self._session
        return QuizSnapshot(
            state=session.state,
            view=session.current_view(),
            summary=session.summary(),
            score=session.score,
            total=session.total,
        )

    def get_state(self) -> SessionState:
        with self._lock:
            return self._session.state

    def is_quiz_complete(self) -> bool:
        with self._lock:
            return self._session.is_complete

    def get_current_question(self) -> Question | None:
        with self._lock:
            return self._session.current_question()

    def get_current_view(self) -> QuestionView | None:
        with self._lock:
            return self._session.current_view()

    def get_summary(self) -> QuizSummary | None:
        with self._lock:
            return self._session.summary()

    def get_quiz_element(self) -> ElementRecord | None:
        with self._lock:
            return self._session.element

    def get_score(self) -> tuple[int, int]:
        with self._lock:
            return self._session.score, self._session.total

    # --- Settings ---

    def set_random_seed(self, seed: int | None) -> None:
        with self._lock:
            self._rng.seed(seed)
