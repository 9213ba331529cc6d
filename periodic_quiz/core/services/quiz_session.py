"""Service holding the state of one quiz attempt for one element."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from typing import Any

from periodic_quiz.constants.quiz_constants import (
    DISTRACTOR_CANDIDATE_QUOTA,
    MAX_DISTRACTORS,
    QUESTIONS_PER_QUIZ,
)
from periodic_quiz.core.models import (
    Difficulty,
    ElementRecord,
    Question,
    QuestionTemplate,
    QuestionView,
    QuizStateError,
    QuizSummary,
    SessionState,
    answers_match,
    option_label,
)
from periodic_quiz.core.services.distractor_generator import generate_options
from periodic_quiz.core.services.template_selector import select_templates

logger = logging.getLogger(__name__)


def build_questions(
    element: ElementRecord,
    pool: Sequence[ElementRecord],
    templates: Iterable[QuestionTemplate],
    rng: random.Random,
    max_distractors: int = MAX_DISTRACTORS,
    candidate_quota: int = DISTRACTOR_CANDIDATE_QUOTA,
) -> list[Question]:
    """Instantiate each template for ``element`` and attach its options."""
    questions: list[Question] = []
    for template in templates:
        correct = template.answer_for(element)
        options = generate_options(
            correct,
            template.field_key,
            pool,
            rng=rng,
            max_distractors=max_distractors,
            candidate_quota=candidate_quota,
        )
        questions.append(
            Question(
                prompt=template.render_prompt(element),
                correct_answer=correct,
                options=tuple(options),
                field_key=template.field_key,
                level=template.level,
            )
        )
    return questions


class QuizSession:
    """State machine: NOT_STARTED -> IN_PROGRESS -> COMPLETE."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._state = SessionState.NOT_STARTED
        self._element: ElementRecord | None = None
        self._difficulty: Difficulty | None = None
        self._questions: tuple[Question, ...] = ()
        self._index: int = 0
        self._score: int = 0

    def start(
        self,
        element: ElementRecord,
        pool: Sequence[ElementRecord],
        difficulty: str | Difficulty,
        catalog: Iterable[QuestionTemplate],
        target: int = QUESTIONS_PER_QUIZ,
        skip_missing: bool = False,
    ) -> None:
        """Build a fresh question set, discarding whatever this session held."""
        tier = Difficulty.parse(difficulty)
        templates = select_templates(
            catalog,
            tier,
            target=target,
            element=element,
            rng=self._rng,
            skip_missing=skip_missing,
        )
        self._element = element
        self._difficulty = tier
        self._questions = tuple(build_questions(element, pool, templates, self._rng))
        self._index = 0
        self._score = 0
        self._state = SessionState.IN_PROGRESS if self._questions else SessionState.COMPLETE
        logger.info(
            "Started %s quiz for %s with %d question(s)",
            tier.value,
            element.symbol,
            len(self._questions),
        )

    def answer(self, selected: Any) -> bool:
        """Score ``selected`` against the current question and advance.

        Comparison is over option labels, so ``"55.845"`` matches ``55.845``.
        Returns whether the answer was correct.
        """
        if self._state is not SessionState.IN_PROGRESS:
            raise QuizStateError("No quiz question is waiting for an answer.")

        question = self._questions[self._index]
        is_correct = answers_match(selected, question.correct_answer)
        if is_correct:
            self._score += 1
        self._index += 1

        if self._index >= len(self._questions):
            self._state = SessionState.COMPLETE
            logger.info(
                "Quiz for %s complete: %d/%d",
                self._element.symbol if self._element else "?",
                self._score,
                len(self._questions),
            )
        return is_correct

    def dismiss(self) -> None:
        self._state = SessionState.NOT_STARTED
        self._element = None
        self._difficulty = None
        self._questions = ()
        self._index = 0
        self._score = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state is SessionState.COMPLETE

    @property
    def element(self) -> ElementRecord | None:
        return self._element

    @property
    def difficulty(self) -> Difficulty | None:
        return self._difficulty

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def index(self) -> int:
        return self._index

    @property
    def score(self) -> int:
        return self._score

    @property
    def total(self) -> int:
        return len(self._questions)

    def current_question(self) -> Question | None:
        if self._state is not SessionState.IN_PROGRESS:
            return None
        return self._questions[self._index]

    def current_view(self) -> QuestionView | None:
        question = self.current_question()
        if question is None:
            return None
        return QuestionView(
            prompt=question.prompt,
            options=[option_label(option) for option in question.options],
            number=self._index + 1,
            total=self.total,
            score=self._score,
        )

    def summary(self) -> QuizSummary | None:
        if self._state is not SessionState.COMPLETE or self._element is None:
            return None
        return QuizSummary(score=self._score, total=self.total, element_name=self._element.name)
