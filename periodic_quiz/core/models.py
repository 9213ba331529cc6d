"""Domain models for the periodic table quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from periodic_quiz.constants.dataset_constants import IMAGE_URL_TEMPLATE
from periodic_quiz.constants.quiz_constants import NOT_AVAILABLE


class DatasetLoadError(Exception):
    """Raised when the element dataset cannot be fetched or parsed."""


class ElementNotFoundError(LookupError):
    """Raised when a symbol does not resolve to a loaded element."""


class QuizStateError(RuntimeError):
    """Raised when a quiz operation is not valid in the current session state."""


class Difficulty(str, Enum):
    """Difficulty tiers. Each tier includes every easier tier."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str | Difficulty | None) -> Difficulty:
        """Map a user-supplied value to a tier; anything unrecognised means HARD."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.HARD


class SessionState(Enum):
    """Lifecycle of a quiz session."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class ElementRecord:
    """One row of the periodic table dataset. Read-only."""

    number: int
    symbol: str
    name: str
    category: str | None = None
    xpos: int | None = None
    ypos: int | None = None
    phase: str | None = None
    atomic_mass: float | None = None
    density: float | None = None
    boil: float | None = None
    electron_configuration: str | None = None
    summary: str | None = None
    source: str | None = None
    image_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ElementRecord:
        """Build a record from one entry of the Periodic-Table-JSON document."""
        number = _optional_int(data.get("number"))
        symbol = _optional_str(data.get("symbol"))
        name = _optional_str(data.get("name"))
        if number is None or number <= 0 or not symbol or not name:
            raise DatasetLoadError(f"Element entry is missing number, symbol or name: {data!r}")

        image = data.get("image")
        image_url = image.get("url") if isinstance(image, dict) else None

        return cls(
            number=number,
            symbol=symbol,
            name=name,
            category=_optional_str(data.get("category")),
            xpos=_optional_int(data.get("xpos")),
            ypos=_optional_int(data.get("ypos")),
            phase=_optional_str(data.get("phase")),
            atomic_mass=_optional_float(data.get("atomic_mass")),
            density=_optional_float(data.get("density")),
            boil=_optional_float(data.get("boil")),
            electron_configuration=_optional_str(data.get("electron_configuration")),
            summary=_optional_str(data.get("summary")),
            source=_optional_str(data.get("source")),
            image_url=_optional_str(image_url),
        )

    def value_for(self, field_key: str) -> Any:
        """Return the attribute named by a template's field key, or None."""
        return getattr(self, field_key, None)

    def display_image_url(self) -> str:
        """Image from the dataset, falling back to the per-symbol picture site."""
        return self.image_url or IMAGE_URL_TEMPLATE.format(symbol=self.symbol.lower())


@dataclass(frozen=True, slots=True)
class QuestionTemplate:
    """Parameterized question bound to one element field and one difficulty tier."""

    prompt: str
    field_key: str
    level: Difficulty

    def render_prompt(self, element: ElementRecord) -> str:
        return self.prompt.format(name=element.name)

    def answer_for(self, element: ElementRecord) -> Any:
        """Correct answer for the element; absent fields become the placeholder."""
        value = element.value_for(self.field_key)
        return NOT_AVAILABLE if value is None else value


@dataclass(frozen=True, slots=True)
class Question:
    """A template instantiated for one element, with its shuffled options."""

    prompt: str
    correct_answer: Any
    options: tuple[Any, ...]
    field_key: str
    level: Difficulty

    @property
    def option_labels(self) -> list[str]:
        return [option_label(option) for option in self.options]


@dataclass(frozen=True, slots=True)
class QuestionView:
    """What the presentation layer needs to render the current question."""

    prompt: str
    options: list[str]
    number: int
    total: int
    score: int


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """Final result of a completed session."""

    score: int
    total: int
    element_name: str


@dataclass(frozen=True, slots=True)
class QuizSnapshot:
    """Session state, current question and result captured together."""

    state: SessionState
    view: QuestionView | None
    summary: QuizSummary | None
    score: int
    total: int


def option_label(value: Any) -> str:
    """Render a value the way it appears on an option button.

    Answers are compared through this form so that a label submitted back
    from a UI (always a string) matches the numeric value it was built from:
    ``26``, ``26.0`` and ``"26"`` share the label ``"26"``.
    """
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value.strip()
    return str(value)


def answers_match(selected: Any, correct: Any) -> bool:
    """Loose equality over normalized option labels."""
    return option_label(selected) == option_label(correct)
