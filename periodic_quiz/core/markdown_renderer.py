"""Markdown rendering helpers shared by Qt and web clients.

Quiz prompts, option labels and element summaries come from the dataset, so
every piece of dataset text is escaped before it is mixed into markdown
markup. Rendering with html disabled keeps stray tags inert as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

from markdown_it import MarkdownIt

from periodic_quiz.constants.ui_constants import (
    QUESTION_HEADER_TEMPLATE,
    QUIZ_COMPLETE_TITLE,
    QUIZ_RESULT_TEMPLATE,
)
from periodic_quiz.core.models import ElementRecord, QuestionView, QuizSummary

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_{}\[\]()#+\-.!<>|])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters markdown would otherwise interpret."""
    return _MARKDOWN_SPECIALS.sub(r"\\\1", text)


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": False}).enable("table")

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_question(self, view: QuestionView) -> str:
        """Header, prompt and lettered options for the current question."""
        lines = [
            "### " + QUESTION_HEADER_TEMPLATE.format(number=view.number, total=view.total),
            escape_markdown(view.prompt),
        ]
        for idx, option in enumerate(view.options):
            letter = chr(ord("A") + idx)
            lines.append(f"**{letter}.** {escape_markdown(option)}")
        return self.render_fragment("\n\n".join(lines))

    def render_summary(self, summary: QuizSummary) -> str:
        result = QUIZ_RESULT_TEMPLATE.format(
            score=summary.score,
            total=summary.total,
            name=escape_markdown(summary.element_name),
        )
        return self.render_fragment(f"## {QUIZ_COMPLETE_TITLE}\n\n{result}")

    def render_element_summary(self, element: ElementRecord) -> str:
        if not element.summary:
            return self.render_fragment("")
        return self.render_fragment(escape_markdown(element.summary))


renderer = MarkdownRenderer()
# Shared instance; MarkdownIt is safe for concurrent read-only renders, so the
# Qt thread and the API server thread can both use it.
