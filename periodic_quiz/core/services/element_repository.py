"""Service for holding the loaded element table and resolving elements."""

from __future__ import annotations

from collections.abc import Iterable

from periodic_quiz.core.models import ElementNotFoundError, ElementRecord


class ElementRepository:
    """Read-only lookup over the materialized element table."""

    def __init__(self, elements: Iterable[ElementRecord] = ()) -> None:
        self._elements: tuple[ElementRecord, ...] = ()
        self._by_symbol: dict[str, ElementRecord] = {}
        self.load_elements(elements)

    def load_elements(self, elements: Iterable[ElementRecord]) -> None:
        """Replace the table. Elements are kept in atomic-number order."""
        ordered = tuple(sorted(elements, key=lambda element: element.number))
        self._elements = ordered
        self._by_symbol = {element.symbol: element for element in ordered}

    def get_elements(self) -> tuple[ElementRecord, ...]:
        return self._elements

    def get_element_count(self) -> int:
        return len(self._elements)

    def get_by_symbol(self, symbol: str) -> ElementRecord:
        element = self._by_symbol.get((symbol or "").strip())
        if element is None:
            raise ElementNotFoundError(f"Unknown element symbol: {symbol!r}")
        return element
