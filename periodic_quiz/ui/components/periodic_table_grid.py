"""Component laying out one tile per element on the periodic grid."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QGridLayout, QPushButton, QWidget

from periodic_quiz.core.models import ElementRecord
from periodic_quiz.styling.element_colors import tile_animation_delay
from periodic_quiz.styling.styles import Styles


class PeriodicTableGrid(QWidget):
    """Grid of element tiles placed by their ``xpos``/``ypos`` coordinates."""

    def __init__(
        self,
        on_element_selected: Callable[[ElementRecord], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_element_selected = on_element_selected
        self._tiles: dict[str, QPushButton] = {}

        self._layout = QGridLayout()
        self._layout.setSpacing(3)
        self.setLayout(self._layout)

    def populate(self, elements: Iterable[ElementRecord]) -> None:
        """Rebuild every tile. Elements without coordinates are left out."""
        self.clear()
        for element in elements:
            if not element.xpos or not element.ypos:
                continue
            tile = self._build_tile(element)
            self._layout.addWidget(tile, element.ypos - 1, element.xpos - 1)
            self._tiles[element.symbol] = tile
            tile.setVisible(False)
            delay_ms = int(tile_animation_delay(element.number) * 1000)
            QTimer.singleShot(delay_ms, tile.show)

    def clear(self) -> None:
        for tile in self._tiles.values():
            self._layout.removeWidget(tile)
            tile.deleteLater()
        self._tiles.clear()

    def tile_count(self) -> int:
        return len(self._tiles)

    def _build_tile(self, element: ElementRecord) -> QPushButton:
        tile = QPushButton(f"{element.number}\n{element.symbol}\n{element.name}", self)
        tile.setToolTip(element.category or element.name)
        tile.setStyleSheet(Styles.get_tile_style(element.category))
        tile.clicked.connect(lambda _checked=False, el=element: self.on_element_selected(el))
        return tile
