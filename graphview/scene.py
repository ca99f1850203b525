"""Grid scene state: selection behaviour, display options and grid dots."""

from __future__ import annotations

import math
from typing import Any

from graphview.entities import GRID_SIZE, Point

MIN_GRID_SCALE = 0.3


class GridScene:
    """Selection and display state of the drawing canvas."""

    def __init__(self, grid_size: int = GRID_SIZE) -> None:
        self.grid_size = grid_size
        self.single_selection = True
        self.directed_edges = False
        self.show_weight_labels = False
        self.selection_order: list[Any] = []
        self._selected: list[Any] = []

    @property
    def selected(self) -> list[Any]:
        return list(self._selected)

    def set_single_selection(self, enabled: bool) -> None:
        self.single_selection = enabled
        self.selection_order.clear()

    def remove_first_from_selection_order(self) -> None:
        if self.selection_order:
            del self.selection_order[0]

    def is_selected(self, item: Any) -> bool:
        return any(selected is item for selected in self._selected)

    def _select(self, item: Any) -> None:
        if not self.is_selected(item):
            self._selected.append(item)

    def _deselect(self, item: Any) -> None:
        self._selected = [s for s in self._selected if s is not item]

    def clear_selection(self) -> None:
        """Deselect everything; the selection order is left untouched."""
        self._selected.clear()

    def click(self, item: Any | None) -> None:
        """Handle a left click on *item*, or on empty space when it is None."""
        if self.single_selection:
            self.clear_selection()
            if item is not None:
                self._select(item)
            return
        if item is None:
            self.clear_selection()
            self.selection_order.clear()
        elif self.is_selected(item):
            self._deselect(item)
            self.selection_order = [s for s in self.selection_order if s is not item]
        else:
            self._select(item)
            self.selection_order.append(item)

    def grid_points(
        self, left: float, top: float, right: float, bottom: float, scale: float
    ) -> list[Point]:
        """Dots of the background grid inside the rectangle, none when zoomed far out."""
        if scale < MIN_GRID_SCALE:
            return []
        size = self.grid_size
        x0 = int(left) - int(math.fmod(int(left), size))
        y0 = int(top) - int(math.fmod(int(top), size))
        xs = range(x0, math.ceil(right), size)
        return [Point(x, y) for x in xs for y in range(y0, math.ceil(bottom), size)]