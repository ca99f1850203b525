"""State behind the side panels: algorithm choice, object properties and settings."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from graphview.algorithms import BFSRunner, DFSRunner, DijkstraRunner, Runner
from graphview.entities import Edge, Vertex
from graphview.graph import DesignModel, Item

START_PLACEHOLDER = "Select Start Vertex"
END_PLACEHOLDER = "Select End Vertex"
MIN_WEIGHT = 0
MAX_WEIGHT = 1000


def _text(handle: int | None) -> str:
    return "" if handle is None else str(handle)


class StartSelection:
    """Picks the start vertex of a traversal; runnable once a vertex is chosen."""

    placeholders = (START_PLACEHOLDER,)

    def __init__(self) -> None:
        self.start: int | None = None

    @property
    def start_text(self) -> str:
        return _text(self.start)

    @property
    def can_run(self) -> bool:
        return self.start is not None

    def set_vertex(self, handle: int) -> None:
        self.start = handle

    def arguments(self) -> tuple[int, int | None]:
        """The (start, target) pair to run with; raises ValueError until complete."""
        if self.start is None:
            raise ValueError("no start vertex selected")
        return self.start, None


class EndpointSelection:
    """Picks a start and an end vertex, alternating between the two fields."""

    placeholders = (START_PLACEHOLDER, END_PLACEHOLDER)

    def __init__(self) -> None:
        self.start: int | None = None
        self.target: int | None = None

    @property
    def start_text(self) -> str:
        return _text(self.start)

    @property
    def target_text(self) -> str:
        return _text(self.target)

    @property
    def can_run(self) -> bool:
        return self.start is not None and self.target is not None

    def set_vertex(self, handle: int) -> None:
        """Fill the start field, or the end field when only the start is filled."""
        if self.start is None or self.target is not None:
            self.start = handle
            self.target = None
        else:
            self.target = handle

    def arguments(self) -> tuple[int, int | None]:
        """The (start, target) pair to run with; raises ValueError until complete."""
        if self.start is None or self.target is None:
            raise ValueError("start and end vertices must both be selected")
        return self.start, self.target


Selection = StartSelection | EndpointSelection

ALGORITHMS: dict[str, tuple[type[Runner], type[StartSelection] | type[EndpointSelection]]] = {
    "BFS": (BFSRunner, StartSelection),
    "DFS": (DFSRunner, StartSelection),
    "Dijkstra": (DijkstraRunner, EndpointSelection),
}


class AlgorithmChoice:
    """The chosen algorithm together with the vertices picked for it."""

    def __init__(
        self,
        redraw: Callable[[], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._redraw = redraw
        self._sleep = sleep
        self.name = ""
        self.runner: Runner
        self.selection: Selection
        self.select(next(iter(ALGORITHMS)))

    @property
    def names(self) -> list[str]:
        return list(ALGORITHMS)

    def select(self, name: str) -> None:
        """Switch to the algorithm called *name*, forgetting any picked vertices."""
        try:
            runner_type, selection_type = ALGORITHMS[name]
        except KeyError:
            raise ValueError(f"unknown algorithm {name!r}") from None
        self.name = name
        self.runner = runner_type(self._redraw, self._sleep)
        self.selection = selection_type()

    def set_active_object(self, item: Item | None) -> None:
        """A clicked vertex fills the next vertex field; anything else is ignored."""
        if isinstance(item, Vertex):
            self.selection.set_vertex(item.handle)

    def run(self, model: DesignModel) -> list[Edge]:
        """Run the chosen algorithm on *model*; return the highlighted edges."""
        start, target = self.selection.arguments()
        return self.runner.run(model, start, target)


class AlgorithmPanel:
    """The algorithm tab: a choice of algorithm fed by clicks on the canvas."""

    def __init__(
        self,
        redraw: Callable[[], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.choice = AlgorithmChoice(redraw, sleep)

    def set_active_object(self, item: Item | None) -> None:
        self.choice.set_active_object(item)


def set_edge_weight(edge: Edge, value: int) -> None:
    """Set an edge's weight, which must lie between 0 and 1000."""
    if not MIN_WEIGHT <= value <= MAX_WEIGHT:
        raise ValueError(f"weight must be between {MIN_WEIGHT} and {MAX_WEIGHT}, got {value}")
    edge.weight = int(value)


def set_vertex_name(vertex: Vertex, name: str) -> None:
    vertex.name = name


def describe_object(item: Item) -> dict[str, Any]:
    """The fields the object tab shows for *item*."""
    details: dict[str, Any] = {"id": str(item.handle)}
    if isinstance(item, Vertex):
        details["name"] = item.name
    elif isinstance(item, Edge):
        details["weight"] = item.weight
    return details


class ObjectPanel:
    """The object tab: identifier and editable properties of the clicked item."""

    def __init__(self) -> None:
        self.item: Item | None = None
        self.details: dict[str, Any] = {}

    @property
    def id_text(self) -> str:
        return self.details.get("id", "")

    def set_active_object(self, item: Item) -> None:
        self.item = item
        self.details = describe_object(item)


class SettingsPanel:
    """The settings tab; toggling an option notifies every registered listener."""

    def __init__(self) -> None:
        self._directed_edges = False
        self._show_weight_labels = False
        self.directed_edges_listeners: list[Callable[[bool], None]] = []
        self.weight_labels_listeners: list[Callable[[bool], None]] = []

    @property
    def directed_edges(self) -> bool:
        return self._directed_edges

    @directed_edges.setter
    def directed_edges(self, enabled: bool) -> None:
        self._directed_edges = bool(enabled)
        for listener in self.directed_edges_listeners:
            listener(self._directed_edges)

    @property
    def show_weight_labels(self) -> bool:
        return self._show_weight_labels

    @show_weight_labels.setter
    def show_weight_labels(self, enabled: bool) -> None:
        self._show_weight_labels = bool(enabled)
        for listener in self.weight_labels_listeners:
            listener(self._show_weight_labels)