"""Graph traversals and runners that animate them on the canvas."""

from __future__ import annotations

import heapq
import itertools
import time
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Hashable, Iterator
from itertools import pairwise
from typing import Any

from graphview.entities import Edge, Vertex
from graphview.graph import DesignModel, Graph

STEP_DELAY = 1.0
FAST_DELAY = 0.3
INT_MAX = 2**31 - 1

Traversal = Iterator[tuple[Hashable | None, Hashable]]


def bfs(graph: Graph, start: Hashable) -> Traversal:
    """Yield (parent, vertex) in breadth-first order; the start has parent None."""
    if start not in graph:
        raise KeyError(start)
    visited = {start}
    queue: deque[tuple[Hashable | None, Hashable]] = deque([(None, start)])
    while queue:
        parent, vertex = queue.popleft()
        yield parent, vertex
        for neighbour in graph.neighbors(vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append((vertex, neighbour))


def dfs(graph: Graph, start: Hashable) -> Traversal:
    """Yield (parent, vertex) in depth-first preorder; the start has parent None."""
    if start not in graph:
        raise KeyError(start)
    visited = {start}
    yield None, start
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in visited:
                visited.add(neighbour)
                yield vertex, neighbour
                stack.append((neighbour, iter(graph.neighbors(neighbour))))
                break
        else:
            stack.pop()


def dijkstra(
    graph: Graph,
    start: Hashable,
    weight: Callable[[Any], float],
    stop: Callable[[Hashable], bool] | None = None,
) -> tuple[dict[Hashable, float], dict[Hashable, Hashable | None]]:
    """Best distances and predecessors from *start*.

    *weight* maps an edge's data to its length.  *stop* is called for each vertex
    as it is settled; the search ends once it returns true.
    """
    if start not in graph:
        raise KeyError(start)
    distances: dict[Hashable, float] = {start: 0}
    predecessors: dict[Hashable, Hashable | None] = {start: None}
    settled: set[Hashable] = set()
    order = itertools.count()
    heap = [(0, next(order), start)]
    while heap:
        distance, _, vertex = heapq.heappop(heap)
        if vertex in settled:
            continue
        settled.add(vertex)
        if stop is not None and stop(vertex):
            break
        for neighbour in graph.neighbors(vertex):
            if neighbour in settled:
                continue
            candidate = distance + weight(graph.edge_data(vertex, neighbour))
            if neighbour not in distances or candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = vertex
                heapq.heappush(heap, (candidate, next(order), neighbour))
    return distances, predecessors


def shortest_path(
    predecessors: dict[Hashable, Hashable | None], target: Hashable
) -> list[Hashable]:
    """The path from the search's start to *target*, or [] if it was not reached."""
    if target not in predecessors:
        return []
    path = []
    node: Hashable | None = target
    while node is not None:
        path.append(node)
        node = predecessors[node]
    path.reverse()
    return path


def _no_redraw() -> None:
    pass


class EdgeAnimator:
    """Highlights edges one at a time and clears them all when finished."""

    def __init__(
        self,
        redraw: Callable[[], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        speed_up: bool = False,
    ) -> None:
        self.speed_up = speed_up
        self.edges: list[Edge] = []
        self._redraw = redraw or _no_redraw
        self._sleep = sleep

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)
        edge.highlight(True)
        self._redraw()
        self._sleep(FAST_DELAY if self.speed_up else STEP_DELAY)

    def finish(self) -> None:
        self._sleep(STEP_DELAY)
        for edge in self.edges:
            edge.highlight(False)
        self._redraw()

    def __enter__(self) -> EdgeAnimator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish()


class VertexAnimator:
    """Recolours vertices one at a time and restores them when finished."""

    def __init__(
        self,
        redraw: Callable[[], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.vertices: list[Vertex] = []
        self._redraw = redraw or _no_redraw
        self._sleep = sleep

    def add_vertex(self, vertex: Vertex) -> None:
        self.vertices.append(vertex)
        vertex.paint_alternative_color()
        self._redraw()
        self._sleep(STEP_DELAY)

    def finish(self) -> None:
        self._sleep(STEP_DELAY)
        for vertex in self.vertices:
            vertex.paint_original_color()
        self._redraw()

    def __enter__(self) -> VertexAnimator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish()


class Runner(ABC):
    """Runs an algorithm over the canvas graph and animates its progress."""

    def __init__(
        self,
        redraw: Callable[[], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.redraw = redraw
        self.sleep = sleep

    @abstractmethod
    def run(self, model: DesignModel, start: int, target: int | None = None) -> list[Edge]:
        """Run from *start* and return the edges that were highlighted."""

    def _animate_traversal(
        self,
        model: DesignModel,
        traversal: Callable[[Graph, Hashable], Traversal],
        start: int,
    ) -> list[Edge]:
        graph = model.graph()
        with EdgeAnimator(self.redraw, self.sleep) as animator:
            for parent, vertex in traversal(graph, start):
                if parent is None:
                    continue
                edge = model.item(graph.edge_data(parent, vertex))
                if isinstance(edge, Edge):
                    animator.add_edge(edge)
        return animator.edges


class BFSRunner(Runner):
    def run(self, model: DesignModel, start: int, target: int | None = None) -> list[Edge]:
        return self._animate_traversal(model, bfs, start)


class DFSRunner(Runner):
    def run(self, model: DesignModel, start: int, target: int | None = None) -> list[Edge]:
        return self._animate_traversal(model, dfs, start)


class DijkstraRunner(Runner):
    """Colours settled vertices, then highlights the shortest path to *target*."""

    def run(self, model: DesignModel, start: int, target: int | None = None) -> list[Edge]:
        graph = model.directed_graph

        def weight(handle: int) -> int:
            item = model.item(handle)
            return item.weight if isinstance(item, Edge) else INT_MAX

        with VertexAnimator(self.redraw, self.sleep) as vertex_animator:

            def stop(handle: int) -> bool:
                item = model.item(handle)
                if isinstance(item, Vertex):
                    vertex_animator.add_vertex(item)
                return target is not None and handle == target

            _, predecessors = dijkstra(graph, start, weight, stop)
            if target is None:
                return []
            with EdgeAnimator(self.redraw, self.sleep, speed_up=True) as path_animator:
                for source, destination in pairwise(shortest_path(predecessors, target)):
                    edge = model.item(graph.edge_data(source, destination))
                    if isinstance(edge, Edge):
                        path_animator.add_edge(edge)
        return path_animator.edges