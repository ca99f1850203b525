"""Adjacency graphs and the model behind the design area."""

from __future__ import annotations

from typing import Any, Hashable, Union

from graphview.entities import Edge, Vertex

EDGE_INSERTION = "edge"

Item = Union[Vertex, Edge]


class Graph:
    """A graph keyed by vertex, carrying one piece of data per edge."""

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._adjacency: dict[Hashable, dict[Hashable, Any]] = {}

    def insert_vertex(self, vertex: Hashable) -> None:
        self._adjacency.setdefault(vertex, {})

    def erase_vertex(self, vertex: Hashable) -> None:
        """Remove *vertex* and every edge touching it."""
        del self._adjacency[vertex]
        for neighbours in self._adjacency.values():
            neighbours.pop(vertex, None)

    def insert_edge(self, source: Hashable, target: Hashable, data: Any) -> None:
        self.insert_vertex(source)
        self.insert_vertex(target)
        self._adjacency[source][target] = data
        if not self.directed:
            self._adjacency[target][source] = data

    def _erase_edge(self, source: Hashable, target: Hashable) -> None:
        self._adjacency.get(source, {}).pop(target, None)
        if not self.directed:
            self._adjacency.get(target, {}).pop(source, None)

    def neighbors(self, vertex: Hashable) -> list[Hashable]:
        return list(self._adjacency[vertex])

    def edge_data(self, source: Hashable, target: Hashable) -> Any | None:
        return self._adjacency.get(source, {}).get(target)

    def vertices(self) -> list[Hashable]:
        return list(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)


class DesignModel:
    """Items on the canvas and the directed and undirected graphs over their handles."""

    def __init__(self) -> None:
        self.undirected_graph = Graph(directed=False)
        self.directed_graph = Graph(directed=True)
        self.directed = False
        self.drawing_context: Any = None
        self._items: dict[int, Item] = {}

    def add_vertex(self, vertex: Vertex) -> None:
        self.undirected_graph.insert_vertex(vertex.handle)
        self.directed_graph.insert_vertex(vertex.handle)
        self._items[vertex.handle] = vertex

    def remove_vertex(self, vertex: Vertex) -> None:
        self.undirected_graph.erase_vertex(vertex.handle)
        self.directed_graph.erase_vertex(vertex.handle)

    def add_edge(self, source: Vertex, target: Vertex, edge: Edge) -> None:
        self.undirected_graph.insert_edge(source.handle, target.handle, edge.handle)
        self.directed_graph.insert_edge(source.handle, target.handle, edge.handle)
        self._items[edge.handle] = edge

    def item(self, handle: int) -> Item:
        return self._items[handle]

    def items(self) -> list[Item]:
        return list(self._items.values())

    def edges_connected_to(self, vertex: Vertex) -> list[int]:
        """Handles of the edges touching *vertex*, in either direction."""
        graph = self.undirected_graph
        return [graph.edge_data(vertex.handle, other) for other in graph.neighbors(vertex.handle)]

    def graph(self) -> Graph:
        return self.directed_graph if self.directed else self.undirected_graph

    def delete_item(self, item: Item) -> list[Item]:
        """Delete *item*, and a vertex's edges with it; return what was removed."""
        removed: list[Item] = []
        if isinstance(item, Vertex):
            for handle in self.edges_connected_to(item):
                edge = self._items.pop(handle, None)
                if edge is not None:
                    removed.append(edge)
            self.remove_vertex(item)
            self._items.pop(item.handle, None)
            removed.append(item)
        else:
            for graph in (self.undirected_graph, self.directed_graph):
                graph._erase_edge(item.source.handle, item.target.handle)
            self._items.pop(item.handle, None)
            removed.append(item)
        return removed

    def in_edge_insertion_mode(self) -> bool:
        context = getattr(self.drawing_context, "value", self.drawing_context)
        return context == EDGE_INSERTION