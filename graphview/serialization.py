"""Saving and loading the canvas as a JSON array of vertices and edges."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from graphview.entities import EDGE_TYPE, VERTEX_TYPE, Edge, HandleAllocator, Vertex
from graphview.graph import DesignModel, Item


def serialize_scene(model: DesignModel) -> list[dict[str, Any]]:
    """One JSON object for every vertex and edge on the canvas."""
    return [item.serialize() for item in model.items() if isinstance(item, (Vertex, Edge))]


def deserialize_scene(
    model: DesignModel, items: Iterable[dict[str, Any]], allocator: HandleAllocator
) -> list[Item]:
    """Add the vertices, then the edges, described by *items*; return what was added."""
    items = list(items)
    added: list[Item] = []
    by_id: dict[int, Vertex] = {}
    for data in items:
        if int(data.get("type", 0)) == VERTEX_TYPE:
            vertex = Vertex.from_json(data, allocator)
            by_id[int(data.get("id", 0))] = vertex
            model.add_vertex(vertex)
            added.append(vertex)
    for data in items:
        if int(data.get("type", 0)) == EDGE_TYPE:
            try:
                source = by_id[int(data.get("from", 0))]
                target = by_id[int(data.get("to", 0))]
            except KeyError as missing:
                raise ValueError(f"edge refers to unknown vertex {missing}") from None
            edge = Edge.from_json(data, source, target, allocator)
            model.add_edge(source, target, edge)
            added.append(edge)
    return added


def save_scene(model: DesignModel, path: str | Path) -> None:
    """Write the canvas to *path* as an indented JSON array."""
    text = json.dumps(serialize_scene(model), indent=4)
    Path(path).write_text(text + "\n", encoding="utf-8")


def load_scene(model: DesignModel, path: str | Path, allocator: HandleAllocator) -> list[Item]:
    """Read a canvas written by save_scene; a file that holds no JSON array adds nothing."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        return []
    if not isinstance(document, list):
        return []
    return deserialize_scene(model, [d for d in document if isinstance(d, dict)], allocator)