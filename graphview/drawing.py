"""Drawing modes of the canvas and what a mouse press does in each of them."""

from __future__ import annotations

from enum import Enum

from graphview.entities import VERTEX_RADIUS, Circle, Edge, HandleAllocator, Point, Vertex
from graphview.graph import EDGE_INSERTION, DesignModel
from graphview.scene import GridScene


class DrawingContext(Enum):
    """What a left click on the canvas inserts."""

    NONE = "none"
    VERTEX = "vertex"
    EDGE = EDGE_INSERTION


class CursorShape(Enum):
    ARROW = "arrow"
    CROSS = "cross"


_CURSORS = {
    DrawingContext.NONE: CursorShape.ARROW,
    DrawingContext.VERTEX: CursorShape.CROSS,
    DrawingContext.EDGE: CursorShape.CROSS,
}


def _normalize(context: DrawingContext | None) -> DrawingContext:
    return DrawingContext.NONE if context is None else DrawingContext(context)


def cursor_shape(context: DrawingContext | None) -> CursorShape:
    """The cursor shown over the canvas while *context* is active."""
    return _CURSORS[_normalize(context)]


def mouse_press(
    model: DesignModel,
    scene: GridScene,
    context: DrawingContext | None,
    point: Point,
    allocator: HandleAllocator,
) -> Vertex | Edge | None:
    """Handle a left click at *point*; return the item it inserted, if any."""
    context = _normalize(context)
    if context is DrawingContext.VERTEX:
        vertex = Vertex.at(point, Circle(int(VERTEX_RADIUS)), allocator)
        model.add_vertex(vertex)
        return vertex
    if context is DrawingContext.EDGE:
        vertices = [item for item in scene.selection_order if isinstance(item, Vertex)]
        if len(vertices) != 2:
            return None
        scene.clear_selection()
        source, target = vertices
        edge = Edge.create(source, target, allocator)
        model.add_edge(source, target, edge)
        scene.remove_first_from_selection_order()
        return edge
    return None