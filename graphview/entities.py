"""Vertices, edges and the plane geometry used to draw them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

GRID_SIZE = 10
VERTEX_RADIUS = 15.0
ARROW_HEAD_SIZE = 10.0
LABEL_OFFSET = 10.0

Color = tuple[int, int, int]

VERTEX_COLOR: Color = (3, 136, 252)
VERTEX_ALTERNATIVE_COLOR: Color = (0, 255, 0)
EDGE_COLOR: Color = (0, 0, 0)

VERTEX_TYPE = 1
EDGE_TYPE = 2


class HandleAllocator:
    """Hands out unique, increasing integer handles for scene items."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def next(self) -> int:
        """Return a fresh handle."""
        handle = self._next
        self._next += 1
        return handle

    def reserve(self, handle: int) -> None:
        """Make sure *handle* is never handed out again."""
        self._next = max(self._next, handle + 1)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Circle:
    radius: int


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point

    @property
    def dx(self) -> float:
        return self.end.x - self.start.x

    @property
    def dy(self) -> float:
        return self.end.y - self.start.y

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    def point_at(self, t: float) -> Point:
        return Point(self.start.x + self.dx * t, self.start.y + self.dy * t)

    def angle(self) -> float:
        """Counter-clockwise angle in degrees in [0, 360), with y pointing down."""
        degrees = math.degrees(math.atan2(-self.dy, self.dx))
        return degrees % 360.0


def snap(value: float, grid_size: float) -> float:
    """Round *value* to the nearest multiple of *grid_size*, halves away from zero."""
    ratio = value / grid_size
    rounded = math.copysign(math.floor(abs(ratio) + 0.5), ratio)
    return rounded * grid_size


def shorten(start: Point, end: Point, amount: float) -> Line:
    """Pull the end of a line back by *amount*, if the line is longer than that."""
    line = Line(start, end)
    length = line.length
    if length > amount:
        return Line(start, line.point_at((length - amount) / length))
    return line


def arrow_head(start: Point, end: Point, size: float) -> tuple[Point, Point, Point]:
    """Return the tip, left and right corners of an arrow head at *end*."""
    line = Line(start, end)
    length = line.length
    if length == 0:
        raise ValueError("cannot draw an arrow head on a zero-length line")
    ux, uy = line.dx / length, line.dy / length
    tip = end
    base = tip - Point(ux * size, uy * size)
    offset = Point(-uy * size / 2, ux * size / 2)
    return tip, base + offset, base - offset


def label_position(start: Point, end: Point) -> Point:
    """Where a weight label goes: right of steep lines, above the others."""
    line = Line(start, end)
    midpoint = line.point_at(0.5)
    if 45 <= line.angle() <= 135:
        return midpoint + Point(LABEL_OFFSET, 0)
    return midpoint + Point(0, -LABEL_OFFSET)


@dataclass(eq=False)
class Vertex:
    """A circular vertex; its rectangle is in item coordinates, moved by position."""

    handle: int
    x: float
    y: float
    width: float
    height: float
    name: str = ""
    color: Color = VERTEX_COLOR
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))

    @classmethod
    def at(cls, point: Point, circle: Circle, allocator: HandleAllocator) -> Vertex:
        """Create a vertex centred on *point* snapped to the grid."""
        cx = snap(point.x, GRID_SIZE)
        cy = snap(point.y, GRID_SIZE)
        r = circle.radius
        return cls(allocator.next(), cx - r, cy - r, 2.0 * r, 2.0 * r)

    @classmethod
    def from_json(cls, data: dict[str, Any], allocator: HandleAllocator) -> Vertex:
        handle = int(data.get("id", 0))
        allocator.reserve(handle)
        return cls(
            handle,
            float(data.get("x", 0.0)),
            float(data.get("y", 0.0)),
            float(data.get("width", 0.0)),
            float(data.get("height", 0.0)),
            str(data.get("name", "")),
        )

    def center(self) -> Point:
        return Point(
            self.x + self.width / 2 + self.position.x,
            self.y + self.height / 2 + self.position.y,
        )

    def serialize(self) -> dict[str, Any]:
        return {
            "type": VERTEX_TYPE,
            "id": self.handle,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "name": self.name,
        }

    def paint_alternative_color(self) -> None:
        self.color = VERTEX_ALTERNATIVE_COLOR

    def paint_original_color(self) -> None:
        self.color = VERTEX_COLOR

    def snapped_position(self, point: Point, grid_size: float) -> Point:
        """Move the vertex to *point* snapped to the grid and return the new position."""
        self.position = Point(snap(point.x, grid_size), snap(point.y, grid_size))
        return self.position


@dataclass(eq=False)
class Edge:
    """A weighted line between two vertices."""

    handle: int
    source: Vertex
    target: Vertex
    weight: int = 0
    highlighted: bool = False
    color: Color = EDGE_COLOR

    @classmethod
    def create(cls, source: Vertex, target: Vertex, allocator: HandleAllocator) -> Edge:
        return cls(allocator.next(), source, target)

    @classmethod
    def from_json(
        cls,
        data: dict[str, Any],
        source: Vertex,
        target: Vertex,
        allocator: HandleAllocator,
    ) -> Edge:
        handle = int(data.get("id", 0))
        allocator.reserve(handle)
        return cls(handle, source, target, int(data.get("weight", 0)))

    def line(self) -> Line:
        return Line(self.source.center(), self.target.center())

    def serialize(self) -> dict[str, Any]:
        return {
            "type": EDGE_TYPE,
            "id": self.handle,
            "from": self.source.handle,
            "to": self.target.handle,
            "weight": self.weight,
        }

    def highlight(self, on: bool) -> None:
        self.highlighted = on

    def _visible_line(self) -> Line:
        line = self.line()
        return shorten(line.start, line.end, VERTEX_RADIUS)

    def arrow_head(self) -> tuple[Point, Point, Point]:
        line = self._visible_line()
        return arrow_head(line.start, line.end, ARROW_HEAD_SIZE)

    def label_position(self) -> Point:
        line = self._visible_line()
        return label_position(line.start, line.end)