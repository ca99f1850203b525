import math

import pytest

from graphview.entities import (
    ARROW_HEAD_SIZE,
    GRID_SIZE,
    LABEL_OFFSET,
    VERTEX_ALTERNATIVE_COLOR,
    VERTEX_COLOR,
    VERTEX_RADIUS,
    Circle,
    Edge,
    HandleAllocator,
    Line,
    Point,
    Vertex,
    arrow_head,
    label_position,
    shorten,
    snap,
)


def test_allocator_hands_out_consecutive_handles():
    allocator = HandleAllocator()
    assert [allocator.next() for _ in range(4)] == list(range(4))


def test_reserve_skips_past_handle_and_never_goes_back():
    allocator = HandleAllocator()
    allocator.reserve(41)
    first = allocator.next()
    assert first > 41
    allocator.reserve(3)
    assert allocator.next() == first + 1


@pytest.mark.parametrize("value", [-37.0, -5.0, 0.0, 4.9, 23.0, 47.0, 1234.5])
def test_snap_gives_nearest_multiple(value):
    result = snap(value, GRID_SIZE)
    assert result % GRID_SIZE == 0
    assert abs(result - value) <= GRID_SIZE / 2


def test_snap_rounds_halves_away_from_zero():
    assert snap(15, 10) == 20
    assert snap(-15, 10) == -20


def test_vertex_at_is_centred_on_snapped_point():
    allocator = HandleAllocator()
    point = Point(23, 47)
    vertex = Vertex.at(point, Circle(15), allocator)
    assert vertex.center() == Point(snap(23, GRID_SIZE), snap(47, GRID_SIZE))
    assert vertex.width == vertex.height == 30
    assert vertex.name == ""
    assert vertex.handle == 0


def test_vertex_json_round_trip():
    allocator = HandleAllocator()
    vertex = Vertex.at(Point(100, 200), Circle(15), allocator)
    vertex.name = "alpha"
    data = vertex.serialize()
    assert data["type"] == 1
    copy = Vertex.from_json(data, HandleAllocator())
    assert copy.serialize() == data


def test_vertex_from_json_reserves_handle():
    allocator = HandleAllocator()
    vertex = Vertex.from_json(
        {"type": 1, "id": 12, "x": 0, "y": 0, "width": 30, "height": 30, "name": "n"},
        allocator,
    )
    assert vertex.handle == 12
    assert allocator.next() > 12


def test_vertex_colors_switch_and_restore():
    vertex = Vertex.at(Point(0, 0), Circle(15), HandleAllocator())
    vertex.paint_alternative_color()
    assert vertex.color == VERTEX_ALTERNATIVE_COLOR
    vertex.paint_original_color()
    assert vertex.color == VERTEX_COLOR


def test_snapped_position_moves_center_to_grid():
    vertex = Vertex.at(Point(0, 0), Circle(15), HandleAllocator())
    before = vertex.center()
    position = vertex.snapped_position(Point(33, -18), GRID_SIZE)
    assert position.x % GRID_SIZE == 0 and position.y % GRID_SIZE == 0
    assert vertex.position == position
    assert vertex.center() == before + position


def test_edge_create_and_serialize():
    allocator = HandleAllocator()
    a = Vertex.at(Point(0, 0), Circle(15), allocator)
    b = Vertex.at(Point(100, 0), Circle(15), allocator)
    edge = Edge.create(a, b, allocator)
    assert edge.weight == 0
    assert edge.handle not in (a.handle, b.handle)
    data = edge.serialize()
    assert data == {"type": 2, "id": edge.handle, "from": a.handle, "to": b.handle, "weight": 0}


def test_edge_json_round_trip_reserves_handle():
    allocator = HandleAllocator()
    a = Vertex.at(Point(0, 0), Circle(15), allocator)
    b = Vertex.at(Point(50, 50), Circle(15), allocator)
    fresh = HandleAllocator()
    data = {"type": 2, "id": 9, "from": a.handle, "to": b.handle, "weight": 7}
    edge = Edge.from_json(data, a, b, fresh)
    assert edge.serialize() == data
    assert fresh.next() > 9


def test_edge_line_joins_centers_and_highlight_toggles():
    allocator = HandleAllocator()
    a = Vertex.at(Point(0, 0), Circle(15), allocator)
    b = Vertex.at(Point(80, 40), Circle(15), allocator)
    edge = Edge.create(a, b, allocator)
    assert edge.line() == Line(a.center(), b.center())
    edge.highlight(True)
    assert edge.highlighted is True
    edge.highlight(False)
    assert edge.highlighted is False


def test_shorten_keeps_direction_and_reduces_length():
    start, end = Point(0, 0), Point(30, 40)
    line = shorten(start, end, 15)
    original = Line(start, end)
    assert line.start == start
    assert math.isclose(line.length, original.length - 15)
    assert math.isclose(line.dx * original.dy, line.dy * original.dx)


def test_shorten_leaves_short_lines_alone():
    start, end = Point(0, 0), Point(3, 4)
    assert shorten(start, end, 15) == Line(start, end)


def test_arrow_head_is_symmetric():
    start, end = Point(5, 5), Point(60, 25)
    tip, left, right = arrow_head(start, end, ARROW_HEAD_SIZE)
    assert tip == end
    assert math.isclose(tip.distance_to(left), tip.distance_to(right))
    base = Point((left.x + right.x) / 2, (left.y + right.y) / 2)
    assert math.isclose(base.distance_to(tip), ARROW_HEAD_SIZE)
    assert math.isclose(left.distance_to(right), ARROW_HEAD_SIZE)


def test_arrow_head_on_zero_length_line_raises():
    with pytest.raises(ValueError):
        arrow_head(Point(1, 1), Point(1, 1), ARROW_HEAD_SIZE)


def test_label_above_horizontal_line():
    start, end = Point(0, 0), Point(100, 0)
    mid = Line(start, end).point_at(0.5)
    assert label_position(start, end) == Point(mid.x, mid.y - LABEL_OFFSET)


def test_label_right_of_upward_line():
    start, end = Point(0, 100), Point(0, 0)
    mid = Line(start, end).point_at(0.5)
    assert label_position(start, end) == Point(mid.x + LABEL_OFFSET, mid.y)


def test_label_above_downward_line():
    start, end = Point(0, 0), Point(0, 100)
    mid = Line(start, end).point_at(0.5)
    assert label_position(start, end) == Point(mid.x, mid.y - LABEL_OFFSET)


def test_edge_arrow_tip_stops_at_target_rim():
    allocator = HandleAllocator()
    a = Vertex.at(Point(0, 0), Circle(15), allocator)
    b = Vertex.at(Point(200, 100), Circle(15), allocator)
    edge = Edge.create(a, b, allocator)
    tip, _, _ = edge.arrow_head()
    assert math.isclose(tip.distance_to(b.center()), VERTEX_RADIUS)
    visible = shorten(a.center(), b.center(), VERTEX_RADIUS)
    assert edge.label_position() == label_position(visible.start, visible.end)