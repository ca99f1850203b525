import pytest

from graphview.drawing import CursorShape, DrawingContext, cursor_shape, mouse_press
from graphview.entities import Edge, HandleAllocator, Point, Vertex
from graphview.graph import DesignModel
from graphview.scene import GridScene


@pytest.fixture
def setup():
    return DesignModel(), GridScene(), HandleAllocator()


@pytest.mark.parametrize(
    "context, shape",
    [
        (DrawingContext.NONE, CursorShape.ARROW),
        (DrawingContext.VERTEX, CursorShape.CROSS),
        (DrawingContext.EDGE, CursorShape.CROSS),
        (None, CursorShape.ARROW),
    ],
)
def test_cursor_shape(context, shape):
    assert cursor_shape(context) is shape


def test_edge_context_drives_edge_insertion_mode():
    model = DesignModel()
    model.drawing_context = DrawingContext.EDGE
    assert model.in_edge_insertion_mode()
    model.drawing_context = DrawingContext.VERTEX
    assert not model.in_edge_insertion_mode()


def test_vertex_mode_inserts_snapped_vertex(setup):
    model, scene, allocator = setup
    vertex = mouse_press(model, scene, DrawingContext.VERTEX, Point(23, 37), allocator)
    assert isinstance(vertex, Vertex)
    assert vertex.center() == Point(20.0, 40.0)
    assert model.item(vertex.handle) is vertex
    assert vertex.handle in model.undirected_graph
    assert vertex.handle in model.directed_graph


def test_vertex_mode_hands_out_fresh_handles(setup):
    model, scene, allocator = setup
    first = mouse_press(model, scene, DrawingContext.VERTEX, Point(0, 0), allocator)
    second = mouse_press(model, scene, DrawingContext.VERTEX, Point(50, 50), allocator)
    assert first.handle != second.handle
    assert len(model.items()) == 2


def test_none_mode_does_nothing(setup):
    model, scene, allocator = setup
    assert mouse_press(model, scene, DrawingContext.NONE, Point(5, 5), allocator) is None
    assert model.items() == []


def test_edge_mode_needs_two_selected_vertices(setup):
    model, scene, allocator = setup
    a = mouse_press(model, scene, DrawingContext.VERTEX, Point(0, 0), allocator)
    scene.set_single_selection(False)
    scene.click(a)
    assert mouse_press(model, scene, DrawingContext.EDGE, Point(0, 0), allocator) is None
    assert model.items() == [a]


def test_edge_mode_connects_selected_vertices(setup):
    model, scene, allocator = setup
    a = mouse_press(model, scene, DrawingContext.VERTEX, Point(0, 0), allocator)
    b = mouse_press(model, scene, DrawingContext.VERTEX, Point(100, 0), allocator)
    scene.set_single_selection(False)
    scene.click(a)
    scene.click(b)
    edge = mouse_press(model, scene, DrawingContext.EDGE, Point(100, 0), allocator)
    assert isinstance(edge, Edge)
    assert edge.source is a and edge.target is b
    assert model.undirected_graph.edge_data(a.handle, b.handle) == edge.handle
    assert model.directed_graph.edge_data(a.handle, b.handle) == edge.handle
    assert model.directed_graph.edge_data(b.handle, a.handle) is None
    assert not scene.is_selected(a) and not scene.is_selected(b)
    assert scene.selection_order == [b]