from graphview.scene import GridScene


class _Item:
    pass


def test_single_selection_keeps_only_clicked_item():
    scene = GridScene()
    a, b = _Item(), _Item()
    scene.click(a)
    scene.click(b)
    assert scene.selected == [b]
    assert scene.is_selected(a) is False
    assert scene.selection_order == []


def test_single_selection_empty_click_clears():
    scene = GridScene()
    scene.click(_Item())
    scene.click(None)
    assert scene.selected == []


def test_multi_selection_toggles_and_records_order():
    scene = GridScene()
    scene.set_single_selection(False)
    a, b, c = _Item(), _Item(), _Item()
    for item in (a, b, c):
        scene.click(item)
    assert scene.selection_order == [a, b, c]
    scene.click(b)
    assert scene.is_selected(b) is False
    assert scene.selection_order == [a, c]


def test_multi_selection_empty_click_clears_order():
    scene = GridScene()
    scene.set_single_selection(False)
    scene.click(_Item())
    scene.click(None)
    assert scene.selected == []
    assert scene.selection_order == []


def test_switching_mode_clears_order():
    scene = GridScene()
    scene.set_single_selection(False)
    scene.click(_Item())
    scene.set_single_selection(True)
    assert scene.selection_order == []
    assert scene.single_selection is True


def test_remove_first_from_selection_order():
    scene = GridScene()
    scene.remove_first_from_selection_order()
    assert scene.selection_order == []
    scene.set_single_selection(False)
    a, b = _Item(), _Item()
    scene.click(a)
    scene.click(b)
    scene.remove_first_from_selection_order()
    assert scene.selection_order == [b]


def test_clear_selection_keeps_order():
    scene = GridScene()
    scene.set_single_selection(False)
    a, b = _Item(), _Item()
    scene.click(a)
    scene.click(b)
    scene.clear_selection()
    assert scene.selected == []
    assert scene.selection_order == [a, b]


def test_display_flags_default_off():
    scene = GridScene()
    assert (scene.directed_edges, scene.show_weight_labels, scene.grid_size) == (False, False, 10)


def test_grid_hidden_when_zoomed_out():
    assert GridScene().grid_points(0, 0, 100, 100, 0.29) == []


def test_grid_points_lie_on_grid_inside_rect():
    scene = GridScene()
    points = scene.grid_points(3, 7, 55, 42, 1.0)
    assert points
    for p in points:
        assert p.x % scene.grid_size == 0 and p.y % scene.grid_size == 0
        assert p.x < 55 and p.y < 42
    assert len(points) == len({(p.x, p.y) for p in points})


def test_grid_start_truncates_toward_zero():
    points = GridScene().grid_points(-15, -15, 0, 0, 1.0)
    assert points[0].x == -10
    assert points[0].y == -10