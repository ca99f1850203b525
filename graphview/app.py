"""The main window, the controller behind it and a line-oriented front end."""

from __future__ import annotations

import argparse
import math
import shlex
import sys
import time
from collections.abc import Callable
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from graphview.drawing import CursorShape, DrawingContext, cursor_shape, mouse_press
from graphview.entities import Color, Edge, HandleAllocator, Point, Vertex
from graphview.graph import DesignModel, Item
from graphview.panels import (
    AlgorithmPanel,
    ObjectPanel,
    SettingsPanel,
    set_edge_weight,
    set_vertex_name,
)
from graphview.scene import GridScene
from graphview.serialization import load_scene, save_scene

COLOR_LIGHT_GRAY: Color = (240, 240, 240)
COLOR_DARK_GRAY: Color = (220, 220, 220)
COLOR_WHITE: Color = (255, 255, 255)
COLOR_BLACK: Color = (0, 0, 0)
COLOR_BLUE_LINK: Color = (42, 130, 218)
COLOR_HIGHLIGHT: Color = (180, 180, 180)
COLOR_BORDER_GRAY: Color = (208, 208, 208)
COLOR_HOVER_GRAY: Color = (224, 224, 224)
COLOR_PRESSED_GRAY: Color = (208, 208, 208)
COLOR_BRIGHT_TEXT: Color = (255, 0, 0)

STYLE = "Fusion"
DEFAULT_TITLE = "Test"
EDGE_HIT_TOLERANCE = 2.0

PALETTE: dict[str, Color] = {
    "window": COLOR_LIGHT_GRAY,
    "window_text": COLOR_BLACK,
    "base": COLOR_WHITE,
    "alternate_base": COLOR_DARK_GRAY,
    "tool_tip_base": COLOR_WHITE,
    "tool_tip_text": COLOR_BLACK,
    "text": COLOR_BLACK,
    "button": COLOR_LIGHT_GRAY,
    "button_text": COLOR_BLACK,
    "bright_text": COLOR_BRIGHT_TEXT,
    "link": COLOR_BLUE_LINK,
    "highlight": COLOR_HIGHLIGHT,
    "highlighted_text": COLOR_BLACK,
}


class Tab(IntEnum):
    """Tabs of the side pane, in display order."""

    ALGORITHM = 0
    OBJECT = 1
    SETTINGS = 2


def _vertex_contains(vertex: Vertex, point: Point) -> bool:
    center = vertex.center()
    rx, ry = vertex.width / 2, vertex.height / 2
    if rx <= 0 or ry <= 0:
        return False
    return ((point.x - center.x) / rx) ** 2 + ((point.y - center.y) / ry) ** 2 <= 1.0


def _distance_to_segment(point: Point, start: Point, end: Point) -> float:
    dx, dy = end.x - start.x, end.y - start.y
    length_squared = dx * dx + dy * dy
    if length_squared == 0:
        return point.distance_to(start)
    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_squared
    t = min(1.0, max(0.0, t))
    return point.distance_to(Point(start.x + dx * t, start.y + dy * t))


class Controller:
    """Wires the canvas model, the scene and the side panels together."""

    def __init__(
        self,
        redraw: Callable[[], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.model = DesignModel()
        self.scene = GridScene()
        self.allocator = HandleAllocator()
        self._redraw = redraw or (lambda: None)
        self.algorithm_panel = AlgorithmPanel(self._redraw, sleep)
        self.object_panel = ObjectPanel()
        self.settings_panel = SettingsPanel()
        self.settings_panel.directed_edges_listeners.append(self.set_directed)
        self.settings_panel.weight_labels_listeners.append(self.set_show_weight_labels)
        self._set_context(DrawingContext.NONE)

    @property
    def context(self) -> DrawingContext:
        return self._context

    @property
    def cursor(self) -> CursorShape:
        return cursor_shape(self._context)

    def _set_context(self, context: DrawingContext) -> None:
        self._context = context
        self.model.drawing_context = context

    def insert_vertex_mode(self) -> None:
        self.scene.set_single_selection(True)
        self._set_context(DrawingContext.VERTEX)

    def insert_edge_mode(self) -> None:
        self.scene.set_single_selection(False)
        self._set_context(DrawingContext.EDGE)

    def cancel(self) -> None:
        """Leave any insertion mode and deselect everything."""
        self._set_context(DrawingContext.NONE)
        self.scene.set_single_selection(True)
        self.scene.clear_selection()

    def item_at(self, point: Point) -> Item | None:
        """The topmost item under *point*: vertices lie above edges."""
        items = self.model.items()
        for vertex in reversed([i for i in items if isinstance(i, Vertex)]):
            if _vertex_contains(vertex, point):
                return vertex
        for edge in reversed([i for i in items if isinstance(i, Edge)]):
            line = edge.line()
            if _distance_to_segment(point, line.start, line.end) <= EDGE_HIT_TOLERANCE:
                return edge
        return None

    def press(self, point: Point) -> Item | None:
        """A left click at *point*; return the item it inserted, if any."""
        item = self.item_at(point)
        self.scene.click(item)
        if item is not None:
            self.set_active_object(item)
        inserted = mouse_press(self.model, self.scene, self._context, point, self.allocator)
        self._redraw()
        return inserted

    def delete_selected(self) -> list[Item]:
        """Delete the selected items, with the edges of any deleted vertex."""
        removed: list[Item] = []
        for item in self.scene.selected:
            if any(item is present for present in self.model.items()):
                removed.extend(self.model.delete_item(item))
        self.scene.clear_selection()
        self.scene.selection_order = [
            s for s in self.scene.selection_order if not any(s is r for r in removed)
        ]
        if any(self.object_panel.item is r for r in removed):
            self.object_panel.item = None
            self.object_panel.details = {}
        self._redraw()
        return removed

    def set_directed(self, directed: bool) -> None:
        self.scene.directed_edges = directed
        self.model.directed = directed
        self._redraw()

    def set_show_weight_labels(self, show: bool) -> None:
        self.scene.show_weight_labels = show
        self._redraw()

    def set_active_object(self, item: Item) -> None:
        self.algorithm_panel.set_active_object(item)
        self.object_panel.set_active_object(item)

    def run_algorithm(self) -> list[Edge]:
        """Run the algorithm chosen in the algorithm tab."""
        return self.algorithm_panel.choice.run(self.model)

    def save(self, path: str | Path) -> None:
        save_scene(self.model, path)

    def open(self, path: str | Path) -> list[Item]:
        added = load_scene(self.model, path, self.allocator)
        self._redraw()
        return added


class Window:
    """The main window: a title, the side-pane tabs and the canvas controller."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        sleep: Callable[[float], None] = time.sleep,
        on_redraw: Callable[[], None] | None = None,
    ) -> None:
        self.title = title
        self.current_tab = Tab.ALGORITHM
        self.repaints = 0
        self._on_redraw = on_redraw
        self.controller = Controller(self.redraw, sleep)

    def activate_algorithm_tab(self) -> None:
        self.current_tab = Tab.ALGORITHM

    def activate_object_tab(self) -> None:
        self.current_tab = Tab.OBJECT

    def activate_settings_tab(self) -> None:
        self.current_tab = Tab.SETTINGS

    def redraw(self) -> None:
        self.repaints += 1
        if self._on_redraw is not None:
            self._on_redraw()


def _describe(item: Item) -> str:
    if isinstance(item, Vertex):
        center = item.center()
        text = f"vertex {item.handle} at {center.x:g},{center.y:g}"
        return f"{text} {item.name}" if item.name else text
    return f"edge {item.handle} {item.source.handle}->{item.target.handle} weight {item.weight}"


def _expect(args: list[str], count: int) -> list[str]:
    if len(args) != count:
        raise ValueError(f"expected {count} argument(s), got {len(args)}")
    return args


def _on_off(value: str) -> bool:
    if value not in ("on", "off"):
        raise ValueError(f"expected on or off, got {value!r}")
    return value == "on"


class Application:
    """Drives a window from commands read one per line."""

    def __init__(
        self,
        window: Window | None = None,
        input: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.window = window or Window()
        self._input = input
        self._output = output
        self._commands: dict[str, Callable[[list[str]], bool | None]] = {
            "vertex": self._vertex,
            "edge": self._edge,
            "cancel": self._cancel,
            "press": self._press,
            "delete": self._delete,
            "directed": self._directed,
            "labels": self._labels,
            "algorithm": self._algorithm,
            "run": self._run,
            "weight": self._weight,
            "name": self._name,
            "save": self._save,
            "open": self._open,
            "tab": self._tab,
            "list": self._list,
            "quit": self._quit,
        }

    @property
    def controller(self) -> Controller:
        return self.window.controller

    def _print(self, text: str) -> None:
        print(text, file=self._output or sys.stdout)

    def run(self) -> int:
        """Process commands until end of input or quit; return the exit status."""
        stream = self._input or sys.stdin
        for raw in stream:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            try:
                name, *args = shlex.split(line)
                handler = self._commands.get(name)
                if handler is None:
                    raise ValueError(f"unknown command {name!r}")
                if handler(args):
                    break
            except (ValueError, KeyError, OSError) as error:
                self._print(f"error: {error}")
        return 0

    def _vertex(self, args: list[str]) -> None:
        _expect(args, 0)
        self.controller.insert_vertex_mode()

    def _edge(self, args: list[str]) -> None:
        _expect(args, 0)
        self.controller.insert_edge_mode()

    def _cancel(self, args: list[str]) -> None:
        _expect(args, 0)
        self.controller.cancel()

    def _press(self, args: list[str]) -> None:
        x, y = (float(a) for a in _expect(args, 2))
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError("coordinates must be finite")
        inserted = self.controller.press(Point(x, y))
        if inserted is not None:
            self._print(f"added {_describe(inserted)}")

    def _delete(self, args: list[str]) -> None:
        _expect(args, 0)
        for item in self.controller.delete_selected():
            self._print(f"removed {_describe(item)}")

    def _directed(self, args: list[str]) -> None:
        self.controller.settings_panel.directed_edges = _on_off(_expect(args, 1)[0])

    def _labels(self, args: list[str]) -> None:
        self.controller.settings_panel.show_weight_labels = _on_off(_expect(args, 1)[0])

    def _algorithm(self, args: list[str]) -> None:
        self.controller.algorithm_panel.choice.select(_expect(args, 1)[0])

    def _run(self, args: list[str]) -> None:
        _expect(args, 0)
        edges = self.controller.run_algorithm()
        handles = " ".join(str(edge.handle) for edge in edges)
        self._print(f"highlighted {handles}" if handles else "highlighted nothing")

    def _weight(self, args: list[str]) -> None:
        value = int(_expect(args, 1)[0])
        item = self.controller.object_panel.item
        if not isinstance(item, Edge):
            raise ValueError("no edge is active")
        set_edge_weight(item, value)
        self.controller.object_panel.set_active_object(item)
        self.window.redraw()

    def _name(self, args: list[str]) -> None:
        name = " ".join(args)
        item = self.controller.object_panel.item
        if not isinstance(item, Vertex):
            raise ValueError("no vertex is active")
        set_vertex_name(item, name)
        self.controller.object_panel.set_active_object(item)
        self.window.redraw()

    def _save(self, args: list[str]) -> None:
        self.controller.save(_expect(args, 1)[0])

    def _open(self, args: list[str]) -> None:
        added = self.controller.open(_expect(args, 1)[0])
        self._print(f"loaded {len(added)} item(s)")

    def _tab(self, args: list[str]) -> None:
        name = _expect(args, 1)[0]
        actions = {
            "algorithm": self.window.activate_algorithm_tab,
            "object": self.window.activate_object_tab,
            "settings": self.window.activate_settings_tab,
        }
        if name not in actions:
            raise ValueError(f"unknown tab {name!r}")
        actions[name]()

    def _list(self, args: list[str]) -> None:
        _expect(args, 0)
        for item in self.controller.model.items():
            self._print(_describe(item))

    def _quit(self, args: list[str]) -> bool:
        return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="graphview", description="Draw graphs and run algorithms on them.")
    parser.add_argument("file", nargs="?", help="graph file to open")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="window title")
    parser.add_argument("--script", help="read commands from this file instead of standard input")
    parser.add_argument("--no-delay", action="store_true", help="animate without pauses")
    args = parser.parse_args(argv)

    sleep: Callable[[float], None] = (lambda _: None) if args.no_delay else time.sleep
    window = Window(args.title, sleep)
    if args.file:
        window.controller.open(args.file)
    if args.script:
        with open(args.script, encoding="utf-8") as stream:
            return Application(window, stream).run()
    return Application(window).run()


if __name__ == "__main__":
    sys.exit(main())