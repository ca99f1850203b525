# graphview

A graph editor model. You place vertices on a snapping grid and connect
them with weighted edges. Edges can be treated as directed or undirected.
Breadth-first search, depth-first search and Dijkstra's shortest path can
then be run step by step, and each step highlights edges or recolours
vertices. Scenes are saved to and loaded from JSON files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `graphview` command

```
graphview [FILE] [--title TITLE] [--script PATH] [--no-delay]
```

- `FILE` is a scene file that is opened at start-up.
- `--title` sets the window title. The default is `Test`.
- `--script` reads commands from a file. Without it, commands are read from
  standard input.
- `--no-delay` runs animations without pausing. Normally each step waits
  1 second, and each step along a Dijkstra path waits 0.3 seconds.

### Commands

Give one command per line. Blank lines are skipped, and so are lines that
start with `#`. Arguments are split the way a shell splits them. When a
command fails, `error: <message>` is printed and the next line is read.

| Command | Effect |
| --- | --- |
| `vertex` | Enter vertex-insertion mode. A click places a vertex of radius 15 at the clicked point, snapped to a 10-unit grid. |
| `edge` | Enter edge-insertion mode. Clicks toggle the selection of vertices. When two vertices are selected, an edge joins them in the order they were selected. |
| `cancel` | Leave insertion mode and deselect everything. |
| `press X Y` | Left-click at scene coordinates X and Y. A clicked item becomes the active object. A new item is reported as `added ...`. |
| `delete` | Delete the selected items. Deleting a vertex also deletes its edges. Each removed item is printed. |
| `directed on\|off` | Treat edges as directed or undirected. |
| `labels on\|off` | Show or hide the weight labels. |
| `algorithm BFS\|DFS\|Dijkstra` | Choose the algorithm. Any vertices already picked are forgotten. |
| `run` | Run the chosen algorithm and print `highlighted <edge ids>`, or `highlighted nothing`. |
| `weight N` | Set the weight of the active edge. N must be between 0 and 1000. |
| `name TEXT` | Set the name of the active vertex. |
| `save PATH` / `open PATH` | Write the scene to a file, or add a file's scene to the canvas. |
| `tab algorithm\|object\|settings` | Switch the side-pane tab. |
| `list` | Print every vertex and edge. |
| `quit` | Stop reading commands. |

Clicking a vertex also picks it for the chosen algorithm:

- BFS and DFS need one vertex, the start.
- Dijkstra needs a start vertex and an end vertex, clicked one after the
  other. A third click starts the pair over.

BFS and DFS follow the edges as directed or undirected, depending on the
`directed` setting. Dijkstra always follows the directed view and uses edge
weights.

## Using it as a library

- `graphview.entities`:
  - `Vertex`, `Edge`, `Point`, `Circle` and `Line`.
  - `HandleAllocator`, which hands out unique ids.
  - The geometry helpers `snap`, `shorten`, `arrow_head` and
    `label_position`.
- `graphview.graph`:
  - `Graph`, a directed or undirected adjacency structure with data on each
    edge.
  - `DesignModel`, which holds the items of a scene and keeps a directed and
    an undirected graph over their handles.
- `graphview.scene`: `GridScene`, which holds the single and multi selection
  rules, the display options and the grid dots (`grid_points`).
- `graphview.drawing`: `DrawingContext`, `CursorShape`, `cursor_shape` and
  `mouse_press`.
- `graphview.algorithms`:
  - The generators `bfs` and `dfs`, which yield `(parent, vertex)` pairs.
  - `dijkstra`, which returns distances and predecessors.
  - `shortest_path`.
  - `EdgeAnimator` and `VertexAnimator`.
  - `BFSRunner`, `DFSRunner` and `DijkstraRunner`.
- `graphview.serialization`: `serialize_scene`, `deserialize_scene`,
  `save_scene` and `load_scene`.
- `graphview.panels`:
  - `AlgorithmChoice`, `StartSelection` and `EndpointSelection`.
  - `AlgorithmPanel`, `ObjectPanel` and `SettingsPanel`.
  - `set_edge_weight`, `set_vertex_name` and `describe_object`.
- `graphview.app`:
  - `Controller`, which ties the model, the scene and the panels together.
  - `Window`, which tracks the current tab and counts redraws.
  - `Application`, the command reader.
  - `main`.

## Scene files

A scene file is a JSON array:

- A vertex has `"type": 1` and the fields `id`, `x`, `y`, `width`, `height`
  and `name`.
- An edge has `"type": 2` and the fields `id`, `from`, `to` and `weight`.

Loading works in two passes: first all vertices are added, then all edges.
An edge that refers to an unknown vertex raises `ValueError`. A file that
does not hold a JSON array adds nothing.

## What it does not do

There is no graphical window. `Window` and `Application` keep the editor's
state and drive it through text commands. Nothing is drawn on screen. Arrow
heads, label positions and grid dots are computed but not rendered. There
is no zooming, no panning and no dragging of vertices with the mouse.