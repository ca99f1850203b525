[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphview"
version = "0.1.0"
description = "Graph editor model with a snapping grid, weighted edges, animated BFS, DFS and Dijkstra runs, and JSON scene files"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "editor", "bfs", "dfs", "dijkstra", "shortest-path", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphview = "graphview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["graphview"]

[tool.pytest.ini_options]
addopts = "-ra"
