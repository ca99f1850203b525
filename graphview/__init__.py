"""Graph editor model: grid-snapped vertices, weighted edges, animated BFS, DFS and Dijkstra runs, JSON scene files and a command-driven front end."""

__version__ = "0.1.0"