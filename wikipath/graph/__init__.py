"""
Graph module.

Provides the article graph and shortest-path queries over it:
- GraphStore: name <-> id mapping and adjacency lists
- PathFinder: BFS shortest path, optionally through an intermediate article
"""

from wikipath.graph.errors import (
    DuplicateNodeError,
    GraphFormatError,
    NameNotFoundError,
    WikiPathError,
)
from wikipath.graph.pathfinder import PathFinder, format_path
from wikipath.graph.store import GraphStore

__all__ = [
    "GraphStore",
    "PathFinder",
    "format_path",
    "WikiPathError",
    "NameNotFoundError",
    "DuplicateNodeError",
    "GraphFormatError",
]
