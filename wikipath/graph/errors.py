"""
Exceptions raised while building and querying the article graph.

"No path" is not an error: path queries return an empty list and
length queries return NO_PATH instead.
"""

from __future__ import annotations

from pathlib import Path


class WikiPathError(Exception):
    """Base class for all WikiPath errors."""


class NameNotFoundError(WikiPathError, KeyError):
    """An article name is not present in the graph."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Article '{self.name}' not found in graph"


class DuplicateNodeError(WikiPathError, ValueError):
    """An article name was declared more than once."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Article '{name}' is already in the graph")
        self.name = name


class GraphFormatError(WikiPathError, ValueError):
    """A line of a node or edge file could not be parsed."""

    def __init__(self, path: str | Path, line_number: int, message: str) -> None:
        super().__init__(f"{path}:{line_number}: {message}")
        self.path = Path(path)
        self.line_number = line_number
