"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from wikipath.data import build_graph
from wikipath.graph import GraphStore, PathFinder


@pytest.fixture
def chain_names() -> list[str]:
    """A-B-C-D chain plus an article with no links."""
    return ["A", "B", "C", "D", "E"]


@pytest.fixture
def chain_edges() -> list[tuple[str, str]]:
    return [("A", "B"), ("B", "C"), ("C", "D")]


@pytest.fixture
def directed_chain(chain_names, chain_edges) -> GraphStore:
    """Chain graph with links followed only as declared."""
    return build_graph(chain_names, chain_edges)


@pytest.fixture
def undirected_chain(chain_names, chain_edges) -> GraphStore:
    """Chain graph with links followed in both directions."""
    return build_graph(chain_names, chain_edges, undirected=True)


@pytest.fixture
def wiki_graph() -> GraphStore:
    """
    A small directed article graph with several equal-length routes.

    Einstein -> Physics -> Mathematics -> Pizza is one of two
    three-click routes to Pizza; Italy is a dead end.
    """
    names = [
        "Albert Einstein",
        "Physics",
        "Germany",
        "Mathematics",
        "Italy",
        "Pizza",
        "Python (programming language)",
    ]
    edges = [
        ("Albert Einstein", "Physics"),
        ("Albert Einstein", "Germany"),
        ("Physics", "Mathematics"),
        ("Germany", "Italy"),
        ("Mathematics", "Pizza"),
        ("Germany", "Mathematics"),
        ("Python (programming language)", "Mathematics"),
        ("Pizza", "Italy"),
    ]
    return build_graph(names, edges)


@pytest.fixture
def wiki_finder(wiki_graph: GraphStore) -> PathFinder:
    return PathFinder(wiki_graph)


@pytest.fixture
def graph_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write the chain graph to node and edge files with comments and blanks."""
    nodes = tmp_path / "articles.tsv"
    edges = tmp_path / "links.tsv"
    nodes.write_text(
        "# articles\nA\nB\n\nC\nD\nE\n",
        encoding="utf-8",
    )
    edges.write_text(
        "# from\tto\nA\tB\nB\tC\n\nC\tD\n",
        encoding="utf-8",
    )
    return nodes, edges
