"""
Loading the article graph from text files and msgpack snapshots.

Node file: one article name per line.
Edge file: one link per line, source and target separated by a tab.
In both files, blank lines and lines starting with "#" are skipped.

Usage:
    from wikipath.data import load_graph

    store = load_graph("data/articles.tsv", "data/links.tsv")
    save_snapshot(store, "data/graph.msgpack")
    store = load_snapshot("data/graph.msgpack")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import msgpack

from wikipath.config import (
    COMMENT_PREFIX,
    EDGE_DELIMITER,
    FILE_ENCODING,
    SNAPSHOT_VERSION,
    UNDIRECTED_EDGES,
)
from wikipath.graph.errors import GraphFormatError
from wikipath.graph.store import GraphStore

logger = logging.getLogger(__name__)


def _iter_data_lines(path: str | Path) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, line) for every non-blank, non-comment line.

    Raises:
        GraphFormatError: If a line is not valid text in FILE_ENCODING
    """
    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, start=1):
            try:
                line = raw.decode(FILE_ENCODING).rstrip("\r\n")
            except UnicodeDecodeError as e:
                raise GraphFormatError(path, line_number, f"not valid {FILE_ENCODING} text ({e.reason})") from e
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            yield line_number, line


def iter_node_names(path: str | Path) -> Iterator[str]:
    """Yield article names from a node file, in file order."""
    for _, line in _iter_data_lines(path):
        yield line


def iter_edge_pairs(path: str | Path) -> Iterator[tuple[str, str]]:
    """
    Yield (source, target) name pairs from an edge file, in file order.

    Raises:
        GraphFormatError: If a line has no tab separator
    """
    for line_number, line in _iter_data_lines(path):
        fields = line.split(EDGE_DELIMITER)
        if len(fields) < 2:
            raise GraphFormatError(path, line_number, f"expected tab-separated pair, got {line!r}")
        yield fields[0], fields[1]


def build_graph(
    names: Iterable[str],
    edges: Iterable[tuple[str, str]],
    undirected: bool = False,
) -> GraphStore:
    """
    Build a GraphStore from article names and (source, target) pairs.

    All names are added before any edge is resolved.

    Raises:
        DuplicateNodeError: If a name appears twice
        NameNotFoundError: If an edge refers to an undeclared article
    """
    store = GraphStore(undirected=undirected)
    for name in names:
        store.add_node(name)
    for source, target in edges:
        store.add_edge(store.id_of(source), store.id_of(target))
    return store


def load_graph(
    node_path: str | Path,
    edge_path: str | Path,
    undirected: bool = UNDIRECTED_EDGES,
) -> GraphStore:
    """
    Load the article graph from a node file and an edge file.

    Raises:
        FileNotFoundError: If either file does not exist
        GraphFormatError: If an edge line is malformed
        DuplicateNodeError: If an article is declared twice
        NameNotFoundError: If an edge refers to an undeclared article
    """
    for path in (node_path, edge_path):
        if not Path(path).is_file():
            raise FileNotFoundError(f"No such file: {path}")

    logger.info(f"Loading graph from {node_path} and {edge_path}...")
    store = build_graph(
        iter_node_names(node_path),
        iter_edge_pairs(edge_path),
        undirected=undirected,
    )
    logger.info(f"Loaded {store.vertex_count():,} articles and {store.edge_count():,} links")
    return store


# =============================================================================
# Snapshots
# =============================================================================

def save_snapshot(store: GraphStore, path: str | Path) -> None:
    """Write the graph to a msgpack file for fast reloading."""
    payload = {
        "version": SNAPSHOT_VERSION,
        "undirected": store.undirected,
        "names": store.names(),
        "adjacency": [list(store.neighbors(idx)) for idx in range(store.vertex_count())],
        "edge_count": store.edge_count(),
    }
    logger.info(f"Saving graph snapshot to {path}...")
    with open(path, "wb") as f:
        msgpack.pack(payload, f)


def load_snapshot(path: str | Path) -> GraphStore:
    """
    Read a graph written by save_snapshot.

    Adjacency lists are restored exactly, including reverse links of an
    undirected graph.

    Raises:
        ValueError: If the file is not a snapshot or its version is not supported
    """
    logger.info(f"Loading graph snapshot from {path}...")
    with open(path, "rb") as f:
        payload = msgpack.load(f)

    version = payload.get("version") if isinstance(payload, dict) else None
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"Unsupported snapshot version {version!r} (expected {SNAPSHOT_VERSION})")

    store = GraphStore.from_adjacency(
        payload["names"],
        payload["adjacency"],
        undirected=payload["undirected"],
        edge_count=payload["edge_count"],
    )
    logger.info(f"Loaded {store.vertex_count():,} articles from snapshot")
    return store
