"""
Data loading module.

Builds a GraphStore from node/edge text files or a msgpack snapshot.

Usage:
    from wikipath.data import load_graph

    store = load_graph("data/articles.tsv", "data/links.tsv")
"""

from wikipath.data.loader import (
    build_graph,
    iter_edge_pairs,
    iter_node_names,
    load_graph,
    load_snapshot,
    save_snapshot,
)

__all__ = [
    "build_graph",
    "iter_edge_pairs",
    "iter_node_names",
    "load_graph",
    "load_snapshot",
    "save_snapshot",
]
