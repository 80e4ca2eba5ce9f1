"""
GraphStore: article name <-> index mapping plus the link adjacency lists.

Usage:
    from wikipath.graph import GraphStore

    store = GraphStore()
    a = store.add_node("Albert Einstein")
    b = store.add_node("Physics")
    store.add_edge(a, b)
    store.neighbors(a)  # (1,)
"""

from __future__ import annotations

import logging

import numpy as np

from wikipath.graph.errors import DuplicateNodeError, NameNotFoundError

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Unweighted article graph with dense integer vertex ids.

    Ids are assigned in the order articles are added, starting at 0.
    The store is filled once by a loader and only read afterwards.

    Attributes:
        undirected: Whether add_edge also registers the reverse link
    """

    def __init__(self, undirected: bool = False) -> None:
        self.undirected = undirected
        self._names: list[str] = []
        self._name_to_idx: dict[str, int] = {}
        self._adjacency: list[list[int]] = []
        self._edge_count = 0

    @classmethod
    def from_adjacency(
        cls,
        names: list[str],
        adjacency: list[list[int]],
        undirected: bool = False,
        edge_count: int | None = None,
    ) -> GraphStore:
        """
        Rebuild a store from names and complete adjacency lists.

        Adjacency is taken as-is: for an undirected graph it must already
        contain the reverse links.

        Raises:
            DuplicateNodeError: If a name appears twice
            ValueError: If adjacency does not have one list per name
            IndexError: If a neighbor id is out of range
        """
        if len(adjacency) != len(names):
            raise ValueError(f"Got {len(adjacency)} adjacency lists for {len(names)} names")

        store = cls(undirected=undirected)
        for name in names:
            store.add_node(name)
        for idx, links in enumerate(adjacency):
            for neighbor_idx in links:
                store._check_index(neighbor_idx)
            store._adjacency[idx].extend(links)

        if edge_count is None:
            edge_count = sum(len(links) for links in adjacency)
        store._edge_count = edge_count
        return store

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, name: str) -> int:
        """
        Register an article and return its new id.

        Raises:
            DuplicateNodeError: If the name is already registered
        """
        if name in self._name_to_idx:
            raise DuplicateNodeError(name)

        idx = len(self._names)
        self._names.append(name)
        self._name_to_idx[name] = idx
        self._adjacency.append([])
        return idx

    def add_edge(self, id_a: int, id_b: int) -> None:
        """
        Register id_b as reachable from id_a in one step.

        Raises:
            IndexError: If either id is not a registered vertex
        """
        self._check_index(id_a)
        self._check_index(id_b)

        self._adjacency[id_a].append(id_b)
        if self.undirected and id_a != id_b:
            self._adjacency[id_b].append(id_a)
        self._edge_count += 1

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def neighbors(self, idx: int) -> tuple[int, ...]:
        """Get ids reachable from idx in one step, in insertion order."""
        self._check_index(idx)
        return tuple(self._adjacency[idx])

    def vertex_count(self) -> int:
        """Total number of registered articles."""
        return len(self._names)

    def edge_count(self) -> int:
        """Number of edges added (a reverse link is not counted separately)."""
        return self._edge_count

    def name_of(self, idx: int) -> str:
        """Get article name by id."""
        self._check_index(idx)
        return self._names[idx]

    def id_of(self, name: str) -> int:
        """
        Get id for article name.

        Raises:
            NameNotFoundError: If the name is not registered
        """
        try:
            return self._name_to_idx[name]
        except KeyError:
            raise NameNotFoundError(name) from None

    def has_node(self, name: str) -> bool:
        """Check if article exists in the graph."""
        return name in self._name_to_idx

    def names(self) -> list[str]:
        """All article names, ordered by id."""
        return list(self._names)

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._names):
            raise IndexError(f"Index {idx} out of range [0, {len(self._names)})")

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._name_to_idx

    def __repr__(self) -> str:
        kind = "undirected" if self.undirected else "directed"
        return f"GraphStore({kind}, vertices={len(self._names)}, edges={self._edge_count})"

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run structural checks on the stored graph."""
        count = len(self._names)
        return {
            "names_unique": len(self._name_to_idx) == count,
            "mapping_bijective": all(
                self._names[idx] == name for name, idx in self._name_to_idx.items()
            ),
            "adjacency_sized": len(self._adjacency) == count,
            "neighbors_in_range": all(
                0 <= n < count for links in self._adjacency for n in links
            ),
        }

    def stats(self) -> dict:
        """Get statistics about the stored graph."""
        out_degree = np.fromiter(
            (len(links) for links in self._adjacency),
            dtype=np.int64,
            count=len(self._adjacency),
        )
        has_vertices = out_degree.size > 0
        return {
            "vertices": len(self._names),
            "edges": self._edge_count,
            "undirected": self.undirected,
            "max_out_degree": int(out_degree.max()) if has_vertices else 0,
            "mean_out_degree": float(out_degree.mean()) if has_vertices else 0.0,
            "sink_vertices": int(np.count_nonzero(out_degree == 0)),
        }
