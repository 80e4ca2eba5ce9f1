"""
Breadth-first shortest paths over a GraphStore.

Edges are unweighted, so the first time BFS discovers a vertex it is at
minimum distance from the source. Paths are lists of article names; an
empty list means no path exists.
"""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from wikipath.config import NO_PATH, PATH_ARROW
from wikipath.graph.store import GraphStore

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Answers shortest-path queries against a loaded GraphStore.

    The store is only read, never modified, so one PathFinder can serve
    any number of queries.
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store

    @property
    def store(self) -> GraphStore:
        return self._store

    def shortest_path(self, start: str, target: str) -> list[str]:
        """
        Find a shortest path from start to target.

        Args:
            start: Name of the starting article
            target: Name of the ending article

        Returns:
            Names from start to target inclusive, [start] if they are the
            same article, or [] if target is unreachable

        Raises:
            NameNotFoundError: If either article is not in the graph
        """
        start_idx = self._store.id_of(start)
        target_idx = self._store.id_of(target)

        if start_idx == target_idx:
            return [start]

        # BFS with parent tracking
        queue = deque([start_idx])
        visited = {start_idx}
        parents: dict[int, int | None] = {start_idx: None}
        found = False

        while queue and not found:
            current_idx = queue.popleft()

            for neighbor_idx in self._store.neighbors(current_idx):
                if neighbor_idx in visited:
                    continue

                visited.add(neighbor_idx)
                queue.append(neighbor_idx)
                parents[neighbor_idx] = current_idx

                if neighbor_idx == target_idx:
                    found = True
                    break

        if not found:
            logger.debug(f"No path from '{start}' to '{target}' ({len(visited)} visited)")
            return []

        path = []
        idx = target_idx
        while idx is not None:
            path.append(self._store.name_of(idx))
            idx = parents[idx]
        path.reverse()

        logger.debug(f"Found path ({len(path) - 1} clicks) after visiting {len(visited)} articles")
        return path

    def shortest_path_via(self, start: str, via: str, target: str) -> list[str]:
        """
        Find a path from start to target that passes through via.

        Joins a shortest path start -> via with a shortest path via -> target.
        Each leg is minimal, so the result is minimal among paths that reach
        via once; it is not a search over all paths containing via.

        Returns:
            Names from start to target inclusive, or [] if either leg
            has no path

        Raises:
            NameNotFoundError: If any of the three articles is not in the graph
        """
        first_leg = self.shortest_path(start, via)
        second_leg = self.shortest_path(via, target)

        if not first_leg or not second_leg:
            return []

        return first_leg + second_leg[1:]

    def shortest_path_length(self, start: str, target: str, via: str | None = None) -> int:
        """
        Number of links on a shortest path, or NO_PATH (-1) if none exists.

        A path from an article to itself has length 0. When via is given,
        the length of the path returned by shortest_path_via.
        """
        if via is None:
            path = self.shortest_path(start, target)
        else:
            path = self.shortest_path_via(start, via, target)

        if not path:
            return NO_PATH
        return len(path) - 1

    def distances(self, source: str) -> np.ndarray:
        """
        BFS distance from source to every vertex, indexed by vertex id.

        Unreachable vertices hold NO_PATH.
        """
        source_idx = self._store.id_of(source)

        dist = np.full(self._store.vertex_count(), NO_PATH, dtype=np.int64)
        dist[source_idx] = 0
        queue = deque([source_idx])

        while queue:
            current_idx = queue.popleft()
            for neighbor_idx in self._store.neighbors(current_idx):
                if dist[neighbor_idx] == NO_PATH:
                    dist[neighbor_idx] = dist[current_idx] + 1
                    queue.append(neighbor_idx)

        return dist


def format_path(path: list[str], arrow: str = PATH_ARROW) -> str:
    """Render a path for display, e.g. "A --> B --> C"."""
    return arrow.join(path)
