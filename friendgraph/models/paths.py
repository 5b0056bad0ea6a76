"""
Shortest Path Discovery

Breadth-first search over the friendship graph, optionally avoiding a set
of people.
"""

import logging
from collections import deque
from typing import Iterable, Optional

from friendgraph.models.graph import SocialGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """Finds shortest friendship chains between two people.

    Neighbors of each visited person are expanded in the graph's insertion
    order, so when several shortest paths exist the same one is always
    returned. Nothing is cached between calls.
    """

    def __init__(self, graph: SocialGraph):
        """Initialize path finder.

        Args:
            graph: Social graph to search (read only)
        """
        self.graph = graph

    def shortest_path(self, source: str, target: str) -> list[str]:
        """Find the shortest path between two people.

        Args:
            source: Name of the starting person
            target: Name of the destination person

        Returns:
            Names along the path, source first and target last, or an empty
            list if either person is unknown or no path exists
        """
        return self._search(source, target, frozenset())

    def shortest_path_avoiding(
        self,
        source: str,
        target: str,
        exclude: Iterable[str],
    ) -> list[str]:
        """Find the shortest path that never passes through excluded people.

        Excluding the source or target makes the path impossible. Names in
        exclude that are not in the graph are ignored.

        Args:
            source: Name of the starting person
            target: Name of the destination person
            exclude: Names that may not appear on the path

        Returns:
            Names along the path, or an empty list if none exists
        """
        if isinstance(exclude, str):
            exclude = [exclude]
        return self._search(source, target, frozenset(exclude))

    def degrees_of_separation(self, source: str, target: str) -> Optional[int]:
        """Number of friendship hops between two people, None if unreachable."""
        path = self.shortest_path(source, target)
        if not path:
            return None
        return len(path) - 1

    def _search(self, source: str, target: str, excluded: frozenset[str]) -> list[str]:
        graph = self.graph
        if not graph.has_person(source) or not graph.has_person(target):
            return []
        if source in excluded or target in excluded:
            logger.debug(f"Endpoint excluded, no path from {source!r} to {target!r}")
            return []

        parents: dict[str, Optional[str]] = {source: None}
        queue = deque([source])

        while queue:
            current = queue.popleft()
            if current == target:
                return self._reconstruct(parents, target)

            for neighbor in graph.friends_in_order(current):
                name = neighbor.name
                if name in parents or name in excluded:
                    continue
                parents[name] = current
                queue.append(name)

        logger.debug(f"No path from {source!r} to {target!r}")
        return []

    @staticmethod
    def _reconstruct(parents: dict[str, Optional[str]], target: str) -> list[str]:
        path = []
        node: Optional[str] = target
        while node is not None:
            path.append(node)
            node = parents[node]
        path.reverse()
        return path
