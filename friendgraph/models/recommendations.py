"""
Friend Recommendations

Ranks people who are not yet friends with a target by how many friends
they have in common.
"""

import logging
from collections import Counter
from typing import Optional

from pydantic import BaseModel, Field

from friendgraph.models.graph import SocialGraph

logger = logging.getLogger(__name__)


class RecommendationCandidate(BaseModel):
    """A person suggested as a new friend."""
    name: str
    mutual_count: int = Field(ge=1)
    mutual_friends: list[str] = Field(default_factory=list)


class FriendRecommender:
    """Recommends friends by mutual-friend count.

    Counts are accumulated with a single pass over each friend's own
    friends (friend-of-friend counting), which yields the same numbers as
    intersecting every pair of neighbor sets.
    """

    def __init__(self, graph: SocialGraph):
        self.graph = graph

    def count_mutual_friends(self, name1: str, name2: str) -> int:
        """Count friends shared by two people. Unknown names share none."""
        return len(self.graph.neighbor_names(name1) & self.graph.neighbor_names(name2))

    def rank_candidates(self, name: str) -> list[RecommendationCandidate]:
        """Rank every non-friend with at least one mutual friend.

        Sorted by mutual count descending; ties keep the graph's insertion
        order.
        """
        graph = self.graph
        if not graph.has_person(name):
            return []

        friends = graph.neighbor_names(name)
        counts: Counter[str] = Counter()
        via: dict[str, list[str]] = {}

        for friend in graph.friends_in_order(name):
            for candidate in graph.neighbor_names(friend.name):
                if candidate == name or candidate in friends:
                    continue
                counts[candidate] += 1
                via.setdefault(candidate, []).append(friend.name)

        ranked = sorted(
            counts,
            key=lambda c: (-counts[c], graph.sequence_of(c)),
        )

        return [
            RecommendationCandidate(
                name=c,
                mutual_count=counts[c],
                mutual_friends=via[c],
            )
            for c in ranked
        ]

    def recommend_friends(self, name: str, k: int) -> list[str]:
        """Get up to k recommended friend names for a person.

        Args:
            name: Person to recommend friends for
            k: Maximum number of recommendations

        Returns:
            Names ordered by mutual-friend count, empty if the person is
            unknown or k <= 0
        """
        if k <= 0:
            return []

        candidates = self.rank_candidates(name)
        logger.debug(f"Found {len(candidates)} recommendation candidates for {name!r}")
        return [c.name for c in candidates[:k]]

    def get_summary(
        self,
        name: str,
        candidates: list[RecommendationCandidate],
    ) -> dict:
        """Get summary of a recommendation run.

        Args:
            name: Person the recommendations were made for
            candidates: Ranked candidates

        Returns:
            Summary dictionary
        """
        best: Optional[RecommendationCandidate] = candidates[0] if candidates else None

        return {
            "person": name,
            "total_candidates": len(candidates),
            "best_candidate": {
                "name": best.name,
                "mutual_count": best.mutual_count,
            } if best else None,
            "avg_mutual_count": (
                sum(c.mutual_count for c in candidates) / len(candidates)
                if candidates else 0
            ),
        }
