"""
Data Models and Graph Algorithms

Pydantic entities, the social graph store, and the search and ranking
components that read it.
"""

from friendgraph.models.entities import Person, Friendship
from friendgraph.models.graph import SocialGraph
from friendgraph.models.paths import PathFinder
from friendgraph.models.recommendations import FriendRecommender, RecommendationCandidate

__all__ = [
    "Person",
    "Friendship",
    "SocialGraph",
    "PathFinder",
    "FriendRecommender",
    "RecommendationCandidate",
]
