"""
Tests for Friend Recommendations
"""

import pytest

from friendgraph.models.recommendations import FriendRecommender, RecommendationCandidate


class TestFriendRecommender:
    """Tests for FriendRecommender class."""

    @pytest.fixture
    def recommender(self, mutual_graph):
        """Create a recommender over the mutual-friends graph."""
        return FriendRecommender(mutual_graph)

    def test_ranked_by_mutual_count(self, recommender):
        """Test that D (two mutuals) ranks before E (one mutual)."""
        assert recommender.recommend_friends("A", 5) == ["D", "E"]

    def test_mutual_counts(self, recommender):
        """Test the reported mutual counts."""
        candidates = recommender.rank_candidates("A")
        assert candidates == [
            RecommendationCandidate(name="D", mutual_count=2, mutual_friends=["B", "C"]),
            RecommendationCandidate(name="E", mutual_count=1, mutual_friends=["B"]),
        ]

    def test_truncates_to_k(self, recommender):
        """Test that at most k names are returned."""
        assert recommender.recommend_friends("A", 1) == ["D"]

    @pytest.mark.parametrize("k", [0, -1, -10])
    def test_non_positive_k(self, recommender, k):
        """Test that k <= 0 yields nothing."""
        assert recommender.recommend_friends("A", k) == []

    def test_unknown_person(self, recommender):
        """Test that an unknown person gets no recommendations."""
        assert recommender.recommend_friends("Zed", 5) == []
        assert recommender.rank_candidates("Zed") == []

    def test_excludes_existing_friends_and_self(self, recommender):
        """Test that current friends and the person never appear."""
        result = recommender.recommend_friends("B", 10)
        assert "B" not in result
        for friend in ["A", "D", "E"]:
            assert friend not in result
        assert result == ["C"]

    def test_zero_mutuals_discarded(self, mutual_graph):
        """Test that people with no mutual friends are not suggested."""
        mutual_graph.add_person("Loner")
        assert "Loner" not in FriendRecommender(mutual_graph).recommend_friends("A", 10)

    def test_isolated_person(self, mutual_graph):
        """Test that an isolated person has no recommendations."""
        mutual_graph.add_person("Loner")
        assert FriendRecommender(mutual_graph).recommend_friends("Loner", 5) == []

    def test_ties_keep_insertion_order(self, graph_factory):
        """Test that equal counts are ordered by when people were added."""
        graph = graph_factory(
            ["Me", "Zoe", "Amy", "Hub"],
            [("Me", "Hub"), ("Hub", "Amy"), ("Hub", "Zoe")],
        )
        assert FriendRecommender(graph).recommend_friends("Me", 5) == ["Zoe", "Amy"]

    def test_matches_pairwise_intersection(self, graph_factory):
        """Test that rankings equal a brute-force neighbor-set intersection."""
        graph = graph_factory(
            ["P", "Q", "R", "S", "T", "U", "V"],
            [
                ("P", "Q"), ("P", "R"), ("P", "S"),
                ("T", "Q"), ("T", "R"),
                ("U", "Q"), ("U", "R"), ("U", "S"),
                ("V", "S"), ("Q", "R"),
            ],
        )
        recommender = FriendRecommender(graph)

        friends = graph.neighbor_names("P")
        expected = [
            (p.name, recommender.count_mutual_friends("P", p.name))
            for p in graph.people
            if p.name != "P" and p.name not in friends
        ]
        expected = [e for e in expected if e[1] > 0]
        expected.sort(key=lambda e: -e[1])

        assert recommender.recommend_friends("P", 10) == [name for name, _ in expected]
        assert recommender.recommend_friends("P", 10) == ["U", "T", "V"]

    def test_count_mutual_friends(self, recommender):
        """Test counting shared friends."""
        assert recommender.count_mutual_friends("A", "D") == 2
        assert recommender.count_mutual_friends("A", "E") == 1
        assert recommender.count_mutual_friends("A", "Zed") == 0

    def test_reflects_mutations(self, mutual_graph):
        """Test that new friendships change rankings immediately."""
        recommender = FriendRecommender(mutual_graph)
        mutual_graph.add_friend("A", "D")
        assert recommender.recommend_friends("A", 5) == ["E"]


class TestRecommendationSummary:
    """Tests for FriendRecommender.get_summary."""

    def test_summary(self, mutual_graph):
        """Test summary of a ranking."""
        recommender = FriendRecommender(mutual_graph)
        summary = recommender.get_summary("A", recommender.rank_candidates("A"))

        assert summary["person"] == "A"
        assert summary["total_candidates"] == 2
        assert summary["best_candidate"] == {"name": "D", "mutual_count": 2}
        assert summary["avg_mutual_count"] == pytest.approx(1.5)

    def test_summary_empty(self, mutual_graph):
        """Test summary when nobody qualifies."""
        summary = FriendRecommender(mutual_graph).get_summary("Zed", [])
        assert summary["total_candidates"] == 0
        assert summary["best_candidate"] is None
