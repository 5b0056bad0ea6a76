"""
Pytest Configuration and Shared Fixtures
"""

import pytest
from pathlib import Path

from friendgraph.models.graph import SocialGraph


def make_graph(people: list[str], edges: list[tuple[str, str]]) -> SocialGraph:
    """Build a graph from a list of names and friendship pairs."""
    graph = SocialGraph()
    for name in people:
        graph.add_person(name)
    for a, b in edges:
        graph.add_friend(a, b)
    return graph


@pytest.fixture
def empty_graph() -> SocialGraph:
    """Create an empty graph."""
    return SocialGraph()


@pytest.fixture
def chain_graph() -> SocialGraph:
    """A - B - C - D"""
    return make_graph(
        ["A", "B", "C", "D"],
        [("A", "B"), ("B", "C"), ("C", "D")],
    )


@pytest.fixture
def mutual_graph() -> SocialGraph:
    """A and D both know B and C; E only knows B."""
    return make_graph(
        ["A", "B", "C", "D", "E"],
        [("A", "B"), ("A", "C"), ("D", "B"), ("D", "C"), ("E", "B")],
    )


@pytest.fixture
def sample_network_text() -> str:
    """Network file contents for a small friend group."""
    return (
        "alice: bob carol\n"
        "bob: alice dave\n"
        "carol: alice dave\n"
        "dave: bob carol erin\n"
        "erin: dave\n"
        "frank:\n"
    )


@pytest.fixture
def sample_network_file(tmp_path, sample_network_text) -> Path:
    """Write the sample network to a temporary file."""
    path = tmp_path / "network.txt"
    path.write_text(sample_network_text)
    return path


@pytest.fixture
def graph_factory():
    """Return a builder for ad-hoc graphs."""
    return make_graph
