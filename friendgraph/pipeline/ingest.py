"""
Network File Ingestion

Loads a social network from the plain-text adjacency format:

    <name>: <friend1> <friend2> ... <friendN>
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from friendgraph.models.graph import SocialGraph

logger = logging.getLogger(__name__)


class NetworkFileError(Exception):
    """Raised when a network file cannot be read."""


class AdjacencyRecord(BaseModel):
    """One parsed line of a network file."""
    name: str
    friends: list[str] = Field(default_factory=list)
    line_number: Optional[int] = None


def parse_adjacency_line(line: str, line_number: Optional[int] = None) -> Optional[AdjacencyRecord]:
    """Parse a single adjacency line.

    The text before the first colon is the person's name; whitespace
    separated tokens after it are friend names. A line without a colon names
    a person with no friends.

    Returns:
        Parsed record, or None for blank lines and lines without a name
    """
    if not line.strip():
        return None

    name, sep, rest = line.partition(":")
    name = name.strip()
    if not name:
        logger.warning(f"Skipping line {line_number or '?'}: missing person name")
        return None

    friends = rest.split() if sep else []
    return AdjacencyRecord(name=name, friends=friends, line_number=line_number)


def parse_adjacency(text: str) -> list[AdjacencyRecord]:
    """Parse the full contents of a network file."""
    records = []
    for i, line in enumerate(text.splitlines(), 1):
        record = parse_adjacency_line(line, line_number=i)
        if record is not None:
            records.append(record)
    return records


def build_graph(
    records: Iterable[AdjacencyRecord],
    graph: Optional[SocialGraph] = None,
) -> SocialGraph:
    """Replace the contents of graph with the given records.

    Args:
        records: Parsed adjacency records
        graph: Graph to populate (a new one is created if not given)

    Returns:
        The populated graph
    """
    graph = graph if graph is not None else SocialGraph()
    graph.clear()

    for record in records:
        graph.add_person(record.name)
        for friend in record.friends:
            graph.add_person(friend)
            graph.add_friend(record.name, friend)

    return graph


def _read_text(path: Path, encoding: str) -> str:
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise NetworkFileError(f"Could not read network file {path}: {e}") from e


def read_network(path: str | Path, encoding: str = "utf-8") -> SocialGraph:
    """Load a network file into a new graph.

    Raises:
        NetworkFileError: If the file cannot be read
    """
    path = Path(path)
    text = _read_text(path, encoding)
    graph = build_graph(parse_adjacency(text))
    logger.info(f"Loaded {len(graph)} people and {graph.friend_count} friendships from {path}")
    return graph


def load_network(
    path: str | Path,
    graph: SocialGraph,
    encoding: str = "utf-8",
) -> bool:
    """Load a network file, replacing everything graph currently holds.

    The graph is left untouched if the file cannot be read.

    Args:
        path: Network file to read
        graph: Graph to populate
        encoding: File encoding

    Returns:
        True if the file was loaded, False otherwise
    """
    path = Path(path)
    try:
        text = _read_text(path, encoding)
    except NetworkFileError as e:
        logger.error(str(e))
        return False

    graph = build_graph(parse_adjacency(text), graph)
    logger.info(f"Loaded {len(graph)} people and {graph.friend_count} friendships from {path}")
    return True
