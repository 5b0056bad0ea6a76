"""
Network File Output

Writes a social network back to the plain-text adjacency format.
"""

import logging
from pathlib import Path

from friendgraph.models.graph import SocialGraph

logger = logging.getLogger(__name__)


def _is_portable_name(name: str) -> bool:
    """Names with whitespace or colons cannot be read back unchanged."""
    return bool(name) and ":" not in name and not any(ch.isspace() for ch in name)


def format_adjacency(graph: SocialGraph) -> str:
    """Render graph as adjacency lines.

    One line per person in insertion order, friends in insertion order,
    single spaces and no trailing whitespace. People without friends get a
    bare "name:" line so they survive a round trip.
    """
    lines = []
    for person in graph.people:
        if not _is_portable_name(person.name):
            logger.warning(f"Name {person.name!r} will not round-trip through the text format")

        friends = " ".join(f.name for f in graph.friends_in_order(person))
        lines.append(f"{person.name}: {friends}".rstrip())

    return "\n".join(lines) + "\n" if lines else ""


def save_network(
    graph: SocialGraph,
    path: str | Path,
    encoding: str = "utf-8",
) -> bool:
    """Write graph to a network file, overwriting it.

    Args:
        graph: Graph to save
        path: Destination file
        encoding: File encoding

    Returns:
        True if the file was written, False otherwise
    """
    path = Path(path)
    content = format_adjacency(graph)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
    except OSError as e:
        logger.error(f"Could not write network file {path}: {e}")
        return False

    logger.info(f"Saved {len(graph)} people and {graph.friend_count} friendships to {path}")
    return True
