"""
Persistence Pipeline

Components for reading and writing social networks in the plain-text
adjacency format.
"""

from friendgraph.pipeline.ingest import (
    load_network,
    read_network,
    parse_adjacency,
    build_graph,
    AdjacencyRecord,
    NetworkFileError,
)
from friendgraph.pipeline.outputs import save_network, format_adjacency

__all__ = [
    "load_network",
    "read_network",
    "parse_adjacency",
    "build_graph",
    "AdjacencyRecord",
    "NetworkFileError",
    "save_network",
    "format_adjacency",
]
