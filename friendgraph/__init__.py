"""
friendgraph

In-memory social network graph with shortest-path search and mutual-friend
recommendations.
"""

__version__ = "0.1.0"
