"""
Keyspace Data
==============

Leaf data collaborators for the matchers: ranked frequency lists and
keyboard adjacency graphs.
"""

from keyspace.data.adjacency import AdjacencyGraph, build_graph, load_adjacency_graphs
from keyspace.data.frequency import RankedDictionary, build_ranked_dict, load_ranked_dictionaries

__all__ = [
    "AdjacencyGraph",
    "RankedDictionary",
    "build_graph",
    "build_ranked_dict",
    "load_adjacency_graphs",
    "load_ranked_dictionaries",
]
