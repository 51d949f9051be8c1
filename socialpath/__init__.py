"""Degree distribution and shortest directed paths over labeled edge lists."""

from socialpath.models.degree import degree_distribution
from socialpath.models.graph import Edge, Graph, Node, build_graph, resolve
from socialpath.models.traversal import shortest_path

__version__ = "0.1.0"

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "build_graph",
    "degree_distribution",
    "resolve",
    "shortest_path",
]
