import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

import networkx as nx

from socialpath.models.registry import IdentityRegistry

logger = logging.getLogger(__name__)

# (source label, target label, weight)
RawEdge = Tuple[str, str, int]


@dataclass(frozen=True)
class Node:
    node_id: int
    label: str


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    weight: int = 1


@dataclass(frozen=True)
class Graph:
    """
    Directed multigraph built once from an edge list.

    nodes[i].node_id == i. adjacency[n] lists the targets of n's outgoing
    edges in the order the edges were declared (parallel edges repeat).
    """

    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]
    adjacency: Mapping[int, Tuple[int, ...]]
    label_index: Mapping[str, int]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def neighbors(self, node_id: int) -> Tuple[int, ...]:
        return self.adjacency.get(node_id, ())

    def label_of(self, node_id: int) -> str:
        return self.nodes[node_id].label

    def to_networkx(self) -> nx.MultiDiGraph:
        """Frozen networkx view with the same integer node ids and edge weights."""
        G = nx.MultiDiGraph()
        for node in self.nodes:
            G.add_node(node.node_id, label=node.label)
        for e in self.edges:
            G.add_edge(e.source, e.target, weight=e.weight)
        return nx.freeze(G)

    def describe(self) -> dict:
        return {
            "nodes": self.node_count,
            "edges": self.edge_count,
            "density": round(nx.density(self.to_networkx()), 4),
            "edge_list": [
                {"from": self.label_of(e.source), "to": self.label_of(e.target), "weight": e.weight}
                for e in self.edges
            ],
        }


def build_graph(edges: Iterable[RawEdge]) -> Graph:
    registry = IdentityRegistry()
    nodes = []
    graph_edges = []
    adjacency = {}

    for src, tar, weight in edges:
        # 1) resolve labels, recording a node the first time each is seen
        src_id, created = registry.assign(src)
        if created:
            nodes.append(Node(src_id, src))
        tar_id, created = registry.assign(tar)
        if created:
            nodes.append(Node(tar_id, tar))

        # 2) directed edge + adjacency, insertion order kept
        graph_edges.append(Edge(src_id, tar_id, weight))
        adjacency.setdefault(src_id, []).append(tar_id)

    logger.debug("built graph: %d nodes, %d edges", len(nodes), len(graph_edges))
    return Graph(
        nodes=tuple(nodes),
        edges=tuple(graph_edges),
        adjacency=MappingProxyType({n: tuple(out) for n, out in adjacency.items()}),
        label_index=MappingProxyType(registry.as_dict()),
    )


def resolve(graph: Graph, label: str) -> Optional[int]:
    """Return the node id for label, or None if it never appeared in the edge list."""
    return graph.label_index.get(label)
