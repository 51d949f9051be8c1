import logging
from collections import deque
from typing import Dict, List, Optional

from socialpath.models.graph import Graph

logger = logging.getLogger(__name__)


def shortest_path(graph: Graph, source: int, target: int) -> Optional[List[int]]:
    """
    Minimum-hop directed path from source to target (both inclusive), or None
    if target is unreachable.

    Breadth-first: edges are only followed forward and weights are ignored.
    Among equally short paths the first-declared outgoing edge wins.
    """
    queue = deque([source])
    distances: Dict[int, int] = {source: 0}
    previous: Dict[int, int] = {}

    while queue:
        node = queue.popleft()

        if node == target:
            path = [node]
            while node in previous:
                node = previous[node]
                path.append(node)
            path.reverse()
            logger.debug("path %d -> %d found, %d hops", source, target, len(path) - 1)
            return path

        for neighbor in graph.neighbors(node):
            if neighbor in distances:
                continue
            distances[neighbor] = distances[node] + 1
            previous[neighbor] = node
            queue.append(neighbor)

    logger.debug("no path %d -> %d (%d nodes settled)", source, target, len(distances))
    return None


def hop_count(path: List[int]) -> int:
    return len(path) - 1


def path_labels(graph: Graph, path: List[int]) -> List[str]:
    return [graph.label_of(n) for n in path]
