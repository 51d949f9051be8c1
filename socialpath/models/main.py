import sys

from socialpath.config import configure_logging, load_settings
from socialpath.models.dataset import configured_edges
from socialpath.models.degree import degree_distribution, degree_frame, most_connected
from socialpath.models.graph import build_graph, resolve
from socialpath.models.traversal import hop_count, path_labels, shortest_path

DEFAULT_SOURCE = "Eva"
DEFAULT_TARGET = "Maxine"


def run(edges, source_name: str, target_name: str) -> int:
    edges = list(edges)
    G = build_graph(edges)
    summary = G.describe()
    print(f"graph: {summary['nodes']} nodes, {summary['edges']} edges, density={summary['density']}")
    for e in summary["edge_list"]:
        print("  ", e["from"], "→", e["to"], "| w =", e["weight"])

    degrees = degree_distribution(edges)
    for row in degree_frame(degrees).itertuples(index=False):
        print(f"node {row.label} has degree {row.degree}")
    top = most_connected(degrees)
    if top:
        print(f"most connected: {', '.join(top)} ({degrees[top[0]]})")

    source = resolve(G, source_name)
    if source is None:
        print(f"Source '{source_name}' not found")
        return 1
    target = resolve(G, target_name)
    if target is None:
        print(f"Target '{target_name}' not found")
        return 1

    path = shortest_path(G, source, target)
    if path is None:
        print(f"No path from {source_name} to {target_name}.")
    else:
        print(f"shortest path from {source_name} to {target_name} ({hop_count(path)} hops):",
              " -> ".join(path_labels(G, path)))
    return 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    source_name, target_name = (args[0], args[1]) if len(args) >= 2 else (DEFAULT_SOURCE, DEFAULT_TARGET)

    settings = load_settings()
    configure_logging(settings.log_level)
    return run(configured_edges(settings.dataset_path), source_name, target_name)


if __name__ == "__main__":
    sys.exit(main())
