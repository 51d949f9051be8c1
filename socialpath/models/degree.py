from typing import Dict, Iterable, List, Tuple

import pandas as pd


def degree_distribution(edges: Iterable[Tuple[str, str, int]]) -> Dict[str, int]:
    """
    Count how many edge endpoints reference each label.

    In- and out-degree are merged: every edge adds one to its source and one
    to its target, so a self-loop adds two to the same label.
    """
    degrees: Dict[str, int] = {}
    for u, v, _ in edges:
        degrees[u] = degrees.get(u, 0) + 1
        degrees[v] = degrees.get(v, 0) + 1
    return degrees


def degree_frame(degrees: Dict[str, int]) -> pd.DataFrame:
    # stable sort keeps first-seen order among equal degrees
    df = pd.DataFrame(list(degrees.items()), columns=["label", "degree"])
    return df.sort_values("degree", ascending=False, kind="stable").reset_index(drop=True)


def most_connected(degrees: Dict[str, int]) -> List[str]:
    if not degrees:
        return []
    top = max(degrees.values())
    return [label for label, d in degrees.items() if d == top]
