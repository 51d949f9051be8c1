from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd

# Dormitory dining-table partners: each edge is one girl's first choice of
# dining partner.
DINING_TABLE_EDGES: List[Tuple[str, str, int]] = [
    ("Ada", "Cora", 1),
    ("Cora", "Ada", 1),
    ("Louise", "Marion", 1),
    ("Jean", "Helen", 1),
    ("Helen", "Jean", 1),
    ("Martha", "Anna", 1),
    ("Alice", "Eva", 1),
    ("Robin", "Eva", 1),
    ("Marion", "Martha", 1),
    ("Maxine", "Adele", 1),
    ("Lena", "Marion", 1),
    ("Hazel", "Hilda", 1),
    ("Hilda", "Betty", 1),
    ("Frances", "Eva", 1),
    ("Eva", "Maxine", 1),
    ("Ruth", "Jane", 1),
    ("Edna", "Mary", 1),
    ("Adele", "Frances", 1),
    ("Jane", "Adele", 1),
    ("Anna", "Maxine", 1),
    ("Mary", "Edna", 1),
    ("Betty", "Edna", 1),
    ("Ella", "Ellen", 1),
    ("Ellen", "Anna", 1),
    ("Laura", "Eva", 1),
    ("Irene", "Hilda", 1),
]

REQUIRED_COLUMNS = ("source", "target")


def load_edges(path: Union[str, Path]) -> List[Tuple[str, str, int]]:
    """
    Read an edge list from a CSV file with `source`, `target` and an optional
    `weight` column (defaults to 1).
    """
    df = pd.read_csv(path, dtype={"source": str, "target": str})
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Edge list {path} is missing column(s): {', '.join(missing)}")
    # labels are kept verbatim; blank or whitespace-only endpoints are rejected
    endpoints = df[list(REQUIRED_COLUMNS)]
    blank = endpoints.apply(lambda col: col.str.strip() == "")
    if endpoints.isna().any().any() or blank.any().any():
        raise ValueError(f"Edge list {path} has rows without a source or target")

    if "weight" not in df.columns:
        df["weight"] = 1
    weights = pd.to_numeric(df["weight"].fillna(1), errors="coerce")
    if weights.isna().any() or (weights % 1 != 0).any():
        raise ValueError(f"Edge list {path} has weights that are not whole numbers")
    df["weight"] = weights.astype(int)

    return [
        (row.source, row.target, int(row.weight))
        for row in df[["source", "target", "weight"]].itertuples(index=False)
    ]


def configured_edges(dataset_path: Union[str, Path, None] = None) -> List[Tuple[str, str, int]]:
    """Edges from dataset_path if given, otherwise the dining-table sample."""
    if dataset_path:
        return load_edges(dataset_path)
    return list(DINING_TABLE_EDGES)
