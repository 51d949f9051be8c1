import pytest

from socialpath.models.dataset import DINING_TABLE_EDGES
from socialpath.models.graph import build_graph


@pytest.fixture
def dining_edges():
    return list(DINING_TABLE_EDGES)


@pytest.fixture
def dining_graph(dining_edges):
    return build_graph(dining_edges)


@pytest.fixture
def diamond_edges():
    """Two equally short routes A->D; the one through B is declared first."""
    return [
        ("A", "B", 1),
        ("A", "C", 1),
        ("B", "D", 9),
        ("C", "D", 1),
        ("D", "E", 1),
    ]
