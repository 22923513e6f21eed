import pytest

from ledgerstats.io.triples import parse_triples


# 4 vertices with depths 0, 1, 1, 2.
SMALL = "3\n1 1 10\n1 2 10\n2 3 20\n"

# Six vertices; 1, 2, 3 form a triangle so it is not bipartite.
TRIANGLE = "5\n1 1 0\n1 2 0\n2 2 1\n3 3 2\n3 5 3\n"


@pytest.fixture
def small_graph():
    return parse_triples(SMALL.splitlines())


@pytest.fixture
def triangle_graph():
    return parse_triples(TRIANGLE.splitlines())


@pytest.fixture
def root_only():
    return parse_triples(["0"])
