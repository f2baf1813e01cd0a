"""Test configuration and fixtures for ringfinder tests."""

from __future__ import annotations

from typing import Callable

import pytest

from ringfinder import Graph


def _cycle(k: int, offset: int = 0) -> list[tuple[int, int]]:
    return [(offset + i, offset + (i + 1) % k) for i in range(k)]


@pytest.fixture
def cycle_graph() -> Callable[[int], Graph]:
    """Factory for a single k-membered ring."""
    def build(k: int) -> Graph:
        return Graph.from_edges(_cycle(k))
    return build


@pytest.fixture
def triangle() -> Graph:
    return Graph.from_edges(_cycle(3))


@pytest.fixture
def bicyclic() -> Graph:
    """Two triangles sharing the 1-2 edge."""
    return Graph.from_edges([(0, 1), (1, 2), (2, 0), (1, 3), (3, 2)])


@pytest.fixture
def naphthalene() -> Graph:
    """Two six-membered rings fused on the 4-5 edge."""
    return Graph.from_edges(
        _cycle(6) + [(4, 6), (6, 7), (7, 8), (8, 9), (9, 5)]
    )


@pytest.fixture
def spiro() -> Graph:
    """Two triangles sharing vertex 0 only."""
    return Graph.from_edges([(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)])


@pytest.fixture
def two_components() -> Graph:
    """Two disconnected triangles."""
    return Graph.from_edges(_cycle(3) + _cycle(3, offset=3))


@pytest.fixture
def tetrahedrane() -> Graph:
    """Complete graph on four vertices."""
    return Graph.from_edges([(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])


@pytest.fixture
def cubane() -> Graph:
    """The cube graph: two squares joined by four vertical edges."""
    return Graph.from_edges(
        _cycle(4) + _cycle(4, offset=4) + [(i, i + 4) for i in range(4)]
    )


@pytest.fixture
def bicyclooctane() -> Graph:
    """Bicyclo[2.2.2]octane: bridgeheads 0 and 1 joined by three bridges."""
    return Graph.from_edges([
        (0, 2), (2, 3), (3, 1),
        (0, 4), (4, 5), (5, 1),
        (0, 6), (6, 7), (7, 1),
    ])


@pytest.fixture
def hexane() -> Graph:
    """An acyclic chain."""
    return Graph.from_edges([(i, i + 1) for i in range(5)])


@pytest.fixture
def ring_graphs(
    triangle: Graph,
    bicyclic: Graph,
    naphthalene: Graph,
    spiro: Graph,
    two_components: Graph,
    tetrahedrane: Graph,
    cubane: Graph,
    bicyclooctane: Graph,
) -> dict[str, Graph]:
    """All cyclic fixture graphs by name."""
    return {
        "triangle": triangle,
        "bicyclic": bicyclic,
        "naphthalene": naphthalene,
        "spiro": spiro,
        "two_components": two_components,
        "tetrahedrane": tetrahedrane,
        "cubane": cubane,
        "bicyclooctane": bicyclooctane,
    }
