"""Tests for cycle basis selection and ring systems."""

from __future__ import annotations

import pytest

from ringfinder import (
    CycleBasisMatrix,
    Graph,
    Ring,
    basis_membership,
    edge_incidence,
    find_all_rings,
    find_cycle_basis,
    find_ring_systems,
)


def by_size(graph: Graph) -> list[Ring]:
    return sorted(find_all_rings(graph), key=len)


class TestEdgeIncidence:
    """Test encoding rings as bit vectors."""

    def test_encoding(self) -> None:
        ring = Ring(vertices=(0, 1, 2), edges=frozenset({0, 2, 5}))
        assert edge_incidence(ring) == 0b100101

    def test_xor_of_triangles_is_envelope(self, bicyclic: Graph) -> None:
        """The envelope of two fused triangles is their symmetric difference."""
        rings = by_size(bicyclic)
        first, second, envelope = (edge_incidence(r) for r in rings)
        assert first ^ second == envelope


class TestBasisMembership:
    """Test greedy independence filtering."""

    def test_smallest_first(self, bicyclic: Graph) -> None:
        rings = by_size(bicyclic)
        assert basis_membership(rings, bicyclic.edge_slots) == [True, True, False]

    def test_envelope_first(self, bicyclic: Graph) -> None:
        rings = by_size(bicyclic)[::-1]
        assert basis_membership(rings, bicyclic.edge_slots) == [True, True, False]

    def test_duplicate_ring_rejected(self, triangle: Graph) -> None:
        ring = find_all_rings(triangle)[0]
        assert basis_membership([ring, ring], triangle.edge_slots) == [True, False]

    def test_limit(self, cubane: Graph) -> None:
        rings = by_size(cubane)
        membership = basis_membership(rings, cubane.edge_slots, limit=2)
        assert membership[:2] == [True, True]
        assert sum(membership) == 2

    def test_empty(self) -> None:
        assert basis_membership([], 0) == []

    @pytest.mark.parametrize("name", ["naphthalene", "tetrahedrane", "cubane"])
    @pytest.mark.parametrize("largest_first", [False, True])
    def test_matches_full_elimination(
        self, ring_graphs: dict[str, Graph], name: str, largest_first: bool
    ) -> None:
        """Membership agrees with eliminating every accepted ring afresh."""
        graph = ring_graphs[name]
        rings = by_size(graph)
        if largest_first:
            rings = rings[::-1]

        expected: list[bool] = []
        accepted: list[int] = []
        for ring in rings:
            row = edge_incidence(ring)
            m = CycleBasisMatrix.from_rows(accepted + [row], graph.edge_slots)
            independent = not m.eliminate()
            expected.append(independent)
            if independent:
                accepted.append(row)

        membership = basis_membership(rings, graph.edge_slots)
        assert membership == expected
        assert sum(membership) == graph.circuit_rank


class TestFindCycleBasis:
    """Test minimum cycle basis extraction."""

    @pytest.mark.parametrize("name", [
        "triangle", "bicyclic", "naphthalene", "spiro",
        "two_components", "tetrahedrane", "cubane", "bicyclooctane",
    ])
    def test_basis_size_is_circuit_rank(self, ring_graphs: dict[str, Graph], name: str) -> None:
        graph = ring_graphs[name]
        assert len(find_cycle_basis(graph)) == graph.circuit_rank

    @pytest.mark.parametrize("name,sizes", [
        ("triangle", [3]),
        ("bicyclic", [3, 3]),
        ("naphthalene", [6, 6]),
        ("spiro", [3, 3]),
        ("tetrahedrane", [3, 3, 3]),
        ("cubane", [4, 4, 4, 4, 4]),
        ("bicyclooctane", [6, 6]),
    ])
    def test_basis_ring_sizes(self, ring_graphs: dict[str, Graph], name: str, sizes: list[int]) -> None:
        assert [ring.size for ring in find_cycle_basis(ring_graphs[name])] == sizes

    @pytest.mark.parametrize("name", ["naphthalene", "tetrahedrane", "cubane"])
    def test_basis_spans_all_rings(self, ring_graphs: dict[str, Graph], name: str) -> None:
        """Every ring is a combination of the basis rings."""
        graph = ring_graphs[name]
        basis = [edge_incidence(r) for r in find_cycle_basis(graph)]
        for ring in find_all_rings(graph):
            m = CycleBasisMatrix.from_rows(basis + [edge_incidence(ring)], graph.edge_slots)
            assert m.eliminate()

    def test_basis_is_independent(self, cubane: Graph) -> None:
        basis = [edge_incidence(r) for r in find_cycle_basis(cubane)]
        m = CycleBasisMatrix.from_rows(basis, cubane.edge_slots)
        assert not m.eliminate()

    def test_acyclic(self, hexane: Graph) -> None:
        assert find_cycle_basis(hexane) == []

    def test_max_ring_size_can_truncate(self, naphthalene: Graph) -> None:
        assert find_cycle_basis(naphthalene, max_ring_size=5) == []


class TestRingSystems:
    """Test grouping rings into fused systems."""

    def test_fused(self, naphthalene: Graph) -> None:
        systems = find_ring_systems(find_cycle_basis(naphthalene))
        assert len(systems) == 1
        assert len(systems[0]) == 2

    def test_spiro_rings_are_separate(self, spiro: Graph) -> None:
        systems = find_ring_systems(find_cycle_basis(spiro))
        assert len(systems) == 2

    def test_disconnected(self, two_components: Graph) -> None:
        systems = find_ring_systems(find_all_rings(two_components))
        assert sorted(len(s) for s in systems) == [1, 1]

    def test_cubane_is_one_system(self, cubane: Graph) -> None:
        systems = find_ring_systems(find_all_rings(cubane))
        assert len(systems) == 1
        assert len(systems[0]) == 28

    def test_empty(self) -> None:
        assert find_ring_systems([]) == []
