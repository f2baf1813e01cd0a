"""
Cycle basis selection.

Rings found by the exhaustive search are encoded as edge incidence vectors
and filtered through a GF(2) bit matrix, keeping only rings that are not
the symmetric difference of rings already kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ringfinder.graph.bitmatrix import CycleBasisMatrix
from ringfinder.rings.pathgraph import find_all_rings

if TYPE_CHECKING:
    from ringfinder.types import Graph, Ring


def edge_incidence(ring: "Ring") -> int:
    """Encode a ring as a bit vector with bit ``i`` set for edge ``i``."""
    row = 0
    for idx in ring.edges:
        row |= 1 << idx
    return row


def basis_membership(
    rings: Sequence["Ring"],
    columns: int,
    limit: int | None = None,
) -> list[bool]:
    """Greedily decide which rings belong to a cycle basis.

    Rings are tested in the given order. A ring joins the basis when its
    edge set cannot be built by XORing the rings accepted before it.

    Args:
        rings: Candidate rings, in order of preference.
        columns: Width of the edge index space the rings' edges refer to.
        limit: Stop accepting rings once this many are members. Rings
            after that point are reported as non-members.

    Returns:
        One flag per ring, True for basis members.
    """
    membership: list[bool] = []
    # reduced rows spanning the accepted rings, ordered by pivot column
    basis: list[int] = []
    matrix = CycleBasisMatrix(columns, len(rings))

    for ring in rings:
        if limit is not None and len(basis) >= limit:
            membership.append(False)
            continue

        matrix.clear()
        for reduced in basis:
            matrix.add(reduced)
        matrix.add(edge_incidence(ring))

        # basis rows are independent, so any dependency involves this row
        independent = not matrix.eliminate()
        membership.append(independent)
        if independent:
            basis = sorted(
                (matrix.row(j) for j in range(len(matrix))), key=lambda r: r & -r
            )

    return membership


def find_cycle_basis(graph: "Graph", max_ring_size: int | None = None) -> list["Ring"]:
    """Find a minimum cycle basis (SSSR) of a graph.

    All simple cycles are enumerated, sorted by size and filtered for linear
    independence until the basis holds as many rings as the circuit rank
    (``E - V + C``) of the graph.

    Args:
        graph: Graph to analyze.
        max_ring_size: Largest ring to consider (default None = no limit).
            With a limit the basis may be incomplete.

    Returns:
        Basis rings, smallest first.

    Example:
        >>> g = Graph.from_edges([(0, 1), (1, 2), (2, 0), (1, 3), (3, 2)])
        >>> [ring.size for ring in find_cycle_basis(g)]
        [3, 3]
    """
    target = graph.circuit_rank
    if target <= 0:
        return []

    candidates = sorted(find_all_rings(graph, max_ring_size=max_ring_size), key=len)
    membership = basis_membership(candidates, graph.edge_slots, limit=target)
    return [ring for ring, member in zip(candidates, membership) if member]


def find_ring_systems(rings: Sequence["Ring"]) -> list[list["Ring"]]:
    """Group rings into fused ring systems.

    Two rings are fused if they share at least one edge.

    Args:
        rings: Rings found in one graph.

    Returns:
        List of ring systems, each a list of rings in input order.

    Example:
        >>> rings = find_cycle_basis(graph_from_smiles("c1ccc2ccccc2c1"))
        >>> len(find_ring_systems(rings))
        1
    """
    if not rings:
        return []

    n = len(rings)
    parent = list(range(n))

    def find(x: int) -> int:
        if parent[x] != x:
            parent[x] = find(parent[x])
        return parent[x]

    def union(x: int, y: int) -> None:
        px, py = find(x), find(y)
        if px != py:
            parent[px] = py

    for i in range(n):
        for j in range(i + 1, n):
            if rings[i].edges & rings[j].edges:
                union(i, j)

    systems: dict[int, list["Ring"]] = {}
    for i in range(n):
        systems.setdefault(find(i), []).append(rings[i])

    return list(systems.values())
