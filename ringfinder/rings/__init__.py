"""Ring detection and cycle basis selection."""

from ringfinder.rings.pathgraph import (
    PathGraphReducer,
    find_all_rings,
    intersection_size,
    join_paths,
)
from ringfinder.rings.basis import (
    edge_incidence,
    basis_membership,
    find_cycle_basis,
    find_ring_systems,
)

__all__ = [
    "PathGraphReducer",
    "find_all_rings",
    "intersection_size",
    "join_paths",
    "edge_incidence",
    "basis_membership",
    "find_cycle_basis",
    "find_ring_systems",
]
