"""
Ringfinder - Pure Python ring perception for molecular graphs.

Finds every simple cycle of a molecular graph with the Hanser-Jauffret-Kaufmann
path graph reduction, and reduces a set of rings to a linearly independent
cycle basis with Gaussian elimination over GF(2).

    >>> from ringfinder import Graph, find_all_rings, find_cycle_basis
    >>> g = Graph.from_edges([(0, 1), (1, 2), (2, 0), (1, 3), (3, 2)])
    >>> len(find_all_rings(g))
    3
    >>> len(find_cycle_basis(g))
    2

Submodules:
    ringfinder.rings   - Exhaustive ring search, cycle basis, ring systems
    ringfinder.graph   - GF(2) bit matrix
    ringfinder.interop - RDKit adapters (optional)
"""

import logging

__version__ = "0.1.0"

# Core types
from ringfinder.types import Edge, Graph, Ring

# Exceptions
from ringfinder.exceptions import (
    RingFinderError,
    MalformedGraphError,
    SearchLimitExceeded,
    CapacityExceeded,
    InvalidQueryState,
)

# Algorithms
from ringfinder.graph import CycleBasisMatrix
from ringfinder.rings import (
    PathGraphReducer,
    find_all_rings,
    find_cycle_basis,
    find_ring_systems,
    basis_membership,
    edge_incidence,
)

# Submodules
from ringfinder import graph, rings, interop

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Edge", "Graph", "Ring",
    # Exceptions
    "RingFinderError", "MalformedGraphError", "SearchLimitExceeded",
    "CapacityExceeded", "InvalidQueryState",
    # Algorithms
    "CycleBasisMatrix", "PathGraphReducer",
    "find_all_rings", "find_cycle_basis", "find_ring_systems",
    "basis_membership", "edge_incidence",
    # Submodules
    "graph", "rings", "interop",
]
