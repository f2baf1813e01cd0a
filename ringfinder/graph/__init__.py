"""GF(2) bit matrix for cycle space computations."""

from ringfinder.graph.bitmatrix import (
    CycleBasisMatrix,
    xor,
    bits_from_string,
    bits_to_string,
)

__all__ = [
    "CycleBasisMatrix",
    "xor",
    "bits_from_string",
    "bits_to_string",
]
