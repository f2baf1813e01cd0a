"""
Custom exceptions for ringfinder.

This module defines a hierarchy of exceptions for the ring search and cycle
basis code. Every error is a precondition violation surfaced to the caller;
nothing here is meant to be retried.
"""

from __future__ import annotations


class RingFinderError(Exception):
    """Base exception for all ringfinder errors."""

    pass


class MalformedGraphError(RingFinderError):
    """The input graph is not a simple graph over its own vertex set.

    Raised for dangling edge endpoints, self loops, repeated edges, and for
    operations on a vertex that is no longer present.

    Attributes:
        vertex: The offending vertex id, if known.
        edge: The offending vertex pair, if known.
    """

    def __init__(
        self,
        message: str,
        vertex: int | None = None,
        edge: tuple[int, int] | None = None,
    ) -> None:
        self.message = message
        self.vertex = vertex
        self.edge = edge
        super().__init__(message)


class SearchLimitExceeded(RingFinderError):
    """The ring search ran for more elimination steps than allowed.

    Attributes:
        limit: The configured maximum number of steps.
    """

    def __init__(self, message: str, limit: int | None = None) -> None:
        self.message = message
        self.limit = limit
        super().__init__(message)


class CapacityExceeded(RingFinderError, IndexError):
    """A row was added to a full bit matrix.

    Attributes:
        capacity: The maximum number of rows of the matrix.
    """

    def __init__(self, message: str, capacity: int | None = None) -> None:
        self.message = message
        self.capacity = capacity
        super().__init__(message)


class InvalidQueryState(RingFinderError):
    """A bit matrix was queried or mutated in the wrong lifecycle state."""

    pass
