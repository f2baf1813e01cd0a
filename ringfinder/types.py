"""
Core graph data types.

This module defines the structures the ring search operates on: Edge, Graph
and Ring. A Graph is the adjacency abstraction a molecule is reduced to
(atoms become vertices, bonds become edges); a Ring is a simple cycle found
in such a graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from .exceptions import MalformedGraphError

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected edge between two vertices.

    Attributes:
        idx: Stable index of this edge in its graph.
        u: First endpoint.
        v: Second endpoint.
    """

    idx: int
    u: int
    v: int

    def other(self, vertex: int) -> int:
        """Get the endpoint opposite to ``vertex``.

        Raises:
            ValueError: If vertex is not an endpoint of this edge.
        """
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise ValueError(f"Vertex {vertex} not in edge {self.idx}")

    @property
    def key(self) -> tuple[int, int]:
        """Endpoints as an ordered ``(min, max)`` pair."""
        return (self.u, self.v) if self.u <= self.v else (self.v, self.u)

    def __contains__(self, vertex: int) -> bool:
        return vertex in (self.u, self.v)


class Graph:
    """An undirected simple graph over stable integer vertex ids.

    Edge indices are handed out sequentially by :meth:`add_edge` and are
    never reused, so they stay valid after vertices are removed. This is the
    numbering ring edge sets and bit vectors refer to.

    Example:
        >>> g = Graph.from_edges([(0, 1), (1, 2), (2, 0)])
        >>> g.degree(0)
        2
        >>> g.circuit_rank
        1
    """

    __slots__ = ("_adjacency", "_edges", "_next_edge")

    def __init__(
        self,
        vertices: Iterable[int] = (),
        edges: Iterable[tuple[int, int]] = (),
    ) -> None:
        # vertex -> {neighbor: edge index}
        self._adjacency: dict[int, dict[int, int]] = {}
        self._edges: dict[int, Edge] = {}
        self._next_edge = 0
        for vertex in vertices:
            self.add_vertex(vertex)
        for u, v in edges:
            self.add_edge(u, v)

    @classmethod
    def from_edges(
        cls,
        pairs: Iterable[tuple[int, int]],
        vertices: Iterable[int] | None = None,
    ) -> "Self":
        """Build a graph from vertex pairs.

        Args:
            pairs: Edges as ``(u, v)`` pairs, indexed in iteration order.
            vertices: Explicit vertex set. When omitted, vertices are taken
                from the edge endpoints in order of first appearance.

        Raises:
            MalformedGraphError: If an edge names a vertex outside
                ``vertices``, or the pairs do not form a simple graph.
        """
        pairs = list(pairs)
        if vertices is None:
            vertices = [x for pair in pairs for x in pair]
        graph = cls(vertices)
        for u, v in pairs:
            graph.add_edge(u, v)
        return graph

    def __len__(self) -> int:
        """Return number of vertices."""
        return len(self._adjacency)

    def __iter__(self) -> Iterator[int]:
        """Iterate over vertex ids."""
        return iter(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"

    def add_vertex(self, vertex: int) -> int:
        """Add a vertex; adding an existing vertex is a no-op."""
        self._adjacency.setdefault(vertex, {})
        return vertex

    def add_edge(self, u: int, v: int) -> int:
        """Add an edge between two existing vertices.

        Returns:
            Index of the newly added edge.

        Raises:
            MalformedGraphError: If either endpoint is missing, the edge is a
                self loop, or the vertices are already bonded.
        """
        for vertex in (u, v):
            if vertex not in self._adjacency:
                raise MalformedGraphError(
                    f"Edge ({u}, {v}) references unknown vertex {vertex}",
                    vertex=vertex,
                    edge=(u, v),
                )
        if u == v:
            raise MalformedGraphError(
                f"Self loop on vertex {u} is not supported", vertex=u, edge=(u, v)
            )
        if v in self._adjacency[u]:
            raise MalformedGraphError(
                f"Repeated edge ({u}, {v}) is not supported", edge=(u, v)
            )

        idx = self._next_edge
        self._next_edge += 1
        self._edges[idx] = Edge(idx, u, v)
        self._adjacency[u][v] = idx
        self._adjacency[v][u] = idx
        return idx

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex together with all of its incident edges."""
        neighbors = self._neighbor_map(vertex)
        for neighbor, idx in neighbors.items():
            del self._adjacency[neighbor][vertex]
            del self._edges[idx]
        del self._adjacency[vertex]

    def _neighbor_map(self, vertex: int) -> dict[int, int]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise MalformedGraphError(
                f"Vertex {vertex} is not in the graph", vertex=vertex
            ) from None

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def has_edge(self, u: int, v: int) -> bool:
        return u in self._adjacency and v in self._adjacency[u]

    def edge_between(self, u: int, v: int) -> Edge | None:
        """Find the edge between two vertices.

        Returns:
            Edge object if found, None otherwise.
        """
        if u not in self._adjacency:
            return None
        idx = self._adjacency[u].get(v)
        return None if idx is None else self._edges[idx]

    def degree(self, vertex: int) -> int:
        """Number of edges incident to ``vertex``."""
        return len(self._neighbor_map(vertex))

    def neighbors(self, vertex: int) -> Iterator[int]:
        """Iterate over vertices adjacent to ``vertex``."""
        return iter(list(self._neighbor_map(vertex)))

    def incident_edges(self, vertex: int) -> Iterator[Edge]:
        """Iterate over edges incident to ``vertex``."""
        for idx in list(self._neighbor_map(vertex).values()):
            yield self._edges[idx]

    @property
    def vertices(self) -> list[int]:
        """Vertex ids in insertion order."""
        return list(self._adjacency)

    @property
    def edges(self) -> list[Edge]:
        """Edges in index order."""
        return list(self._edges.values())

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def edge_slots(self) -> int:
        """Width of the edge index space (one past the highest index issued)."""
        return self._next_edge

    def copy(self) -> "Self":
        """Create an independent copy with identical vertex and edge ids."""
        graph = type(self)()
        graph._adjacency = {v: dict(nbrs) for v, nbrs in self._adjacency.items()}
        graph._edges = dict(self._edges)
        graph._next_edge = self._next_edge
        return graph

    def connected_components(self) -> list[list[int]]:
        """Find connected components.

        Returns:
            List of components, each being a sorted list of vertex ids.
        """
        visited: set[int] = set()
        components: list[list[int]] = []

        for start in self._adjacency:
            if start in visited:
                continue

            component: list[int] = []
            stack = [start]
            visited.add(start)

            while stack:
                vertex = stack.pop()
                component.append(vertex)

                for neighbor in self._adjacency[vertex]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)

            components.append(sorted(component))

        return components

    @property
    def circuit_rank(self) -> int:
        """Dimension of the cycle space, ``E - V + C``."""
        if not self._adjacency:
            return 0
        return self.num_edges - self.num_vertices + len(self.connected_components())


@dataclass(frozen=True, slots=True)
class Ring:
    """A simple cycle in a graph.

    Two rings are equal when they use the same edges, regardless of the
    vertex the walk starts at or its direction.

    Attributes:
        vertices: Vertex ids in cyclic order. The closing vertex is not
            repeated.
        edges: Indices of the edges the cycle uses.
    """

    vertices: tuple[int, ...] = field(compare=False)
    edges: frozenset[int]

    @property
    def size(self) -> int:
        """Number of vertices (and edges) in the ring."""
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices
