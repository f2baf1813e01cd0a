"""
Exhaustive ring perception by path graph reduction.

This is the algorithm of Hanser, Jauffret and Kaufmann, "A New Algorithm for
Exhaustive Ring Perception in a Molecular Graph", J. Chem. Inf. Comput. Sci.
1996, 36, 1146-1152.

The molecular graph is first turned into a path graph, where every bond is a
two vertex path. Vertices are then eliminated one at a time: each pair of
paths ending at the eliminated vertex is fused into a longer path, and a
fusion whose two ends meet again is a ring. When every vertex is gone, every
simple cycle of the graph has been reported exactly once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from ringfinder.exceptions import MalformedGraphError, SearchLimitExceeded
from ringfinder.types import Ring

if TYPE_CHECKING:
    from ringfinder.types import Graph

Path = tuple[int, ...]


def intersection_size(path1: Sequence[int], path2: Sequence[int]) -> int:
    """Number of vertices two paths have in common."""
    return len(set(path1) & set(path2))


def join_paths(path1: Path, path2: Path, vertex: int) -> Path:
    """Fuse two paths that both end at ``vertex``.

    ``path1`` is oriented to end at the joint and ``path2`` to start at it,
    so the result runs from the far end of ``path1`` to the far end of
    ``path2`` with the joint listed once.

    Raises:
        MalformedGraphError: If ``vertex`` is not an end of both paths.
    """
    if path1[-1] != vertex:
        path1 = path1[::-1]
    if path2[0] != vertex:
        path2 = path2[::-1]
    if path1[-1] != vertex or path2[0] != vertex:
        raise MalformedGraphError(
            f"Cannot join paths {path1} and {path2} at vertex {vertex}", vertex=vertex
        )
    return path1 + path2[1:]


def _ends_at(path: Path, vertex: int) -> bool:
    return path[0] == vertex or path[-1] == vertex


class PathGraphReducer:
    """Find all simple cycles of a graph.

    Args:
        max_ring_size: Largest ring to report. Open paths with more vertices
            than this are dropped as soon as they form, which keeps the
            search small on large fused systems. None means no limit.
        max_iterations: Maximum number of vertex eliminations before the
            search gives up with :class:`SearchLimitExceeded`. None means
            no limit.
        logger: Logger that receives debug tracing. Defaults to this
            module's logger.

    Example:
        >>> g = Graph.from_edges([(0, 1), (1, 2), (2, 0), (1, 3), (3, 2)])
        >>> len(PathGraphReducer().find_all_rings(g))
        3
    """

    def __init__(
        self,
        max_ring_size: int | None = None,
        max_iterations: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_ring_size is not None and max_ring_size < 3:
            raise ValueError(f"max_ring_size must be at least 3, got {max_ring_size}")
        if max_iterations is not None and max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")
        self.max_ring_size = max_ring_size
        self.max_iterations = max_iterations
        self.logger = logger or logging.getLogger(__name__)

    def find_all_rings(self, graph: "Graph") -> list[Ring]:
        """Find every simple cycle in ``graph``.

        The graph is not modified; the search runs on a copy.

        Args:
            graph: Graph to analyze.

        Returns:
            Rings in discovery order. No two rings share the same edge set.

        Raises:
            MalformedGraphError: If the graph is not a simple graph over its
                own vertex set.
            SearchLimitExceeded: If ``max_iterations`` is exceeded.
        """
        _validate(graph)
        log = self.logger

        work = graph.copy()
        log.debug("Vertex count before pruning: %d", work.num_vertices)
        _prune_acyclic(work)
        log.debug("Vertex count after pruning: %d", work.num_vertices)

        paths: list[Path] = [(edge.u, edge.v) for edge in work.edges]
        log.debug("Edge count: %d, path count: %d", work.num_edges, len(paths))

        rings: list[Ring] = []
        seen: set[frozenset[int]] = set()
        steps = 0

        while paths:
            vertex = _select_vertex(work, paths)
            if vertex is None:
                break
            if self.max_iterations is not None and steps >= self.max_iterations:
                raise SearchLimitExceeded(
                    f"Ring search exceeded {self.max_iterations} elimination steps",
                    limit=self.max_iterations,
                )
            steps += 1
            log.debug("Selected vertex %d (degree %d) for removal", vertex, work.degree(vertex))

            paths, closures = self._remove(vertex, work, paths)
            for ring in _detect_rings(closures, graph):
                if self.max_ring_size is not None and ring.size > self.max_ring_size:
                    continue
                if ring.edges in seen:
                    continue
                seen.add(ring.edges)
                rings.append(ring)
                log.debug("Found ring %s", ring.vertices)

        log.debug("Found %d rings in %d steps", len(rings), steps)
        return rings

    def _remove(
        self, vertex: int, work: "Graph", paths: list[Path]
    ) -> tuple[list[Path], list[Path]]:
        """Eliminate ``vertex`` from the path graph.

        Every pair of paths ending at ``vertex`` is fused. Pairs sharing only
        the joint give a new path, pairs that share one more vertex give a
        ring candidate, and pairs that overlap further are skipped. All
        paths ending at ``vertex`` are then dropped and the vertex is
        removed from the working graph.

        Returns:
            The new path list and the ring candidates.

        Raises:
            MalformedGraphError: If ``vertex`` is not in the working graph.
        """
        work.remove_vertex(vertex)

        incident = [i for i, path in enumerate(paths) if _ends_at(path, vertex)]
        new_paths: list[Path] = []
        closures: list[Path] = []

        for a, i in enumerate(incident):
            path1 = paths[i]
            for j in incident[a + 1:]:
                path2 = paths[j]
                shared = intersection_size(path1, path2)
                if shared >= 3:
                    continue
                union = join_paths(path1, path2, vertex)
                self.logger.debug("Joining %s and %s into %s", path1, path2, union)
                if shared == 1:
                    if self.max_ring_size is None or len(union) <= self.max_ring_size:
                        new_paths.append(union)
                else:
                    closures.append(union)

        dropped = set(incident)
        remaining = [path for i, path in enumerate(paths) if i not in dropped]
        remaining.extend(new_paths)
        return remaining, closures


def _validate(graph: "Graph") -> None:
    pairs: set[tuple[int, int]] = set()
    for edge in graph.edges:
        for vertex in (edge.u, edge.v):
            if not graph.has_vertex(vertex):
                raise MalformedGraphError(
                    f"Edge {edge.idx} references unknown vertex {vertex}",
                    vertex=vertex,
                    edge=(edge.u, edge.v),
                )
        if edge.u == edge.v:
            raise MalformedGraphError(
                f"Self loop on vertex {edge.u} is not supported",
                vertex=edge.u,
                edge=(edge.u, edge.v),
            )
        if edge.key in pairs:
            raise MalformedGraphError(
                f"Repeated edge {edge.key} is not supported", edge=edge.key
            )
        pairs.add(edge.key)


def _prune_acyclic(work: "Graph") -> None:
    """Strip vertices of degree 0 or 1 until none are left."""
    removed = True
    while removed:
        removed = False
        for vertex in work.vertices:
            if work.degree(vertex) <= 1:
                work.remove_vertex(vertex)
                removed = True


def _select_vertex(work: "Graph", paths: list[Path]) -> int | None:
    """Pick the lowest degree vertex that is still the end of some path.

    Ties go to the vertex seen first in the graph's vertex order.
    """
    ends: set[int] = set()
    for path in paths:
        ends.add(path[0])
        ends.add(path[-1])

    best: int | None = None
    best_degree = 0
    for vertex in work.vertices:
        if vertex not in ends:
            continue
        degree = work.degree(vertex)
        if best is None or degree < best_degree:
            best = vertex
            best_degree = degree
    return best


def _detect_rings(closures: list[Path], graph: "Graph") -> list[Ring]:
    """Turn closed paths into rings, resolving edges against ``graph``."""
    rings: list[Ring] = []
    for path in closures:
        if len(path) <= 3 or path[0] != path[-1]:
            continue
        edges: set[int] = set()
        for u, v in zip(path, path[1:]):
            edge = graph.edge_between(u, v)
            if edge is None:
                raise MalformedGraphError(f"Ring {path} uses missing edge ({u}, {v})", edge=(u, v))
            edges.add(edge.idx)
        rings.append(Ring(vertices=path[:-1], edges=frozenset(edges)))
    return rings


def find_all_rings(graph: "Graph", max_ring_size: int | None = None) -> list[Ring]:
    """Find every simple cycle in ``graph``.

    Args:
        graph: Graph to analyze.
        max_ring_size: Largest ring to report (default None = no limit).

    Returns:
        List of rings in discovery order.

    Example:
        >>> g = Graph.from_edges([(0, 1), (1, 2), (2, 3), (3, 0)])
        >>> [ring.size for ring in find_all_rings(g)]
        [4]
    """
    return PathGraphReducer(max_ring_size=max_ring_size).find_all_rings(graph)
