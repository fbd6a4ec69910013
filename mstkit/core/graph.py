# mstkit/core/graph.py
from __future__ import annotations

import heapq
import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from mstkit.core import connectivity, repair
from mstkit.core.edge import Edge, Vertex
from mstkit.core.errors import InvalidVertexError, check_vertex
from mstkit.core.unionfind import UnionFind

logger = logging.getLogger(__name__)

__all__ = ["Edge", "Graph", "InvalidVertexError", "Vertex", "total_weight"]


def total_weight(edges: Iterable[Edge]) -> int:
    return sum(e.weight for e in edges)


class Graph:
    """
    Weighted undirected graph over a fixed vertex set [0, vertex_count).

    Edges are append-only and keep their insertion order. The adjacency view
    is derived from the edge sequence on demand and dropped whenever an edge
    is added, so it can never drift from it.

    Parallel edges and self-loops are stored as given; MST algorithms never
    select a self-loop.
    """

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise ValueError("vertex_count must be >= 0")
        self._vertex_count = vertex_count
        self._edges: List[Edge] = []
        self._adjacency: Optional[List[Tuple[Edge, ...]]] = None

    # --- basic construction ---

    def add_edge(self, src: Vertex, dest: Vertex, weight: int) -> Edge:
        check_vertex(src, self._vertex_count)
        check_vertex(dest, self._vertex_count)
        edge = Edge(src, dest, weight)
        self._edges.append(edge)
        self._adjacency = None
        return edge

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Tuple[Vertex, Vertex, int]]) -> "Graph":
        g = cls(vertex_count)
        for src, dest, weight in edges:
            g.add_edge(src, dest, weight)
        return g

    # --- accessors ---

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def adjacency(self) -> List[Tuple[Edge, ...]]:
        """
        Incident edges per vertex, in edge insertion order. A self-loop is
        listed once at its vertex.
        """
        if self._adjacency is None:
            adj: List[List[Edge]] = [[] for _ in range(self._vertex_count)]
            for e in self._edges:
                adj[e.src].append(e)
                if e.dest != e.src:
                    adj[e.dest].append(e)
            self._adjacency = [tuple(es) for es in adj]
        return list(self._adjacency)

    def incident_edges(self, v: Vertex) -> Tuple[Edge, ...]:
        check_vertex(v, self._vertex_count)
        return self.adjacency()[v]

    def _adjacency_indexed(self) -> List[List[Tuple[int, Edge]]]:
        adj: List[List[Tuple[int, Edge]]] = [[] for _ in range(self._vertex_count)]
        for i, e in enumerate(self._edges):
            adj[e.src].append((i, e))
            if e.dest != e.src:
                adj[e.dest].append((i, e))
        return adj

    # --- minimum spanning trees ---

    def kruskal_mst(self) -> List[Edge]:
        """
        Kruskal's algorithm.

        Edges are taken by ascending weight; equal weights keep insertion order
        (sorted() is stable), which fixes which of several equal-weight trees
        is returned. Every edge is scanned, so a disconnected graph yields its
        minimum spanning forest (fewer than vertex_count - 1 edges).
        """
        ordered = sorted(self._edges, key=lambda e: e.weight)
        uf = UnionFind(self._vertex_count)
        mst: List[Edge] = []

        for e in ordered:
            if uf.union(e.src, e.dest):
                mst.append(e)

        logger.debug(
            "kruskal: %d edges, %d components, weight %s",
            len(mst), uf.component_count, total_weight(mst),
        )
        return mst

    def prim_mst(self, start: Vertex = 0) -> List[Edge]:
        """
        Prim's algorithm grown from `start`.

        The heap is keyed by (weight, insertion index), so ties resolve in
        insertion order. Only the component containing `start` is spanned; the
        caller checks len(result) == vertex_count - 1 to confirm connectivity.
        """
        if self._vertex_count == 0:
            return []
        check_vertex(start, self._vertex_count)

        adj = self._adjacency_indexed()
        visited = [False] * self._vertex_count
        visited[start] = True
        heap: List[Tuple[int, int, Edge]] = [(e.weight, i, e) for i, e in adj[start]]
        heapq.heapify(heap)
        mst: List[Edge] = []

        while heap and len(mst) < self._vertex_count - 1:
            _, _, e = heapq.heappop(heap)
            if visited[e.src] and visited[e.dest]:
                continue

            mst.append(e)
            new_vertex = e.dest if visited[e.src] else e.src
            visited[new_vertex] = True

            for i, adj_edge in adj[new_vertex]:
                if not visited[adj_edge.other(new_vertex)]:
                    heapq.heappush(heap, (adj_edge.weight, i, adj_edge))

        logger.debug("prim from %d: %d edges, weight %s", start, len(mst), total_weight(mst))
        return mst

    # --- repair after deleting a tree edge ---

    def _check_edge(self, e: Edge) -> None:
        check_vertex(e.src, self._vertex_count)
        check_vertex(e.dest, self._vertex_count)

    def find_replacement_edge(self, mst: Sequence[Edge], removed_edge: Edge) -> Optional[Edge]:
        self._check_edge(removed_edge)
        return repair.find_replacement_edge(self._edges, mst, removed_edge)

    def repair_mst(self, mst: Sequence[Edge], removed_edge: Edge) -> Optional[List[Edge]]:
        self._check_edge(removed_edge)
        return repair.repair_mst(self._edges, mst, removed_edge)

    # --- connectivity ---

    def connected_component(self, edges: Iterable[Edge], start: Vertex) -> Set[Vertex]:
        return connectivity.connected_component(edges, start, self._vertex_count)

    def components(self, edges: Optional[Iterable[Edge]] = None) -> List[Set[Vertex]]:
        """Components over `edges` (default: all graph edges)."""
        if edges is None:
            edges = self._edges
        return connectivity.components(edges, self._vertex_count)

    def is_spanning_tree(self, edges: Iterable[Edge]) -> bool:
        return connectivity.is_spanning_tree(edges, self._vertex_count)
