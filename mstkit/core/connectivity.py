# mstkit/core/connectivity.py
from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, List, Optional, Set

from mstkit.core.errors import check_vertex
from mstkit.core.edge import Edge, Vertex


def build_adjacency(edges: Iterable[Edge]) -> Dict[Vertex, List[Vertex]]:
    """
    Undirected neighbor lists projected from an edge subset.
    Neighbor order follows edge order.
    """
    adj: Dict[Vertex, List[Vertex]] = {}
    for e in edges:
        adj.setdefault(e.src, []).append(e.dest)
        adj.setdefault(e.dest, []).append(e.src)
    return adj


def connected_component(
    edges: Iterable[Edge],
    start: Vertex,
    vertex_count: Optional[int] = None,
) -> Set[Vertex]:
    """
    BFS from `start` over the given edges only.

    The result always contains `start`, even when no edge touches it.
    If vertex_count is given, `start` must lie in [0, vertex_count).
    """
    check_vertex(start, vertex_count)
    adj = build_adjacency(edges)

    seen: Set[Vertex] = {start}
    q: Deque[Vertex] = deque([start])
    while q:
        v = q.popleft()
        for w in adj.get(v, ()):
            if w not in seen:
                seen.add(w)
                q.append(w)
    return seen


def components(edges: Iterable[Edge], vertex_count: int) -> List[Set[Vertex]]:
    """
    All connected components of ([0, vertex_count), edges), ordered by their
    smallest vertex.
    """
    edges = list(edges)
    adj = build_adjacency(edges)
    assigned: Set[Vertex] = set()
    out: List[Set[Vertex]] = []

    for s in range(vertex_count):
        if s in assigned:
            continue
        comp = {s}
        q: Deque[Vertex] = deque([s])
        while q:
            v = q.popleft()
            for w in adj.get(v, ()):
                if w not in comp:
                    comp.add(w)
                    q.append(w)
        assigned |= comp
        out.append(comp)
    return out


def is_spanning_tree(edges: Iterable[Edge], vertex_count: int) -> bool:
    """
    True iff `edges` has exactly vertex_count - 1 members and connects every
    vertex. An empty vertex set has no spanning tree.
    """
    edges = list(edges)
    if vertex_count <= 0:
        return False
    if len(edges) != vertex_count - 1:
        return False
    return len(connected_component(edges, 0, vertex_count)) == vertex_count
