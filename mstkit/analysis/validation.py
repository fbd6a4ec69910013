# mstkit/analysis/validation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from mstkit.core.connectivity import components
from mstkit.core.edge import Edge
from mstkit.core.graph import Graph, total_weight
from mstkit.core.repair import split_components
from mstkit.core.unionfind import UnionFind


def is_forest(edges: Sequence[Edge], vertex_count: int) -> bool:
    """True iff `edges` contains no cycle (self-loops count as cycles)."""
    uf = UnionFind(vertex_count)
    for e in edges:
        if not uf.union(e.src, e.dest):
            return False
    return True


def forest_matches_components(graph: Graph, forest: Sequence[Edge]) -> bool:
    """
    A spanning forest of `graph` is acyclic and has exactly |C| - 1 edges
    inside each connected component C of the graph.
    """
    if not is_forest(forest, graph.vertex_count):
        return False
    comp_of: Dict[int, int] = {}
    comps = graph.components()
    for i, comp in enumerate(comps):
        for v in comp:
            comp_of[v] = i

    per_comp = [0] * len(comps)
    for e in forest:
        if comp_of[e.src] != comp_of[e.dest]:
            return False
        per_comp[comp_of[e.src]] += 1
    return all(per_comp[i] == len(c) - 1 for i, c in enumerate(comps))


def cross_check(graph: Graph) -> Dict[str, Any]:
    """
    Run both constructions and compare them.

    Prim only spans the component of vertex 0, so on a disconnected graph its
    edge count equals |component(0)| - 1 while Kruskal covers every component.
    """
    kruskal = graph.kruskal_mst()
    prim = graph.prim_mst()
    n_components = len(graph.components())
    connected = n_components <= 1 and graph.vertex_count > 0

    out: Dict[str, Any] = {
        "vertex_count": graph.vertex_count,
        "edge_count": len(graph),
        "n_components": n_components,
        "connected": connected,
        "kruskal_weight": total_weight(kruskal),
        "prim_weight": total_weight(prim),
        "kruskal_edges": len(kruskal),
        "prim_edges": len(prim),
        "kruskal_is_spanning_tree": graph.is_spanning_tree(kruskal),
        "prim_is_spanning_tree": graph.is_spanning_tree(prim),
    }
    if connected:
        out["agree"] = out["kruskal_weight"] == out["prim_weight"]
    else:
        out["agree"] = out["kruskal_edges"] == graph.vertex_count - n_components
    return out


def min_crossing_weight(graph: Graph, mst: Sequence[Edge], removed: Edge) -> Optional[int]:
    """Brute-force minimum weight over all edges crossing the cut, or None."""
    side_a, side_b = split_components(mst, removed)
    if side_a & side_b:
        return None
    weights = [
        e.weight
        for e in graph.edges
        if e != removed
        and ((e.src in side_a and e.dest in side_b) or (e.src in side_b and e.dest in side_a))
    ]
    return min(weights) if weights else None


@dataclass
class RepairOutcome:
    removed: Edge
    replacement: Optional[Edge]
    weight_before: int
    weight_after: Optional[int]
    valid_tree: bool
    optimal: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "removed": str(self.removed),
            "replacement": None if self.replacement is None else str(self.replacement),
            "weight_before": self.weight_before,
            "weight_after": self.weight_after,
            "valid_tree": self.valid_tree,
            "optimal": self.optimal,
        }


def repair_sweep(graph: Graph, mst: Optional[Sequence[Edge]] = None) -> List[RepairOutcome]:
    """
    Remove each tree edge in turn and repair it.

    optimal:     replacement weight equals the brute-force crossing minimum
                 (or both are absent).
    valid_tree:  repaired edge list is a spanning tree; for a missing
                 replacement it is True iff the graph really is cut, i.e.
                 the graph without that edge is disconnected.
    """
    if mst is None:
        mst = graph.kruskal_mst()
    mst = list(mst)
    before = total_weight(mst)
    outcomes: List[RepairOutcome] = []

    for removed in mst:
        repaired = graph.repair_mst(mst, removed)
        expected = min_crossing_weight(graph, mst, removed)

        if repaired is None:
            rest = [e for e in graph.edges if e != removed]
            outcomes.append(
                RepairOutcome(
                    removed=removed,
                    replacement=None,
                    weight_before=before,
                    weight_after=None,
                    valid_tree=len(components(rest, graph.vertex_count)) > 1,
                    optimal=expected is None,
                )
            )
            continue

        replacement = repaired[-1]
        outcomes.append(
            RepairOutcome(
                removed=removed,
                replacement=replacement,
                weight_before=before,
                weight_after=total_weight(repaired),
                valid_tree=graph.is_spanning_tree(repaired),
                optimal=expected is not None and replacement.weight == expected,
            )
        )
    return outcomes
