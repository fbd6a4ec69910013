# mstkit/core/repair.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set, Tuple

from mstkit.core.connectivity import connected_component
from mstkit.core.edge import Edge, Vertex

logger = logging.getLogger(__name__)


def without_edge(mst: Sequence[Edge], removed: Edge) -> List[Edge]:
    """
    Copy of `mst` minus the first edge equal to `removed`.
    Unchanged copy if `removed` is absent.
    """
    remaining = list(mst)
    try:
        remaining.remove(removed)
    except ValueError:
        logger.debug("Edge %s is not part of the given tree", removed)
    return remaining


def split_components(mst: Sequence[Edge], removed: Edge) -> Tuple[Set[Vertex], Set[Vertex]]:
    """
    The two vertex sets left after deleting `removed` from the tree:
    (side reachable from removed.src, side reachable from removed.dest).
    """
    remaining = without_edge(mst, removed)
    side_a = connected_component(remaining, removed.src)
    side_b = connected_component(remaining, removed.dest)
    return side_a, side_b


def find_replacement_edge(
    edges: Sequence[Edge],
    mst: Sequence[Edge],
    removed: Edge,
) -> Optional[Edge]:
    """
    Cheapest edge of `edges` (other than `removed`) that reconnects the two
    halves of `mst` once `removed` is deleted.

    Scans every graph edge, not only tree edges. Among equal weights the first
    one in `edges` order wins. Returns None when nothing crosses the cut,
    i.e. the graph falls apart without `removed`, and also when `removed` is
    not a tree edge (including a tree edge given with its endpoints swapped),
    since then no cut exists.
    """
    side_a, side_b = split_components(mst, removed)
    if side_a & side_b:
        logger.debug("Edge %s does not split the tree; no replacement", removed)
        return None

    best: Optional[Edge] = None
    for e in edges:
        if e == removed:
            continue
        crosses = (e.src in side_a and e.dest in side_b) or (e.src in side_b and e.dest in side_a)
        if crosses and (best is None or e.weight < best.weight):
            best = e

    logger.debug(
        "Cut |A|=%d |B|=%d after removing %s -> replacement %s",
        len(side_a), len(side_b), removed, best,
    )
    return best


def repair_mst(
    edges: Sequence[Edge],
    mst: Sequence[Edge],
    removed: Edge,
) -> Optional[List[Edge]]:
    """
    New tree (mst minus `removed`, plus the replacement edge appended), or
    None if no replacement exists. `mst` itself is left untouched.
    """
    replacement = find_replacement_edge(edges, mst, removed)
    if replacement is None:
        return None
    repaired = without_edge(mst, removed)
    repaired.append(replacement)
    return repaired
