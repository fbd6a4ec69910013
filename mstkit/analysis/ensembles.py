# mstkit/analysis/ensembles.py
from __future__ import annotations

from typing import List, Tuple
import random

from mstkit.core.graph import Graph

SAMPLE_EDGES: List[Tuple[int, int, int]] = [
    (0, 1, 4),
    (0, 2, 3),
    (1, 2, 1),
    (1, 3, 2),
    (2, 3, 4),
    (2, 4, 5),
    (3, 4, 7),
    (3, 5, 3),
    (4, 5, 2),
]


def sample_graph() -> Graph:
    """Six vertices, nine edges; minimum spanning tree weight 11."""
    return Graph.from_edges(6, SAMPLE_EDGES)


def random_weighted_graph(
    n_nodes: int,
    edge_prob: float,
    max_weight: int = 10,
    seed: int = 0,
    connected: bool = True,
) -> Graph:
    """
    Erdos-Renyi style graph with integer weights in [1, max_weight].

    If connected=True, a random Hamiltonian path is laid down first so the
    result is always connected; the remaining pairs are then added with
    probability edge_prob. Small max_weight values give many ties, which is
    what the tie-break tests want.
    """
    if n_nodes < 0:
        raise ValueError("n_nodes must be >= 0")
    if not (0.0 <= edge_prob <= 1.0):
        raise ValueError("edge_prob must be in [0,1].")
    if max_weight < 1:
        raise ValueError("max_weight must be >= 1")

    rng = random.Random(seed)
    g = Graph(n_nodes)
    present = set()

    if connected and n_nodes > 1:
        order = list(range(n_nodes))
        rng.shuffle(order)
        for u, v in zip(order, order[1:]):
            g.add_edge(u, v, rng.randint(1, max_weight))
            present.add((min(u, v), max(u, v)))

    for u in range(n_nodes):
        for v in range(u + 1, n_nodes):
            if (u, v) in present:
                continue
            if rng.random() < edge_prob:
                g.add_edge(u, v, rng.randint(1, max_weight))
    return g


def disconnected_graph(
    block_sizes: List[int],
    edge_prob: float = 0.5,
    max_weight: int = 10,
    seed: int = 0,
) -> Graph:
    """
    Disjoint union of connected random blocks; block i occupies the next
    block_sizes[i] vertex indices.
    """
    rng = random.Random(seed)
    g = Graph(sum(block_sizes))
    offset = 0
    for size in block_sizes:
        block = random_weighted_graph(
            size, edge_prob, max_weight=max_weight, seed=rng.randint(0, 2**31 - 1)
        )
        for e in block.edges:
            g.add_edge(e.src + offset, e.dest + offset, e.weight)
        offset += size
    return g
