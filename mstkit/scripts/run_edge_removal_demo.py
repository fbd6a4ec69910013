# mstkit/scripts/run_edge_removal_demo.py
from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from mstkit.analysis.ensembles import random_weighted_graph, sample_graph
from mstkit.core.edge import Edge
from mstkit.core.graph import Graph, total_weight
from mstkit.core.repair import split_components, without_edge

logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """
    removal: "random", "first", or an integer position in the tree.
    graph:   "sample" (the six-vertex example) or "random".
    """
    graph: str = "sample"
    algorithm: str = "kruskal"
    removal: Union[str, int] = "random"
    seed: int = 0

    # only used for graph="random"
    n_nodes: int = 10
    edge_prob: float = 0.3
    max_weight: int = 10

    def __post_init__(self) -> None:
        if self.graph not in ("sample", "random"):
            raise ValueError("graph must be 'sample' or 'random'")
        if self.algorithm not in ("kruskal", "prim"):
            raise ValueError("algorithm must be 'kruskal' or 'prim'")
        if isinstance(self.removal, str) and self.removal not in ("random", "first"):
            try:
                self.removal = int(self.removal)
            except ValueError:
                raise ValueError("removal must be 'random', 'first' or a tree position") from None
        if isinstance(self.removal, int) and self.removal < 0:
            raise ValueError("removal position must be >= 0.")


def build_graph(cfg: DemoConfig) -> Graph:
    if cfg.graph == "sample":
        return sample_graph()
    return random_weighted_graph(cfg.n_nodes, cfg.edge_prob, max_weight=cfg.max_weight, seed=cfg.seed)


def pick_removed_edge(mst: List[Edge], removal: Union[str, int], rng: random.Random) -> Edge:
    if removal == "random":
        return rng.choice(mst)
    if removal == "first":
        return mst[0]
    return edge_at(mst, int(removal))


def edge_at(mst: List[Edge], position: int) -> Edge:
    if not (0 <= position < len(mst)):
        raise ValueError(f"removal position {position} outside tree of {len(mst)} edges")
    return mst[position]


def _tree_report(edges: List[Edge]) -> Dict[str, Any]:
    return {"edges": [str(e) for e in edges], "total_weight": total_weight(edges)}


def remove_and_replace(graph: Graph, mst: List[Edge], removed: Edge) -> Dict[str, Any]:
    logger.info("Removing edge %s", removed)
    remaining = without_edge(mst, removed)
    side_a, side_b = split_components(mst, removed)
    replacement = graph.find_replacement_edge(mst, removed)

    report: Dict[str, Any] = {
        "removed": str(removed),
        "remaining": [str(e) for e in remaining],
        "components": [sorted(side_a), sorted(side_b)],
        "replacement": None,
        "repaired": None,
        "repaired_valid": False,
    }
    if replacement is None:
        logger.info("No replacement edge found; graph cannot be reconnected")
        return report

    repaired = remaining + [replacement]
    report["replacement"] = str(replacement)
    report["repaired"] = _tree_report(repaired)
    report["repaired_valid"] = graph.is_spanning_tree(repaired)
    logger.info("Replacement %s, new weight %d", replacement, total_weight(repaired))
    return report


def run_demo(cfg: DemoConfig) -> Dict[str, Any]:
    rng = random.Random(cfg.seed)
    graph = build_graph(cfg)
    mst = graph.kruskal_mst() if cfg.algorithm == "kruskal" else graph.prim_mst()
    logger.info("Built %s tree with %d edges", cfg.algorithm, len(mst))

    result: Dict[str, Any] = {
        "vertex_count": graph.vertex_count,
        "algorithm": cfg.algorithm,
        "original": _tree_report(mst),
        "removals": [],
    }
    if not mst:
        logger.info("No edges in tree to remove")
        return result

    removed = pick_removed_edge(mst, cfg.removal, rng)
    result["removals"].append(remove_and_replace(graph, mst, removed))
    if cfg.removal != "first":
        result["removals"].append(remove_and_replace(graph, mst, mst[0]))
    return result


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Remove one tree edge and repair the minimum spanning tree")
    parser.add_argument("--graph", choices=["sample", "random"], default="sample")
    parser.add_argument("--algorithm", choices=["kruskal", "prim"], default="kruskal")
    parser.add_argument("--removal", default="random", help="'random', 'first' or a tree position")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--n-nodes", type=int, default=10)
    parser.add_argument("--edge-prob", type=float, default=0.3)
    parser.add_argument("--max-weight", type=int, default=10)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s:%(levelname)s:%(message)s")
    logger.info("Arguments: %s", args)

    try:
        cfg = DemoConfig(
            graph=args.graph,
            algorithm=args.algorithm,
            removal=args.removal,
            seed=args.seed,
            n_nodes=args.n_nodes,
            edge_prob=args.edge_prob,
            max_weight=args.max_weight,
        )
        result = run_demo(cfg)
    except ValueError as e:
        parser.error(str(e))
    print(json.dumps(result, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
