# mstkit/scripts/run_repair_sweep.py
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from mstkit.analysis.ensembles import random_weighted_graph
from mstkit.analysis.validation import cross_check, repair_sweep

logger = logging.getLogger(__name__)


@dataclass
class SweepConfig:
    n_graphs: int = 20
    n_nodes: int = 12
    edge_prob: float = 0.3
    max_weight: int = 5
    connected: bool = True
    random_seed: int = 42

    def __post_init__(self) -> None:
        if self.n_graphs < 1:
            raise ValueError("n_graphs must be >= 1.")
        if self.n_nodes < 1:
            raise ValueError("n_nodes must be >= 1.")
        if not (0.0 <= self.edge_prob <= 1.0):
            raise ValueError("edge_prob must be in [0,1].")


def run_sweep(cfg: SweepConfig) -> Dict[str, Any]:
    n_checks = 0
    n_valid = 0
    n_optimal = 0
    n_no_replacement = 0
    n_agree = 0

    for i in range(cfg.n_graphs):
        seed = cfg.random_seed + i
        g = random_weighted_graph(
            cfg.n_nodes, cfg.edge_prob, max_weight=cfg.max_weight, seed=seed, connected=cfg.connected
        )
        cc = cross_check(g)
        n_agree += int(cc["agree"])
        if not cc["agree"]:
            logger.warning("Kruskal/Prim disagree on graph seed=%d: %s", seed, cc)

        for outcome in repair_sweep(g):
            n_checks += 1
            n_valid += int(outcome.valid_tree)
            n_optimal += int(outcome.optimal)
            n_no_replacement += int(outcome.replacement is None)
            if not (outcome.valid_tree and outcome.optimal):
                logger.warning("Bad repair on graph seed=%d: %s", seed, outcome.as_dict())

    return {
        "config": asdict(cfg),
        "graphs": cfg.n_graphs,
        "cross_check_agree": n_agree,
        "repairs": n_checks,
        "repairs_valid": n_valid,
        "repairs_optimal": n_optimal,
        "no_replacement": n_no_replacement,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Repair every tree edge of many random graphs")
    parser.add_argument("--n-graphs", type=int, default=20)
    parser.add_argument("--n-nodes", type=int, default=12)
    parser.add_argument("--edge-prob", type=float, default=0.3)
    parser.add_argument("--max-weight", type=int, default=5)
    parser.add_argument("--allow-disconnected", action="store_true")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s:%(levelname)s:%(message)s")

    cfg = SweepConfig(
        n_graphs=args.n_graphs,
        n_nodes=args.n_nodes,
        edge_prob=args.edge_prob,
        max_weight=args.max_weight,
        connected=not args.allow_disconnected,
        random_seed=args.seed,
    )
    print(json.dumps(run_sweep(cfg), indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
