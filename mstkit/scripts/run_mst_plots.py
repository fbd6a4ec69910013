# mstkit/scripts/run_mst_plots.py
from __future__ import annotations

import argparse
import json
import logging
import math
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402

from mstkit.analysis.ensembles import random_weighted_graph, sample_graph  # noqa: E402
from mstkit.core.edge import Edge  # noqa: E402
from mstkit.core.graph import Graph, total_weight  # noqa: E402
from mstkit.scripts.run_edge_removal_demo import edge_at  # noqa: E402

logger = logging.getLogger(__name__)


def circle_layout(n: int) -> Dict[int, Tuple[float, float]]:
    if n == 1:
        return {0: (0.0, 0.0)}
    return {v: (math.cos(2 * math.pi * v / n), math.sin(2 * math.pi * v / n)) for v in range(n)}


def draw_tree(
    ax: Axes,
    graph: Graph,
    tree: Sequence[Edge],
    title: str,
    highlight: Optional[Edge] = None,
) -> None:
    """Graph edges in light grey, tree edges in black, `highlight` in red."""
    pos = circle_layout(graph.vertex_count)
    in_tree = set(tree)

    for e in graph.edges:
        if e.is_self_loop():
            continue
        (x0, y0), (x1, y1) = pos[e.src], pos[e.dest]
        if e == highlight:
            style = dict(color="tab:red", lw=2.5, zorder=3)
        elif e in in_tree:
            style = dict(color="black", lw=2.0, zorder=2)
        else:
            style = dict(color="0.8", lw=1.0, ls="--", zorder=1)
        ax.plot([x0, x1], [y0, y1], **style)
        ax.text((x0 + x1) / 2, (y0 + y1) / 2, str(e.weight), fontsize=8, ha="center", va="center",
                bbox=dict(boxstyle="round,pad=0.1", fc="white", ec="none"))

    xs = [pos[v][0] for v in range(graph.vertex_count)]
    ys = [pos[v][1] for v in range(graph.vertex_count)]
    ax.scatter(xs, ys, s=300, c="tab:blue", zorder=4)
    for v in range(graph.vertex_count):
        ax.text(pos[v][0], pos[v][1], str(v), color="white", ha="center", va="center", zorder=5)

    ax.set_title(f"{title} (weight {total_weight(tree)})")
    ax.set_aspect("equal")
    ax.axis("off")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Plot a minimum spanning tree before and after repair")
    parser.add_argument("--graph", choices=["sample", "random"], default="sample")
    parser.add_argument("--n-nodes", type=int, default=8)
    parser.add_argument("--edge-prob", type=float, default=0.4)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--position", type=int, default=0, help="tree position of the edge to remove")
    parser.add_argument("--outdir", default=str(Path("results") / "mst_plots"))
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s:%(levelname)s:%(message)s")

    if args.graph == "sample":
        graph = sample_graph()
    else:
        graph = random_weighted_graph(args.n_nodes, args.edge_prob, seed=args.seed)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")

    mst = graph.kruskal_mst()
    if not mst:
        logger.info("Graph has no tree edges; nothing to plot")
        return
    try:
        removed = edge_at(mst, args.position)
    except ValueError as e:
        parser.error(str(e))
    repaired = graph.repair_mst(mst, removed)
    replacement = None if repaired is None else repaired[-1]

    fig, axes = plt.subplots(1, 2, figsize=(11, 5.5))
    draw_tree(axes[0], graph, mst, "Minimum spanning tree", highlight=removed)
    if repaired is None:
        draw_tree(axes[1], graph, [e for e in mst if e != removed], "No replacement: disconnected")
    else:
        draw_tree(axes[1], graph, repaired, "Repaired tree", highlight=replacement)
    fig.tight_layout()

    png_path = outdir / f"mst_repair_{stamp}.png"
    fig.savefig(png_path, dpi=160)
    plt.close(fig)

    out = {
        "removed": str(removed),
        "replacement": None if replacement is None else str(replacement),
        "weight_before": total_weight(mst),
        "weight_after": None if repaired is None else total_weight(repaired),
        "plot": str(png_path),
    }
    print(json.dumps(out, indent=2))
    logger.info("Saved %s", png_path)


if __name__ == "__main__":
    main()
