# mstkit/verification/test_scripts.py
import json

import pytest

from mstkit.scripts.run_edge_removal_demo import DemoConfig, main as demo_main, run_demo
from mstkit.scripts.run_mst_plots import main as plots_main
from mstkit.scripts.run_repair_sweep import SweepConfig, run_sweep


def test_demo_first_edge_on_sample_graph():
    result = run_demo(DemoConfig(removal="first"))

    assert result["original"]["total_weight"] == 11
    assert len(result["removals"]) == 1

    rep = result["removals"][0]
    assert rep["removed"] == "1 - 2 (weight: 1)"
    assert rep["components"] == [[1, 3, 4, 5], [0, 2]]
    assert rep["replacement"] == "0 - 1 (weight: 4)"
    assert rep["repaired"]["total_weight"] == 14
    assert rep["repaired_valid"]


def test_demo_random_removal_also_reports_first_edge():
    result = run_demo(DemoConfig(algorithm="prim", removal="random", seed=3))

    assert len(result["removals"]) == 2
    first = result["removals"][1]
    assert first["removed"] == "0 - 2 (weight: 3)"
    assert first["repaired"]["total_weight"] == 12
    assert all(r["repaired_valid"] for r in result["removals"])


def test_demo_config_validation():
    assert DemoConfig(removal="2").removal == 2
    with pytest.raises(ValueError):
        DemoConfig(removal="middle")
    with pytest.raises(ValueError):
        DemoConfig(algorithm="boruvka")
    with pytest.raises(ValueError):
        DemoConfig(graph="grid")


def test_demo_cli_prints_json(capsys):
    demo_main(["--removal", "0", "--log-level", "WARNING"])
    out = json.loads(capsys.readouterr().out)
    assert out["removals"][0]["replacement"] == "0 - 1 (weight: 4)"


def test_demo_on_edgeless_graph():
    result = run_demo(DemoConfig(graph="random", n_nodes=1))
    assert result["original"]["edges"] == []
    assert result["removals"] == []


def test_repair_sweep_is_clean():
    summary = run_sweep(SweepConfig(n_graphs=4, n_nodes=9, edge_prob=0.3))

    assert summary["cross_check_agree"] == 4
    assert summary["repairs"] == 4 * 8
    assert summary["repairs_valid"] == summary["repairs"]
    assert summary["repairs_optimal"] == summary["repairs"]


def test_sweep_config_validation():
    with pytest.raises(ValueError):
        SweepConfig(n_graphs=0)
    with pytest.raises(ValueError):
        SweepConfig(edge_prob=1.5)


def test_plot_script_writes_png(tmp_path, capsys):
    plots_main(["--outdir", str(tmp_path)])
    out = json.loads(capsys.readouterr().out)

    assert out["weight_before"] == 11
    assert out["weight_after"] == 14
    assert list(tmp_path.glob("mst_repair_*.png"))


def test_demo_rejects_out_of_range_positions():
    with pytest.raises(ValueError):
        DemoConfig(removal="-1")
    with pytest.raises(ValueError):
        run_demo(DemoConfig(removal=99))
    assert run_demo(DemoConfig(removal=4))["removals"][0]["removed"] == "3 - 5 (weight: 3)"


def test_cli_reports_bad_position_as_usage_error(tmp_path):
    with pytest.raises(SystemExit) as info:
        demo_main(["--removal", "99", "--log-level", "WARNING"])
    assert info.value.code == 2

    with pytest.raises(SystemExit) as info:
        plots_main(["--outdir", str(tmp_path), "--position", "5"])
    assert info.value.code == 2
    assert not list(tmp_path.glob("*.png"))
