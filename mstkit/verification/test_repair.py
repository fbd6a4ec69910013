# mstkit/verification/test_repair.py
import pytest

from mstkit.analysis.ensembles import random_weighted_graph, sample_graph
from mstkit.analysis.validation import min_crossing_weight, repair_sweep
from mstkit.core.graph import Edge, Graph, InvalidVertexError, total_weight
from mstkit.core.repair import split_components, without_edge


def test_sample_graph_replacement_for_lightest_edge():
    g = sample_graph()
    mst = g.kruskal_mst()
    removed = Edge(1, 2, 1)

    side_a, side_b = split_components(mst, removed)
    assert side_a == {1, 3, 4, 5}
    assert side_b == {0, 2}

    # (0, 2, 3) lies inside one side, so the cheapest crossing edge is (0, 1, 4)
    assert g.find_replacement_edge(mst, removed) == Edge(0, 1, 4)

    repaired = g.repair_mst(mst, removed)
    assert repaired == [Edge(1, 3, 2), Edge(4, 5, 2), Edge(0, 2, 3), Edge(3, 5, 3), Edge(0, 1, 4)]
    assert total_weight(repaired) == 14
    assert g.is_spanning_tree(repaired)


def test_sample_graph_other_removals():
    g = sample_graph()
    mst = g.kruskal_mst()

    assert g.find_replacement_edge(mst, Edge(1, 3, 2)) == Edge(2, 3, 4)
    assert total_weight(g.repair_mst(mst, Edge(1, 3, 2))) == 13
    assert g.find_replacement_edge(mst, Edge(0, 2, 3)) == Edge(0, 1, 4)
    assert total_weight(g.repair_mst(mst, Edge(0, 2, 3))) == 12


def test_repair_leaves_input_tree_untouched():
    g = sample_graph()
    mst = g.kruskal_mst()
    snapshot = list(mst)
    g.repair_mst(mst, mst[2])
    assert mst == snapshot


def test_bridge_has_no_replacement():
    g = Graph(3)
    g.add_edge(0, 1, 1)
    bridge = g.add_edge(1, 2, 2)
    mst = g.kruskal_mst()

    assert g.find_replacement_edge(mst, bridge) is None
    assert g.repair_mst(mst, bridge) is None


def test_tie_goes_to_first_edge_in_graph_order():
    g = Graph(4)
    g.add_edge(0, 1, 1)
    middle = g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(0, 2, 5)
    g.add_edge(1, 3, 5)
    g.add_edge(0, 3, 5)
    mst = g.kruskal_mst()

    assert g.find_replacement_edge(mst, middle) == Edge(0, 2, 5)


def test_edges_equal_to_removed_one_are_skipped():
    g = Graph(2)
    e = g.add_edge(0, 1, 3)
    g.add_edge(0, 1, 3)
    mst = g.kruskal_mst()

    # the parallel copy compares equal to the removed edge
    assert mst == [e]
    assert g.find_replacement_edge(mst, e) is None

    g.add_edge(1, 0, 3)
    assert g.find_replacement_edge(mst, e) == Edge(1, 0, 3)


def test_edge_outside_tree_finds_nothing():
    g = sample_graph()
    mst = g.kruskal_mst()
    assert without_edge(mst, Edge(2, 3, 4)) == mst
    assert g.find_replacement_edge(mst, Edge(2, 3, 4)) is None
    assert g.repair_mst(mst, Edge(2, 3, 4)) is None


def test_swapped_endpoints_do_not_match_tree_edge():
    g = Graph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 2, 5)
    mst = g.kruskal_mst()

    assert mst == [Edge(0, 1, 1), Edge(1, 2, 1)]
    assert g.find_replacement_edge(mst, Edge(1, 0, 1)) is None
    assert g.repair_mst(mst, Edge(1, 0, 1)) is None
    assert g.find_replacement_edge(mst, Edge(0, 1, 1)) == Edge(0, 2, 5)


def test_removed_edge_vertices_are_validated():
    g = sample_graph()
    with pytest.raises(InvalidVertexError):
        g.find_replacement_edge(g.kruskal_mst(), Edge(0, 9, 1))


@pytest.mark.parametrize("seed", range(8))
def test_every_tree_edge_repairs_to_optimal_spanning_tree(seed):
    g = random_weighted_graph(10, 0.3, max_weight=4, seed=seed)
    mst = g.kruskal_mst()
    outcomes = repair_sweep(g, mst)

    assert len(outcomes) == g.vertex_count - 1
    for outcome in outcomes:
        assert outcome.valid_tree
        assert outcome.optimal
        if outcome.replacement is not None:
            assert outcome.weight_after == total_weight(mst) - outcome.removed.weight + outcome.replacement.weight
            assert outcome.replacement.weight >= outcome.removed.weight
        else:
            assert min_crossing_weight(g, mst, outcome.removed) is None


def test_repair_of_prim_tree():
    g = random_weighted_graph(9, 0.5, max_weight=3, seed=11)
    for outcome in repair_sweep(g, g.prim_mst()):
        assert outcome.valid_tree
        assert outcome.optimal
