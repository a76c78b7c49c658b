"""Tests for netalgo.lib.algorithms.mst."""

import itertools
import logging
import random

import networkx as nx
import pytest

from netalgo.errors import InvalidArgumentError, OutOfRangeError
from netalgo.lib.algorithms.mst import (
    KruskalAlgorithm,
    MinimumSpanningTreeAlgorithm,
    PrimAlgorithm,
    total_value,
)
from netalgo.lib.edges import ValuedEdge

ALGORITHMS = [KruskalAlgorithm, PrimAlgorithm]


def _brute_force_mst_value(node_count, edges):
    """Smallest total value over all spanning trees, by enumeration."""
    best = None
    for subset in itertools.combinations(edges, node_count - 1):
        graph = nx.MultiGraph()
        graph.add_nodes_from(range(1, node_count + 1))
        graph.add_edges_from((e.end1, e.end2) for e in subset)
        if nx.is_tree(graph):
            value = total_value(subset)
            if best is None or value < best:
                best = value
    return best


def _is_spanning_forest(node_count, tree, edges):
    """True if `tree` is acyclic and has one component per component of `edges`."""
    full = nx.MultiGraph()
    full.add_nodes_from(range(1, node_count + 1))
    full.add_edges_from((e.end1, e.end2) for e in edges)
    forest = nx.MultiGraph()
    forest.add_nodes_from(range(1, node_count + 1))
    forest.add_edges_from((e.end1, e.end2) for e in tree)
    return nx.is_forest(forest) and nx.number_connected_components(
        forest
    ) == nx.number_connected_components(full)


@pytest.mark.parametrize("algorithm_cls", ALGORITHMS)
class TestMinimumSpanningTree:
    """Behaviour shared by both algorithms."""

    def test_no_nodes(self, algorithm_cls):
        assert algorithm_cls().get_minimum_spanning_tree(0, []) == []

    def test_one_node(self, algorithm_cls):
        assert algorithm_cls().get_minimum_spanning_tree(1, []) == []

    def test_one_node_with_self_loop(self, algorithm_cls):
        assert algorithm_cls().get_minimum_spanning_tree(1, [ValuedEdge(1, 1, 3)]) == []

    def test_two_nodes_one_edge(self, algorithm_cls):
        edge = ValuedEdge(1, 2, 5)
        assert algorithm_cls().get_minimum_spanning_tree(2, [edge]) == [edge]

    def test_two_nodes_parallel_edges(self, algorithm_cls):
        cheapest = ValuedEdge(1, 2, 1)
        edges = [ValuedEdge(1, 2, 3), cheapest, ValuedEdge(1, 2, 5)]
        tree = algorithm_cls().get_minimum_spanning_tree(2, edges)
        assert len(tree) == 1
        assert tree[0] is cheapest

    def test_triangle(self, algorithm_cls):
        edge1 = ValuedEdge(1, 2, 1)
        edge2 = ValuedEdge(2, 3, 2)
        edge3 = ValuedEdge(3, 1, 1)
        tree = algorithm_cls().get_minimum_spanning_tree(3, [edge1, edge2, edge3])
        assert set(tree) == {edge1, edge3}
        assert total_value(tree) == 2

    @pytest.mark.parametrize("scale", [1, 100])
    def test_square_with_diagonal(self, algorithm_cls, scale):
        edge1 = ValuedEdge(1, 2, 1 * scale)
        edge2 = ValuedEdge(2, 3, 2 * scale)
        edge3 = ValuedEdge(3, 4, 5 * scale)
        edge4 = ValuedEdge(4, 1, 4 * scale)
        edge5 = ValuedEdge(3, 1, 3 * scale)
        tree = algorithm_cls().get_minimum_spanning_tree(
            4, [edge1, edge2, edge3, edge4, edge5]
        )
        assert set(tree) == {edge1, edge2, edge4}

    def test_fixture_graph(self, algorithm_cls, weighted_graph):
        tree = algorithm_cls().get_minimum_spanning_tree(5, weighted_graph)
        assert len(tree) == 4
        assert total_value(tree) == 8

    def test_float_values(self, algorithm_cls):
        edges = [ValuedEdge(1, 2, 0.5), ValuedEdge(2, 3, 0.25), ValuedEdge(1, 3, 1.5)]
        tree = algorithm_cls().get_minimum_spanning_tree(3, edges)
        assert total_value(tree) == pytest.approx(0.75)

    def test_negative_values(self, algorithm_cls):
        edges = [ValuedEdge(1, 2, -3), ValuedEdge(2, 3, -1), ValuedEdge(1, 3, -2)]
        tree = algorithm_cls().get_minimum_spanning_tree(3, edges)
        assert total_value(tree) == -5

    def test_accepts_iterator_of_edges(self, algorithm_cls):
        edges = [ValuedEdge(1, 2, 1), ValuedEdge(2, 3, 1)]
        tree = algorithm_cls().get_minimum_spanning_tree(3, iter(edges))
        assert len(tree) == 2

    def test_result_edges_are_input_objects(self, algorithm_cls, weighted_graph):
        tree = algorithm_cls().get_minimum_spanning_tree(5, weighted_graph)
        assert all(any(e is w for w in weighted_graph) for e in tree)

    def test_disconnected_graph_gives_forest(self, algorithm_cls):
        edges = [ValuedEdge(1, 2, 1), ValuedEdge(3, 4, 2), ValuedEdge(4, 5, 1)]
        tree = algorithm_cls().get_minimum_spanning_tree(5, edges)
        assert len(tree) == 3
        assert set(tree) == set(edges)

    def test_random_graphs_match_brute_force(self, algorithm_cls):
        rng = random.Random(2024)
        for _ in range(25):
            node_count = rng.randint(2, 6)
            edges = [
                ValuedEdge(rng.randint(1, node_count), rng.randint(1, node_count), rng.randint(1, 9))
                for _ in range(rng.randint(node_count, 9))
            ]
            edges.extend(ValuedEdge(i, i + 1, 20) for i in range(1, node_count))

            tree = algorithm_cls().get_minimum_spanning_tree(node_count, edges)

            assert len(tree) == node_count - 1
            assert _is_spanning_forest(node_count, tree, edges)
            assert total_value(tree) == _brute_force_mst_value(node_count, edges)

    def test_random_forests_are_spanning(self, algorithm_cls):
        rng = random.Random(99)
        for _ in range(20):
            node_count = rng.randint(1, 15)
            edges = [
                ValuedEdge(rng.randint(1, node_count), rng.randint(1, node_count), rng.randint(1, 5))
                for _ in range(rng.randint(0, 12))
            ]
            tree = algorithm_cls().get_minimum_spanning_tree(node_count, edges)
            assert _is_spanning_forest(node_count, tree, edges)

    def test_none_edges_raise(self, algorithm_cls):
        with pytest.raises(InvalidArgumentError, match="must not be None"):
            algorithm_cls().get_minimum_spanning_tree(3, None)

    def test_none_edge_in_list_raises(self, algorithm_cls):
        with pytest.raises(InvalidArgumentError, match="must not contain None"):
            algorithm_cls().get_minimum_spanning_tree(2, [ValuedEdge(1, 2, 1), None])

    def test_negative_node_count_raises(self, algorithm_cls):
        with pytest.raises(OutOfRangeError, match="non-negative"):
            algorithm_cls().get_minimum_spanning_tree(-1, [])

    @pytest.mark.parametrize("node_count", [2.0, "3", None, True])
    def test_non_integer_node_count_raises(self, algorithm_cls, node_count):
        with pytest.raises(InvalidArgumentError, match="integer"):
            algorithm_cls().get_minimum_spanning_tree(node_count, [])

    @pytest.mark.parametrize("end1,end2", [(0, 1), (1, 4), (-2, 2)])
    def test_endpoint_out_of_range_raises(self, algorithm_cls, end1, end2):
        with pytest.raises(OutOfRangeError, match="outside"):
            algorithm_cls().get_minimum_spanning_tree(3, [ValuedEdge(end1, end2, 1)])

    def test_endpoint_checked_for_small_graphs(self, algorithm_cls):
        with pytest.raises(OutOfRangeError):
            algorithm_cls().get_minimum_spanning_tree(1, [ValuedEdge(1, 2, 1)])

    @pytest.mark.parametrize(
        "edge",
        [
            ValuedEdge(1.5, 2, 1),
            ValuedEdge(1, 2.0, 1),
            ValuedEdge("1", 2, 1),
            ValuedEdge(True, 2, 1),
        ],
    )
    def test_non_integer_endpoint_raises(self, algorithm_cls, edge):
        with pytest.raises(InvalidArgumentError, match="endpoint must be an integer"):
            algorithm_cls().get_minimum_spanning_tree(3, [ValuedEdge(2, 3, 1), edge])

    @pytest.mark.parametrize("value", [None, "1", True, 1j])
    def test_non_numeric_value_raises(self, algorithm_cls, value):
        with pytest.raises(InvalidArgumentError, match="real number"):
            algorithm_cls().get_minimum_spanning_tree(3, [ValuedEdge(1, 2, value)])


class TestKruskal:
    def test_equal_values_keep_input_order(self):
        first = ValuedEdge(1, 2, 1)
        second = ValuedEdge(2, 1, 1)
        tree = KruskalAlgorithm().get_minimum_spanning_tree(2, [first, second])
        assert tree == [first]

    def test_returns_edges_in_ascending_value(self, weighted_graph):
        tree = KruskalAlgorithm().get_minimum_spanning_tree(5, weighted_graph)
        values = [e.value for e in tree]
        assert values == sorted(values)

    def test_logs_summary(self, caplog, weighted_graph):
        caplog.set_level(logging.DEBUG, logger="netalgo.lib.algorithms.mst")
        KruskalAlgorithm().get_minimum_spanning_tree(5, weighted_graph)
        assert any("Kruskal selected 4 edges" in r.getMessage() for r in caplog.records)


class TestPrim:
    def test_is_a_spanning_tree_algorithm(self):
        assert isinstance(PrimAlgorithm(), MinimumSpanningTreeAlgorithm)

    def test_isolated_node_one_spans_remaining_forest(self):
        edges = [ValuedEdge(2, 3, 1), ValuedEdge(3, 4, 2), ValuedEdge(2, 4, 5)]
        tree = PrimAlgorithm().get_minimum_spanning_tree(4, edges)
        assert set(tree) == {edges[0], edges[1]}

    def test_without_forest_stops_after_first_tree(self):
        edges = [ValuedEdge(1, 2, 1), ValuedEdge(3, 4, 2)]
        tree = PrimAlgorithm(span_forest=False).get_minimum_spanning_tree(4, edges)
        assert tree == [edges[0]]

    def test_without_forest_isolated_node_one_gives_empty_tree(self):
        edges = [ValuedEdge(2, 3, 1)]
        assert PrimAlgorithm(span_forest=False).get_minimum_spanning_tree(3, edges) == []

    def test_logs_restart(self, caplog):
        caplog.set_level(logging.DEBUG, logger="netalgo.lib.algorithms.mst")
        edges = [ValuedEdge(1, 2, 1), ValuedEdge(3, 4, 2)]
        PrimAlgorithm().get_minimum_spanning_tree(4, edges)
        assert any("restarting from node 3" in r.getMessage() for r in caplog.records)

    def test_tree_grows_from_node_one(self):
        edges = [ValuedEdge(3, 4, 1), ValuedEdge(1, 2, 3), ValuedEdge(2, 3, 2)]
        tree = PrimAlgorithm().get_minimum_spanning_tree(4, edges)
        assert tree == [edges[1], edges[2], edges[0]]
