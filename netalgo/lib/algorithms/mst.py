"""Minimum spanning tree algorithms over numbered undirected graphs.

Nodes are numbered 1..node_count and edges are `ValuedEdge` objects. For a
disconnected graph both algorithms return a minimum spanning forest, so
callers that need a single tree compare the result length with
``node_count - 1``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real
from operator import attrgetter
from typing import Dict, Iterable, List, Optional, Set

from netalgo.config import ALGORITHM_CONFIG
from netalgo.errors import (
    InternalInconsistencyError,
    InvalidArgumentError,
    OutOfRangeError,
)
from netalgo.lib.algorithms.base import Cost
from netalgo.lib.edges import ValuedEdge
from netalgo.lib.heap import KeyedHeap
from netalgo.lib.union_find import UnionFind
from netalgo.logging import get_logger

logger = get_logger(__name__)


def total_value(edges: Iterable[ValuedEdge]) -> Cost:
    """Sum of the values of `edges`."""
    return sum(edge.value for edge in edges)


class MinimumSpanningTreeAlgorithm(ABC):
    """Common entry point and input validation of MST algorithms."""

    def get_minimum_spanning_tree(
        self, node_count: int, edges: Optional[Iterable[ValuedEdge]]
    ) -> List[ValuedEdge]:
        """
        Select the edges of a minimum spanning tree (or forest).

        Args:
            node_count: Number of nodes; nodes are numbered 1..node_count.
            edges: Undirected valued edges of the graph.

        Returns:
            Selected edges. Empty for graphs with fewer than two nodes.

        Raises:
            InvalidArgumentError: If `edges` is None, `node_count` or an edge
                endpoint is not an integer, or an edge value is not a real number.
            OutOfRangeError: If `node_count` is negative or an edge endpoint lies
                outside 1..node_count.
        """
        if edges is None:
            raise InvalidArgumentError("Edges of the graph must not be None.")
        if isinstance(node_count, bool) or not isinstance(node_count, int):
            raise InvalidArgumentError(
                f"Node count must be an integer, got {type(node_count).__name__}."
            )
        if node_count < 0:
            raise OutOfRangeError(f"Node count must be non-negative, got {node_count}.")

        edge_list = list(edges)
        for edge in edge_list:
            if edge is None:
                raise InvalidArgumentError("Edges of the graph must not contain None.")
            if isinstance(edge.value, bool) or not isinstance(edge.value, Real):
                raise InvalidArgumentError(
                    f"Edge value must be a real number, got {edge.value!r}: {edge!r}."
                )
            for end in (edge.end1, edge.end2):
                if isinstance(end, bool) or not isinstance(end, int):
                    raise InvalidArgumentError(
                        f"Edge endpoint must be an integer, got {end!r}: {edge!r}."
                    )
                if not 1 <= end <= node_count:
                    raise OutOfRangeError(
                        f"Edge endpoint {end} is outside 1..{node_count}: {edge!r}."
                    )

        if node_count <= 1:
            return []
        return self._build(node_count, edge_list)

    @abstractmethod
    def _build(self, node_count: int, edges: List[ValuedEdge]) -> List[ValuedEdge]:
        raise NotImplementedError


class KruskalAlgorithm(MinimumSpanningTreeAlgorithm):
    """
    Edge-sorting MST algorithm.

    Scans edges in ascending value order (stable for equal values) and keeps
    an edge when its endpoints lie in different disjoint-set groups.
    Runs in O(E log E).
    """

    def _build(self, node_count: int, edges: List[ValuedEdge]) -> List[ValuedEdge]:
        union_find: UnionFind[int] = UnionFind()
        nodes = union_find.extend(range(1, node_count + 1))

        tree: List[ValuedEdge] = []
        for edge in sorted(edges, key=attrgetter("value")):
            node1 = nodes[edge.end1 - 1]
            node2 = nodes[edge.end2 - 1]
            if node1.group is node2.group:
                continue
            tree.append(edge)
            union_find.union(node1, node2)
            if len(tree) == node_count - 1:
                break

        logger.debug(
            f"Kruskal selected {len(tree)} edges for {node_count} nodes "
            f"({union_find.groups_count} component(s))"
        )
        return tree


class PrimAlgorithm(MinimumSpanningTreeAlgorithm):
    """
    Node-priority MST algorithm.

    Grows a tree from node 1. A keyed heap holds, for every frontier node,
    the cheapest edge linking it to the tree; the cheapest entry overall is
    taken next. When the frontier runs dry before every node is reached,
    the search restarts from the lowest-numbered unreached node, producing
    a spanning forest.

    Args:
        span_forest: If False, stop after the tree containing node 1 instead
            of restarting. Defaults to the configured `prim_span_forest`.
    """

    def __init__(self, span_forest: Optional[bool] = None) -> None:
        self.span_forest = (
            ALGORITHM_CONFIG.prim_span_forest if span_forest is None else span_forest
        )

    def _build(self, node_count: int, edges: List[ValuedEdge]) -> List[ValuedEdge]:
        adjacency: Dict[int, List[ValuedEdge]] = {}
        for edge in edges:
            adjacency.setdefault(edge.end1, []).append(edge)
            if edge.end2 != edge.end1:
                adjacency.setdefault(edge.end2, []).append(edge)

        visited: Set[int] = set()
        frontier: KeyedHeap[int, ValuedEdge] = KeyedHeap()
        tree: List[ValuedEdge] = []

        next_root = 1
        while len(visited) < node_count:
            if not frontier:
                if visited and not self.span_forest:
                    break
                while next_root in visited:
                    next_root += 1
                if visited:
                    logger.debug(
                        f"Prim frontier exhausted with {node_count - len(visited)} "
                        f"unreached node(s); restarting from node {next_root}"
                    )
                visited.add(next_root)
                self._update_frontier(next_root, adjacency, visited, frontier)
                continue

            node, _, edge = frontier.pop()
            if node in visited:
                raise InternalInconsistencyError(
                    f"Node {node} was taken from the frontier twice."
                )
            visited.add(node)
            tree.append(edge)
            self._update_frontier(node, adjacency, visited, frontier)

        logger.debug(f"Prim selected {len(tree)} edges for {node_count} nodes")
        return tree

    @staticmethod
    def _update_frontier(
        node: int,
        adjacency: Dict[int, List[ValuedEdge]],
        visited: Set[int],
        frontier: KeyedHeap[int, ValuedEdge],
    ) -> None:
        """Recompute frontier entries of the unvisited neighbors of `node`."""
        for edge in adjacency.get(node, ()):
            neighbor = edge.other_end(node)
            if neighbor in visited:
                continue

            best: Optional[ValuedEdge] = None
            for candidate in adjacency[neighbor]:
                if candidate.other_end(neighbor) not in visited:
                    continue
                if best is None or candidate.value < best.value:
                    best = candidate
            if best is None:
                raise InternalInconsistencyError(
                    f"Node {neighbor} is adjacent to visited node {node} "
                    "but has no edge into the visited set."
                )
            frontier.add(neighbor, best.value, best)
