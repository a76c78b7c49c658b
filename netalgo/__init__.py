"""netalgo: classical graph algorithms over caller-described graphs.

Primary API:
    UnionFind - disjoint-set structure with union-by-depth and path compression
    BreadthFirstSearcher, DepthFirstSearcher - traversal with cancellable visitors
    topological_sort(), strongly_connected_components() - DFS-based orderings
    KruskalAlgorithm, PrimAlgorithm - minimum spanning trees/forests
    EdmondsKarpMaxFlowFinder, calc_max_flow() - maximum flow between node sets
    BipartiteMatcher, find_matches() - maximum-cardinality bipartite matching

Example:
    from netalgo import KruskalAlgorithm, ValuedEdge

    edges = [ValuedEdge(1, 2, 1), ValuedEdge(2, 3, 2), ValuedEdge(3, 1, 1)]
    tree = KruskalAlgorithm().get_minimum_spanning_tree(3, edges)
"""

from __future__ import annotations

from netalgo import logging
from netalgo._version import __version__
from netalgo.config import ALGORITHM_CONFIG, AlgorithmConfig
from netalgo.errors import (
    InternalInconsistencyError,
    InvalidArgumentError,
    NetAlgoError,
    OutOfRangeError,
)
from netalgo.lib.algorithms.base import NotifyPolicy, Visit, VisitMoment
from netalgo.lib.algorithms.matching import (
    BipartiteMatcher,
    adjacency_from_matrix,
    find_matches,
)
from netalgo.lib.algorithms.max_flow import EdmondsKarpMaxFlowFinder, calc_max_flow
from netalgo.lib.algorithms.mst import (
    KruskalAlgorithm,
    MinimumSpanningTreeAlgorithm,
    PrimAlgorithm,
    total_value,
)
from netalgo.lib.algorithms.ordering import (
    strongly_connected_components,
    topological_sort,
)
from netalgo.lib.algorithms.search import (
    BreadthFirstSearcher,
    DepthFirstSearcher,
    GraphSearcher,
    VisitEvent,
)
from netalgo.lib.algorithms.types import FlowSummary, Match
from netalgo.lib.edges import FlowEdge, NetworkEdge, ValuedEdge
from netalgo.lib.heap import KeyedHeap
from netalgo.lib.union_find import UnionFind, UnionFindElement, UnionFindGroup

__all__ = [
    # Version
    "__version__",
    # Data structures
    "UnionFind",
    "UnionFindElement",
    "UnionFindGroup",
    "KeyedHeap",
    "ValuedEdge",
    "NetworkEdge",
    "FlowEdge",
    # Traversal
    "GraphSearcher",
    "BreadthFirstSearcher",
    "DepthFirstSearcher",
    "VisitEvent",
    "Visit",
    "VisitMoment",
    "NotifyPolicy",
    "topological_sort",
    "strongly_connected_components",
    # Spanning trees
    "MinimumSpanningTreeAlgorithm",
    "KruskalAlgorithm",
    "PrimAlgorithm",
    "total_value",
    # Flows and matching
    "EdmondsKarpMaxFlowFinder",
    "calc_max_flow",
    "FlowSummary",
    "BipartiteMatcher",
    "Match",
    "adjacency_from_matrix",
    "find_matches",
    # Errors
    "NetAlgoError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "InternalInconsistencyError",
    # Configuration and utilities
    "AlgorithmConfig",
    "ALGORITHM_CONFIG",
    "logging",
]
