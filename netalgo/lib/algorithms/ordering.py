from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, List, Optional, Set, TypeVar

from netalgo.errors import InvalidArgumentError
from netalgo.lib.algorithms.base import NodeID, NotifyPolicy
from netalgo.lib.algorithms.search import DepthFirstSearcher, NeighborsFunc, VisitEvent

N = TypeVar("N", bound=NodeID)


def _check_args(nodes: Optional[Iterable[N]], neighbors: Optional[NeighborsFunc]) -> None:
    if nodes is None:
        raise InvalidArgumentError("Graph nodes must not be None.")
    if neighbors is None or not callable(neighbors):
        raise InvalidArgumentError("Neighbors selector must be a callable.")


def topological_sort(nodes: Iterable[N], neighbors: NeighborsFunc) -> List[N]:
    """
    Order the nodes of a directed acyclic graph so every edge points forward.

    Runs a depth-first search from each node in turn, reusing one searcher so
    finished nodes are never searched again, and returns the reverse of the
    finishing order. For a graph with cycles the result is still a reverse
    post-order but no longer a topological order.

    Args:
        nodes: Nodes of the graph; also the order in which searches start.
        neighbors: Returns the successors of a node.

    Returns:
        Nodes in topological order.

    Raises:
        InvalidArgumentError: If `nodes` is None or `neighbors` is not callable.
    """
    _check_args(nodes, neighbors)

    finished: List[N] = []

    def on_exit(event: VisitEvent[N]) -> None:
        finished.append(event.target)

    searcher: DepthFirstSearcher[N] = DepthFirstSearcher(NotifyPolicy.ON_EXIT)
    for node in list(nodes):
        searcher.search(node, neighbors, on_exit)

    finished.reverse()
    return finished


def strongly_connected_components(
    nodes: Iterable[N], neighbors: NeighborsFunc
) -> List[Set[N]]:
    """
    Split a directed graph into strongly connected components (Kosaraju).

    Nodes reachable through `neighbors` but missing from `nodes` are added
    to the graph.

    Args:
        nodes: Nodes of the graph.
        neighbors: Returns the successors of a node.

    Returns:
        One set of nodes per component, in reverse topological order of the
        condensed graph: edges between components only lead from a later
        component to an earlier one.

    Raises:
        InvalidArgumentError: If `nodes` is None or `neighbors` is not callable.
    """
    _check_args(nodes, neighbors)

    graph_nodes: List[N] = list(nodes)
    known: Set[N] = set(graph_nodes)
    direct: Dict[N, List[N]] = {}
    reverse: Dict[N, List[N]] = {node: [] for node in graph_nodes}

    pending: Deque[N] = deque(graph_nodes)
    while pending:
        node = pending.popleft()
        targets = list(neighbors(node) or ())
        direct[node] = targets
        for target in targets:
            reverse.setdefault(target, []).append(node)
            if target not in known:
                known.add(target)
                graph_nodes.append(target)
                pending.append(target)

    # Finishing order on the reversed graph
    finish_order: List[N] = []
    reverse_searcher: DepthFirstSearcher[N] = DepthFirstSearcher(NotifyPolicy.ON_EXIT)
    for node in reversed(graph_nodes):
        reverse_searcher.search(
            node,
            reverse.__getitem__,
            lambda event: finish_order.append(event.target),
        )

    components: List[Set[N]] = []
    searcher: DepthFirstSearcher[N] = DepthFirstSearcher(NotifyPolicy.ON_ENTER)
    for node in reversed(finish_order):
        component: Set[N] = set()
        searcher.search(node, direct.__getitem__, lambda event: component.add(event.target))
        if component:
            components.append(component)
    return components
