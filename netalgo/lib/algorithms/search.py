"""Breadth-first and depth-first traversal over caller-defined graphs.

A graph is described only by a start node and a ``neighbors(node)``
callable. Each visited node is reported to a ``visit(event)`` callable,
which may return `Visit.STOP` to end the search early.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Deque,
    FrozenSet,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    TypeVar,
)

from netalgo.config import ALGORITHM_CONFIG
from netalgo.errors import InvalidArgumentError
from netalgo.lib.algorithms.base import NodeID, NotifyPolicy, Visit, VisitMoment

N = TypeVar("N", bound=NodeID)

_EXHAUSTED = object()


@dataclass(frozen=True)
class VisitEvent(Generic[N]):
    """
    A single report made to a visitor.

    Attributes:
        source: Node from which `target` was reached, or None for a start node.
        target: Node being reported.
        moment: ENTER when first met, EXIT after its descendants are finished.
    """

    source: Optional[N]
    target: N
    moment: VisitMoment = VisitMoment.ENTER


NeighborsFunc = Callable[[N], Optional[Iterable[N]]]
VisitFunc = Callable[[VisitEvent[N]], Any]


class GraphSearcher(ABC, Generic[N]):
    """
    Base class of graph searchers.

    A searcher remembers the nodes it has visited across calls to `search`,
    so several searches from different start nodes cover each node once.
    Call `clear_visited` to start an independent search.
    """

    def __init__(self) -> None:
        self._visited: Set[N] = set()

    @property
    def visited(self) -> FrozenSet[N]:
        """Snapshot of the nodes visited so far."""
        return frozenset(self._visited)

    def clear_visited(self) -> None:
        """Forget all visited nodes."""
        self._visited.clear()

    def search(
        self,
        start_node: N,
        neighbors: NeighborsFunc,
        visit: VisitFunc,
    ) -> bool:
        """
        Traverse the graph reachable from `start_node`.

        Args:
            start_node: Node to start from. Not reported again if already visited.
            neighbors: Returns the nodes directly reachable from a node.
            visit: Called for each reported node; return `Visit.STOP` to cancel.

        Returns:
            False if the visitor cancelled the search, True otherwise.

        Raises:
            InvalidArgumentError: If any argument is missing or not callable.
        """
        if start_node is None:
            raise InvalidArgumentError("Start node must not be None.")
        if neighbors is None or not callable(neighbors):
            raise InvalidArgumentError("Neighbors selector must be a callable.")
        if visit is None or not callable(visit):
            raise InvalidArgumentError("Visit action must be a callable.")

        if start_node in self._visited:
            return True
        return self._search(start_node, neighbors, visit)

    @abstractmethod
    def _search(self, start_node: N, neighbors: NeighborsFunc, visit: VisitFunc) -> bool:
        raise NotImplementedError


def _children(neighbors: NeighborsFunc, node: N) -> Iterator[N]:
    nodes = neighbors(node)
    return iter(nodes) if nodes is not None else iter(())


class BreadthFirstSearcher(GraphSearcher[N]):
    """
    Searcher visiting nodes in first-in-first-out order.

    Nodes are marked visited and reported when enqueued, so they are reported
    in non-decreasing distance (edge count) from the start node.
    """

    def _search(self, start_node: N, neighbors: NeighborsFunc, visit: VisitFunc) -> bool:
        queue: Deque[N] = deque()
        if not self._enqueue(queue, None, start_node, visit):
            return False

        while queue:
            node = queue.popleft()
            for next_node in _children(neighbors, node):
                if next_node not in self._visited:
                    if not self._enqueue(queue, node, next_node, visit):
                        return False
        return True

    def _enqueue(
        self,
        queue: Deque[N],
        source: Optional[N],
        node: N,
        visit: VisitFunc,
    ) -> bool:
        queue.append(node)
        self._visited.add(node)
        return visit(VisitEvent(source, node, VisitMoment.ENTER)) is not Visit.STOP


class _Frame(Generic[N]):
    __slots__ = ("source", "node", "children")

    def __init__(self, source: Optional[N], node: N, children: Iterator[N]) -> None:
        self.source = source
        self.node = node
        self.children = children


class DepthFirstSearcher(GraphSearcher[N]):
    """
    Searcher visiting nodes in last-in-first-out order.

    Every child of a node is fully explored before the node's next sibling.

    Args:
        notify: When to report a node: on first encounter, after all of its
            descendants, or both. Defaults to the configured default policy.
    """

    def __init__(self, notify: Optional[NotifyPolicy] = None) -> None:
        super().__init__()
        self.notify = NotifyPolicy(
            notify if notify is not None else ALGORITHM_CONFIG.default_notify_policy
        )

    def _search(self, start_node: N, neighbors: NeighborsFunc, visit: VisitFunc) -> bool:
        stack: List[_Frame[N]] = []
        if not self._push(stack, None, start_node, neighbors, visit):
            return False

        report_exit = self.notify != NotifyPolicy.ON_ENTER
        while stack:
            frame = stack[-1]
            child = self._next_unvisited(frame)
            if child is _EXHAUSTED:
                stack.pop()
                if report_exit:
                    event = VisitEvent(frame.source, frame.node, VisitMoment.EXIT)
                    if visit(event) is Visit.STOP:
                        return False
            elif not self._push(stack, frame.node, child, neighbors, visit):
                return False
        return True

    def _next_unvisited(self, frame: _Frame[N]) -> Any:
        for child in frame.children:
            if child not in self._visited:
                return child
        return _EXHAUSTED

    def _push(
        self,
        stack: List[_Frame[N]],
        source: Optional[N],
        node: N,
        neighbors: NeighborsFunc,
        visit: VisitFunc,
    ) -> bool:
        self._visited.add(node)
        stack.append(_Frame(source, node, _children(neighbors, node)))
        if self.notify != NotifyPolicy.ON_EXIT:
            return visit(VisitEvent(source, node, VisitMoment.ENTER)) is not Visit.STOP
        return True
