from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Literal,
    NamedTuple,
    Optional,
    Set,
    Tuple,
    TypeVar,
    Union,
    overload,
)

from netalgo.errors import InternalInconsistencyError, InvalidArgumentError
from netalgo.lib.algorithms.base import Capacity, NodeID, Visit
from netalgo.lib.algorithms.search import BreadthFirstSearcher, VisitEvent
from netalgo.lib.algorithms.types import FlowSummary
from netalgo.lib.edges import FlowEdge
from netalgo.logging import get_logger, log_progress

logger = get_logger(__name__)

N = TypeVar("N", bound=NodeID)
E = TypeVar("E", bound=FlowEdge)

EdgesOfFunc = Callable[[Any], Optional[Iterable[Any]]]


class _VirtualSource:
    """Start node standing in for the whole set of sources."""

    def __repr__(self) -> str:
        return "<virtual source>"


_VIRTUAL_SOURCE = _VirtualSource()


class _Arc(NamedTuple):
    """Residual view of a network edge, in either direction."""

    edge: Any
    start: Any
    end: Any
    forward: bool

    @property
    def residual(self) -> Capacity:
        if self.forward:
            return self.edge.residual_forward
        return self.edge.residual_backward


class EdmondsKarpMaxFlowFinder(Generic[N, E]):
    """
    Maximum flow between sets of sources and sinks (Edmonds-Karp).

    The network is given implicitly by ``edges_of(node)``, returning the
    outgoing edges of a node. Edges are updated in place: after a run each
    edge's ``flow`` holds its share of the maximum flow.

    Augmenting paths are the shortest ones in the residual network, found by
    a breadth-first search that starts at a virtual node whose successors
    are the sources. Forward residual capacity of an edge is
    ``capacity - flow`` and backward residual capacity is ``flow``, both read
    from the edge itself.

    Example:
        >>> from netalgo.lib.edges import NetworkEdge
        >>> edges = {1: [NetworkEdge(1, 2), NetworkEdge(1, 2)], 2: [NetworkEdge(2, 3)]}
        >>> EdmondsKarpMaxFlowFinder().get_maximum_flow([1], [3], edges.get)
        2
    """

    def __init__(self) -> None:
        self._searcher: BreadthFirstSearcher[Any] = BreadthFirstSearcher()
        self._sources: List[N] = []
        self._source_set: Set[N] = set()
        self._sinks: Set[N] = set()
        self._out_edges: Dict[N, List[E]] = {}
        self._arcs: Dict[N, List[_Arc]] = {}

    def get_maximum_flow(
        self,
        sources: Iterable[N],
        sinks: Iterable[N],
        edges_of: EdgesOfFunc,
        *,
        reset_flow: bool = True,
    ) -> Capacity:
        """
        Compute the maximum flow from `sources` to `sinks`.

        Args:
            sources: Nodes where flow may enter the network.
            sinks: Nodes where flow may leave the network. Nodes that are also
                sources act as sources only.
            edges_of: Returns the outgoing edges of a node (None means no edges).
            reset_flow: If True, set the flow of every reachable edge to zero
                first. If False, keep existing flow and add to it. Only edges
                whose tail is reachable from the sources along outgoing edges
                are examined, so flow on any other edge is left untouched and
                cannot be cancelled by this run.

        Returns:
            Total flow added by this computation.

        Raises:
            InvalidArgumentError: If an argument is None, a node set is empty, or
                an edge has a missing target or invalid capacity/flow.
            InternalInconsistencyError: If an augmentation would break an edge's
                capacity bounds.
        """
        return self.solve(sources, sinks, edges_of, reset_flow=reset_flow).total_flow

    def solve(
        self,
        sources: Iterable[N],
        sinks: Iterable[N],
        edges_of: EdgesOfFunc,
        *,
        reset_flow: bool = True,
    ) -> FlowSummary:
        """Same as `get_maximum_flow` but returns a full `FlowSummary`."""
        self._prepare(sources, sinks, edges_of, reset_flow)

        total_flow: Capacity = 0
        augmentations = 0
        while True:
            path = self._find_augmenting_path()
            if path is None:
                break
            total_flow += self._augment(path)
            augmentations += 1
            log_progress(
                logger,
                augmentations,
                lambda: f"Max-flow progress: {augmentations} augmenting paths, "
                f"flow so far {total_flow}",
            )

        reachable = set(self._searcher.visited)
        reachable.discard(_VIRTUAL_SOURCE)
        min_cut = [
            (tail, edge)
            for tail in reachable
            for edge in self._out_edges.get(tail, ())
            if edge.target not in reachable
        ]
        logger.debug(
            f"Max-flow finished: flow {total_flow} after {augmentations} "
            f"augmenting paths over {len(self._out_edges)} nodes"
        )
        return FlowSummary(
            total_flow=total_flow,
            augmentations=augmentations,
            reachable=reachable,
            min_cut=min_cut,
        )

    def _prepare(
        self,
        sources: Iterable[N],
        sinks: Iterable[N],
        edges_of: EdgesOfFunc,
        reset_flow: bool,
    ) -> None:
        if sources is None:
            raise InvalidArgumentError("Source nodes must not be None.")
        if sinks is None:
            raise InvalidArgumentError("Sink nodes must not be None.")
        if edges_of is None or not callable(edges_of):
            raise InvalidArgumentError("Edges selector must be a callable.")

        self._sources = list(dict.fromkeys(sources))
        if not self._sources:
            raise InvalidArgumentError("There must be at least one source node.")
        if any(node is None for node in self._sources):
            raise InvalidArgumentError("Source nodes must not contain None.")
        self._source_set = set(self._sources)

        sink_set = set(sinks)
        if not sink_set:
            raise InvalidArgumentError("There must be at least one sink node.")
        if None in sink_set:
            raise InvalidArgumentError("Sink nodes must not contain None.")
        self._sinks = sink_set - self._source_set
        if not self._sinks:
            logger.debug("Every sink is also a source; the maximum flow is zero")

        self._discover_network(edges_of)
        self._build_residual_arcs(reset_flow)

    def _discover_network(self, edges_of: EdgesOfFunc) -> None:
        """Collect the outgoing edges of every node reachable from the sources."""
        out_edges: Dict[N, List[E]] = {}

        def successors(node: Any) -> List[Any]:
            if node is _VIRTUAL_SOURCE:
                return self._sources
            edges = edges_of(node)
            edge_list = list(edges) if edges is not None else []
            for edge in edge_list:
                self._check_edge(node, edge)
            out_edges[node] = edge_list
            return [edge.target for edge in edge_list]

        self._searcher.clear_visited()
        self._searcher.search(_VIRTUAL_SOURCE, successors, lambda event: None)
        self._out_edges = out_edges

    @staticmethod
    def _check_edge(node: Any, edge: Any) -> None:
        if edge is None:
            raise InvalidArgumentError(f"Edges of node {node!r} must not contain None.")
        if edge.target is None:
            raise InvalidArgumentError(f"Edge of node {node!r} has no target.")
        capacity = edge.capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise InvalidArgumentError(
                f"Edge {node!r} -> {edge.target!r} must have a non-negative "
                f"integer capacity, got {capacity!r}."
            )

    def _build_residual_arcs(self, reset_flow: bool) -> None:
        arcs: Dict[N, List[_Arc]] = {}
        for tail, edges in self._out_edges.items():
            for edge in edges:
                if reset_flow:
                    edge.flow = 0
                elif not 0 <= edge.flow <= edge.capacity:
                    raise InvalidArgumentError(
                        f"Edge {tail!r} -> {edge.target!r} carries flow {edge.flow} "
                        f"outside [0, {edge.capacity}]."
                    )
                arcs.setdefault(tail, []).append(_Arc(edge, tail, edge.target, True))
                arcs.setdefault(edge.target, []).append(
                    _Arc(edge, edge.target, tail, False)
                )
        self._arcs = arcs

    def _find_augmenting_path(self) -> Optional[List[_Arc]]:
        """Shortest source-to-sink path of arcs with residual capacity, or None."""
        pred: Dict[N, _Arc] = {}
        reached: List[N] = []

        def residual_successors(node: Any) -> Iterator[Any]:
            if node is _VIRTUAL_SOURCE:
                yield from self._sources
                return
            for arc in self._arcs.get(node, ()):
                end = arc.end
                if end in pred or end in self._source_set or arc.residual <= 0:
                    continue
                pred[end] = arc
                yield end

        def on_visit(event: VisitEvent[Any]) -> Optional[Visit]:
            if event.target in self._sinks:
                reached.append(event.target)
                return Visit.STOP
            return None

        self._searcher.clear_visited()
        self._searcher.search(_VIRTUAL_SOURCE, residual_successors, on_visit)
        if not reached:
            return None

        path: List[_Arc] = []
        node = reached[0]
        while node not in self._source_set:
            arc = pred[node]
            path.append(arc)
            node = arc.start
        path.reverse()
        return path

    @staticmethod
    def _augment(path: List[_Arc]) -> Capacity:
        bottleneck = min(arc.residual for arc in path)
        if bottleneck <= 0:
            raise InternalInconsistencyError(
                f"Augmenting path has non-positive bottleneck {bottleneck}."
            )
        for arc in path:
            arc.edge.push(bottleneck if arc.forward else -bottleneck)
        return bottleneck


@overload
def calc_max_flow(
    sources: Iterable[N],
    sinks: Iterable[N],
    edges_of: EdgesOfFunc,
    *,
    return_summary: Literal[False] = False,
    reset_flow: bool = True,
) -> Capacity: ...


@overload
def calc_max_flow(
    sources: Iterable[N],
    sinks: Iterable[N],
    edges_of: EdgesOfFunc,
    *,
    return_summary: Literal[True],
    reset_flow: bool = True,
) -> Tuple[Capacity, FlowSummary]: ...


def calc_max_flow(
    sources: Iterable[N],
    sinks: Iterable[N],
    edges_of: EdgesOfFunc,
    *,
    return_summary: bool = False,
    reset_flow: bool = True,
) -> Union[Capacity, Tuple[Capacity, FlowSummary]]:
    """Compute the maximum flow between node sets with a fresh finder.

    Args:
        sources: Nodes where flow may enter the network.
        sinks: Nodes where flow may leave the network.
        edges_of: Returns the outgoing edges of a node.
        return_summary: If True, also return a `FlowSummary` with the
            residual reachable set and the minimum cut.
        reset_flow: If True, start from zero flow on every reachable edge.
            If False, flow on edges whose tail is not reachable from the
            sources along outgoing edges is neither read nor changed.

    Returns:
        - If return_summary is False: the total flow.
        - Otherwise: ``(total_flow, FlowSummary)``.

    Examples:
        >>> from netalgo.lib.edges import NetworkEdge
        >>> edges = {"A": [NetworkEdge(10, "B")], "B": [NetworkEdge(5, "C")]}
        >>> calc_max_flow(["A"], ["C"], edges.get)
        5
        >>> flow, summary = calc_max_flow(["A"], ["C"], edges.get, return_summary=True)
        >>> sorted(summary.reachable)
        ['A', 'B']
    """
    summary = EdmondsKarpMaxFlowFinder().solve(
        sources, sinks, edges_of, reset_flow=reset_flow
    )
    if return_summary:
        return summary.total_flow, summary
    return summary.total_flow
