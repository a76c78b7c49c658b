"""Maximum-cardinality bipartite matching as a unit-capacity max-flow problem."""

from __future__ import annotations

from typing import (
    Dict,
    Generic,
    Iterable,
    List,
    Literal,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    overload,
)

from netalgo.errors import InvalidArgumentError, OutOfRangeError
from netalgo.lib.algorithms.max_flow import EdmondsKarpMaxFlowFinder
from netalgo.lib.algorithms.types import Match
from netalgo.lib.edges import NetworkEdge
from netalgo.logging import get_logger

logger = get_logger(__name__)

L = TypeVar("L")
R = TypeVar("R")

# Network nodes are tagged tuples so caller nodes need not be hashable or unique.
_SOURCE = ("source",)
_SINK = ("sink",)
_LEFT = "left"
_RIGHT = "right"


def adjacency_from_matrix(rows: Iterable[Iterable[int]]) -> List[List[int]]:
    """
    Convert 0/1 adjacency matrix rows into lists of right-node indices.

    Example:
        >>> adjacency_from_matrix([[1, 1, 0, 1], [0, 1, 0, 0]])
        [[0, 1, 3], [1]]
    """
    if rows is None:
        raise InvalidArgumentError("Adjacency rows must not be None.")
    return [[index for index, cell in enumerate(row) if cell] for row in rows]


class BipartiteMatcher(Generic[L, R]):
    """
    Finds a maximum-cardinality matching between two node sets.

    The matching is read from a flow network where a virtual source feeds
    every left node, every adjacency pair is an edge, and every right node
    drains into a virtual sink, all with capacity 1. When several maximum
    matchings exist, which one is returned is not specified.
    """

    def __init__(self) -> None:
        self._flow_finder: EdmondsKarpMaxFlowFinder = EdmondsKarpMaxFlowFinder()

    @overload
    def get_matches(
        self,
        left_nodes: Sequence[L],
        right_nodes: Sequence[R],
        adjacency: Sequence[Iterable[int]],
        *,
        return_flow: Literal[False] = False,
    ) -> List[Match[L, R]]: ...

    @overload
    def get_matches(
        self,
        left_nodes: Sequence[L],
        right_nodes: Sequence[R],
        adjacency: Sequence[Iterable[int]],
        *,
        return_flow: Literal[True],
    ) -> Tuple[List[Match[L, R]], int]: ...

    def get_matches(
        self,
        left_nodes: Sequence[L],
        right_nodes: Sequence[R],
        adjacency: Sequence[Iterable[int]],
        *,
        return_flow: bool = False,
    ) -> Union[List[Match[L, R]], Tuple[List[Match[L, R]], int]]:
        """
        Match left nodes to right nodes.

        Args:
            left_nodes: Left-side nodes.
            right_nodes: Right-side nodes.
            adjacency: ``adjacency[i]`` holds 0-based indices into `right_nodes`
                adjacent to ``left_nodes[i]``. Missing trailing rows mean no edges.
            return_flow: If True, also return the max-flow value of the network.

        Returns:
            One `Match` per left node, in input order; with `return_flow`, a
            ``(matches, flow)`` tuple.

        Raises:
            InvalidArgumentError: If an argument is None or there are more
                adjacency rows than left nodes.
            OutOfRangeError: If a right index is outside ``0..len(right_nodes) - 1``.
        """
        if left_nodes is None:
            raise InvalidArgumentError("Left nodes must not be None.")
        if right_nodes is None:
            raise InvalidArgumentError("Right nodes must not be None.")
        if adjacency is None:
            raise InvalidArgumentError("Adjacency must not be None.")

        left = list(left_nodes)
        right = list(right_nodes)
        rows = [list(row) if row is not None else [] for row in adjacency]
        if len(rows) > len(left):
            raise InvalidArgumentError(
                f"Got {len(rows)} adjacency rows for {len(left)} left nodes."
            )
        for i, row in enumerate(rows):
            for j in row:
                if isinstance(j, bool) or not isinstance(j, int):
                    raise InvalidArgumentError(
                        f"Right node index must be an integer, got {j!r} in row {i}."
                    )
                if not 0 <= j < len(right):
                    raise OutOfRangeError(
                        f"Right node index {j} in row {i} is outside 0..{len(right) - 1}."
                    )

        source_edges = [NetworkEdge(1, (_LEFT, i)) for i in range(len(left))]
        left_edges: Dict[int, List[NetworkEdge]] = {
            i: [NetworkEdge(1, (_RIGHT, j)) for j in row] for i, row in enumerate(rows)
        }
        right_edges = [[NetworkEdge(1, _SINK)] for _ in range(len(right))]

        def edges_of(node: Tuple) -> List[NetworkEdge]:
            if node == _SOURCE:
                return source_edges
            if node == _SINK:
                return []
            side, index = node
            if side == _LEFT:
                return left_edges.get(index, [])
            return right_edges[index]

        flow = self._flow_finder.get_maximum_flow([_SOURCE], [_SINK], edges_of)

        matches: List[Match[L, R]] = []
        for i, node in enumerate(left):
            edge = next((e for e in left_edges.get(i, ()) if e.flow > 0), None)
            if edge is None:
                matches.append(Match.unmatched(node))
            else:
                matches.append(Match.matched(node, right[edge.target[1]]))

        logger.debug(
            f"Bipartite matching: {flow} of {len(left)} left nodes matched "
            f"({len(right)} right nodes)"
        )
        if return_flow:
            return matches, flow
        return matches


def find_matches(
    left_nodes: Sequence[L],
    right_nodes: Sequence[R],
    adjacency: Sequence[Iterable[int]],
) -> List[Match[L, R]]:
    """Match left nodes to right nodes with a fresh `BipartiteMatcher`."""
    return BipartiteMatcher().get_matches(left_nodes, right_nodes, adjacency)


def matching_size(matches: Iterable[Match]) -> int:
    """Number of matched pairs in `matches`."""
    return sum(1 for match in matches if match.has_match)

