"""Result containers returned by the flow and matching algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Set, Tuple, TypeVar

from netalgo.lib.algorithms.base import Capacity

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Flow added by the computation.
        augmentations: Number of augmenting paths used.
        reachable: Nodes reachable from the sources in the final residual network.
        min_cut: ``(tail, edge)`` pairs leaving `reachable`; all of them are
            saturated and their capacities sum to `total_flow` when the
            computation started from zero flow.
    """

    total_flow: Capacity
    augmentations: int
    reachable: Set[Any]
    min_cut: List[Tuple[Any, Any]]


@dataclass(frozen=True)
class Match(Generic[L, R]):
    """Pairing of a left-side node with at most one right-side node.

    Attributes:
        left: Left-side node.
        right: Matched right-side node, or None when unmatched.
        has_match: False when `left` has no partner.
    """

    left: L
    right: Optional[R] = None
    has_match: bool = False

    @classmethod
    def unmatched(cls, left: L) -> "Match[L, R]":
        return cls(left=left)

    @classmethod
    def matched(cls, left: L, right: R) -> "Match[L, R]":
        return cls(left=left, right=right, has_match=True)
