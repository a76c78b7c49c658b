from __future__ import annotations

from enum import Enum, IntEnum
from typing import Hashable, Union

#: Any hashable caller value can serve as a graph node.
NodeID = Hashable

#: Scalar value carried by a valued edge (cost, weight, distance).
Cost = Union[int, float]

#: Integral capacity or flow amount on a network edge.
Capacity = int


class NotifyPolicy(IntEnum):
    """
    Moments at which a depth-first searcher reports a node to its visitor.
    """

    #: Report a node when it is first met, before its children.
    ON_ENTER = 1
    #: Report a node after all of its descendants are finished.
    ON_EXIT = 2
    #: Report a node at both moments.
    BOTH = 3


class VisitMoment(IntEnum):
    """Moment carried by a single visit event."""

    ENTER = 1
    EXIT = 2


class Visit(Enum):
    """
    Control signal a visitor may return from a visit callback.

    Returning ``None`` is equivalent to ``Visit.CONTINUE``.
    """

    CONTINUE = "continue"
    STOP = "stop"
