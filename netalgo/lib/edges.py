"""Edge types consumed by the spanning-tree and flow algorithms."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar, runtime_checkable

from netalgo.errors import InternalInconsistencyError, InvalidArgumentError
from netalgo.lib.algorithms.base import Capacity, Cost, NodeID

N = TypeVar("N", bound=NodeID)


class ValuedEdge:
    """
    Undirected edge between two numbered nodes, carrying a scalar value.

    Endpoints are node numbers (1..N), not node objects. Edges compare by
    identity so that parallel edges stay distinguishable.

    Attributes:
        end1: First endpoint.
        end2: Second endpoint.
        value: Cost or weight of the edge.
    """

    __slots__ = ("end1", "end2", "value")

    def __init__(self, end1: int, end2: int, value: Cost) -> None:
        self.end1 = end1
        self.end2 = end2
        self.value = value

    def goes_from(self, node: int) -> bool:
        """Return True if `node` is one of the endpoints."""
        return node == self.end1 or node == self.end2

    def other_end(self, node: int) -> int:
        """
        Return the endpoint opposite to `node`.

        Raises:
            InternalInconsistencyError: If `node` is not an endpoint of this edge.
        """
        if node == self.end1:
            return self.end2
        if node == self.end2:
            return self.end1
        raise InternalInconsistencyError(f"Node {node} is not an endpoint of {self!r}.")

    def __repr__(self) -> str:
        return f"ValuedEdge({self.end1}, {self.end2}, value={self.value!r})"


@runtime_checkable
class FlowEdge(Protocol[N]):
    """
    Capabilities the max-flow engine needs from a directed edge.

    The reverse (residual) direction is derived from `flow` and is never a
    separate edge object.
    """

    capacity: Capacity
    flow: Capacity

    @property
    def target(self) -> N: ...

    @property
    def residual_forward(self) -> Capacity: ...

    @property
    def residual_backward(self) -> Capacity: ...

    def push(self, amount: Capacity) -> None: ...


class NetworkEdge(Generic[N]):
    """
    Directed edge of a flow network with integral capacity and current flow.

    Args:
        capacity: Non-negative integer capacity.
        target: Node the edge points to.

    Raises:
        InvalidArgumentError: If capacity is negative or not an integer, or target is None.

    Example:
        >>> e = NetworkEdge(3, "B")
        >>> e.push(2)
        >>> e.residual_forward, e.residual_backward
        (1, 2)
    """

    __slots__ = ("capacity", "target", "flow")

    def __init__(self, capacity: Capacity, target: N) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgumentError(
                f"Capacity must be an integer, got {type(capacity).__name__}."
            )
        if capacity < 0:
            raise InvalidArgumentError(f"Capacity must be non-negative, got {capacity}.")
        if target is None:
            raise InvalidArgumentError("Edge target must not be None.")
        self.capacity: Capacity = capacity
        self.target: N = target
        self.flow: Capacity = 0

    @property
    def residual_forward(self) -> Capacity:
        """Flow that can still be pushed along the edge."""
        return self.capacity - self.flow

    @property
    def residual_backward(self) -> Capacity:
        """Flow that can be cancelled by pushing against the edge."""
        return self.flow

    def push(self, amount: Capacity) -> None:
        """
        Add `amount` to the edge flow; a negative amount cancels flow.

        Raises:
            InternalInconsistencyError: If the resulting flow leaves [0, capacity].
        """
        new_flow = self.flow + amount
        if new_flow < 0 or new_flow > self.capacity:
            raise InternalInconsistencyError(
                f"Pushing {amount} onto edge to {self.target!r} gives flow "
                f"{new_flow} outside [0, {self.capacity}]."
            )
        self.flow = new_flow

    def __repr__(self) -> str:
        return (
            f"NetworkEdge(capacity={self.capacity}, target={self.target!r}, "
            f"flow={self.flow})"
        )
