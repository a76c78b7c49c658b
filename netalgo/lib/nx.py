"""NetworkX graph conversion utilities.

The algorithms in netalgo take numbered undirected edges (spanning trees)
or an ``edges_of`` callable (flows). This module builds those inputs from
NetworkX graphs and carries results back.

Example:
    >>> import networkx as nx
    >>> from netalgo.lib.algorithms.mst import KruskalAlgorithm
    >>> from netalgo.lib.nx import valued_edges_from_networkx, spanning_tree_to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=2)
    >>> G.add_edge("C", "A", cost=1)
    >>>
    >>> node_count, edges, node_map = valued_edges_from_networkx(G)
    >>> tree = KruskalAlgorithm().get_minimum_spanning_tree(node_count, edges)
    >>> sorted(spanning_tree_to_networkx(tree, node_map).edges())
    [('A', 'B'), ('A', 'C')]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable, List, Tuple, Union

from netalgo.errors import InvalidArgumentError
from netalgo.lib.edges import NetworkEdge, ValuedEdge

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and node numbers.

    Node numbers are contiguous and start at `start` (1 by default, the
    numbering the spanning-tree algorithms expect).

    Attributes:
        to_number: Maps original node names to numbers.
        to_name: Maps numbers back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_number["A"]
        1
        >>> node_map.to_name[2]
        'B'
    """

    to_number: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Iterable[Hashable], start: int = 1) -> "NodeMap":
        """Create a NodeMap numbering `names` in iteration order."""
        to_number: Dict[Hashable, int] = {}
        to_name: Dict[int, Hashable] = {}
        for number, name in enumerate(names, start=start):
            to_number[name] = number
            to_name[number] = name
        return cls(to_number=to_number, to_name=to_name)

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_number)


# Type alias for edge references: (source_node, target_node, edge_key)
EdgeRef = Tuple[Hashable, Hashable, Any]


def _edge_items(graph: NxGraph) -> Iterable[Tuple[Hashable, Hashable, Any, Dict[str, Any]]]:
    if graph.is_multigraph():
        return graph.edges(keys=True, data=True)
    return ((u, v, None, data) for u, v, data in graph.edges(data=True))


def valued_edges_from_networkx(
    graph: NxGraph,
    value_attr: str = "cost",
    default_value: Union[int, float] = 1,
) -> Tuple[int, List[ValuedEdge], NodeMap]:
    """Convert an undirected NetworkX graph into numbered valued edges.

    Args:
        graph: NetworkX Graph or MultiGraph.
        value_attr: Edge attribute holding the edge value.
        default_value: Value used when an edge lacks `value_attr`.

    Returns:
        ``(node_count, edges, node_map)`` ready for
        `MinimumSpanningTreeAlgorithm.get_minimum_spanning_tree`.

    Raises:
        InvalidArgumentError: If `graph` is None or directed.
    """
    if graph is None:
        raise InvalidArgumentError("Graph must not be None.")
    if graph.is_directed():
        raise InvalidArgumentError("Spanning trees need an undirected graph.")

    node_map = NodeMap.from_names(graph.nodes())
    to_number = node_map.to_number
    edges = [
        ValuedEdge(to_number[u], to_number[v], data.get(value_attr, default_value))
        for u, v, _, data in _edge_items(graph)
    ]
    return len(node_map), edges, node_map


def spanning_tree_to_networkx(
    edges: Iterable[ValuedEdge],
    node_map: NodeMap,
    value_attr: str = "cost",
) -> "nx.Graph":
    """Build a NetworkX Graph holding every node of `node_map` and the given edges.

    Args:
        edges: Edges returned by a spanning-tree algorithm.
        node_map: Mapping produced by `valued_edges_from_networkx`.
        value_attr: Edge attribute receiving the edge value.

    Returns:
        Undirected graph of the spanning tree (or forest).
    """
    import networkx as nx

    tree = nx.Graph()
    tree.add_nodes_from(node_map.to_number)
    for edge in edges:
        tree.add_edge(
            node_map.to_name[edge.end1],
            node_map.to_name[edge.end2],
            **{value_attr: edge.value},
        )
    return tree


@dataclass
class FlowNetwork:
    """Flow network built from a directed NetworkX graph.

    Attributes:
        out_edges: Maps each node to its outgoing `NetworkEdge` objects.
        edge_map: Maps each NetworkX edge reference ``(u, v, key)`` to its
            `NetworkEdge`; ``key`` is None for graphs without multi-edges.
    """

    out_edges: Dict[Hashable, List[NetworkEdge]] = field(default_factory=dict)
    edge_map: Dict[EdgeRef, NetworkEdge] = field(default_factory=dict)

    def edges_of(self, node: Hashable) -> List[NetworkEdge]:
        """Outgoing edges of `node`, suitable as a max-flow ``edges_of``."""
        return self.out_edges.get(node, [])

    def write_flow(self, graph: NxGraph, flow_attr: str = "flow") -> None:
        """Store each edge's flow on the matching NetworkX edge under `flow_attr`."""
        for (u, v, key), edge in self.edge_map.items():
            if key is None:
                graph.edges[u, v][flow_attr] = edge.flow
            else:
                graph.edges[u, v, key][flow_attr] = edge.flow


def network_from_networkx(
    graph: NxGraph,
    capacity_attr: str = "capacity",
) -> FlowNetwork:
    """Convert a directed NetworkX graph into a `FlowNetwork`.

    Every edge must carry a non-negative integer capacity in `capacity_attr`.

    Args:
        graph: NetworkX DiGraph or MultiDiGraph.
        capacity_attr: Edge attribute holding the capacity.

    Returns:
        Network whose `edges_of` can be passed to the max-flow engine.

    Raises:
        InvalidArgumentError: If `graph` is None or undirected, or an edge has
            no valid capacity.
    """
    if graph is None:
        raise InvalidArgumentError("Graph must not be None.")
    if not graph.is_directed():
        raise InvalidArgumentError("Flow networks need a directed graph.")

    network = FlowNetwork()
    for u, v, key, data in _edge_items(graph):
        if capacity_attr not in data:
            raise InvalidArgumentError(
                f"Edge {u!r} -> {v!r} has no '{capacity_attr}' attribute."
            )
        edge = NetworkEdge(data[capacity_attr], v)
        network.out_edges.setdefault(u, []).append(edge)
        network.edge_map[(u, v, key)] = edge
    return network
