"""Shared fixtures for netalgo tests."""

from __future__ import annotations

from typing import Dict, List

import pytest

from netalgo.lib.edges import NetworkEdge, ValuedEdge


@pytest.fixture
def weighted_graph() -> List[ValuedEdge]:
    """Connected 5-node graph whose minimum spanning tree has total value 8."""
    return [
        ValuedEdge(1, 2, 1),
        ValuedEdge(1, 3, 4),
        ValuedEdge(2, 3, 3),
        ValuedEdge(3, 4, 2),
        ValuedEdge(2, 5, 2),
        ValuedEdge(4, 5, 5),
        ValuedEdge(1, 5, 6),
    ]


@pytest.fixture
def square_network() -> Dict[str, List[NetworkEdge]]:
    """A->D network through B and C with a B->C cross edge.

    Maximum A->D flow is 15 and saturates both edges entering D.
    """
    return {
        "A": [NetworkEdge(10, "B"), NetworkEdge(5, "C")],
        "B": [NetworkEdge(8, "D"), NetworkEdge(4, "C")],
        "C": [NetworkEdge(7, "D")],
        "D": [],
    }


@pytest.fixture
def classic_network() -> Dict[int, List[NetworkEdge]]:
    """Six-node textbook network with maximum 0->5 flow of 23."""
    return {
        0: [NetworkEdge(16, 1), NetworkEdge(13, 2)],
        1: [NetworkEdge(12, 3)],
        2: [NetworkEdge(4, 1), NetworkEdge(14, 4)],
        3: [NetworkEdge(9, 2), NetworkEdge(20, 5)],
        4: [NetworkEdge(7, 3), NetworkEdge(4, 5)],
        5: [],
    }
