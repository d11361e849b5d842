"""Lightweight representation of a reconstructed shortest path.

The ``Path`` dataclass stores the visited node indices and the total cost.
Cached properties expose the traversed edges, and helpers provide ordering by
cost and edge membership tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator, List, Tuple

from fwstep.types import NodeId, Weight


@dataclass
class Path:
    """Represents a single path through the graph.

    Attributes:
        nodes: Node indices from source to destination, both included.
        cost: Total weight of the path.
    """

    nodes: Tuple[NodeId, ...]
    cost: Weight
    node_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Freeze the node sequence and populate ``node_set``."""
        if not self.nodes:
            raise ValueError("A Path needs at least one node.")
        self.nodes = tuple(self.nodes)
        self.node_set = frozenset(self.nodes)

    def __getitem__(self, idx: int) -> NodeId:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def src_node(self) -> NodeId:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeId:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @cached_property
    def edges(self) -> List[Tuple[NodeId, NodeId]]:
        """Consecutive ``(a, b)`` pairs traversed by the path."""
        return list(zip(self.nodes, self.nodes[1:]))

    def contains_edge(self, a: NodeId, b: NodeId, directed: bool = False) -> bool:
        """Check whether the path traverses the edge between a and b.

        Args:
            a: One endpoint.
            b: Other endpoint.
            directed: If True, only ``a -> b`` matches; otherwise either
                orientation does.

        Returns:
            True if the edge lies on the path.
        """
        for u, v in self.edges:
            if (u, v) == (a, b):
                return True
            if not directed and (u, v) == (b, a):
                return True
        return False

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __str__(self) -> str:
        return "->".join(str(node) for node in self.nodes) + f" (cost {self.cost})"
