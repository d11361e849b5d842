"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and the dense adjacency matrices
consumed by ``FloydWarshallEngine``.

Example:
    >>> import networkx as nx
    >>> from fwstep.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3)
    >>> G.add_edge("B", "C", weight=2)
    >>>
    >>> matrix, node_map = from_networkx(G)
    >>> node_map.to_index["C"]
    2
    >>> G_out = to_networkx(matrix, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Optional, Tuple

import networkx as nx

from fwstep.types import INF, AdjacencyInput, Matrix, Weight, is_finite


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and matrix indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Iterable[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names in index order."""
        names = list(names)
        to_index = {name: i for i, name in enumerate(names)}
        if len(to_index) != len(names):
            raise ValueError("Node names must be unique.")
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: Any,
    *,
    weight: str = "weight",
    default_weight: Weight = 1,
    nodes: Optional[Iterable[Hashable]] = None,
) -> Tuple[Matrix, NodeMap]:
    """Convert a NetworkX graph to a dense adjacency matrix.

    Undirected graphs fill both ``[u][v]`` and ``[v][u]``. Parallel edges of a
    multigraph collapse to their minimum weight. Self-loops are ignored since
    the diagonal is always 0.

    Args:
        G: NetworkX graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        weight: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
        nodes: Optional node order; defaults to ``G.nodes`` iteration order.

    Returns:
        Tuple of (matrix, node_map). Missing edges hold ``INF``.

    Raises:
        ValueError: If ``nodes`` omits a node of the graph or names one twice.
    """
    order = list(G.nodes) if nodes is None else list(nodes)
    node_map = NodeMap.from_names(order)
    missing = [node for node in G.nodes if node not in node_map.to_index]
    if missing:
        raise ValueError(f"Node order is missing graph nodes: {missing}")

    n = len(order)
    matrix: Matrix = [[0 if a == b else INF for b in range(n)] for a in range(n)]

    def _relax(a: int, b: int, w: Weight) -> None:
        if a != b and w < matrix[a][b]:
            matrix[a][b] = w

    for u, v, data in G.edges(data=True):
        w = data.get(weight, default_weight)
        a, b = node_map.to_index[u], node_map.to_index[v]
        _relax(a, b, w)
        if not G.is_directed():
            _relax(b, a, w)

    return matrix, node_map


def to_networkx(
    adjacency: AdjacencyInput,
    node_map: Optional[NodeMap] = None,
    *,
    weight: str = "weight",
) -> nx.DiGraph:
    """Convert an adjacency matrix to a NetworkX DiGraph.

    Every finite off-diagonal cell becomes one edge carrying ``weight``.

    Args:
        adjacency: Square weight table; ``INF``, ``math.inf`` or ``None`` mean
            "no edge".
        node_map: Optional mapping to restore original node names.
        weight: Edge attribute name to write.

    Returns:
        A new DiGraph containing every node, connected or not.
    """
    n = len(adjacency)
    name = node_map.to_name.__getitem__ if node_map is not None else (lambda i: i)

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in range(n))
    for a, row in enumerate(adjacency):
        for b, w in enumerate(row):
            if a == b or w is None or not is_finite(w):
                continue
            G.add_edge(name(a), name(b), **{weight: w})
    return G
