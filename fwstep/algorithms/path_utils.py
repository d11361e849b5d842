from __future__ import annotations

from typing import List, Optional, Sequence

from fwstep.config import DEFAULT_CONFIG
from fwstep.errors import CorruptPathTableError, InvalidNodeError
from fwstep.types import NodeId


def reconstruct_path(
    next_hops: Sequence[Sequence[Optional[NodeId]]],
    src_node: NodeId,
    dst_node: NodeId,
    max_hops: Optional[int] = None,
) -> List[NodeId]:
    """
    Rebuild the node sequence from src_node to dst_node using a next-hop table.

    The table is read as produced by Floyd-Warshall: ``next_hops[a][b]`` is the
    first node to move to when travelling from ``a`` towards ``b``. The result
    is only guaranteed to be a shortest path when the table comes from a
    finished run.

    Args:
        next_hops: Square next-hop table; ``None`` marks "no hop".
        src_node: Source node index.
        dst_node: Destination node index.
        max_hops: Hops allowed before the walk is treated as looping. Defaults
            to ``DEFAULT_CONFIG.hop_limit(n)``, i.e. ``n + 5``.

    Returns:
        The path including both endpoints, ``[src_node]`` when the endpoints
        coincide, or an empty list when dst_node is unreachable.

    Raises:
        InvalidNodeError: If either endpoint lies outside ``[0, n)``.
        CorruptPathTableError: If the walk meets a missing or out-of-range hop,
            or takes more than ``max_hops`` hops.
    """
    n = len(next_hops)
    for node in (src_node, dst_node):
        if not 0 <= node < n:
            raise InvalidNodeError(f"Node {node} is outside the range [0, {n}).")

    if src_node == dst_node:
        return [src_node]
    if next_hops[src_node][dst_node] is None:
        return []

    hop_limit = DEFAULT_CONFIG.hop_limit(n) if max_hops is None else max_hops
    path = [src_node]
    current = src_node
    while current != dst_node:
        hop = next_hops[current][dst_node]
        if hop is None or not 0 <= hop < n:
            raise CorruptPathTableError(
                f"Next-hop table has no valid hop from {current} towards {dst_node} "
                f"(got {hop!r}) while walking {src_node}->{dst_node}."
            )
        current = hop
        path.append(current)

        # path holds hops + 1 nodes
        if len(path) - 1 > hop_limit:
            raise CorruptPathTableError(
                f"Path {src_node}->{dst_node} exceeded {hop_limit} hops; "
                "the next-hop table contains a cycle."
            )
    return path
