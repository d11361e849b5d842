"""Sample graphs shipped with fwstep.

``REFERENCE_ADJACENCY`` is the seven-node directed demo graph the step
session starts with. Its ``[6][6]`` cell carries a stray weight of 6, which
``initialize()`` normalizes to 0 under the default diagonal policy.
"""

from __future__ import annotations

from fwstep.types import INF, Matrix, NodeId

REFERENCE_ADJACENCY: Matrix = [
    [0, 3, INF, 7, INF, INF, 2],
    [3, 0, 2, INF, 3, INF, 5],
    [INF, 2, 0, 1, INF, 6, 2],
    [7, INF, 1, 0, 2, 3, INF],
    [INF, 3, INF, 2, 0, 2, INF],
    [INF, INF, 6, 3, 2, 0, INF],
    [5, 3, INF, 2, INF, 2, 6],
]

REFERENCE_SOURCE: NodeId = 0
REFERENCE_TARGET: NodeId = 5


def reference_adjacency() -> Matrix:
    """Return a fresh copy of the reference graph."""
    return [list(row) for row in REFERENCE_ADJACENCY]
