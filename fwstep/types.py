"""Base types and constants for the relaxation engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

#: Numeric edge weight or path cost.
Weight = Union[int, float]

#: Node identifier: a row/column index into the adjacency matrix.
NodeId = int

#: Sentinel stored in the distance matrix for "no path known". Sums are only
#: formed after both operands pass ``is_finite``, so it never leaks into a sum.
INF: int = 1_000_000_000

#: Input adjacency: rows of weights; ``INF``, ``math.inf`` or ``None`` mean "no edge".
AdjacencyInput = Sequence[Sequence[Optional[Weight]]]

#: Normalized n x n weight table.
Matrix = List[List[Weight]]

#: n x n next-hop table; ``None`` means "no hop".
NextHopTable = List[List[Optional[NodeId]]]


def is_finite(weight: Weight) -> bool:
    """Return True if ``weight`` is a real weight rather than the ``INF`` sentinel."""
    return weight < INF


class DiagonalPolicy(IntEnum):
    """How ``initialize()`` treats non-zero values on the diagonal."""

    #: Replace the value with 0 and log a warning.
    NORMALIZE = 1
    #: Raise ``ConfigurationError``.
    REJECT = 2

    @classmethod
    def from_string(cls, value: str) -> "DiagonalPolicy":
        """Parse a case-insensitive policy name.

        Args:
            value: Policy name, e.g. "normalize" or "REJECT".

        Returns:
            The corresponding DiagonalPolicy member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid diagonal policy '{value}'. Valid values are: {valid}"
            ) from None


class Cursor(NamedTuple):
    """Position of the next relaxation, ordered ``k`` outer, ``i`` middle, ``j`` inner."""

    k: int
    i: int
    j: int


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single ``step()`` call.

    Attributes:
        complete: True when the engine has exhausted every intermediate node.
        cursor: Cursor after the step.
        last_touched: The ``(i, j)`` cell examined by this step, or None when
            the step was a no-op on a completed engine.
        intermediate: The ``k`` used by this step, or None for a no-op.
        improved: True if ``dist[i][j]`` was lowered by this step.
    """

    complete: bool
    cursor: Cursor
    last_touched: Optional[Tuple[NodeId, NodeId]] = None
    intermediate: Optional[NodeId] = None
    improved: bool = False
