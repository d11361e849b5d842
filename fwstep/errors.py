"""Exception hierarchy for the step-wise Floyd-Warshall engine.

Every error raised by fwstep derives from ``FloydWarshallError``. Errors that
describe bad caller input also derive from the matching builtin
(``ValueError``, ``IndexError``, ``RuntimeError``) so generic handlers keep
working.
"""

from __future__ import annotations


class FloydWarshallError(Exception):
    """Base class for all fwstep errors."""


class ConfigurationError(FloydWarshallError, ValueError):
    """The adjacency matrix has a bad shape or holds invalid values."""


class NotInitializedError(FloydWarshallError, RuntimeError):
    """An engine operation was called before ``initialize()``."""


class InvalidNodeError(FloydWarshallError, IndexError):
    """A node index lies outside ``[0, n)``."""


class PathError(FloydWarshallError):
    """Path reconstruction failed."""


class NotCompleteError(PathError):
    """Path reconstruction was requested before the engine finished."""


class CorruptPathTableError(PathError):
    """The next-hop table does not lead to the destination.

    Raised when a walk exceeds the hop ceiling, meets a missing hop, or meets a
    hop outside the node range. Under correct engine operation this cannot
    happen.
    """
