"""Resumable Floyd-Warshall all-pairs shortest paths.

``FloydWarshallEngine`` performs exactly one relaxation per ``step()`` call,
so callers (timers, debuggers, tests) can observe the distance and next-hop
tables between any two relaxations. ``run()`` drives the same step function
to completion for callers that only want the result.
"""

from __future__ import annotations

import copy
import math
from numbers import Real
from typing import List, Optional

from fwstep.algorithms.path_utils import reconstruct_path
from fwstep.config import DEFAULT_CONFIG, EngineConfig
from fwstep.errors import (
    ConfigurationError,
    InvalidNodeError,
    NotCompleteError,
    NotInitializedError,
)
from fwstep.logging import get_logger
from fwstep.model.path import Path
from fwstep.types import (
    INF,
    AdjacencyInput,
    Cursor,
    DiagonalPolicy,
    Matrix,
    NextHopTable,
    NodeId,
    StepResult,
    Weight,
    is_finite,
)

logger = get_logger(__name__)


def _normalize_cell(value: object, row: int, col: int, config: EngineConfig) -> Weight:
    """Validate one adjacency cell and map every "no edge" spelling to INF."""
    if value is None:
        return INF
    # bool is a Real subclass but never a meaningful weight
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(
            f"Cell [{row}][{col}] must be a number, INF or None, got {value!r}."
        )
    if math.isnan(value):
        raise ConfigurationError(f"Cell [{row}][{col}] is NaN.")
    if value == math.inf or value == INF:
        return INF
    if value == -math.inf:
        raise ConfigurationError(f"Cell [{row}][{col}] is negative infinity.")
    if value > INF:
        raise ConfigurationError(
            f"Cell [{row}][{col}] = {value} exceeds the INF sentinel ({INF}); "
            "use INF, math.inf or None for a missing edge."
        )
    if value < 0 and not config.allow_negative_weights:
        raise ConfigurationError(
            f"Cell [{row}][{col}] has negative weight {value}; "
            "enable allow_negative_weights to accept it."
        )
    return value


def validate_adjacency(
    adjacency: AdjacencyInput, config: EngineConfig = DEFAULT_CONFIG
) -> Matrix:
    """Check an adjacency matrix and return a normalized copy.

    Args:
        adjacency: Square table of weights. ``INF``, ``math.inf`` and ``None``
            mean "no edge".
        config: Validation limits and diagonal policy.

    Returns:
        A fresh n x n matrix with every missing edge stored as ``INF`` and a
        zero diagonal.

    Raises:
        ConfigurationError: On an empty, oversized or non-square matrix, on
            invalid cell values, on a non-zero diagonal under
            ``DiagonalPolicy.REJECT``, or when ``(n - 1)`` times the largest
            absolute edge weight reaches ``INF``.
    """
    if isinstance(adjacency, (str, bytes)):
        raise ConfigurationError("Adjacency matrix must be a sequence of rows.")
    try:
        rows = list(adjacency)
    except TypeError:
        raise ConfigurationError("Adjacency matrix must be a sequence of rows.") from None

    n = len(rows)
    if n < 1:
        raise ConfigurationError("Adjacency matrix must have at least one node.")
    if n > config.max_nodes:
        raise ConfigurationError(
            f"Adjacency matrix has {n} nodes; the limit is {config.max_nodes}."
        )

    matrix: Matrix = []
    for a, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
            raise ConfigurationError(f"Row {a} is not a sequence of weights.")
        if len(row) != n:
            raise ConfigurationError(
                f"Adjacency matrix is not square: row {a} has {len(row)} "
                f"entries, expected {n}."
            )
        matrix.append([_normalize_cell(value, a, b, config) for b, value in enumerate(row)])

    for a in range(n):
        if matrix[a][a] == 0:
            continue
        if config.diagonal_policy is DiagonalPolicy.REJECT:
            raise ConfigurationError(
                f"Diagonal cell [{a}][{a}] must be 0, got {matrix[a][a]}."
            )
        logger.warning(
            "Normalizing diagonal cell [%d][%d] from %s to 0", a, a, matrix[a][a]
        )
        matrix[a][a] = 0

    # A simple path has at most n - 1 edges; its cost must stay below INF
    heaviest = max(
        (
            abs(w)
            for a, row in enumerate(matrix)
            for b, w in enumerate(row)
            if a != b and is_finite(w)
        ),
        default=0,
    )
    if (n - 1) * heaviest >= INF:
        raise ConfigurationError(
            f"Edge weights up to {heaviest} over {n} nodes can add up to the "
            f"INF sentinel ({INF}); scale the weights down."
        )

    return matrix


class FloydWarshallEngine:
    """
    Step-wise Floyd-Warshall over a dense adjacency matrix.

    The engine owns the distance matrix, the next-hop matrix and a ``(k, i, j)``
    cursor. Each ``step()`` relaxes ``dist[i][j]`` through intermediate ``k``
    and advances the cursor with ``j`` as the innermost dimension. Once ``k``
    reaches ``n`` the tables hold all-pairs shortest paths (assuming no
    negative cycles, which are neither detected nor guarded against) and
    become read-only.

    Example:
        >>> engine = FloydWarshallEngine()
        >>> engine.initialize([[0, 4, INF], [INF, 0, 1], [2, INF, 0]])
        >>> engine.run()
        27
        >>> engine.reconstruct_path(0, 2)
        [0, 1, 2]
    """

    def __init__(
        self,
        adjacency: Optional[AdjacencyInput] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        """
        Args:
            adjacency: Optional matrix passed straight to ``initialize()``.
            config: Engine limits; defaults to ``DEFAULT_CONFIG``.
        """
        self.config: EngineConfig = config if config is not None else DEFAULT_CONFIG
        self._adjacency: Optional[Matrix] = None
        self._dist: Matrix = []
        self._next: NextHopTable = []
        self._n = 0
        self._k = 0
        self._i = 0
        self._j = 0
        self._steps_taken = 0

        if adjacency is not None:
            self.initialize(adjacency)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def initialize(self, adjacency: AdjacencyInput) -> None:
        """Load an adjacency matrix and reset the cursor to ``(0, 0, 0)``.

        On failure the previous state (if any) is left untouched.

        Args:
            adjacency: Square matrix of weights, ``INF``/``math.inf``/``None``
                for missing edges.

        Raises:
            ConfigurationError: If the matrix fails validation.
        """
        matrix = validate_adjacency(adjacency, self.config)
        n = len(matrix)

        next_hops: NextHopTable = [
            [b if a == b or is_finite(matrix[a][b]) else None for b in range(n)]
            for a in range(n)
        ]

        self._adjacency = matrix
        self._dist = [list(row) for row in matrix]
        self._next = next_hops
        self._n = n
        self._k = self._i = self._j = 0
        self._steps_taken = 0
        logger.info(
            "Initialized Floyd-Warshall engine with %d nodes (%d relaxations)",
            n,
            n**3,
        )

    def _require_initialized(self) -> None:
        if self._adjacency is None:
            raise NotInitializedError(
                "Engine is not initialized; call initialize() with an adjacency matrix."
            )

    def _check_node(self, node: NodeId) -> None:
        if not 0 <= node < self._n:
            raise InvalidNodeError(f"Node {node} is outside the range [0, {self._n}).")

    # ------------------------------------------------------------------
    # Relaxation
    # ------------------------------------------------------------------

    def step(self) -> StepResult:
        """Perform one relaxation and advance the cursor.

        Returns:
            StepResult describing the examined cell and the new cursor. When the
            engine is already complete the call is a no-op with
            ``last_touched=None``.

        Raises:
            NotInitializedError: If called before ``initialize()``.
        """
        self._require_initialized()
        n = self._n
        if self._k >= n:
            return StepResult(complete=True, cursor=self.cursor)

        k, i, j = self._k, self._i, self._j
        dist = self._dist
        improved = False

        dik = dist[i][k]
        dkj = dist[k][j]
        if is_finite(dik) and is_finite(dkj):
            candidate = dik + dkj
            if candidate < dist[i][j]:
                logger.debug(
                    "k=%d: dist[%d][%d] %s -> %s", k, i, j, dist[i][j], candidate
                )
                dist[i][j] = candidate
                # first hop of i->k, not k itself, so multi-hop routes rebuild correctly
                self._next[i][j] = self._next[i][k]
                improved = True

        self._advance()
        self._steps_taken += 1

        complete = self._k >= n
        if complete:
            logger.info(
                "Floyd-Warshall complete after %d relaxations", self._steps_taken
            )
        return StepResult(
            complete=complete,
            cursor=self.cursor,
            last_touched=(i, j),
            intermediate=k,
            improved=improved,
        )

    def _advance(self) -> None:
        """Move the cursor one position: j innermost, then i, then k."""
        self._j += 1
        if self._j == self._n:
            self._j = 0
            self._i += 1
            if self._i == self._n:
                self._i = 0
                self._k += 1

    def run(self, max_steps: Optional[int] = None) -> int:
        """Drive ``step()`` until completion or until ``max_steps`` relaxations.

        Args:
            max_steps: Optional cap on the relaxations performed by this call.

        Returns:
            Number of relaxations performed.

        Raises:
            NotInitializedError: If called before ``initialize()``.
        """
        self._require_initialized()
        performed = 0
        while not self.is_complete():
            if max_steps is not None and performed >= max_steps:
                break
            self.step()
            performed += 1
        return performed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_complete(self) -> bool:
        """Return True once every intermediate node has been processed."""
        self._require_initialized()
        return self._k >= self._n

    @property
    def n(self) -> int:
        """Number of nodes in the loaded matrix."""
        self._require_initialized()
        return self._n

    @property
    def cursor(self) -> Cursor:
        """The next ``(k, i, j)`` relaxation; ``k == n`` once complete."""
        self._require_initialized()
        return Cursor(self._k, self._i, self._j)

    @property
    def steps_taken(self) -> int:
        """Relaxations performed since the last ``initialize()``."""
        self._require_initialized()
        return self._steps_taken

    @property
    def total_steps(self) -> int:
        """Relaxations needed to finish, ``n ** 3``."""
        self._require_initialized()
        return self._n**3

    def current_distance(self, a: NodeId, b: NodeId) -> Weight:
        """Return ``dist[a][b]``; final only once the engine is complete.

        Unreachable pairs report ``INF``.

        Raises:
            NotInitializedError: If called before ``initialize()``.
            InvalidNodeError: If either index is out of range.
        """
        self._require_initialized()
        self._check_node(a)
        self._check_node(b)
        return self._dist[a][b]

    def adjacency(self) -> Matrix:
        """Return a copy of the normalized input matrix."""
        self._require_initialized()
        return copy.deepcopy(self._adjacency)

    def distances(self) -> Matrix:
        """Return a snapshot of the distance matrix."""
        self._require_initialized()
        return [list(row) for row in self._dist]

    def next_hops(self) -> NextHopTable:
        """Return a snapshot of the next-hop matrix."""
        self._require_initialized()
        return [list(row) for row in self._next]

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def reconstruct_path(self, source: NodeId, dest: NodeId) -> List[NodeId]:
        """Return the shortest path from source to dest as node indices.

        Args:
            source: Source node index.
            dest: Destination node index.

        Returns:
            The node sequence including both endpoints, ``[source]`` when
            ``source == dest``, or ``[]`` when dest is unreachable.

        Raises:
            NotInitializedError: If called before ``initialize()``.
            NotCompleteError: If the engine has not finished.
            InvalidNodeError: If either index is out of range.
            CorruptPathTableError: If the next-hop table loops or dead-ends.
        """
        self._require_initialized()
        if not self.is_complete():
            k, i, j = self.cursor
            raise NotCompleteError(
                f"Cannot reconstruct {source}->{dest}: engine stopped at "
                f"k={k}, i={i}, j={j} of {self._n}."
            )
        return reconstruct_path(
            self._next, source, dest, max_hops=self.config.hop_limit(self._n)
        )

    def shortest_path(self, source: NodeId, dest: NodeId) -> Optional[Path]:
        """Return the shortest path with its cost, or None when unreachable.

        Raises the same errors as ``reconstruct_path()``.
        """
        nodes = self.reconstruct_path(source, dest)
        if not nodes:
            return None
        return Path(nodes=tuple(nodes), cost=self._dist[source][dest])
