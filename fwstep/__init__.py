"""fwstep: step-by-step Floyd-Warshall all-pairs shortest paths.

fwstep runs Floyd-Warshall one relaxation at a time so a presentation layer
(or a test) can observe the distance and next-hop tables between any two
steps, then rebuilds shortest paths from the next-hop table.

Primary API:
    FloydWarshallEngine - Resumable relaxation engine
    reconstruct_path() - Next-hop path reconstruction
    StepSession - Endpoint selection and progress state for a run
    Path - Reconstructed path with its cost
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from fwstep import FloydWarshallEngine, INF

    engine = FloydWarshallEngine()
    engine.initialize([[0, 4, INF], [INF, 0, 1], [2, INF, 0]])
    while not engine.step().complete:
        pass
    engine.reconstruct_path(0, 2)  # [0, 1, 2]
"""

from __future__ import annotations

from fwstep import cli, logging
from fwstep._version import __version__
from fwstep.algorithms.floyd_warshall import FloydWarshallEngine
from fwstep.algorithms.path_utils import reconstruct_path
from fwstep.config import DEFAULT_CONFIG, EngineConfig
from fwstep.errors import (
    ConfigurationError,
    CorruptPathTableError,
    FloydWarshallError,
    InvalidNodeError,
    NotCompleteError,
    NotInitializedError,
    PathError,
)
from fwstep.graphs import REFERENCE_ADJACENCY, reference_adjacency
from fwstep.io import AdjacencySpec, load_adjacency_file, load_adjacency_yaml
from fwstep.model.path import Path
from fwstep.nx import NodeMap, from_networkx, to_networkx
from fwstep.session import StepSession
from fwstep.types import INF, Cursor, DiagonalPolicy, StepResult

__all__ = [
    # Version
    "__version__",
    # Engine
    "FloydWarshallEngine",
    "reconstruct_path",
    "StepSession",
    "Path",
    # Types
    "INF",
    "Cursor",
    "StepResult",
    "DiagonalPolicy",
    # Configuration
    "EngineConfig",
    "DEFAULT_CONFIG",
    # Errors
    "FloydWarshallError",
    "ConfigurationError",
    "NotInitializedError",
    "InvalidNodeError",
    "PathError",
    "NotCompleteError",
    "CorruptPathTableError",
    # Data
    "REFERENCE_ADJACENCY",
    "reference_adjacency",
    "AdjacencySpec",
    "load_adjacency_yaml",
    "load_adjacency_file",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
