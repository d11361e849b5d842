"""Floyd-Warshall relaxation engine and next-hop path reconstruction."""

from fwstep.algorithms.floyd_warshall import FloydWarshallEngine, validate_adjacency
from fwstep.algorithms.path_utils import reconstruct_path

__all__ = ["FloydWarshallEngine", "reconstruct_path", "validate_adjacency"]
