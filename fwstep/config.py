"""Configuration classes for fwstep components."""

from dataclasses import dataclass

from fwstep.types import DiagonalPolicy


@dataclass
class EngineConfig:
    """Validation and safety limits for the relaxation engine."""

    # Largest accepted adjacency matrix dimension
    max_nodes: int = 256

    # Treatment of non-zero diagonal cells
    diagonal_policy: DiagonalPolicy = DiagonalPolicy.NORMALIZE

    # Negative weights are accepted only when enabled; negative cycles stay undefined
    allow_negative_weights: bool = False

    # Extra hops allowed beyond n before a path walk is declared corrupt
    hop_guard_slack: int = 5

    def hop_limit(self, n: int) -> int:
        """Return the maximum number of hops a reconstructed path may take."""
        return n + max(0, self.hop_guard_slack)


# Global configuration instance
DEFAULT_CONFIG = EngineConfig()
