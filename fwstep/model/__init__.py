"""Result models."""

from fwstep.model.path import Path

__all__ = ["Path"]
