"""Global pytest configuration.

Registers the shared graph fixtures in ``tests/algorithms/sample_graphs.py``
as a plugin rather than importing them here, so pytest applies assertion
rewriting to that module. This conftest has no package ``__init__``, so pytest
puts ``tests/`` on ``sys.path`` and the plugin resolves as
``algorithms.sample_graphs``.
"""

from __future__ import annotations

import logging

import pytest

from fwstep.logging import set_global_log_level

pytest_plugins = ["algorithms.sample_graphs"]


@pytest.fixture(autouse=True)
def _restore_log_level():
    """CLI tests switch the global level; put it back to INFO afterwards."""
    yield
    set_global_log_level(logging.INFO)
