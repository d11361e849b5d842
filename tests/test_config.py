"""Test the configuration module functionality."""

import pytest

from fwstep.config import DEFAULT_CONFIG, EngineConfig
from fwstep.types import DiagonalPolicy


def test_engine_config_defaults():
    config = EngineConfig()

    assert config.max_nodes == 256
    assert config.diagonal_policy is DiagonalPolicy.NORMALIZE
    assert config.allow_negative_weights is False
    assert config.hop_guard_slack == 5


def test_hop_limit():
    config = EngineConfig()
    assert config.hop_limit(7) == 12
    assert EngineConfig(hop_guard_slack=0).hop_limit(7) == 7
    # Negative slack is clamped
    assert EngineConfig(hop_guard_slack=-3).hop_limit(7) == 7


def test_global_config_instance():
    assert DEFAULT_CONFIG == EngineConfig()


def test_custom_config():
    config = EngineConfig(
        max_nodes=8,
        diagonal_policy=DiagonalPolicy.REJECT,
        allow_negative_weights=True,
        hop_guard_slack=1,
    )
    assert config.max_nodes == 8
    assert config.diagonal_policy is DiagonalPolicy.REJECT
    assert config.allow_negative_weights
    assert config.hop_limit(3) == 4


@pytest.mark.parametrize(
    "value, expected",
    [
        ("normalize", DiagonalPolicy.NORMALIZE),
        ("REJECT", DiagonalPolicy.REJECT),
        ("Reject", DiagonalPolicy.REJECT),
    ],
)
def test_diagonal_policy_from_string(value, expected):
    assert DiagonalPolicy.from_string(value) is expected


def test_diagonal_policy_from_string_invalid():
    with pytest.raises(ValueError, match="Valid values are: NORMALIZE, REJECT"):
        DiagonalPolicy.from_string("ignore")
