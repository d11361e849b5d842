import pytest

from fwstep.algorithms.path_utils import reconstruct_path
from fwstep.errors import CorruptPathTableError, InvalidNodeError, PathError


def test_src_eq_dst():
    """A node reaches itself with a single-element path, whatever the table says."""
    next_hops = [[None, None], [None, None]]
    assert reconstruct_path(next_hops, 1, 1) == [1]


def test_no_hop_means_unreachable():
    next_hops = [[0, None], [0, 1]]
    assert reconstruct_path(next_hops, 0, 1) == []


def test_direct_edge():
    next_hops = [[0, 1], [0, 1]]
    assert reconstruct_path(next_hops, 0, 1) == [0, 1]


def test_multi_hop_walk():
    """
    Z=0 -> A=1 -> B=2 -> C=3; every node on the way points at its successor
    towards 3.
    """
    next_hops = [
        [0, 1, 1, 1],
        [None, 1, 2, 2],
        [None, None, 2, 3],
        [None, None, None, 3],
    ]
    assert reconstruct_path(next_hops, 0, 3) == [0, 1, 2, 3]
    assert reconstruct_path(next_hops, 1, 3) == [1, 2, 3]
    assert reconstruct_path(next_hops, 3, 0) == []


@pytest.mark.parametrize("src, dst", [(-1, 0), (0, 2), (5, 5)])
def test_out_of_range_nodes(src, dst):
    next_hops = [[0, 1], [0, 1]]
    with pytest.raises(InvalidNodeError):
        reconstruct_path(next_hops, src, dst)


def test_cycle_is_detected():
    """0 and 1 point at each other on the way to 2, which would loop forever."""
    next_hops = [
        [0, 1, 1],
        [0, 1, 0],
        [None, None, 2],
    ]
    with pytest.raises(CorruptPathTableError, match="exceeded 8 hops"):
        reconstruct_path(next_hops, 0, 2)


def test_max_hops_controls_limit():
    next_hops = [
        [0, 1, 1],
        [0, 1, 0],
        [None, None, 2],
    ]
    with pytest.raises(CorruptPathTableError, match="exceeded 3 hops"):
        reconstruct_path(next_hops, 0, 2, max_hops=3)


def test_engine_uses_configured_hop_limit(triangle):
    from fwstep.algorithms.floyd_warshall import FloydWarshallEngine
    from fwstep.config import EngineConfig

    engine = FloydWarshallEngine(triangle, config=EngineConfig(hop_guard_slack=1))
    engine.run()
    engine._next[1][2] = 0
    engine._next[0][2] = 1
    # n = 3, slack 1
    with pytest.raises(CorruptPathTableError, match="exceeded 4 hops"):
        engine.reconstruct_path(0, 2)


def test_dead_end_mid_walk():
    next_hops = [
        [0, 1, 1],
        [0, 1, None],
        [None, None, 2],
    ]
    with pytest.raises(CorruptPathTableError, match="no valid hop from 1"):
        reconstruct_path(next_hops, 0, 2)


def test_hop_outside_table():
    next_hops = [
        [0, 1, 7],
        [0, 1, 2],
        [None, None, 2],
    ]
    with pytest.raises(PathError):
        reconstruct_path(next_hops, 0, 2)


def test_engine_table_corruption_is_caught(triangle):
    from fwstep.algorithms.floyd_warshall import FloydWarshallEngine

    engine = FloydWarshallEngine(triangle)
    engine.run()
    # Simulate external mutation of the engine's own table
    engine._next[1][2] = 0
    engine._next[0][2] = 1
    with pytest.raises(CorruptPathTableError):
        engine.reconstruct_path(0, 2)
