"""Headless step session around a Floyd-Warshall engine.

A presentation layer (window, terminal, notebook) keeps more state than the
engine itself: which endpoints the user picked, which intermediate node is
being tried, the final route once the run ends, and a one-line status.
``StepSession`` holds that state and advances it one relaxation per
``tick()``; scheduling the ticks is left to the caller.
"""

from __future__ import annotations

from typing import List, Optional

from fwstep.algorithms.floyd_warshall import FloydWarshallEngine
from fwstep.config import EngineConfig
from fwstep.errors import InvalidNodeError
from fwstep.graphs import REFERENCE_SOURCE, REFERENCE_TARGET, reference_adjacency
from fwstep.logging import get_logger
from fwstep.model.path import Path
from fwstep.types import AdjacencyInput, NodeId, StepResult, Weight

logger = get_logger(__name__)


class StepSession:
    """Endpoint selection and progress state for a step-by-step run.

    Attributes:
        engine: The wrapped relaxation engine.
        source: Selected start node.
        target: Selected end node.
        active_intermediate: The ``k`` used by the latest tick, None when idle
            or finished.
        route: Final shortest path once finished, None if not finished or
            unreachable.
        finished: True after the final route for the current selection was
            computed.
        status: Human-readable one-line status.
    """

    def __init__(
        self,
        adjacency: Optional[AdjacencyInput] = None,
        source: Optional[NodeId] = None,
        target: Optional[NodeId] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        """
        Args:
            adjacency: Matrix to run on; defaults to the reference graph.
            source: Start node; defaults to the reference start, clamped to the
                last node for smaller graphs.
            target: End node; defaults like ``source``.
            config: Engine configuration.
        """
        self.engine = FloydWarshallEngine(
            adjacency if adjacency is not None else reference_adjacency(), config=config
        )
        # normalized copy, independent of the caller's matrix
        self._adjacency = self.engine.adjacency()

        last = self.engine.n - 1
        self.source: NodeId = min(REFERENCE_SOURCE, last)
        self.target: NodeId = min(REFERENCE_TARGET, last)
        if source is not None:
            self._check_node(source)
            self.source = source
        if target is not None:
            self._check_node(target)
            self.target = target

        self.active_intermediate: Optional[NodeId] = None
        self.route: Optional[Path] = None
        self.finished = False
        self.status = "Ready."

    def _check_node(self, node: NodeId) -> None:
        n = self.engine.n
        if not 0 <= node < n:
            raise InvalidNodeError(f"Node {node} is outside the range [0, {n}).")

    def _clear_result(self) -> None:
        self.route = None
        self.finished = False

    def reset(self) -> None:
        """Restart the run from the original adjacency matrix."""
        self.engine.initialize(self._adjacency)
        self._clear_result()
        self.active_intermediate = None
        self.status = "Reset."

    def select_source(self, node: NodeId) -> None:
        """Pick a new start node; discards any computed route."""
        self._check_node(node)
        self.source = node
        self._clear_result()
        self.status = f"Start = {node}"

    def select_target(self, node: NodeId) -> None:
        """Pick a new end node; discards any computed route."""
        self._check_node(node)
        self.target = node
        self._clear_result()
        self.status = f"End = {node}"

    def tick(self) -> StepResult:
        """Advance by one relaxation, finalizing the route once the run ends.

        Ticking a finished engine recomputes the route for the current
        selection, so endpoints may be changed after the run completes.

        Returns:
            The engine's StepResult for this tick.
        """
        result = self.engine.step()
        if result.intermediate is not None:
            i, j = result.last_touched
            k = result.intermediate
            self.active_intermediate = k
            self.status = f"k={k} | testing dist[{i}][{j}] via {k}"
        if result.complete:
            self._finalize()
        return result

    def run_to_completion(self) -> List[NodeId]:
        """Tick until the route for the current selection is known.

        Returns:
            The final path, empty when the target is unreachable.
        """
        while not self.finished:
            self.tick()
        return self.final_path

    def _finalize(self) -> None:
        self.active_intermediate = None
        self.route = self.engine.shortest_path(self.source, self.target)
        self.finished = True
        if self.route is None:
            self.status = f"Done. No path from {self.source} to {self.target}."
        else:
            self.status = (
                f"Done. dist({self.source}->{self.target}) = {self.route.cost}"
                f" | path: {list(self.route.nodes)}"
            )
        logger.info(self.status)

    @property
    def final_path(self) -> List[NodeId]:
        """Node sequence of the final route, empty if none."""
        return list(self.route.nodes) if self.route is not None else []

    @property
    def final_distance(self) -> Optional[Weight]:
        """Cost of the final route, None if there is none."""
        return self.route.cost if self.route is not None else None
