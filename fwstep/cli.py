"""Command-line interface for fwstep."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional, Sequence

from fwstep.algorithms.floyd_warshall import FloydWarshallEngine
from fwstep.config import EngineConfig
from fwstep.errors import FloydWarshallError
from fwstep.graphs import reference_adjacency
from fwstep.io import AdjacencySpec, load_adjacency_file
from fwstep.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from fwstep.session import StepSession
from fwstep.types import DiagonalPolicy, Weight, is_finite

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 3,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):>{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_weight(value: Optional[Weight]) -> str:
    """Render a weight, showing the no-edge sentinel as ``inf``.

    Examples:
        3 -> "3"; 2.5 -> "2.5"; INF -> "inf"; None -> "inf".
    """
    if value is None or not is_finite(value):
        return "inf"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _matrix_table(matrix: Sequence[Sequence[Optional[Weight]]]) -> str:
    """Render a square matrix with node indices as row and column labels."""
    n = len(matrix)
    headers = [""] + [str(b) for b in range(n)]
    rows = [[str(a)] + [_format_weight(w) for w in matrix[a]] for a in range(n)]
    return _format_table(headers, rows)


def _load_document(path: Optional[Path]) -> AdjacencySpec:
    if path is None:
        logger.debug("No matrix file given; using the reference graph")
        return AdjacencySpec(adjacency=reference_adjacency(), name="reference")
    logger.info(f"Loading adjacency matrix from: {path}")
    return load_adjacency_file(path)


def _run(
    path: Optional[Path],
    source: Optional[int],
    target: Optional[int],
    trace: bool,
    as_json: bool,
    config: Optional[EngineConfig] = None,
) -> None:
    """Drive a step session to completion and report the route.

    Args:
        path: Adjacency YAML file, or None for the reference graph.
        source: Start node override.
        target: End node override.
        trace: Print the status after every relaxation.
        as_json: Print a JSON document instead of the status line.
        config: Engine configuration; defaults to ``DEFAULT_CONFIG``.
    """
    _start_time = perf_counter()
    try:
        doc = _load_document(path)
        session = StepSession(
            doc.adjacency,
            source=source if source is not None else doc.source,
            target=target if target is not None else doc.target,
            config=config,
        )
        logger.info(
            f"Running Floyd-Warshall on '{doc.name}' from {session.source} to {session.target}"
        )

        while not session.finished:
            session.tick()
            if trace and not session.finished:
                print(session.status)

        if as_json:
            payload: Dict[str, Any] = {
                "graph": doc.name,
                "nodes": session.engine.n,
                "source": session.source,
                "target": session.target,
                "steps": session.engine.steps_taken,
                "distance": session.final_distance,
                "path": session.final_path,
            }
            print(json.dumps(payload, indent=2))
        else:
            print(session.status)

        logger.info(f"Run completed in {perf_counter() - _start_time:.3f} s")
    except FloydWarshallError as e:
        logger.error(f"Failed to run: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect(path: Optional[Path], config: Optional[EngineConfig] = None) -> None:
    """Print the adjacency matrix and the converged distance matrix.

    Args:
        path: Adjacency YAML file, or None for the reference graph.
        config: Engine configuration; defaults to ``DEFAULT_CONFIG``.
    """
    try:
        doc = _load_document(path)
        engine = FloydWarshallEngine(doc.adjacency, config=config)

        print(f"Graph: {doc.name} ({engine.n} nodes, {engine.total_steps} relaxations)")
        print("\nAdjacency:")
        print(_matrix_table(engine.adjacency()))

        engine.run()
        print("\nShortest distances:")
        print(_matrix_table(engine.distances()))

        unreachable = [
            (a, b)
            for a in range(engine.n)
            for b in range(engine.n)
            if not is_finite(engine.current_distance(a, b))
        ]
        if unreachable:
            print(f"\nUnreachable pairs: {len(unreachable)}")
    except FloydWarshallError as e:
        logger.error(f"Failed to inspect: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``fwstep`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="fwstep",
        description="Step through Floyd-Warshall on a small weighted graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logging"
    )
    parser.add_argument(
        "--diagonal-policy",
        default="normalize",
        metavar="{normalize,reject}",
        help="How non-zero diagonal cells are treated (default: normalize)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run to completion and show the route")
    run_parser.add_argument(
        "matrix",
        type=Path,
        nargs="?",
        default=None,
        help="Path to adjacency YAML (default: built-in reference graph)",
    )
    run_parser.add_argument("--source", "-s", type=int, default=None, help="Start node")
    run_parser.add_argument("--target", "-t", type=int, default=None, help="End node")
    run_parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the status line after every relaxation",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the result as JSON",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show adjacency and converged distance tables"
    )
    inspect_parser.add_argument(
        "matrix",
        type=Path,
        nargs="?",
        default=None,
        help="Path to adjacency YAML (default: built-in reference graph)",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    try:
        policy = DiagonalPolicy.from_string(args.diagonal_policy)
    except ValueError as e:
        parser.error(str(e))
    config = EngineConfig(diagonal_policy=policy)

    if args.command == "run":
        _run(args.matrix, args.source, args.target, args.trace, args.as_json, config)
    elif args.command == "inspect":
        _inspect(args.matrix, config)


if __name__ == "__main__":
    main()
