"""YAML loader + schema validation for adjacency documents.

Expected document shape::

    adjacency:
      - [0, 3, .inf]
      - [3, 0, 2]
      - [null, 2, 0]
    source: 0   # optional
    target: 2   # optional

Missing edges may be written as ``.inf``, ``null`` or the strings ``inf`` /
``INF``. The loader checks document shape against the packaged JSON schema
``fwstep/schemas/adjacency.json``; weight validation happens in
``FloydWarshallEngine.initialize()``.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from fwstep.errors import ConfigurationError
from fwstep.types import NodeId, Weight

_INF_STRINGS = {"inf", "+inf", "infinity"}
_ALLOWED_KEYS = {"adjacency", "source", "target", "name"}


@dataclass
class AdjacencySpec:
    """Adjacency matrix plus optional endpoints read from a document."""

    adjacency: List[List[Optional[Weight]]]
    source: Optional[NodeId] = None
    target: Optional[NodeId] = None
    name: Optional[str] = None


@lru_cache(maxsize=None)
def _adjacency_schema() -> Dict[str, Any]:
    with (
        resources.files("fwstep.schemas")
        .joinpath("adjacency.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _parse_cell(value: Any, row: int, col: int) -> Optional[Weight]:
    if isinstance(value, str):
        if value.strip().lower() in _INF_STRINGS:
            return math.inf
        raise ConfigurationError(
            f"adjacency[{row}][{col}]: unrecognized value {value!r}"
        )
    return value


def _check_endpoint(data: Dict[str, Any], key: str) -> None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ConfigurationError(f"'{key}' must be an integer node index")


def load_adjacency_yaml(yaml_str: str) -> AdjacencySpec:
    """Parse and validate an adjacency document from a YAML string.

    Args:
        yaml_str: YAML text.

    Returns:
        The parsed AdjacencySpec.

    Raises:
        ConfigurationError: If the YAML is malformed or the document does not
            match the adjacency schema.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError("The provided YAML must map to a dictionary at top-level.")

    # Early shape checks helpful for better error messages prior to schema validation
    unknown = set(str(k) for k in data.keys()) - _ALLOWED_KEYS
    if unknown:
        raise ConfigurationError(f"Unrecognized keys: {sorted(unknown)}")

    rows = data.get("adjacency")
    if not isinstance(rows, list) or not rows:
        raise ConfigurationError("'adjacency' must be a non-empty list of rows")
    for r, row in enumerate(rows):
        if not isinstance(row, list):
            raise ConfigurationError(f"adjacency row {r} must be a list")

    _check_endpoint(data, "source")
    _check_endpoint(data, "target")

    try:
        jsonschema.validate(data, _adjacency_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConfigurationError(
            f"Adjacency document failed schema validation at {location}: {exc.message}"
        ) from exc

    matrix = [
        [_parse_cell(value, r, c) for c, value in enumerate(row)]
        for r, row in enumerate(rows)
    ]

    name = data.get("name")
    return AdjacencySpec(
        adjacency=matrix,
        source=data.get("source"),
        target=data.get("target"),
        name=str(name) if name is not None else None,
    )


def load_adjacency_file(path: Union[str, Path]) -> AdjacencySpec:
    """Read and parse an adjacency YAML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not UTF-8, or
            its content is invalid.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigurationError(f"Adjacency file not found: {file_path}")
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(
            f"Adjacency file is not valid UTF-8: {file_path} ({exc.reason})"
        ) from exc
    except OSError as exc:
        raise ConfigurationError(f"Cannot read adjacency file {file_path}: {exc}") from exc
    doc = load_adjacency_yaml(text)
    if doc.name is None:
        doc.name = file_path.stem
    return doc
