"""Load and parse the REST OpenAPI spec.

Reads spec/openapi.json and extracts paths, operations, schemas.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

SPEC_PATH = Path(__file__).parent.parent / "spec" / "openapi.json"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class SpecLoadError(Exception):
    """The spec is missing, unreadable, or not a JSON object."""


def load_spec(path: Path | None = None) -> dict[str, Any]:
    """Load the OpenAPI spec from disk."""
    spec_file = Path(path or SPEC_PATH)
    if not spec_file.is_file():
        raise SpecLoadError(f"{spec_file} not found. Pull the spec first?")
    try:
        with open(spec_file, encoding="utf-8") as f:
            spec = json.load(f)
    except json.JSONDecodeError as exc:
        raise SpecLoadError(f"Invalid JSON in {spec_file}: {exc}") from exc
    if not isinstance(spec, dict):
        raise SpecLoadError(
            f"{spec_file} must contain a JSON object (got {type(spec).__name__})"
        )
    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths") or {}


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the spec."""
    return (spec.get("components") or {}).get("schemas") or {}


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a $ref pointer in the spec."""
    parts = ref.lstrip("#/").split("/")
    node: Any = spec
    for part in parts:
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            raise SpecLoadError(f"Unresolvable $ref: {ref}")
        node = node[part]
    return node


def iter_operations(spec: dict[str, Any]) -> Iterator[tuple[str, str, dict[str, Any]]]:
    """Yield (route, method, operation) for every HTTP operation, in document order."""
    for route, path_item in get_paths(spec).items():
        if not isinstance(path_item, dict):
            continue
        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            yield route, method.lower(), operation
