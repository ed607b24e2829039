"""Classify OpenAPI operations for example generation.

Handles:
- Path and query parameter extraction
- $ref parameters (#/components/parameters/...)
- Path-item level parameters inherited by each operation
- Pagination detection (``next_url`` in the success response)
- Enum parameters: typed (wrapped in the generated enum type) or raw
"""

from __future__ import annotations

from typing import Any

from .loader import SpecLoadError, resolve_ref

# Property whose presence marks a paginated collection response
NEXT_PAGE_FIELD = "next_url"

_SUCCESS_CODES = ("200", "default")


def _resolve(spec: dict[str, Any] | None, node: Any) -> Any:
    """Follow a top-level $ref when the spec is available.

    External or dangling refs are left as-is.
    """
    if spec is not None and isinstance(node, dict) and "$ref" in node:
        try:
            return resolve_ref(spec, node["$ref"])
        except SpecLoadError:
            return node
    return node


def success_schema(operation: dict[str, Any]) -> dict[str, Any] | None:
    """Return the JSON schema of the 200 (or default) response."""
    responses = operation.get("responses") or {}
    for code in _SUCCESS_CODES:
        if code in responses:
            response = responses[code] or {}
            content = response.get("content") or {}
            schema = (content.get("application/json") or {}).get("schema")
            return schema or None
    return None


def _has_next_page(schema: Any) -> bool:
    return isinstance(schema, dict) and NEXT_PAGE_FIELD in (schema.get("properties") or {})


def is_paginated(operation: dict[str, Any], spec: dict[str, Any] | None = None) -> bool:
    """Whether the success response exposes a next-page marker."""
    schema = _resolve(spec, success_schema(operation))
    if not isinstance(schema, dict):
        return False
    if _has_next_page(schema):
        return True
    return any(_has_next_page(_resolve(spec, branch)) for branch in schema.get("allOf") or [])


def is_enum_param(param: dict[str, Any]) -> bool:
    """Check if a parameter is an explicit enum or a named (generated) type."""
    schema = param.get("schema")
    if not schema:
        return False
    return isinstance(schema.get("enum"), list) or "$ref" in schema


def should_use_typed_enum(param: dict[str, Any]) -> bool:
    """Whether an enum param is wrapped in its generated Go type.

    The Go generator emits a named type for $ref enums and for enums with
    a default; other inline enums stay plain strings.
    """
    schema = param.get("schema") or {}
    return "$ref" in schema or "default" in schema


def parse_parameters(
    spec: dict[str, Any] | None,
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Collect an operation's parameters, path-item ones first.

    An operation parameter replaces a path-item parameter with the same
    name and location.
    """
    merged: dict[tuple[str, str], dict[str, Any]] = {}
    inherited = (path_item or {}).get("parameters") or []
    for raw in [*inherited, *(operation.get("parameters") or [])]:
        param = _resolve(spec, raw)
        if not isinstance(param, dict) or "name" not in param:
            continue
        merged[(param["name"], param.get("in", "query"))] = param
    return list(merged.values())


def classify_operation(
    spec: dict[str, Any] | None,
    route: str,
    method: str,
    operation: dict[str, Any],
    path_item: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Derive everything example generation needs from one operation."""
    params = parse_parameters(spec, operation, path_item)
    return {
        "operation_id": operation.get("operationId"),
        "path": route,
        "method": method,
        "parameters": params,
        "path_params": [p for p in params if p.get("in") == "path"],
        "query_params": [p for p in params if p.get("in") == "query"],
        "is_paginated": is_paginated(operation, spec),
    }
