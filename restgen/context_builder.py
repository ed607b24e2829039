"""Build Jinja2 template context for the Go examples.

One entry per operation with an operationId. Each entry carries the Go
names (method, params struct, filename) and two value renderings:
``literal`` (realistic values) and ``symbolic`` (TOKEN_ placeholders for
docs substitution).
"""

from __future__ import annotations

import json
from typing import Any

from .classifier import classify_operation, is_enum_param, should_use_typed_enum
from .loader import get_paths, iter_operations
from .naming import (
    is_string_like_domain,
    to_field_path,
    to_snake_filename,
    to_symbolic_token,
    to_upper_camel,
)

CLIENT_PACKAGE = "github.com/massive-com/client-go/v3/rest"
API_KEY_PLACEHOLDER = "GLOBAL_TOKEN_API_KEY"

# Fallback literal for numeric params with no example or default
_NUMBER_PLACEHOLDER = "100"


def _go_literal(value: Any) -> str:
    """Render a JSON value as Go source."""
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    # Arrays and objects are passed as their JSON text
    return json.dumps(json.dumps(value))


def param_value(param: dict[str, Any], use_tokens: bool = False) -> str:
    """Render a parameter's example value as a Go expression."""
    if use_tokens:
        token = to_symbolic_token(param["name"])
        return f'"{token}"' if is_string_like_domain(param) else token

    schema = param.get("schema") or {}
    for value in (param.get("example"), schema.get("example"), schema.get("default")):
        if value is not None:
            return _go_literal(value)

    schema_type = schema.get("type") or "string"
    if schema_type == "boolean":
        return "true"
    if schema_type in ("integer", "number"):
        return _NUMBER_PLACEHOLDER
    return json.dumps(param["name"])


def field_expression(param: dict[str, Any], params_type: str, use_tokens: bool = False) -> str:
    """Go expression assigned to a query param's struct field."""
    value = param_value(param, use_tokens)
    if is_enum_param(param):
        if should_use_typed_enum(param):
            return f"rest.Ptr(gen.{params_type}{to_field_path(param['name'])}({value}))"
        return value
    return f"rest.Ptr({value})"


def _render_values(op: dict[str, Any], params_type: str, use_tokens: bool) -> dict[str, Any]:
    return {
        "fields": [
            {
                "name": to_field_path(p["name"]),
                "expr": field_expression(p, params_type, use_tokens),
            }
            for p in op["query_params"]
        ],
        "path_values": [param_value(p, use_tokens) for p in op["path_params"]],
    }


def build_example(op: dict[str, Any]) -> dict[str, Any]:
    """Build the template context for one classified operation."""
    base_name = to_upper_camel(op["operation_id"])
    params_type = f"{base_name}Params"
    return {
        "operation_id": op["operation_id"],
        "method": op["method"],
        "path": op["path"],
        "go_method": f"{base_name}WithResponse",
        "params_type": params_type,
        "file_name": to_snake_filename(op["operation_id"]),
        "has_query_params": bool(op["query_params"]),
        "is_paginated": op["is_paginated"],
        "literal": _render_values(op, params_type, use_tokens=False),
        "symbolic": _render_values(op, params_type, use_tokens=True),
    }


def find_filename_collisions(examples: list[dict[str, Any]]) -> dict[str, list[str]]:
    """Filenames produced by more than one operationId."""
    by_file: dict[str, list[str]] = {}
    for example in examples:
        by_file.setdefault(example["file_name"], []).append(example["operation_id"])
    return {name: op_ids for name, op_ids in by_file.items() if len(op_ids) > 1}


def build_context(spec: dict[str, Any]) -> dict[str, Any]:
    """Build the full template context from the OpenAPI spec."""
    paths = get_paths(spec)
    examples: list[dict[str, Any]] = []

    for route, method, operation in iter_operations(spec):
        if not operation.get("operationId"):
            continue
        op = classify_operation(spec, route, method, operation, paths.get(route))
        examples.append(build_example(op))

    return {
        "examples": examples,
        "example_count": len(examples),
        "filename_collisions": find_filename_collisions(examples),
        "client_package": CLIENT_PACKAGE,
        "api_key": API_KEY_PLACEHOLDER,
    }
