"""Find single-letter JSON keys that collide as Go field names.

The Go generator exports a one-character key by uppercasing it, so
``"P"`` (ask price) and ``"p"`` (bid price) in the same object both
become field ``P``. Each such group is reported once, with every key's
description, so a rename table can be built by hand.
"""

from __future__ import annotations

from typing import Any

from .loader import get_schemas, iter_operations
from .schema_walker import SEPARATOR, walk

NO_DESCRIPTION = "(no description)"


def go_field_name(json_key: str) -> str:
    """Go field name the generator derives from a single-letter key."""
    return json_key.upper()


def find_object_clashes(schema: dict[str, Any], context: str) -> list[dict[str, Any]]:
    """Return clash records for one object node's properties."""
    by_go_name: dict[str, list[dict[str, str]]] = {}
    for json_key, prop in schema.get("properties", {}).items():
        if len(json_key) != 1:
            continue
        description = NO_DESCRIPTION
        if isinstance(prop, dict) and prop.get("description"):
            description = prop["description"]
        by_go_name.setdefault(go_field_name(json_key), []).append(
            {"json_key": json_key, "description": description}
        )

    return [
        {"context": context, "go_name": go_name, "entries": entries}
        for go_name, entries in by_go_name.items()
        if len(entries) > 1
    ]


def find_clashes(spec: dict[str, Any]) -> list[dict[str, Any]]:
    """Scan response schemas and component schemas for field clashes.

    Results follow document order: operations first, then
    ``components.schemas``.
    """
    clashes: list[dict[str, Any]] = []

    def visit(node: dict[str, Any], context: str) -> None:
        clashes.extend(find_object_clashes(node, context))

    for route, method, operation in iter_operations(spec):
        op_id = operation.get("operationId") or f"{method.upper()} {route}"
        for code, response in (operation.get("responses") or {}).items():
            if not isinstance(response, dict):
                continue
            content = response.get("content") or {}
            schema = (content.get("application/json") or {}).get("schema")
            if schema:
                walk(schema, visit, f"{op_id}{SEPARATOR}{code} response")

    for name, schema in get_schemas(spec).items():
        walk(schema, visit, f"components.schemas.{name}")

    return clashes


def render_report(clashes: list[dict[str, Any]]) -> str:
    """Render clash records as the human-readable review report."""
    if not clashes:
        return "No clashes found. No duplicate single-letter Go field names in any struct.\n"

    lines = [f"Found {len(clashes)} clashes:", ""]
    for idx, clash in enumerate(clashes, start=1):
        lines.append(f"#{idx}  {clash['context']}")
        lines.append(f'   Go field "{clash["go_name"]}" is used by multiple JSON keys:')
        for entry in clash["entries"]:
            lines.append(f'     - json:"{entry["json_key"]}"  ->  "{entry["description"]}"')
        lines.append("")

    lines.append("Review these carefully, especially where the same letter means different things.")
    lines.append("Build the rename table in fix_clashes.RENAME_TABLE from this output.")
    return "\n".join(lines) + "\n"
