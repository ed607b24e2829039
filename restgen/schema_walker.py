"""Recursive walk over OpenAPI schema trees.

Visits every object node (a node carrying ``properties``) with a
breadcrumb context such as::

    getLastTrade → 200 response → prop "results" → items

Descent order per node: the node itself, ``allOf`` branches, ``items``,
then each property value. ``$ref`` nodes are leaves; component schemas
are walked on their own.
"""

from __future__ import annotations

from typing import Any, Callable

Visitor = Callable[[dict[str, Any], str], None]

SEPARATOR = " → "


class SchemaCycleError(Exception):
    """A schema node contains itself."""

    def __init__(self, context: str):
        super().__init__(f"Schema cycle detected at {context}")
        self.context = context


def is_object_node(schema: Any) -> bool:
    """Whether a node has properties to inspect."""
    return isinstance(schema, dict) and isinstance(schema.get("properties"), dict)


def walk(
    schema: Any,
    visitor: Visitor,
    context: str = "root",
    _active: set[int] | None = None,
) -> None:
    """Call ``visitor(node, context)`` for every object node under ``schema``."""
    if not isinstance(schema, dict):
        return

    active = _active if _active is not None else set()
    if id(schema) in active:
        raise SchemaCycleError(context)
    active.add(id(schema))

    try:
        if is_object_node(schema):
            visitor(schema, context)

        for i, branch in enumerate(schema.get("allOf") or []):
            walk(branch, visitor, f"{context}{SEPARATOR}allOf[{i}]", active)
        if "items" in schema:
            walk(schema["items"], visitor, f"{context}{SEPARATOR}items", active)
        if is_object_node(schema):
            for key, prop in schema["properties"].items():
                walk(prop, visitor, f'{context}{SEPARATOR}prop "{key}"', active)
    finally:
        active.discard(id(schema))
