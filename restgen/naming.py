"""Convert OpenAPI names to Go identifiers, doc tokens and filenames.

Patterns:
  - operationId      -> Go method base name   (toUpperCamel)
  - query param name -> Go params struct field (dotted paths flattened)
  - param name       -> symbolic doc token    (TOKEN_ prefixed, upper snake)
  - operationId      -> example filename      (snake_case)

Examples:
  getLastTrade       -> GetLastTrade
  list_tickers       -> ListTickers
  timestamp.gte      -> TimestampGte
  stocksTicker       -> TOKEN_STOCKS_TICKER
  GetLastTrade       -> get_last_trade
"""

from __future__ import annotations

import re
from typing import Any

TOKEN_PREFIX = "TOKEN_"

_NON_STRING_TYPES = {"integer", "number", "boolean"}


def _capitalize(word: str) -> str:
    """Uppercase the first letter, lowercase the rest."""
    return word[:1].upper() + word[1:].lower()


def to_upper_camel(name: str) -> str:
    """Convert camelCase, snake_case or kebab-case to PascalCase."""
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", name)
    return "".join(_capitalize(word) for word in re.split(r"[-_ ]+", spaced))


def to_field_path(name: str) -> str:
    """Flatten a dotted parameter name into a single Go field name.

    ``timestamp.gte`` becomes ``TimestampGte``; ``expiration_date.lt``
    becomes ``ExpirationDateLt``.
    """
    return "".join(
        "".join(_capitalize(word) for word in re.split(r"[-_]", segment))
        for segment in name.split(".")
    )


def to_symbolic_token(name: str) -> str:
    """Build the placeholder token used in tokenized examples."""
    words = re.sub(r"([a-z])([A-Z])", r"\1_\2", name).upper().split("_")
    return TOKEN_PREFIX + "_".join(words)


def to_snake_filename(name: str) -> str:
    """Convert an operationId to a snake_case filename stem."""
    name = re.sub(r"([a-z])([A-Z])", r"\1_\2", name)
    name = re.sub(r"[-/.]", "_", name)
    return name.lower()


def is_string_like_domain(param: dict[str, Any] | None) -> bool:
    """Whether a parameter's values are rendered as Go strings."""
    if not param or not param.get("schema"):
        return True
    schema = param["schema"]
    schema_type = schema.get("type")
    if schema_type == "string" or not schema_type:
        return True
    if schema_type in _NON_STRING_TYPES:
        return False
    return (
        isinstance(schema.get("enum"), list)
        or "$ref" in schema
        or (schema_type == "array" and (schema.get("items") or {}).get("type") == "string")
    )
