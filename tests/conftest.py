"""Shared fixtures for restgen tests.

The fixture spec mirrors the shapes found in the real REST spec: quote
and trade results with single-letter keys, paginated list endpoints
(plain and allOf), enum query params, and a path-level $ref parameter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from restgen.loader import load_spec

FIXTURES = Path(__file__).parent / "fixtures"
SPEC_FIXTURE = FIXTURES / "openapi.json"


@pytest.fixture(scope="session")
def spec_path() -> Path:
    return SPEC_FIXTURE


@pytest.fixture(scope="session")
def spec(spec_path) -> dict[str, Any]:
    """The fixture spec, loaded once. Tests must not mutate it."""
    return load_spec(spec_path)
