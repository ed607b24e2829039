"""Tests for the loader module."""

import pytest

from restgen.loader import (
    SpecLoadError,
    get_paths,
    get_schemas,
    iter_operations,
    load_spec,
    resolve_ref,
)


class TestLoadSpec:
    """Test reading the spec from disk."""

    def test_loads_fixture(self, spec):
        assert spec["openapi"] == "3.0.3"
        assert "/v3/reference/tickers" in spec["paths"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpecLoadError, match="not found"):
            load_spec(tmp_path / "openapi.json")

    def test_malformed_json(self, tmp_path):
        bad = tmp_path / "openapi.json"
        bad.write_text('{"paths": {')
        with pytest.raises(SpecLoadError, match="Invalid JSON"):
            load_spec(bad)

    def test_non_object_document(self, tmp_path):
        bad = tmp_path / "openapi.json"
        bad.write_text("[1, 2, 3]")
        with pytest.raises(SpecLoadError, match="JSON object"):
            load_spec(bad)


class TestAccessors:
    """Test section accessors and $ref resolution."""

    def test_missing_sections_are_empty(self):
        assert get_paths({}) == {}
        assert get_schemas({}) == {}
        assert get_schemas({"components": {}}) == {}

    def test_get_schemas(self, spec):
        assert set(get_schemas(spec)) == {"TickerType", "Quote"}

    def test_resolve_ref(self, spec):
        param = resolve_ref(spec, "#/components/parameters/StockTicker")
        assert param["name"] == "stockTicker"

    def test_resolve_escaped_ref(self):
        spec = {"paths": {"/a/b": {"get": {"operationId": "x"}}}}
        assert resolve_ref(spec, "#/paths/~1a~1b/get") == {"operationId": "x"}

    def test_unresolvable_ref(self, spec):
        with pytest.raises(SpecLoadError, match="Unresolvable"):
            resolve_ref(spec, "#/components/schemas/Missing")


class TestIterOperations:
    """Test operation iteration."""

    def test_document_order(self, spec):
        ops = [(route, method) for route, method, _ in iter_operations(spec)]
        assert ops == [
            ("/v2/last/trade/{ticker}", "get"),
            ("/v2/last/nbbo/{stocksTicker}", "get"),
            ("/v3/reference/tickers", "get"),
            ("/v3/trades/{stockTicker}", "get"),
            ("/v1/marketstatus/now", "get"),
        ]

    def test_skips_non_method_keys(self, spec):
        methods = {method for _, method, _ in iter_operations(spec)}
        assert "parameters" not in methods

    def test_empty_document(self):
        assert list(iter_operations({})) == []
