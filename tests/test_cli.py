"""Tests for the restgen CLI."""

from click.testing import CliRunner

from restgen.cli import main


class TestAnalyze:
    def test_reports_clashes(self, spec_path):
        result = CliRunner().invoke(main, ["analyze", str(spec_path)])
        assert result.exit_code == 0
        assert "Found 7 clashes:" in result.output

    def test_no_clashes(self, tmp_path):
        doc = tmp_path / "openapi.json"
        doc.write_text('{"paths": {}}')
        result = CliRunner().invoke(main, ["analyze", str(doc)])
        assert result.exit_code == 0
        assert "No clashes found" in result.output

    def test_missing_spec_is_fatal(self, tmp_path):
        result = CliRunner().invoke(main, ["analyze", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_malformed_spec_is_fatal(self, tmp_path):
        doc = tmp_path / "openapi.json"
        doc.write_text("{not json")
        result = CliRunner().invoke(main, ["analyze", str(doc)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output


class TestFix:
    def test_fixes_file(self, tmp_path):
        gen_file = tmp_path / "client.gen.go"
        gen_file.write_text('\tP *float64 `json:"p,omitempty"`\n')
        result = CliRunner().invoke(main, ["fix", str(gen_file), "--no-format"])
        assert result.exit_code == 0
        assert "Fix complete: 1 declarations renamed." in result.output
        assert gen_file.read_text() == '\tBidPrice *float64 `json:"p,omitempty"`\n'

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(main, ["fix", str(tmp_path / "client.gen.go")])
        assert result.exit_code != 0


class TestExamples:
    def test_generates_examples(self, spec_path, tmp_path):
        result = CliRunner().invoke(main, ["examples", str(spec_path), "-o", str(tmp_path)])
        assert result.exit_code == 0
        assert "Found 4 operations." in result.output
        assert (tmp_path / "go" / "list_trades.go").exists()
        assert (tmp_path / "go-tokenized" / "list_trades.go").exists()

    def test_unresolvable_refs_still_generate(self, tmp_path):
        doc = tmp_path / "openapi.json"
        doc.write_text(
            '{"paths": {"/v1/items": {"get": {"operationId": "listItems",'
            ' "parameters": [{"$ref": "#/components/parameters/Missing"}],'
            ' "responses": {"200": {"content": {"application/json":'
            ' {"schema": {"$ref": "common.json#/components/schemas/A"}}}}}}}}}'
        )
        result = CliRunner().invoke(main, ["examples", str(doc), "-o", str(tmp_path / "out")])
        assert result.exit_code == 0
        code = (tmp_path / "out" / "go" / "list_items.go").read_text()
        assert "c.ListItemsWithResponse(\n\t\tctx,\n\t)\n" in code
        assert "resp.JSON200" in code
