"""CLI entry point for restgen."""

from pathlib import Path

import click

from restgen import codegen, fix_clashes, loader
from restgen.clashes import find_clashes, render_report
from restgen.context_builder import build_context


def _load(spec_path: Path | None) -> dict:
    try:
        return loader.load_spec(spec_path)
    except loader.SpecLoadError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
def main():
    """restgen: Go client tooling driven by the REST OpenAPI spec."""


@main.command()
@click.argument("spec_path", required=False, type=click.Path(path_type=Path))
def analyze(spec_path: Path | None):
    """Report single-letter JSON keys that collide as Go field names."""
    spec = _load(spec_path)
    click.echo("Scanning spec for single-letter field clashes...\n")
    click.echo(render_report(find_clashes(spec)), nl=False)


@main.command()
@click.argument("gen_path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format/--no-format", "run_format", default=True, help="Run gofmt on the result.")
def fix(gen_path: Path | None, run_format: bool):
    """Rename clashing fields in the generated Go client, in place."""
    path = gen_path or fix_clashes.GEN_CLIENT_PATH
    if not path.is_file():
        raise click.ClickException(f"{path} not found. Generate the client first?")
    count = fix_clashes.fix_file(path, run_format=run_format)
    click.echo(f"Fix complete: {count} declarations renamed.")


@main.command()
@click.argument("spec_path", required=False, type=click.Path(path_type=Path))
@click.option("-o", "--output", type=click.Path(file_okay=False, path_type=Path), default=None, help="Examples root directory.")
def examples(spec_path: Path | None, output: Path | None):
    """Generate literal and tokenized Go examples for every operation."""
    spec = _load(spec_path)
    try:
        context = build_context(spec)
    except loader.SpecLoadError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Found {context['example_count']} operations.")
    codegen.generate(context, output)
