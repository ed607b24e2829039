"""Render templates and write generated Go examples.

Takes the context from context_builder and writes one file per
operation into examples/go (literal values) and examples/go-tokenized
(symbolic tokens).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"
OUTPUT_DIR = Path(__file__).parent.parent / "examples"

# mode -> subdirectory of the output root
MODE_DIRS: dict[str, str] = {
    "literal": "go",
    "symbolic": "go-tokenized",
}


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_example(
    example: dict[str, Any],
    mode: str,
    context: dict[str, Any],
    env: jinja2.Environment | None = None,
) -> str:
    """Render one operation's example program in the given mode."""
    template = (env or _environment()).get_template("example.go.j2")
    return template.render(
        example=example,
        values=example[mode],
        client_package=context["client_package"],
        api_key=context["api_key"],
    )


def generate(context: dict[str, Any], output_dir: Path | None = None) -> list[Path]:
    """Render every example in both modes and write them under output_dir."""
    root = Path(output_dir or OUTPUT_DIR)
    env = _environment()

    for file_name, op_ids in context["filename_collisions"].items():
        print(
            f"WARNING: {file_name}.go is produced by {', '.join(op_ids)};"
            f" only {op_ids[-1]} is kept"
        )

    written: list[Path] = []
    for mode, subdir in MODE_DIRS.items():
        mode_dir = root / subdir
        mode_dir.mkdir(parents=True, exist_ok=True)
        for example in context["examples"]:
            output_path = mode_dir / f"{example['file_name']}.go"
            output_path.write_text(render_example(example, mode, context, env))
            written.append(output_path)

    print(f"Generated {context['example_count']} examples in {root}")
    return written
