"""Rename clashing single-letter fields in the generated Go client.

Works on gen/client.gen.go as text. Declarations look like::

    <indent>P *float64 `json:"p,omitempty"`

Three passes:
  1. rename every declaration whose json key has a table entry
  2. exact fallbacks for declarations known to have drifted before
  3. rewrite ``.P``-style member accesses to the new names

Pass 3 is file-wide and blind to scope; it assumes the old single
letters are not used as unrelated member names in the file.
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

GEN_CLIENT_PATH = Path(__file__).parent.parent / "gen" / "client.gen.go"

FORMATTER = "gofmt"

# json key -> Go field name. Built by hand from `restgen analyze` output.
RENAME_TABLE: dict[str, str] = {
    "P": "AskPrice",
    "p": "BidPrice",
    "S": "AskSize",
    "s": "BidSize",
    "X": "AskExchange",
    "x": "BidExchange",
    "T": "Ticker",
    "t": "Timestamp",
}

FALLBACK_PATTERNS: list[tuple[str, str]] = [
    (r'^([ \t]+)P\s+\*float64\s*`json:"P,omitempty"`', r'\1AskPrice *float64 `json:"P,omitempty"`'),
    (r'^([ \t]+)P\s+\*float64\s*`json:"p,omitempty"`', r'\1BidPrice *float64 `json:"p,omitempty"`'),
    (r'^([ \t]+)S\s+\*int\s*`json:"S,omitempty"`', r'\1AskSize *int `json:"S,omitempty"`'),
    (r'^([ \t]+)S\s+\*int\s*`json:"s,omitempty"`', r'\1BidSize *int `json:"s,omitempty"`'),
    (r'^([ \t]+)X\s+\*int\s*`json:"X,omitempty"`', r'\1AskExchange *int `json:"X,omitempty"`'),
    (r'^([ \t]+)X\s+\*int\s*`json:"x,omitempty"`', r'\1BidExchange *int `json:"x,omitempty"`'),
]

_FIELD_RE = re.compile(r'^([ \t]+)([A-Z])\s+(.+?)\s*`json:"([^",]+)(,[^"]*)?"`', re.MULTILINE)

# Looser than _FIELD_RE: any indent, other tags before json.
_LEFTOVER_RE = re.compile(r'^[ \t]*([A-Z])[ \t]+[^\n`]*`[^`\n]*json:"([^",]+)[^\n]*', re.MULTILINE)


def validate_rename_table(rename_table: dict[str, str]) -> None:
    """Reject tables that would map two keys to the same field."""
    seen: dict[str, str] = {}
    for json_key, name in rename_table.items():
        if name in seen:
            raise ValueError(
                f"Rename table maps both {seen[name]!r} and {json_key!r} to {name!r}"
            )
        seen[name] = json_key


def usage_map(rename_table: dict[str, str]) -> dict[str, str]:
    """Old Go field name -> new name, for member-access rewriting.

    Only uppercase keys qualify: the generated field name for key ``P``
    is ``P``, and ``.P`` references resolve to that key's new name.
    """
    return {key: name for key, name in rename_table.items() if key.isupper()}


def _rename_declarations(content: str, rename_table: dict[str, str]) -> tuple[str, int]:
    count = 0

    def replace(match: re.Match) -> str:
        nonlocal count
        indent, old_name, type_text, json_key, modifiers = match.groups()
        new_name = rename_table.get(json_key)
        if not new_name or new_name == old_name:
            return match.group(0)
        print(f'   {old_name} → {new_name} (json:"{json_key}")')
        count += 1
        return f'{indent}{new_name} {type_text.strip()} `json:"{json_key}{modifiers or ""}"`'

    return _FIELD_RE.sub(replace, content), count


def _apply_fallbacks(content: str, fallbacks: list[tuple[str, str]]) -> tuple[str, int]:
    total = 0
    for pattern, replacement in fallbacks:
        content, n = re.subn(pattern, replacement, content, flags=re.MULTILINE)
        if n:
            print(f"   Fallback fixed {n} exact matches")
        total += n
    return content, total


def _rewrite_usages(content: str, rename_table: dict[str, str]) -> str:
    for old, new in usage_map(rename_table).items():
        content = re.sub(rf"\.{re.escape(old)}\b", f".{new}", content)
    return content


def find_unresolved(content: str, rename_table: dict[str, str]) -> list[str]:
    """Single-letter declarations with a table entry that were not renamed."""
    return [
        match.group(0).strip()
        for match in _LEFTOVER_RE.finditer(content)
        if rename_table.get(match.group(2), match.group(1)) != match.group(1)
    ]


def fix_clashes(
    content: str,
    rename_table: dict[str, str] | None = None,
    fallbacks: list[tuple[str, str]] | None = None,
) -> tuple[str, int]:
    """Rewrite Go source text. Returns the new text and the declaration count."""
    table = RENAME_TABLE if rename_table is None else rename_table
    validate_rename_table(table)

    content, count = _rename_declarations(content, table)
    print(f"General rename: {count} fields")

    content, fallback_count = _apply_fallbacks(
        content, FALLBACK_PATTERNS if fallbacks is None else fallbacks
    )

    for line in find_unresolved(content, table):
        print(f"WARNING: declaration not renamed: {line}")

    content = _rewrite_usages(content, table)
    return content, count + fallback_count


def run_formatter(path: Path, formatter: str = FORMATTER) -> bool:
    """Format ``path`` in place. Failure is reported, never raised."""
    try:
        subprocess.run([formatter, "-w", str(path)], check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        print(f"WARNING: {formatter} skipped ({exc})")
        return False
    print(f"Ran {formatter}")
    return True


def fix_file(
    path: Path | None = None,
    rename_table: dict[str, str] | None = None,
    run_format: bool = True,
) -> int:
    """Fix clashes in a generated Go file in place."""
    file_path = Path(path or GEN_CLIENT_PATH)
    print(f"Fixing single-letter field clashes in {file_path}...")
    content = file_path.read_text(encoding="utf-8")
    content, count = fix_clashes(content, rename_table)
    file_path.write_text(content, encoding="utf-8")

    if run_format:
        run_formatter(file_path)
    return count
