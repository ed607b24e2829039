"""Entry point: python -m restgen

Subcommands: analyze, fix, examples.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
