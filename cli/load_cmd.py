"""`envv load [PATH]` — show what a .env file would set."""
from __future__ import annotations

import json
import os

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.helpers import fail
from envv.dotenv import load_file
from envv.store import MemoryEnvStore
from envv.theme import theme as _theme


def cmd_load(path: str = ".env", json_output: bool = False):
    """Parse *path* into a scratch store; the process env is left untouched."""
    if not os.path.isfile(path):
        fail(f"File not found: {path}")

    store = MemoryEnvStore()
    applied = load_file(path, store=store)

    if json_output:
        print(json.dumps(applied, indent=2, ensure_ascii=False))
        return

    console = Console()
    if not applied:
        console.print("  " + _theme.tag("muted", f"No assignments in {escape(path)}"))
        return

    table = Table(show_header=True, header_style=_theme.heading,
                  box=None, padding=(0, 2))
    table.add_column("Key", style=_theme.accent)
    table.add_column("Value")
    for key, value in applied.items():
        table.add_row(escape(key), escape(value))
    console.print()
    console.print(table)
    console.print(f"\n  {len(applied)} variable(s) from {escape(path)}\n")
