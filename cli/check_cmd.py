"""`envv check MANIFEST` — resolve every declared variable and report."""
from __future__ import annotations

import json
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.helpers import format_value, to_jsonable
from envv.dotenv import load_file
from envv.errors import ManifestError, MissingRequiredVariable
from envv.manifest import load_manifest, resolve_all
from envv.theme import theme as _theme


def cmd_check(manifest: str, env_file: str = "", json_output: bool = False):
    """Handle `envv check`. Exits 1 on an invalid manifest or any failure."""
    if env_file:
        load_file(env_file)

    try:
        env_vars = load_manifest(manifest)
    except ManifestError as e:
        if json_output:
            print(json.dumps({"ok": False, "manifest_errors": e.errors}, indent=2))
        else:
            console = Console()
            console.print(f"  {_theme.tag('error', '✗')} Invalid manifest: {escape(manifest)}")
            for err in e.errors:
                console.print(f"    - {escape(err)}")
        sys.exit(1)

    values, failures = resolve_all(env_vars)

    rows = []
    for env_var in env_vars:
        row = {
            "name": env_var.name,
            "type": env_var.target_type.value,
            "presence": env_var.presence.value,
        }
        if env_var.name in failures:
            err = failures[env_var.name]
            row["status"] = "missing" if isinstance(err, MissingRequiredVariable) else "invalid"
            row["error"] = str(err)
        else:
            row["status"] = "ok"
            row["value"] = to_jsonable(values[env_var.name])
        rows.append(row)

    if json_output:
        print(json.dumps({"ok": not failures, "variables": rows}, indent=2,
                         ensure_ascii=False))
    else:
        _print_table(rows, manifest)

    if failures:
        sys.exit(1)


def _print_table(rows: list[dict], manifest: str):
    console = Console()
    table = Table(show_header=True, header_style=_theme.heading,
                  box=None, padding=(0, 2))
    table.add_column("Variable", style=_theme.accent)
    table.add_column("Type", style=_theme.muted)
    table.add_column("Presence", style=_theme.muted)
    table.add_column("Status")
    table.add_column("Value / error")

    for row in rows:
        if row["status"] == "ok":
            status = _theme.tag("success", "ok")
            detail = escape(format_value(row["value"]))
        else:
            status = _theme.tag("error", row["status"])
            detail = _theme.tag("muted", escape(row["error"]))
        table.add_row(escape(row["name"]), row["type"], row["presence"], status, detail)

    failed = sum(1 for r in rows if r["status"] != "ok")
    console.print()
    console.print(table)
    if failed:
        console.print(f"\n  {_theme.tag('error', '✗')} {failed} of {len(rows)} "
                      f"variable(s) failed ({escape(manifest)})\n")
    else:
        console.print(f"\n  {_theme.tag('success', '✓')} all {len(rows)} "
                      f"variable(s) resolved ({escape(manifest)})\n")
