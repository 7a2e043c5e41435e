"""Shared utilities for CLI modules."""
from __future__ import annotations

import os
import sys
import tomllib
from datetime import timedelta
from importlib import metadata
from typing import Any, NoReturn

from rich.console import Console
from rich.markup import escape

from envv.parsers import format_duration
from envv.theme import theme as _theme

DIST_NAME = "envv"


def get_version() -> str:
    """Installed distribution version, else pyproject.toml, else '0.1.0'."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        pass

    pyproject = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                             "pyproject.toml")
    if os.path.exists(pyproject):
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("project", {}).get("version", "0.1.0")
        except tomllib.TOMLDecodeError:
            pass
    return "0.1.0"


def format_value(value: Any) -> str:
    """Render a resolved value the way it would be written in a .env file."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, timedelta):
        return format_duration(value)
    return str(value)


def to_jsonable(value: Any) -> Any:
    if isinstance(value, timedelta):
        return format_duration(value)
    return value


def fail(message: str, code: int = 1) -> NoReturn:
    """Print an error line to stderr and exit."""
    err = Console(stderr=True)
    err.print(f"  {_theme.tag('error', '✗')} {escape(message)}", soft_wrap=True)
    sys.exit(code)
