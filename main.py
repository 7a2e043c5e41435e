#!/usr/bin/env python3
"""
main.py  —  envv CLI
Usage:
  envv get NAME                       # print a variable (string, optional)
  envv get PORT --type int --default 8080
  envv get DATABASE_URL --required --env-file .env
  envv load [PATH]                    # show what a .env file would set
  envv check env.yaml [--env-file .env]
  envv version

Global options:
  --log-level LEVEL   overrides ENVV_LOG_LEVEL (default WARNING)
  --json              machine-readable output (all commands)

Logging is configured from the tool's own environment:
  ENVV_LOG_LEVEL       DEBUG/INFO/WARNING/ERROR
  ENVV_LOG_STRUCTURED  true → JSON log records
  ENVV_LOG_DIR         write envv.log into this directory
"""

from __future__ import annotations

import argparse

from envv.accessor import EnvType, declare
from envv.errors import EnvvError
from envv.logging_config import setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _configure_logging(level_override: str = ""):
    """Read ENVV_LOG_* through envv itself and install handlers."""
    level = level_override or declare("ENVV_LOG_LEVEL").as_string().with_default("WARNING").resolve()
    structured = declare("ENVV_LOG_STRUCTURED").as_bool().with_default(False).resolve()
    log_dir = declare("ENVV_LOG_DIR").as_string().optional().resolve()
    setup_logging(level=level, structured=structured, log_dir=log_dir or None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envv",
                                     description="Typed environment variables and .env loading")
    parser.add_argument("-V", "--version", action="store_true",
                        help="Print version and exit")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="",
                        help="Log level (overrides ENVV_LOG_LEVEL)")

    # --json is accepted after any subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="JSON output")

    sub = parser.add_subparsers(dest="cmd")

    p_get = sub.add_parser("get", parents=[common], help="Resolve one variable")
    p_get.add_argument("name", help="Variable name")
    p_get.add_argument("--type", "-t", choices=[t.value for t in EnvType],
                       default=EnvType.STRING.value, help="Target type (default: string)")
    presence = p_get.add_mutually_exclusive_group()
    presence.add_argument("--default", "-d", default=None,
                          help="Default when unset or empty (written as a literal, e.g. 30s)")
    presence.add_argument("--required", "-r", action="store_true",
                          help="Fail when unset or empty")
    p_get.add_argument("--env-file", default="", help="Load this .env file first")

    p_load = sub.add_parser("load", parents=[common],
                            help="Show the assignments a .env file would apply")
    p_load.add_argument("path", nargs="?", default=".env", help="Path (default: .env)")

    p_check = sub.add_parser("check", parents=[common],
                             help="Resolve every variable in a YAML manifest")
    p_check.add_argument("manifest", nargs="?", default="env.yaml",
                         help="Manifest path (default: env.yaml)")
    p_check.add_argument("--env-file", default="", help="Load this .env file first")

    sub.add_parser("version", parents=[common], help="Version and dependency info")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    from cli.helpers import fail, get_version

    try:
        _configure_logging(args.log_level)
    except EnvvError as e:
        fail(f"bad logging configuration: {e}")

    if args.version:
        print(get_version())
        return

    from cli import dispatch_command
    dispatch_command(args, parser)


if __name__ == "__main__":
    main()
