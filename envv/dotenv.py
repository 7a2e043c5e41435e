"""
envv/dotenv.py
.env file loader — writes KEY=VALUE lines into an environment store.

Format (one assignment per line):
  - Lines starting with '#' at column 0 are comments
  - KEY=VALUE splits on the first '=' only; the value may contain '='
  - No trimming, no quote stripping, no escapes, no ${VAR} expansion
  - Lines end at "\n"; one trailing "\r" is dropped
  - Any other line (including blank lines) is logged as malformed and skipped
  - Duplicate keys: the last assignment wins

Loading is best-effort: open/read failures and bad lines are logged, never
raised.
"""

from __future__ import annotations

import logging
from typing import Optional

from envv.errors import FileOpenError, MalformedLineError
from envv.store import EnvStore, resolve_store

logger = logging.getLogger(__name__)

DEFAULT_DOTENV = ".env"


def load_dotenv(store: Optional[EnvStore] = None) -> dict[str, str]:
    """Load ``.env`` from the current working directory."""
    return load_file(DEFAULT_DOTENV, store=store)


def load_file(path: str, store: Optional[EnvStore] = None) -> dict[str, str]:
    """
    Load KEY=VALUE pairs from *path* into *store* (process env by default).

    Returns:
        the assignments applied, in file order (empty if the file could not
        be opened).
    """
    store = resolve_store(store)
    applied: dict[str, str] = {}

    try:
        # split on "\n" only; a lone "\r" stays inside the value
        with open(path, encoding="utf-8", newline="\n") as f:
            for lineno, line in enumerate(f, start=1):
                if line.endswith("\n"):
                    line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
                _apply_line(store, path, lineno, line, applied)
    except (OSError, UnicodeDecodeError) as e:
        err = FileOpenError(path, e)
        logger.error("failed to open file: %s", err,
                     extra={"extra_data": {"event": "failed to open file",
                                           "path": path, "error": str(e)}})
        return applied

    logger.debug("Loaded %d var(s) from %s", len(applied), path)
    return applied


def _apply_line(store: EnvStore, path: str, lineno: int, line: str,
                applied: dict[str, str]) -> None:
    # handle comments
    if line.startswith("#"):
        return

    key, sep, value = line.partition("=")
    if not sep:
        err = MalformedLineError(path, lineno, line)
        logger.warning("%s", err,
                       extra={"extra_data": {"event": "invalid env value",
                                             "value": key}})
        return

    try:
        store.set(key, value)
    except (ValueError, OSError) as e:
        logger.warning("%s:%d: invalid env key %r: %s", path, lineno, key, e,
                       extra={"extra_data": {"event": "invalid env key",
                                             "value": key, "error": str(e)}})
        return

    # re-insert so dict order follows the last assignment
    applied.pop(key, None)
    applied[key] = value
