"""
envv/errors.py
Exception hierarchy for dotenv loading and typed variable resolution.

Loader errors (FileOpenError, MalformedLineError) are only ever logged.
Accessor errors (MissingRequiredVariable, ParseError) propagate to the caller.
"""

from __future__ import annotations


class EnvvError(Exception):
    """Base class for every error raised or logged by envv."""


# ── Loader (logged, never raised) ──────────────────────────────────────────

class FileOpenError(EnvvError):
    """Dotenv file is missing or unreadable."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to open {path}: {cause}")


class MalformedLineError(EnvvError):
    """Dotenv line without an ``=`` separator."""

    def __init__(self, path: str, lineno: int, line: str):
        self.path = path
        self.lineno = lineno
        self.line = line
        super().__init__(f"{path}:{lineno}: invalid env value {line!r}")


# ── Accessor (raised) ──────────────────────────────────────────────────────

class MissingRequiredVariable(EnvvError):
    """A required variable is unset or empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"required env var is missing: {name}")


class ParseError(EnvvError, ValueError):
    """Raw value could not be parsed as the declared type."""

    def __init__(self, name: str, value: str, type_name: str, reason: str = ""):
        self.name = name
        self.value = value
        self.type_name = type_name
        msg = f"failed to parse {type_name} value {value!r} for {name}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# ── Manifest ───────────────────────────────────────────────────────────────

class ManifestError(EnvvError):
    """Declarations manifest failed validation."""

    def __init__(self, path: str, errors: list[str]):
        self.path = path
        self.errors = list(errors)
        detail = "; ".join(self.errors)
        super().__init__(f"invalid manifest {path}: {detail}")
