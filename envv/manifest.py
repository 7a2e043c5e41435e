"""
envv/manifest.py
Declarations manifest: many typed variables described in one YAML file,
validated up front and resolved together.

    variables:
      - name: PORT
        type: int
        default: 8080
      - name: DATABASE_URL
        required: true
      - name: TIMEOUT
        type: duration
        default: 30s

Usage:
    from envv.manifest import validate_manifest, load_manifest, resolve_all
    errors = validate_manifest("env.yaml")
    values, failures = resolve_all(load_manifest("env.yaml"))
"""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Optional

import yaml

from envv import parsers
from envv.accessor import EnvType, EnvVar, declare
from envv.errors import EnvvError, ManifestError
from envv.store import EnvStore

logger = logging.getLogger(__name__)

MANIFEST_PATH = "env.yaml"

ENTRY_FIELDS = {"name", "type", "default", "required", "description"}


# ── Default conversion ─────────────────────────────────────────────────────

def coerce_default(target_type: EnvType, value: Any) -> Any:
    """Convert a YAML scalar into a default of *target_type*.

    Native YAML scalars of the right kind pass through; strings are parsed
    with the same parsers resolve() uses. Raises ValueError on mismatch.
    """
    if value is None:
        raise ValueError("default must not be null")
    if isinstance(value, (dict, list)):
        raise ValueError("default must be a scalar")

    if target_type is EnvType.STRING:
        if isinstance(value, bool):
            raise ValueError("expected a string, got a boolean")
        return str(value)

    if target_type is EnvType.BOOL:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return parsers.parse_bool(value)
        raise ValueError(f"expected a boolean, got {value!r}")

    if isinstance(value, bool):
        raise ValueError(f"expected {target_type.value}, got a boolean")

    if target_type is EnvType.INT:
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            return parsers.parse_int(value)
        raise ValueError(f"expected an integer, got {value!r}")

    if target_type is EnvType.FLOAT:
        if isinstance(value, (int, float)):
            return float(value)
        return parsers.parse_float(str(value))

    # duration: only literals like "30s" carry a unit
    if not isinstance(value, str):
        raise ValueError(f"expected a duration literal such as '30s', got {value!r}")
    return parsers.parse_duration(value)


# ── Validation ─────────────────────────────────────────────────────────────

def _load_yaml(path: str) -> tuple[Optional[dict], list[str]]:
    if not os.path.exists(path):
        return None, ["Manifest file not found: " + path]

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return None, [f"YAML parse error: {e}"]

    if not data or not isinstance(data, dict):
        return None, ["Manifest is empty or not a dictionary"]
    return data, []


def _validate(data: dict) -> list[str]:
    errors: list[str] = []

    unknown_top = set(data) - {"variables"}
    if unknown_top:
        errors.append(f"Unknown top-level keys: {', '.join(sorted(unknown_top))}")

    variables = data.get("variables")
    if not variables:
        errors.append("No 'variables' section defined")
        return errors
    if not isinstance(variables, list):
        errors.append("'variables' must be a list")
        return errors

    seen: set[str] = set()
    for i, entry in enumerate(variables):
        if not isinstance(entry, dict):
            errors.append(f"Variable #{i} is not a dictionary")
            continue

        name = entry.get("name")
        if not name or not isinstance(name, str):
            errors.append(f"Variable #{i}: missing or empty 'name'")
            label = f"#{i}"
        else:
            label = f"'{name}'"
            if name in seen:
                errors.append(f"Duplicate variable name: '{name}'")
            seen.add(name)

        unknown = set(entry) - ENTRY_FIELDS
        if unknown:
            errors.append(f"Variable {label}: unknown keys {', '.join(sorted(unknown))}")

        raw_type = entry.get("type", EnvType.STRING.value)
        try:
            target_type = EnvType.from_name(str(raw_type))
        except ValueError as e:
            errors.append(f"Variable {label}: {e}")
            target_type = None

        required = entry.get("required", False)
        if not isinstance(required, bool):
            errors.append(f"Variable {label}: 'required' must be true or false")
        elif required and "default" in entry:
            errors.append(f"Variable {label}: 'required' and 'default' are mutually exclusive")

        if "default" in entry and target_type is not None:
            try:
                coerce_default(target_type, entry["default"])
            except ValueError as e:
                errors.append(f"Variable {label}: invalid default: {e}")

    return errors


def validate_manifest(path: str = MANIFEST_PATH) -> list[str]:
    """Validate manifest structure.

    Returns list of error messages (empty = valid).
    """
    data, errors = _load_yaml(path)
    if errors:
        return errors
    return _validate(data)


# ── Building & resolving ───────────────────────────────────────────────────

def _build(entry: dict, store: Optional[EnvStore]) -> EnvVar:
    typed = declare(entry["name"], store).as_type(entry.get("type", EnvType.STRING.value))
    if "default" in entry:
        return typed.with_default(coerce_default(typed.target_type, entry["default"]))
    if entry.get("required", False):
        return typed.required()
    return typed.optional()


def load_manifest(path: str = MANIFEST_PATH,
                  store: Optional[EnvStore] = None) -> list[EnvVar]:
    """Build one EnvVar per manifest entry.

    Raises:
        ManifestError: listing every validation problem.
    """
    data, errors = _load_yaml(path)
    if not errors:
        errors = _validate(data)
    if errors:
        raise ManifestError(path, errors)

    env_vars = [_build(entry, store) for entry in data["variables"]]
    logger.debug("Manifest %s: %d declaration(s)", path, len(env_vars))
    return env_vars


def resolve_all(env_vars: Iterable[EnvVar]) -> tuple[dict[str, Any], dict[str, EnvvError]]:
    """Resolve every declaration, collecting failures instead of stopping.

    Returns (values, failures), both keyed by variable name.
    """
    values: dict[str, Any] = {}
    failures: dict[str, EnvvError] = {}
    for env_var in env_vars:
        try:
            values[env_var.name] = env_var.resolve()
        except EnvvError as e:
            failures[env_var.name] = e
    if failures:
        logger.info("%d of %d variable(s) failed to resolve",
                    len(failures), len(values) + len(failures))
    return values, failures
