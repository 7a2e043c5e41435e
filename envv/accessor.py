"""
envv/accessor.py
Fluent, typed access to a single environment variable.

A declaration moves through three immutable stages:

    declare(name)                 -> Declaration       (name only)
      .as_int() / .as_bool() ...  -> TypedDeclaration  (target type)
      .with_default(v) / .required() / .optional()
                                  -> EnvVar            (presence mode)
      .resolve()                  -> typed value

Presence methods only exist on TypedDeclaration, and resolve() only on
EnvVar, so a type has to be chosen before presence is configured.

Usage:
    from envv import declare
    port = declare("PORT").as_int().with_default(8080).resolve()
    dsn = declare("DATABASE_URL").as_string().required().resolve()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, Callable, Optional, Union

from envv import parsers
from envv.errors import MissingRequiredVariable, ParseError
from envv.store import EnvStore, resolve_store

logger = logging.getLogger(__name__)


class EnvType(Enum):
    STRING = "string"
    INT = "int"
    BOOL = "bool"
    FLOAT = "float"
    DURATION = "duration"

    @property
    def parser(self) -> Callable[[str], Any]:
        return _PARSERS[self]

    @classmethod
    def from_name(cls, name: str) -> "EnvType":
        """Look up by value, case-insensitive (``"int"`` → EnvType.INT)."""
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown type '{name}'. Valid: {valid}") from None


class Presence(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    DEFAULT = "default"


_PARSERS: dict[EnvType, Callable[[str], Any]] = {
    EnvType.STRING: parsers.parse_string,
    EnvType.INT: parsers.parse_int,
    EnvType.BOOL: parsers.parse_bool,
    EnvType.FLOAT: parsers.parse_float,
    EnvType.DURATION: parsers.parse_duration,
}


def _check_default(target_type: EnvType, value: Any) -> Any:
    """Reject defaults that are not already of the declared type."""
    if value is None:
        raise TypeError("default value must not be None; use optional() instead")
    ok = {
        EnvType.STRING: isinstance(value, str),
        EnvType.INT: isinstance(value, int) and not isinstance(value, bool),
        EnvType.BOOL: isinstance(value, bool),
        EnvType.FLOAT: isinstance(value, (int, float)) and not isinstance(value, bool),
        EnvType.DURATION: isinstance(value, timedelta),
    }[target_type]
    if not ok:
        raise TypeError(
            f"default for {target_type.value} variable must be "
            f"{target_type.value}, got {type(value).__name__}"
        )
    if target_type is EnvType.FLOAT:
        return float(value)
    return value


# ── Stage 1: name ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Declaration:
    name: str
    store: Optional[EnvStore] = field(default=None, repr=False, compare=False)

    def as_type(self, target_type: Union[EnvType, str]) -> "TypedDeclaration":
        if isinstance(target_type, str):
            target_type = EnvType.from_name(target_type)
        return TypedDeclaration(self.name, target_type, self.store)

    def as_string(self) -> "TypedDeclaration":
        return self.as_type(EnvType.STRING)

    def as_int(self) -> "TypedDeclaration":
        return self.as_type(EnvType.INT)

    def as_bool(self) -> "TypedDeclaration":
        return self.as_type(EnvType.BOOL)

    def as_float(self) -> "TypedDeclaration":
        return self.as_type(EnvType.FLOAT)

    def as_duration(self) -> "TypedDeclaration":
        return self.as_type(EnvType.DURATION)


# ── Stage 2: type ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TypedDeclaration:
    name: str
    target_type: EnvType
    store: Optional[EnvStore] = field(default=None, repr=False, compare=False)

    def with_default(self, value: Any) -> "EnvVar":
        """Fall back to *value* when the variable is unset or empty.

        The default is returned as-is, it is never run through the parser.
        """
        value = _check_default(self.target_type, value)
        return EnvVar(self.name, self.target_type, Presence.DEFAULT, value, self.store)

    def required(self) -> "EnvVar":
        """Unset or empty raises MissingRequiredVariable on resolve()."""
        return EnvVar(self.name, self.target_type, Presence.REQUIRED, None, self.store)

    def optional(self) -> "EnvVar":
        """Unset or empty is parsed as "".

        Only STRING accepts "", so an unset optional int/bool/float/duration
        still raises ParseError.
        """
        return EnvVar(self.name, self.target_type, Presence.OPTIONAL, None, self.store)


# ── Stage 3: presence ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class EnvVar:
    name: str
    target_type: EnvType
    presence: Presence
    default: Any = None
    store: Optional[EnvStore] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.presence is Presence.DEFAULT and self.default is None:
            raise TypeError(f"{self.name}: default presence requires a default value")

    def raw(self) -> str:
        """Current raw string in the store ("" when unset)."""
        return resolve_store(self.store).get(self.name)

    def resolve(self) -> Any:
        """Read the store and return the typed value.

        Raises:
            MissingRequiredVariable: required and unset/empty.
            ParseError: the raw value is not a valid literal of the type.
        """
        value = self.raw()
        if value == "":
            if self.presence is Presence.REQUIRED:
                raise MissingRequiredVariable(self.name)
            if self.presence is Presence.DEFAULT:
                logger.debug("%s unset, using default", self.name)
                return self.default

        try:
            return self.target_type.parser(value)
        except ValueError as e:
            raise ParseError(self.name, value, self.target_type.value, str(e)) from e


def declare(name: str, store: Optional[EnvStore] = None) -> Declaration:
    """Entry point of the fluent API. *store* defaults to the process env."""
    return Declaration(name, store)
