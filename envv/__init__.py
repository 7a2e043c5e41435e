"""
envv — typed environment variables and .env loading.

    from envv import load_dotenv, declare
    load_dotenv()
    port = declare("PORT").as_int().with_default(8080).resolve()
"""

from envv.accessor import Declaration, EnvType, EnvVar, Presence, TypedDeclaration, declare
from envv.dotenv import load_dotenv, load_file
from envv.errors import (
    EnvvError,
    FileOpenError,
    MalformedLineError,
    ManifestError,
    MissingRequiredVariable,
    ParseError,
)
from envv.logging_config import setup_logging
from envv.manifest import load_manifest, resolve_all, validate_manifest
from envv.store import EnvStore, MemoryEnvStore, OsEnvStore, default_store

__all__ = [
    "Declaration",
    "EnvStore",
    "EnvType",
    "EnvVar",
    "EnvvError",
    "FileOpenError",
    "MalformedLineError",
    "ManifestError",
    "MemoryEnvStore",
    "MissingRequiredVariable",
    "OsEnvStore",
    "ParseError",
    "Presence",
    "TypedDeclaration",
    "declare",
    "default_store",
    "load_dotenv",
    "load_file",
    "load_manifest",
    "resolve_all",
    "setup_logging",
    "validate_manifest",
]
