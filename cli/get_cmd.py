"""`envv get NAME` — resolve one variable and print it."""
from __future__ import annotations

import json
from typing import Optional

from cli.helpers import fail, format_value, to_jsonable
from envv.accessor import declare
from envv.dotenv import load_file
from envv.errors import EnvvError
from envv.manifest import coerce_default


def cmd_get(name: str, type_name: str = "string", default: Optional[str] = None,
            required: bool = False, env_file: str = "",
            json_output: bool = False):
    """Handle `envv get NAME [--type T] [--default V | --required]`.

    Exits 1 when the variable is missing/unparsable or the default is invalid.
    """
    if env_file:
        load_file(env_file)

    typed = declare(name).as_type(type_name)
    if default is not None:
        try:
            env_var = typed.with_default(coerce_default(typed.target_type, default))
        except ValueError as e:
            fail(f"invalid default for {name}: {e}")
    elif required:
        env_var = typed.required()
    else:
        env_var = typed.optional()

    try:
        value = env_var.resolve()
    except EnvvError as e:
        fail(str(e))

    if json_output:
        print(json.dumps({
            "name": name,
            "type": typed.target_type.value,
            "presence": env_var.presence.value,
            "value": to_jsonable(value),
        }))
    else:
        print(format_value(value))
