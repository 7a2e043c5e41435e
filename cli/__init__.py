"""CLI dispatcher — lazy-loads command modules on demand."""
from __future__ import annotations


def dispatch_command(args, parser=None):
    """Route args.cmd to the appropriate cli module, importing only on use."""
    cmd = getattr(args, "cmd", None)
    json_output = getattr(args, "json", False)

    if cmd == "get":
        from cli.get_cmd import cmd_get
        cmd_get(args.name,
                type_name=args.type,
                default=args.default,
                required=args.required,
                env_file=args.env_file or "",
                json_output=json_output)

    elif cmd == "load":
        from cli.load_cmd import cmd_load
        cmd_load(path=args.path, json_output=json_output)

    elif cmd == "check":
        from cli.check_cmd import cmd_check
        cmd_check(args.manifest,
                  env_file=args.env_file or "",
                  json_output=json_output)

    elif cmd == "version":
        from cli.version_cmd import cmd_version
        cmd_version(json_output=json_output)

    elif parser is not None:
        parser.print_help()
