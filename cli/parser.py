"""Command parser for CLI input."""

import shlex

from cli.models import (
    CommandRequest,
    CreateCommand,
    DeleteCommand,
    ExportCommand,
    ImportCommand,
    KindsCommand,
    ReadCommand,
    SwitchIdentityCommand,
    UpdateCommand,
    WhoAmICommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Create/Read/Update/Delete/...)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0].lower()
    args = tokens[1:]

    if command_name == "create":
        return _parse_create(args)
    elif command_name == "read":
        return ReadCommand(file_id=_parse_id("read", args))
    elif command_name == "update":
        return _parse_update(args)
    elif command_name == "delete":
        return DeleteCommand(file_id=_parse_id("delete", args))
    elif command_name == "whoami":
        return WhoAmICommand()
    elif command_name == "as":
        if len(args) != 1:
            raise ParseError("as requires exactly 1 argument: <identity>")
        return SwitchIdentityCommand(identity=args[0])
    elif command_name == "export":
        return ExportCommand(path=_parse_path("export", args))
    elif command_name == "import":
        return ImportCommand(path=_parse_path("import", args))
    elif command_name == "kinds":
        return KindsCommand()
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_create(args: list[str]) -> CreateCommand:
    """Parse 'create <name> <kind> <size> [description...]' command."""
    if len(args) < 3:
        raise ParseError("create requires at least 3 arguments: <name> <kind> <size> [description]")

    name, kind, size = args[:3]
    return CreateCommand(
        name=name,
        kind=kind,
        size=_parse_int("size", size),
        description=" ".join(args[3:]),
    )


def _parse_update(args: list[str]) -> UpdateCommand:
    """Parse 'update <id> <name> <kind> <size> [description...]' command."""
    if len(args) < 4:
        raise ParseError("update requires at least 4 arguments: <id> <name> <kind> <size> [description]")

    file_id, name, kind, size = args[:4]
    return UpdateCommand(
        file_id=_parse_int("id", file_id),
        name=name,
        kind=kind,
        size=_parse_int("size", size),
        description=" ".join(args[4:]),
    )


def _parse_id(command_name: str, args: list[str]) -> int:
    if len(args) != 1:
        raise ParseError(f"{command_name} requires exactly 1 argument: <id>")
    return _parse_int("id", args[0])


def _parse_path(command_name: str, args: list[str]) -> str:
    if len(args) != 1:
        raise ParseError(f"{command_name} requires exactly 1 argument: <path>")
    return args[0]


def _parse_int(field: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ParseError(f"{field} must be an integer, got '{value}'")
