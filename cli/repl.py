"""REPL with prompt_toolkit for user interaction."""

import os
import sqlite3
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import (
    handle_create,
    handle_delete,
    handle_export,
    handle_import,
    handle_kinds,
    handle_read,
    handle_switch_identity,
    handle_update,
    handle_whoami,
)
from cli.completer import RegistryCompleter
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import (
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
from cli.parser import ParseError, parse_command
from common.logging_config import get_logger
from registry.exceptions import IdCollisionError

logger = get_logger(__name__)

HANDLERS = {
    CreateCommand: handle_create,
    ReadCommand: handle_read,
    UpdateCommand: handle_update,
    DeleteCommand: handle_delete,
    WhoAmICommand: handle_whoami,
    SwitchIdentityCommand: handle_switch_identity,
    ExportCommand: handle_export,
    ImportCommand: handle_import,
    KindsCommand: handle_kinds,
}


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    print(LOGO)
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


def dispatch_command(cmd_obj, session=None) -> str:
    """Dispatch parsed command to appropriate handler."""
    handler = HANDLERS.get(type(cmd_obj))
    if handler is None:
        return f"Unknown command type: {type(cmd_obj)}"
    return handler(cmd_obj, session)


def execute_line(user_input: str, session=None) -> str:
    """Parse and run one command line, turning user and storage errors into messages."""
    try:
        cmd_obj = parse_command(user_input)
        return dispatch_command(cmd_obj, session)
    except ParseError as e:
        return f"Error: {e}"
    except (sqlite3.Error, IdCollisionError) as e:
        logger.error(f"Storage error while running command: {e}")
        return f"Error: {e}"


def repl_loop(session=None) -> None:
    """Start interactive REPL with prompt_toolkit."""
    history = InMemoryHistory()
    prompt: PromptSession = PromptSession(
        completer=RegistryCompleter(), history=history, style=STYLE
    )

    clear_screen()
    show_welcome()

    while True:
        try:
            user_input = prompt.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                print("Goodbye!")
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_welcome()
                continue

            print(execute_line(user_input, session))

        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
