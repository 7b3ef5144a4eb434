"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

from common.types import FileKind

COMMANDS = [
    "create", "read", "update", "delete",
    "whoami", "as", "export", "import", "kinds",
    "clear", "exit", "help",
]

KIND_NAMES = [kind.value.lower() for kind in FileKind]

STYLE = Style.from_dict(
    {
        "prompt": "#2E9AFE bold",
        "command": "#0088ff bold",
    }
)

BLUE = "\033[38;2;46;154;254m"
GREEN = "\033[32m"
RESET = "\033[0m"

LOGO = f"""{BLUE}
  ___ _ _       ___          _    _
 | __(_) |___  | _ \\___ __ _(_)__| |_ _ _ _  _
 | _|| | / -_) |   / -_) _` | (_-<  _| '_| || |
 |_| |_|_\\___| |_|_\\___\\__, |_/__/\\__|_|  \\_, |
                       |___/              |__/
{RESET}"""

WELCOME_TITLE = "File Registry CLI - Owned file metadata"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "registry> "

HELP_TEXT = """Available commands:
  create <name> <kind> <size> [description]         Register a file record you own
  read <id>                                         Show a file record
  update <id> <name> <kind> <size> [description]    Replace name, kind, size and description
  delete <id>                                       Remove a file record you own
  whoami                                            Show the current identity
  as <identity>                                     Act as another identity
  export <path>                                     Write a JSON snapshot of the registry
  import <path>                                     Load a JSON snapshot into an empty registry
  kinds                                             List known file kinds
  clear                                             Clear screen and redisplay welcome message
  help                                              Show this help
  exit                                              Exit REPL

Only the identity that created a record may update or delete it.
Unrecognised kinds are stored as 'unknown'.
Examples:
  create report.pdf pdf 1024 "Q1 report"
  read 0
  update 0 report_v2.pdf pdf 2048 revised
  as bob
  delete 0
  export backups/registry.json"""

NOT_PERMITTED_MESSAGE = "File {file_id} not found or not owned by you"
