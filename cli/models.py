"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class CreateCommand:
    """Register a new file record."""

    name: str
    kind: str
    size: int
    description: str = ""
    command: Literal["create"] = "create"


@dataclass(frozen=True)
class ReadCommand:
    """Show a file record by id."""

    file_id: int
    command: Literal["read"] = "read"


@dataclass(frozen=True)
class UpdateCommand:
    """Replace the mutable fields of a file record."""

    file_id: int
    name: str
    kind: str
    size: int
    description: str = ""
    command: Literal["update"] = "update"


@dataclass(frozen=True)
class DeleteCommand:
    """Remove a file record by id."""

    file_id: int
    command: Literal["delete"] = "delete"


@dataclass(frozen=True)
class WhoAmICommand:
    """Show the current caller identity."""

    command: Literal["whoami"] = "whoami"


@dataclass(frozen=True)
class SwitchIdentityCommand:
    """Act as another identity."""

    identity: str
    command: Literal["as"] = "as"


@dataclass(frozen=True)
class ExportCommand:
    """Write a registry snapshot."""

    path: str
    command: Literal["export"] = "export"


@dataclass(frozen=True)
class ImportCommand:
    """Load a registry snapshot."""

    path: str
    command: Literal["import"] = "import"


@dataclass(frozen=True)
class KindsCommand:
    """List known file kinds."""

    command: Literal["kinds"] = "kinds"


CommandRequest = (
    CreateCommand
    | ReadCommand
    | UpdateCommand
    | DeleteCommand
    | WhoAmICommand
    | SwitchIdentityCommand
    | ExportCommand
    | ImportCommand
    | KindsCommand
)
