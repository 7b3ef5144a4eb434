"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from common.types import FileKind
from cli.config import Config
from cli.constants import NOT_PERMITTED_MESSAGE
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
from cli.session import RegistrySession
from cli.utils import format_record
from registry.exceptions import InvalidFieldError, SnapshotError
from registry.snapshot import dump_snapshot, export_snapshot, load_snapshot, restore_snapshot
from registry.utils import get_current_timestamp

logger = get_logger(__name__)


_session: Optional[RegistrySession] = None


def get_session() -> RegistrySession:
    """
    Get or create global RegistrySession instance.

    Returns:
        RegistrySession instance
    """
    global _session
    if _session is None:
        logger.debug("Creating new RegistrySession instance")
        config = Config(Path.home() / '.file-registry' / 'config.json')
        _session = RegistrySession(config)
    return _session


def _kind_note(requested: str, kind: FileKind) -> str:
    if kind is FileKind.UNKNOWN and requested.strip().lower() != FileKind.UNKNOWN.value.lower():
        return f" (kind '{requested}' not recognised, stored as unknown)"
    return ""


def handle_create(cmd: CreateCommand, session: Optional[RegistrySession] = None) -> str:
    """
    Handle 'create' command.

    Args:
        cmd: CreateCommand with name, kind, size and description
        session: Optional RegistrySession for dependency injection (testing)

    Returns:
        Success or error message
    """
    if session is None:
        session = get_session()

    logger.info(f"Executing create command: name={cmd.name} kind={cmd.kind}")
    try:
        file_id = session.registry.create(
            session.identity,
            get_current_timestamp(),
            cmd.name,
            cmd.kind,
            cmd.size,
            cmd.description,
        )
    except InvalidFieldError as e:
        return f"Error: {e}"

    return f"Created file {file_id}: {cmd.name}{_kind_note(cmd.kind, FileKind.parse(cmd.kind))}"


def handle_read(cmd: ReadCommand, session: Optional[RegistrySession] = None) -> str:
    """
    Handle 'read' command.

    Args:
        cmd: ReadCommand with file_id
        session: Optional RegistrySession for dependency injection (testing)

    Returns:
        Formatted record or not-found message
    """
    if session is None:
        session = get_session()

    record = session.registry.read(cmd.file_id)
    if record is None:
        return f"File {cmd.file_id} not found"
    return format_record(record)


def handle_update(cmd: UpdateCommand, session: Optional[RegistrySession] = None) -> str:
    """
    Handle 'update' command.

    Args:
        cmd: UpdateCommand with file_id and the replacement fields
        session: Optional RegistrySession for dependency injection (testing)

    Returns:
        Success or error message
    """
    if session is None:
        session = get_session()

    logger.info(f"Executing update command: file_id={cmd.file_id}")
    try:
        updated = session.registry.update(
            session.identity,
            cmd.file_id,
            cmd.name,
            cmd.kind,
            cmd.size,
            cmd.description,
        )
    except InvalidFieldError as e:
        return f"Error: {e}"

    if not updated:
        return NOT_PERMITTED_MESSAGE.format(file_id=cmd.file_id)
    return f"Updated file {cmd.file_id}{_kind_note(cmd.kind, FileKind.parse(cmd.kind))}"


def handle_delete(cmd: DeleteCommand, session: Optional[RegistrySession] = None) -> str:
    """
    Handle 'delete' command.

    Args:
        cmd: DeleteCommand with file_id
        session: Optional RegistrySession for dependency injection (testing)

    Returns:
        Success or error message
    """
    if session is None:
        session = get_session()

    logger.info(f"Executing delete command: file_id={cmd.file_id}")
    if not session.registry.delete(session.identity, cmd.file_id):
        return NOT_PERMITTED_MESSAGE.format(file_id=cmd.file_id)
    return f"Deleted file {cmd.file_id}"


def handle_whoami(cmd: WhoAmICommand, session: Optional[RegistrySession] = None) -> str:
    if session is None:
        session = get_session()
    return f"Acting as {session.identity}"


def handle_switch_identity(cmd: SwitchIdentityCommand, session: Optional[RegistrySession] = None) -> str:
    if session is None:
        session = get_session()
    session.switch_identity(cmd.identity)
    return f"Now acting as {cmd.identity}"


def handle_export(cmd: ExportCommand, session: Optional[RegistrySession] = None) -> str:
    """
    Handle 'export' command.

    Args:
        cmd: ExportCommand with destination path
        session: Optional RegistrySession for dependency injection (testing)

    Returns:
        Success or error message
    """
    if session is None:
        session = get_session()

    try:
        snapshot = export_snapshot(session.store)
        dump_snapshot(snapshot, cmd.path)
    except (SnapshotError, OSError) as e:
        return f"Error: {e}"

    logger.debug("Export command completed")
    return f"Exported {len(snapshot.records)} file(s) to {cmd.path}"


def handle_import(cmd: ImportCommand, session: Optional[RegistrySession] = None) -> str:
    """
    Handle 'import' command.

    Args:
        cmd: ImportCommand with source path
        session: Optional RegistrySession for dependency injection (testing)

    Returns:
        Success or error message
    """
    if session is None:
        session = get_session()

    try:
        snapshot = load_snapshot(cmd.path)
        restore_snapshot(session.store, snapshot)
    except SnapshotError as e:
        return f"Error: {e}"

    logger.debug("Import command completed")
    return f"Imported {len(snapshot.records)} file(s), next id {snapshot.next_id}"


def handle_kinds(cmd: KindsCommand, session: Optional[RegistrySession] = None) -> str:
    return "Known kinds: " + ", ".join(kind.value.lower() for kind in FileKind)
