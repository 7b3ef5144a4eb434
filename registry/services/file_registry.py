"""File registry service: ownership-gated create/read/update/delete."""

from dataclasses import replace
from typing import Optional, Union

from common.constants import U64_MAX
from common.logging_config import get_logger
from common.types import FileKind, FileRecord, Identity
from registry.allocator import IdentifierAllocator
from registry.exceptions import IdSpaceExhaustedError, InvalidFieldError
from registry.ownership import OwnershipGuard
from registry.store import RecordStore

logger = get_logger(__name__)

KindInput = Union[FileKind, str]


def _is_u64(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX


def _require_u64(field: str, value) -> None:
    if not _is_u64(value):
        raise InvalidFieldError(f"{field} must be an integer in [0, {U64_MAX}], got {value!r}")


def _require_text(field: str, value) -> None:
    if not isinstance(value, str):
        raise InvalidFieldError(f"{field} must be a string, got {type(value).__name__}")


class FileRegistry:
    """
    Registry of owned file records.

    The host supplies the caller identity (and the timestamp for create) on
    every call and must serialize calls. Rejected updates and deletes return
    False whether the record is missing or owned by someone else.
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self.guard = OwnershipGuard()

    def create(
        self,
        caller: Identity,
        timestamp: int,
        name: str,
        kind: KindInput,
        size: int,
        description: str,
    ) -> int:
        """
        Register a new record owned by the caller.

        The id is drawn from the stored counter inside the write transaction,
        so a failed write leaves the counter untouched and registries sharing
        a store never hand out the same id.

        Returns:
            The new record's id

        Raises:
            InvalidFieldError: If a field is outside its domain
            IdSpaceExhaustedError: If no id can be allocated; nothing is written
            IdCollisionError: If the stored counter points at an existing record
        """
        self._validate_mutable_fields(name, size, description)
        _require_u64("timestamp", timestamp)
        file_kind = FileKind.parse(kind)

        with self.store.transaction():
            allocator = IdentifierAllocator(self.store.load_counter())
            try:
                file_id = allocator.next_id()
            except IdSpaceExhaustedError:
                logger.error(f"Cannot create file '{name}': id space exhausted")
                raise

            record = FileRecord(
                file_id=file_id,
                name=name,
                kind=file_kind,
                size=size,
                description=description,
                created_at=timestamp,
                owner=caller,
            )
            self.store.insert(file_id, record)
            self.store.save_counter(allocator.counter)

        logger.info(f"Created file [file_id={file_id}, kind={record.kind.value}, owner={caller}]")
        return file_id

    def read(self, file_id: int) -> Optional[FileRecord]:
        if not _is_u64(file_id):
            return None
        return self.store.get(file_id)

    def update(
        self,
        caller: Identity,
        file_id: int,
        name: str,
        kind: KindInput,
        size: int,
        description: str,
    ) -> bool:
        """
        Replace name, kind, size and description of a record the caller owns.

        All four fields are replaced together; id, owner and created_at are kept.

        Returns:
            True if the record was updated, False if it is missing or not owned
        """
        self._validate_mutable_fields(name, size, description)

        with self.store.transaction():
            record = self._owned_record(caller, file_id, "update")
            if record is None:
                return False

            updated = replace(
                record,
                name=name,
                kind=FileKind.parse(kind),
                size=size,
                description=description,
            )
            self.store.put(file_id, updated)

        logger.info(f"Updated file [file_id={file_id}]")
        return True

    def delete(self, caller: Identity, file_id: int) -> bool:
        """
        Remove a record the caller owns.

        Returns:
            True if the record was removed, False if it is missing or not owned
        """
        with self.store.transaction():
            if self._owned_record(caller, file_id, "delete") is None:
                return False
            self.store.remove(file_id)

        logger.info(f"Deleted file [file_id={file_id}]")
        return True

    def _owned_record(self, caller: Identity, file_id: int, action: str) -> Optional[FileRecord]:
        record = self.read(file_id)
        if record is None:
            logger.debug(f"Rejected {action}: file not found [file_id={file_id!r}]")
            return None
        if not self.guard.authorize(record, caller):
            logger.debug(f"Rejected {action}: not owner [file_id={file_id}, caller={caller}]")
            return None
        return record

    @staticmethod
    def _validate_mutable_fields(name, size, description) -> None:
        _require_text("name", name)
        _require_u64("size", size)
        _require_text("description", description)
