"""JSON snapshots of registry state (id counter plus records)."""

import json
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from common.constants import SNAPSHOT_FORMAT_VERSION, U64_MAX
from common.logging_config import get_logger
from common.types import FileKind, FileRecord
from registry.exceptions import SnapshotError
from registry.store import RecordStore

logger = get_logger(__name__)


class RecordSnapshot(BaseModel):
    """Serialized form of a single file record."""
    file_id: int = Field(ge=0, le=U64_MAX)
    name: str
    kind: FileKind
    size: int = Field(ge=0, le=U64_MAX)
    description: str
    created_at: int = Field(ge=0, le=U64_MAX)
    owner: str

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, value):
        return FileKind.parse(value)

    @classmethod
    def from_record(cls, record: FileRecord) -> "RecordSnapshot":
        return cls(
            file_id=record.file_id,
            name=record.name,
            kind=record.kind,
            size=record.size,
            description=record.description,
            created_at=record.created_at,
            owner=record.owner,
        )

    def to_record(self) -> FileRecord:
        return FileRecord(
            file_id=self.file_id,
            name=self.name,
            kind=self.kind,
            size=self.size,
            description=self.description,
            created_at=self.created_at,
            owner=self.owner,
        )


class RegistrySnapshot(BaseModel):
    """Serialized registry state."""
    version: int = SNAPSHOT_FORMAT_VERSION
    next_id: int = Field(ge=0, le=U64_MAX)
    records: List[RecordSnapshot] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_consistency(self) -> "RegistrySnapshot":
        if self.version != SNAPSHOT_FORMAT_VERSION:
            raise ValueError(f"unsupported snapshot version {self.version}")

        seen = set()
        for record in self.records:
            if record.file_id in seen:
                raise ValueError(f"duplicate file_id {record.file_id}")
            if record.file_id >= self.next_id:
                raise ValueError(
                    f"file_id {record.file_id} is not below next_id {self.next_id}"
                )
            seen.add(record.file_id)
        return self


def export_snapshot(store: RecordStore) -> RegistrySnapshot:
    try:
        return RegistrySnapshot(
            next_id=store.load_counter(),
            records=[RecordSnapshot.from_record(record) for record in store.iter_records()],
        )
    except ValidationError as e:
        raise SnapshotError(f"Registry state cannot be exported: {e}") from e


def restore_snapshot(store: RecordStore, snapshot: RegistrySnapshot) -> None:
    """
    Load a snapshot into an empty store.

    Raises:
        SnapshotError: If the store already holds records or has issued ids
    """
    with store.transaction():
        if store.load_counter() > 0 or next(store.iter_records(), None) is not None:
            raise SnapshotError("Snapshots can only be restored into an empty registry")

        for record in snapshot.records:
            store.insert(record.file_id, record.to_record())
        store.save_counter(snapshot.next_id)

    logger.info(f"Restored {len(snapshot.records)} record(s), next_id={snapshot.next_id}")


def dump_snapshot(snapshot: RegistrySnapshot, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(snapshot.model_dump_json(indent=2))


def load_snapshot(path: Union[str, Path]) -> RegistrySnapshot:
    try:
        data = json.loads(Path(path).read_text())
        return RegistrySnapshot.model_validate(data)
    except (OSError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot {path}: {e}") from e
