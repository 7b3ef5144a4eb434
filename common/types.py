"""Shared data type definitions (FileKind, FileRecord)."""

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Union


class FileKind(str, Enum):
    """
    Classification of a registered file.

    UNKNOWN is the fallback for anything the registry does not recognise.
    """
    PDF = "PDF"
    DOCX = "DOCX"
    XLS = "XLS"
    TXT = "TXT"
    CSV = "CSV"
    PPTX = "PPTX"
    JPG = "JPG"
    PNG = "PNG"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Union["FileKind", str, None]) -> "FileKind":
        """
        Resolve a kind from a FileKind, a name or a file extension.

        Args:
            value: e.g. FileKind.PDF, "pdf", "Pdf" or ".pdf"

        Returns:
            Matching FileKind, or FileKind.UNKNOWN if nothing matches
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN

        key = value.strip().lstrip(".").upper()
        if key == "JPEG":
            key = "JPG"
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


Identity = Hashable


@dataclass(frozen=True)
class FileRecord:
    """
    Metadata for a single registered file.

    file_id, owner and created_at are fixed at creation; the registry replaces
    the record as a whole when the mutable fields change.
    """
    file_id: int
    name: str
    kind: FileKind
    size: int
    description: str
    created_at: int
    owner: Identity
