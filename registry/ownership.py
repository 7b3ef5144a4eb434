"""Ownership checks for record mutation."""

from common.types import FileRecord, Identity


class OwnershipGuard:
    @staticmethod
    def authorize(record: FileRecord, caller: Identity) -> bool:
        """True iff the caller is the identity that created the record."""
        return record.owner == caller
