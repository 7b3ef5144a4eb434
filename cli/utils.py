"""Utility functions for CLI output."""

from common.types import FileRecord
from registry.utils import format_timestamp


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"


def format_record(record: FileRecord) -> str:
    """
    Render a record as an indented multi-line block.
    """
    lines = [
        f"File {record.file_id}: {record.name}",
        f"  Kind:        {record.kind.value.lower()}",
        f"  Size:        {format_file_size(record.size)} ({record.size} bytes)",
        f"  Description: {record.description or '-'}",
        f"  Owner:       {record.owner}",
        f"  Created:     {format_timestamp(record.created_at)}",
    ]
    return "\n".join(lines)
