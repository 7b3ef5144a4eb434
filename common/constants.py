"""Project-wide constants (identifier range, snapshot format version)."""

U64_MAX: int = 2**64 - 1  # upper bound for ids, sizes and timestamps

FIRST_FILE_ID: int = 0

SNAPSHOT_FORMAT_VERSION: int = 1
