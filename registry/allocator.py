"""Identifier allocation for new file records."""

from common.constants import FIRST_FILE_ID, U64_MAX
from registry.exceptions import IdSpaceExhaustedError


class IdentifierAllocator:
    """
    Hands out strictly increasing file ids.

    The counter never wraps: once it cannot advance past U64_MAX every further
    allocation fails, so an id is never issued twice.
    """

    def __init__(self, counter: int = FIRST_FILE_ID, max_id: int = U64_MAX):
        if not FIRST_FILE_ID <= counter <= max_id:
            raise ValueError(f"Counter {counter} outside [{FIRST_FILE_ID}, {max_id}]")
        self._counter = counter
        self._max_id = max_id

    @property
    def counter(self) -> int:
        """Next unused id."""
        return self._counter

    def next_id(self) -> int:
        """
        Return the current counter value and advance it by one.

        Raises:
            IdSpaceExhaustedError: If advancing would overflow; the counter is left unchanged
        """
        current = self._counter
        if current >= self._max_id:
            raise IdSpaceExhaustedError(
                f"File id space exhausted: counter {current} cannot advance past {self._max_id}"
            )
        self._counter = current + 1
        return current
