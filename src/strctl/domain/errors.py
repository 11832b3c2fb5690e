"""StringError family raised by sequence operations.

Two concrete failures share one describable base:
- OutOfRangeError: an index or slice start outside the sequence.
- InvalidRangeError: a half-open construction range with begin past end.

INVARIANT: Domain code raises these synchronously and never catches them.
"""

from __future__ import annotations

MESSAGE_PREFIX = "String error: "


class StringError(Exception):
    """Base for every sequence contract violation.

    Catch this to handle both failure kinds uniformly.
    """

    def __init__(self, message: str) -> None:
        self.message = f"{MESSAGE_PREFIX}{message}"
        super().__init__(self.message)


class OutOfRangeError(StringError):
    """Raised when *index* is not a valid position for the operation."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Index out of range: {index}")


class InvalidRangeError(StringError):
    """Raised when a [begin, end) range is malformed."""

    def __init__(self) -> None:
        super().__init__("Invalid pointer range.")
