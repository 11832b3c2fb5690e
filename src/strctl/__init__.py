"""strctl: owned value sequences with a checked operator algebra."""

from strctl.domain.errors import InvalidRangeError, OutOfRangeError, StringError
from strctl.domain.sequence import Sequence

__all__ = ["InvalidRangeError", "OutOfRangeError", "Sequence", "StringError"]

__version__ = "0.1.0"
