"""Text stream adapters for character sequences.

``write_text`` emits a sequence as-is; ``read_token`` replaces a sequence
with the next whitespace-delimited token from a stream.
"""

from __future__ import annotations

from typing import TextIO

from strctl.domain.sequence import Sequence


def write_text(stream: TextIO, seq: Sequence[str]) -> TextIO:
    """Write every element of *seq* in order. No separator, no terminator."""
    for ch in seq:
        stream.write(ch)
    return stream


def read_token(stream: TextIO, seq: Sequence[str]) -> bool:
    """Replace *seq* with the next whitespace-delimited token from *stream*.

    Leading whitespace is skipped. Reading stops after the first whitespace
    character following the token, or at end of stream. The prior contents
    of *seq* are discarded even when the stream holds no token, which leaves
    *seq* empty.

    Returns:
        True if a token was read.
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    chars: list[str] = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)

    seq.assign_from(Sequence.from_text("".join(chars)))
    return bool(chars)
