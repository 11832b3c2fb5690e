"""Operator algebra over sequences: concatenation, repetition, comparison.

Free functions built on the public :class:`Sequence` contract. Results are
allocated at their exact final size through :meth:`Sequence.build`; nothing
here grows a result one append at a time.

Only ``equal`` and ``less`` compare elements. The other four comparisons are
derived from them so the six operators always agree.
"""

from __future__ import annotations

from typing import TypeVar

from strctl.domain.sequence import Sequence

T = TypeVar("T")


# --- Concatenation and repetition ---


def concat(a: Sequence[T], b: Sequence[T]) -> Sequence[T]:
    """*a* followed by *b*."""
    left = a.size()

    def fill(i: int) -> T:
        return a.at(i) if i < left else b.at(i - left)

    return Sequence.build(left + b.size(), fill)


def append_element(a: Sequence[T], element: T) -> Sequence[T]:
    """Copy of *a* with *element* appended. *a* is not modified."""
    return a.copy().append(element)


def prepend_element(element: T, a: Sequence[T]) -> Sequence[T]:
    """*element* followed by *a*."""
    return concat(Sequence.filled(1, element), a)


def repeat(a: Sequence[T], times: int) -> Sequence[T]:
    """*a* tiled *times* times. ``times <= 0`` gives an empty sequence.

    Examples:
        >>> repeat(Sequence.from_text("xy"), 3).c_str()
        'xyxyxy'
        >>> repeat(Sequence.from_text("xy"), -2).empty()
        True
    """
    if times <= 0:
        return Sequence()
    width = a.size()
    return Sequence.build(width * times, lambda i: a.at(i % width))


# --- Comparison ---


def equal(a: Sequence[T], b: Sequence[T]) -> bool:
    """Same length and element-wise equal in order."""
    if a.size() != b.size():
        return False
    return all(a.at(i) == b.at(i) for i in range(a.size()))


def not_equal(a: Sequence[T], b: Sequence[T]) -> bool:
    return not equal(a, b)


def less(a: Sequence[T], b: Sequence[T]) -> bool:
    """Lexicographic order; a proper prefix sorts first."""
    for i in range(min(a.size(), b.size())):
        x, y = a.at(i), b.at(i)
        if x < y:  # type: ignore[operator]
            return True
        if y < x:  # type: ignore[operator]
            return False
    return a.size() < b.size()


def greater(a: Sequence[T], b: Sequence[T]) -> bool:
    return less(b, a)


def less_equal(a: Sequence[T], b: Sequence[T]) -> bool:
    return not greater(a, b)


def greater_equal(a: Sequence[T], b: Sequence[T]) -> bool:
    return not less(a, b)
