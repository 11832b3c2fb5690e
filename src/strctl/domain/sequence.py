"""Sequence[T]: an owned, exact-size, bounds-checked value sequence.

Each instance owns one backing list sized exactly to its length, or no list
at all when empty. Every structural change (append, concat, repeat, slice)
allocates a fresh list of the final size and copies into it.

INVARIANT: ``_data is None`` iff ``_length == 0``; otherwise
``len(_data) == _length``.
INVARIANT: No two live sequences share a backing list.

Repeated ``append`` calls reallocate every time, so building a sequence of
n elements one append at a time costs O(n^2) copies. Callers that know the
final size should use :meth:`Sequence.build` or the algebra functions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from collections.abc import Sequence as SequenceABC
from typing import Any, Generic, TypeVar

from strctl.domain.errors import InvalidRangeError, OutOfRangeError
from strctl.domain.transform import FunctionTransformer, Transformer

T = TypeVar("T")
U = TypeVar("U")

_NO_SENTINEL: Any = object()


def _zero_value(buffer: SequenceABC[Any]) -> Any:
    """Zero sentinel for a terminated buffer: NUL for characters, ``type()`` otherwise.

    Raises:
        TypeError: if the element type has no no-argument constructor.
    """
    if isinstance(buffer, str):
        return "\0"
    if not buffer:
        return None
    first = buffer[0]
    if isinstance(first, str):
        return "\0"
    try:
        return type(first)()
    except TypeError as exc:
        msg = (
            f"No default zero value for {type(first).__name__} elements; "
            "pass sentinel= explicitly"
        )
        raise TypeError(msg) from exc


class Sequence(Generic[T]):
    """Generic owned sequence with checked access.

    Usage::

        s = Sequence.from_text("abc")
        s.apply(ToUpperChar())
        s.c_str()          # "ABC"
        s.slice(1, 2)      # Sequence(['B', 'C'])
        s.at(5)            # raises OutOfRangeError
    """

    __slots__ = ("_data", "_length")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._data: list[T] | None = None
        self._length = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(cls, size: int, filler: Callable[[int], T]) -> Sequence[T]:
        """Allocate exactly *size* slots and set slot ``i`` to ``filler(i)``."""
        if size < 0:
            raise InvalidRangeError()
        result: Sequence[T] = cls()
        if size == 0:
            return result
        result._data = [filler(i) for i in range(size)]
        result._length = size
        return result

    @classmethod
    def filled(cls, count: int, value: T) -> Sequence[T]:
        """*count* copies of *value*."""
        return cls.build(count, lambda _i: value)

    @classmethod
    def copy_of(cls, other: Sequence[T]) -> Sequence[T]:
        """Independent copy of *other*."""
        return cls.build(other.size(), other.at)

    @classmethod
    def take(cls, other: Sequence[T]) -> Sequence[T]:
        """Steal *other*'s storage. *other* is left empty."""
        result: Sequence[T] = cls()
        result._data, result._length = other._data, other._length
        other._data, other._length = None, 0
        return result

    @classmethod
    def from_terminated(
        cls,
        buffer: SequenceABC[T],
        sentinel: T = _NO_SENTINEL,
    ) -> Sequence[T]:
        """Copy *buffer* up to (not including) its first zero sentinel.

        The default sentinel is ``"\\0"`` for character buffers (a ``str``, or
        any buffer whose elements are ``str``) and the element type's default
        value (``type(buffer[0])()``) otherwise. Element types without a
        no-argument constructor need an explicit *sentinel*. A buffer with no
        sentinel is copied whole.

        Raises:
            TypeError: if no *sentinel* is given and none can be derived.
        """
        if sentinel is _NO_SENTINEL:
            sentinel = _zero_value(buffer)
        length = 0
        for element in buffer:
            if element == sentinel:
                break
            length += 1
        return cls.from_range(buffer, 0, length)

    @classmethod
    def from_range(cls, buffer: SequenceABC[T], begin: int, end: int) -> Sequence[T]:
        """Copy the half-open range ``buffer[begin:end]``.

        Raises:
            InvalidRangeError: if ``begin > end`` or the range leaves *buffer*.
        """
        if begin > end or begin < 0 or end > len(buffer):
            raise InvalidRangeError()
        return cls.build(end - begin, lambda i: buffer[begin + i])

    @classmethod
    def converted(cls, other: Sequence[U], cast: Callable[[U], T]) -> Sequence[T]:
        """Explicit element-wise conversion from a sequence of another type."""
        return cls.build(other.size(), lambda i: cast(other.at(i)))

    @classmethod
    def from_text(cls, text: str) -> Sequence[str]:
        """Character sequence holding every character of *text*."""
        return Sequence.build(len(text), text.__getitem__)

    def copy(self) -> Sequence[T]:
        return Sequence.copy_of(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Sequence[T]:
        import copy

        return Sequence.build(self._length, lambda i: copy.deepcopy(self.at(i), memo))

    # ------------------------------------------------------------------
    # Assignment
    # ------------------------------------------------------------------

    def assign(self, other: Sequence[T]) -> Sequence[T]:
        """Copy-assign: replace contents with a copy of *other*."""
        if other is not self:
            fresh = Sequence.copy_of(other)
            self._data, self._length = fresh._data, fresh._length
        return self

    def assign_from(self, other: Sequence[T]) -> Sequence[T]:
        """Move-assign: take *other*'s storage and leave it empty."""
        if other is not self:
            self._data, self._length = other._data, other._length
            other._data, other._length = None, 0
        return self

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._length

    def empty(self) -> bool:
        return self._length == 0

    def clear(self) -> None:
        """Release the backing storage. Safe to call repeatedly."""
        self._data = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length != 0

    def __iter__(self) -> Iterator[T]:
        for i in range(self._length):
            yield self._data[i]  # type: ignore[index]

    # ------------------------------------------------------------------
    # Checked access
    # ------------------------------------------------------------------

    def _check(self, index: int) -> None:
        if index < 0 or index >= self._length:
            raise OutOfRangeError(index)

    def at(self, index: int) -> T:
        """Element at *index*. Raises OutOfRangeError if ``index >= size()``."""
        self._check(index)
        return self._data[index]  # type: ignore[index]

    def set_at(self, index: int, value: T) -> None:
        """Overwrite the element at *index*. Same bounds rule as :meth:`at`."""
        self._check(index)
        self._data[index] = value  # type: ignore[index]

    def __getitem__(self, index: int) -> T:
        if not isinstance(index, int):
            msg = f"Sequence indices must be integers, not {type(index).__name__}; use slice()"
            raise TypeError(msg)
        return self.at(index)

    def __setitem__(self, index: int, value: T) -> None:
        if not isinstance(index, int):
            msg = f"Sequence indices must be integers, not {type(index).__name__}"
            raise TypeError(msg)
        self.set_at(index, value)

    def slice(self, start: int, length: int) -> Sequence[T]:
        """New sequence of up to *length* elements beginning at *start*.

        ``start == size()`` is legal and yields an empty sequence. *length* is
        clamped to what remains; a negative *length* counts as zero.

        Raises:
            OutOfRangeError: if ``start > size()``.
        """
        if start < 0 or start > self._length:
            raise OutOfRangeError(start)
        actual = max(0, min(length, self._length - start))
        return Sequence.from_range(self._data or (), start, start + actual)

    def c_str(self) -> str:
        """Join a character sequence into a ``str`` (``""`` when empty)."""
        return "".join(self._data) if self._data else ""  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, element: T) -> Sequence[T]:
        """Grow by one: reallocate to ``size() + 1``, copy, write *element*."""
        old, length = self._data, self._length
        grown: list[T] = [element] * (length + 1)
        for i in range(length):
            grown[i] = old[i]  # type: ignore[index]
        self._data = grown
        self._length = length + 1
        return self

    def apply(self, transformer: Transformer[T]) -> None:
        """Replace each element with ``transformer(element)``, lowest index first.

        A transformer that raises leaves the earlier elements transformed.
        """
        for i in range(self._length):
            self._data[i] = transformer.transform(self._data[i])  # type: ignore[index]

    def modify(self, func: Callable[[T], T]) -> None:
        """Like :meth:`apply` for any callable."""
        for i in range(self._length):
            self._data[i] = func(self._data[i])  # type: ignore[index]

    def transformed(self, transformer: Transformer[T] | Callable[[T], T]) -> Sequence[T]:
        """New sequence of transformed elements; the receiver is unchanged."""
        if not isinstance(transformer, Transformer):
            transformer = FunctionTransformer(transformer)
        return Sequence.build(self._length, lambda i: transformer.transform(self.at(i)))

    mapped = transformed

    # ------------------------------------------------------------------
    # Operator sugar (see strctl.domain.algebra)
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Sequence[T]:
        from strctl.domain import algebra

        if isinstance(other, str) and len(other) != 1:
            other = Sequence.from_text(other)
        if isinstance(other, Sequence):
            return algebra.concat(self, other)
        return algebra.append_element(self, other)

    def __radd__(self, other: Any) -> Sequence[T]:
        from strctl.domain import algebra

        if isinstance(other, str) and len(other) != 1:
            return algebra.concat(Sequence.from_text(other), self)  # type: ignore[arg-type]
        return algebra.prepend_element(other, self)

    def __iadd__(self, element: T) -> Sequence[T]:
        return self.append(element)

    def __mul__(self, times: int) -> Sequence[T]:
        from strctl.domain import algebra

        if not isinstance(times, int):
            return NotImplemented
        return algebra.repeat(self, times)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        from strctl.domain import algebra

        if not isinstance(other, Sequence):
            return NotImplemented
        return algebra.equal(self, other)

    def __ne__(self, other: object) -> bool:
        from strctl.domain import algebra

        if not isinstance(other, Sequence):
            return NotImplemented
        return algebra.not_equal(self, other)

    def __lt__(self, other: Sequence[T]) -> bool:
        from strctl.domain import algebra

        if not isinstance(other, Sequence):
            return NotImplemented
        return algebra.less(self, other)

    def __gt__(self, other: Sequence[T]) -> bool:
        from strctl.domain import algebra

        if not isinstance(other, Sequence):
            return NotImplemented
        return algebra.greater(self, other)

    def __le__(self, other: Sequence[T]) -> bool:
        from strctl.domain import algebra

        if not isinstance(other, Sequence):
            return NotImplemented
        return algebra.less_equal(self, other)

    def __ge__(self, other: Sequence[T]) -> bool:
        from strctl.domain import algebra

        if not isinstance(other, Sequence):
            return NotImplemented
        return algebra.greater_equal(self, other)

    def __repr__(self) -> str:
        return f"Sequence({list(self._data or ())!r})"
