"""Tests for Sequence[T]: construction, ownership, access, and mutation."""

from __future__ import annotations

import copy
import datetime

import pytest

from strctl.domain.errors import InvalidRangeError, OutOfRangeError
from strctl.domain.sequence import Sequence
from strctl.domain.transform import FunctionTransformer, ToUpperChar, Transformer


def text(s: str) -> Sequence[str]:
    return Sequence.from_text(s)


class TestConstruction:
    def test_default_is_empty(self) -> None:
        s: Sequence[int] = Sequence()
        assert s.size() == 0
        assert s.empty()
        assert len(s) == 0
        assert not s

    @pytest.mark.parametrize("n", [0, 1, 5, 64])
    def test_filled(self, n: int) -> None:
        s = Sequence.filled(n, "x")
        assert s.size() == n
        assert all(s.at(i) == "x" for i in range(n))

    def test_filled_negative_count(self) -> None:
        with pytest.raises(InvalidRangeError):
            Sequence.filled(-1, 0)

    def test_build_uses_index(self) -> None:
        s = Sequence.build(4, lambda i: i * i)
        assert list(s) == [0, 1, 4, 9]

    def test_from_text(self) -> None:
        s = text("abc")
        assert s.size() == 3
        assert s.c_str() == "abc"

    def test_from_terminated_str_stops_at_nul(self) -> None:
        s = Sequence.from_terminated("ab\0cd")
        assert s.c_str() == "ab"

    def test_from_terminated_char_list_stops_at_nul(self) -> None:
        s = Sequence.from_terminated(list("ab\0cd"))
        assert list(s) == ["a", "b"]

    def test_from_terminated_char_sequence_stops_at_nul(self) -> None:
        s = Sequence.from_terminated(Sequence.from_text("ab\0cd"))
        assert s.c_str() == "ab"

    def test_from_terminated_ints_stop_at_zero(self) -> None:
        s = Sequence.from_terminated([3, 1, 0, 7])
        assert list(s) == [3, 1]

    def test_from_terminated_bytes(self) -> None:
        s = Sequence.from_terminated(b"hi\x00there")
        assert list(s) == [ord("h"), ord("i")]

    def test_from_terminated_explicit_sentinel(self) -> None:
        s = Sequence.from_terminated([1, 2, -1, 3], sentinel=-1)
        assert list(s) == [1, 2]

    def test_from_terminated_without_sentinel_takes_whole_buffer(self) -> None:
        assert Sequence.from_terminated("abc").c_str() == "abc"

    def test_from_terminated_leading_sentinel(self) -> None:
        assert Sequence.from_terminated("\0abc").empty()

    def test_from_terminated_empty_buffer(self) -> None:
        assert Sequence.from_terminated([]).empty()

    def test_from_terminated_needs_sentinel_without_default(self) -> None:
        stamps = [datetime.date(2024, 1, 1), datetime.date(2024, 1, 2)]
        with pytest.raises(TypeError, match="sentinel="):
            Sequence.from_terminated(stamps)
        s = Sequence.from_terminated(stamps, sentinel=datetime.date(2024, 1, 2))
        assert list(s) == [datetime.date(2024, 1, 1)]

    def test_from_range(self) -> None:
        s = Sequence.from_range("abcdef", 1, 4)
        assert s.c_str() == "bcd"

    def test_from_range_degenerate_is_empty(self) -> None:
        assert Sequence.from_range("abc", 2, 2).empty()

    def test_from_range_reversed(self) -> None:
        with pytest.raises(InvalidRangeError):
            Sequence.from_range("abc", 2, 1)

    @pytest.mark.parametrize(("begin", "end"), [(-1, 2), (0, 4), (4, 5)])
    def test_from_range_outside_buffer(self, begin: int, end: int) -> None:
        with pytest.raises(InvalidRangeError):
            Sequence.from_range("abc", begin, end)

    def test_converted_applies_explicit_cast(self) -> None:
        chars = text("AB")
        codes = Sequence.converted(chars, ord)
        assert list(codes) == [65, 66]

    def test_converted_int_to_float(self) -> None:
        floats = Sequence.converted(Sequence.build(3, lambda i: i), float)
        assert list(floats) == [0.0, 1.0, 2.0]
        assert all(isinstance(x, float) for x in floats)


class TestOwnership:
    def test_copy_is_independent(self) -> None:
        a = text("abc")
        b = a.copy()
        b.set_at(0, "z")
        assert a.c_str() == "abc"
        assert b.c_str() == "zbc"

    def test_copy_of_and_copy_module(self) -> None:
        a = text("abc")
        for b in (Sequence.copy_of(a), copy.copy(a), copy.deepcopy(a)):
            assert b == a
            b.append("d")
            assert a.size() == 3

    def test_copy_of_empty_has_no_storage(self) -> None:
        b = Sequence.copy_of(Sequence())
        assert b.empty()
        assert b._data is None

    def test_take_steals_and_empties_source(self) -> None:
        a = text("abc")
        b = Sequence.take(a)
        assert b.c_str() == "abc"
        assert a.empty()
        assert a._data is None

    def test_assign_copies(self) -> None:
        a, b = text("abc"), text("xy")
        b.assign(a)
        a.set_at(0, "q")
        assert b.c_str() == "abc"

    def test_assign_self_is_noop(self) -> None:
        a = text("abc")
        assert a.assign(a) is a
        assert a.c_str() == "abc"

    def test_assign_from_moves(self) -> None:
        a, b = text("abc"), text("xy")
        b.assign_from(a)
        assert b.c_str() == "abc"
        assert a.empty()

    def test_assign_from_self_keeps_contents(self) -> None:
        a = text("abc")
        a.assign_from(a)
        assert a.c_str() == "abc"

    def test_slice_does_not_share_storage(self) -> None:
        a = text("abcd")
        sub = a.slice(0, 2)
        sub.set_at(0, "z")
        assert a.c_str() == "abcd"

    def test_storage_is_exact_size(self) -> None:
        s = text("ab")
        s.append("c")
        assert s._data is not None
        assert len(s._data) == s.size() == 3

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(text("a"))


class TestObservers:
    def test_clear_releases_storage(self) -> None:
        s = text("abc")
        s.clear()
        assert s.empty()
        assert s._data is None

    def test_clear_is_idempotent(self) -> None:
        s = text("abc")
        s.clear()
        s.clear()
        assert s.size() == 0

    def test_iteration_order(self) -> None:
        assert list(text("xyz")) == ["x", "y", "z"]

    def test_c_str_empty(self) -> None:
        assert Sequence().c_str() == ""

    def test_repr(self) -> None:
        assert repr(text("ab")) == "Sequence(['a', 'b'])"


class TestAccess:
    def test_at(self) -> None:
        s = text("abc")
        assert s.at(0) == "a"
        assert s.at(2) == "c"
        assert s[1] == "b"

    @pytest.mark.parametrize("index", [3, 5, 100, -1])
    def test_at_out_of_range(self, index: int) -> None:
        with pytest.raises(OutOfRangeError) as excinfo:
            text("abc").at(index)
        assert excinfo.value.index == index

    def test_at_on_empty(self) -> None:
        with pytest.raises(OutOfRangeError):
            Sequence().at(0)

    def test_set_at(self) -> None:
        s = text("abc")
        s[1] = "B"
        assert s.c_str() == "aBc"

    def test_set_at_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            text("abc").set_at(3, "d")

    def test_python_slice_syntax_rejected(self) -> None:
        with pytest.raises(TypeError):
            text("abc")[0:1]  # type: ignore[index]


class TestSlice:
    def test_basic(self) -> None:
        assert text("abc").slice(1, 2).c_str() == "bc"

    def test_len_clamped(self) -> None:
        assert text("abc").slice(1, 100).c_str() == "bc"

    @pytest.mark.parametrize("count", [0, 1, 10])
    def test_start_at_end_is_empty(self, count: int) -> None:
        assert text("abc").slice(3, count).empty()

    def test_start_past_end(self) -> None:
        with pytest.raises(OutOfRangeError) as excinfo:
            text("abc").slice(4, 1)
        assert excinfo.value.index == 4

    def test_negative_start(self) -> None:
        with pytest.raises(OutOfRangeError):
            text("abc").slice(-1, 1)

    def test_negative_length_is_empty(self) -> None:
        assert text("abc").slice(1, -5).empty()

    def test_empty_source(self) -> None:
        assert Sequence().slice(0, 5).empty()
        with pytest.raises(OutOfRangeError):
            Sequence().slice(1, 0)


class TestAppend:
    def test_grows_by_one(self) -> None:
        s = text("ab")
        s.append("c")
        assert s.c_str() == "abc"

    def test_from_empty(self) -> None:
        s: Sequence[int] = Sequence()
        s.append(1)
        assert list(s) == [1]

    def test_iadd_appends_in_place(self) -> None:
        s = text("ab")
        alias = s
        s += "c"
        assert alias is s
        assert s.c_str() == "abc"


class _Explode(Transformer[str]):
    def transform(self, original: str) -> str:
        if original == "!":
            raise ValueError("boom")
        return original.upper()


class TestTransformations:
    def test_apply_in_place(self) -> None:
        s = text("abc")
        s.apply(ToUpperChar())
        assert s.c_str() == "ABC"

    def test_apply_leaves_non_letters(self) -> None:
        s = text("a1-b")
        s.apply(ToUpperChar())
        assert s.c_str() == "A1-B"

    def test_apply_partial_on_failure(self) -> None:
        s = text("ab!cd")
        with pytest.raises(ValueError):
            s.apply(_Explode())
        assert s.at(0) == "A"
        assert s.at(1) == "B"

    def test_modify_with_callable(self) -> None:
        s = Sequence.build(3, lambda i: i)
        s.modify(lambda x: x + 10)
        assert list(s) == [10, 11, 12]

    def test_transformed_returns_new(self) -> None:
        s = text("abc")
        out = s.transformed(ToUpperChar())
        assert out.c_str() == "ABC"
        assert s.c_str() == "abc"

    def test_transformed_accepts_callable(self) -> None:
        s = Sequence.build(3, lambda i: i)
        assert list(s.mapped(lambda x: -x)) == [0, -1, -2]

    def test_transformed_accepts_function_transformer(self) -> None:
        out = text("ab").transformed(FunctionTransformer(lambda c: c * 2))
        assert list(out) == ["aa", "bb"]

    def test_transformed_empty(self) -> None:
        assert Sequence().transformed(ToUpperChar()).empty()
