"""Tests for the Outcome type (Ok and Err)."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st
from tryiter import Err, Ok, Result, is_outcome


class TestOutcomeCreation:
    """Tests for instantiation and immutability."""

    def test_ok_creation(self) -> None:
        """Ok wraps a value."""
        assert Ok(42).value == 42

    def test_ok_with_none(self) -> None:
        """Ok can wrap None."""
        assert Ok(None).value is None

    def test_err_with_exception(self) -> None:
        """Err can wrap exception objects."""
        exc = ValueError('bad token')
        assert Err(exc).error is exc

    def test_ok_is_frozen(self) -> None:
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]

    def test_err_is_frozen(self) -> None:
        err = Err('error')
        with pytest.raises(AttributeError):
            err.error = 'other'  # type: ignore[misc]


class TestOutcomeEquality:
    """Tests for equality and hashing."""

    def test_same_variant_same_payload_equal(self) -> None:
        assert Ok(42) == Ok(42)
        assert Err('e') == Err('e')

    def test_different_payload_not_equal(self) -> None:
        assert Ok(1) != Ok(2)
        assert Err('a') != Err('b')

    def test_ok_never_equals_err(self) -> None:
        """Ok and Err with the same payload differ."""
        assert Ok(42) != Err(42)

    def test_hashable(self) -> None:
        assert hash(Ok(42)) == hash(Ok(42))
        assert {Err('e'): 'v'}[Err('e')] == 'v'

    def test_repr(self) -> None:
        assert repr(Ok(84)) == 'Ok(value=84)'
        assert repr(Err('x')) == "Err(error='x')"


class TestOutcomeQuerying:
    """Tests for is_ok, is_err and is_outcome."""

    def test_ok_flags(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_err_flags(self) -> None:
        assert Err('e').is_ok() is False
        assert Err('e').is_err() is True

    @pytest.mark.parametrize('value', [1, None, 'text', (Ok(1),), [Err('e')]])
    def test_is_outcome_rejects_plain_values(self, value: object) -> None:
        assert is_outcome(value) is False

    def test_is_outcome_accepts_variants(self) -> None:
        assert is_outcome(Ok(1))
        assert is_outcome(Err('e'))


class TestOutcomeUnwrap:
    """Tests for unwrap, unwrap_or, unwrap_err and expect."""

    def test_ok_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_err_unwrap_raises(self) -> None:
        with pytest.raises(RuntimeError, match='Called unwrap on Err'):
            Err('error').unwrap()

    def test_err_unwrap_chains_exception(self) -> None:
        """An exception payload becomes the cause of the unwrap failure."""
        exc = ValueError('bad')
        with pytest.raises(RuntimeError) as info:
            Err(exc).unwrap()
        assert info.value.__cause__ is exc

    def test_unwrap_or(self) -> None:
        assert Ok(42).unwrap_or(0) == 42
        assert Err('e').unwrap_or(0) == 0

    def test_unwrap_err(self) -> None:
        assert Err('e').unwrap_err() == 'e'
        with pytest.raises(RuntimeError, match='Called unwrap_err on Ok'):
            Ok(1).unwrap_err()

    def test_expect(self) -> None:
        assert Ok(42).expect('unused') == 42
        with pytest.raises(RuntimeError, match='custom message'):
            Err('e').expect('custom message')

    def test_ok_and_err_views(self) -> None:
        assert Ok(1).ok() == 1
        assert Ok(1).err() is None
        assert Err('e').ok() is None
        assert Err('e').err() == 'e'


class TestOutcomeCombinators:
    """Tests for map, map_err and and_then."""

    def test_ok_map(self) -> None:
        assert Ok(5).map(lambda x: x * 2).map(str) == Ok('10')

    def test_err_map_skips_function(self) -> None:
        err: Result[int, str] = Err('error')
        assert err.map(lambda x: x * 2) == Err('error')

    def test_map_err(self) -> None:
        assert Ok(42).map_err(str.upper) == Ok(42)
        assert Err('error').map_err(str.upper) == Err('ERROR')

    def test_and_then(self) -> None:
        assert Ok(5).and_then(lambda x: Ok(x * 2)) == Ok(10)
        assert Ok(5).and_then(lambda x: Err('no')) == Err('no')
        assert Err('e').and_then(lambda x: Ok(x)) == Err('e')

    @given(st.integers())
    def test_map_identity(self, n: int) -> None:
        """Mapping the identity function leaves an Ok unchanged."""
        assert Ok(n).map(lambda x: x) == Ok(n)
