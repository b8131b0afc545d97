"""Element classification tests."""

from collections import UserString
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

import pytest

from imtuple import Char, Tuple, classify
from imtuple.kinds import (
    KIND_ABSENT,
    KIND_BOOLEAN,
    KIND_CHAR,
    KIND_CUSTOM,
    KIND_DECIMAL,
    KIND_FLOAT,
    KIND_INTEGER,
    KIND_ITERABLE,
    KIND_NUMBER,
    KIND_OPAQUE,
    KIND_SEQUENCE,
    KIND_TEXT,
    KIND_TUPLE,
)


class Plain:
    pass


@dataclass
class Record:
    name: str


def gen():
    yield 1


@pytest.mark.parametrize(
    "value,kind",
    [
        (None, KIND_ABSENT),
        (True, KIND_BOOLEAN),
        (False, KIND_BOOLEAN),
        (0, KIND_INTEGER),
        (2**100, KIND_INTEGER),
        (1.5, KIND_FLOAT),
        (Decimal("2.5"), KIND_DECIMAL),
        (Fraction(1, 2), KIND_NUMBER),
        (3j, KIND_NUMBER),
        (Char("x"), KIND_CHAR),
        ("x", KIND_TEXT),
        ("", KIND_TEXT),
        (UserString("u"), KIND_TEXT),
        (Tuple(), KIND_TUPLE),
        ([1], KIND_SEQUENCE),
        ((1,), KIND_SEQUENCE),
        (range(2), KIND_SEQUENCE),
        (b"ab", KIND_SEQUENCE),
        ({1}, KIND_ITERABLE),
        ({"a": 1}, KIND_ITERABLE),
        (gen(), KIND_ITERABLE),
        (Record("r"), KIND_CUSTOM),
        (Plain(), KIND_OPAQUE),
    ],
)
def test_classify(value: object, kind) -> None:
    assert classify(value) == kind


def test_numeric_kinds() -> None:
    assert KIND_INTEGER.is_numeric()
    assert KIND_DECIMAL.is_numeric()
    assert not KIND_BOOLEAN.is_numeric()
    assert not KIND_TEXT.is_numeric()


def test_char_requires_one_character() -> None:
    assert str(Char("q")) == "q"
    with pytest.raises(ValueError):
        Char("")
    with pytest.raises(ValueError):
        Char("ab")


def test_char_is_frozen() -> None:
    c = Char("a")
    with pytest.raises(AttributeError):
        c.value = "b"  # type: ignore[misc]
