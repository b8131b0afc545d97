"""Immutable tuple container.

A `Tuple` holds a fixed, ordered run of arbitrary Python values. The backing
storage is a private list that is copied on every construction path and never
handed out, so no caller can reach it to mutate it.
"""

from __future__ import annotations

from collections import UserString
from collections.abc import Iterable, Iterator, Sequence
from contextvars import ContextVar
import copy
from decimal import Decimal
import logging
import numbers
import operator
from typing import TYPE_CHECKING, Any, cast

from .errors import TupleIndexError, TypeMismatch
from .kinds import (
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
    Char,
    ElementKind,
    has_custom_text,
)

if TYPE_CHECKING:
    from .render import RenderOptions

logger = logging.getLogger(__name__)

# (id(a), id(b)) pairs whose comparison is open in the current context. Shared
# across nested __eq__ calls so cycles through list elements terminate.
_comparing: ContextVar[set[tuple[int, int]] | None] = ContextVar(
    "_comparing", default=None
)


# ============================================================
# Classification
# ============================================================


def classify(value: object) -> ElementKind:
    """Tag a value with its element kind.

    Order matters: bool is an int subclass, Char and str are sequences, and a
    Tuple is iterable, so the narrower checks run first.
    """
    if value is None:
        return KIND_ABSENT
    if isinstance(value, bool):
        return KIND_BOOLEAN
    if isinstance(value, numbers.Integral):
        return KIND_INTEGER
    if isinstance(value, float):
        return KIND_FLOAT
    if isinstance(value, Decimal):
        return KIND_DECIMAL
    if isinstance(value, numbers.Number):
        return KIND_NUMBER
    if isinstance(value, Char):
        return KIND_CHAR
    if isinstance(value, (str, UserString)):
        return KIND_TEXT
    if isinstance(value, Tuple):
        return KIND_TUPLE
    if isinstance(value, Sequence):
        return KIND_SEQUENCE
    if isinstance(value, Iterable):
        return KIND_ITERABLE
    if has_custom_text(value):
        return KIND_CUSTOM
    return KIND_OPAQUE


# ============================================================
# Container
# ============================================================


class Tuple:
    """Fixed-length, read-only sequence of heterogeneous values."""

    __slots__ = ("_elements",)

    _elements: list[Any]

    def __init__(self, *elements: Any) -> None:
        object.__setattr__(self, "_elements", list(elements))

    @classmethod
    def _adopt(cls, elements: list[Any]) -> Tuple:
        # Caller guarantees `elements` is a fresh list nobody else holds.
        t = cls.__new__(cls)
        object.__setattr__(t, "_elements", elements)
        return t

    @classmethod
    def from_iterable(cls, source: Iterable[Any]) -> Tuple:
        """Drain `source` in iteration order into a new tuple.

        Errors raised by the source propagate unchanged.
        """
        if isinstance(source, Tuple):
            return cls._adopt(list(source._elements))
        elements = list(source)
        logger.debug(
            "drained %d elements from %s", len(elements), type(source).__name__
        )
        return cls._adopt(elements)

    @classmethod
    def copy_of(cls, other: Tuple) -> Tuple:
        """New storage, same element identities."""
        if not isinstance(other, Tuple):
            raise TypeError(f"copy_of expects a Tuple, got {type(other).__name__}")
        return cls._adopt(list(other._elements))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Tuple is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Tuple is immutable; cannot delete {name!r}")

    # ── Access ──────────────────────────────────────────────

    def _check_index(self, index: int) -> int:
        i = operator.index(index)
        if i < 0 or i >= len(self._elements):
            raise TupleIndexError(i, len(self._elements))
        return i

    def get(self, index: int) -> Any:
        return self._elements[self._check_index(index)]

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def length(self) -> int:
        return len(self._elements)

    def size(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def clone(self) -> Tuple:
        return Tuple._adopt(list(self._elements))

    def __copy__(self) -> Tuple:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Tuple:
        t = Tuple._adopt([])
        # Registered before the elements so back-references resolve to `t`.
        memo[id(self)] = t
        t._elements.extend(copy.deepcopy(e, memo) for e in self._elements)
        return t

    def __reduce__(self) -> tuple[type, tuple[Any, ...]]:
        return (Tuple, tuple(self._elements))

    # ── Typed access ────────────────────────────────────────

    def kind(self, index: int) -> ElementKind:
        return classify(self.get(index))

    def get_as(self, index: int, kind: ElementKind) -> Any:
        """Return the element at `index`, or raise TypeMismatch if it is not `kind`."""
        i = self._check_index(index)
        value = self._elements[i]
        actual = classify(value)
        if actual != kind:
            raise TypeMismatch(i, kind, actual)
        return value

    def get_int(self, index: int) -> int:
        return cast(int, self.get_as(index, KIND_INTEGER))

    def get_float(self, index: int) -> float:
        return cast(float, self.get_as(index, KIND_FLOAT))

    def get_decimal(self, index: int) -> Decimal:
        return cast(Decimal, self.get_as(index, KIND_DECIMAL))

    def get_number(self, index: int) -> numbers.Number:
        """Any numeric element, returned as stored."""
        i = self._check_index(index)
        value = self._elements[i]
        actual = classify(value)
        if not actual.is_numeric():
            raise TypeMismatch(i, KIND_NUMBER, actual)
        return cast(numbers.Number, value)

    def get_bool(self, index: int) -> bool:
        return cast(bool, self.get_as(index, KIND_BOOLEAN))

    def get_char(self, index: int) -> Char:
        return cast(Char, self.get_as(index, KIND_CHAR))

    def get_str(self, index: int) -> str | UserString:
        return cast("str | UserString", self.get_as(index, KIND_TEXT))

    def get_tuple(self, index: int) -> Tuple:
        return cast(Tuple, self.get_as(index, KIND_TUPLE))

    def get_sequence(self, index: int) -> Sequence[Any]:
        return cast(Sequence[Any], self.get_as(index, KIND_SEQUENCE))

    # ── Equality ────────────────────────────────────────────

    def equals(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return False
        active = _comparing.get()
        if active is not None:
            return _tuples_equal(self, other, active)
        active = set()
        token = _comparing.set(active)
        try:
            return _tuples_equal(self, other, active)
        finally:
            _comparing.reset(token)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        hashes: list[int] = []
        for i, e in enumerate(self._elements):
            try:
                hashes.append(hash(e))
            except TypeError as exc:
                raise TypeError(f"unhashable tuple element at index {i}") from exc
        return hash(("Tuple", tuple(hashes)))

    # ── Display ─────────────────────────────────────────────

    def render(self, options: RenderOptions | None = None) -> str:
        from .render import render

        return render(self, options)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        from .render import PLAIN

        return "Tuple" + self.render(PLAIN)


def _tuples_equal(a: Tuple, b: Tuple, active: set[tuple[int, int]]) -> bool:
    if len(a._elements) != len(b._elements):
        return False
    if a._elements is b._elements:
        return True
    key = (id(a), id(b))
    if key in active:
        # Already comparing this pair further up; a cycle cannot disprove it.
        return True
    active.add(key)
    try:
        for x, y in zip(a._elements, b._elements):
            if isinstance(x, Tuple) and isinstance(y, Tuple):
                if not _tuples_equal(x, y, active):
                    return False
            elif x is not y and not (x == y):
                return False
    finally:
        active.discard(key)
    return True


EMPTY: Tuple = Tuple()
