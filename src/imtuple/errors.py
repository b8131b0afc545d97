"""Diagnostics raised by the tuple container."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .kinds import ElementKind


class TupleError(Exception):
    """Base error for tuple access."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class TupleIndexError(TupleError, IndexError):
    """Index outside [0, length)."""

    def __init__(self, index: int, length: int):
        super().__init__(f"tuple index {index} out of range for length {length}")
        self.index = index
        self.length = length


class TypeMismatch(TupleError, TypeError):
    """Typed accessor asked for a kind the element does not have."""

    def __init__(self, index: int, expected: ElementKind, actual: ElementKind):
        super().__init__(
            f"element {index} is {actual.display()}, not {expected.display()}"
        )
        self.index = index
        self.expected = expected
        self.actual = actual
