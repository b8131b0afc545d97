"""Element kinds: the closed set of tags a tuple element can carry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ElementKind:
    name: str

    def display(self) -> str:
        return self.name

    def is_numeric(self) -> bool:
        return self in NUMERIC_KINDS


KIND_ABSENT = ElementKind("absent")
KIND_INTEGER = ElementKind("integer")
KIND_FLOAT = ElementKind("float")
KIND_DECIMAL = ElementKind("decimal")
KIND_NUMBER = ElementKind("number")  # any other numbers.Number (Fraction, complex)
KIND_BOOLEAN = ElementKind("boolean")
KIND_CHAR = ElementKind("char")
KIND_TEXT = ElementKind("text")
KIND_TUPLE = ElementKind("tuple")
KIND_SEQUENCE = ElementKind("sequence")
KIND_ITERABLE = ElementKind("iterable")
KIND_CUSTOM = ElementKind("custom")
KIND_OPAQUE = ElementKind("opaque")

NUMERIC_KINDS: frozenset[ElementKind] = frozenset(
    {KIND_INTEGER, KIND_FLOAT, KIND_DECIMAL, KIND_NUMBER}
)
CONTAINER_KINDS: frozenset[ElementKind] = frozenset(
    {KIND_TUPLE, KIND_SEQUENCE, KIND_ITERABLE}
)


@dataclass(frozen=True)
class Char:
    """A single character, kept distinct from one-character strings."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise ValueError("char must be exactly one character")

    def __str__(self) -> str:
        return self.value


def has_custom_text(value: object) -> bool:
    """True when the value's type replaces object's default str/repr."""
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__
