"""Immutable heterogeneous tuple with type-aware rendering: public API."""

from __future__ import annotations

from .container import EMPTY, Tuple, classify
from .errors import TupleError, TupleIndexError, TypeMismatch
from .kinds import Char, ElementKind
from .render import PLAIN, RenderOptions, render

__all__ = [
    "EMPTY",
    "PLAIN",
    "Char",
    "ElementKind",
    "RenderOptions",
    "Tuple",
    "TupleError",
    "TupleIndexError",
    "TypeMismatch",
    "classify",
    "render",
]
