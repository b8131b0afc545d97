"""Tuple renderer: type-aware display text for a tuple and its elements.

Each element is tagged with `classify` and rendered by kind:

    None                -> null                    (highlighted)
    container ancestor  -> this Tuple / (this Collection)  (highlighted)
    numbers             -> str(value)
    bool                -> true / false            (highlighted)
    Char                -> 'c'
    str, UserString     -> "text"
    Tuple               -> (e0, e1, ...)
    sequence, iterable  -> [e0, e1, ...]
    custom str/repr     -> "text"
    anything else       -> str(value)

Newlines and tabs inside quoted text are shown as highlighted \\n and \\t so
the result always fits on one line.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import logging
from typing import cast

from .container import Tuple, classify
from .kinds import (
    KIND_ABSENT,
    KIND_BOOLEAN,
    KIND_CHAR,
    KIND_CUSTOM,
    KIND_ITERABLE,
    KIND_SEQUENCE,
    KIND_TEXT,
    KIND_TUPLE,
    CONTAINER_KINDS,
)

logger = logging.getLogger(__name__)

HIGHLIGHT: str = "\u001b[35m"
RESET: str = "\u001b[0m"

NULL_TEXT: str = "null"
SELF_TUPLE_TEXT: str = "this Tuple"
SELF_COLLECTION_TEXT: str = "(this Collection)"


@dataclass(frozen=True)
class RenderOptions:
    color: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> RenderOptions:
        """Honour NO_COLOR: any non-empty value turns highlighting off."""
        return cls(color=env.get("NO_COLOR", "") == "")

    def highlight(self, text: str) -> str:
        if not self.color:
            return text
        return HIGHLIGHT + text + RESET


DEFAULT = RenderOptions()
PLAIN = RenderOptions(color=False)


def render(t: Tuple, options: RenderOptions | None = None) -> str:
    """Render `t` as `(e0, e1, ...)`."""
    return _Renderer(options if options is not None else DEFAULT).render_tuple(t)


class _Renderer:
    def __init__(self, options: RenderOptions) -> None:
        self.options = options
        self._parts: list[str] = []
        # ids of containers whose brackets are currently open
        self._active: set[int] = set()

    # ── Public ──────────────────────────────────────────────

    def render_tuple(self, t: Tuple) -> str:
        self._emit_tuple(t)
        return "".join(self._parts)

    # ── Containers ──────────────────────────────────────────

    def _emit_tuple(self, t: Tuple) -> None:
        self._active.add(id(t))
        self._parts.append("(")
        self._emit_items(t)
        self._parts.append(")")
        self._active.discard(id(t))

    def _emit_collection(self, container: object, items: Iterable[object]) -> None:
        self._active.add(id(container))
        self._parts.append("[")
        self._emit_items(items)
        self._parts.append("]")
        self._active.discard(id(container))

    def _emit_items(self, items: Iterable[object]) -> None:
        first = True
        for item in items:
            if not first:
                self._parts.append(", ")
            first = False
            self._emit_value(item)

    def _emit_back_reference(self, value: object) -> None:
        logger.debug("cycle at %s, emitting placeholder", type(value).__name__)
        if isinstance(value, Tuple):
            self._parts.append(self.options.highlight(SELF_TUPLE_TEXT))
        else:
            self._parts.append(self.options.highlight(SELF_COLLECTION_TEXT))

    # ── Dispatch ────────────────────────────────────────────

    def _emit_value(self, value: object) -> None:
        kind = classify(value)
        if kind == KIND_ABSENT:
            self._parts.append(self.options.highlight(NULL_TEXT))
        elif kind in CONTAINER_KINDS and id(value) in self._active:
            self._emit_back_reference(value)
        elif kind.is_numeric():
            self._parts.append(str(value))
        elif kind == KIND_BOOLEAN:
            self._parts.append(self.options.highlight("true" if value else "false"))
        elif kind == KIND_CHAR:
            self._parts.append(self._quote_char(str(value)))
        elif kind == KIND_TEXT:
            self._parts.append(self._quote_text(str(value)))
        elif kind == KIND_TUPLE:
            self._emit_tuple(cast(Tuple, value))
        elif kind == KIND_SEQUENCE:
            self._emit_collection(value, cast(Iterable[object], value))
        elif kind == KIND_ITERABLE:
            self._emit_collection(value, list(cast(Iterable[object], value)))
        elif kind == KIND_CUSTOM:
            self._parts.append(self._quote_text(str(value)))
        else:
            self._parts.append(str(value))

    # ── Literals / Escapes ──────────────────────────────────

    def _quote_char(self, c: str) -> str:
        return "'" + self._escape_controls(c) + "'"

    def _quote_text(self, s: str) -> str:
        return '"' + self._escape_controls(s) + '"'

    def _escape_controls(self, s: str) -> str:
        out = ""
        for ch in s:
            if ch == "\n":
                out += self.options.highlight("\\n")
            elif ch == "\t":
                out += self.options.highlight("\\t")
            else:
                out += ch
        return out
