"""Markdown event model and the tokenizer port.

The parsing core consumes markdown as a flat, lazy stream of
:class:`MarkdownEvent` values. Any object with an ``events(text)``
method yielding them can stand in for the real tokenizer, which keeps
the scanners testable against hand-built event sequences.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable


class EventKind(StrEnum):
    """Kinds of events produced by an :class:`EventSource`."""

    START = "start"
    END = "end"
    TEXT = "text"
    CODE = "code"
    CODE_BLOCK = "code_block"
    HTML = "html"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"
    RULE = "rule"
    MATH = "math"
    OTHER = "other"


@dataclass(frozen=True)
class MarkdownEvent:
    """One tokenizer event.

    ``tag`` names the structural element for START/END events (e.g.
    ``"paragraph"``, ``"heading"``) and the fence info for code blocks.
    ``text`` carries the literal content of leaf events.
    """

    kind: EventKind
    tag: str | None = None
    text: str = ""

    @classmethod
    def of_text(cls, text: str) -> MarkdownEvent:
        return cls(EventKind.TEXT, text=text)


@runtime_checkable
class EventSource(Protocol):
    """Produce a lazy, finite, single-pass event sequence for *text*."""

    def events(self, text: str) -> Iterator[MarkdownEvent]: ...


@runtime_checkable
class HtmlRenderer(Protocol):
    """Render markdown *text* to an HTML string."""

    def render(self, text: str) -> str: ...
