"""Wikilink extraction — ``[[target]]`` and ``[[target|label]]``.

The markdown tokenizer may split one wikilink over several text events
(``[`` is significant to it), so :class:`WikilinkScanner` is a character
level state machine that keeps its partial match between ``feed`` calls.
One scanner serves exactly one note parse.

The scanner never raises: unclosed or malformed constructs are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class Wikilink:
    """A wikilink extracted from body text.

    Compared exactly: no trimming or case folding of either part.
    """

    target: str
    label: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"target": self.target, "label": self.label}


class _Phase(StrEnum):
    IDLE = "idle"
    OPENING = "opening"  # saw "["
    TARGET = "target"  # saw "[[", reading target
    LABEL = "label"  # saw "|", reading label
    CLOSING = "closing"  # saw the first "]"


class WikilinkScanner:
    """Reassemble wikilinks from a sequence of text runs.

    Usage::

        scanner = WikilinkScanner()
        for run in text_runs:
            links.extend(scanner.feed_all(run))
    """

    def __init__(self) -> None:
        self._phase = _Phase.IDLE
        self._target: list[str] = []
        self._label: list[str] | None = None

    def _restart(self, phase: _Phase) -> None:
        self._phase = phase
        self._target = []
        self._label = None

    def _complete(self) -> Wikilink | None:
        target = "".join(self._target)
        label = "".join(self._label) if self._label else None
        self._restart(_Phase.IDLE)
        if not target:
            return None
        return Wikilink(target=target, label=label)

    def _step(self, char: str) -> Wikilink | None:
        phase = self._phase
        if phase is _Phase.IDLE:
            if char == "[":
                self._phase = _Phase.OPENING
        elif phase is _Phase.OPENING:
            self._restart(_Phase.TARGET if char == "[" else _Phase.IDLE)
        elif phase is _Phase.TARGET:
            if char == "]":
                self._phase = _Phase.CLOSING
            elif char == "|":
                self._label = []
                self._phase = _Phase.LABEL
            elif char == "[":
                # "[[[x]]" keeps reading x; a "[" after target text abandons it.
                if self._target:
                    self._restart(_Phase.OPENING)
            else:
                self._target.append(char)
        elif phase is _Phase.LABEL:
            if char == "]":
                self._phase = _Phase.CLOSING
            elif char == "[":
                self._restart(_Phase.OPENING)
            else:
                assert self._label is not None
                self._label.append(char)
        elif phase is _Phase.CLOSING:
            if char == "]":
                return self._complete()
            self._restart(_Phase.OPENING if char == "[" else _Phase.IDLE)
        return None

    def feed_all(self, text: str) -> list[Wikilink]:
        """Consume one text run; return every wikilink it completes."""
        completed: list[Wikilink] = []
        for char in text:
            link = self._step(char)
            if link is not None:
                completed.append(link)
        return completed

    def feed(self, text: str) -> Wikilink | None:
        """Consume one text run; return the first wikilink it completes.

        Partial progress is kept for the next call and not signalled.
        Use :meth:`feed_all` when a run may close more than one link.
        """
        completed = self.feed_all(text)
        return completed[0] if completed else None


def extract_wikilinks(text: str) -> list[Wikilink]:
    """Extract all wikilinks from a single string."""
    return WikilinkScanner().feed_all(text)
