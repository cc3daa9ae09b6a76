"""markdown-it-py adapters: event source and HTML renderer.

:class:`MarkdownItEventSource` flattens markdown-it's token tree (block
tokens plus the children of ``inline`` tokens) into
:class:`~wikinote.domain.events.MarkdownEvent` values. It uses the plain
CommonMark preset, so parsing is independent of the render extensions.

:class:`MarkdownItRenderer` renders HTML with a configurable extension
set, all of :data:`ALL_EXTENSIONS` by default.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from wikinote.domain.events import EventKind, MarkdownEvent

_LEAF_KINDS: dict[str, EventKind] = {
    "text": EventKind.TEXT,
    "code_inline": EventKind.CODE,
    "fence": EventKind.CODE_BLOCK,
    "code_block": EventKind.CODE_BLOCK,
    "html_block": EventKind.HTML,
    "html_inline": EventKind.HTML,
    "softbreak": EventKind.SOFT_BREAK,
    "hardbreak": EventKind.HARD_BREAK,
    "hr": EventKind.RULE,
    "math_inline": EventKind.MATH,
    "math_inline_double": EventKind.MATH,
    "math_block": EventKind.MATH,
    "math_block_label": EventKind.MATH,
}


def _token_events(token: Token) -> Iterator[MarkdownEvent]:
    """Yield the events for one token, descending into inline children."""
    if token.type == "inline":
        for child in token.children or []:
            yield from _token_events(child)
        return

    if token.nesting == 1:
        yield MarkdownEvent(EventKind.START, tag=token.type.removesuffix("_open"))
        return
    if token.nesting == -1:
        yield MarkdownEvent(EventKind.END, tag=token.type.removesuffix("_close"))
        return

    if token.type == "image":
        # Alt text arrives as children, like any other inline container.
        yield MarkdownEvent(EventKind.START, tag="image", text=str(token.attrGet("src") or ""))
        for child in token.children or []:
            yield from _token_events(child)
        yield MarkdownEvent(EventKind.END, tag="image")
        return

    kind = _LEAF_KINDS.get(token.type, EventKind.OTHER)
    tag = (token.info.strip() or None) if kind is EventKind.CODE_BLOCK else None
    yield MarkdownEvent(kind, tag=tag, text=token.content)


class MarkdownItEventSource:
    """CommonMark event stream backed by markdown-it-py."""

    def __init__(self, md: MarkdownIt | None = None) -> None:
        self._md = md or MarkdownIt("commonmark")

    def events(self, text: str) -> Iterator[MarkdownEvent]:
        for token in self._md.parse(text):
            yield from _token_events(token)


# ---------------------------------------------------------------------------
# HTML rendering
# ---------------------------------------------------------------------------


def _enable(*rules: str) -> Callable[[MarkdownIt], object]:
    return lambda md: md.enable(list(rules))


def _use(plugin: Callable[..., None]) -> Callable[[MarkdownIt], object]:
    return lambda md: md.use(plugin)


EXTENSIONS: dict[str, Callable[[MarkdownIt], object]] = {
    "table": _enable("table"),
    "strikethrough": _enable("strikethrough"),
    "typographer": _enable("replacements", "smartquotes"),
    "footnote": _use(footnote_plugin),
    "tasklists": _use(tasklists_plugin),
    "deflist": _use(deflist_plugin),
    "dollarmath": _use(dollarmath_plugin),
    "anchors": _use(anchors_plugin),
}

ALL_EXTENSIONS: tuple[str, ...] = tuple(EXTENSIONS)


def validate_extensions(names: Iterable[str]) -> tuple[str, ...]:
    """Return *names* as a tuple, rejecting unknown extension names."""
    result = tuple(names)
    unknown = sorted(set(result) - set(EXTENSIONS))
    if unknown:
        msg = f"Unknown markdown extensions: {unknown}. Known: {sorted(EXTENSIONS)}"
        raise ValueError(msg)
    return result


def build_markdown(extensions: Iterable[str] = ALL_EXTENSIONS) -> MarkdownIt:
    """Create a CommonMark parser with the named extensions enabled."""
    names = validate_extensions(extensions)
    md = MarkdownIt("commonmark", {"typographer": "typographer" in names})
    for name in names:
        EXTENSIONS[name](md)
    return md


class MarkdownItRenderer:
    """HTML renderer; every extension is enabled unless told otherwise."""

    def __init__(self, extensions: Iterable[str] = ALL_EXTENSIONS) -> None:
        self.extensions = validate_extensions(extensions)
        self._md = build_markdown(self.extensions)

    def render(self, text: str) -> str:
        return self._md.render(text)
