"""Note model and assembler.

``Note.parse`` runs the whole pipeline for one document:

1. split the YAML header from the body (:mod:`wikinote.domain.frontmatter`);
2. stream the body through an :class:`EventSource`;
3. feed every text event to one :class:`WikilinkScanner` (stateful for
   the whole note) and to :func:`scan_tags` (stateless per event);
4. header tags first, then inline tags in document order.

Only TEXT events are scanned, so inline code and code blocks never
contribute tags or links. A reference link the tokenizer resolved inside
``[[...]]`` gives its brackets back to the link scanner.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from wikinote.domain.errors import NoFileName, NoteIOError
from wikinote.domain.events import EventKind, EventSource, HtmlRenderer
from wikinote.domain.frontmatter import parse_frontmatter
from wikinote.domain.links import Wikilink, WikilinkScanner
from wikinote.domain.metadata import TAGS_KEY, Metadata
from wikinote.domain.tags import scan_tags

logger = logging.getLogger(__name__)

_LINK_BRACKETS = {EventKind.START: "[", EventKind.END: "]"}


def _default_source() -> EventSource:
    from wikinote.infrastructure.markdown import MarkdownItEventSource

    return MarkdownItEventSource()


def _default_renderer() -> HtmlRenderer:
    from wikinote.infrastructure.markdown import MarkdownItRenderer

    return MarkdownItRenderer()


def title_from_path(path: Path) -> str:
    """Derive a note title from the file name without its extension.

    Raises:
        NoFileName: If *path* has no final name component.
    """
    if path.name in ("", ".", ".."):
        msg = f"Cannot derive a note title from {str(path)!r}"
        raise NoFileName(msg)
    return path.stem


class Note(BaseModel):
    """A parsed note. Immutable once built."""

    model_config = {"frozen": True}

    title: str
    content: str
    tags: tuple[str, ...] = ()
    links: tuple[Wikilink, ...] = ()
    metadata: Metadata = Field(default_factory=Metadata)

    @classmethod
    def parse(
        cls,
        title: str,
        content: str,
        *,
        source: EventSource | None = None,
        tags_key: str = TAGS_KEY,
    ) -> Note:
        """Build a note from raw *content*.

        Raises:
            MetadataValueError: If the frontmatter is malformed.
        """
        metadata, body = parse_frontmatter(content)
        if source is None:
            source = _default_source()

        tags = metadata.tags(tags_key)
        links: list[Wikilink] = []
        scanner = WikilinkScanner()

        for event in source.events(body):
            if event.tag == "link" and event.kind in _LINK_BRACKETS:
                links.extend(scanner.feed_all(_LINK_BRACKETS[event.kind]))
                continue
            if event.kind != EventKind.TEXT:
                continue
            links.extend(scanner.feed_all(event.text))
            tags.extend(scan_tags(event.text))

        logger.debug("Parsed note %r: %d tags, %d links", title, len(tags), len(links))
        return cls(
            title=title,
            content=body,
            tags=tuple(tags),
            links=tuple(links),
            metadata=metadata,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        source: EventSource | None = None,
        tags_key: str = TAGS_KEY,
    ) -> Note:
        """Read and parse a markdown file; the title is the file stem.

        Raises:
            NoFileName: If no title can be derived from *path*.
            NoteIOError: If the file cannot be read as UTF-8 text.
            MetadataValueError: If the frontmatter is malformed.
        """
        path = Path(path)
        title = title_from_path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read {path}: {exc}"
            raise NoteIOError(msg) from exc
        return cls.parse(title, content, source=source, tags_key=tags_key)

    def render_html(self, renderer: HtmlRenderer | None = None) -> str:
        """Render ``content`` to HTML with every markdown extension enabled."""
        if renderer is None:
            renderer = _default_renderer()
        return renderer.render(self.content)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-ready types."""
        return {
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
            "links": [link.to_dict() for link in self.links],
            "metadata": self.metadata.to_plain(),
        }
