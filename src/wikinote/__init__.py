"""wikinote — parse markdown notes into structured records.

Frontmatter becomes typed :class:`Metadata`, inline ``#tags`` and
``[[wikilinks]]`` are collected in document order.
"""

from __future__ import annotations

from wikinote.domain.errors import MetadataValueError, NoFileName, NoteError, NoteIOError
from wikinote.domain.links import Wikilink
from wikinote.domain.metadata import Metadata
from wikinote.domain.note import Note

__version__ = "0.1.0"

__all__ = [
    "Metadata",
    "MetadataValueError",
    "NoFileName",
    "Note",
    "NoteError",
    "NoteIOError",
    "Wikilink",
    "__version__",
]
