"""Note parsing errors.

Every failure of a ``parse``/``from_file`` call is a :class:`NoteError`.
The tag and wikilink scanners never raise.
"""

from __future__ import annotations


class NoteError(Exception):
    """Base class for failures while building a :class:`Note`."""


class MetadataValueError(NoteError, ValueError):
    """Frontmatter is malformed or holds a value with no supported variant."""


class NoFileName(NoteError, ValueError):
    """A note title cannot be derived from the given path."""


class NoteIOError(NoteError):
    """Reading a note file failed (I/O or text decoding)."""
