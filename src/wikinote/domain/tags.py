"""Inline ``#tag`` scanning."""

from __future__ import annotations

# Punctuation allowed inside a tag besides Unicode letters and digits.
TAG_PUNCTUATION = frozenset("_-/")


def is_tag_char(char: str) -> bool:
    """True if *char* may appear in a tag body."""
    return char.isalnum() or char in TAG_PUNCTUATION


def scan_tags(text: str) -> list[str]:
    """Return the inline ``#tags`` of a single text run, in order.

    A ``#`` starts a tag; letters, digits and ``_ - /`` extend it; any
    other character ends it. A ``#`` inside a tag ends the current one
    and starts the next. A bare ``#`` yields nothing. Duplicates are kept.

    Examples:
        >>> scan_tags("#example text #test")
        ['example', 'test']
        >>> scan_tags("trailing #tag")
        ['tag']
        >>> scan_tags("# heading-like")
        []
    """
    tags: list[str] = []
    current: list[str] = []
    in_tag = False

    for char in text:
        if char == "#":
            if current:
                tags.append("".join(current))
                current.clear()
            in_tag = True
        elif in_tag and is_tag_char(char):
            current.append(char)
        elif in_tag:
            if current:
                tags.append("".join(current))
                current.clear()
            in_tag = False

    if current:
        tags.append("".join(current))
    return tags
