"""Frontmatter extraction — split a YAML header from the note body.

A header is recognised only when the very first line is ``---``; the
next ``---`` line closes it. Everything after the closing line is the
body. Documents without a complete header pass through untouched.
"""

from __future__ import annotations

from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from wikinote.domain.errors import MetadataValueError
from wikinote.domain.metadata import Metadata

FRONTMATTER_DELIMITER = "---"
BYTE_ORDER_MARK = "\ufeff"


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader.

    ruamel.yaml's YAML object is stateful, so every header gets its own.
    """
    return YAML(typ="safe", pure=True)


def load_header(header: str) -> Metadata:
    """Parse the text between the delimiters into :class:`Metadata`.

    Raises:
        MetadataValueError: On YAML syntax errors, a non-mapping
            document, or a value that fits no metadata variant.
    """
    try:
        data: Any = _new_yaml().load(header)
    except YAMLError as exc:
        msg = f"invalid frontmatter: {exc}"
        raise MetadataValueError(msg) from exc

    if data is None:
        return Metadata()
    if not isinstance(data, dict):
        msg = f"frontmatter must be a mapping, got {type(data).__name__}"
        raise MetadataValueError(msg)
    return Metadata.from_mapping(data)


def parse_frontmatter(document: str) -> tuple[Metadata, str]:
    """Split *document* into ``(metadata, body)``.

    Handles both ``\\n`` and ``\\r\\n`` line endings and a leading byte
    order mark. When a header is present the body has its leading blank
    lines and trailing whitespace removed; otherwise
    ``(Metadata(), document)`` is returned unchanged.

    Raises:
        MetadataValueError: If a header is present but cannot be parsed.
    """
    normalized = document.removeprefix(BYTE_ORDER_MARK).replace("\r\n", "\n")
    lines = normalized.split("\n")
    if lines[0].strip() != FRONTMATTER_DELIMITER:
        return Metadata(), document

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        return Metadata(), document

    metadata = load_header("\n".join(lines[1:end_idx]))
    body = "\n".join(lines[end_idx + 1 :]).lstrip("\n").rstrip()
    return metadata, body
