"""Filesystem helpers for note discovery and rendered output.

Reading a single note lives on :meth:`wikinote.domain.note.Note.from_file`;
this module handles walking note trees and writing results.
"""

from __future__ import annotations

from pathlib import Path

NOTE_SUFFIXES = frozenset({".md", ".markdown"})

# Directories to skip when discovering note files.
_SKIP_DIRS = frozenset({".git", ".obsidian", ".trash", "node_modules"})


def _is_skipped(path: Path, root: Path) -> bool:
    parts = path.relative_to(root).parts[:-1]
    return any(part in _SKIP_DIRS or part.startswith(".") for part in parts)


def find_note_files(root: Path) -> list[Path]:
    """Discover all markdown notes under *root*, sorted.

    Hidden directories and tool directories (``.git``, ``.obsidian``,
    ``node_modules``) are skipped. A file *root* is returned as-is.
    """
    if root.is_file():
        return [root]
    if not root.is_dir():
        return []

    results: list[Path] = []
    for path in root.rglob("*"):
        if not path.is_file() or path.suffix.lower() not in NOTE_SUFFIXES:
            continue
        if _is_skipped(path, root):
            continue
        results.append(path)
    return sorted(results)


def write_text_file(path: Path, text: str) -> None:
    """Write *text* to *path* as UTF-8.

    Creates parent directories if they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
