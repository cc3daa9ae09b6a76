"""NoteService — parse and render notes from the filesystem."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wikinote.domain.errors import NoteError
from wikinote.domain.note import Note
from wikinote.infrastructure.filesystem import find_note_files, write_text_file
from wikinote.infrastructure.markdown import MarkdownItEventSource, MarkdownItRenderer
from wikinote.services.base import BaseService, error_code
from wikinote.services.result import ServiceResult

if TYPE_CHECKING:
    from wikinote.config.settings import WikinoteSettings

logger = logging.getLogger(__name__)


class NoteService(BaseService):
    """Parse single notes, whole note trees, and render notes to HTML.

    Each note is parsed independently; the event source and renderer
    hold configuration only, no per-note state.
    """

    def __init__(self, settings: WikinoteSettings) -> None:
        super().__init__(settings)
        self._source = MarkdownItEventSource()
        self._renderer = MarkdownItRenderer(settings.render.extensions)

    def _load(self, path: Path) -> Note:
        return Note.from_file(path, source=self._source, tags_key=self._settings.parse.tags_key)

    @staticmethod
    def _note_data(path: Path, note: Note) -> dict[str, Any]:
        return {"path": str(path), **note.to_dict()}

    def parse_file(self, path: Path) -> ServiceResult:
        """Parse one markdown file into a structured note."""
        op = "parse_note"
        if not path.exists():
            return self._not_found(op, path)
        try:
            note = self._load(path)
        except NoteError as exc:
            logger.debug("Failed to parse %s", path, exc_info=True)
            return self._note_failure(op, exc, path)
        return ServiceResult(ok=True, op=op, data=self._note_data(path, note))

    def parse_tree(self, root: Path) -> ServiceResult:
        """Parse every note under *root*.

        A note that fails to parse is reported in ``errors`` and as a
        warning; the rest of the batch continues.
        """
        op = "parse_tree"
        if not root.exists():
            return self._not_found(op, root)

        notes: list[dict[str, Any]] = []
        errors: list[dict[str, str]] = []
        warnings: list[str] = []
        for path in find_note_files(root):
            try:
                note = self._load(path)
            except NoteError as exc:
                logger.debug("Skipping %s", path, exc_info=True)
                errors.append({"path": str(path), "code": error_code(exc), "error": str(exc)})
                warnings.append(f"{path}: {exc}")
                continue
            notes.append(self._note_data(path, note))

        logger.debug("Parsed %d notes under %s (%d errors)", len(notes), root, len(errors))
        return ServiceResult(
            ok=True,
            op=op,
            data={"notes": notes, "errors": errors, "count": len(notes)},
            warnings=warnings,
        )

    def render_file(self, path: Path, *, output: Path | None = None) -> ServiceResult:
        """Render one markdown file's body (frontmatter removed) to HTML.

        With *output*, the HTML is written there and the result carries
        the output path instead of the HTML itself.
        """
        op = "render_note"
        if not path.exists():
            return self._not_found(op, path)
        try:
            note = self._load(path)
        except NoteError as exc:
            return self._note_failure(op, exc, path)
        html = note.render_html(self._renderer)

        if output is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={"path": str(path), "title": note.title, "html": html},
            )
        try:
            write_text_file(output, html)
        except OSError as exc:
            return ServiceResult.failure(op, "IO_ERROR", f"Cannot write {output}: {exc}", path=str(output))
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "title": note.title, "output": str(output)},
        )
