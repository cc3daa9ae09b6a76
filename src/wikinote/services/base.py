"""BaseService — shared foundation for wikinote services.

Every service receives the resolved :class:`WikinoteSettings` at
construction time and converts :class:`NoteError` failures into
structured :class:`ServiceResult` errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from wikinote.domain.errors import MetadataValueError, NoFileName, NoteError, NoteIOError
from wikinote.services.result import ServiceResult

if TYPE_CHECKING:
    from wikinote.config.settings import WikinoteSettings

_ERROR_CODES: dict[type[NoteError], str] = {
    MetadataValueError: "METADATA_ERROR",
    NoFileName: "NO_FILE_NAME",
    NoteIOError: "IO_ERROR",
}


def error_code(exc: NoteError) -> str:
    """Map a note error to its service error code."""
    for exc_type, code in _ERROR_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return "NOTE_ERROR"


class BaseService:
    """Abstract base for all service-layer classes."""

    def __init__(self, settings: WikinoteSettings) -> None:
        self._settings = settings

    @staticmethod
    def _note_failure(op: str, exc: NoteError, path: Path) -> ServiceResult:
        return ServiceResult.failure(op, error_code(exc), str(exc), path=str(path))

    @staticmethod
    def _not_found(op: str, path: Path) -> ServiceResult:
        return ServiceResult.failure(op, "NOT_FOUND", f"No such file or directory: {path}", path=str(path))
