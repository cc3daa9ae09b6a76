"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wikinote.domain.errors import MetadataValueError, NoFileName, NoteError, NoteIOError
from wikinote.services.base import error_code
from wikinote.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success(self) -> None:
        result = ServiceResult(ok=True, op="parse_note", data={"title": "T"})
        assert result.ok
        assert result.error is None
        assert result.warnings == []

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("parse_note", "IO_ERROR", "boom", path="a.md")
        assert not result.ok
        assert result.error == ServiceError(code="IO_ERROR", message="boom", detail={"path": "a.md"})

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_roundtrip(self) -> None:
        result = ServiceResult(ok=True, op="x", data={"tags": ["é"]})
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result


class TestErrorCode:
    @pytest.mark.parametrize(
        ("exc", "code"),
        [
            (MetadataValueError("m"), "METADATA_ERROR"),
            (NoFileName("n"), "NO_FILE_NAME"),
            (NoteIOError("i"), "IO_ERROR"),
            (NoteError("e"), "NOTE_ERROR"),
        ],
    )
    def test_mapping(self, exc: NoteError, code: str) -> None:
        assert error_code(exc) == code
