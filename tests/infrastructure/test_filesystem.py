"""Tests for note discovery and output helpers."""

from __future__ import annotations

from pathlib import Path

from wikinote.infrastructure.filesystem import find_note_files, write_text_file


class TestFindNoteFiles:
    def test_discovers_sorted_markdown(self, notes_dir: Path) -> None:
        found = find_note_files(notes_dir)
        assert found == [notes_dir / "Example.md", notes_dir / "nested" / "Second.md"]

    def test_skips_hidden_directories(self, notes_dir: Path) -> None:
        names = {p.name for p in find_note_files(notes_dir)}
        assert "Hidden.md" not in names

    def test_skips_non_markdown(self, notes_dir: Path) -> None:
        assert all(p.suffix == ".md" for p in find_note_files(notes_dir))

    def test_markdown_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "a.markdown").write_text("x", encoding="utf-8")
        assert find_note_files(tmp_path) == [tmp_path / "a.markdown"]

    def test_file_root(self, notes_dir: Path) -> None:
        path = notes_dir / "Example.md"
        assert find_note_files(path) == [path]

    def test_missing_root(self, tmp_path: Path) -> None:
        assert find_note_files(tmp_path / "absent") == []


class TestWriteTextFile:
    def test_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "site" / "deep" / "page.html"
        write_text_file(target, "<p>ок</p>")
        assert target.read_text(encoding="utf-8") == "<p>ок</p>"
