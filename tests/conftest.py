"""Shared pytest fixtures for wikinote tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from wikinote.config.settings import WikinoteSettings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from the developer's own wikinote.toml."""
    monkeypatch.delenv("WIKINOTE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def example_path() -> Path:
    """The reference example note shipped with the tests."""
    return FIXTURES / "notes" / "Example.md"


@pytest.fixture
def example_text(example_path: Path) -> str:
    return example_path.read_text(encoding="utf-8")


@pytest.fixture
def notes_dir(tmp_path: Path, example_path: Path) -> Path:
    """Temporary note tree: the example note plus a nested and a hidden note."""
    root = tmp_path / "notes"
    (root / "nested").mkdir(parents=True)
    (root / ".obsidian").mkdir()
    shutil.copy(example_path, root / "Example.md")
    (root / "nested" / "Second.md").write_text(
        "---\ntags: [project]\n---\nLinks to [[Example]] #draft\n", encoding="utf-8"
    )
    (root / ".obsidian" / "Hidden.md").write_text("#hidden", encoding="utf-8")
    (root / "readme.txt").write_text("not a note", encoding="utf-8")
    return root


@pytest.fixture
def settings() -> WikinoteSettings:
    """Default settings with no config file."""
    return WikinoteSettings.from_cli()
