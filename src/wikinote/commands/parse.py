"""Command: parse notes into structured records."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wikinote.commands._base import WikinoteCommand

if TYPE_CHECKING:
    from wikinote.commands._context import AppContext


@click.command(
    cls=WikinoteCommand,
    examples="""\
  wikinote parse notes/Example.md
  wikinote --json parse notes/Example.md
  wikinote -q parse notes/""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def parse(app: AppContext, path: Path) -> None:
    """Parse a note file, or every note under a directory.

    Prints title, tags, wikilinks and frontmatter metadata.
    """
    if path.is_dir():
        app.emit(app.notes.parse_tree(path))
    else:
        app.emit(app.notes.parse_file(path))
