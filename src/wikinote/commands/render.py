"""Command: render a note body to HTML."""

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
  wikinote render notes/Example.md
  wikinote render notes/Example.md --output site/example.html""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write HTML to this file instead of stdout.",
)
@click.pass_obj
def render(app: AppContext, path: Path, output: Path | None) -> None:
    """Render a note to HTML with all markdown extensions enabled."""
    app.emit(app.notes.render_file(path, output=output))
