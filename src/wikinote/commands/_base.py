"""Click command class shared by wikinote subcommands."""

from __future__ import annotations

from typing import Any

import click


class WikinoteCommand(click.Command):
    """A command that carries usage examples.

    The examples are printed on their own by an eager ``--examples`` flag
    and appended to ``--help`` under an ``Examples:`` heading.
    """

    def __init__(self, *args: Any, examples: str = "", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(self.examples)
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)
        if self.examples:
            formatter.write_paragraph()
            formatter.write_heading("Examples")
            formatter.write(f"{self.examples}\n")
