"""click base classes for albumctl commands.

Commands pass ``examples=`` as one invocation per line. ``--help`` stays
short and points at ``--examples``, which prints the invocations and exits.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class _ExamplesMixin:
    """Eager ``--examples`` flag for commands declared with ``examples=``."""

    examples: tuple[str, ...]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(textwrap.dedent(examples).strip().splitlines()) if examples else ()
        if self.examples:
            self.params.append(  # type: ignore[attr-defined]
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
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in self.examples:
            click.echo(f"  $ {line}")
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(f"Run '{ctx.command_path} --examples' for usage examples.")


class AlbumCommand(_ExamplesMixin, click.Command):
    """click Command with ``--examples``."""


class AlbumGroup(_ExamplesMixin, click.Group):
    """click Group whose subcommands are AlbumCommands by default."""

    command_class = AlbumCommand
