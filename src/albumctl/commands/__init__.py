"""Subcommand modules for albumctl.

Provides register_commands() which uses deferred imports to keep
``albumctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``check`` group and the ``validate`` command on the root CLI."""
    from albumctl.commands.check import check
    from albumctl.commands.validate import validate

    cli.add_command(check)
    cli.add_command(validate)
