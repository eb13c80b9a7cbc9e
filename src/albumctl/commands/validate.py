"""Command: validate a complete album record."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from albumctl.commands._base import AlbumCommand

if TYPE_CHECKING:
    from albumctl.commands._context import AppContext


@click.command(
    cls=AlbumCommand,
    examples="""\
  albumctl validate --title "Kind of Blue" --artist "Miles Davis" --year 1959
  albumctl --json validate --title "" --artist "Unknown" --year 1850""",
)
@click.option("--title", required=True, help="Album title.")
@click.option("--artist", required=True, help="Artist name.")
@click.option("--year", required=True, help="Release year.")
@click.pass_obj
def validate(app: AppContext, title: str, artist: str, year: str) -> None:
    """Check every field of an album record and report all failures."""
    app.emit(app.service.validate_album(title=title, artist=artist, year=year))
