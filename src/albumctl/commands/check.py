"""Command group: validate a single album field or identifier."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from albumctl.commands._base import AlbumGroup

if TYPE_CHECKING:
    from albumctl.commands._context import AppContext

_CHECK_EXAMPLES = """\
  albumctl check title "Abbey Road"
  albumctl check artist "The Beatles"
  albumctl check year 1969
  albumctl check date 26/09/1969
  albumctl check guid 123e4567-e89b-12d3-a456-426614174000
  albumctl check ipv6 fe80::1%eth0
  albumctl --json check year 2020.5"""


@click.group(cls=AlbumGroup, examples=_CHECK_EXAMPLES)
@click.pass_obj
def check(app: AppContext) -> None:
    """Check one value against an album catalog rule.

    Exits 0 when the value is valid and 1 when it is not.
    """


@check.command(
    examples="""\
  albumctl check title "Let It Be"
  albumctl -q check title '   '"""
)
@click.argument("value")
@click.pass_obj
def title(app: AppContext, value: str) -> None:
    """Album title: non-blank, at most 100 characters."""
    app.emit(app.service.check_title(value))


@check.command(
    examples="""\
  albumctl check artist 'Nina Simone'"""
)
@click.argument("value")
@click.pass_obj
def artist(app: AppContext, value: str) -> None:
    """Artist name: non-blank, at most 50 characters."""
    app.emit(app.service.check_artist(value))


@check.command(
    examples="""\
  albumctl check year 1999
  albumctl check year 1899"""
)
@click.argument("value")
@click.pass_obj
def year(app: AppContext, value: str) -> None:
    """Release year: whole number from 1900 to the current year."""
    app.emit(app.service.check_year(value))


@check.command(
    examples="""\
  albumctl check date 25/12/2020
  albumctl check date 29/02/2019"""
)
@click.argument("value")
@click.pass_obj
def date(app: AppContext, value: str) -> None:
    """Calendar date written as DD/MM/YYYY."""
    app.emit(app.service.parse_date(value))


@check.command(
    examples="""\
  albumctl check guid 123e4567-e89b-12d3-a456-426614174000"""
)
@click.argument("value")
@click.pass_obj
def guid(app: AppContext, value: str) -> None:
    """Canonical 8-4-4-4-12 GUID (versions 1-5)."""
    app.emit(app.service.check_guid(value))


@check.command(
    examples="""\
  albumctl check ipv6 2001:db8::8a2e:370:7334
  albumctl check ipv6 ::ffff:192.0.2.1"""
)
@click.argument("value")
@click.pass_obj
def ipv6(app: AppContext, value: str) -> None:
    """IPv6 address (full, compressed, zone index, or IPv4 tail)."""
    app.emit(app.service.check_ipv6(value))
