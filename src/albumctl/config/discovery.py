"""Pick the albumctl.toml a CLI run reads its limits from."""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "albumctl.toml"
CONFIG_ENV_VAR = "ALBUMCTL_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file for this run, or None to use built-in limits.

    Lookup order: *explicit* (``--config``), the ``ALBUMCTL_CONFIG`` env
    var, then the first ``albumctl.toml`` found walking up from *start*
    (default: cwd), the way git finds ``.git/``.

    Raises:
        click.ClickException: A file named by ``--config`` or
            ``ALBUMCTL_CONFIG`` does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            source = "--config" if explicit else CONFIG_ENV_VAR
            raise click.ClickException(f"Config file not found: {path} (from {source})")
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
