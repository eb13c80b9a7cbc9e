"""Tests for the root albumctl CLI."""

from pathlib import Path

from click.testing import CliRunner

from albumctl import __version__
from albumctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "albumctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner, isolated_cwd: object) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output
    assert "check" in result.output
    assert "validate" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flag in ("--json", "-q", "-v", "--log-json"):
        result = cli_runner.invoke(cli, [flag, "--version"])
        assert result.exit_code == 0, flag


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/does-not-exist.toml", "--version"])
    assert result.exit_code == 0


def test_missing_config_file_is_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    result = cli_runner.invoke(cli, ["-c", str(missing), "check", "title", "Blue"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output
