"""Tests for the apimeta command group."""

from pathlib import Path

from click.testing import CliRunner

from apimeta.cli import main
from apimeta.cli.exit_codes import ExitCode


class TestMainGroup:
    """Tests for global options of the command group."""

    def test_lists_commands(self) -> None:
        """Help output lists every command."""
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("resources", "show", "resolve"):
            assert command in result.output

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        """An explicit --config that does not exist is a config error."""
        result = CliRunner().invoke(
            main, ["--config", str(tmp_path / "missing.toml"), "resolve", "x"]
        )
        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "does not exist" in result.output

    def test_unparsable_explicit_config(self, tmp_path: Path) -> None:
        """An explicit --config with invalid TOML is a config error."""
        config = tmp_path / "apimeta.toml"
        config.write_text("[metadata\n")

        result = CliRunner().invoke(main, ["--config", str(config), "resolve", "x"])

        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Cannot load config file" in result.output

    def test_unparsable_default_config_is_ignored(self, isolated_cli: Path) -> None:
        """A broken ./apimeta.toml is skipped when --config is not given."""
        (isolated_cli / "apimeta.toml").write_text("[metadata\n")

        result = CliRunner().invoke(main, ["resolve", "100%%"])

        assert result.exit_code == 0
        assert "100%" in result.output.splitlines()

    def test_invalid_logging_section(self, tmp_path: Path) -> None:
        """Invalid [logging] settings are a config error."""
        config = tmp_path / "apimeta.toml"
        config.write_text('[logging]\nlevel = "verbose"\n')

        result = CliRunner().invoke(main, ["--config", str(config), "resolve", "x"])

        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Invalid [logging] configuration" in result.output
