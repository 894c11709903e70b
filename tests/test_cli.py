"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from shortlinks.cli import cli


class TestResolveCommand:
    """Tests for the resolve command."""

    def test__known_shortlink__prints_target(self, config_file: Path) -> None:
        """Print the resolved target."""
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "team/bob", "-c", str(config_file)])

        assert result.exit_code == 0
        assert result.output.strip() == "https://example.com/bob"

    def test__namespace__prints_root_target(self, config_file: Path) -> None:
        """Print the $root target for a namespace."""
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "team", "-c", str(config_file)])

        assert result.exit_code == 0
        assert result.output.strip() == "https://example.com/team"

    def test__unknown_shortlink__exits_with_error(self, config_file: Path) -> None:
        """Exit 1 when the shortlink does not resolve."""
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "team/carl", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Not found: team/carl" in result.output

    def test__missing_config__fails(self, tmp_path: Path) -> None:
        """Fail when config file doesn't exist."""
        runner = CliRunner()
        result = runner.invoke(
            cli, ["resolve", "docs", "-c", str(tmp_path / "nonexistent.json")]
        )

        assert result.exit_code != 0

    def test__invalid_config__reports_error(self, tmp_path: Path) -> None:
        """Report loader errors and exit 1."""
        config_file = tmp_path / "shortlinks.json"
        config_file.write_text('{"links": {}}')

        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "docs", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Error: not_found_message must be a string" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test__clean_config__reports_ok(self, config_file: Path) -> None:
        """Report link count for a clean config."""
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "OK: 4 links" in result.output

    def test__problems__reported(self, tmp_path: Path) -> None:
        """List problems and exit 1."""
        config_file = tmp_path / "shortlinks.json"
        config_file.write_text(
            json.dumps(
                {
                    "not_found_message": "",
                    "links": {"team": {"$root": {"x": "https://x"}}},
                }
            )
        )

        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "team/$root: $root must be a link" in result.output
        assert "1 problem(s) found" in result.output


class TestServeCommand:
    """Tests for the serve command."""

    def test__overrides__passed_to_server(self, config_file: Path) -> None:
        """Apply host and port overrides before starting the server."""
        runner = CliRunner()
        with patch("shortlinks.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                ["serve", "-c", str(config_file), "--host", "0.0.0.0", "-p", "9000"],
            )

        assert result.exit_code == 0
        assert "Starting server on 0.0.0.0:9000" in result.output
        assert "Links: 4" in result.output
        config = run_server.call_args.args[0]
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000
