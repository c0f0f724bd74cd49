"""Tests for Octoview CLI."""

import pytest
from click.testing import CliRunner

from octoview.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


class TestCLI:
    """Tests for the main CLI."""

    def test_cli_version(self, runner: CliRunner) -> None:
        """Test CLI version option."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_cli_help(self, runner: CliRunner) -> None:
        """Test CLI help output."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "browse GitHub profiles" in result.output
        assert "browse" in result.output

    def test_trogon_command_registered(self, runner: CliRunner) -> None:
        """Test the Trogon command explorer is attached."""
        result = runner.invoke(cli, ["--help"])
        assert "tui" in result.output

    def test_browse_rejects_unknown_log_level(self, runner: CliRunner) -> None:
        """Test log level choices are validated."""
        result = runner.invoke(cli, ["browse", "--log-level", "LOUD"])
        assert result.exit_code != 0
        assert "LOUD" in result.output

    def test_browse_launches_app(self, runner: CliRunner, monkeypatch, tmp_path) -> None:
        """Test browse configures logging and runs the app with the handle."""
        import octoview.tui

        launched = {}

        class FakeApp:
            def __init__(self, config=None, initial_handle=None):
                launched["handle"] = initial_handle
                launched["config"] = config

            def run(self):
                launched["ran"] = True

        monkeypatch.setattr(octoview.tui, "OctoviewApp", FakeApp)
        monkeypatch.setenv("HOME", str(tmp_path))
        log_file = tmp_path / "octoview.log"

        result = runner.invoke(cli, ["browse", "octocat", "--log-file", str(log_file)])

        assert result.exit_code == 0, result.output
        assert launched == {"handle": "octocat", "config": launched["config"], "ran": True}
        assert log_file.exists()

    def test_browse_ignores_bad_configured_log_level(
        self, runner: CliRunner, monkeypatch, tmp_path
    ) -> None:
        """Test an unknown log level in config.json falls back to INFO."""
        import logging

        import octoview.tui

        class FakeApp:
            def __init__(self, config=None, initial_handle=None):
                self.config = config

            def run(self):
                pass

        monkeypatch.setattr(octoview.tui, "OctoviewApp", FakeApp)
        monkeypatch.setenv("HOME", str(tmp_path))
        config_dir = tmp_path / ".octoview"
        config_dir.mkdir()
        (config_dir / "config.json").write_text('{"log_level": "LOUD", "api_root": 5}')

        result = runner.invoke(cli, ["browse", "--log-file", str(tmp_path / "octoview.log")])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("octoview").level == logging.INFO
