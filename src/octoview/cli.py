"""Click CLI for Octoview."""

from pathlib import Path
from typing import Optional

import click
from trogon import tui

from octoview import __version__
from octoview.config import LOG_LEVELS, OctoviewConfig
from octoview.logging_config import configure_logging


@tui()
@click.group()
@click.version_option(version=__version__, prog_name="octoview")
def cli() -> None:
    """Octoview - browse GitHub profiles from the terminal.

    Quick start:
        octoview browse            Start on an anonymous profile
        octoview browse octocat    Start on octocat's profile
        octoview tui               Launch command explorer (Trogon)
    """


@cli.command()
@click.argument("handle", required=False)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default from config, INFO)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Log file (default ~/.octoview/octoview.log)",
)
def browse(handle: Optional[str], log_level: Optional[str], log_file: Optional[Path]) -> None:
    """Launch the interactive profile browser.

    Starts on the Home screen with an anonymous profile, or searches for
    HANDLE right away when given.

    Keyboard shortcuts:
        / - Search a user
        ctrl+r - Reset to the anonymous profile
        escape - Back
        q - Quit
    """
    from octoview.tui import OctoviewApp

    config = OctoviewConfig.load()
    configure_logging(
        level=(log_level or config.log_level).upper(),
        log_path=log_file or config.log_path,
    )
    app = OctoviewApp(config=config, initial_handle=handle)
    app.run()
