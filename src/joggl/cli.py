#!/usr/bin/env python3
"""
Joggl CLI

Typer + Rich front end. This is the only module that turns pipeline results
and errors into process exit codes.
"""

import logging
from datetime import datetime
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console

from . import __version__
from .config import Config
from .errors import JogglError, TransportError, UsageError
from .pipeline import Options, run
from .ui import ConsoleUI

app = typer.Typer(
    name="joggl",
    help="Post a day of Toggl time entries to Jira as work logs",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: Optional[str]) -> str:
    """Validate a YYYY-MM-DD date; default to today."""
    if not value:
        return datetime.now().strftime(DATE_FORMAT)
    try:
        return datetime.strptime(value, DATE_FORMAT).strftime(DATE_FORMAT)
    except ValueError:
        raise UsageError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def version_callback(value: bool):
    if value:
        console.print(f"joggl {__version__}")
        raise typer.Exit()


@app.command()
def main(
    date: Optional[str] = typer.Option(None, "--date", "-d", help="The date in YYYY-MM-DD format (default: today)"),
    api_token: Optional[str] = typer.Option(None, "--api-token", "-a", envvar="TOGGL_API_TOKEN", help="The Toggl API Token"),
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", envvar="TOGGL_WORKSPACE_ID", help="The Toggl Workspace identifier"),
    username: Optional[str] = typer.Option(None, "--username", "-u", envvar="JIRA_USERNAME", help="The username for the Jira Account"),
    password: Optional[str] = typer.Option(None, "--password", "-p", envvar="JIRA_PASSWORD", help="The password for the Jira Account"),
    jira_url: Optional[str] = typer.Option(None, "--jira-url", help="Jira base URL (default: $JIRA_URL or the built-in default)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(False, "--version", callback=version_callback, is_eager=True, help="Show version and exit"),
):
    """
    Create Jira work logs from the Toggl entries of one day.

    Entries with the same project and description are merged. Every entry must
    mention exactly one Jira subtask (e.g. "ABC-123 Fix login") before anything
    is submitted.
    """
    setup_logging(verbose)
    ui = ConsoleUI(console)

    try:
        config = Config.from_env()
        if jira_url:
            config.jira_url = jira_url
        options = Options(
            date=parse_date(date),
            api_token=api_token,
            workspace=workspace,
            username=username,
            password=password,
        )
        outcome = run(options, ui, config)
    except JogglError as e:
        if isinstance(e, TransportError):
            logger.debug("Transport failure", exc_info=True)
        ui.report("")
        ui.report(f"Error: {e.message}", "error")
        raise typer.Exit(code=e.exit_code)
    except (KeyboardInterrupt, EOFError):
        # Ctrl-C / Ctrl-D at a prompt; work logs already created stay in place
        ui.report("")
        ui.report("Aborted", "error")
        raise typer.Exit(code=1)

    logger.debug(f"Finished with outcome {outcome.value}")


def run_cli():
    """Console script entry point: loads .env from the working directory, then runs the app."""
    load_dotenv(find_dotenv(usecwd=True))
    app()


if __name__ == "__main__":
    run_cli()
