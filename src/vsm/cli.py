"""
vsm command line.

Usage:
    vsm [-d] list
    vsm [-d] open
    vsm [-d] remove
    vsm [-d] variant
"""

from __future__ import annotations

import typer

from vsm import __version__
from vsm.app import Command, VimSessionManager
from vsm.config import Environment
from vsm.errors import VsmError
from vsm.logger import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    help="A simple, interactive, command line vim session file manager.",
    no_args_is_help=True,
    add_completion=False,
)


def configure_logging(debug: bool = False) -> None:
    setup_logging(level="DEBUG" if debug else "INFO")


def build_manager() -> VimSessionManager:
    env = Environment.from_env()
    logger.debug(str(env))
    return VimSessionManager.from_environment(env)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vsm {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Show debugging messages"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
):
    """
    A simple, interactive, command line vim session file manager.
    """
    configure_logging(debug)


def run_command(command: Command) -> None:
    logger.debug(f"Active subcommand: {command.value}")
    try:
        build_manager().run(command)
    except VsmError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)


@app.command("list")
def list_cmd():
    """List all available vim session files."""
    run_command(Command.LIST)


@app.command("open")
def open_cmd():
    """Load a session file."""
    run_command(Command.OPEN)


@app.command("remove")
def remove_cmd():
    """Remove session files."""
    run_command(Command.REMOVE)


@app.command("variant")
def variant_cmd():
    """Change the variant of vim you want to open sessions with."""
    run_command(Command.VARIANT)
