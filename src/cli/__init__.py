"""Main CLI application module.

This module provides the main entry point for the helm3 mixin CLI.

Commands:
- install: Run a helm3 install step read from stdin or a file
"""

import sys
from typing import Annotated

import typer
from loguru import logger

from .commands import install_command
from .context import build_cli_context

# Create the main CLI application
app = typer.Typer(
    help="⎈ helm3 mixin - Helm 3 install steps for bundle actions",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def configure_logging(debug: bool = False) -> None:
    """Route loguru output to stderr at INFO, or DEBUG when requested."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")


@app.callback()
def main_callback(
    ctx: typer.Context,
    debug: Annotated[
        bool, typer.Option("--debug", help="Enable debug logging")
    ] = False,
) -> None:
    configure_logging(debug)
    ctx.obj = build_cli_context()


app.command("install")(install_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
