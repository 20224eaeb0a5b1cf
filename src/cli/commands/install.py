"""Install command.

Reads an install action payload and runs it through the helm3 mixin.
"""

import io
from pathlib import Path
from typing import Annotated

import typer

from src.cli.context import get_cli_context
from src.helm3 import Mixin

from .shared import console, with_error_handling


@with_error_handling
def install_command(
    ctx: typer.Context,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read the install payload from this file instead of stdin",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
) -> None:
    """Install a Helm chart release described by a YAML payload."""
    cli_ctx = get_cli_context(ctx)

    stdin = io.BytesIO(file.read_bytes()) if file is not None else None
    Mixin(constants=cli_ctx.constants, stdin=stdin).install()

    console.ok("Install step completed")
