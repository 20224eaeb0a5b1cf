"""CLI context and dependency container."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from src.cli.shared.console import CLIConsole, console
from src.helm3.constants import MixinConstants


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for CLI commands."""

    console: CLIConsole
    constants: MixinConstants


def build_cli_context() -> CLIContext:
    """Build a fresh CLIContext."""
    return CLIContext(
        console=console,
        constants=MixinConstants.from_env(),
    )


def get_cli_context(ctx: typer.Context | None = None) -> CLIContext:
    """Return the CLIContext from Typer, falling back to a new instance."""
    context = ctx or click.get_current_context(silent=True)
    if context and isinstance(context.obj, CLIContext):
        return context.obj
    return build_cli_context()
