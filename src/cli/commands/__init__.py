"""CLI command modules.

Commands:
- install: Install a Helm chart release from a step payload
"""

from .install import install_command

__all__ = ["install_command"]
