"""Helm 3 install step for bundle actions.

Translates a declarative install step into ``helm3`` invocations, runs them,
and captures outputs from Kubernetes secrets.

Usage:
    from src.helm3 import Mixin

    Mixin().install()  # payload read from stdin
"""

from .commands import build_install_args, build_repo_add_args, build_set_args
from .constants import MixinConstants
from .errors import (
    ConfigurationError,
    EmptyRepositoryName,
    ExecutionFailed,
    InstallError,
    LaunchFailed,
    OutputResolutionFailed,
    OutputWriteFailed,
    RepositoryAddFailed,
)
from .mixin import Mixin
from .models import (
    InstallAction,
    InstallArguments,
    InstallStep,
    OutputDeclaration,
    RepositoryArguments,
    parse_install_action,
)
from .outputs import OutputDirectorySink, OutputExtractor, OutputSink, SecretReader
from .repositories import RepositoryRegistrar
from .runner import CommandRunner

__all__ = [
    "Mixin",
    "MixinConstants",
    # Models
    "InstallAction",
    "InstallStep",
    "InstallArguments",
    "RepositoryArguments",
    "OutputDeclaration",
    "parse_install_action",
    # Pipeline components
    "build_install_args",
    "build_repo_add_args",
    "build_set_args",
    "RepositoryRegistrar",
    "CommandRunner",
    "OutputExtractor",
    "OutputDirectorySink",
    "OutputSink",
    "SecretReader",
    # Errors
    "InstallError",
    "ConfigurationError",
    "EmptyRepositoryName",
    "RepositoryAddFailed",
    "LaunchFailed",
    "ExecutionFailed",
    "OutputResolutionFailed",
    "OutputWriteFailed",
]
