"""Error taxonomy for the helm3 install pipeline.

Every failure raised by the pipeline is an ``InstallError`` carrying a short
``message`` and optional ``details`` (the same shape the CLI renders in its
error panel). The underlying exception, when there is one, is chained with
``raise ... from`` and also kept on ``cause``.
"""

from __future__ import annotations

import subprocess


class InstallError(Exception):
    """Raised when an install step cannot be completed."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(InstallError):
    """The payload is malformed or does not hold exactly one step."""


class EmptyRepositoryName(InstallError):
    """A repository declares a URL but no name."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            "Repository name is empty",
            details=f"A repository with URL '{url}' was declared without a name.",
        )


class RepositoryAddFailed(InstallError):
    """``helm3 repo add`` could not be run or exited non-zero."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(
            f"Unable to add the requested repository '{name}'",
            details=str(cause),
        )


class LaunchFailed(InstallError):
    """The external process could not be started."""

    def __init__(self, command: str, cause: BaseException) -> None:
        self.command = command
        self.cause = cause
        super().__init__(
            f"Could not execute command, {command}: {cause}",
            details=f"Command: {command}",
        )


class ExecutionFailed(InstallError):
    """The external process started but did not exit cleanly."""

    def __init__(self, cause: subprocess.CalledProcessError) -> None:
        self.cause = cause
        super().__init__(str(cause), details=f"Command: {_render(cause.cmd)}")

    @property
    def returncode(self) -> int:
        return self.cause.returncode


class OutputResolutionFailed(InstallError):
    """A declared output could not be read from its secret."""

    def __init__(self, output_name: str, cause: BaseException) -> None:
        self.output_name = output_name
        self.cause = cause
        super().__init__(
            f"Unable to resolve output '{output_name}'",
            details=str(cause),
        )


class OutputWriteFailed(InstallError):
    """A resolved output value could not be handed to the output sink."""

    def __init__(self, output_name: str, cause: BaseException) -> None:
        self.output_name = output_name
        self.cause = cause
        super().__init__(
            f"Unable to write output '{output_name}'",
            details=str(cause),
        )


def _render(cmd: object) -> str:
    if isinstance(cmd, (list, tuple)):
        return " ".join(str(part) for part in cmd)
    return str(cmd)
