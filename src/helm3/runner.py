"""Command runner for executing helm3.

This module provides the process execution used by both the repository
registrar and the install step: resolve the binary, echo the command line,
spawn, stream output to the caller's sinks, wait, and map the exit status.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
import threading
from collections.abc import Sequence
from typing import IO

from loguru import logger

from .commands import redact_args
from .errors import ExecutionFailed, LaunchFailed


class CommandRunner:
    """Spawns one external binary with streamed output.

    Output is forwarded line by line while the process runs rather than
    collected and dumped at the end. Bytes that are not valid UTF-8 are
    replaced rather than aborting the stream. No timeout is applied; a call
    blocks until the process exits.

    Attributes:
        binary: Name or path of the executable
        stdout: Sink receiving the echoed command line and the process stdout
        stderr: Sink receiving the process stderr
    """

    def __init__(
        self,
        binary: str,
        *,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ) -> None:
        """Initialize the command runner.

        Args:
            binary: Executable to run, looked up on PATH
            stdout: Output sink (defaults to sys.stdout)
            stderr: Error sink (defaults to sys.stderr)
        """
        self.binary = binary
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def resolve_binary(self) -> str:
        """Resolve the binary through PATH, falling back to the bare name."""
        return shutil.which(self.binary) or self.binary

    def render(self, args: Sequence[str]) -> str:
        """Render the human-readable command line for ``args``.

        Arguments are joined with single spaces and not quoted, so the line
        is not safe to paste into a shell when an argument holds whitespace
        or shell metacharacters. Password values are masked.
        """
        return f"{self.resolve_binary()} {' '.join(redact_args(args))}"

    def run(self, args: Sequence[str]) -> None:
        """Execute the binary with ``args`` and stream its output.

        The rendered command line is written to the output sink before the
        process is launched.

        Args:
            args: Argument tokens, without the binary name

        Raises:
            LaunchFailed: If the process could not be started
            ExecutionFailed: If the process exited non-zero or was killed
        """
        path = self.resolve_binary()
        pretty_cmd = self.render(args)

        self._write(self.stdout, pretty_cmd + "\n")
        logger.debug(f"Running: {pretty_cmd}")

        try:
            process = subprocess.Popen(
                [path, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as e:
            raise LaunchFailed(pretty_cmd, e) from e

        stderr_pump = threading.Thread(
            target=self._pump,
            args=(process.stderr, self.stderr),
            daemon=True,
        )
        stderr_pump.start()
        self._pump(process.stdout, self.stdout)
        stderr_pump.join()

        returncode = process.wait()
        if returncode != 0:
            error = subprocess.CalledProcessError(
                returncode, [path, *redact_args(args)]
            )
            raise ExecutionFailed(error) from error

    def _pump(self, source: IO[str] | None, sink: IO[str]) -> None:
        """Copy lines from a process pipe into a sink until EOF."""
        if source is None:
            return
        with source:
            for line in iter(source.readline, ""):
                self._write(sink, line)

    @staticmethod
    def _write(sink: IO[str], text: str) -> None:
        sink.write(text)
        sink.flush()
