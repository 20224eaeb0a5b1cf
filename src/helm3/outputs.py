"""Output capture from Kubernetes secrets.

After a successful install, each declared output is read from a secret and
handed to an output sink under its declared name.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from loguru import logger

from .errors import OutputResolutionFailed, OutputWriteFailed
from .models import OutputDeclaration


class SecretReader(Protocol):
    """Anything that can read one decoded key of a secret."""

    def get_secret_value(self, namespace: str, name: str, key: str) -> bytes: ...


class OutputSink(Protocol):
    """Destination for captured output values."""

    def write_output(self, name: str, value: bytes) -> None: ...


class OutputDirectorySink:
    """Writes each output to ``<directory>/<name>``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def write_output(self, name: str, value: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / name).write_bytes(value)


class OutputExtractor:
    """Resolves declared outputs and delivers them to a sink.

    Declarations are processed in order. The first lookup or write failure
    stops processing; outputs delivered before it stay delivered.
    """

    def __init__(self, secrets: SecretReader, sink: OutputSink) -> None:
        """Initialize the extractor.

        Args:
            secrets: Reader used to fetch secret values
            sink: Destination for resolved values
        """
        self._secrets = secrets
        self._sink = sink

    def extract_all(
        self, namespace: str, outputs: Sequence[OutputDeclaration]
    ) -> None:
        """Resolve and deliver every declared output.

        Args:
            namespace: Namespace the secrets live in
            outputs: Output declarations, in processing order

        Raises:
            OutputResolutionFailed: If a secret or key cannot be read
            OutputWriteFailed: If the sink rejects a value
        """
        for output in outputs:
            logger.debug(
                f"Resolving output '{output.name}' from secret "
                f"{namespace}/{output.secret} key '{output.key}'"
            )
            try:
                value = self._secrets.get_secret_value(
                    namespace, output.secret, output.key
                )
            except Exception as e:
                raise OutputResolutionFailed(output.name, e) from e

            try:
                self._sink.write_output(output.name, value)
            except Exception as e:
                raise OutputWriteFailed(output.name, e) from e

            logger.info(f"Captured output '{output.name}'")
