"""The helm3 mixin install entry point.

``Mixin.install()`` runs one install step end to end:

1. Read and parse the YAML payload (exactly one step)
2. Register the step's chart repositories
3. Build and run ``helm3 install``
4. Capture declared outputs from Kubernetes secrets

Each stage only starts once the previous one succeeded. The first error is
raised to the caller as an ``InstallError``.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import IO

from loguru import logger

from src.infra.k8s import get_k8s_controller_sync

from .commands import build_install_args
from .constants import MixinConstants
from .errors import ConfigurationError
from .models import InstallArguments, parse_install_action
from .outputs import OutputDirectorySink, OutputExtractor, OutputSink, SecretReader
from .repositories import RepositoryRegistrar
from .runner import CommandRunner


class Mixin:
    """Runs helm3 install steps against the current cluster.

    Attributes:
        constants: Binary name, kubeconfig path and output location
        stdin: Source of the payload bytes
        stdout: Sink for the echoed command line and helm's stdout
        stderr: Sink for helm's stderr
    """

    def __init__(
        self,
        *,
        constants: MixinConstants | None = None,
        stdin: IO[bytes] | None = None,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
        client_factory: Callable[[str], SecretReader] | None = None,
        output_sink: OutputSink | None = None,
    ) -> None:
        """Initialize the mixin.

        Args:
            constants: Mixin configuration (defaults from the environment)
            stdin: Payload source (defaults to sys.stdin.buffer)
            stdout: Output sink (defaults to sys.stdout)
            stderr: Error sink (defaults to sys.stderr)
            client_factory: Builds a secret reader from a kubeconfig path
            output_sink: Destination for captured outputs (defaults to a
                directory sink under ``constants.OUTPUTS_DIR``)
        """
        self.constants = constants or MixinConstants.from_env()
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._client_factory = client_factory or get_k8s_controller_sync
        self._output_sink = output_sink

    # =========================================================================
    # Collaborators
    # =========================================================================

    def get_payload_data(self) -> bytes:
        """Read the whole payload from stdin."""
        try:
            return self.stdin.read()
        except OSError as e:
            raise ConfigurationError("Unable to read payload", details=str(e)) from e

    def get_kubernetes_client(self) -> SecretReader:
        """Build the secret reader for the configured kubeconfig."""
        return self._client_factory(self.constants.KUBECONFIG_PATH)

    def get_output_sink(self) -> OutputSink:
        if self._output_sink is None:
            self._output_sink = OutputDirectorySink(self.constants.outputs_path)
        return self._output_sink

    def new_runner(self) -> CommandRunner:
        return CommandRunner(
            self.constants.HELM_BINARY, stdout=self.stdout, stderr=self.stderr
        )

    # =========================================================================
    # Actions
    # =========================================================================

    def install(self) -> None:
        """Execute the install step described by the payload.

        Raises:
            ConfigurationError: If the payload is malformed or does not hold
                exactly one step
            EmptyRepositoryName: If a repository has a URL but no name
            RepositoryAddFailed: If a repository could not be added
            LaunchFailed: If helm could not be started
            ExecutionFailed: If helm install exited non-zero
            OutputResolutionFailed: If an output could not be read
            OutputWriteFailed: If an output could not be written
        """
        step = parse_install_action(self.get_payload_data())
        if step.description:
            logger.info(step.description)

        runner = self.new_runner()

        RepositoryRegistrar(runner).register_all(step.repositories)

        args = build_install_args(step)
        logger.info(f"Installing release '{step.name}' from chart '{step.chart}'")
        logger.debug(f"Install arguments: {args}")
        runner.run(args)
        logger.info(f"Release '{step.name}' installed")

        self.capture_outputs(step)

    def capture_outputs(self, step: InstallArguments) -> None:
        """Capture the step's declared outputs after a successful install."""
        if not step.outputs:
            return

        namespace = step.namespace or self.constants.DEFAULT_NAMESPACE
        extractor = OutputExtractor(self.get_kubernetes_client(), self.get_output_sink())
        extractor.extract_all(namespace, step.outputs)
