"""Chart repository registration.

Registers every repository declared on a step with ``helm3 repo add`` before
the install command is built and run.
"""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from .commands import build_repo_add_args
from .errors import ExecutionFailed, LaunchFailed, RepositoryAddFailed
from .models import RepositoryArguments
from .runner import CommandRunner


class RepositoryRegistrar:
    """Adds chart repositories, one helm invocation per repository.

    Repositories are processed in name order. Each ``repo add`` runs to
    completion before the next one starts, and the first failure aborts the
    whole step.
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize the registrar.

        Args:
            runner: Command runner for the helm binary
        """
        self._runner = runner

    def register_all(self, repositories: Mapping[str, RepositoryArguments]) -> None:
        """Add every repository in ``repositories``.

        All entries are validated up front, so an unnamed repository is
        rejected before any ``repo add`` is spawned.

        Args:
            repositories: Repository arguments keyed by repository name

        Raises:
            EmptyRepositoryName: If a repository has a URL but no name
            RepositoryAddFailed: If helm fails to add a repository
        """
        invocations = [
            (name, repositories[name].url, build_repo_add_args(name, repositories[name]))
            for name in sorted(repositories)
        ]

        for name, url, args in invocations:
            logger.info(f"Adding repo {name} {url}")
            try:
                self._runner.run(args)
            except (LaunchFailed, ExecutionFailed) as e:
                raise RepositoryAddFailed(name, e) from e
