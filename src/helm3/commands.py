"""Helm command construction.

Pure functions that turn a parsed step into the argument tokens of a
``helm3`` invocation. Nothing here spawns a process, so the exact token
sequences can be asserted on directly.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import EmptyRepositoryName
from .models import InstallArguments, RepositoryArguments

SECRET_FLAGS = frozenset({"--password"})
REDACTED = "******"


def build_install_args(step: InstallArguments) -> tuple[str, ...]:
    """Build the arguments of ``helm3 install`` for a step.

    The resulting order is::

        install <name> <chart> [--namespace N] [--version V] [--replace]
        [--wait] [--devel] [--values F]... [--set K=V]...

    ``--values`` files keep their declaration order because later files
    override earlier ones. ``--set`` pairs are sorted by key so that the same
    logical mapping always yields the same command.

    Set values are rendered as ``key=value`` verbatim. Embedded ``=``, commas
    or whitespace are not escaped and are interpreted by helm itself.

    No validation of chart or version syntax happens here; helm rejects
    malformed input on its own.

    Args:
        step: Parsed install arguments

    Returns:
        Argument tokens, without the binary name

    Example:
        >>> build_install_args(step)
        ('install', 'myrel', 'stable/nginx', '--version', '1.2.3', '--wait',
         '--set', 'a=1', '--set', 'b=2')
    """
    args = ["install", step.name, step.chart]

    if step.namespace:
        args.extend(["--namespace", step.namespace])
    if step.version:
        args.extend(["--version", step.version])
    if step.replace:
        args.append("--replace")
    if step.wait:
        args.append("--wait")
    if step.devel:
        args.append("--devel")

    for values_file in step.values:
        args.extend(["--values", values_file])

    args.extend(build_set_args(step.set))

    return tuple(args)


def build_set_args(overrides: dict[str, str]) -> tuple[str, ...]:
    """Render value overrides as ``--set key=value`` pairs sorted by key."""
    args: list[str] = []
    for key in sorted(overrides):
        args.extend(["--set", f"{key}={overrides[key]}"])
    return tuple(args)


def build_repo_add_args(name: str, repo: RepositoryArguments) -> tuple[str, ...]:
    """Build the arguments of ``helm3 repo add`` for one repository.

    TLS client certificates and basic-auth credentials are only emitted as
    complete pairs. A half-specified pair produces no flags at all.

    Args:
        name: Repository name (the key under ``repos``)
        repo: Repository arguments

    Returns:
        Argument tokens, without the binary name

    Raises:
        EmptyRepositoryName: If the repository has a URL but no name
    """
    if not name and repo.url:
        raise EmptyRepositoryName(repo.url)

    args = ["repo", "add", name, repo.url]

    if repo.certfile and repo.keyfile:
        args.extend(["--cert-file", repo.certfile, "--key-file", repo.keyfile])
    if repo.cafile:
        args.extend(["--ca-file", repo.cafile])
    if repo.username and repo.password:
        args.extend(["--username", repo.username, "--password", repo.password])

    return tuple(args)


def redact_args(args: Sequence[str]) -> tuple[str, ...]:
    """Mask the values of secret-bearing flags for display.

    Used wherever a command line is printed or embedded in an error, so a
    repository password never reaches the output sinks or error messages.
    """
    redacted = list(args)
    for i, token in enumerate(redacted[:-1]):
        if token in SECRET_FLAGS:
            redacted[i + 1] = REDACTED
    return tuple(redacted)
