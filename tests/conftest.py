"""Shared fixtures for the helm3 mixin test suite."""

import io
import textwrap
from unittest.mock import MagicMock

import pytest

from src.helm3.models import InstallArguments


@pytest.fixture
def make_step():
    """Factory for InstallArguments with sensible required fields."""

    def _make(**overrides) -> InstallArguments:
        fields = {"name": "myrel", "chart": "stable/nginx"}
        fields.update(overrides)
        return InstallArguments(**fields)

    return _make


@pytest.fixture
def install_payload() -> bytes:
    """A complete single-step install action."""
    return textwrap.dedent(
        """\
        install:
          - helm3:
              description: Install MySQL
              name: porter-ci-mysql
              chart: bitnami/mysql
              version: 6.14.2
              namespace: mysql
              replace: true
              set:
                db.name: wordpress
                db.user: wordpress
              values:
                - base.yaml
                - overrides.yaml
              repos:
                bitnami:
                  url: https://charts.bitnami.com/bitnami
              outputs:
                - name: mysql-root-password
                  secret: porter-ci-mysql
                  key: mysql-root-password
                - name: mysql-password
                  secret: porter-ci-mysql
                  key: mysql-password
        """
    ).encode()


@pytest.fixture
def stdout_sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stderr_sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def spy_sink() -> MagicMock:
    """Output sink that records every write."""
    return MagicMock()
