"""Pydantic models for the helm3 install action.

The payload handed to the mixin is a YAML document of the form::

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
          values:
            - values.yaml
          repos:
            bitnami:
              url: https://charts.bitnami.com/bitnami
          outputs:
            - name: mysql-root-password
              secret: porter-ci-mysql
              key: mysql-root-password

Exactly one step is expected per action. Scalars are read as their literal
text, so `version: 1.10` or `image.tag: 0x1F` reach helm unchanged; boolean
flags accept the usual YAML spellings (`true`, `yes`, `on`).
"""

from __future__ import annotations

from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

_NULL_SCALARS = frozenset({"", "~", "null", "Null", "NULL"})

# =============================================================================
# Step Models
# =============================================================================


class RepositoryArguments(BaseModel):
    """A chart repository to register before the install runs.

    ``certfile``/``keyfile`` and ``username``/``password`` are only used as
    complete pairs; a half-specified pair is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str = ""
    cafile: str = ""
    certfile: str = ""
    keyfile: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)


class OutputDeclaration(BaseModel):
    """A value to capture from a Kubernetes secret after install."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(description="Destination name of the output")
    secret: str = Field(description="Name of the secret holding the value")
    key: str = Field(description="Key within the secret's data")


class InstallArguments(BaseModel):
    """Arguments of a single ``helm3 install`` step."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    description: str = ""
    namespace: str = ""
    name: str = Field(min_length=1)
    chart: str = Field(min_length=1)
    version: str = ""
    replace: bool = False
    devel: bool = False
    wait: bool = False
    set: dict[str, str] = Field(default_factory=dict)
    values: list[str] = Field(default_factory=list)
    repositories: dict[str, RepositoryArguments] = Field(
        default_factory=dict, alias="repos"
    )
    outputs: list[OutputDeclaration] = Field(default_factory=list)

    @field_validator("values", "outputs", mode="before")
    @classmethod
    def _null_as_empty_list(cls, value: Any) -> Any:
        return [] if _is_null(value) else value

    @field_validator("set", "repositories", mode="before")
    @classmethod
    def _null_as_empty_dict(cls, value: Any) -> Any:
        return {} if _is_null(value) else value


class InstallStep(BaseModel):
    """One entry of the ``install`` list, keyed by the mixin name."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    helm3: InstallArguments


class InstallAction(BaseModel):
    """The full install action as received from the bundle runtime."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    steps: list[InstallStep] = Field(default_factory=list, alias="install")

    @field_validator("steps", mode="before")
    @classmethod
    def _null_as_no_steps(cls, value: Any) -> Any:
        return [] if _is_null(value) else value


# =============================================================================
# Parsing
# =============================================================================


def parse_install_action(payload: bytes | str) -> InstallArguments:
    """Parse a YAML payload and return the arguments of its single step.

    Args:
        payload: Raw YAML bytes (or text) of the install action

    Returns:
        The validated arguments of the only step in the action

    Raises:
        ConfigurationError: If the payload is not valid YAML, does not match
            the expected shape, or does not hold exactly one step
    """
    try:
        # Every scalar stays text so values reach helm exactly as written
        loaded = yaml.load(payload, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigurationError("Error parsing YAML payload", details=str(e)) from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            "Invalid payload structure",
            details=f"Expected a mapping at the top level, got {type(loaded).__name__}",
        )

    try:
        action = InstallAction.model_validate(loaded)
    except ValidationError as e:
        raise ConfigurationError("Invalid install action", details=str(e)) from e

    if len(action.steps) != 1:
        raise ConfigurationError(
            f"expected a single step, but got {len(action.steps)}"
        )

    step = action.steps[0].helm3
    logger.debug(f"Parsed install step for release '{step.name}' ({step.chart})")
    return step


def _is_null(value: Any) -> bool:
    # BaseLoader keeps YAML nulls as their literal text
    return value is None or (isinstance(value, str) and value in _NULL_SCALARS)
