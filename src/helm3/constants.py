"""Mixin constants and configuration.

This module centralizes the binary name, well-known paths, and defaults used
throughout the install pipeline.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True)
class MixinConstants:
    """Constants for the helm3 mixin.

    Defaults match the layout of the bundle runtime image. Use ``from_env()``
    to apply overrides from the environment.
    """

    # External tool
    HELM_BINARY: str = "helm3"

    # Cluster access
    KUBECONFIG_PATH: str = "/root/.kube/config"
    DEFAULT_NAMESPACE: str = "default"

    # Where captured outputs are written, one file per output name
    OUTPUTS_DIR: str = "/cnab/app/porter/outputs"

    @property
    def outputs_path(self) -> Path:
        """Get the outputs directory as a Path."""
        return Path(self.OUTPUTS_DIR)

    @classmethod
    def from_env(cls) -> MixinConstants:
        """Build constants with environment overrides applied.

        Recognized variables:
            HELM3_MIXIN_BINARY: Name or path of the helm binary
            KUBECONFIG: Path to the kubeconfig file
            HELM3_MIXIN_OUTPUTS_DIR: Directory for captured outputs
        """
        constants = cls()
        overrides: dict[str, str] = {}

        if binary := os.environ.get("HELM3_MIXIN_BINARY"):
            overrides["HELM_BINARY"] = binary
        if kubeconfig := os.environ.get("KUBECONFIG"):
            overrides["KUBECONFIG_PATH"] = kubeconfig
        if outputs_dir := os.environ.get("HELM3_MIXIN_OUTPUTS_DIR"):
            overrides["OUTPUTS_DIR"] = outputs_dir

        return replace(constants, **overrides) if overrides else constants
