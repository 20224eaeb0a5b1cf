"""Kubernetes infrastructure abstraction layer.

This module provides a thin abstraction over the cluster reads the mixin
performs, backed by the kr8s library.

Example:
    from src.infra.k8s import get_k8s_controller_sync

    controller = get_k8s_controller_sync("/root/.kube/config")
    password = controller.get_secret_value("mysql", "mysql", "mysql-root-password")
"""

from .controller import (
    KubernetesController,
    KubernetesControllerSync,
    SecretLookupError,
)
from .helpers import get_k8s_controller, get_k8s_controller_sync
from .utils import run_sync

__all__ = [
    # Controller classes
    "KubernetesController",
    "KubernetesControllerSync",
    # Errors
    "SecretLookupError",
    # Factories
    "get_k8s_controller",
    "get_k8s_controller_sync",
    # Utilities
    "run_sync",
]
