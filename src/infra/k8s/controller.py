"""Abstract Kubernetes controller interface.

Defines the contract for the cluster operations the mixin needs, so the
install pipeline can be exercised without a live cluster.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .utils import run_sync

# =============================================================================
# Errors
# =============================================================================


class SecretLookupError(Exception):
    """Raised when a secret or one of its keys cannot be read."""

    def __init__(self, namespace: str, name: str, key: str, reason: str) -> None:
        self.namespace = namespace
        self.name = name
        self.key = key
        self.reason = reason
        super().__init__(f"secret {namespace}/{name} key '{key}': {reason}")


# =============================================================================
# Abstract Controller
# =============================================================================


class KubernetesController(ABC):
    """Abstract base class for Kubernetes operations.

    All methods are async to match the kr8s API. Use
    ``KubernetesControllerSync`` to call them from synchronous code.
    """

    @abstractmethod
    async def get_secret_value(self, namespace: str, name: str, key: str) -> bytes:
        """Read and decode one key of a secret.

        Args:
            namespace: Namespace of the secret
            name: Secret name
            key: Key within the secret's data

        Returns:
            The decoded value

        Raises:
            SecretLookupError: If the secret or key does not exist
        """
        ...


class KubernetesControllerSync:
    """Blocking facade over a ``KubernetesController``.

    Each call runs the underlying coroutine to completion with ``run_sync``.
    """

    def __init__(self, controller: KubernetesController) -> None:
        self._controller = controller

    @property
    def controller(self) -> KubernetesController:
        """Get the wrapped async controller."""
        return self._controller

    def get_secret_value(self, namespace: str, name: str, key: str) -> bytes:
        return run_sync(self._controller.get_secret_value(namespace, name, key))
