"""Kr8s-based implementation of KubernetesController.

Uses the kr8s library for native async Kubernetes operations.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

import kr8s
from kr8s.asyncio.objects import Secret

from .controller import KubernetesController, SecretLookupError


class Kr8sController(KubernetesController):
    """Kubernetes controller using kr8s library.

    Note: The kr8s API client is NOT cached because it's tied to the event loop
    that was running when created. When using run_sync() which calls asyncio.run(),
    each call creates a new event loop, making the cached API unusable.
    """

    def __init__(self, kubeconfig: str | None = None) -> None:
        """Initialize the kr8s controller.

        Args:
            kubeconfig: Path to a kubeconfig file, or None for kr8s discovery
        """
        self.kubeconfig = kubeconfig

    async def _get_api(self) -> Any:  # Returns kr8s._api.Api
        """Create a kr8s API client bound to the current event loop."""
        return await kr8s.asyncio.api(kubeconfig=self.kubeconfig)

    async def get_secret_value(self, namespace: str, name: str, key: str) -> bytes:
        """Read and base64-decode one key of a secret."""
        api = await self._get_api()
        try:
            secret = await Secret.get(name, namespace=namespace, api=api)
        except kr8s.NotFoundError as e:
            raise SecretLookupError(namespace, name, key, "secret not found") from e

        data = secret.raw.get("data") or {}
        if key not in data:
            raise SecretLookupError(namespace, name, key, "key not found in secret")

        try:
            return base64.b64decode(data[key], validate=True)
        except (binascii.Error, ValueError) as e:
            raise SecretLookupError(
                namespace, name, key, "value is not valid base64"
            ) from e
