from __future__ import annotations

from cachetools.func import lru_cache  # type: ignore

from src.infra.k8s.controller import KubernetesController, KubernetesControllerSync

DEFAULT_KUBECONFIG = "/root/.kube/config"


@lru_cache(maxsize=4)
def get_k8s_controller(
    kubeconfig: str = DEFAULT_KUBECONFIG,
) -> KubernetesController:
    """Get a KubernetesController for the given kubeconfig.

    Args:
        kubeconfig: Path to the kubeconfig file

    Returns:
        An instance of KubernetesController
    """
    from src.infra.k8s.kr8s_controller import Kr8sController

    return Kr8sController(kubeconfig)


@lru_cache(maxsize=4)
def get_k8s_controller_sync(
    kubeconfig: str = DEFAULT_KUBECONFIG,
) -> KubernetesControllerSync:
    """Get a synchronous wrapper for KubernetesController.

    Args:
        kubeconfig: Path to the kubeconfig file

    Returns:
        An instance of KubernetesControllerSync wrapping the async controller
    """
    return KubernetesControllerSync(get_k8s_controller(kubeconfig))
