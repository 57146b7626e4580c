# src/hubkube/core/k8s_client.py
"""
Builds Kubernetes API clients from in-cluster config or the local kubeconfig.

Every call loads into its own Configuration; the library-wide default
configuration is never touched, so clients can be created side by side
(for example against several kubeconfig contexts) and injected where needed.
"""

import logging
from typing import Optional

from kubernetes_asyncio import client, config

logger = logging.getLogger(__name__)


async def load_k8s_configuration(context: Optional[str] = None) -> Optional[client.Configuration]:
    """
    Loads the in-cluster service account config, falling back to the kubeconfig.

    Args:
        context: kubeconfig context to use; ignored for in-cluster config.

    Returns:
        A populated Configuration, or None when neither source is available.
    """
    configuration = client.Configuration()

    if context is None:
        try:
            config.load_incluster_config(client_configuration=configuration)
            logger.info("Loaded in-cluster Kubernetes configuration.")
            return configuration
        except config.ConfigException:
            logger.debug("In-cluster config not found.")

    try:
        await config.load_kube_config(context=context, client_configuration=configuration)
        logger.info("Loaded Kubernetes configuration from kubeconfig file.")
        return configuration
    except config.ConfigException as e:
        logger.warning("Could not load kubeconfig: %s", e)
    except OSError as e:
        logger.warning("Unexpected error loading kubeconfig: %s", e)
    return None


async def create_api_client(context: Optional[str] = None) -> Optional[client.ApiClient]:
    """
    Returns a new ApiClient bound to its own Configuration, or None when no
    configuration can be loaded. The caller owns the client and must close it.
    """
    configuration = await load_k8s_configuration(context)
    if configuration is None:
        return None
    return client.ApiClient(configuration=configuration)
