# src/hubkube/cli/utils.py
import logging

from ..core.exceptions import HubKubeError
from ..core.resource_client import CustomObjectsResourceClient

logger = logging.getLogger(__name__)


async def get_resource_client() -> CustomObjectsResourceClient:
    """
    Builds the resource client from the environment.

    Raises:
        HubKubeError: If no Kubernetes configuration can be loaded.
    """
    resource_client = await CustomObjectsResourceClient.from_environment()
    if resource_client is None:
        raise HubKubeError("Kubernetes configuration could not be loaded (no in-cluster config or kubeconfig).")
    return resource_client
