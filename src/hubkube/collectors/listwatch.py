# src/hubkube/collectors/listwatch.py

"""
ListWatch narrows an untyped ResourceClient to the list and watch operations
of a single resource kind in a single namespace, which is the shape a
reflector or informer expects for its source.
"""

import logging
from typing import Any, AsyncIterator, Dict, Optional

from hubkube.core.resource_client import ResourceClient
from hubkube.models.resources import MANAGED_CLUSTER_INFO, ListOptions, ResourceKind

logger = logging.getLogger(__name__)


class ListWatch:
    """
    List and watch functions for one resource kind/namespace pair.

    Objects are returned untouched and client errors propagate unchanged;
    retries, caching and resuming watches are left to the consumer.
    """

    def __init__(self, resource_client: ResourceClient, kind: ResourceKind, namespace: str = ""):
        self.resource_client = resource_client
        self.kind = kind
        self.namespace = namespace

    async def list(self, options: Optional[ListOptions] = None) -> Dict[str, Any]:
        """
        Returns the current list object, `items` holding the matching resources.
        """
        kwargs = (options or ListOptions()).to_kwargs()
        return await self.resource_client.list(self.kind, self.namespace, **kwargs)

    def watch(self, options: Optional[ListOptions] = None) -> AsyncIterator[Dict[str, Any]]:
        """
        Returns a live stream of ADDED/MODIFIED/DELETED events for the same selection.
        """
        kwargs = (options or ListOptions()).to_kwargs()
        return self.resource_client.watch(self.kind, self.namespace, **kwargs)

    def __repr__(self) -> str:
        return f"ListWatch(kind={self.kind}, namespace={self.namespace!r})"


def create_managed_cluster_info_list_watch(resource_client: ResourceClient, namespace: str = "") -> ListWatch:
    """ListWatch over ManagedClusterInfo objects."""
    return ListWatch(resource_client, MANAGED_CLUSTER_INFO, namespace)
