# src/hubkube/core/resource_client.py
"""
Untyped access to custom resources.

The resource client knows nothing about the kinds it serves: every call
takes a ResourceKind descriptor and returns plain dictionaries exactly as
the API server sent them. Errors from the API server are raised as
kubernetes_asyncio ApiException and are never translated here.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Optional

from kubernetes_asyncio import client, watch

from hubkube.core.k8s_client import create_api_client
from hubkube.models.resources import ResourceKind

logger = logging.getLogger(__name__)


class ResourceClient(ABC):
    """
    Abstract interface for an untyped, kind-agnostic resource client.
    """

    @abstractmethod
    async def list(self, kind: ResourceKind, namespace: str = "", **kwargs) -> Dict[str, Any]:
        """
        Return the list object for `kind` in `namespace` (all namespaces when empty).
        Keyword arguments are list options (label_selector, resource_version, ...).
        """
        raise NotImplementedError()

    @abstractmethod
    async def get(self, kind: ResourceKind, name: str, namespace: str = "") -> Dict[str, Any]:
        """Return the single named object."""
        raise NotImplementedError()

    @abstractmethod
    def watch(self, kind: ResourceKind, namespace: str = "", **kwargs) -> AsyncIterator[Dict[str, Any]]:
        """
        Return an async iterator of watch events ({'type': ..., 'object': {...}}).
        """
        raise NotImplementedError()

    async def close(self):
        """
        Clean up resources (e.g., close the underlying API client).
        """
        pass


class CustomObjectsResourceClient(ResourceClient):
    """ResourceClient backed by kubernetes_asyncio's CustomObjectsApi."""

    def __init__(self, api: client.CustomObjectsApi):
        self._api = api

    @classmethod
    async def from_environment(cls, context: Optional[str] = None) -> Optional["CustomObjectsResourceClient"]:
        """
        Build a client over its own ApiClient, loaded from in-cluster config or
        the local kubeconfig. Returns None when no Kubernetes configuration is available.
        """
        api_client = await create_api_client(context)
        if api_client is None:
            return None
        return cls(client.CustomObjectsApi(api_client))

    def _list_call(self, kind: ResourceKind, namespace: str):
        """Returns the list function and its positional arguments for the kind's scope."""
        if kind.namespaced and namespace:
            return self._api.list_namespaced_custom_object, (kind.group, kind.version, namespace, kind.plural)
        return self._api.list_cluster_custom_object, (kind.group, kind.version, kind.plural)

    async def list(self, kind: ResourceKind, namespace: str = "", **kwargs) -> Dict[str, Any]:
        func, args = self._list_call(kind, namespace)
        logger.debug("Listing %s in namespace '%s' with %s", kind, namespace or "*", kwargs)
        return await func(*args, **kwargs)

    async def get(self, kind: ResourceKind, name: str, namespace: str = "") -> Dict[str, Any]:
        logger.debug("Getting %s %s/%s", kind, namespace, name)
        if kind.namespaced:
            return await self._api.get_namespaced_custom_object(
                kind.group, kind.version, namespace, kind.plural, name
            )
        return await self._api.get_cluster_custom_object(kind.group, kind.version, kind.plural, name)

    def watch(self, kind: ResourceKind, namespace: str = "", **kwargs) -> AsyncIterator[Dict[str, Any]]:
        func, args = self._list_call(kind, namespace)
        logger.debug("Watching %s in namespace '%s' with %s", kind, namespace or "*", kwargs)
        return watch.Watch().stream(func, *args, **kwargs)

    async def close(self):
        """Close the Kubernetes API client."""
        if self._api:
            await self._api.api_client.close()
            logger.debug("Resource client closed.")
            self._api = None
