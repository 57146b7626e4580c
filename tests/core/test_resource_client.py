# tests/core/test_resource_client.py

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from kubernetes_asyncio import client
from kubernetes_asyncio.client.exceptions import ApiException

from hubkube.core.resource_client import CustomObjectsResourceClient
from hubkube.models.resources import CLUSTER_DEPLOYMENT, CLUSTER_VERSION, MANAGED_CLUSTER_INFO


@pytest.fixture
def mock_api():
    api = MagicMock(spec=client.CustomObjectsApi)
    api.list_namespaced_custom_object = AsyncMock(return_value={"items": ["namespaced"]})
    api.list_cluster_custom_object = AsyncMock(return_value={"items": ["cluster"]})
    api.get_namespaced_custom_object = AsyncMock(return_value={"metadata": {"name": "cd"}})
    api.get_cluster_custom_object = AsyncMock(return_value={"metadata": {"name": "version"}})
    api.api_client = MagicMock()
    api.api_client.close = AsyncMock()
    return api


async def test_list_namespaced(mock_api):
    resource_client = CustomObjectsResourceClient(mock_api)

    result = await resource_client.list(MANAGED_CLUSTER_INFO, "hive-cluster", label_selector="a=b")

    assert result == {"items": ["namespaced"]}
    mock_api.list_namespaced_custom_object.assert_awaited_once_with(
        "internal.open-cluster-management.io",
        "v1beta1",
        "hive-cluster",
        "managedclusterinfos",
        label_selector="a=b",
    )


async def test_list_all_namespaces(mock_api):
    resource_client = CustomObjectsResourceClient(mock_api)

    result = await resource_client.list(MANAGED_CLUSTER_INFO)

    assert result == {"items": ["cluster"]}
    mock_api.list_cluster_custom_object.assert_awaited_once_with(
        "internal.open-cluster-management.io", "v1beta1", "managedclusterinfos"
    )
    mock_api.list_namespaced_custom_object.assert_not_awaited()


async def test_get_namespaced_and_cluster_scoped(mock_api):
    resource_client = CustomObjectsResourceClient(mock_api)

    await resource_client.get(CLUSTER_DEPLOYMENT, "hive-cluster", "hive-cluster")
    await resource_client.get(CLUSTER_VERSION, "version")

    mock_api.get_namespaced_custom_object.assert_awaited_once_with(
        "hive.openshift.io", "v1", "hive-cluster", "clusterdeployments", "hive-cluster"
    )
    mock_api.get_cluster_custom_object.assert_awaited_once_with(
        "config.openshift.io", "v1", "clusterversions", "version"
    )


async def test_api_errors_are_not_translated(mock_api):
    mock_api.get_namespaced_custom_object.side_effect = ApiException(status=403, reason="Forbidden")
    resource_client = CustomObjectsResourceClient(mock_api)

    with pytest.raises(ApiException) as exc_info:
        await resource_client.get(CLUSTER_DEPLOYMENT, "hive-cluster", "hive-cluster")

    assert exc_info.value.status == 403


@patch("hubkube.core.resource_client.watch.Watch")
def test_watch_streams_the_list_function(mock_watch_class, mock_api):
    resource_client = CustomObjectsResourceClient(mock_api)

    stream = resource_client.watch(MANAGED_CLUSTER_INFO, "hive-cluster", timeout_seconds=10)

    mock_watch_class.return_value.stream.assert_called_once_with(
        mock_api.list_namespaced_custom_object,
        "internal.open-cluster-management.io",
        "v1beta1",
        "hive-cluster",
        "managedclusterinfos",
        timeout_seconds=10,
    )
    assert stream is mock_watch_class.return_value.stream.return_value


async def test_close_closes_api_client_once(mock_api):
    resource_client = CustomObjectsResourceClient(mock_api)

    await resource_client.close()
    await resource_client.close()

    mock_api.api_client.close.assert_awaited_once()


@patch("hubkube.core.resource_client.create_api_client", new_callable=AsyncMock)
async def test_from_environment_without_config(mock_create):
    mock_create.return_value = None

    assert await CustomObjectsResourceClient.from_environment() is None


@patch("hubkube.core.resource_client.client.CustomObjectsApi")
@patch("hubkube.core.resource_client.create_api_client", new_callable=AsyncMock)
async def test_from_environment_injects_its_own_api_client(mock_create, mock_api_class):
    api_client = MagicMock()
    mock_create.return_value = api_client

    resource_client = await CustomObjectsResourceClient.from_environment("hub")

    assert isinstance(resource_client, CustomObjectsResourceClient)
    mock_create.assert_awaited_once_with("hub")
    mock_api_class.assert_called_once_with(api_client)
