# tests/conftest.py

import copy

import pytest
from kubernetes_asyncio.client.exceptions import ApiException

from hubkube.core.resource_client import ResourceClient
from hubkube.models.resources import CLUSTER_DEPLOYMENT, MANAGED_CLUSTER_INFO

WORKER_LABEL = "node-role.kubernetes.io/worker"


class FakeResourceClient(ResourceClient):
    """
    In-memory ResourceClient. Kinds that were never registered behave like a
    CRD that is not installed: every call for them fails with a 404.
    """

    def __init__(self, *objects, kinds=(MANAGED_CLUSTER_INFO, CLUSTER_DEPLOYMENT), events=None):
        self.kinds = {kind.plural: kind for kind in kinds}
        self.objects = list(objects)
        self.events = list(events or [])
        self.list_calls = []
        self.get_calls = []
        self.watch_calls = []
        self.closed = False

    def _ensure_kind(self, kind):
        if kind.plural not in self.kinds:
            raise ApiException(status=404, reason="Not Found")

    def _matches(self, obj, kind, namespace):
        if obj.get("kind") != kind.kind:
            return False
        return not namespace or obj["metadata"].get("namespace") == namespace

    async def list(self, kind, namespace="", **kwargs):
        self.list_calls.append((kind, namespace, kwargs))
        self._ensure_kind(kind)
        return {
            "apiVersion": kind.api_version,
            "kind": f"{kind.kind}List",
            "metadata": {"resourceVersion": "42"},
            "items": [obj for obj in self.objects if self._matches(obj, kind, namespace)],
        }

    async def get(self, kind, name, namespace=""):
        self.get_calls.append((kind, name, namespace))
        self._ensure_kind(kind)
        for obj in self.objects:
            if self._matches(obj, kind, namespace) and obj["metadata"]["name"] == name:
                return obj
        raise ApiException(status=404, reason="Not Found")

    def watch(self, kind, namespace="", **kwargs):
        self.watch_calls.append((kind, namespace, kwargs))
        self._ensure_kind(kind)

        async def _stream():
            for event in self.events:
                yield event

        return _stream()

    async def close(self):
        self.closed = True


def make_managed_cluster_info(name, namespace=None, **status):
    """Builds an untyped ManagedClusterInfo object as the API server returns it."""
    return {
        "apiVersion": "internal.open-cluster-management.io/v1beta1",
        "kind": "ManagedClusterInfo",
        "metadata": {"name": name, "namespace": namespace or name},
        "status": status,
    }


def make_cluster_deployment(name, namespace=None):
    return {
        "apiVersion": "hive.openshift.io/v1",
        "kind": "ClusterDeployment",
        "metadata": {"name": name, "namespace": namespace or name},
    }


@pytest.fixture
def hive_cluster():
    """
    OpenShift on AWS with five nodes, three of them workers (cpu absent, 1 and 2).
    """
    return make_managed_cluster_info(
        "hive-cluster",
        kubeVendor="OpenShift",
        cloudVendor="Amazon",
        version="v1.16.2",
        clusterID="managed_cluster_id",
        distributionInfo={"type": "OCP", "ocp": {"version": "4.3.1"}},
        nodeList=[
            {"name": "worker-0"},
            {"name": "worker-1", "labels": {"my-label": "my-label-value"}},
            {"name": "worker-2", "labels": {WORKER_LABEL: ""}, "capacity": {"memory": "100"}},
            {"name": "worker-3", "labels": {WORKER_LABEL: ""}, "capacity": {"cpu": "1"}},
            {"name": "worker-4", "labels": {WORKER_LABEL: ""}, "capacity": {"cpu": "2"}},
        ],
    )


@pytest.fixture
def fake_client_factory():
    return FakeResourceClient


@pytest.fixture
def mci_factory():
    return make_managed_cluster_info


@pytest.fixture
def cd_factory():
    return make_cluster_deployment


@pytest.fixture
def snapshot():
    """Deep copy helper used to check inputs are left untouched."""
    return copy.deepcopy
