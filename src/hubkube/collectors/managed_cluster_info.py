# src/hubkube/collectors/managed_cluster_info.py

"""
Turns ManagedClusterInfo objects into `acm_managed_cluster_info` samples.

Each object yields at most one sample. Objects that cannot be decoded, or
whose status has not been filled in yet by the cluster agent, yield none.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

import aiohttp
from kubernetes_asyncio.client.exceptions import ApiException
from pydantic import ValidationError

from hubkube.collectors.base_collector import BaseCollector
from hubkube.collectors.listwatch import create_managed_cluster_info_list_watch
from hubkube.core.config import config
from hubkube.core.exceptions import ClusterInfoDecodeError, HubClusterIdError, ProvenanceLookupError
from hubkube.core.resource_client import ResourceClient
from hubkube.models.cluster_info import ClusterInfoStatus, DistributionType, ManagedClusterInfo, NodeStatus
from hubkube.models.metrics import MetricFamily, MetricSample
from hubkube.models.resources import CLUSTER_DEPLOYMENT, CLUSTER_VERSION
from hubkube.utils.k8s_utils import parse_cpu_cores

logger = logging.getLogger(__name__)

METRIC_NAME = "acm_managed_cluster_info"
METRIC_HELP = "Managed cluster information"

WORKER_LABEL = "node-role.kubernetes.io/worker"
CPU_RESOURCE = "cpu"

CREATED_VIA_ACM = "ACM"
CREATED_VIA_OTHER = "Other"

ProvenanceLookup = Callable[[str, str], Awaitable[bool]]


class ClusterDeploymentLookup:
    """
    Tells whether a ClusterDeployment exists with the given name and namespace.

    A 404 means either the object or the whole ClusterDeployment kind is
    missing (Hive not installed); both are reported as "does not exist".
    """

    def __init__(self, resource_client: ResourceClient):
        self.resource_client = resource_client

    async def exists(self, name: str, namespace: str) -> bool:
        try:
            await self.resource_client.get(CLUSTER_DEPLOYMENT, name, namespace)
        except ApiException as e:
            if e.status == 404:
                return False
            raise ProvenanceLookupError(
                f"Failed to look up ClusterDeployment {namespace}/{name}: {e.status} {e.reason}"
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProvenanceLookupError(f"Failed to look up ClusterDeployment {namespace}/{name}: {e}") from e
        return True

    async def __call__(self, name: str, namespace: str) -> bool:
        return await self.exists(name, namespace)


def decode_managed_cluster_info(obj: Any) -> ManagedClusterInfo:
    """
    Decode an untyped object into a ManagedClusterInfo.

    Raises:
        ClusterInfoDecodeError: If the object does not have the expected shape.
    """
    try:
        return ManagedClusterInfo.model_validate(obj)
    except ValidationError as e:
        raise ClusterInfoDecodeError(f"Object is not a valid ManagedClusterInfo: {e}") from e


def resolve_distribution_version(status: ClusterInfoStatus) -> Optional[str]:
    """The OCP version for OpenShift distributions, otherwise the Kubernetes version."""
    if status.distribution_info.type == DistributionType.OCP:
        return status.distribution_info.ocp.version
    return status.version


def is_worker_node(node: NodeStatus) -> bool:
    return WORKER_LABEL in node.labels


def count_worker_vcpu(nodes: Iterable[NodeStatus]) -> int:
    """
    Sum of CPU capacity, in whole cores, over worker nodes.
    Workers without a cpu entry count as 0.
    """
    return sum(parse_cpu_cores(node.capacity.get(CPU_RESOURCE)) for node in nodes if is_worker_node(node))


def _describe(obj: Any) -> str:
    if isinstance(obj, dict):
        metadata = obj.get("metadata") or {}
        if isinstance(metadata, dict):
            return f"{metadata.get('namespace', '')}/{metadata.get('name', '')}"
    return repr(type(obj))


async def generate_managed_cluster_info_sample(
    obj: Any, provenance_lookup: ProvenanceLookup, hub_cluster_id: str
) -> Optional[MetricSample]:
    """
    Build the `acm_managed_cluster_info` sample for one ManagedClusterInfo object.

    Args:
        obj: The untyped object as returned by the API server.
        provenance_lookup: Coroutine function (name, namespace) -> bool telling
            whether a ClusterDeployment exists for the cluster.
        hub_cluster_id: Identifier of the hub cluster running the collector.

    Returns:
        The sample, or None when the object cannot be decoded or its status
        lacks the version, cluster id or vendor.

    Raises:
        ProvenanceLookupError: If the provenance lookup fails for a reason
            other than not-found.
    """
    try:
        mci = decode_managed_cluster_info(obj)
    except ClusterInfoDecodeError as e:
        logger.warning("Skipping ManagedClusterInfo %s: %s", _describe(obj), e)
        return None

    status = mci.status
    version = resolve_distribution_version(status)
    if not version or not status.cluster_id or status.kube_vendor is None:
        logger.debug(
            "ManagedClusterInfo %s/%s is not ready (version=%s, clusterID=%s, vendor=%s)",
            mci.namespace,
            mci.name,
            version,
            status.cluster_id,
            status.kube_vendor,
        )
        return None

    vcpu = count_worker_vcpu(status.node_list)
    cloud = status.cloud_vendor.display_name if status.cloud_vendor else ""
    created_via = CREATED_VIA_ACM if await provenance_lookup(mci.name, mci.namespace) else CREATED_VIA_OTHER

    return MetricSample(
        name=METRIC_NAME,
        labels={
            "cloud": cloud,
            "managed_cluster_id": status.cluster_id,
            "created_via": created_via,
            "hub_cluster_id": hub_cluster_id,
            "vendor": status.kube_vendor.value,
            "version": version,
            "vcpu": str(vcpu),
        },
        value=1,
    )


async def resolve_hub_cluster_id(resource_client: ResourceClient, configured: Optional[str] = None) -> str:
    """
    Returns the configured hub cluster id, or reads spec.clusterID of the
    hub's ClusterVersion named 'version'.

    Raises:
        HubClusterIdError: If no id is configured and none can be read.
    """
    if configured:
        return configured

    try:
        cluster_version = await resource_client.get(CLUSTER_VERSION, "version")
    except ApiException as e:
        raise HubClusterIdError(
            f"HUB_CLUSTER_ID is not set and the hub ClusterVersion could not be read: {e.status} {e.reason}"
        ) from e

    cluster_id = (cluster_version.get("spec") or {}).get("clusterID")
    if not cluster_id:
        raise HubClusterIdError("HUB_CLUSTER_ID is not set and the hub ClusterVersion has no spec.clusterID")
    logger.info("Discovered hub cluster id %s", cluster_id)
    return cluster_id


class ManagedClusterInfoCollector(BaseCollector):
    """
    Collects one `acm_managed_cluster_info` sample per ManagedClusterInfo.
    """

    def __init__(
        self,
        resource_client: ResourceClient,
        hub_cluster_id: str,
        namespace: str = "",
        max_concurrency: Optional[int] = None,
        provenance_lookup: Optional[ProvenanceLookup] = None,
    ):
        self.resource_client = resource_client
        self.hub_cluster_id = hub_cluster_id
        self.list_watch = create_managed_cluster_info_list_watch(resource_client, namespace)
        self.provenance_lookup = provenance_lookup or ClusterDeploymentLookup(resource_client)
        self.max_concurrency = max_concurrency or config.MAX_CONCURRENT_LOOKUPS

    async def generate(self, obj: Dict[str, Any]) -> Optional[MetricSample]:
        return await generate_managed_cluster_info_sample(obj, self.provenance_lookup, self.hub_cluster_id)

    async def collect(self) -> List[MetricSample]:
        """
        Lists ManagedClusterInfo objects and generates their samples.

        List failures and provenance lookup failures propagate; undecodable
        or not-ready objects are skipped.
        """
        result = await self.list_watch.list()
        items = result.get("items") or []
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(obj):
            async with semaphore:
                return await self.generate(obj)

        tasks = [asyncio.ensure_future(_bounded(item)) for item in items]
        try:
            generated = await asyncio.gather(*tasks)
        except BaseException:
            # One failed lookup fails the batch; nothing may keep using the client after that.
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        samples = []
        seen = set()
        for item, sample in zip(items, generated):
            if sample is None:
                continue
            key = _describe(item)
            if key in seen:
                logger.warning("Duplicate ManagedClusterInfo %s in list result; keeping the first.", key)
                continue
            seen.add(key)
            samples.append(sample)

        logger.info(
            "Generated %d %s sample(s) from %d ManagedClusterInfo object(s).",
            len(samples),
            METRIC_NAME,
            len(items),
        )
        return samples

    async def collect_family(self) -> MetricFamily:
        return MetricFamily(name=METRIC_NAME, help=METRIC_HELP, type="gauge", samples=await self.collect())

    async def close(self):
        await self.resource_client.close()
