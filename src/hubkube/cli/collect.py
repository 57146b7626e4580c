# src/hubkube/cli/collect.py
"""
Collect command for the HubKube CLI.

Runs one collection pass over the ManagedClusterInfo objects of the hub and
prints the resulting samples in the Prometheus text exposition format.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
import typer
from kubernetes_asyncio.client.exceptions import ApiException
from typing_extensions import Annotated

from ..collectors.managed_cluster_info import ManagedClusterInfoCollector, resolve_hub_cluster_id
from ..core.config import config
from ..core.exceptions import HubKubeError
from ..exporters.prometheus_exporter import PrometheusExporter
from .utils import get_resource_client

logger = logging.getLogger(__name__)

app = typer.Typer(name="collect", help="Collect ManagedClusterInfo metrics once and print them.")


async def collect_metrics(namespace: str, hub_id: Optional[str], output: Optional[str] = None) -> str:
    """
    Lists ManagedClusterInfo objects, generates their samples and renders them.
    When `output` is given the exposition text is also written to that file.
    """
    resource_client = await get_resource_client()
    try:
        hub_cluster_id = await resolve_hub_cluster_id(resource_client, hub_id)
        collector = ManagedClusterInfoCollector(
            resource_client,
            hub_cluster_id,
            namespace=namespace,
            max_concurrency=config.MAX_CONCURRENT_LOOKUPS,
        )
        family = await collector.collect_family()
    finally:
        await resource_client.close()

    exporter = PrometheusExporter()
    exporter.update([family])
    if output:
        written = await exporter.export([family], output)
        logger.info("Metrics written to %s", written)
    return exporter.render()


@app.callback(invoke_without_command=True)
def collect(
    ctx: typer.Context,
    namespace: Annotated[
        Optional[str],
        typer.Option("--namespace", "-n", help="Namespace to read ManagedClusterInfo from (default: all)."),
    ] = None,
    hub_id: Annotated[
        Optional[str],
        typer.Option("--hub-id", help="Hub cluster id. Discovered from the hub ClusterVersion when omitted."),
    ] = None,
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Also write the metrics to this file."),
    ] = None,
) -> None:
    """
    Collect ManagedClusterInfo metrics and print them in exposition format.
    """
    if ctx.invoked_subcommand is not None:
        return

    target_namespace = config.MCI_NAMESPACE if namespace is None else namespace
    try:
        text = asyncio.run(collect_metrics(target_namespace, hub_id or config.HUB_CLUSTER_ID, output))
    except HubKubeError as e:
        logger.error("Collection failed: %s", e)
        raise typer.Exit(code=1)
    except ApiException as e:
        logger.error("Kubernetes API error while listing ManagedClusterInfo: %s %s", e.status, e.reason)
        raise typer.Exit(code=1)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Could not reach the Kubernetes API: %r", e)
        raise typer.Exit(code=1)

    typer.echo(text, nl=False)
