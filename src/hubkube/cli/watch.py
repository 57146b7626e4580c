# src/hubkube/cli/watch.py
"""
Watch command for the HubKube CLI: streams ManagedClusterInfo change events.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
import typer
from kubernetes_asyncio.client.exceptions import ApiException
from typing_extensions import Annotated

from ..collectors.listwatch import create_managed_cluster_info_list_watch
from ..core.config import config
from ..core.exceptions import HubKubeError
from ..models.resources import ListOptions
from .utils import get_resource_client

logger = logging.getLogger(__name__)

app = typer.Typer(name="watch", help="Print ManagedClusterInfo change events as they arrive.")


def format_event(event: dict) -> str:
    obj = event.get("object") or {}
    metadata = (obj.get("metadata") or {}) if isinstance(obj, dict) else {}
    return f"{event.get('type', 'UNKNOWN')}\t{metadata.get('namespace', '')}/{metadata.get('name', '')}"


async def watch_events(namespace: str, timeout_seconds: int) -> int:
    """
    Prints one line per event until the server closes the watch. Returns the event count.
    """
    resource_client = await get_resource_client()
    list_watch = create_managed_cluster_info_list_watch(resource_client, namespace)
    count = 0
    try:
        async for event in list_watch.watch(ListOptions(timeout_seconds=timeout_seconds)):
            typer.echo(format_event(event))
            count += 1
    finally:
        await resource_client.close()
    logger.info("Watch ended after %d event(s).", count)
    return count


@app.callback(invoke_without_command=True)
def watch(
    ctx: typer.Context,
    namespace: Annotated[
        Optional[str],
        typer.Option("--namespace", "-n", help="Namespace to watch (default: all)."),
    ] = None,
    timeout: Annotated[
        Optional[int],
        typer.Option("--timeout", help="Server-side watch timeout in seconds."),
    ] = None,
) -> None:
    """
    Watch ManagedClusterInfo objects and print each event.
    """
    if ctx.invoked_subcommand is not None:
        return

    target_namespace = config.MCI_NAMESPACE if namespace is None else namespace
    timeout_seconds = config.WATCH_TIMEOUT_SECONDS if timeout is None else timeout
    try:
        asyncio.run(watch_events(target_namespace, timeout_seconds))
    except HubKubeError as e:
        logger.error("Watch failed: %s", e)
        raise typer.Exit(code=1)
    except ApiException as e:
        logger.error("Kubernetes API error while watching ManagedClusterInfo: %s %s", e.status, e.reason)
        raise typer.Exit(code=1)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Could not reach the Kubernetes API: %r", e)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        logger.info("Watch interrupted.")
