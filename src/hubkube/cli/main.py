# src/hubkube/cli/main.py
"""
This module is the main entry point for the HubKube CLI.

It aggregates all commands from the submodules (collect, watch).
"""

import logging

import typer

from ..core.config import config
from . import collect, watch

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="hubkube",
    help="Expose ManagedClusterInfo resources of a hub cluster as Prometheus metrics.",
    add_completion=False,
)


@app.command()
def version():
    """
    Show the version of HubKube.
    """
    from .. import __version__

    typer.echo(f"HubKube version: {__version__}")


# Register command sub-apps
app.add_typer(collect.app, name="collect")
app.add_typer(watch.app, name="watch")


if __name__ == "__main__":
    app()
