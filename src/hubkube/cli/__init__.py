# src/hubkube/cli/__init__.py
"""
HubKube CLI Package

This package exposes the top-level Typer `app` for the console entrypoint.
"""

from .main import app

__all__ = ["app"]
