# src/hubkube/__init__.py
"""
HubKube: exposes ManagedClusterInfo custom resources of a hub cluster as
Prometheus metric samples.
"""

__version__ = "0.3.0"
