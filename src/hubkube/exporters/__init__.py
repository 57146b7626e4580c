"""Exporters package for metric outputs."""

from .base_exporter import BaseExporter
from .prometheus_exporter import PrometheusExporter

__all__ = ["BaseExporter", "PrometheusExporter"]
