"""
Renders metric families in the Prometheus text exposition format.

The exporter is a prometheus_client custom collector over the most recent
families it was given. It can be registered in any CollectorRegistry, or
write a textfile-collector compatible `.prom` file.
"""

import logging
import os
from typing import Iterator, List, Optional

import aiofiles
from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import GaugeMetricFamily

from hubkube.models.metrics import MetricFamily

from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)


class PrometheusExporter(BaseExporter):
    DEFAULT_FILENAME = "hubkube-metrics.prom"

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self._families: List[MetricFamily] = []
        self.registry = registry or CollectorRegistry()
        self.registry.register(self)

    def update(self, families: List[MetricFamily]) -> None:
        """Replace the families served on the next scrape."""
        self._families = list(families or [])

    def collect(self) -> Iterator[GaugeMetricFamily]:
        for family in self._families:
            # Label names come from the first sample; every sample of a family carries the same set.
            label_names = list(family.samples[0].labels) if family.samples else []
            gauge = GaugeMetricFamily(family.name, family.help, labels=label_names)
            for sample in family.samples:
                gauge.add_metric([sample.labels.get(name, "") for name in label_names], sample.value)
            yield gauge

    def render(self) -> str:
        # Values are written as floats ("1.0"); scrapers parse "1" and "1.0" alike.
        return generate_latest(self.registry).decode("utf-8")

    async def export(self, families: List[MetricFamily], path: str | None = None) -> str:
        out_path = path or self.DEFAULT_FILENAME
        self.update(families)
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            await fh.write(self.render())
        logger.debug("Wrote %d metric family(ies) to %s", len(self._families), out_path)
        return out_path
