from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from hubkube.models.metrics import MetricFamily


class BaseExporter(ABC):
    """Abstract base class for metric exporters.

    Subclasses should provide a DEFAULT_FILENAME and implement `export`.
    """

    DEFAULT_FILENAME: str = "hubkube-metrics"

    @abstractmethod
    async def export(self, families: List[MetricFamily], path: str | None = None) -> str:
        """Export the provided metric families to disk. Return the written path."""
        raise NotImplementedError()
