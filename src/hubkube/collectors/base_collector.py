# src/hubkube/collectors/base_collector.py
"""
This module defines the abstract base class for metric collectors, so the
CLI and any embedding framework can drive every collector the same way.
"""

from abc import ABC, abstractmethod
from typing import List

from hubkube.models.metrics import MetricSample


class BaseCollector(ABC):
    """
    Abstract Base Class for all metric collectors.
    """

    @abstractmethod
    async def collect(self) -> List[MetricSample]:
        """
        Read the current state of the collector's source and return one
        MetricSample per reportable object.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., close API clients).
        """
        pass
