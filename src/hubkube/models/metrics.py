# src/hubkube/models/metrics.py
"""
Pydantic models for the metric samples produced by the collectors.
"""

from typing import Dict, List

from pydantic import BaseModel, Field


class MetricSample(BaseModel):
    """
    A single sample of a metric family. Label order is preserved and is the
    order used when rendering the exposition line.
    """

    name: str
    labels: Dict[str, str] = Field(default_factory=dict)
    value: float = Field(1.0, description="Sample value")


class MetricFamily(BaseModel):
    """
    A named group of samples sharing the same help text and type.
    """

    name: str
    help: str = ""
    type: str = Field("gauge", description="Prometheus metric type")
    samples: List[MetricSample] = Field(default_factory=list)
