"""Metrics hooks and metric names shared by every pipeline stage."""

from . import names
from .base import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
