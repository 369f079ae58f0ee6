"""Metric kind taxonomy.

Each ``MetricKind`` names one concrete construction target. Scalar kinds
produce a single time series; ``*_vec`` kinds produce a labeled family
resolved per label-value combination via ``.labels(...)``.
"""
from __future__ import annotations

from enum import Enum

from .errors import UnknownMetricKindError


class MetricKind(str, Enum):
    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"
    COUNTER_VEC = "counter_vec"
    GAUGE_VEC = "gauge_vec"
    HISTOGRAM_VEC = "histogram_vec"
    SUMMARY_VEC = "summary_vec"

    @property
    def is_vector(self) -> bool:
        return self.value.endswith("_vec")

    @property
    def is_histogram(self) -> bool:
        return self in (MetricKind.HISTOGRAM, MetricKind.HISTOGRAM_VEC)

    @property
    def family(self) -> str:
        """Prometheus type name as rendered on the ``# TYPE`` line."""
        return self.value[: -len("_vec")] if self.is_vector else self.value

    @classmethod
    def parse(cls, kind: MetricKind | str) -> MetricKind:
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).strip().lower())
        except ValueError:
            raise UnknownMetricKindError(f"unknown metric kind: {kind!r}") from None


__all__ = ["MetricKind"]
