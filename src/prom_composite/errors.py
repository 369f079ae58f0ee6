"""prom_composite exception hierarchy.

Only failures detected by this package live here. Errors raised by
``prometheus_client`` itself (invalid metric or label names, unsorted
buckets, duplicated timeseries on registration) propagate unchanged.

The base class derives from ``ValueError`` so a caller guarding startup
with ``except ValueError`` sees both families.
"""
from __future__ import annotations


class CompositeMetricError(ValueError):
    """Base class for all prom_composite exceptions."""


class LabelsRequiredError(CompositeMetricError):
    """A vector metric was declared without a label list."""

    def __init__(self, message: str = "vector requires one or more labels") -> None:
        super().__init__(message)


class UnknownMetricKindError(CompositeMetricError):
    """No converter is known for the requested metric kind."""


class MetricDeclarationError(CompositeMetricError):
    """A composite class declaration is malformed (no fields, reserved names)."""


__all__ = [
    "CompositeMetricError",
    "LabelsRequiredError",
    "UnknownMetricKindError",
    "MetricDeclarationError",
]
