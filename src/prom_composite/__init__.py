"""Declarative composition of prometheus_client metrics.

Stable import surface:
    from prom_composite import CompositeMetric, metric, MetricKind, Opts
    from prom_composite import composite_metric, MetricDef, convert

See ``composite`` for the declaration syntax and registration protocol.
"""
from __future__ import annotations

from .composite import CompositeMetric, MetricField, composite_metric, metric
from .convert import (
    CONVERTERS,
    convert,
    to_counter,
    to_counter_vec,
    to_gauge,
    to_gauge_vec,
    to_histogram,
    to_histogram_vec,
    to_summary,
    to_summary_vec,
)
from .defs import MetricDef
from .errors import (
    CompositeMetricError,
    LabelsRequiredError,
    MetricDeclarationError,
    UnknownMetricKindError,
)
from .kinds import MetricKind
from .opts import Opts

__version__ = "0.1.0"

__all__ = [
    "CONVERTERS",
    "CompositeMetric",
    "CompositeMetricError",
    "LabelsRequiredError",
    "MetricDeclarationError",
    "MetricDef",
    "MetricField",
    "MetricKind",
    "Opts",
    "UnknownMetricKindError",
    "composite_metric",
    "convert",
    "metric",
    "to_counter",
    "to_counter_vec",
    "to_gauge",
    "to_gauge_vec",
    "to_histogram",
    "to_histogram_vec",
    "to_summary",
    "to_summary_vec",
]
