"""Typed conversion from generic ``Opts`` to prometheus_client collectors.

One converter per ``MetricKind``. All of them build the collector detached
(``registry=None``); registration is a separate step owned by the composite
protocol. Rules shared by the family:

* scalar converters ignore ``opts.labels``;
* vector converters require a non-empty ``opts.labels`` and raise
  ``LabelsRequiredError`` otherwise;
* histogram converters honour ``opts.buckets`` when present and fall back to
  ``Histogram.DEFAULT_BUCKETS`` otherwise;
* any ``ValueError`` raised by prometheus_client during construction
  propagates untouched.
"""
from __future__ import annotations

from collections.abc import Callable

from prometheus_client import Counter, Gauge, Histogram, Summary
from prometheus_client.metrics import MetricWrapperBase

from .errors import LabelsRequiredError
from .kinds import MetricKind
from .opts import Opts

Converter = Callable[[Opts], MetricWrapperBase]


def _require_labels(opts: Opts) -> tuple[str, ...]:
    if not opts.labels:
        raise LabelsRequiredError()
    return tuple(str(l) for l in opts.labels)


def _histogram_kwargs(opts: Opts) -> dict:
    kwargs = opts.engine_kwargs()
    if opts.buckets is not None:
        kwargs["buckets"] = list(opts.buckets)
    return kwargs


def to_counter(opts: Opts) -> Counter:
    return Counter(opts.name, opts.description, **opts.engine_kwargs())


def to_gauge(opts: Opts) -> Gauge:
    return Gauge(opts.name, opts.description, **opts.engine_kwargs())


def to_histogram(opts: Opts) -> Histogram:
    return Histogram(opts.name, opts.description, **_histogram_kwargs(opts))


def to_summary(opts: Opts) -> Summary:
    return Summary(opts.name, opts.description, **opts.engine_kwargs())


def to_counter_vec(opts: Opts) -> Counter:
    return Counter(opts.name, opts.description, _require_labels(opts), **opts.engine_kwargs())


def to_gauge_vec(opts: Opts) -> Gauge:
    return Gauge(opts.name, opts.description, _require_labels(opts), **opts.engine_kwargs())


def to_histogram_vec(opts: Opts) -> Histogram:
    return Histogram(opts.name, opts.description, _require_labels(opts), **_histogram_kwargs(opts))


def to_summary_vec(opts: Opts) -> Summary:
    return Summary(opts.name, opts.description, _require_labels(opts), **opts.engine_kwargs())


CONVERTERS: dict[MetricKind, Converter] = {
    MetricKind.COUNTER: to_counter,
    MetricKind.GAUGE: to_gauge,
    MetricKind.HISTOGRAM: to_histogram,
    MetricKind.SUMMARY: to_summary,
    MetricKind.COUNTER_VEC: to_counter_vec,
    MetricKind.GAUGE_VEC: to_gauge_vec,
    MetricKind.HISTOGRAM_VEC: to_histogram_vec,
    MetricKind.SUMMARY_VEC: to_summary_vec,
}


def convert(opts: Opts, kind: MetricKind | str) -> MetricWrapperBase:
    """Build a detached collector of ``kind`` from ``opts``."""
    return CONVERTERS[MetricKind.parse(kind)](opts)


__all__ = [
    "CONVERTERS",
    "Converter",
    "convert",
    "to_counter",
    "to_gauge",
    "to_histogram",
    "to_summary",
    "to_counter_vec",
    "to_gauge_vec",
    "to_histogram_vec",
    "to_summary_vec",
]
