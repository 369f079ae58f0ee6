"""Declarative metric definitions.

A ``MetricDef`` is the data form of one composite field: the attribute it is
exposed under plus everything needed to build the collector. Definitions are
immutable; building one always produces a fresh detached collector.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from prometheus_client.metrics import MetricWrapperBase

from .convert import convert
from .kinds import MetricKind
from .opts import Opts, label_tuple


@dataclass(frozen=True)
class MetricDef:
    attr: str                 # Attribute name on the composite
    name: str                 # Prometheus metric name
    doc: str                  # Help text
    kind: MetricKind
    labels: Sequence[str] | str | None = None
    buckets: Sequence[float] | None = None
    namespace: str = ""
    subsystem: str = ""
    unit: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", MetricKind.parse(self.kind))
        if self.labels is not None:
            object.__setattr__(self, "labels", label_tuple(self.labels))
        if self.buckets is not None:
            object.__setattr__(self, "buckets", tuple(self.buckets))

    @property
    def opts(self) -> Opts:
        opts = Opts(self.name, self.doc, namespace=self.namespace, subsystem=self.subsystem, unit=self.unit)
        if self.labels is not None:
            opts = opts.with_labels(self.labels)
        if self.buckets is not None:
            opts = opts.with_buckets(self.buckets)
        return opts

    @property
    def full_name(self) -> str:
        return self.opts.name_for(self.kind.family)

    def build(self) -> MetricWrapperBase:
        return convert(self.opts, self.kind)


__all__ = ["MetricDef"]
