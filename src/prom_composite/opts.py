"""Generic metric options.

``Opts`` describes one metric independently of its kind: the same value can
seed a counter, a gauge, a histogram or any of their labeled variants. The
kind-specific interpretation (labels required, buckets honoured or ignored)
belongs to the converters in ``convert``; nothing here validates.

Builder methods return a new value and never mutate the receiver:

    opts = Opts("http_request_latency_seconds", "Request latency") \
        .with_labels(["method", "route"]) \
        .with_buckets([0.01, 0.1, 1.0])
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace


def label_tuple(labels: Iterable[str] | str) -> tuple[str, ...]:
    # a bare string is one label name, not a sequence of one-letter names
    if isinstance(labels, str):
        return (labels,)
    return tuple(labels)


@dataclass(frozen=True)
class Opts:
    name: str
    description: str
    labels: tuple[str, ...] | None = None
    buckets: tuple[float, ...] | None = None
    namespace: str = ""
    subsystem: str = ""
    unit: str = ""

    def with_labels(self, labels: Iterable[str] | str) -> Opts:
        return replace(self, labels=label_tuple(labels))

    def with_buckets(self, buckets: Iterable[float]) -> Opts:
        return replace(self, buckets=tuple(buckets))

    def with_namespace(self, namespace: str) -> Opts:
        return replace(self, namespace=namespace)

    def with_subsystem(self, subsystem: str) -> Opts:
        return replace(self, subsystem=subsystem)

    def with_unit(self, unit: str) -> Opts:
        return replace(self, unit=unit)

    @property
    def full_name(self) -> str:
        """Metric name as joined by prometheus_client (namespace_subsystem_name_unit)."""
        return self.name_for("")

    def name_for(self, family: str) -> str:
        """Name the collector of ``family`` will carry; counters drop a trailing _total."""
        full = "_".join(p for p in (self.namespace, self.subsystem, self.name) if p)
        if family == "counter" and full.endswith("_total"):
            full = full[: -len("_total")]
        if self.unit and not full.endswith("_" + self.unit):
            full += "_" + self.unit
        return full

    def engine_kwargs(self) -> dict:
        """Keyword arguments shared by every prometheus_client metric constructor."""
        return {
            "namespace": self.namespace,
            "subsystem": self.subsystem,
            "unit": self.unit,
            "registry": None,
        }


__all__ = ["Opts", "label_tuple"]
