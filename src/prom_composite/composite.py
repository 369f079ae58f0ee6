"""Composite metric containers.

Collapses the per-metric construct / register / accessor boilerplate into one
class declaration:

    class HttpMetrics(CompositeMetric):
        requests = metric("counter_vec", "http_requests", "Requests served",
                          labels=["method", "code"])
        latency = metric("histogram", "http_request_seconds", "Request latency",
                         buckets=[0.01, 0.1, 1.0])

    m = HttpMetrics.register(registry)
    m.requests.labels("GET", "200").inc()
    m.latency.observe(0.05)

``register`` builds and registers every field in declaration order and either
returns a fully populated container or raises the first error encountered.
Collectors registered before the failure stay registered unless rollback is
requested (argument or PROM_COMPOSITE_ROLLBACK_ON_FAILURE).

The same class can be produced from plain data with ``composite_metric``.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from prometheus_client import REGISTRY, CollectorRegistry
from prometheus_client.metrics import MetricWrapperBase

from .defs import MetricDef
from .env import rollback_on_failure
from .errors import MetricDeclarationError
from .introspection import build_inventory
from .kinds import MetricKind

logger = logging.getLogger(__name__)

_RESERVED = frozenset({"register", "definitions", "collectors", "inventory"})


class MetricField:
    """Class-level declaration of one composite field.

    Acts as a read-only data descriptor on instances: reading returns the
    registered collector, assignment raises ``AttributeError``.
    """

    def __init__(self, kind: MetricKind | str, name: str, doc: str, *,
                 labels: Sequence[str] | str | None = None, buckets: Sequence[float] | None = None,
                 namespace: str = "", subsystem: str = "", unit: str = "") -> None:
        self._params: dict[str, Any] = {
            "name": name, "doc": doc, "kind": MetricKind.parse(kind), "labels": labels, "buckets": buckets,
            "namespace": namespace, "subsystem": subsystem, "unit": unit,
        }
        self.definition: MetricDef | None = None

    @classmethod
    def from_def(cls, definition: MetricDef) -> MetricField:
        return cls(definition.kind, definition.name, definition.doc, labels=definition.labels,
                   buckets=definition.buckets, namespace=definition.namespace,
                   subsystem=definition.subsystem, unit=definition.unit)

    def __set_name__(self, owner: type, attr: str) -> None:
        # first binding wins; other owners get a rebound copy in __init_subclass__
        if self.definition is None:
            self.definition = MetricDef(attr=attr, **self._params)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._metrics[self.definition.attr]  # type: ignore[union-attr]

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"metric {self.definition.attr!r} is read-only")  # type: ignore[union-attr]


def metric(kind: MetricKind | str, name: str, doc: str, **kwargs: Any) -> Any:
    """Declare a composite field (see ``MetricField`` for accepted keywords)."""
    return MetricField(kind, name, doc, **kwargs)


class CompositeMetric:
    """Base class for declared metric containers."""

    _definitions: tuple[MetricDef, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for attr, value in list(vars(cls).items()):
            if isinstance(value, MetricField) and value.definition is not None and value.definition.attr != attr:
                rebound = MetricField.from_def(value.definition)
                rebound.__set_name__(cls, attr)
                setattr(cls, attr, rebound)

        # names in first-declared order; each resolved to the value that wins in the MRO
        names = dict.fromkeys(attr for klass in reversed(cls.__mro__) for attr in vars(klass))
        defs: list[MetricDef] = []
        for attr in names:
            value = next(vars(klass)[attr] for klass in cls.__mro__ if attr in vars(klass))
            if not isinstance(value, MetricField) or value.definition is None:
                continue
            if attr in _RESERVED or attr.startswith("_"):
                raise MetricDeclarationError(f"{cls.__name__}.{attr}: field name is reserved")
            defs.append(value.definition)
        cls._definitions = tuple(defs)

    def __init__(self, metrics: Mapping[str, MetricWrapperBase]) -> None:
        expected = [d.attr for d in self._definitions]
        if sorted(metrics) != sorted(expected):
            raise MetricDeclarationError(
                f"{type(self).__name__} expects metrics {expected}, got {sorted(metrics)}"
            )
        self._metrics = {attr: metrics[attr] for attr in expected}

    @classmethod
    def definitions(cls) -> tuple[MetricDef, ...]:
        return cls._definitions

    @classmethod
    def register(cls, registry: CollectorRegistry | None = None, *,
                 rollback: bool | None = None) -> CompositeMetric:
        """Build every declared metric, register it with ``registry`` and return the container.

        Fields are processed in declaration order. The first failure (missing
        labels on a vector kind, a construction error from prometheus_client,
        or a registration conflict) aborts the call and is re-raised as-is.
        """
        if registry is None:
            registry = REGISTRY
        if rollback is None:
            rollback = rollback_on_failure()
        if not cls._definitions:
            raise MetricDeclarationError(f"{cls.__name__} declares no metrics")

        built: dict[str, MetricWrapperBase] = {}
        for d in cls._definitions:
            try:
                collector = d.build()
                registry.register(collector)
            except Exception:
                logger.warning("Failed registering %s.%s (%s)", cls.__name__, d.attr, d.full_name, exc_info=True)
                if rollback:
                    _unregister_all(registry, built)
                raise
            built[d.attr] = collector
            logger.debug("Registered %s.%s as %s (%s)", cls.__name__, d.attr, d.full_name, d.kind.value)

        logger.info(
            "metrics.composite.registered",
            extra={
                "event": "metrics.composite.registered",
                "composite": cls.__name__,
                "metric_count": len(built),
            },
        )
        return cls(built)

    def collectors(self) -> Iterator[tuple[str, MetricWrapperBase]]:
        yield from self._metrics.items()

    def inventory(self) -> list[dict[str, Any]]:
        return build_inventory(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self._metrics)})"


def _unregister_all(registry: CollectorRegistry, built: Mapping[str, MetricWrapperBase]) -> None:
    for attr, collector in reversed(list(built.items())):
        try:
            registry.unregister(collector)
            logger.debug("Rolled back registration of %s", attr)
        except KeyError:
            logger.debug("Rollback skipped %s: not present in registry", attr)


def composite_metric(class_name: str, defs: Sequence[MetricDef], *, module: str | None = None) -> type[CompositeMetric]:
    """Create a ``CompositeMetric`` subclass from ordered ``MetricDef`` data."""
    namespace: dict[str, Any] = {}
    for d in defs:
        if d.attr in namespace:
            raise MetricDeclarationError(f"{class_name}: duplicate field {d.attr!r}")
        namespace[d.attr] = MetricField.from_def(d)
    if module is not None:
        namespace["__module__"] = module
    return type(class_name, (CompositeMetric,), namespace)


__all__ = ["CompositeMetric", "MetricField", "composite_metric", "metric"]
