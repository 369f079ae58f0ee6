"""Composite introspection.

Builds a plain-data inventory of the collectors held by a composite without
scraping the exposition format. Collector attributes are read defensively:
a collector type that lacks one of them reports ``None`` for that key.
"""
from __future__ import annotations

from typing import Any

__all__ = ["build_inventory"]


def build_inventory(composite: Any) -> list[dict[str, Any]]:
    """Return one metadata dict per field, in declaration order.

    Keys: attr, name, kind, type, labels, buckets, documentation. ``name`` is
    the full name as held by the collector; ``buckets`` is the effective
    upper-bound list (terminated by +Inf) for histograms and None otherwise.
    """
    collectors = dict(composite.collectors())
    inventory: list[dict[str, Any]] = []
    for d in composite.definitions():
        collector = collectors[d.attr]
        buckets = getattr(collector, "_upper_bounds", None) if d.kind.is_histogram else None
        inventory.append(
            {
                "attr": d.attr,
                "name": getattr(collector, "_name", d.full_name),
                "kind": d.kind.value,
                "type": getattr(collector, "_type", d.kind.family),
                "labels": list(getattr(collector, "_labelnames", ()) or ()),
                "buckets": list(buckets) if buckets is not None else None,
                "documentation": getattr(collector, "_documentation", d.doc),
            }
        )
    return inventory
