"""Testing helpers for metrics isolation.

``isolated_registry()`` yields a fresh ``CollectorRegistry`` and purges it on
exit so collectors never leak between tests; ``exposition()`` renders a
registry in the Prometheus text format for snapshot-style assertions.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import CollectorRegistry, generate_latest

logger = logging.getLogger(__name__)


def _purge(registry: CollectorRegistry) -> None:
    names_map = getattr(registry, "_names_to_collectors", {})
    for c in set(names_map.values()):
        try:
            registry.unregister(c)
        except KeyError:
            logger.debug("purge: collector already unregistered")


@contextmanager
def isolated_registry() -> Iterator[CollectorRegistry]:
    reg = CollectorRegistry()
    try:
        yield reg
    finally:
        _purge(reg)


def exposition(registry: CollectorRegistry) -> str:
    return generate_latest(registry).decode("utf-8")


__all__ = ["isolated_registry", "exposition"]
