"""Environment adapter.

Consistent helpers to parse environment variables with sane defaults and a
shared truthy set, so flag semantics are identical everywhere they are read.
"""
from __future__ import annotations

import os

TRUTHY = {"1", "true", "yes", "on", "y"}

ROLLBACK_ON_FAILURE = "PROM_COMPOSITE_ROLLBACK_ON_FAILURE"


def get_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip().lower() in TRUTHY


def rollback_on_failure() -> bool:
    return get_bool(ROLLBACK_ON_FAILURE, False)


__all__ = [
    "TRUTHY",
    "ROLLBACK_ON_FAILURE",
    "get_bool",
    "rollback_on_failure",
]
