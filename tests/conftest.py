"""Pytest configuration for prom_composite.

Responsibilities:
1. Ensure src/ is importable without an editable install.
2. Provide a fresh CollectorRegistry per test so registrations never leak.
3. Neutralize environment flags that change registration behavior.
"""
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from prom_composite.env import ROLLBACK_ON_FAILURE  # noqa: E402
from prom_composite.testing import isolated_registry  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(ROLLBACK_ON_FAILURE, raising=False)
    yield


@pytest.fixture()
def registry():
    with isolated_registry() as reg:
        yield reg
