from __future__ import annotations

import pytest

from weightgraph import config as wg_config

_RUNTIME_ENV = (
    "WEIGHTGRAPH_LOG_LEVEL",
    "WEIGHTGRAPH_ENABLE_NUMBA",
    "WEIGHTGRAPH_VERIFY",
    "WEIGHTGRAPH_CYCLE_CHECK_INTERVAL",
)


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch):
    for key in _RUNTIME_ENV:
        monkeypatch.delenv(key, raising=False)
    wg_config.reset_runtime_config_cache()
    yield
    wg_config.reset_runtime_config_cache()


@pytest.fixture
def verify_runtime(monkeypatch: pytest.MonkeyPatch):
    """Run algorithms with their invariant checks switched on."""

    monkeypatch.setenv("WEIGHTGRAPH_VERIFY", "1")
    wg_config.reset_runtime_config_cache()
    return wg_config.runtime_config()
