from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _parse_check_interval(raw: str | None) -> int | None:
    interval = _parse_optional_int(raw)
    if interval is not None and interval < 1:
        raise ValueError(f"Cycle check interval must be positive, got '{raw}'.")
    return interval


def _normalise_log_level(raw: str | None) -> str:
    level = (raw or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unsupported log level '{raw}'.")
    return level


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str
    enable_numba: bool
    verify: bool
    cycle_check_interval: int | None

    def check_interval_for(self, num_vertices: int) -> int:
        """Relaxations between negative-cycle checks for a digraph of this size."""

        if self.cycle_check_interval is not None:
            return self.cycle_check_interval
        return max(num_vertices, 1)


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("weightgraph")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    log_level = _normalise_log_level(os.getenv("WEIGHTGRAPH_LOG_LEVEL"))
    enable_numba = _bool_from_env(os.getenv("WEIGHTGRAPH_ENABLE_NUMBA"), default=False)
    verify = _bool_from_env(os.getenv("WEIGHTGRAPH_VERIFY"), default=False)
    cycle_check_interval = _parse_check_interval(
        os.getenv("WEIGHTGRAPH_CYCLE_CHECK_INTERVAL")
    )

    config = RuntimeConfig(
        log_level=log_level,
        enable_numba=enable_numba,
        verify=verify,
        cycle_check_interval=cycle_check_interval,
    )
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
