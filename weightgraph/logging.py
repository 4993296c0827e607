"""Loggers under the ``weightgraph`` namespace.

Algorithm modules hold a module-level ``LOGGER = get_logger("algo.<module>")``
and emit one debug line per run; negative cycles are reported at info level.
The level comes from ``WEIGHTGRAPH_LOG_LEVEL`` via `runtime_config()`, which
also installs the single stream handler on the package logger.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import config as wg_config


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``weightgraph`` or ``weightgraph.<name>`` at the configured level."""

    runtime = wg_config.runtime_config()
    logger = logging.getLogger("weightgraph" if name is None else f"weightgraph.{name}")
    logger.setLevel(runtime.log_level)
    return logger


__all__ = ["get_logger"]
