import logging

import pytest

from weightgraph import config as wg_config
from weightgraph.logging import get_logger


def test_logger_respects_runtime_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WEIGHTGRAPH_LOG_LEVEL", "debug")
    wg_config.reset_runtime_config_cache()

    logger = get_logger("tests.logging")

    assert logger.level == logging.DEBUG
    assert logger.name == "weightgraph.tests.logging"


def test_package_logger_has_single_handler():
    wg_config.runtime_config()
    wg_config.reset_runtime_config_cache()
    wg_config.runtime_config()

    assert len(logging.getLogger("weightgraph").handlers) == 1


def test_negative_cycle_is_logged(caplog: pytest.LogCaptureFixture):
    from weightgraph import bellman_ford_queue
    from tests.utils import tiny_ewdnc

    with caplog.at_level(logging.INFO, logger="weightgraph"):
        bellman_ford_queue(tiny_ewdnc(), 0)

    assert any("negative cycle" in record.getMessage() for record in caplog.records)


def test_package_logger_without_name():
    logger = get_logger()

    assert logger.name == "weightgraph"
    assert logger.level == logging.INFO
