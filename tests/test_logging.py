import asyncio
import logging

import pytest

from scooptalk.logging_config import CHATTY_LOGGERS, QueryMetrics, log_latency, setup_logging


def test_log_latency_sync_success(caplog):
    @log_latency("op.sync")
    def add(a, b):
        return a + b

    with caplog.at_level(logging.INFO):
        assert add(1, 2) == 3

    assert "op.sync | latency_ms=" in caplog.text
    assert "status=success" in caplog.text


def test_log_latency_async_error(caplog):
    @log_latency("op.async")
    async def fail():
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        asyncio.run(fail())

    assert "op.async" in caplog.text
    assert "status=error | error=nope" in caplog.text


def test_query_metrics():
    metrics = QueryMetrics()
    assert metrics.get_stats()["avg_latency_ms"] == 0

    metrics.record_answer("Vanilla.", 10.0)
    metrics.record_answer("", 20.0)
    metrics.record_failure(30.0)

    assert metrics.get_stats() == {
        "total_queries": 3,
        "answered": 1,
        "empty_answers": 1,
        "failed": 1,
        "avg_latency_ms": 20.0,
    }


def test_setup_logging_quiets_sdk_http_loggers():
    setup_logging(logging.DEBUG)

    for name in CHATTY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
