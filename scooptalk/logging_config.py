"""Logging for the query service and ingestion command, plus per-process query counters."""

import asyncio
import logging
import time
from functools import wraps
from typing import Callable, Union

# The Gemini and Qdrant SDKs log every HTTP request at INFO through these.
CHATTY_LOGGERS = ("httpx", "httpcore", "google_genai")


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_latency(operation_name: str):
    """Log ``<operation> | latency_ms=.. | status=success|error`` around a sync or async call."""

    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        def _log(start: float, error: Exception = None):
            latency_ms = (time.perf_counter() - start) * 1000
            if error is None:
                logger.info(f"{operation_name} | latency_ms={latency_ms:.2f} | status=success")
            else:
                logger.error(f"{operation_name} | latency_ms={latency_ms:.2f} | status=error | error={error}")

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _log(start, e)
                raise
            _log(start)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _log(start, e)
                raise
            _log(start)
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


class QueryMetrics:
    """Counters behind GET /health. Single event loop, so no locking."""

    def __init__(self):
        self.total_queries = 0
        self.answered = 0
        self.empty_answers = 0
        self.failed = 0
        self.total_latency_ms = 0.0

    def record_answer(self, answer: str, latency_ms: float):
        self.total_queries += 1
        self.total_latency_ms += latency_ms
        if answer:
            self.answered += 1
        else:
            self.empty_answers += 1

    def record_failure(self, latency_ms: float):
        self.total_queries += 1
        self.total_latency_ms += latency_ms
        self.failed += 1

    def get_stats(self) -> dict:
        avg_latency = self.total_latency_ms / self.total_queries if self.total_queries else 0
        return {
            "total_queries": self.total_queries,
            "answered": self.answered,
            "empty_answers": self.empty_answers,
            "failed": self.failed,
            "avg_latency_ms": round(avg_latency, 2),
        }
