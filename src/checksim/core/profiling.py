"""Lightweight profiling helpers."""
import contextlib
import logging
import time

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def timer(name: str):
    start = time.perf_counter()
    yield
    elapsed = time.perf_counter() - start
    logger.info("[PROFILE] %s: %.4fs", name, elapsed)
