"""
utils.timing — pomiar czasu etapów do logów
"""

from __future__ import annotations
import time
import logging
from contextlib import contextmanager

log = logging.getLogger("csvprober.timing")

@contextmanager
def timer(msg: str, logger: logging.Logger | None = None):
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        (logger or log).info(f"{msg} — {dt:.3f}s")
