import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("letterboxed")


class StageTimer:
    """Collects per-stage timing and result counts for a single solve."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self.counts: dict[str, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        yield
        elapsed = time.perf_counter() - t0
        self.timings[name] = round(elapsed * 1000, 1)  # ms
        if name in self.counts:
            logger.info("stage=%s elapsed=%.1fms count=%d", name, self.timings[name], self.counts[name])
        else:
            logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    def count(self, name: str, value: int):
        self.counts[name] = value

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        """Stage timings in ms plus the total, with result counts under ``counts``."""
        return {**self.timings, "total": self.total_ms, "counts": dict(self.counts)}
