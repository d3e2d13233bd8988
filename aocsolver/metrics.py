"""Run metrics: elapsed time and benchmarks."""

from __future__ import annotations

import time
import tracemalloc
from dataclasses import dataclass
from enum import IntFlag
from typing import Callable

from .constants import IN_PROGRESS, UNDEFINED

_BENCH_TIME = 1.0
_MAX_N = 1_000_000_000


class MetricsFlag(IntFlag):
    NONE = 1
    ELAPSED = 2
    BENCHMARK = 4

    def __str__(self) -> str:
        names = [
            label
            for flag, label in (
                (MetricsFlag.NONE, "none"),
                (MetricsFlag.ELAPSED, "elapsed"),
                (MetricsFlag.BENCHMARK, "benchmark"),
            )
            if self & flag
        ]
        return "|".join(names)


@dataclass
class Metric:
    m_type: MetricsFlag = MetricsFlag(0)
    metadata: str = ""

    def __str__(self) -> str:
        if self.m_type & MetricsFlag.NONE:
            return f"[{self.m_type}]"
        return f"{self.m_type}: {self.metadata}"

    def elapsed(self) -> Callable[[], None]:
        """Start timing; the returned callable records the elapsed time."""
        start = time.perf_counter()
        self.m_type = MetricsFlag.ELAPSED
        self.metadata = IN_PROGRESS

        def stop() -> None:
            self.metadata = time_elapsed(start)

        return stop

    def bench(self, func: Callable[[], object]) -> Callable[[], None]:
        """Prepare a benchmark; the returned callable runs it and records results."""
        self.m_type = MetricsFlag.BENCHMARK
        self.metadata = IN_PROGRESS

        def stop() -> None:
            self.metadata = bench(func)

        return stop


class Metrics(list):
    """A list of metrics."""

    def __str__(self) -> str:
        body = "".join(
            f"| {m if m is not None else UNDEFINED} |" for m in self
        )
        return "\nmetrics:\n" + body


def _format_duration(seconds: float) -> str:
    ns = int(round(seconds * 1e9))
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return f"{_trim(ns / 1e3)}µs"
    if ns < 1_000_000_000:
        return f"{_trim(ns / 1e6)}ms"
    return f"{_trim(ns / 1e9)}s"


def _trim(value: float) -> str:
    return f"{value:.9f}".rstrip("0").rstrip(".")


def time_elapsed(start: float) -> str:
    """Format the time since ``start`` (a perf_counter reading)."""
    return _format_duration(time.perf_counter() - start)


def bench(func: Callable[[], object]) -> str:
    """Benchmark ``func`` and describe the per-call cost."""
    n = 1
    total = 0.0
    try:
        while True:
            began = time.perf_counter()
            for _ in range(n):
                func()
            total = time.perf_counter() - began
            if total >= _BENCH_TIME or n >= _MAX_N:
                break
            n = min(n * 2 if total <= 0 else max(n * 2, int(n * _BENCH_TIME / total)), _MAX_N)

        was_tracing = tracemalloc.is_tracing()
        if not was_tracing:
            tracemalloc.start()
        before = tracemalloc.take_snapshot()
        func()
        after = tracemalloc.take_snapshot()
        if not was_tracing:
            tracemalloc.stop()
    except Exception:
        return "(N=0, 0 ns/op, 0 bytes/op, 0 allocs/op)"

    diff = after.compare_to(before, "lineno")
    size = sum(max(s.size_diff, 0) for s in diff)
    count = sum(max(s.count_diff, 0) for s in diff)
    ns_per_op = int(total * 1e9 / n)
    return f"(N={n}, {ns_per_op} ns/op, {size} bytes/op, {count} allocs/op)"