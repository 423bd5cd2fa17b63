from __future__ import annotations

from typing import Callable

import psutil

from .report import human_bytes

Sampler = Callable[[], "int | None"]


def process_rss() -> int | None:
    """Physical memory (resident set size) of this process, or None if unknown."""

    try:
        return psutil.Process().memory_info().rss
    except (psutil.Error, OSError):
        return None


class MemoryTracker:
    """Samples memory at the points the merge asks for and keeps the peak.

    The sampler is injectable so runs can be replayed with fixed values.
    """

    def __init__(self, sampler: Sampler | None = None) -> None:
        self._sampler = sampler or process_rss
        self.samples: list[int] = []
        self.peak = 0

    def sample(self) -> int | None:
        try:
            usage = self._sampler()
        except (psutil.Error, OSError):
            usage = None

        if usage is None:
            print("Couldn't get the current memory usage :(")
            return None

        print()
        print(f"Physical memory usage: {human_bytes(usage)}")
        self.samples.append(usage)
        self.peak = max(self.peak, usage)
        return usage
