"""Timing and report helpers for the headless benchmarks."""
from __future__ import annotations

import time
from dataclasses import dataclass
from statistics import mean, median, stdev
from typing import List


class Timer:
    """Context manager; `elapsed` holds wall seconds after the block exits."""

    def __enter__(self):
        self.start = time.perf_counter()
        self.elapsed = 0.0
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start


@dataclass(frozen=True)
class TimingStats:
    mean: float = 0.0
    median: float = 0.0
    stdev: float = 0.0
    min: float = 0.0
    max: float = 0.0

    @classmethod
    def from_samples(cls, samples: List[float]) -> "TimingStats":
        if not samples:
            return cls()
        return cls(
            mean=mean(samples),
            median=median(samples),
            stdev=stdev(samples) if len(samples) > 1 else 0.0,
            min=min(samples),
            max=max(samples),
        )


def format_time_ms(seconds: float) -> str:
    return f"{seconds * 1000:.2f}ms"


def print_section_header(title: str, width: int = 72):
    rule = "-" * width
    print(f"\n{rule}\n{title}\n{rule}")


def print_metric(label: str, value: str):
    print(f"  {label:<22} {value}")


def print_progress(current: int, total: int, label: str, done: bool = False):
    """Single-line progress counter; pass done=True to end the line."""
    if done:
        print(f"    {label}: {total}/{total}")
        return
    print(f"    {label}: {current}/{total}", end="\r")
