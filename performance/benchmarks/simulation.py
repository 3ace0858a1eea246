#!/usr/bin/env python3
"""
Performance benchmarking script for Biome Flock.

Runs map generation and flock ticks headless (no rendering) to measure pure
simulation cost. Optionally profiles hot code paths with cProfile.

Usage:
    python -m performance.benchmarks.simulation [ticks] [agents]
"""
from __future__ import annotations

import cProfile
import io
import pstats
import sys
from typing import Dict, List

from config import DEFAULT_VIEWPORT, PIXEL_SIZE, SEED_COUNT
from game_state import build_initial_state
from main import simulate_tick
from performance.benchmarks.utils import (
    Timer,
    TimingStats,
    format_time_ms,
    print_section_header,
    print_metric,
    print_progress,
)
from utils import map_size_for_viewport
from world.generation import generate


def benchmark_generation(runs: int = 10) -> List[float]:
    """Time full map generation (seeds, classification, edge smoothing)."""
    width, height = map_size_for_viewport(*DEFAULT_VIEWPORT, PIXEL_SIZE)
    times = []
    for i in range(runs):
        with Timer() as t:
            generate(width, height, SEED_COUNT, rng_seed=i)
        times.append(t.elapsed)
    return times


def benchmark_ticks(num_ticks: int = 1000, agent_count: int = 20,
                    profile_hotspots: bool = False) -> Dict[str, List[float]]:
    """Time flock ticks on a default-sized scene."""
    state = build_initial_state(*DEFAULT_VIEWPORT, rng_seed=0, agent_count=agent_count)
    tick_times: List[float] = []

    profiler = cProfile.Profile() if profile_hotspots else None
    if profiler:
        profiler.enable()

    for i in range(num_ticks):
        with Timer() as t:
            simulate_tick(state)
        tick_times.append(t.elapsed)
        if i % 100 == 0:
            print_progress(i, num_ticks, "Ticks")
    print_progress(num_ticks, num_ticks, "Ticks", done=True)

    if profiler:
        profiler.disable()
        s = io.StringIO()
        pstats.Stats(profiler, stream=s).sort_stats('cumulative').print_stats(15)
        print_section_header("HOT CODE PATHS (cumulative)")
        print(s.getvalue())

    return {"tick": tick_times}


def _print_stats(title: str, stats: TimingStats) -> None:
    print(f"\n{title}")
    print_metric("Mean:", format_time_ms(stats.mean))
    print_metric("Median:", format_time_ms(stats.median))
    print_metric("Std Dev:", format_time_ms(stats.stdev))
    print_metric("Min / Max:", f"{format_time_ms(stats.min)} / {format_time_ms(stats.max)}")


def print_report(generation_times: List[float], tick_times: List[float], agent_count: int) -> None:
    width, height = map_size_for_viewport(*DEFAULT_VIEWPORT, PIXEL_SIZE)
    print_section_header(f"BIOME FLOCK BENCHMARK - {width}x{height} tiles, {agent_count} agents")

    _print_stats("MAP GENERATION", TimingStats.from_samples(generation_times))
    tick_stats = TimingStats.from_samples(tick_times)
    _print_stats("FLOCK TICK", tick_stats)
    if tick_stats.mean > 0:
        print_metric("Max TPS:", f"{1.0 / tick_stats.mean:.0f}")


def run_benchmark(num_ticks: int = 1000, agent_count: int = 20, profile_hotspots: bool = False) -> None:
    generation_times = benchmark_generation()
    tick_times = benchmark_ticks(num_ticks, agent_count, profile_hotspots)["tick"]
    print_report(generation_times, tick_times, agent_count)


if __name__ == "__main__":
    ticks = int(sys.argv[1]) if len(sys.argv) > 1 else 1000
    agents = int(sys.argv[2]) if len(sys.argv) > 2 else 20
    run_benchmark(num_ticks=ticks, agent_count=agents, profile_hotspots="--profile" in sys.argv)
