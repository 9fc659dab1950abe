#!/usr/bin/env python3
"""Benchmark suite for PySkip comparing against a bisect-maintained list."""

import argparse
import bisect
import json
import random
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyskip import SkipList


class Metrics:
    def __init__(self):
        self.insert_latencies: List[float] = []
        self.search_latencies: List[float] = []
        self.delete_latencies: List[float] = []
        self.final_height: int = 0

    def to_dict(self) -> Dict:
        return {
            "insert_latencies": self._percentiles(self.insert_latencies),
            "search_latencies": self._percentiles(self.search_latencies),
            "delete_latencies": self._percentiles(self.delete_latencies),
            "final_height": self.final_height,
        }

    @staticmethod
    def _percentiles(samples: List[float]) -> Dict:
        return {
            "p50": np.percentile(samples, 50),
            "p95": np.percentile(samples, 95),
            "p99": np.percentile(samples, 99),
        }

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()
        for name, samples in (
            ("Insert Latency", self.insert_latencies),
            ("Search Latency", self.search_latencies),
            ("Delete Latency", self.delete_latencies),
        ):
            fig.add_trace(go.Box(y=samples, name=name, boxpoints="outliers"))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )

        fig.write_html(output_path)


class BenchmarkSuite:
    def __init__(self, num_entries: int, seed: int):
        self.num_entries = num_entries
        self._rng = random.Random(seed)
        self._values = self._rng.sample(range(num_entries * 10), num_entries)
        self._probes = self._rng.sample(self._values, len(self._values))

    def run_skiplist_benchmark(self) -> Metrics:
        metrics = Metrics()
        sl = SkipList[int](rng=self._rng)

        for v in tqdm(self._values, desc="SkipList Insert"):
            start = time.perf_counter()
            sl.insert(v)
            metrics.insert_latencies.append((time.perf_counter() - start) * 1e6)

        for v in tqdm(self._probes, desc="SkipList Search"):
            start = time.perf_counter()
            sl.contains(v)
            metrics.search_latencies.append((time.perf_counter() - start) * 1e6)

        metrics.final_height = sl.height

        for v in tqdm(self._probes, desc="SkipList Delete"):
            start = time.perf_counter()
            sl.delete(v)
            metrics.delete_latencies.append((time.perf_counter() - start) * 1e6)

        return metrics

    def run_bisect_benchmark(self) -> Metrics:
        metrics = Metrics()
        items: List[int] = []

        for v in tqdm(self._values, desc="bisect Insert"):
            start = time.perf_counter()
            bisect.insort(items, v)
            metrics.insert_latencies.append((time.perf_counter() - start) * 1e6)

        for v in tqdm(self._probes, desc="bisect Search"):
            start = time.perf_counter()
            i = bisect.bisect_left(items, v)
            _ = i < len(items) and items[i] == v
            metrics.search_latencies.append((time.perf_counter() - start) * 1e6)

        for v in tqdm(self._probes, desc="bisect Delete"):
            start = time.perf_counter()
            i = bisect.bisect_left(items, v)
            if i < len(items) and items[i] == v:
                del items[i]
            metrics.delete_latencies.append((time.perf_counter() - start) * 1e6)

        return metrics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of entries")
    parser.add_argument("--seed", type=int, default=0, help="Seed for values and level assignment")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.seed)
    skiplist_metrics = suite.run_skiplist_benchmark()
    bisect_metrics = suite.run_bisect_benchmark()

    skiplist_metrics.plot_latencies(
        "PySkip Latency Distribution",
        args.output / "skiplist_latencies.html"
    )
    bisect_metrics.plot_latencies(
        "bisect Latency Distribution",
        args.output / "bisect_latencies.html"
    )

    with open(args.output / "metrics.json", "w") as f:
        json.dump({
            "skiplist": skiplist_metrics.to_dict(),
            "bisect": bisect_metrics.to_dict(),
        }, f, indent=2)


if __name__ == "__main__":
    main()
