#!/usr/bin/env python3
"""
Memory and time profiling for sparse generation steps.

Evolves a random soup and records wall-clock time and process RSS per
generation. Each step costs O(alive * (3**N - 1)), so time grows with
population and steeply with dimension.
"""

import psutil
import os
import time
import json
import random
import sys
from typing import Dict, List

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ndlife import Life
from ndlife.core.rules import parse_rule_string


def measure_memory_mb() -> float:
    """Get current process memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def create_soup_life(dimension: int, rule: str, cells: int, extent: int, seed: int = 0) -> Life:
    """Create a life seeded with a random soup."""
    rng = random.Random(seed)
    birth, survival = parse_rule_string(rule)
    soup = {
        tuple(rng.randrange(extent) for _ in range(dimension))
        for _ in range(cells)
    }
    return Life(dimension, birth, survival, soup)


def profile_generations(life: Life, generations: int = 20) -> Dict:
    """Profile time and memory over several generations."""
    print(f"🔍 Profiling {generations} generations of {life!r}...")

    baseline_mb = measure_memory_mb()
    samples: List[Dict] = []

    for _ in range(generations):
        population = life.population
        start = time.perf_counter()
        life.next_generation()
        elapsed = time.perf_counter() - start

        samples.append({
            'age': life.age,
            'population_before': population,
            'population_after': life.population,
            'seconds': elapsed,
            'memory_mb': measure_memory_mb(),
        })

    peak_mb = max(s['memory_mb'] for s in samples) if samples else baseline_mb
    total_seconds = sum(s['seconds'] for s in samples)

    return {
        'dimension': life.dimension,
        'generations': generations,
        'baseline_memory_mb': baseline_mb,
        'peak_memory_mb': peak_mb,
        'memory_growth_mb': peak_mb - baseline_mb,
        'total_seconds': total_seconds,
        'samples': samples,
    }


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Profile sparse life generations")
    parser.add_argument("--dimension", type=int, default=2, help="Number of dimensions")
    parser.add_argument("--rule", default="B3/S23", help="Rule in B/S notation")
    parser.add_argument("--cells", type=int, default=5000, help="Initial soup size")
    parser.add_argument("--extent", type=int, default=128, help="Side length of the soup cube")
    parser.add_argument("--generations", type=int, default=20, help="Generations to profile")
    parser.add_argument("--output", default=None, help="Write JSON report to this file")

    args = parser.parse_args()

    life = create_soup_life(args.dimension, args.rule, args.cells, args.extent)
    report = profile_generations(life, args.generations)

    print(f"Peak memory: {report['peak_memory_mb']:.1f} MB "
          f"(+{report['memory_growth_mb']:.1f} MB)")
    print(f"Total time: {report['total_seconds']:.3f} s "
          f"({report['total_seconds'] / max(args.generations, 1):.4f} s/generation)")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report, f, indent=2)
        print(f"Report saved to: {args.output}")
