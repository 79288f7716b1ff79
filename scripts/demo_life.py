#!/usr/bin/env python3
"""
N-dimensional Life Demonstration Script

Evolves a catalogue pattern (or a random soup) under any B/S rule and
reports population and centre-of-mass metrics. Use --detect to also report
the pattern's period and displacement.

Examples:
    python scripts/demo_life.py --pattern glider --generations 40
    python scripts/demo_life.py --rule B6/S567 --dimension 3 --soup 200
"""

import sys
import os
import logging
import random

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ndlife import Life
from ndlife.core.dense import bounding_box
from ndlife.patterns import PATTERNS, detect_period, get_pattern
from ndlife.simulation import SimulationConfig, run_simulation

logger = logging.getLogger(__name__)


def random_soup(dimension: int, count: int, extent: int, rng: random.Random) -> set:
    """Scatter `count` cells uniformly in a cube of side `extent`."""
    return {
        tuple(rng.randrange(extent) for _ in range(dimension))
        for _ in range(count)
    }


def build_parser():
    import argparse
    parser = argparse.ArgumentParser(description="N-dimensional Life Demonstration")
    parser.add_argument("--rule", default="B3/S23", help="Rule in B/S notation")
    parser.add_argument("--dimension", type=int, default=2, help="Number of dimensions")
    parser.add_argument("--pattern", default="glider", choices=sorted(PATTERNS),
                        help="Catalogue pattern to seed (2-D only)")
    parser.add_argument("--soup", type=int, default=0,
                        help="Seed a random soup of this many cells instead of a pattern")
    parser.add_argument("--extent", type=int, default=16, help="Side length of the soup cube")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the soup")
    parser.add_argument("--generations", type=int, default=30, help="Evolution steps")
    parser.add_argument("--log-interval", type=int, default=5, help="Progress log interval")
    parser.add_argument("--detect", action="store_true", help="Detect period and displacement")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = SimulationConfig.from_rule_string(
            args.rule,
            dimension=args.dimension,
            generations=args.generations,
            log_interval=args.log_interval,
        )

        if args.soup:
            seed = random_soup(args.dimension, args.soup, args.extent, random.Random(args.seed))
        elif args.dimension == 2:
            seed = get_pattern(args.pattern)
        else:
            raise ValueError("Catalogue patterns are 2-D; use --soup for other dimensions")

        if args.detect:
            seed_life = Life(config.dimension, config.birth, config.survival, seed)
            found = detect_period(seed_life, max_period=max(config.generations, 1))
            if found is None:
                logger.info("No period detected")
            else:
                logger.info(f"Period {found.period}, displacement {found.displacement}")

        results = run_simulation(config, seed)

    except ValueError as e:
        logger.error(f"Demonstration failed: {e}")
        return 1

    logger.info(f"Bounding box: {bounding_box(results['final_cells'])}")
    print(f"\nRule {results['rule']}: {results['initial_live_count']} -> "
          f"{results['final_live_count']} cells after {results['final_age']} generations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
