"""Time the set operation on random trees over a series of runs."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Iterator

from .avl import build_set_tree, generate_set, operation


def time_operation(
    rng: random.Random, set_size: int = 10, min_val: int = 1, max_val: int = 50
) -> int:
    """Build five random set trees and return how long the operation took, in ns."""
    trees = [
        build_set_tree(generate_set(set_size, min_val, max_val, rng)) for _ in range(5)
    ]
    started = time.perf_counter_ns()
    operation(*trees)
    return time.perf_counter_ns() - started


def run(
    start: int = 10, stop: int = 400, rng: random.Random | None = None
) -> Iterator[tuple[int, int]]:
    """Yield ``(run number, nanoseconds)`` for each run from ``start`` up to ``stop``."""
    rng = rng or random.Random()
    for number in range(start, stop):
        yield number, time_operation(rng)


def main(argv: list[str] | None = None) -> int:
    """Print one ``number;nanoseconds`` line per run."""
    parser = argparse.ArgumentParser(description="Time the AVL set operation.")
    parser.add_argument("--start", type=int, default=10)
    parser.add_argument("--stop", type=int, default=400)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    for number, elapsed in run(args.start, args.stop, rng):
        sys.stdout.write(f"{number};{elapsed}\n")
    sys.stdout.flush()
    return 0