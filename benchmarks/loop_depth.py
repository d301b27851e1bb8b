"""Loop depth benchmark.

Runs ``while_().do()`` and ``do().while_()`` loops for a configurable number
of iterations and reports how long each iteration takes. Loops run
iteratively, so iteration counts far past the interpreter's recursion limit
should complete.

Usage:
    python benchmarks/loop_depth.py [--iterations N] [--length N] [--repeats N]

Options:
    --iterations N      Loop iterations per run (default: 20000)
    --length N          Length of the Collection transformed on each pass (default: 16)
    --repeats N         Number of timed runs per loop form (default: 5)
"""

import argparse
import logging
import statistics
import sys
import time

# Keep library logging out of the measurements.
logging.basicConfig(level=logging.ERROR)

import cantus

# ---------------------------------------------------------------------------


def _run_while_do (iterations: int, length: int) -> float:

	"""Time one ``while_().do()`` loop and return elapsed seconds."""

	start = cantus.Collection([0] * length)
	counter = {"n": 0}

	def step (c: cantus.Collection) -> cantus.Collection:
		counter["n"] += 1
		return c.map_indices(0, lambda v, i: v + 1)

	began = time.perf_counter()
	result = start.while_(lambda c: c.val_at(0) < iterations).do(step)
	elapsed = time.perf_counter() - began

	assert result.val_at(0) == iterations and counter["n"] == iterations

	return elapsed


def _run_do_while (iterations: int, length: int) -> float:

	"""Time one ``do().while_()`` loop and return elapsed seconds."""

	start = cantus.Collection([0] * length)

	began = time.perf_counter()
	result = start.do(lambda c: c.map_indices(-1, lambda v, i: v + 1)).while_(lambda c: c.val_at(-1) < iterations)
	elapsed = time.perf_counter() - began

	assert result.val_at(-1) == iterations

	return elapsed


def _print_report (label: str, timings: list[float], iterations: int) -> None:

	per_iteration_us = [t / iterations * 1e6 for t in timings]

	print(f"\n{label}: {iterations} iterations, {len(timings)} runs")
	print(f"{'─' * 62}")
	print(f"  Mean run        : {statistics.mean(timings) * 1000:>10.3f} ms")
	print(f"  Best run        : {min(timings) * 1000:>10.3f} ms")
	print(f"  Per iteration   : {statistics.mean(per_iteration_us):>10.3f} μs")
	print(f"{'─' * 62}")


def main () -> None:

	parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("--iterations", type=int, default=20000, help="Loop iterations per run (default: 20000)")
	parser.add_argument("--length",     type=int, default=16,    help="Collection length (default: 16)")
	parser.add_argument("--repeats",    type=int, default=5,     help="Timed runs per loop form (default: 5)")
	args = parser.parse_args()

	print(f"Recursion limit: {sys.getrecursionlimit()}")

	while_do = [_run_while_do(args.iterations, args.length) for _ in range(args.repeats)]
	_print_report("while_().do()", while_do, args.iterations)

	do_while = [_run_do_while(args.iterations, args.length) for _ in range(args.repeats)]
	_print_report("do().while_()", do_while, args.iterations)

	print()


if __name__ == "__main__":
	main()
