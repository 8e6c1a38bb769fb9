"""
Heap benchmark harness

Times the heap operations over exponentially growing random inputs and
writes the averages to a CSV report.

Usage examples:
    python -m priority_heap.benchmark
    python -m priority_heap.benchmark --kind max --base-input 50 --rounds 8 \
        --output max_heap_performance.csv
"""

import argparse
import csv
import functools
import random
import statistics
import sys
import time

from .heap import Heap, MaxHeap, MinHeap

DEFAULT_OUTPUT_CSV = "heap_performance_with_space.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 12

_HEAP_FACTORIES = {"min": MinHeap, "max": MaxHeap}


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Time one heap operation over fresh random inputs of `input_size` items.

    Returns the mean and standard deviation of the wall-clock time in ms.
    """
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def heap_size_bytes(heap: Heap) -> int:
    """Approximate memory held by a heap: object, backing list and live items."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._items)
    for item in heap.to_list():
        total += sys.getsizeof(item)
    return total


def measure_space_efficiency(operation, input_size: int, iterations: int = 3):
    """Return average memory used by the heap the operation leaves behind (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        sizes.append(heap_size_bytes(operation(data)))
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_add(data, heap_cls=MinHeap):
    heap = heap_cls()
    for item in data:
        heap.add(item)
    return heap


def bench_drain(data, heap_cls=MinHeap):
    heap = bench_add(data, heap_cls)
    for _ in heap:
        pass
    return heap


def bench_peek(data, heap_cls=MinHeap):
    heap = bench_add(data, heap_cls)
    for _ in range(min(3, len(data))):
        heap.peek()
    return heap


OPERATIONS = {
    "add": bench_add,
    "drain": bench_drain,
    "peek": bench_peek,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT,
                   rounds: int = DEFAULT_ROUNDS, kind: str = "min"):
    """Run exponential performance tests for the heap operations."""
    if kind not in _HEAP_FACTORIES:
        raise ValueError(f"Unsupported heap kind: {kind!r}")
    heap_cls = _HEAP_FACTORIES[kind]

    input_sizes = [base_input * (2 ** i) for i in range(rounds)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, bench in OPERATIONS.items():
            op_func = functools.partial(bench, heap_cls=heap_cls)
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                avg_space = measure_space_efficiency(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")


# ----------------------------
# CLI parser setup
# ----------------------------

def _positive_int(value):
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def build_parser():
    """Build the argparse command-line parser for the benchmark."""
    p = argparse.ArgumentParser(prog="python -m priority_heap.benchmark", description="Heap benchmark")
    p.add_argument("--output", default=DEFAULT_OUTPUT_CSV, help="CSV report path")
    p.add_argument("--base-input", type=_positive_int, default=DEFAULT_BASE_INPUT)
    p.add_argument("--rounds", type=_positive_int, default=DEFAULT_ROUNDS,
                   help="number of input sizes; each doubles the previous")
    p.add_argument("--kind", choices=sorted(_HEAP_FACTORIES), default="min")
    return p


# ----------------------------
# Main Entry Point
# ----------------------------

def main(argv=None):
    """Entry point when invoked via `python -m priority_heap.benchmark`."""
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(argv)
    run_benchmarks(args.output, base_input=args.base_input, rounds=args.rounds, kind=args.kind)


if __name__ == "__main__":
    main()
