import csv
import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from priority_heap import benchmark
from priority_heap.heap import MaxHeap, MinHeap


def test_generate_random_list_size_and_range():
    data = benchmark.generate_random_list(50)
    assert len(data) == 50
    assert all(0 <= v <= 1000000 for v in data)


def test_operations_default_to_min_heap():
    data = [5, 1, 4]
    heap = benchmark.bench_add(data)
    assert type(heap) is MinHeap
    assert len(heap) == 3
    assert len(benchmark.bench_drain(data)) == 0
    assert benchmark.bench_peek(data).peek() == 1


def test_operations_build_requested_heap_type():
    data = [5, 1, 4]
    assert type(benchmark.bench_add(data, MaxHeap)) is MaxHeap
    assert type(benchmark.bench_drain(data, heap_cls=MaxHeap)) is MaxHeap
    assert benchmark.bench_peek(data, MaxHeap).peek() == 5


def test_measurements_are_non_negative():
    avg, std = benchmark.measure_operation_time(benchmark.bench_add, 20, iterations=2)
    assert avg >= 0 and std >= 0
    assert benchmark.measure_space_efficiency(benchmark.bench_add, 20, iterations=2) > 0


def test_run_benchmarks_writes_report(tmp_path, capsys):
    out = tmp_path / "report.csv"
    benchmark.run_benchmarks(str(out), base_input=4, rounds=2, kind="max")

    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == [
        "Input Size",
        "Operation",
        "Average Time (ms)",
        "Standard Deviation (ms)",
        "Average Space (bytes)",
    ]
    assert len(rows) == 1 + len(benchmark.OPERATIONS) * 2
    assert {r[0] for r in rows[1:]} == {"4", "8"}
    assert "Benchmark completed" in capsys.readouterr().out


def test_run_benchmarks_leaves_operations_unchanged(tmp_path):
    benchmark.run_benchmarks(str(tmp_path / "r.csv"), base_input=2, rounds=1, kind="max")
    heap = benchmark.bench_add([1, 5, 3])
    assert type(heap) is MinHeap
    assert heap.peek() == 1


def test_run_benchmarks_times_requested_heap_type(tmp_path, monkeypatch):
    built = []

    def recording_add(data, heap_cls=MinHeap):
        built.append(heap_cls)
        return MinHeap(data)

    monkeypatch.setattr(benchmark, "OPERATIONS", {"add": recording_add})
    benchmark.run_benchmarks(str(tmp_path / "r.csv"), base_input=2, rounds=1, kind="max")
    assert built and set(built) == {MaxHeap}


def test_run_benchmarks_rejects_unknown_kind(tmp_path):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), kind="median")


def test_main_parses_options(tmp_path, capsys):
    out = tmp_path / "cli.csv"
    benchmark.main(["--output", str(out), "--base-input", "2", "--rounds", "1", "--kind", "min"])
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert [r[1] for r in rows[1:]] == list(benchmark.OPERATIONS)
    assert str(out) in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["--rounds", "0"], ["--base-input", "-3"], ["--kind", "median"]])
def test_main_rejects_bad_options(argv):
    with pytest.raises(SystemExit) as exc:
        benchmark.main(argv)
    assert exc.value.code == 2
