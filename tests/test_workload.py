from collections import Counter
import pytest
from hybrid_cache.workload.synthetic_generator import WORKLOAD_NAMES, WorkloadGenerator, load_trace


@pytest.mark.parametrize("name", WORKLOAD_NAMES)
def test_every_workload_has_requested_length(name):
    trace = WorkloadGenerator(key_space_size=64, num_requests=123, seed=1).generate(name)
    assert len(trace) == 123
    assert all(isinstance(k, str) for k in trace)


@pytest.mark.parametrize("name", WORKLOAD_NAMES)
def test_same_seed_same_trace(name):
    first = WorkloadGenerator(num_requests=200, seed=5).generate(name)
    second = WorkloadGenerator(num_requests=200, seed=5).generate(name)
    assert first == second


def test_unknown_workload():
    with pytest.raises(ValueError, match="Unknown workload"):
        WorkloadGenerator().generate("Random")


def test_friendly_stays_in_working_set():
    trace = WorkloadGenerator(num_requests=500, seed=2).generate_friendly_workload(working_set=3)
    assert set(trace) <= {"B0", "B1", "B2"}


def test_mixed_stays_in_key_space():
    trace = WorkloadGenerator(key_space_size=10, num_requests=500, seed=2).generate_mixed_workload()
    assert all(0 <= int(k[1:]) < 10 for k in trace)


def test_hostile_cold_blocks_are_one_shot():
    trace = WorkloadGenerator(num_requests=70).generate_hostile_workload(hot_set_size=2, scan_length=5)
    assert trace[:9] == ["B0", "B0", "B2", "B3", "B4", "B5", "B6", "B1", "B1"]
    counts = Counter(trace)
    assert all(n == 1 for k, n in counts.items() if k not in ("B0", "B1"))


def test_alternating_flips_working_sets():
    trace = WorkloadGenerator(num_requests=40, seed=3).generate_alternating_workload(working_set=2, phase_length=10)
    assert set(trace[:10]) <= {"B0", "B1"}
    assert set(trace[10:20]) <= {"B2", "B3"}
    assert set(trace[20:30]) <= {"B0", "B1"}


def test_scan_heavy_is_periodic():
    trace = WorkloadGenerator(num_requests=20).generate_scan_heavy_workload(hot_set_size=1, scan_length=3)
    assert trace[:5] == ["B0", "B0", "B1", "B2", "B3"]
    assert trace[5:10] == trace[:5]


def test_load_trace(tmp_path):
    path = tmp_path / "trace.txt"
    path.write_text("# header\nA\n\n  B \nA\n")
    assert load_trace(str(path)) == ["A", "B", "A"]


@pytest.mark.parametrize("name,params", [
    ("Hostile", {"hot_set_size": 0}),
    ("Scan Heavy", {"hot_set_size": 0, "scan_length": 0}),
    ("Scan Heavy", {"scan_length": -1}),
    ("Friendly", {"working_set": 0}),
    ("Alternating", {"phase_length": 0}),
])
def test_degenerate_parameters_rejected(name, params):
    with pytest.raises(ValueError, match="must be at least"):
        WorkloadGenerator(num_requests=10).generate(name, params)


def test_zero_scan_length_is_allowed():
    trace = WorkloadGenerator(num_requests=4).generate("Hostile", {"hot_set_size": 2, "scan_length": 0})
    assert trace == ["B0", "B0", "B1", "B1"]
