# Synthetic block-id traces for the named workload patterns
from typing import Dict, List
import numpy as np

WORKLOAD_NAMES = ["Friendly", "Mixed", "Hostile", "Alternating", "Scan Heavy"]

# Smallest value each generator knob accepts
PARAM_MINIMUMS = {
    "working_set": 1,
    "hot_set_size": 1,
    "scan_length": 0,
    "phase_length": 1
}


class WorkloadGenerator:
    def __init__(self, key_space_size: int = 256, num_requests: int = 2000, seed: int = None):
        self.key_space_size = key_space_size
        self.num_requests = num_requests
        self.rng = np.random.default_rng(seed)

    @staticmethod
    def _block_id(n: int) -> str:
        return f"B{int(n)}"

    def _fill(self, pattern: List[str]) -> List[str]:
        """Repeat a pattern until the trace is num_requests long."""
        repeats = -(-self.num_requests // len(pattern))
        return (pattern * repeats)[:self.num_requests]

    def generate_friendly_workload(self, working_set: int = 4) -> List[str]:
        """Random reuse inside a working set that fits in the cache."""
        keys = self.rng.integers(0, working_set, self.num_requests)
        return [self._block_id(k) for k in keys]

    def generate_mixed_workload(self, alpha: float = 1.2) -> List[str]:
        """Zipf-distributed popularity over the whole key space."""
        keys = self.rng.zipf(alpha, self.num_requests) % self.key_space_size
        return [self._block_id(k) for k in keys]

    def generate_hostile_workload(self, hot_set_size: int = 2, scan_length: int = 5) -> List[str]:
        """Hot blocks accessed in bursts of two, separated by one-shot streaming blocks."""
        trace = []
        next_cold = hot_set_size
        step = 0
        while len(trace) < self.num_requests:
            hot = self._block_id(step % hot_set_size)
            trace.extend([hot, hot])
            for _ in range(scan_length):
                trace.append(self._block_id(next_cold))
                next_cold += 1
            step += 1
        return trace[:self.num_requests]

    def generate_alternating_workload(self, working_set: int = 4, phase_length: int = 50) -> List[str]:
        """Phases that flip between two disjoint working sets."""
        trace = []
        phase = 0
        while len(trace) < self.num_requests:
            base = (phase % 2) * working_set
            keys = self.rng.integers(base, base + working_set, phase_length)
            trace.extend(self._block_id(k) for k in keys)
            phase += 1
        return trace[:self.num_requests]

    def generate_scan_heavy_workload(self, hot_set_size: int = 2, scan_length: int = 5) -> List[str]:
        """A cyclic scan larger than the cache, with bursts of hot blocks between passes."""
        hot = [self._block_id(k) for k in range(hot_set_size)]
        scan = [self._block_id(hot_set_size + k) for k in range(scan_length)]
        pattern = []
        for block in hot:
            pattern.extend([block, block])
        pattern.extend(scan)
        return self._fill(pattern)

    def generate(self, name: str, params: Dict = None) -> List[str]:
        params = params or {}
        for key, minimum in PARAM_MINIMUMS.items():
            if key in params and params[key] < minimum:
                raise ValueError(f"Workload parameter {key} must be at least {minimum}, got {params[key]}")
        if name == "Friendly":
            return self.generate_friendly_workload(params.get("working_set", 4))
        elif name == "Mixed":
            return self.generate_mixed_workload(params.get("zipf_alpha", 1.2))
        elif name == "Hostile":
            return self.generate_hostile_workload(params.get("hot_set_size", 2), params.get("scan_length", 5))
        elif name == "Alternating":
            return self.generate_alternating_workload(params.get("working_set", 4), params.get("phase_length", 50))
        elif name == "Scan Heavy":
            return self.generate_scan_heavy_workload(params.get("hot_set_size", 2), params.get("scan_length", 5))
        raise ValueError(f"Unknown workload: {name}")


def load_trace(path: str) -> List[str]:
    """Read one block id per line, skipping blanks and # comments."""
    blocks = []
    with open(path, 'r') as f:
        for line in f:
            s = line.strip()
            if not s or s.startswith('#'):
                continue
            blocks.append(s)
    return blocks
