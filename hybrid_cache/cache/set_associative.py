from typing import List, Tuple
from .block import CacheBlock
from .hybrid_cache import AccessOutcome, HybridCache, InvalidConfiguration
from .predictor import WorkloadMode
from ..config import CONFIG
from ..metrics.monitor import MetricsMonitor


class SetAssociativeCache:
    """A set-associative cache whose sets each run the hybrid replacement policy.

    Addresses are split into (set index, tag) by block number; the tag is the
    block id inside its set. All sets share one monitor, so hit ratios and
    eviction counts cover the whole cache.
    """

    def __init__(self, num_sets: int = None, ways: int = None, block_size: int = None,
                 mode: WorkloadMode = None, config: dict = None):
        self.config = config or CONFIG
        geometry = self.config["set_associative"]
        self.num_sets = num_sets if num_sets is not None else geometry["num_sets"]
        self.ways = ways if ways is not None else geometry["associativity"]
        self.block_size = block_size if block_size is not None else geometry["block_size"]
        if self.num_sets <= 0 or self.block_size <= 0:
            raise InvalidConfiguration(
                f"num_sets and block_size must be positive, got {self.num_sets} and {self.block_size}")

        self.monitor = MetricsMonitor()
        self.sets: List[HybridCache] = [
            HybridCache(self.ways, mode, self.config, monitor=self.monitor)
            for _ in range(self.num_sets)
        ]

    @property
    def mode(self) -> WorkloadMode:
        return self.sets[0].mode

    def _addr_to_set_tag(self, addr: int) -> Tuple[int, int]:
        block = addr // self.block_size
        set_idx = block % self.num_sets
        tag = block // self.num_sets
        return set_idx, tag

    def access(self, addr: int) -> AccessOutcome:
        set_idx, tag = self._addr_to_set_tag(addr)
        return self.sets[set_idx].access(tag)

    def set_workload_mode(self, mode: WorkloadMode) -> None:
        # Only one mode change is recorded for the whole cache
        if WorkloadMode(mode) != self.mode:
            self.monitor.record_mode_change(self.mode.value, WorkloadMode(mode).value)
        for cache_set in self.sets:
            cache_set.mode = WorkloadMode(mode)

    def snapshot(self, set_idx: int) -> Tuple[CacheBlock, ...]:
        return self.sets[set_idx].snapshot()

    def size(self) -> int:
        return sum(cache_set.size() for cache_set in self.sets)

    def capacity(self) -> int:
        return self.num_sets * self.ways

    def reset(self) -> None:
        for cache_set in self.sets:
            cache_set.reset()

    def summary(self) -> dict:
        return self.monitor.summary()
