# Hybrid replacement policy: score-guided eviction gated by confidence, LRU otherwise
from dataclasses import dataclass, replace
from enum import Enum
from numbers import Integral
from typing import Hashable, List, Optional, Tuple
from .block import CacheBlock
from .feature_tracker import FeatureTracker
from .predictor import PREDICTORS, WorkloadMode
from ..config import CONFIG
from ..metrics.monitor import MetricsMonitor


class InvalidConfiguration(ValueError):
    """Raised when a cache is built with an unusable geometry."""


class EvictionMethod(str, Enum):
    ML_GUIDED = "MLGuided"
    LRU_FALLBACK = "LRUFallback"


class AccessKind(str, Enum):
    HIT = "Hit"
    MISS_INSERT = "MissInsert"
    MISS_EVICT = "MissEvict"


@dataclass(frozen=True)
class DecisionRecord:
    victim_id: Hashable
    method: EvictionMethod
    confidence: float


@dataclass(frozen=True)
class AccessOutcome:
    kind: AccessKind
    block_id: Hashable
    decision: Optional[DecisionRecord] = None

    @property
    def hit(self) -> bool:
        return self.kind == AccessKind.HIT


class HybridCache:
    """Fully associative cache of ``capacity`` blocks with a confidence-gated policy.

    Not thread-safe: callers sharing one instance must serialize ``access``.
    """

    def __init__(self, capacity: int, mode: WorkloadMode = None, config: dict = None,
                 predictors: dict = None, monitor: MetricsMonitor = None):
        if not isinstance(capacity, Integral) or isinstance(capacity, bool) or capacity <= 0:
            raise InvalidConfiguration(f"Cache capacity must be a positive integer, got {capacity!r}")
        self.config = config or CONFIG
        self.capacity = capacity
        self.mode = WorkloadMode(mode or self.config["default_workload_mode"])
        self.threshold = self.config["confidence_threshold"]
        self.predictors = predictors or PREDICTORS
        self.tracker = FeatureTracker(self._predict)
        self.monitor = monitor or MetricsMonitor()
        self.blocks: List[CacheBlock] = []
        self._confidence = 0.0

    def _predict(self, frequency: int, recency: int, mode: WorkloadMode) -> float:
        return self.predictors[mode].predict(frequency, recency)

    def reset(self) -> None:
        """Reset the cache to its initial state."""
        self.blocks.clear()
        self._confidence = 0.0
        self.monitor.reset()

    def size(self) -> int:
        return len(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __contains__(self, block_id: Hashable) -> bool:
        return self._find(block_id) is not None

    def set_workload_mode(self, mode: WorkloadMode) -> None:
        """Switch scoring regime; resident scores are refreshed on the next access."""
        mode = WorkloadMode(mode)
        if mode != self.mode:
            self.monitor.record_mode_change(self.mode.value, mode.value)
        self.mode = mode

    def confidence(self) -> float:
        """Max score seen at the last eviction decision (0.0 before any eviction)."""
        return self._confidence

    def snapshot(self) -> Tuple[CacheBlock, ...]:
        return tuple(replace(block) for block in self.blocks)

    def _find(self, block_id: Hashable) -> Optional[int]:
        for idx, block in enumerate(self.blocks):
            if block.id == block_id:
                return idx
        return None

    def access(self, block_id: Hashable) -> AccessOutcome:
        hit_index = self._find(block_id)
        if hit_index is not None:
            self.tracker.touch(self.blocks, block_id, self.mode)
            self.monitor.record_operation("access", block_id, True)
            return AccessOutcome(AccessKind.HIT, block_id)

        self.monitor.record_operation("access", block_id, False)
        new_block = CacheBlock(block_id)
        self.tracker.init_features(self.blocks, new_block, self.mode)

        if len(self.blocks) < self.capacity:
            self.blocks.append(new_block)
            return AccessOutcome(AccessKind.MISS_INSERT, block_id)

        decision = self._evict(new_block)
        return AccessOutcome(AccessKind.MISS_EVICT, block_id, decision)

    def _evict(self, new_block: CacheBlock) -> DecisionRecord:
        """Pick a victim among freshly scored residents and put ``new_block`` in its slot."""
        max_score = max(block.score for block in self.blocks)
        self._confidence = max_score

        # Strict comparison: a score equal to the threshold still falls back to LRU
        if max_score > self.threshold:
            victim_index = self._select_min_score()
            method = EvictionMethod.ML_GUIDED
        else:
            victim_index = self._select_max_recency()
            method = EvictionMethod.LRU_FALLBACK

        victim = self.blocks[victim_index]
        self.blocks[victim_index] = new_block
        self.monitor.record_eviction(victim.id, method.value, max_score)
        return DecisionRecord(victim.id, method, max_score)

    # Ties go to the lowest index so identical traces replay identically
    def _select_min_score(self) -> int:
        victim_index = 0
        for idx, block in enumerate(self.blocks):
            if block.score < self.blocks[victim_index].score:
                victim_index = idx
        return victim_index

    def _select_max_recency(self) -> int:
        victim_index = 0
        for idx, block in enumerate(self.blocks):
            if block.recency > self.blocks[victim_index].recency:
                victim_index = idx
        return victim_index

    def summary(self) -> dict:
        return self.monitor.summary()


def create_cache(capacity: int, mode: WorkloadMode = None, config: dict = None) -> HybridCache:
    return HybridCache(capacity, mode, config)


def set_workload_mode(cache: HybridCache, mode: WorkloadMode) -> None:
    cache.set_workload_mode(mode)


def access(cache: HybridCache, block_id: Hashable) -> AccessOutcome:
    return cache.access(block_id)


def snapshot(cache: HybridCache) -> Tuple[CacheBlock, ...]:
    return cache.snapshot()
