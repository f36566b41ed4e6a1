from typing import Callable, Hashable, List
from .block import CacheBlock
from .predictor import WorkloadMode, predict_reuse_probability

# Keeps recency/frequency features and scores in step with the access history.
# Every access is a global tick: all other resident blocks age by one.


class FeatureTracker:
    def __init__(self, score_fn: Callable[[int, int, WorkloadMode], float] = predict_reuse_probability):
        self.score_fn = score_fn

    def score(self, block: CacheBlock, mode: WorkloadMode) -> float:
        return self.score_fn(block.frequency, block.recency, mode)

    def rescore(self, blocks: List[CacheBlock], mode: WorkloadMode) -> None:
        for block in blocks:
            block.score = self.score(block, mode)

    def touch(self, blocks: List[CacheBlock], accessed_id: Hashable, mode: WorkloadMode) -> None:
        """Register an access: the matching block (if resident) becomes MRU, everyone else ages."""
        if not blocks:
            return
        for block in blocks:
            if block.id == accessed_id:
                block.hit()
            else:
                block.age()
        self.rescore(blocks, mode)

    def init_features(self, blocks: List[CacheBlock], new_block: CacheBlock, mode: WorkloadMode) -> None:
        """Prepare a block about to be inserted; insertion ages every current resident."""
        self.touch(blocks, new_block.id, mode)
        new_block.recency = 0
        new_block.frequency = 1
        new_block.score = self.score(new_block, mode)
