# Cache block class holding per-line features and the predicted reuse score
from dataclasses import dataclass
from typing import Hashable


@dataclass
class CacheBlock:
    id: Hashable
    recency: int = 0  # 0 = most recently used
    frequency: int = 1
    score: float = 0.0

    def hit(self) -> None:
        self.frequency += 1
        self.recency = 0

    def age(self) -> None:
        self.recency += 1
