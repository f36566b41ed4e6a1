from typing import Dict, Hashable, List
from time import time
import psutil
import os


class MetricsMonitor:
    def __init__(self):
        """Initialize the metrics monitor."""
        self.hits: int = 0
        self.misses: int = 0
        self.operations: List[Dict] = []
        self.evictions: List[Dict] = []  # Victim, method and confidence per eviction
        self.mode_changes: List[Dict] = []
        self.memory_usage: List[Dict] = []
        self.process = psutil.Process(os.getpid())
        self.ml_eviction_count = 0
        self.lru_fallback_count = 0

    def record_operation(self, op_type: str, key: Hashable, hit: bool) -> None:
        """Record a cache access and whether it hit."""
        if hit:
            self.hits += 1
        else:
            self.misses += 1
        self.operations.append({
            "time": time(),
            "type": op_type,
            "key": key,
            "hit": hit,
            "total_ops": self.hits + self.misses
        })

    def record_eviction(self, victim: Hashable, method: str, confidence: float) -> None:
        """Record an eviction decision."""
        self.evictions.append({
            "time": time(),
            "victim": victim,
            "method": method,
            "confidence": confidence
        })
        if method == "MLGuided":
            self.ml_eviction_count += 1
        else:
            self.lru_fallback_count += 1

    def record_mode_change(self, old_mode: str, new_mode: str) -> None:
        self.mode_changes.append({
            "time": time(),
            "from": old_mode,
            "to": new_mode
        })

    def record_memory_usage(self) -> None:
        """Record current process memory usage."""
        memory_mb = self.process.memory_info().rss / 1024 / 1024  # Convert to MB
        self.memory_usage.append({
            "time": time(),
            "memory_mb": memory_mb
        })

    def get_hit_ratio(self) -> float:
        """Calculate the current hit ratio."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def get_eviction_count(self) -> int:
        return len(self.evictions)

    def get_ml_eviction_count(self) -> int:
        return self.ml_eviction_count

    def get_lru_fallback_count(self) -> int:
        return self.lru_fallback_count

    def get_avg_confidence(self) -> float:
        if not self.evictions:
            return 0.0
        return sum(e["confidence"] for e in self.evictions) / len(self.evictions)

    def reset(self) -> None:
        """Reset all metrics."""
        self.hits = 0
        self.misses = 0
        self.operations = []
        self.evictions = []
        self.mode_changes = []
        self.memory_usage = []
        self.ml_eviction_count = 0
        self.lru_fallback_count = 0

    def summary(self) -> Dict:
        """Return a summary of collected metrics."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_ratio": self.get_hit_ratio(),
            "total_operations": len(self.operations),
            "evictions": self.get_eviction_count(),
            "ml_evictions": self.ml_eviction_count,
            "lru_fallbacks": self.lru_fallback_count,
            "avg_confidence": self.get_avg_confidence(),
            "mode_changes": len(self.mode_changes),
            "memory_samples": len(self.memory_usage),
            "avg_memory_mb": sum(m["memory_mb"] for m in self.memory_usage) / (len(self.memory_usage) or 1)
        }
