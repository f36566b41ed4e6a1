from cachetools import LRUCache as CacheToolsLRUCache
from typing import Any, Hashable
from ..metrics.monitor import MetricsMonitor


class LRUCache:
    def __init__(self, max_size: int):
        """Initialize LRU baseline with a maximum size."""
        self.max_size = max_size
        self.cache = CacheToolsLRUCache(maxsize=max_size)
        self.monitor = MetricsMonitor()

    def reset(self) -> None:
        self.cache.clear()
        self.monitor.reset()

    def get(self, key: Hashable) -> Any:
        """Get a value from the cache."""
        try:
            value = self.cache[key]
            self.monitor.record_operation("get", key, True)
            return value
        except KeyError:
            self.monitor.record_operation("get", key, False)
            return None

    def put(self, key: Hashable, value: Any) -> None:
        """Put a value into the cache."""
        if key not in self.cache and len(self.cache) >= self.max_size:
            victim, _ = self.cache.popitem()  # least recently used
            self.monitor.record_eviction(victim, "LRUFallback", 0.0)
        self.cache[key] = value

    def access(self, key: Hashable) -> bool:
        """Touch a block, inserting it on a miss. Returns True on a hit."""
        hit = key in self.cache
        self.get(key)
        if not hit:
            self.put(key, key)
        return hit

    def size(self) -> int:
        return len(self.cache)

    def summary(self) -> dict:
        """Return cache performance summary."""
        return self.monitor.summary()
