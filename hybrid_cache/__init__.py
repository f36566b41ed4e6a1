from .cache import (AccessKind, AccessOutcome, CacheBlock, DecisionRecord, EvictionMethod, HybridCache,
                    InvalidConfiguration, SetAssociativeCache, WorkloadMode, access, create_cache,
                    predict_reuse_probability, set_workload_mode, snapshot)
from .config import CONFIG

__version__ = "0.1.0"
