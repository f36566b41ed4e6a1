from .block import CacheBlock
from .predictor import (FriendlyPredictor, HostilePredictor, PREDICTORS, ReusePredictor,
                        WorkloadMode, predict_reuse_probability)
from .feature_tracker import FeatureTracker
from .hybrid_cache import (AccessKind, AccessOutcome, DecisionRecord, EvictionMethod, HybridCache,
                           InvalidConfiguration, access, create_cache, set_workload_mode, snapshot)
from .set_associative import SetAssociativeCache
