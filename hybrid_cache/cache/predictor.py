# Reuse-probability predictors, one deterministic scoring regime per workload mode
from enum import Enum


class WorkloadMode(str, Enum):
    FRIENDLY = "Friendly"
    HOSTILE = "Hostile"


class ReusePredictor:
    """Maps (frequency, recency) features to a reuse probability in [0, 1].

    Subclasses must be pure: identical features always give the identical score.
    A trained model can be dropped in by implementing ``predict``.
    """

    def predict(self, frequency: int, recency: int) -> float:
        raise NotImplementedError

    def __call__(self, frequency: int, recency: int) -> float:
        return self.predict(frequency, recency)


class FriendlyPredictor(ReusePredictor):
    # Capped below the confidence threshold, so it never drives an eviction alone
    cap = 0.85

    def predict(self, frequency: int, recency: int) -> float:
        return min(self.cap, 0.4 + 0.3 / (recency + 1))


class HostilePredictor(ReusePredictor):
    def predict(self, frequency: int, recency: int) -> float:
        if frequency >= 2:
            return 0.95  # confident keep
        if frequency == 1:
            return 0.4
        return 0.1


PREDICTORS = {
    WorkloadMode.FRIENDLY: FriendlyPredictor(),
    WorkloadMode.HOSTILE: HostilePredictor()
}


def predict_reuse_probability(frequency: int, recency: int, mode: WorkloadMode, predictors: dict = None) -> float:
    """Score a block's features under the given workload mode."""
    predictors = predictors or PREDICTORS
    return predictors[WorkloadMode(mode)].predict(frequency, recency)
