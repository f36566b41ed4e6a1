import pytest
from hybrid_cache.cache.predictor import (FriendlyPredictor, HostilePredictor, ReusePredictor, WorkloadMode,
                                          predict_reuse_probability)


@pytest.mark.parametrize("frequency,expected", [(0, 0.1), (1, 0.4), (2, 0.95), (7, 0.95)])
def test_hostile_scores_follow_frequency(frequency, expected):
    assert predict_reuse_probability(frequency, 3, WorkloadMode.HOSTILE) == expected


def test_hostile_ignores_recency():
    scores = {predict_reuse_probability(2, r, WorkloadMode.HOSTILE) for r in range(10)}
    assert scores == {0.95}


def test_friendly_decays_with_recency():
    assert predict_reuse_probability(1, 0, WorkloadMode.FRIENDLY) == pytest.approx(0.7)
    assert predict_reuse_probability(1, 1, WorkloadMode.FRIENDLY) == pytest.approx(0.55)
    assert predict_reuse_probability(1, 2, WorkloadMode.FRIENDLY) == pytest.approx(0.5)


def test_friendly_never_reaches_threshold():
    for frequency in range(5):
        for recency in range(50):
            score = predict_reuse_probability(frequency, recency, WorkloadMode.FRIENDLY)
            assert 0.4 < score <= FriendlyPredictor.cap < 0.88


def test_scores_are_deterministic():
    for mode in WorkloadMode:
        first = [predict_reuse_probability(f, r, mode) for f in range(4) for r in range(6)]
        second = [predict_reuse_probability(f, r, mode) for f in range(4) for r in range(6)]
        assert first == second


def test_mode_accepts_plain_strings():
    assert predict_reuse_probability(2, 0, "Hostile") == 0.95
    assert WorkloadMode("Friendly") is WorkloadMode.FRIENDLY


def test_custom_predictor_table():
    class Always(ReusePredictor):
        def predict(self, frequency, recency):
            return 0.25

    table = {WorkloadMode.FRIENDLY: Always(), WorkloadMode.HOSTILE: HostilePredictor()}
    assert predict_reuse_probability(5, 0, WorkloadMode.FRIENDLY, table) == 0.25
    assert predict_reuse_probability(5, 0, WorkloadMode.HOSTILE, table) == 0.95


def test_base_predictor_is_abstract():
    with pytest.raises(NotImplementedError):
        ReusePredictor()(1, 0)
