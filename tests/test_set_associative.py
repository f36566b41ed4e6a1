import pytest
from hybrid_cache.cache import AccessKind, EvictionMethod, InvalidConfiguration, SetAssociativeCache, WorkloadMode


@pytest.fixture
def cache():
    return SetAssociativeCache(num_sets=2, ways=2, block_size=64, mode=WorkloadMode.HOSTILE)


def test_address_mapping(cache):
    assert cache._addr_to_set_tag(0) == (0, 0)
    assert cache._addr_to_set_tag(63) == (0, 0)
    assert cache._addr_to_set_tag(64) == (1, 0)
    assert cache._addr_to_set_tag(128) == (0, 1)
    assert cache._addr_to_set_tag(320) == (1, 2)


def test_geometry_defaults_from_config():
    cache = SetAssociativeCache()
    assert cache.capacity() == 16 * 4
    assert cache.block_size == 64


def test_sets_evict_independently(cache):
    assert cache.access(0).kind is AccessKind.MISS_INSERT
    assert cache.access(64).kind is AccessKind.MISS_INSERT
    assert cache.access(128).kind is AccessKind.MISS_INSERT
    assert cache.access(32).kind is AccessKind.HIT

    outcome = cache.access(256)
    assert outcome.kind is AccessKind.MISS_EVICT
    # tag 0 has frequency 2 and is kept by the confident gate
    assert outcome.decision.method is EvictionMethod.ML_GUIDED
    assert outcome.decision.victim_id == 1
    assert [b.id for b in cache.snapshot(0)] == [0, 2]
    assert [b.id for b in cache.snapshot(1)] == [0]
    assert cache.size() == 3


def test_shared_monitor(cache):
    for addr in [0, 64, 0, 64, 128]:
        cache.access(addr)
    summary = cache.summary()
    assert summary["hits"] == 2
    assert summary["misses"] == 3


def test_mode_switch_applies_to_every_set(cache):
    cache.set_workload_mode(WorkloadMode.FRIENDLY)
    assert all(s.mode is WorkloadMode.FRIENDLY for s in cache.sets)
    assert cache.summary()["mode_changes"] == 1


def test_reset(cache):
    cache.access(0)
    cache.reset()
    assert cache.size() == 0
    assert cache.summary()["misses"] == 0


@pytest.mark.parametrize("kwargs", [{"num_sets": 0}, {"ways": 0}, {"block_size": 0}])
def test_invalid_geometry(kwargs):
    params = {"num_sets": 2, "ways": 2, "block_size": 64}
    params.update(kwargs)
    with pytest.raises(InvalidConfiguration):
        SetAssociativeCache(**params)
