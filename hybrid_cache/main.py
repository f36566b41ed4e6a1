from .cache.hybrid_cache import AccessKind, HybridCache
from .cache.predictor import WorkloadMode
from .config import CONFIG
from .workload.synthetic_generator import WORKLOAD_NAMES, WorkloadGenerator, load_trace
from .benchmarks.lru import LRUCache
from .metrics.excel_logger import ExcelLogger
from .metrics.visualizer import plot_hit_rate_comparison
import psutil
import os
import time
import sys
import json

CACHE_NAMES = ["Hybrid", "LRU"]


def build_cache(cache_name: str, cache_size: int, config: dict = None):
    config = config or CONFIG
    if cache_name == "Hybrid":
        return HybridCache(cache_size, config=config)
    elif cache_name == "LRU":
        return LRUCache(max_size=cache_size)
    raise ValueError(f"Unknown cache type: {cache_name}")


def build_workload(workload_name: str, cache_size: int, config: dict = None) -> list:
    config = config or CONFIG
    if workload_name not in WORKLOAD_NAMES:
        raise ValueError(f"Unknown workload: {workload_name}")
    params = dict(config["workload"])
    params["working_set"] = cache_size
    gen = WorkloadGenerator(key_space_size=params["key_space_size"],
                            num_requests=params["num_requests"],
                            seed=params["seed"])
    return gen.generate(workload_name, params)


def test_cache(cache, workload: list, cache_name: str, workload_name: str,
               mode=None, logger: ExcelLogger = None, config: dict = None) -> dict:
    """Replay a trace through one cache and return its metrics summary."""
    config = config or CONFIG
    window_size = config["performance"]["window_size"]
    process = psutil.Process(os.getpid())
    start_time = time.perf_counter()
    current_memory = process.memory_info().rss / (1024 * 1024)

    cache.reset()
    if mode is not None and isinstance(cache, HybridCache):
        cache.set_workload_mode(mode)

    for step, block_id in enumerate(workload):
        outcome = cache.access(block_id)

        if (step + 1) % window_size == 0 or (step + 1) == len(workload):
            cache.monitor.record_memory_usage()
            current_memory = cache.monitor.memory_usage[-1]["memory_mb"]

        if logger is None:
            continue
        monitor = cache.monitor
        if isinstance(cache, HybridCache):
            decision = outcome.decision
            logger.log(
                step=step,
                block_id=block_id,
                outcome=outcome.kind.value,
                hit_rate=monitor.get_hit_ratio(),
                hits=monitor.hits,
                misses=monitor.misses,
                confidence=cache.confidence(),
                mode=cache.mode.value,
                memory_mb=current_memory,
                timestamp=time.perf_counter() - start_time,
                cache_name=cache_name,
                workload_name=workload_name,
                evictions=monitor.get_eviction_count(),
                ml_evictions=monitor.get_ml_eviction_count(),
                lru_fallbacks=monitor.get_lru_fallback_count(),
                victim=decision.victim_id if decision else None,
                method=decision.method.value if decision else None
            )
        else:
            logger.log(
                step=step,
                block_id=block_id,
                outcome=AccessKind.HIT.value if outcome else "Miss",
                hit_rate=monitor.get_hit_ratio(),
                hits=monitor.hits,
                misses=monitor.misses,
                confidence=0.0,
                mode=None,
                memory_mb=current_memory,
                timestamp=time.perf_counter() - start_time,
                cache_name=cache_name,
                workload_name=workload_name,
                evictions=monitor.get_eviction_count(),
                lru_fallbacks=monitor.get_eviction_count()
            )

    summary = cache.summary()
    summary["seconds"] = time.perf_counter() - start_time
    print(f"{cache_name} with {workload_name} - {summary}")
    return summary


def compare_policies(workload_names: list = None, cache_size: int = None,
                     config: dict = None, logger: ExcelLogger = None) -> dict:
    """Hit ratio of every cache on every named workload: {workload: {cache: ratio}}."""
    config = config or CONFIG
    cache_size = cache_size or config["cache_size"]
    workload_names = workload_names or WORKLOAD_NAMES

    results = {}
    for workload_name in workload_names:
        workload = build_workload(workload_name, cache_size, config)
        mode = WorkloadMode(config["workload_modes"][workload_name])
        results[workload_name] = {}
        for cache_name in CACHE_NAMES:
            cache = build_cache(cache_name, cache_size, config)
            summary = test_cache(cache, workload, cache_name, workload_name, mode=mode, logger=logger, config=config)
            results[workload_name][cache_name] = summary["hit_ratio"]
        improvement = (results[workload_name]["Hybrid"] - results[workload_name]["LRU"]) * 100
        print(f"{workload_name}: Hybrid vs LRU {improvement:+.2f} points")
        print("----------------------------------------------------------------------------------")
    return results


def main():
    logger = ExcelLogger(filename="all_cache_metrics.xlsx")
    results = compare_policies(logger=logger)
    logger.export()
    plot_hit_rate_comparison(results, output_file="hit_rate_comparison.png")
    return results


def main_single(cache_name: str, workload_name: str) -> dict:
    cache_size = CONFIG["cache_size"]
    cache = build_cache(cache_name, cache_size)
    workload = build_workload(workload_name, cache_size)
    mode = WorkloadMode(CONFIG["workload_modes"][workload_name])
    return test_cache(cache, workload, cache_name, workload_name, mode=mode)


def run_single_test(config_path: str) -> dict:
    """Run a single test with the given configuration."""
    with open(config_path, 'r') as f:
        config = json.load(f)

    cache_size = config["cache_size"]
    cache_name = config["cache_name"]
    workload_name = config["workload_name"]
    cache = build_cache(cache_name, cache_size)

    # Use the provided workload data, a trace file, or a generated trace
    if "workload_data" in config:
        workload = config["workload_data"]
    elif "trace_path" in config:
        workload = load_trace(config["trace_path"])
    else:
        workload = build_workload(workload_name, cache_size)

    mode = config.get("mode", CONFIG["workload_modes"].get(workload_name, CONFIG["default_workload_mode"]))
    return test_cache(cache, workload, cache_name, workload_name, mode=WorkloadMode(mode))


def cli():
    if len(sys.argv) == 2:
        run_single_test(sys.argv[1])
    elif len(sys.argv) == 1:
        main()
    else:
        print("Usage: hybrid-cache-sim [config_file]")
        sys.exit(1)


if __name__ == "__main__":
    cli()
