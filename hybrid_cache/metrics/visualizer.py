import matplotlib.pyplot as plt
from .monitor import MetricsMonitor
from typing import Dict, Optional


def _finish(output_file: Optional[str]) -> None:
    """Save the current figure, or show it when no file is given, then close it."""
    if output_file:
        plt.savefig(output_file)
    else:
        plt.show()
    plt.close()


class MetricsVisualizer:
    def __init__(self, monitor: MetricsMonitor):
        """Initialize with a MetricsMonitor instance."""
        self.monitor = monitor

    def plot_hit_ratio(self, output_file: Optional[str] = None) -> None:
        """Plot the cumulative hit ratio over accesses."""
        hits = 0
        hit_ratios = []
        for i, op in enumerate(self.monitor.operations):
            hits += op["hit"]
            hit_ratios.append(hits / (i + 1))

        plt.figure(figsize=(10, 6))
        plt.plot(range(1, len(hit_ratios) + 1), hit_ratios, label="Hit Ratio")
        plt.xlabel("Access")
        plt.ylabel("Hit Ratio")
        plt.title("Hit Ratio Over Accesses")
        plt.grid(True)
        plt.legend()
        _finish(output_file)

    def plot_confidence(self, threshold: float, output_file: Optional[str] = None) -> None:
        """Plot gate confidence at each eviction against the threshold."""
        confidences = [e["confidence"] for e in self.monitor.evictions]

        plt.figure(figsize=(10, 6))
        plt.plot(range(1, len(confidences) + 1), confidences, marker=".", label="Confidence")
        plt.axhline(threshold, color="red", linestyle="--", label=f"Threshold ({threshold})")
        plt.xlabel("Eviction")
        plt.ylabel("Max Reuse Probability")
        plt.ylim(0.0, 1.0)
        plt.title("Eviction Confidence")
        plt.grid(True)
        plt.legend()
        _finish(output_file)


def plot_hit_rate_comparison(results: Dict[str, Dict[str, float]], output_file: Optional[str] = None) -> None:
    """Grouped bars of hit rate (%) per workload, one bar per cache."""
    workloads = list(results)
    cache_names = sorted({name for rates in results.values() for name in rates})
    width = 0.8 / max(1, len(cache_names))

    plt.figure(figsize=(10, 6))
    for i, cache_name in enumerate(cache_names):
        positions = [x + i * width for x in range(len(workloads))]
        rates = [results[w].get(cache_name, 0.0) * 100 for w in workloads]
        plt.bar(positions, rates, width=width, label=cache_name)
    plt.xticks([x + width * (len(cache_names) - 1) / 2 for x in range(len(workloads))], workloads)
    plt.ylabel("Hit Rate (%)")
    plt.title("Hit Rate Comparison")
    plt.legend()
    _finish(output_file)
