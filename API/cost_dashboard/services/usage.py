import math
from typing import Tuple

from cost_dashboard.domain.container import RawUsageCounters


def round2(value: float) -> float:
    """Round half-up to 2 decimals; non-finite input becomes 0."""
    if not math.isfinite(value):
        return 0.0
    return math.floor(value * 100 + 0.5) / 100


def cpu_percent(counters: RawUsageCounters) -> float:
    cpu_delta = counters.cpu_total - counters.previous_cpu_total
    system_delta = counters.system_total - counters.previous_system_total

    # No system activity between the two samples: the ratio is undefined.
    if system_delta == 0:
        return 0.0

    percent = (cpu_delta / system_delta) * counters.online_cpus * 100
    if not math.isfinite(percent) or percent < 0:
        return 0.0
    return round2(percent)


def memory_percent(counters: RawUsageCounters) -> float:
    if counters.memory_limit == 0:
        return 0.0
    return round2(counters.memory_usage / counters.memory_limit * 100)


def sample_usage(counters: RawUsageCounters) -> Tuple[float, float]:
    """Return (cpu_percent, memory_percent) for one stats read."""
    return cpu_percent(counters), memory_percent(counters)
