from cost_dashboard.domain.optimization import CostEstimate
from cost_dashboard.services.usage import round2

# Cost model, in INR per container-hour.
BASE_CONTAINER_COST = 2.5
CPU_COST_PER_PERCENT = 0.05
MEMORY_COST_PER_PERCENT = 0.03
IDLE_OVERHEAD = 1.2

IDLE_THRESHOLD_PERCENT = 10

HOURS_PER_DAY = 24
DAYS_PER_MONTH = 30


def hourly_rate(cpu_percent: float, memory_percent: float) -> float:
    rate = (
        BASE_CONTAINER_COST
        + cpu_percent * CPU_COST_PER_PERCENT
        + memory_percent * MEMORY_COST_PER_PERCENT
    )
    if cpu_percent < IDLE_THRESHOLD_PERCENT and memory_percent < IDLE_THRESHOLD_PERCENT:
        rate += IDLE_OVERHEAD
    return rate


def estimate_cost(cpu_percent: float, memory_percent: float, is_running: bool) -> CostEstimate:
    """
    What keeping the container running costs, i.e. what stopping it would save.

    Each figure is rounded from its own unrounded value, so daily is not
    round(hourly) * 24.
    """
    if not is_running:
        return CostEstimate.zero()

    hourly = hourly_rate(cpu_percent, memory_percent)
    daily = hourly * HOURS_PER_DAY
    monthly = daily * DAYS_PER_MONTH

    return CostEstimate(
        hourly=round2(hourly),
        daily=round2(daily),
        monthly=round2(monthly),
    )
