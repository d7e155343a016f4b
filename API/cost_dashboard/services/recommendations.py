from cost_dashboard.domain.optimization import NotOptimizable, Optimizable, Recommendation

NOT_RUNNING_REASON = "Container is not running"


def _pct(value: float) -> str:
    # 3.0 -> "3", 12.5 -> "12.5"
    return f"{value:g}"


def recommend(cpu_percent: float, memory_percent: float, status: str) -> Recommendation:
    """
    Classify a container by its usage. Bands are checked from the most idle
    upwards and the first match wins.
    """
    if status != "running":
        return NotOptimizable(reason=NOT_RUNNING_REASON)

    usage = f"CPU {_pct(cpu_percent)}%, Memory {_pct(memory_percent)}%"

    if cpu_percent < 5 and memory_percent < 5:
        return Optimizable(
            action="stop",
            priority="high",
            reason=f"Extremely low resource usage: {usage} - Container appears completely idle",
        )
    if cpu_percent < 10 and memory_percent < 10:
        return Optimizable(
            action="stop",
            priority="medium",
            reason=f"Very low resource usage: {usage} - Consider stopping or consolidating",
        )
    if cpu_percent < 15 and memory_percent < 15:
        return Optimizable(
            action="monitor",
            priority="low",
            reason=f"Low resource usage: {usage} - Monitor for potential optimization",
        )

    return NotOptimizable(reason=f"Normal resource usage: {usage}")
