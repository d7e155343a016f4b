from datetime import datetime, timezone
from unittest.mock import AsyncMock

from cost_dashboard.domain.container import ContainerListing, RawUsageCounters

CREATED = datetime(2026, 10, 18, 9, 41, 7, tzinfo=timezone.utc)


def make_listing(container_id: str, name: str | None = None, status: str = "running") -> ContainerListing:
    return ContainerListing(
        id=container_id,
        name=name or f"{container_id}-svc",
        status=status,
        image="nginx:latest",
        created=CREATED,
    )


def counters_for(cpu: float, memory: float) -> RawUsageCounters:
    """Counters that sample to exactly (cpu, memory) percent."""
    return RawUsageCounters(
        cpu_total=1_000_000 + round(cpu * 100),
        previous_cpu_total=1_000_000,
        system_total=50_000_000 + 10_000,
        previous_system_total=50_000_000,
        online_cpus=1,
        memory_usage=round(memory * 1000),
        memory_limit=100_000,
    )


def fake_runtime(containers: list[ContainerListing], usage: dict[str, tuple[float, float]]) -> AsyncMock:
    """
    Runtime double: `containers` is what list/inspect report, `usage` maps id -> (cpu, memory).
    Ids missing from `usage` make the stats call fail.
    """
    by_id = {c.id: c for c in containers}

    async def list_containers(all: bool = True):
        return [c for c in containers if all or c.is_running]

    async def inspect(container_id: str):
        return by_id[container_id]

    async def stats(container_id: str):
        if container_id not in usage:
            raise RuntimeError(f"stats unavailable for {container_id}")
        return counters_for(*usage[container_id])

    runtime = AsyncMock()
    runtime.list_containers = AsyncMock(side_effect=list_containers)
    runtime.inspect = AsyncMock(side_effect=inspect)
    runtime.stats = AsyncMock(side_effect=stats)
    return runtime

