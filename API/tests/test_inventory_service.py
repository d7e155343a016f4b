import pytest
from unittest.mock import AsyncMock

from cost_dashboard.core.errors import RuntimeUnavailableError
from cost_dashboard.services.inventory_service import InventoryService

from fakes import fake_runtime, make_listing


@pytest.mark.asyncio
async def test_list_containers_keeps_runtime_order_and_skips_failed_stats(mixed_runtime):
    service = InventoryService(mixed_runtime)

    snapshots = await service.list_containers()

    assert [s.id for s in snapshots] == ["idle01", "exited01", "low01", "busy01", "watch01"]
    busy = snapshots[3]
    assert (busy.cpu_percent, busy.memory_percent) == (40.0, 55.0)
    mixed_runtime.list_containers.assert_awaited_once_with(all=True)


@pytest.mark.asyncio
async def test_stopped_container_reported_at_zero_without_stats_call():
    runtime = fake_runtime([make_listing("exited01", status="exited")], usage={})
    service = InventoryService(runtime)

    [snapshot] = await service.list_containers()

    assert snapshot.status == "exited"
    assert snapshot.cpu_percent == 0.0
    assert snapshot.memory_percent == 0.0
    runtime.stats.assert_not_awaited()
    runtime.inspect.assert_not_awaited()


@pytest.mark.asyncio
async def test_listing_failure_is_raised_as_runtime_unavailable():
    runtime = AsyncMock()
    runtime.list_containers = AsyncMock(side_effect=ConnectionError("daemon down"))
    service = InventoryService(runtime)

    with pytest.raises(RuntimeUnavailableError) as exc_info:
        await service.list_containers()

    assert exc_info.value.message == "Failed to fetch containers"


@pytest.mark.asyncio
async def test_idle_containers_include_monitor_band(mixed_runtime):
    service = InventoryService(mixed_runtime)

    idle = await service.list_idle_containers()

    assert [(c.snapshot.id, c.recommendation.action, c.recommendation.priority) for c in idle] == [
        ("idle01", "stop", "high"),
        ("low01", "stop", "medium"),
        ("watch01", "monitor", "low"),
    ]
    mixed_runtime.list_containers.assert_awaited_once_with(all=False)


@pytest.mark.asyncio
async def test_idle_uses_inspected_status():
    # Listed as running, but stopped before it was inspected
    listed = make_listing("gone01")
    runtime = fake_runtime([listed], usage={"gone01": (1, 1)})
    runtime.inspect = AsyncMock(return_value=make_listing("gone01", status="exited"))
    service = InventoryService(runtime)

    assert await service.list_idle_containers() == []


@pytest.mark.asyncio
async def test_summary_counts(mixed_runtime):
    service = InventoryService(mixed_runtime)

    summary = await service.summary()

    # broken01 is dropped from the listing because its stats failed
    assert summary.total == 5
    assert summary.running == 4
    assert summary.stopped == 1
    assert summary.idle == 2
