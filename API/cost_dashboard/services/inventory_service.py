from typing import List, Optional

from cost_dashboard.core.errors import RuntimeUnavailableError
from cost_dashboard.core.logging import get_logger
from cost_dashboard.domain.container import ContainerListing, ContainerSnapshot
from cost_dashboard.domain.optimization import IdleContainer, InventorySummary
from cost_dashboard.domain.ports import ContainerRuntime
from cost_dashboard.services.cost import IDLE_THRESHOLD_PERCENT
from cost_dashboard.services.recommendations import recommend
from cost_dashboard.services.usage import sample_usage

logger = get_logger(__name__)


class InventoryService:
    """Turns what the runtime reports into usage snapshots. Nothing is cached between calls."""

    def __init__(self, runtime: ContainerRuntime):
        self.runtime = runtime

    # -------------------------------
    # Public
    # -------------------------------
    async def list_containers(self) -> List[ContainerSnapshot]:
        """
        Every container the runtime knows about, in runtime order.
        Running ones get live usage; the rest are reported at 0% without a stats call.
        Running containers whose stats cannot be read are left out.
        """
        listings = await self._list(all=True, error_message="Failed to fetch containers")

        snapshots = []
        for listing in listings:
            if listing.is_running:
                snapshot = await self.sample(listing)
                if snapshot is None:
                    continue
            else:
                snapshot = ContainerSnapshot(
                    id=listing.id,
                    name=listing.name,
                    status=listing.status,
                    cpu_percent=0.0,
                    memory_percent=0.0,
                    created=listing.created,
                    image=listing.image,
                )
            snapshots.append(snapshot)
        return snapshots

    async def list_running_snapshots(
        self, error_message: str = "Failed to fetch containers"
    ) -> List[ContainerSnapshot]:
        listings = await self._list(all=False, error_message=error_message)

        snapshots = []
        for listing in listings:
            snapshot = await self.sample(listing)
            if snapshot is not None:
                snapshots.append(snapshot)
        return snapshots

    async def list_idle_containers(self) -> List[IdleContainer]:
        snapshots = await self.list_running_snapshots(
            error_message="Failed to fetch idle containers"
        )

        idle = []
        for snapshot in snapshots:
            recommendation = recommend(
                snapshot.cpu_percent, snapshot.memory_percent, snapshot.status
            )
            if recommendation.should_optimize:
                idle.append(IdleContainer(snapshot=snapshot, recommendation=recommendation))
        return idle

    async def summary(self) -> InventorySummary:
        summary = InventorySummary()
        for snapshot in await self.list_containers():
            summary.total += 1
            if not snapshot.is_running:
                summary.stopped += 1
                continue
            summary.running += 1
            if (
                snapshot.cpu_percent < IDLE_THRESHOLD_PERCENT
                and snapshot.memory_percent < IDLE_THRESHOLD_PERCENT
            ):
                summary.idle += 1
        return summary

    async def sample(self, listing: ContainerListing) -> Optional[ContainerSnapshot]:
        """Inspect + stats for one container; None when the runtime refuses either call."""
        try:
            details = await self.runtime.inspect(listing.id)
            counters = await self.runtime.stats(listing.id)
        except Exception as exc:
            logger.warning("[STATS ERROR] %s (%s): %s", listing.name, listing.id[:12], exc)
            return None

        cpu, memory = sample_usage(counters)
        return ContainerSnapshot(
            id=details.id,
            name=details.name,
            status=details.status,
            cpu_percent=cpu,
            memory_percent=memory,
            created=details.created,
            image=details.image,
        )

    # -------------------------------
    # Internal
    # -------------------------------
    async def _list(self, *, all: bool, error_message: str) -> List[ContainerListing]:
        try:
            return await self.runtime.list_containers(all=all)
        except Exception as exc:
            logger.error("[LIST ERROR] %s", exc)
            raise RuntimeUnavailableError(error_message) from exc
