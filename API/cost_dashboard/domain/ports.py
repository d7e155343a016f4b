from typing import Protocol, List

from cost_dashboard.domain.container import ContainerListing, RawUsageCounters


class ContainerRuntime(Protocol):
    # -------------------------------
    # Queries
    # -------------------------------
    async def list_containers(self, all: bool = True) -> List[ContainerListing]:
        """List containers in the order the runtime enumerates them. all=False returns running ones only."""
        ...

    async def inspect(self, container_id: str) -> ContainerListing:
        """Fresh name/status/image/created for one container."""
        ...

    async def stats(self, container_id: str) -> RawUsageCounters:
        """One non-streaming stats read for a container."""
        ...

    # -------------------------------
    # Lifecycle
    # -------------------------------
    async def start(self, container_id: str) -> None:
        """Start a stopped container."""
        ...

    async def stop(self, container_id: str) -> None:
        """Stop a running container."""
        ...

    async def close(self) -> None:
        """Release the client connection, if one was opened."""
        ...
