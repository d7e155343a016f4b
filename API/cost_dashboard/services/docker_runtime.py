import asyncio
import re
from datetime import datetime, timezone
from typing import List, Optional

import docker
from docker import DockerClient

from cost_dashboard.core.config import Settings
from cost_dashboard.domain.container import ContainerListing, RawUsageCounters
from cost_dashboard.domain.ports import ContainerRuntime

# Docker reports nanosecond fractions; datetime only takes microseconds.
_CREATED_RE = re.compile(r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d+))?(?P<tz>Z|[+-]\d{2}:\d{2})?$")


def parse_created(value) -> datetime:
    """Normalize the list API's epoch seconds and inspect's ISO string to an aware datetime."""
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)

    match = _CREATED_RE.match(value)
    if not match:
        raise ValueError(f"Unrecognized created timestamp: {value!r}")

    text = match["base"]
    if match["frac"]:
        text += "." + match["frac"][:6].ljust(6, "0")
    tz = match["tz"]
    text += "+00:00" if tz in (None, "Z") else tz
    return datetime.fromisoformat(text)


def listing_from_summary(attrs: dict) -> ContainerListing:
    """Build a listing from one entry of GET /containers/json."""
    names = attrs.get("Names") or [""]
    return ContainerListing(
        id=attrs["Id"],
        name=names[0].lstrip("/"),
        status=attrs["State"],
        image=attrs["Image"],
        created=parse_created(attrs["Created"]),
    )


def listing_from_inspect(attrs: dict) -> ContainerListing:
    """Build a listing from GET /containers/{id}/json."""
    return ContainerListing(
        id=attrs["Id"],
        name=attrs["Name"].lstrip("/"),
        status=attrs["State"]["Status"],
        image=attrs["Config"]["Image"],
        created=parse_created(attrs["Created"]),
    )


def counters_from_stats(stats: dict) -> RawUsageCounters:
    """
    Extract the counters used for usage percentages from a non-streaming stats payload.
    precpu_stats is empty on the very first read of a freshly started container, so every
    field falls back to 0.
    """
    cpu = stats.get("cpu_stats") or {}
    precpu = stats.get("precpu_stats") or {}
    memory = stats.get("memory_stats") or {}

    cpu_usage = cpu.get("cpu_usage") or {}
    online_cpus = cpu.get("online_cpus") or len(cpu_usage.get("percpu_usage") or []) or 1

    return RawUsageCounters(
        cpu_total=cpu_usage.get("total_usage", 0),
        previous_cpu_total=(precpu.get("cpu_usage") or {}).get("total_usage", 0),
        system_total=cpu.get("system_cpu_usage", 0),
        previous_system_total=precpu.get("system_cpu_usage", 0),
        online_cpus=online_cpus,
        memory_usage=memory.get("usage", 0),
        memory_limit=memory.get("limit", 0),
    )


class DockerSDKRuntime(ContainerRuntime):
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._docker_client: Optional[DockerClient] = None

    @property
    def docker_client(self) -> DockerClient:
        # Created on first use so the app can be imported without a reachable daemon.
        if self._docker_client is None:
            if self.settings.DOCKER_BASE_URL:
                self._docker_client = DockerClient(
                    base_url=self.settings.DOCKER_BASE_URL,
                    timeout=self.settings.DOCKER_TIMEOUT,
                )
            else:
                self._docker_client = docker.from_env(timeout=self.settings.DOCKER_TIMEOUT)
        return self._docker_client

    # -------------------------------
    # Queries
    # -------------------------------
    async def list_containers(self, all: bool = True) -> List[ContainerListing]:
        containers = await asyncio.to_thread(
            self.docker_client.containers.list, all=all, sparse=True
        )
        return [listing_from_summary(c.attrs) for c in containers]

    async def inspect(self, container_id: str) -> ContainerListing:
        container = await asyncio.to_thread(self.docker_client.containers.get, container_id)
        return listing_from_inspect(container.attrs)

    async def stats(self, container_id: str) -> RawUsageCounters:
        container = await asyncio.to_thread(self.docker_client.containers.get, container_id)
        stats = await asyncio.to_thread(container.stats, stream=False)
        return counters_from_stats(stats)

    # -------------------------------
    # Lifecycle
    # -------------------------------
    async def start(self, container_id: str) -> None:
        container = await asyncio.to_thread(self.docker_client.containers.get, container_id)
        await asyncio.to_thread(container.start)

    async def stop(self, container_id: str) -> None:
        container = await asyncio.to_thread(self.docker_client.containers.get, container_id)
        await asyncio.to_thread(container.stop)

    async def close(self) -> None:
        if self._docker_client is not None:
            await asyncio.to_thread(self._docker_client.close)
            self._docker_client = None
