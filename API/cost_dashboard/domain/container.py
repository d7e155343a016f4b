from datetime import datetime
from dataclasses import dataclass


@dataclass
class ContainerListing:
    """What the runtime reports for a container in a list or inspect call."""
    id: str
    name: str
    status: str  # "running", "exited", "paused", "created", ...
    image: str
    created: datetime

    @property
    def is_running(self) -> bool:
        return self.status == "running"


@dataclass
class RawUsageCounters:
    """One point-in-time stats read. Docker returns the current and the previous CPU sample together."""
    cpu_total: int
    previous_cpu_total: int
    system_total: int
    previous_system_total: int
    online_cpus: int
    memory_usage: int
    memory_limit: int


@dataclass
class ContainerSnapshot:
    id: str
    name: str
    status: str
    cpu_percent: float
    memory_percent: float
    created: datetime
    image: str

    @property
    def is_running(self) -> bool:
        return self.status == "running"
