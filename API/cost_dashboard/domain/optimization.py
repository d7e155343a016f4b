from datetime import datetime
from dataclasses import dataclass
from typing import List, Literal, Union

from cost_dashboard.domain.container import ContainerSnapshot


@dataclass(frozen=True)
class CostEstimate:
    hourly: float
    daily: float
    monthly: float

    @classmethod
    def zero(cls) -> "CostEstimate":
        return cls(hourly=0.0, daily=0.0, monthly=0.0)


@dataclass(frozen=True)
class NotOptimizable:
    reason: str
    action: Literal["none"] = "none"

    @property
    def should_optimize(self) -> bool:
        return False


@dataclass(frozen=True)
class Optimizable:
    action: Literal["stop", "monitor"]
    priority: Literal["high", "medium", "low"]
    reason: str

    @property
    def should_optimize(self) -> bool:
        return True


Recommendation = Union[NotOptimizable, Optimizable]


@dataclass
class IdleContainer:
    snapshot: ContainerSnapshot
    recommendation: Optimizable


@dataclass
class Suggestion:
    container_id: str
    container_name: str
    recommendation: Optimizable
    estimated_savings: CostEstimate
    cpu_percent: float
    memory_percent: float


@dataclass
class SuggestionReport:
    suggestions: List[Suggestion]
    total_estimated_savings: CostEstimate
    currency: str
    last_updated: datetime


@dataclass
class InventorySummary:
    total: int = 0
    running: int = 0
    stopped: int = 0
    idle: int = 0
