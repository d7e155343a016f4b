from datetime import datetime
from typing import List, Literal

from cost_dashboard.schemas.container import CamelModel


class SavingsResponse(CamelModel):
    hourly: float
    daily: float
    monthly: float


class UsageResponse(CamelModel):
    cpu: float
    memory: float


class SuggestionResponse(CamelModel):
    container_id: str
    container_name: str
    action: Literal["stop"]
    reason: str
    priority: Literal["high", "medium", "low"]
    estimated_savings: SavingsResponse
    current_usage: UsageResponse


class SuggestionsResponse(CamelModel):
    suggestions: List[SuggestionResponse]
    total_estimated_savings: SavingsResponse
    currency: str
    last_updated: datetime


class HealthResponse(CamelModel):
    status: Literal["OK"] = "OK"
    timestamp: datetime
