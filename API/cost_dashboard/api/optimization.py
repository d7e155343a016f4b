from fastapi import APIRouter, Depends

from cost_dashboard.api.deps import get_suggestion_service
from cost_dashboard.services.suggestion_service import SuggestionService
from cost_dashboard.schemas.container import ErrorResponse
from cost_dashboard.schemas.optimization import (
    SavingsResponse,
    SuggestionResponse,
    SuggestionsResponse,
    UsageResponse,
)


router = APIRouter(
    prefix="/api/optimization",
    tags=["optimization"],
    responses={500: {"model": ErrorResponse}},
)


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    summary="Containers worth stopping and what stopping them would save",
)
async def get_suggestions(suggestions: SuggestionService = Depends(get_suggestion_service)):
    report = await suggestions.build_report()
    return SuggestionsResponse(
        suggestions=[
            SuggestionResponse(
                container_id=s.container_id,
                container_name=s.container_name,
                action=s.recommendation.action,
                reason=s.recommendation.reason,
                priority=s.recommendation.priority,
                estimated_savings=SavingsResponse(
                    hourly=s.estimated_savings.hourly,
                    daily=s.estimated_savings.daily,
                    monthly=s.estimated_savings.monthly,
                ),
                current_usage=UsageResponse(cpu=s.cpu_percent, memory=s.memory_percent),
            )
            for s in report.suggestions
        ],
        total_estimated_savings=SavingsResponse(
            hourly=report.total_estimated_savings.hourly,
            daily=report.total_estimated_savings.daily,
            monthly=report.total_estimated_savings.monthly,
        ),
        currency=report.currency,
        last_updated=report.last_updated,
    )
