from datetime import datetime, timezone

from cost_dashboard.domain.optimization import CostEstimate, Suggestion, SuggestionReport
from cost_dashboard.services.cost import estimate_cost
from cost_dashboard.services.inventory_service import InventoryService
from cost_dashboard.services.recommendations import recommend
from cost_dashboard.services.usage import round2


class SuggestionService:
    def __init__(self, inventory: InventoryService, currency: str = "INR"):
        self.inventory = inventory
        self.currency = currency

    async def build_report(self) -> SuggestionReport:
        """
        Stop suggestions for running containers, with what each would save.
        "monitor" recommendations are not suggestions and do not count towards the totals.
        """
        snapshots = await self.inventory.list_running_snapshots(
            error_message="Failed to generate optimization suggestions"
        )

        suggestions = []
        hourly = daily = monthly = 0.0
        for snapshot in snapshots:
            recommendation = recommend(
                snapshot.cpu_percent, snapshot.memory_percent, snapshot.status
            )
            if not recommendation.should_optimize or recommendation.action != "stop":
                continue

            savings = estimate_cost(snapshot.cpu_percent, snapshot.memory_percent, True)
            hourly += savings.hourly
            daily += savings.daily
            monthly += savings.monthly

            suggestions.append(
                Suggestion(
                    container_id=snapshot.id,
                    container_name=snapshot.name,
                    recommendation=recommendation,
                    estimated_savings=savings,
                    cpu_percent=snapshot.cpu_percent,
                    memory_percent=snapshot.memory_percent,
                )
            )

        # Summed from already rounded values, then rounded again to drop float noise.
        totals = CostEstimate(hourly=round2(hourly), daily=round2(daily), monthly=round2(monthly))

        return SuggestionReport(
            suggestions=suggestions,
            total_estimated_savings=totals,
            currency=self.currency,
            last_updated=datetime.now(timezone.utc),
        )
