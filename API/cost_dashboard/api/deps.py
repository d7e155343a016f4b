from fastapi import Depends, Request

from cost_dashboard.core.config import Settings
from cost_dashboard.domain.ports import ContainerRuntime
from cost_dashboard.services.container_service import ContainerService
from cost_dashboard.services.inventory_service import InventoryService
from cost_dashboard.services.suggestion_service import SuggestionService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_runtime(request: Request) -> ContainerRuntime:
    return request.app.state.runtime


def get_inventory_service(runtime: ContainerRuntime = Depends(get_runtime)) -> InventoryService:
    return InventoryService(runtime)


def get_container_service(runtime: ContainerRuntime = Depends(get_runtime)) -> ContainerService:
    return ContainerService(runtime)


def get_suggestion_service(
    inventory: InventoryService = Depends(get_inventory_service),
    settings: Settings = Depends(get_settings),
) -> SuggestionService:
    return SuggestionService(inventory, currency=settings.CURRENCY)
