from fastapi import APIRouter, Depends
from typing import List

from cost_dashboard.api.deps import get_container_service, get_inventory_service
from cost_dashboard.services.container_service import ContainerService
from cost_dashboard.services.inventory_service import InventoryService
from cost_dashboard.schemas.container import (
    ContainerResponse,
    ErrorResponse,
    IdleContainerResponse,
    InventorySummaryResponse,
    MessageResponse,
)


router = APIRouter(
    prefix="/api/containers",
    tags=["containers"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=List[ContainerResponse])
async def list_containers(inventory: InventoryService = Depends(get_inventory_service)):
    snapshots = await inventory.list_containers()
    return [
        ContainerResponse(
            id=s.id,
            name=s.name,
            status=s.status,
            cpu=s.cpu_percent,
            memory=s.memory_percent,
            created=s.created,
            image=s.image,
        )
        for s in snapshots
    ]


@router.get("/idle", response_model=List[IdleContainerResponse])
async def list_idle_containers(inventory: InventoryService = Depends(get_inventory_service)):
    idle = await inventory.list_idle_containers()
    return [
        IdleContainerResponse(
            id=c.snapshot.id,
            name=c.snapshot.name,
            status=c.snapshot.status,
            cpu=c.snapshot.cpu_percent,
            memory=c.snapshot.memory_percent,
            created=c.snapshot.created,
            image=c.snapshot.image,
            reason=c.recommendation.reason,
            action=c.recommendation.action,
            priority=c.recommendation.priority,
        )
        for c in idle
    ]


@router.get(
    "/summary",
    response_model=InventorySummaryResponse,
    summary="Container counts for the dashboard header",
)
async def get_summary(inventory: InventoryService = Depends(get_inventory_service)):
    summary = await inventory.summary()
    return InventorySummaryResponse(
        total=summary.total,
        running=summary.running,
        stopped=summary.stopped,
        idle=summary.idle,
    )


@router.post("/{container_id}/start", response_model=MessageResponse)
async def start_container(
    container_id: str,
    containers: ContainerService = Depends(get_container_service),
):
    await containers.start_container(container_id)
    return MessageResponse(message="Container started successfully")


@router.post("/{container_id}/stop", response_model=MessageResponse)
async def stop_container(
    container_id: str,
    containers: ContainerService = Depends(get_container_service),
):
    await containers.stop_container(container_id)
    return MessageResponse(message="Container stopped successfully")
