from datetime import datetime, timezone
from fastapi import APIRouter

from cost_dashboard.schemas.optimization import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    # Liveness only; the Docker daemon is not contacted.
    return HealthResponse(timestamp=datetime.now(timezone.utc))
