from cost_dashboard.core.errors import ContainerActionError
from cost_dashboard.core.logging import get_logger
from cost_dashboard.domain.ports import ContainerRuntime

logger = get_logger(__name__)


class ContainerService:
    def __init__(self, runtime: ContainerRuntime):
        self.runtime = runtime

    async def start_container(self, container_id: str) -> None:
        try:
            await self.runtime.start(container_id)
        except Exception as exc:
            logger.error("[START ERROR] %s: %s", container_id, exc)
            raise ContainerActionError("Failed to start container") from exc
        logger.info("[START] %s", container_id)

    async def stop_container(self, container_id: str) -> None:
        try:
            await self.runtime.stop(container_id)
        except Exception as exc:
            logger.error("[STOP ERROR] %s: %s", container_id, exc)
            raise ContainerActionError("Failed to stop container") from exc
        logger.info("[STOP] %s", container_id)
