from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cost_dashboard.api import containers, health, optimization
from cost_dashboard.core.config import Settings
from cost_dashboard.core.errors import DashboardError, dashboard_error_handler
from cost_dashboard.core.logging import configure_logging, get_logger
from cost_dashboard.domain.ports import ContainerRuntime
from cost_dashboard.services.docker_runtime import DockerSDKRuntime

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    runtime: Optional[ContainerRuntime] = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Container Cost Dashboard")

    # One runtime handle per app, reached through Depends; services are built per request.
    app.state.settings = settings
    app.state.runtime = runtime or DockerSDKRuntime(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DashboardError, dashboard_error_handler)

    app.include_router(containers.router)
    app.include_router(optimization.router)
    app.include_router(health.router)

    # ---------- Startup / Shutdown ----------

    @app.on_event("startup")
    async def startup_event():
        logger.info("[STARTUP] Dashboard API ready (currency=%s)", settings.CURRENCY)

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.runtime.close()
        logger.info("[SHUTDOWN] Runtime client closed")

    return app


app = create_app()


def main():
    settings = app.state.settings
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
