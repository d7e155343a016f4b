from fastapi import Request
from fastapi.responses import JSONResponse


class DashboardError(Exception):
    """Base error; the message is what the caller sees, details go to the log."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RuntimeUnavailableError(DashboardError):
    """The container runtime could not be queried (daemon down, API error...)."""


class ContainerActionError(DashboardError):
    """Start/stop of a single container failed."""


async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
