from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Literal


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContainerResponse(CamelModel):
    id: str
    name: str
    status: str
    cpu: float
    memory: float
    created: datetime
    image: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "3f4e2a1b9c8d7e6f5a4b3c2d1e0f9a8b7c6d5e4f3a2b1c0d9e8f7a6b5c4d3e2f",
                "name": "nginx-edge",
                "status": "running",
                "cpu": 3.12,
                "memory": 4.87,
                "created": "2026-10-18T09:41:07.123456Z",
                "image": "nginx:latest",
            }
        }
    )


class IdleContainerResponse(ContainerResponse):
    is_idle: Literal[True] = True
    reason: str
    action: Literal["stop", "monitor"]
    priority: Literal["high", "medium", "low"]


class InventorySummaryResponse(CamelModel):
    total: int
    running: int
    stopped: int
    idle: int


class MessageResponse(CamelModel):
    message: str


class ErrorResponse(CamelModel):
    error: str
