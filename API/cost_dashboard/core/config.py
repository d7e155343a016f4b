from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API (the dashboard frontend)"
    )

    DOCKER_BASE_URL: Optional[str] = Field(
        default=None,
        description="Docker daemon URL, e.g. unix:///var/run/docker.sock. Falls back to DOCKER_HOST / the default socket."
    )
    DOCKER_TIMEOUT: int = 60  # seconds, per SDK call

    CURRENCY: str = "INR"

    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=".env"
    )
