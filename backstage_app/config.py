"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service starts with an empty environment
    - get_settings() is cached (lru_cache) — single instance per process
    - ENVIRONMENT=development is the only mode that exposes fault details

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Pod and git metadata read from plain env vars (Kubernetes downward API, CI build args)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)
    environment: str = "production"

    # Service identity
    service_name: str = "backstage-app"
    service_version: str = "1.0.0"
    documentation_url: str = "https://github.com/backstage/backstage"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    # Pod metadata
    pod_name: str | None = None
    hostname: str | None = None
    pod_namespace: str | None = None
    pod_ip: str | None = None
    node_name: str | None = None

    # Build metadata
    git_commit: str | None = None
    git_branch: str | None = None
    git_repository: str | None = None

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
