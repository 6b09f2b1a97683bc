"""Configuration and environment for the Batteries API server."""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="BATTERIES_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # HTTP
    host: str = Field(default="0.0.0.0", description="Interface to listen on")
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("BATTERIES_API_PORT", "PORT", "port"),
        description="Listening port",
    )

    # Kubernetes
    kubeconfig: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("BATTERIES_API_KUBECONFIG", "KUBECONFIG", "kubeconfig"),
        description="Path to kubeconfig; ~/.kube/config is used if unset and not running in-cluster",
    )
    context: str | None = Field(default=None, description="Kubernetes context to use")
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout applied to every cluster API list call",
    )

    # Dashboard behavior
    push_interval_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Interval between snapshots pushed over /ws",
    )
    service_sample_limit: int = Field(
        default=5,
        ge=0,
        le=5,
        description="Max live cluster services appended to /api/services (at most 5)",
    )
    log_level: str = Field(default="INFO", description="Root log level")


def get_settings() -> Settings:
    """Return validated settings instance."""
    return Settings()
