"""Application configuration using Pydantic settings."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuditTuning(BaseModel):
    preview_length: int = Field(default=100, ge=1)
    allowable_unused_rules_ratio: float = Field(default=0.10, ge=0, le=1)
    # Rough gzip ratio for sheets with no matching network record.
    gzip_size_ratio: float = Field(default=3, gt=0)


class ThroughputSettings(BaseModel):
    endpoint_url: str | None = Field(
        default=None,
        description="Network throughput service; estimated locally from network records when unset",
    )
    timeout_s: float = 10.0


class ObservabilitySettings(BaseModel):
    otel_service_name: str = "css-audit"
    otel_exporter_otlp_endpoint: str | None = None
    log_level: str = "INFO"


class AuditSettings(BaseSettings):
    tuning: AuditTuning = AuditTuning()
    throughput: ThroughputSettings = ThroughputSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    environment: Literal["dev", "qa", "prod"] | str = "dev"

    model_config = SettingsConfigDict(env_nested_delimiter="__", env_prefix="CSS_AUDIT_", case_sensitive=False)


@lru_cache(maxsize=1)
def get_settings(**kwargs: Any) -> AuditSettings:
    """Return cached settings instance."""
    return AuditSettings(**kwargs)


__all__ = ["AuditSettings", "get_settings"]
