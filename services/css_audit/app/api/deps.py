"""FastAPI dependency helpers."""
from __future__ import annotations

from ..config import get_settings
from ..domain.throughput import LocalThroughputEstimator, NetworkThroughputClient, ThroughputProvider


def get_throughput_provider() -> ThroughputProvider:
    settings = get_settings()
    if settings.throughput.endpoint_url:
        return NetworkThroughputClient(settings)
    return LocalThroughputEstimator()


__all__ = ["get_throughput_provider"]
