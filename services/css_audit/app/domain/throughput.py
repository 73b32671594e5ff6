"""Network throughput estimates used to turn wasted bytes into time."""
from __future__ import annotations

import math
import time
from typing import Any, Iterable, Protocol, Sequence

import httpx
import structlog

from ..config import AuditSettings, get_settings
from .types import NetworkTransferRecord

logger = structlog.get_logger(__name__)


class ThroughputUnavailableError(RuntimeError):
    """Raised when a throughput estimate cannot be obtained."""


class ThroughputProvider(Protocol):
    async def request_network_throughput(self, network_records: Sequence[NetworkTransferRecord]) -> float:
        ...


def _counts_toward_throughput(record: NetworkTransferRecord) -> bool:
    if record.url.startswith("data:") or record.failed or not record.finished:
        return False
    if record.status_code is not None and record.status_code > 300:
        return False
    if not record.transfer_size:
        return False
    if record.response_received_time is None or record.end_time is None:
        return False
    return record.end_time >= record.response_received_time


def compute_network_throughput(network_records: Iterable[NetworkTransferRecord]) -> float:
    """Bytes per second over the time at least one response body was downloading.

    Returns ``math.inf`` when nothing measurable was transferred.
    """
    total_bytes = 0
    boundaries: list[tuple[float, bool]] = []
    for record in network_records:
        if not _counts_toward_throughput(record):
            continue
        total_bytes += record.transfer_size
        boundaries.append((record.response_received_time, True))
        boundaries.append((record.end_time, False))

    if not boundaries:
        return math.inf

    # Starts sort before ends at the same timestamp so touching intervals merge.
    boundaries.sort(key=lambda boundary: (boundary[0], not boundary[1]))

    inflight = 0
    current_start = 0.0
    total_duration = 0.0
    for timestamp, is_start in boundaries:
        if is_start:
            if inflight == 0:
                current_start = timestamp
            inflight += 1
        else:
            inflight -= 1
            if inflight == 0:
                total_duration += timestamp - current_start

    if total_duration <= 0:
        return math.inf
    return total_bytes / total_duration


class LocalThroughputEstimator:
    """Estimate throughput in-process from the page's own network records."""

    async def request_network_throughput(self, network_records: Sequence[NetworkTransferRecord]) -> float:
        return compute_network_throughput(network_records)


class FixedThroughput:
    """Throughput figure already known to the caller."""

    def __init__(self, bytes_per_second: float) -> None:
        self._bytes_per_second = bytes_per_second

    async def request_network_throughput(self, network_records: Sequence[NetworkTransferRecord]) -> float:
        return self._bytes_per_second


def _record_payload(record: NetworkTransferRecord) -> dict[str, Any]:
    return {
        "url": record.url,
        "resourceType": record.resource_type,
        "transferSize": record.transfer_size,
        "responseReceivedTime": record.response_received_time,
        "endTime": record.end_time,
        "statusCode": record.status_code,
        "finished": record.finished,
        "failed": record.failed,
    }


class NetworkThroughputClient:
    """Ask a remote throughput service for the page's estimated bytes/second."""

    def __init__(
        self,
        settings: AuditSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport

    async def request_network_throughput(self, network_records: Sequence[NetworkTransferRecord]) -> float:
        settings = self._settings.throughput
        if not settings.endpoint_url:
            raise ThroughputUnavailableError("Network throughput endpoint is not configured")
        payload = {"networkRecords": [_record_payload(record) for record in network_records]}

        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(settings.endpoint_url, json=payload, timeout=settings.timeout_s)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ThroughputUnavailableError(f"Network throughput request failed: {exc}") from exc
        finally:
            latency_ms = int((time.perf_counter() - start) * 1000)
            logger.info("network_throughput.call", endpoint=settings.endpoint_url, latency_ms=latency_ms)

        throughput = data.get("throughput") if isinstance(data, dict) else None
        if not isinstance(throughput, (int, float)) or isinstance(throughput, bool) or throughput <= 0:
            raise ThroughputUnavailableError("Network throughput response missing a positive throughput value")
        return float(throughput)


__all__ = [
    "FixedThroughput",
    "LocalThroughputEstimator",
    "NetworkThroughputClient",
    "ThroughputProvider",
    "ThroughputUnavailableError",
    "compute_network_throughput",
]
