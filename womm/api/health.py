"""Health, readiness and metrics endpoints."""

from fastapi import APIRouter

from womm.api.deps import SettingsDep
from womm.schemas.status import (
    CpuUsage,
    HealthStatus,
    MemoryUsage,
    MetricsSnapshot,
    ReadyStatus,
)
from womm.utils import process
from womm.utils.timestamps import utc_timestamp

HEALTH_MESSAGE = "Still working... on *my* machine 🧃"

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health(settings: SettingsDep):
    """Liveness check."""
    return HealthStatus(
        message=HEALTH_MESSAGE,
        uptime=process.uptime_seconds(),
        timestamp=utc_timestamp(),
        version=settings.version,
        environment=settings.environment,
    )


@router.get("/ready", response_model=ReadyStatus)
async def ready():
    """Readiness probe. No dependencies to check, so ready whenever serving."""
    return ReadyStatus(timestamp=utc_timestamp())


@router.get("/metrics", response_model=MetricsSnapshot)
async def metrics():
    """Raw point-in-time process counters."""
    return MetricsSnapshot(
        uptime_seconds=process.uptime_seconds(),
        memory_usage_bytes=MemoryUsage(**process.memory_usage()),
        cpu_usage=CpuUsage(**process.cpu_usage()),
        timestamp=utc_timestamp(),
    )
