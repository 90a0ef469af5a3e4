"""Response schemas."""

from womm.schemas.error import ErrorResponse
from womm.schemas.status import (
    BuildInfo,
    CpuUsage,
    HealthStatus,
    MemoryUsage,
    MetricsSnapshot,
    ReadyStatus,
    ServiceInfo,
)

__all__ = [
    "ErrorResponse",
    "BuildInfo",
    "CpuUsage",
    "HealthStatus",
    "MemoryUsage",
    "MetricsSnapshot",
    "ReadyStatus",
    "ServiceInfo",
]
