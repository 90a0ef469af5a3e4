"""Status endpoint response schemas."""

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """GET / response."""

    service: str
    version: str
    status: str = "running"
    environment: str
    timestamp: str


class HealthStatus(BaseModel):
    """GET /health response."""

    status: str = "healthy"
    message: str
    uptime: float
    timestamp: str
    version: str
    environment: str


class ReadyStatus(BaseModel):
    """GET /ready response."""

    status: str = "ready"
    timestamp: str


class BuildInfo(BaseModel):
    """GET /version response."""

    model_config = {"populate_by_name": True}

    version: str
    build: str
    commit: str
    build_date: str = Field(alias="buildDate")


class MemoryUsage(BaseModel):
    """Memory counters in bytes - platform dependent, kept open."""

    model_config = {"extra": "allow"}

    rss: int
    vms: int


class CpuUsage(BaseModel):
    """CPU time in microseconds."""

    model_config = {"extra": "allow"}

    user: int
    system: int


class MetricsSnapshot(BaseModel):
    """GET /metrics response."""

    uptime_seconds: float
    memory_usage_bytes: MemoryUsage
    cpu_usage: CpuUsage
    timestamp: str
