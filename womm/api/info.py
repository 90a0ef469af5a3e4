"""Service info and build metadata endpoints."""

from fastapi import APIRouter

from womm.api.deps import SettingsDep
from womm.schemas.status import BuildInfo, ServiceInfo
from womm.utils.timestamps import utc_timestamp

SERVICE_NAME = "it-works-on-my-machine"

router = APIRouter()


@router.get("/", response_model=ServiceInfo)
async def root(settings: SettingsDep):
    """Root endpoint."""
    return ServiceInfo(
        service=SERVICE_NAME,
        version=settings.version,
        environment=settings.environment,
        timestamp=utc_timestamp(),
    )


@router.get("/version", response_model=BuildInfo)
async def version(settings: SettingsDep):
    """Build metadata. buildDate falls back to the current time when not set at build."""
    return BuildInfo(
        version=settings.version,
        build=settings.build_number,
        commit=settings.git_commit,
        build_date=settings.build_date or utc_timestamp(),
    )
