"""Request dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from womm.config import Settings


def get_settings(request: Request) -> Settings:
    """Settings resolved by the app factory at startup."""
    return request.app.state.settings


# Type alias for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
