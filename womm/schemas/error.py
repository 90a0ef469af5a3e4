"""Error response schema."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str
    message: str
    timestamp: str
