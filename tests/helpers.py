"""Assertion helpers shared by the endpoint tests."""

from datetime import datetime


def parse_timestamp(value: str) -> datetime:
    """Parse the service's ISO-8601 'Z' timestamps."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
