"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias

SpotId: TypeAlias = int
SpotName: TypeAlias = str


def from_unix_utc(ts: int | float) -> datetime:
    return datetime.fromtimestamp(ts, UTC)


def from_unix_local(ts: int | float) -> datetime:
    """Read a pre-shifted "local" unix timestamp as naive wall-clock time."""
    return datetime.fromtimestamp(ts, UTC).replace(tzinfo=None)
