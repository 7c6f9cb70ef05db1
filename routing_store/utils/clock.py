"""Time sources used to timestamp routing records."""

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeProvider(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> datetime:
        ...


class SystemTimeProvider:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
