"""Stored record database model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class StoredRecord:
    """Stored record data object - maps to one row of a routing table."""

    partition_key: str
    row_key: str
    body: str
    # Naive UTC, the way the backing store hands it back
    timestamp: datetime = field(default_factory=_utcnow)
