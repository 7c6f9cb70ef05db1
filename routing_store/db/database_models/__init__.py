"""Database models (Data Objects) - map to database tables."""

from .stored_record import StoredRecord

__all__ = ["StoredRecord"]
