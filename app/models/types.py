"""Custom column types."""
import json
from datetime import datetime, timezone

from sqlalchemy.types import DateTime, Text, TypeDecorator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JSONEncoded(TypeDecorator):
    """
    Stores lists and dicts as JSON text.

    This is the only place responses are encoded for storage; models always
    hand back the decoded Python value. List order and dict key order survive
    the round trip.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return json.dumps(value, ensure_ascii=False)

    def process_result_value(self, value, dialect):
        if value is None or value == "":
            return None
        return json.loads(value)


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime stored as UTC, also on backends that drop tzinfo (SQLite)."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
