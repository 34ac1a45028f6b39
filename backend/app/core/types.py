"""Custom SQLAlchemy column types and defaults shared by the portal models"""
from datetime import datetime
from sqlalchemy import TypeDecorator, String
import uuid


def generate_uuid() -> str:
    """Generate a UUID string"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the format every DateTime column stores"""
    return datetime.utcnow()


class GUID(TypeDecorator):
    """
    Identifier column stored as VARCHAR(36).

    Identity-provider user ids arrive as strings in either case; they are
    normalized to lowercase so lookups by token subject always match.
    """
    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            return str(value).lower()
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            return str(value)
        return value
