from datetime import datetime, UTC
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models"""

    pass


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(UTC)
