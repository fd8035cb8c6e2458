import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String

from notesync.core.db import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """Общие колонки: строковый uuid и метки времени"""
    __abstract__ = True

    uuid = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now)
