from sqlalchemy import JSON, Column, String

from notesync.db.base import BaseModel


class DomainEventRecord(BaseModel):
    """Outbox опубликованных доменных событий"""
    __tablename__ = "domain_events"

    type = Column(String(255), nullable=False, index=True)
    origin = Column(String(255), nullable=False)
    user_identifier = Column(String(255), nullable=True)
    payload = Column(JSON, nullable=False)
