from sqlalchemy import Column, DateTime, Index, String, Text

from notesync.db.base import BaseModel


class Revision(BaseModel):
    __tablename__ = "revisions_revisions"

    item_uuid = Column(String(36), nullable=False, index=True)
    user_uuid = Column(String(36), nullable=False, index=True)
    shared_vault_uuid = Column(String(36), nullable=True, index=True)
    key_system_identifier = Column(String(255), nullable=True)

    content = Column(Text, nullable=True)
    content_type = Column(String(255), nullable=True)
    items_key_id = Column(String(255), nullable=True)
    enc_item_key = Column(Text, nullable=True)
    auth_hash = Column(String(255), nullable=True)
    creation_date = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("index_revisions_on_item_uuid_and_created_at", "item_uuid", "created_at"),
    )
