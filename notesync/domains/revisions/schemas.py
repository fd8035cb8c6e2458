from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class RevisionCreate(BaseModel):
    """Схема для создания ревизии при сохранении элемента"""
    item_uuid: str
    user_uuid: str
    content: Optional[str] = None
    content_type: Optional[str] = Field(None, max_length=255)
    items_key_id: Optional[str] = Field(None, max_length=255)
    enc_item_key: Optional[str] = None
    auth_hash: Optional[str] = Field(None, max_length=255)
    shared_vault_uuid: Optional[str] = None
    key_system_identifier: Optional[str] = Field(None, max_length=255)
    creation_date: Optional[datetime] = None


class RevisionQuery(BaseModel):
    """Запрос с учетом членства пользователя в shared vault'ах"""
    user_uuid: str
    shared_vault_uuids: List[str] = Field(default_factory=list)
