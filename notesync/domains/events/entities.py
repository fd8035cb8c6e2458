from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class DomainEventType(str, Enum):
    """Типы доменных событий"""
    SHARED_VAULT_REMOVED = "SHARED_VAULT_REMOVED"
    USER_REMOVED_FROM_SHARED_VAULT = "USER_REMOVED_FROM_SHARED_VAULT"


class DomainEventMeta(BaseModel):
    """Служебные данные события"""
    origin: str
    user_identifier: Optional[str] = None


class DomainEvent(BaseModel):
    """Доменное событие, публикуемое после зафиксированного изменения"""
    model_config = ConfigDict(use_enum_values=True)

    type: DomainEventType
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    meta: DomainEventMeta
    payload: Dict[str, Any] = Field(default_factory=dict)
