from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from notesync.domains.common import Uuid


class Revision:
    """Исторический снимок элемента (заметки, файла и т.п.)"""

    def __init__(
        self,
        uuid: Uuid,
        item_uuid: Uuid,
        user_uuid: Uuid,
        content: Optional[str] = None,
        content_type: Optional[str] = None,
        items_key_id: Optional[str] = None,
        enc_item_key: Optional[str] = None,
        auth_hash: Optional[str] = None,
        shared_vault_uuid: Optional[Uuid] = None,
        key_system_identifier: Optional[str] = None,
        creation_date: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.item_uuid = item_uuid
        self.user_uuid = user_uuid
        self.content = content
        self.content_type = content_type
        self.items_key_id = items_key_id
        self.enc_item_key = enc_item_key
        self.auth_hash = auth_hash
        self.shared_vault_uuid = shared_vault_uuid
        self.key_system_identifier = key_system_identifier
        self.creation_date = creation_date
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def is_visible_to(self, user_uuid: Uuid, shared_vault_uuids: list[Uuid]) -> bool:
        """Владелец или участник vault, к которому привязана ревизия"""
        if self.user_uuid == user_uuid:
            return True
        return self.shared_vault_uuid is not None and self.shared_vault_uuid in shared_vault_uuids

    @classmethod
    def create_revision(
        cls,
        item_uuid: Uuid,
        user_uuid: Uuid,
        content: Optional[str],
        content_type: Optional[str],
        items_key_id: Optional[str] = None,
        enc_item_key: Optional[str] = None,
        auth_hash: Optional[str] = None,
        shared_vault_uuid: Optional[Uuid] = None,
        key_system_identifier: Optional[str] = None,
        creation_date: Optional[datetime] = None
    ) -> "Revision":
        """Создание новой ревизии при сохранении элемента"""
        return cls(
            uuid=Uuid.generate(),
            item_uuid=item_uuid,
            user_uuid=user_uuid,
            content=content,
            content_type=content_type,
            items_key_id=items_key_id,
            enc_item_key=enc_item_key,
            auth_hash=auth_hash,
            shared_vault_uuid=shared_vault_uuid,
            key_system_identifier=key_system_identifier,
            creation_date=creation_date
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Revision):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Revision(uuid={self.uuid}, item_uuid={self.item_uuid}, user_uuid={self.user_uuid})"


@dataclass
class RevisionMetadata:
    """Проекция ревизии без содержимого для списков"""
    uuid: Uuid
    item_uuid: Uuid
    content_type: Optional[str]
    shared_vault_uuid: Optional[Uuid]
    created_at: datetime
    updated_at: datetime
