from typing import Optional

from notesync.core import config
from notesync.domains.events.entities import DomainEvent, DomainEventMeta, DomainEventType


class DomainEventFactory:
    """Фабрика доменных событий syncing-server"""

    def __init__(self, origin: Optional[str] = None):
        self.origin = origin or config.settings.event_origin

    def create_shared_vault_removed_event(self, shared_vault_uuid: str) -> DomainEvent:
        return DomainEvent(
            type=DomainEventType.SHARED_VAULT_REMOVED,
            meta=DomainEventMeta(origin=self.origin),
            payload={"sharedVaultUuid": shared_vault_uuid}
        )

    def create_user_removed_from_shared_vault_event(self, shared_vault_uuid: str, user_uuid: str) -> DomainEvent:
        return DomainEvent(
            type=DomainEventType.USER_REMOVED_FROM_SHARED_VAULT,
            meta=DomainEventMeta(origin=self.origin, user_identifier=user_uuid),
            payload={"sharedVaultUuid": shared_vault_uuid, "userUuid": user_uuid}
        )
