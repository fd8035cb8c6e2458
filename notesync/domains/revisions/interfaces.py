from abc import ABC, abstractmethod
from typing import List, Optional

from notesync.domains.common import Uuid
from notesync.domains.revisions.entities import Revision, RevisionMetadata


class RevisionRepositoryInterface(ABC):
    """Доступ к ревизиям с учетом владельца и членства в shared vault'ах"""

    @abstractmethod
    async def find_one_by_uuid(
        self,
        revision_uuid: Uuid,
        user_uuid: Uuid,
        shared_vault_uuids: List[Uuid]
    ) -> Optional[Revision]: ...

    @abstractmethod
    async def find_metadata_by_item_id(
        self,
        item_uuid: Uuid,
        user_uuid: Uuid,
        shared_vault_uuids: List[Uuid]
    ) -> List[RevisionMetadata]: ...

    @abstractmethod
    async def find_by_user_uuid(self, user_uuid: Uuid, offset: int = 0, limit: int = 100) -> List[Revision]: ...

    @abstractmethod
    async def count_by_user_uuid(self, user_uuid: Uuid) -> int: ...

    @abstractmethod
    async def insert(self, revision: Revision) -> Revision: ...

    @abstractmethod
    async def remove_one_by_uuid(self, revision_uuid: Uuid, user_uuid: Uuid) -> None: ...

    @abstractmethod
    async def remove_by_user_uuid(self, user_uuid: Uuid) -> None: ...

    @abstractmethod
    async def clear_shared_vault_and_key_system_associations(
        self,
        shared_vault_uuid: Uuid,
        item_uuid: Optional[Uuid] = None
    ) -> None: ...
