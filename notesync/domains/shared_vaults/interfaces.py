from abc import ABC, abstractmethod
from typing import List, Optional

from notesync.domains.common import Uuid
from notesync.domains.shared_vaults.entities import SharedVault, SharedVaultInvite, SharedVaultUser


class SharedVaultRepositoryInterface(ABC):

    @abstractmethod
    async def find_by_uuid(self, shared_vault_uuid: Uuid) -> Optional[SharedVault]: ...

    @abstractmethod
    async def save(self, shared_vault: SharedVault) -> SharedVault: ...

    @abstractmethod
    async def remove(self, shared_vault: SharedVault) -> None: ...


class SharedVaultUserRepositoryInterface(ABC):

    @abstractmethod
    async def find_by_shared_vault_uuid(self, shared_vault_uuid: Uuid) -> List[SharedVaultUser]: ...

    @abstractmethod
    async def find_by_user_uuid(self, user_uuid: Uuid) -> List[SharedVaultUser]: ...

    @abstractmethod
    async def find_by_user_uuid_and_shared_vault_uuid(
        self,
        user_uuid: Uuid,
        shared_vault_uuid: Uuid
    ) -> Optional[SharedVaultUser]: ...

    @abstractmethod
    async def save(self, shared_vault_user: SharedVaultUser) -> SharedVaultUser: ...

    @abstractmethod
    async def remove(self, shared_vault_user: SharedVaultUser) -> None: ...


class SharedVaultInviteRepositoryInterface(ABC):

    @abstractmethod
    async def find_by_uuid(self, invite_uuid: Uuid) -> Optional[SharedVaultInvite]: ...

    @abstractmethod
    async def find_by_shared_vault_uuid(self, shared_vault_uuid: Uuid) -> List[SharedVaultInvite]: ...

    @abstractmethod
    async def find_by_user_uuid(self, user_uuid: Uuid) -> List[SharedVaultInvite]: ...

    @abstractmethod
    async def save(self, invite: SharedVaultInvite) -> SharedVaultInvite: ...

    @abstractmethod
    async def remove(self, invite: SharedVaultInvite) -> None: ...
