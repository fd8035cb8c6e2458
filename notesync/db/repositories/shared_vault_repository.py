from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from notesync.db.models.shared_vault import (
    SharedVault as SharedVaultModel,
    SharedVaultInvite as SharedVaultInviteModel,
    SharedVaultUser as SharedVaultUserModel,
)
from notesync.domains.common import SharedVaultUserPermission, Uuid
from notesync.domains.shared_vaults.entities import SharedVault, SharedVaultInvite, SharedVaultUser
from notesync.domains.shared_vaults.interfaces import (
    SharedVaultInviteRepositoryInterface,
    SharedVaultRepositoryInterface,
    SharedVaultUserRepositoryInterface,
)


class SharedVaultRepository(SharedVaultRepositoryInterface):
    """Репозиторий shared vault'ов"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_uuid(self, shared_vault_uuid: Uuid) -> Optional[SharedVault]:
        db_vault = await self.session.get(SharedVaultModel, shared_vault_uuid.value)
        return self._to_domain(db_vault) if db_vault else None

    async def save(self, shared_vault: SharedVault) -> SharedVault:
        """Создание или обновление vault"""
        db_vault = await self.session.get(SharedVaultModel, shared_vault.uuid.value)
        if db_vault is None:
            db_vault = SharedVaultModel(
                uuid=shared_vault.uuid.value,
                created_at=shared_vault.created_at
            )
            self.session.add(db_vault)

        db_vault.user_uuid = shared_vault.user_uuid.value
        db_vault.file_upload_bytes_used = shared_vault.file_upload_bytes_used
        db_vault.updated_at = shared_vault.updated_at

        await self.session.commit()
        await self.session.refresh(db_vault)
        return self._to_domain(db_vault)

    async def remove(self, shared_vault: SharedVault) -> None:
        db_vault = await self.session.get(SharedVaultModel, shared_vault.uuid.value)
        if db_vault is None:
            return
        await self.session.delete(db_vault)
        await self.session.commit()

    def _to_domain(self, db_vault: SharedVaultModel) -> SharedVault:
        return SharedVault(
            uuid=Uuid.create(db_vault.uuid).get_value(),
            user_uuid=Uuid.create(db_vault.user_uuid).get_value(),
            file_upload_bytes_used=db_vault.file_upload_bytes_used,
            created_at=db_vault.created_at,
            updated_at=db_vault.updated_at
        )


class SharedVaultUserRepository(SharedVaultUserRepositoryInterface):
    """Репозиторий членства в shared vault'ах"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_shared_vault_uuid(self, shared_vault_uuid: Uuid) -> List[SharedVaultUser]:
        result = await self.session.execute(
            select(SharedVaultUserModel).where(SharedVaultUserModel.shared_vault_uuid == shared_vault_uuid.value)
        )
        return [self._to_domain(member) for member in result.scalars().all()]

    async def find_by_user_uuid(self, user_uuid: Uuid) -> List[SharedVaultUser]:
        result = await self.session.execute(
            select(SharedVaultUserModel).where(SharedVaultUserModel.user_uuid == user_uuid.value)
        )
        return [self._to_domain(member) for member in result.scalars().all()]

    async def find_by_user_uuid_and_shared_vault_uuid(
        self,
        user_uuid: Uuid,
        shared_vault_uuid: Uuid
    ) -> Optional[SharedVaultUser]:
        result = await self.session.execute(
            select(SharedVaultUserModel).where(
                SharedVaultUserModel.user_uuid == user_uuid.value,
                SharedVaultUserModel.shared_vault_uuid == shared_vault_uuid.value
            )
        )
        member = result.scalar_one_or_none()
        return self._to_domain(member) if member else None

    async def save(self, shared_vault_user: SharedVaultUser) -> SharedVaultUser:
        db_member = await self.session.get(SharedVaultUserModel, shared_vault_user.uuid.value)
        if db_member is None:
            db_member = SharedVaultUserModel(
                uuid=shared_vault_user.uuid.value,
                created_at=shared_vault_user.created_at
            )
            self.session.add(db_member)

        db_member.shared_vault_uuid = shared_vault_user.shared_vault_uuid.value
        db_member.user_uuid = shared_vault_user.user_uuid.value
        db_member.permission = shared_vault_user.permission.value
        db_member.updated_at = shared_vault_user.updated_at

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("User is already a member of this shared vault")

        await self.session.refresh(db_member)
        return self._to_domain(db_member)

    async def remove(self, shared_vault_user: SharedVaultUser) -> None:
        db_member = await self.session.get(SharedVaultUserModel, shared_vault_user.uuid.value)
        if db_member is None:
            return
        await self.session.delete(db_member)
        await self.session.commit()

    def _to_domain(self, db_member: SharedVaultUserModel) -> SharedVaultUser:
        return SharedVaultUser(
            uuid=Uuid.create(db_member.uuid).get_value(),
            shared_vault_uuid=Uuid.create(db_member.shared_vault_uuid).get_value(),
            user_uuid=Uuid.create(db_member.user_uuid).get_value(),
            permission=SharedVaultUserPermission.create(db_member.permission).get_value(),
            created_at=db_member.created_at,
            updated_at=db_member.updated_at
        )


class SharedVaultInviteRepository(SharedVaultInviteRepositoryInterface):
    """Репозиторий приглашений в shared vault'ы"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_uuid(self, invite_uuid: Uuid) -> Optional[SharedVaultInvite]:
        db_invite = await self.session.get(SharedVaultInviteModel, invite_uuid.value)
        return self._to_domain(db_invite) if db_invite else None

    async def find_by_shared_vault_uuid(self, shared_vault_uuid: Uuid) -> List[SharedVaultInvite]:
        result = await self.session.execute(
            select(SharedVaultInviteModel).where(SharedVaultInviteModel.shared_vault_uuid == shared_vault_uuid.value)
        )
        return [self._to_domain(invite) for invite in result.scalars().all()]

    async def find_by_user_uuid(self, user_uuid: Uuid) -> List[SharedVaultInvite]:
        result = await self.session.execute(
            select(SharedVaultInviteModel).where(SharedVaultInviteModel.user_uuid == user_uuid.value)
        )
        return [self._to_domain(invite) for invite in result.scalars().all()]

    async def save(self, invite: SharedVaultInvite) -> SharedVaultInvite:
        db_invite = await self.session.get(SharedVaultInviteModel, invite.uuid.value)
        if db_invite is None:
            db_invite = SharedVaultInviteModel(uuid=invite.uuid.value, created_at=invite.created_at)
            self.session.add(db_invite)

        db_invite.shared_vault_uuid = invite.shared_vault_uuid.value
        db_invite.user_uuid = invite.user_uuid.value
        db_invite.sender_uuid = invite.sender_uuid.value
        db_invite.encrypted_message = invite.encrypted_message
        db_invite.permission = invite.permission.value
        db_invite.updated_at = invite.updated_at

        await self.session.commit()
        await self.session.refresh(db_invite)
        return self._to_domain(db_invite)

    async def remove(self, invite: SharedVaultInvite) -> None:
        db_invite = await self.session.get(SharedVaultInviteModel, invite.uuid.value)
        if db_invite is None:
            return
        await self.session.delete(db_invite)
        await self.session.commit()

    def _to_domain(self, db_invite: SharedVaultInviteModel) -> SharedVaultInvite:
        return SharedVaultInvite(
            uuid=Uuid.create(db_invite.uuid).get_value(),
            shared_vault_uuid=Uuid.create(db_invite.shared_vault_uuid).get_value(),
            user_uuid=Uuid.create(db_invite.user_uuid).get_value(),
            sender_uuid=Uuid.create(db_invite.sender_uuid).get_value(),
            encrypted_message=db_invite.encrypted_message,
            permission=SharedVaultUserPermission.create(db_invite.permission).get_value(),
            created_at=db_invite.created_at,
            updated_at=db_invite.updated_at
        )
