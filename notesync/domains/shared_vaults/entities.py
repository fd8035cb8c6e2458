from datetime import datetime, timezone
from typing import Optional

from notesync.domains.common import SharedVaultUserPermission, Uuid


class SharedVault:
    """Контейнер для совместной работы; удалить его может только владелец"""

    def __init__(
        self,
        uuid: Uuid,
        user_uuid: Uuid,
        file_upload_bytes_used: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.user_uuid = user_uuid
        self.file_upload_bytes_used = file_upload_bytes_used
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def is_owned_by(self, user_uuid: Uuid) -> bool:
        return self.user_uuid == user_uuid

    @classmethod
    def create_shared_vault(cls, user_uuid: Uuid) -> "SharedVault":
        return cls(uuid=Uuid.generate(), user_uuid=user_uuid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SharedVault):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"SharedVault(uuid={self.uuid}, user_uuid={self.user_uuid})"


class SharedVaultUser:
    """Членство пользователя в shared vault"""

    def __init__(
        self,
        uuid: Uuid,
        shared_vault_uuid: Uuid,
        user_uuid: Uuid,
        permission: SharedVaultUserPermission = SharedVaultUserPermission.READ,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.shared_vault_uuid = shared_vault_uuid
        self.user_uuid = user_uuid
        self.permission = permission
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    @classmethod
    def create_membership(
        cls,
        shared_vault_uuid: Uuid,
        user_uuid: Uuid,
        permission: SharedVaultUserPermission = SharedVaultUserPermission.READ
    ) -> "SharedVaultUser":
        return cls(
            uuid=Uuid.generate(),
            shared_vault_uuid=shared_vault_uuid,
            user_uuid=user_uuid,
            permission=permission
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, SharedVaultUser):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"SharedVaultUser(shared_vault_uuid={self.shared_vault_uuid}, user_uuid={self.user_uuid})"


class SharedVaultInvite:
    """Приглашение в shared vault, еще не принятое получателем"""

    def __init__(
        self,
        uuid: Uuid,
        shared_vault_uuid: Uuid,
        user_uuid: Uuid,
        sender_uuid: Uuid,
        encrypted_message: str = "",
        permission: SharedVaultUserPermission = SharedVaultUserPermission.READ,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.shared_vault_uuid = shared_vault_uuid
        self.user_uuid = user_uuid
        self.sender_uuid = sender_uuid
        self.encrypted_message = encrypted_message
        self.permission = permission
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def is_addressed_to(self, user_uuid: Uuid) -> bool:
        return self.user_uuid == user_uuid

    @classmethod
    def create_invite(
        cls,
        shared_vault_uuid: Uuid,
        user_uuid: Uuid,
        sender_uuid: Uuid,
        encrypted_message: str = "",
        permission: SharedVaultUserPermission = SharedVaultUserPermission.READ
    ) -> "SharedVaultInvite":
        return cls(
            uuid=Uuid.generate(),
            shared_vault_uuid=shared_vault_uuid,
            user_uuid=user_uuid,
            sender_uuid=sender_uuid,
            encrypted_message=encrypted_message,
            permission=permission
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, SharedVaultInvite):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"SharedVaultInvite(uuid={self.uuid}, shared_vault_uuid={self.shared_vault_uuid}, user_uuid={self.user_uuid})"
