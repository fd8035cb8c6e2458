from sqlalchemy import BigInteger, Column, String, Text, UniqueConstraint

from notesync.db.base import BaseModel


class SharedVault(BaseModel):
    __tablename__ = "shared_vaults"

    user_uuid = Column(String(36), nullable=False, index=True)
    file_upload_bytes_used = Column(BigInteger, nullable=False, default=0)


class SharedVaultUser(BaseModel):
    __tablename__ = "shared_vault_users"

    # без FK-каскада: участники удаляются use case'ом до удаления vault
    shared_vault_uuid = Column(String(36), nullable=False, index=True)
    user_uuid = Column(String(36), nullable=False, index=True)
    permission = Column(String(24), nullable=False, default="read")

    __table_args__ = (
        UniqueConstraint("shared_vault_uuid", "user_uuid", name="uq_shared_vault_users_vault_user"),
    )


class SharedVaultInvite(BaseModel):
    __tablename__ = "shared_vault_invites"

    shared_vault_uuid = Column(String(36), nullable=False, index=True)
    user_uuid = Column(String(36), nullable=False, index=True)
    sender_uuid = Column(String(36), nullable=False)
    encrypted_message = Column(Text, nullable=False, default="")
    permission = Column(String(24), nullable=False, default="read")
