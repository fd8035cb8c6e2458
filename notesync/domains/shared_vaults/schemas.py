from pydantic import BaseModel, ConfigDict


class SharedVaultCommand(BaseModel):
    """Базовая схема команд; идентификаторы валидируются в use case'ах"""
    model_config = ConfigDict(frozen=True)


class RemoveUserFromSharedVaultDTO(SharedVaultCommand):
    originator_uuid: str
    shared_vault_uuid: str
    user_uuid: str
    force_remove_owner: bool = False


class DeclineInviteToSharedVaultDTO(SharedVaultCommand):
    invite_uuid: str
    user_uuid: str


class DeleteSharedVaultDTO(SharedVaultCommand):
    originator_uuid: str
    shared_vault_uuid: str
