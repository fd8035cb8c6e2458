from notesync.domains.shared_vaults.entities import SharedVault, SharedVaultUser, SharedVaultInvite
from notesync.domains.shared_vaults.schemas import (
    RemoveUserFromSharedVaultDTO, DeclineInviteToSharedVaultDTO, DeleteSharedVaultDTO
)
from notesync.domains.shared_vaults.services import (
    RemoveUserFromSharedVault, DeclineInviteToSharedVault, DeleteSharedVault
)

__all__ = [
    "SharedVault", "SharedVaultUser", "SharedVaultInvite",
    "RemoveUserFromSharedVaultDTO", "DeclineInviteToSharedVaultDTO", "DeleteSharedVaultDTO",
    "RemoveUserFromSharedVault", "DeclineInviteToSharedVault", "DeleteSharedVault"
]
