from notesync.db.repositories.revision_repository import RevisionRepository
from notesync.db.repositories.shared_vault_repository import (
    SharedVaultRepository, SharedVaultUserRepository, SharedVaultInviteRepository
)

__all__ = [
    "RevisionRepository",
    "SharedVaultRepository",
    "SharedVaultUserRepository",
    "SharedVaultInviteRepository"
]
