from notesync.db.models.revision import Revision
from notesync.db.models.shared_vault import SharedVault, SharedVaultUser, SharedVaultInvite
from notesync.db.models.domain_event import DomainEventRecord

__all__ = [
    "Revision",
    "SharedVault",
    "SharedVaultUser",
    "SharedVaultInvite",
    "DomainEventRecord"
]
