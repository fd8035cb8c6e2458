from notesync.domains.revisions.entities import Revision, RevisionMetadata
from notesync.domains.revisions.schemas import RevisionCreate, RevisionQuery
from notesync.domains.revisions.services import RevisionService, SharedVaultRemovedEventHandler

__all__ = [
    "Revision", "RevisionMetadata",
    "RevisionCreate", "RevisionQuery",
    "RevisionService", "SharedVaultRemovedEventHandler"
]
