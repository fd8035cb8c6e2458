from notesync.domains.common.result import FailureKind, Result
from notesync.domains.common.values import SharedVaultUserPermission, Uuid

__all__ = [
    "FailureKind", "Result",
    "SharedVaultUserPermission", "Uuid"
]
