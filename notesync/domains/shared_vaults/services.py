import logging
import time
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from notesync.domains.common import FailureKind, Result, Uuid
from notesync.domains.events.factory import DomainEventFactory
from notesync.domains.events.publisher import DomainEventPublisherInterface
from notesync.domains.shared_vaults.interfaces import (
    SharedVaultInviteRepositoryInterface,
    SharedVaultRepositoryInterface,
    SharedVaultUserRepositoryInterface,
)
from notesync.domains.shared_vaults.schemas import (
    DeclineInviteToSharedVaultDTO,
    DeleteSharedVaultDTO,
    RemoveUserFromSharedVaultDTO,
)

logger = logging.getLogger(__name__)


class RemoveUserFromSharedVault:
    """Отзыв доступа одного участника к shared vault"""

    def __init__(
        self,
        shared_vault_repository: SharedVaultRepositoryInterface,
        shared_vault_user_repository: SharedVaultUserRepositoryInterface,
        domain_event_factory: DomainEventFactory,
        domain_event_publisher: DomainEventPublisherInterface
    ):
        self.shared_vault_repository = shared_vault_repository
        self.shared_vault_user_repository = shared_vault_user_repository
        self.domain_event_factory = domain_event_factory
        self.domain_event_publisher = domain_event_publisher

    async def execute(self, dto: RemoveUserFromSharedVaultDTO) -> Result[None]:
        originator_uuid_or_error = Uuid.create(dto.originator_uuid)
        if originator_uuid_or_error.is_failed():
            return Result.fail(originator_uuid_or_error.get_error(), FailureKind.VALIDATION)
        originator_uuid = originator_uuid_or_error.get_value()

        shared_vault_uuid_or_error = Uuid.create(dto.shared_vault_uuid)
        if shared_vault_uuid_or_error.is_failed():
            return Result.fail(shared_vault_uuid_or_error.get_error(), FailureKind.VALIDATION)
        shared_vault_uuid = shared_vault_uuid_or_error.get_value()

        user_uuid_or_error = Uuid.create(dto.user_uuid)
        if user_uuid_or_error.is_failed():
            return Result.fail(user_uuid_or_error.get_error(), FailureKind.VALIDATION)
        user_uuid = user_uuid_or_error.get_value()

        shared_vault = await self.shared_vault_repository.find_by_uuid(shared_vault_uuid)
        if shared_vault is None:
            return Result.fail("Shared vault not found", FailureKind.NOT_FOUND)

        # участник может выйти сам, остальных удаляет только владелец
        is_originator_the_owner = shared_vault.is_owned_by(originator_uuid)
        if not is_originator_the_owner and originator_uuid != user_uuid:
            return Result.fail("Only owner can remove users from shared vault", FailureKind.AUTHORIZATION)

        if shared_vault.is_owned_by(user_uuid) and not dto.force_remove_owner:
            return Result.fail("Owner cannot be removed from shared vault", FailureKind.INVALID_OPERATION)

        shared_vault_user = await self.shared_vault_user_repository.find_by_user_uuid_and_shared_vault_uuid(
            user_uuid=user_uuid,
            shared_vault_uuid=shared_vault_uuid
        )
        if shared_vault_user is None:
            return Result.fail("User is not a member of the shared vault", FailureKind.NOT_FOUND)

        await self.shared_vault_user_repository.remove(shared_vault_user)

        await self.domain_event_publisher.publish(
            self.domain_event_factory.create_user_removed_from_shared_vault_event(
                shared_vault_uuid=shared_vault_uuid.value,
                user_uuid=user_uuid.value
            )
        )

        return Result.ok()


class DeclineInviteToSharedVault:
    """Отклонение приглашения; отклоненное приглашение удаляется"""

    def __init__(self, shared_vault_invite_repository: SharedVaultInviteRepositoryInterface):
        self.shared_vault_invite_repository = shared_vault_invite_repository

    async def execute(self, dto: DeclineInviteToSharedVaultDTO) -> Result[None]:
        invite_uuid_or_error = Uuid.create(dto.invite_uuid)
        if invite_uuid_or_error.is_failed():
            return Result.fail(invite_uuid_or_error.get_error(), FailureKind.VALIDATION)
        invite_uuid = invite_uuid_or_error.get_value()

        user_uuid_or_error = Uuid.create(dto.user_uuid)
        if user_uuid_or_error.is_failed():
            return Result.fail(user_uuid_or_error.get_error(), FailureKind.VALIDATION)
        user_uuid = user_uuid_or_error.get_value()

        invite = await self.shared_vault_invite_repository.find_by_uuid(invite_uuid)
        if invite is None:
            return Result.fail("Invite not found", FailureKind.NOT_FOUND)

        if not invite.is_addressed_to(user_uuid):
            return Result.fail("Invite does not belong to the user", FailureKind.AUTHORIZATION)

        await self.shared_vault_invite_repository.remove(invite)

        return Result.ok()


class DeleteSharedVault:
    """Удаление shared vault вместе с участниками и приглашениями.

    Шаги выполняются последовательно, каждый коммитится отдельно:
    участники (включая владельца, force_remove_owner), затем приглашения,
    затем сам vault и событие SHARED_VAULT_REMOVED. Первая ошибка
    прерывает удаление; уже выполненные шаги не откатываются, повторный
    вызов доводит удаление до конца.
    """

    def __init__(
        self,
        shared_vault_repository: SharedVaultRepositoryInterface,
        shared_vault_user_repository: SharedVaultUserRepositoryInterface,
        shared_vault_invite_repository: SharedVaultInviteRepositoryInterface,
        remove_user_from_shared_vault: RemoveUserFromSharedVault,
        decline_invite_to_shared_vault: DeclineInviteToSharedVault,
        domain_event_factory: DomainEventFactory,
        domain_event_publisher: DomainEventPublisherInterface
    ):
        self.shared_vault_repository = shared_vault_repository
        self.shared_vault_user_repository = shared_vault_user_repository
        self.shared_vault_invite_repository = shared_vault_invite_repository
        self.remove_user_from_shared_vault = remove_user_from_shared_vault
        self.decline_invite_to_shared_vault = decline_invite_to_shared_vault
        self.domain_event_factory = domain_event_factory
        self.domain_event_publisher = domain_event_publisher

    @classmethod
    def from_session(
        cls,
        session: AsyncSession,
        domain_event_publisher: DomainEventPublisherInterface,
        domain_event_factory: Optional[DomainEventFactory] = None
    ) -> "DeleteSharedVault":
        """Сборка use case'а и его зависимостей поверх одной сессии"""
        from notesync.db.repositories.shared_vault_repository import (
            SharedVaultInviteRepository, SharedVaultRepository, SharedVaultUserRepository
        )

        domain_event_factory = domain_event_factory or DomainEventFactory()
        shared_vault_repository = SharedVaultRepository(session)
        shared_vault_user_repository = SharedVaultUserRepository(session)
        shared_vault_invite_repository = SharedVaultInviteRepository(session)

        return cls(
            shared_vault_repository=shared_vault_repository,
            shared_vault_user_repository=shared_vault_user_repository,
            shared_vault_invite_repository=shared_vault_invite_repository,
            remove_user_from_shared_vault=RemoveUserFromSharedVault(
                shared_vault_repository,
                shared_vault_user_repository,
                domain_event_factory,
                domain_event_publisher
            ),
            decline_invite_to_shared_vault=DeclineInviteToSharedVault(shared_vault_invite_repository),
            domain_event_factory=domain_event_factory,
            domain_event_publisher=domain_event_publisher
        )

    async def execute(self, dto: DeleteSharedVaultDTO, deadline: Optional[float] = None) -> Result[None]:
        """deadline - значение time.monotonic(), проверяется только между шагами"""
        originator_uuid_or_error = Uuid.create(dto.originator_uuid)
        if originator_uuid_or_error.is_failed():
            return Result.fail(originator_uuid_or_error.get_error(), FailureKind.VALIDATION)
        originator_uuid = originator_uuid_or_error.get_value()

        shared_vault_uuid_or_error = Uuid.create(dto.shared_vault_uuid)
        if shared_vault_uuid_or_error.is_failed():
            return Result.fail(shared_vault_uuid_or_error.get_error(), FailureKind.VALIDATION)
        shared_vault_uuid = shared_vault_uuid_or_error.get_value()

        shared_vault = await self.shared_vault_repository.find_by_uuid(shared_vault_uuid)
        if shared_vault is None:
            return Result.fail("Shared vault not found", FailureKind.NOT_FOUND)

        if not shared_vault.is_owned_by(originator_uuid):
            return Result.fail("Shared vault does not belong to the user", FailureKind.AUTHORIZATION)

        logger.info(f"Deleting shared vault {shared_vault_uuid.value} on behalf of {originator_uuid.value}")

        shared_vault_users = await self.shared_vault_user_repository.find_by_shared_vault_uuid(shared_vault_uuid)
        for shared_vault_user in shared_vault_users:
            if self._deadline_exceeded(deadline):
                return self._abort_on_deadline(shared_vault_uuid)

            result = await self.remove_user_from_shared_vault.execute(
                RemoveUserFromSharedVaultDTO(
                    originator_uuid=originator_uuid.value,
                    shared_vault_uuid=shared_vault_uuid.value,
                    user_uuid=shared_vault_user.user_uuid.value,
                    force_remove_owner=True
                )
            )
            if result.is_failed():
                return self._abort(shared_vault_uuid, result.get_error(), result.kind)

        shared_vault_invites = await self.shared_vault_invite_repository.find_by_shared_vault_uuid(shared_vault_uuid)
        for shared_vault_invite in shared_vault_invites:
            if self._deadline_exceeded(deadline):
                return self._abort_on_deadline(shared_vault_uuid)

            result = await self.decline_invite_to_shared_vault.execute(
                DeclineInviteToSharedVaultDTO(
                    invite_uuid=shared_vault_invite.uuid.value,
                    user_uuid=shared_vault_invite.user_uuid.value
                )
            )
            if result.is_failed():
                return self._abort(shared_vault_uuid, result.get_error(), result.kind)

        if self._deadline_exceeded(deadline):
            return self._abort_on_deadline(shared_vault_uuid)

        # участники или приглашения могли появиться после перечисления
        if await self._has_dependents(shared_vault_uuid):
            return self._abort(
                shared_vault_uuid,
                "Shared vault received new members or invites during deletion",
                FailureKind.CONFLICT
            )

        await self.shared_vault_repository.remove(shared_vault)

        await self.domain_event_publisher.publish(
            self.domain_event_factory.create_shared_vault_removed_event(
                shared_vault_uuid=shared_vault_uuid.value
            )
        )

        logger.info(f"Shared vault {shared_vault_uuid.value} deleted")

        return Result.ok()

    async def _has_dependents(self, shared_vault_uuid: Uuid) -> bool:
        if await self.shared_vault_user_repository.find_by_shared_vault_uuid(shared_vault_uuid):
            return True
        return bool(await self.shared_vault_invite_repository.find_by_shared_vault_uuid(shared_vault_uuid))

    def _deadline_exceeded(self, deadline: Optional[float]) -> bool:
        return deadline is not None and time.monotonic() >= deadline

    def _abort_on_deadline(self, shared_vault_uuid: Uuid) -> Result[None]:
        return self._abort(shared_vault_uuid, "Shared vault deletion deadline exceeded", FailureKind.DEADLINE_EXCEEDED)

    def _abort(self, shared_vault_uuid: Uuid, error: str, kind: Optional[FailureKind]) -> Result[None]:
        logger.warning(f"Aborted deletion of shared vault {shared_vault_uuid.value}: {error}")
        return Result.fail(error, kind or FailureKind.INVALID_OPERATION)
