import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from notesync.domains.common import FailureKind, Result, Uuid
from notesync.domains.events.entities import DomainEvent
from notesync.domains.revisions.entities import Revision, RevisionMetadata
from notesync.domains.revisions.interfaces import RevisionRepositoryInterface
from notesync.domains.revisions.schemas import RevisionCreate, RevisionQuery

logger = logging.getLogger(__name__)


def _parse_shared_vault_uuids(raw_uuids: List[str]) -> Result[List[Uuid]]:
    shared_vault_uuids = []
    for raw_uuid in raw_uuids:
        uuid_or_error = Uuid.create(raw_uuid)
        if uuid_or_error.is_failed():
            return Result.fail(uuid_or_error.get_error(), FailureKind.VALIDATION)
        shared_vault_uuids.append(uuid_or_error.get_value())
    return Result.ok(shared_vault_uuids)


class RevisionService:
    """Сервис для работы с ревизиями элементов"""

    def __init__(self, revision_repository: RevisionRepositoryInterface):
        self.revision_repository = revision_repository

    @classmethod
    def from_session(cls, session: AsyncSession) -> "RevisionService":
        from notesync.db.repositories.revision_repository import RevisionRepository

        return cls(RevisionRepository(session))

    async def create_revision(self, revision_data: RevisionCreate) -> Result[Revision]:
        """Создание ревизии при сохранении элемента"""
        item_uuid_or_error = Uuid.create(revision_data.item_uuid)
        if item_uuid_or_error.is_failed():
            return Result.fail(item_uuid_or_error.get_error(), FailureKind.VALIDATION)

        user_uuid_or_error = Uuid.create(revision_data.user_uuid)
        if user_uuid_or_error.is_failed():
            return Result.fail(user_uuid_or_error.get_error(), FailureKind.VALIDATION)

        shared_vault_uuid = None
        if revision_data.shared_vault_uuid is not None:
            shared_vault_uuid_or_error = Uuid.create(revision_data.shared_vault_uuid)
            if shared_vault_uuid_or_error.is_failed():
                return Result.fail(shared_vault_uuid_or_error.get_error(), FailureKind.VALIDATION)
            shared_vault_uuid = shared_vault_uuid_or_error.get_value()

        revision = Revision.create_revision(
            item_uuid=item_uuid_or_error.get_value(),
            user_uuid=user_uuid_or_error.get_value(),
            content=revision_data.content,
            content_type=revision_data.content_type,
            items_key_id=revision_data.items_key_id,
            enc_item_key=revision_data.enc_item_key,
            auth_hash=revision_data.auth_hash,
            shared_vault_uuid=shared_vault_uuid,
            key_system_identifier=revision_data.key_system_identifier,
            creation_date=revision_data.creation_date
        )

        return Result.ok(await self.revision_repository.insert(revision))

    async def get_revision(self, revision_uuid: str, query: RevisionQuery) -> Result[Revision]:
        """Получение ревизии, видимой пользователю"""
        revision_uuid_or_error = Uuid.create(revision_uuid)
        if revision_uuid_or_error.is_failed():
            return Result.fail(revision_uuid_or_error.get_error(), FailureKind.VALIDATION)

        user_uuid_or_error = Uuid.create(query.user_uuid)
        if user_uuid_or_error.is_failed():
            return Result.fail(user_uuid_or_error.get_error(), FailureKind.VALIDATION)

        shared_vault_uuids_or_error = _parse_shared_vault_uuids(query.shared_vault_uuids)
        if shared_vault_uuids_or_error.is_failed():
            return Result.fail(shared_vault_uuids_or_error.get_error(), FailureKind.VALIDATION)

        revision = await self.revision_repository.find_one_by_uuid(
            revision_uuid_or_error.get_value(),
            user_uuid_or_error.get_value(),
            shared_vault_uuids_or_error.get_value()
        )
        if revision is None:
            return Result.fail(f"Could not find revision with uuid: {revision_uuid}", FailureKind.NOT_FOUND)

        return Result.ok(revision)

    async def get_revisions_metadata(self, item_uuid: str, query: RevisionQuery) -> Result[List[RevisionMetadata]]:
        """Список ревизий элемента без содержимого"""
        item_uuid_or_error = Uuid.create(item_uuid)
        if item_uuid_or_error.is_failed():
            return Result.fail(item_uuid_or_error.get_error(), FailureKind.VALIDATION)

        user_uuid_or_error = Uuid.create(query.user_uuid)
        if user_uuid_or_error.is_failed():
            return Result.fail(user_uuid_or_error.get_error(), FailureKind.VALIDATION)

        shared_vault_uuids_or_error = _parse_shared_vault_uuids(query.shared_vault_uuids)
        if shared_vault_uuids_or_error.is_failed():
            return Result.fail(shared_vault_uuids_or_error.get_error(), FailureKind.VALIDATION)

        metadata = await self.revision_repository.find_metadata_by_item_id(
            item_uuid_or_error.get_value(),
            user_uuid_or_error.get_value(),
            shared_vault_uuids_or_error.get_value()
        )

        return Result.ok(metadata)

    async def delete_revision(self, revision_uuid: str, user_uuid: str) -> Result[None]:
        """Удаление ревизии владельцем; повторный вызов безопасен"""
        revision_uuid_or_error = Uuid.create(revision_uuid)
        if revision_uuid_or_error.is_failed():
            return Result.fail(revision_uuid_or_error.get_error(), FailureKind.VALIDATION)

        user_uuid_or_error = Uuid.create(user_uuid)
        if user_uuid_or_error.is_failed():
            return Result.fail(user_uuid_or_error.get_error(), FailureKind.VALIDATION)

        await self.revision_repository.remove_one_by_uuid(
            revision_uuid_or_error.get_value(),
            user_uuid_or_error.get_value()
        )

        return Result.ok()

    async def remove_revisions_for_user(self, user_uuid: str) -> Result[None]:
        """Удаление всех ревизий при удалении аккаунта"""
        user_uuid_or_error = Uuid.create(user_uuid)
        if user_uuid_or_error.is_failed():
            return Result.fail(user_uuid_or_error.get_error(), FailureKind.VALIDATION)

        await self.revision_repository.remove_by_user_uuid(user_uuid_or_error.get_value())

        logger.info(f"Removed revisions of user {user_uuid}")

        return Result.ok()

    async def detach_from_shared_vault(self, shared_vault_uuid: str, item_uuid: Optional[str] = None) -> Result[None]:
        """Отвязка ревизий от shared vault (всех или одного элемента)"""
        shared_vault_uuid_or_error = Uuid.create(shared_vault_uuid)
        if shared_vault_uuid_or_error.is_failed():
            return Result.fail(shared_vault_uuid_or_error.get_error(), FailureKind.VALIDATION)

        parsed_item_uuid = None
        if item_uuid is not None:
            item_uuid_or_error = Uuid.create(item_uuid)
            if item_uuid_or_error.is_failed():
                return Result.fail(item_uuid_or_error.get_error(), FailureKind.VALIDATION)
            parsed_item_uuid = item_uuid_or_error.get_value()

        await self.revision_repository.clear_shared_vault_and_key_system_associations(
            shared_vault_uuid=shared_vault_uuid_or_error.get_value(),
            item_uuid=parsed_item_uuid
        )

        return Result.ok()


class SharedVaultRemovedEventHandler:
    """После удаления vault его ревизии становятся личной историей владельцев"""

    def __init__(self, revision_service: RevisionService):
        self.revision_service = revision_service

    async def handle(self, event: DomainEvent) -> None:
        shared_vault_uuid = event.payload.get("sharedVaultUuid")

        result = await self.revision_service.detach_from_shared_vault(shared_vault_uuid)
        if result.is_failed():
            logger.error(f"[{event.type}] Could not clear revision associations: {result.get_error()}")
            return

        logger.info(f"[{event.type}] Cleared revision associations of shared vault {shared_vault_uuid}")
