import logging
from typing import List, Optional

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from notesync.db.models.revision import Revision as RevisionModel
from notesync.domains.common import Uuid
from notesync.domains.revisions.entities import Revision, RevisionMetadata
from notesync.domains.revisions.interfaces import RevisionRepositoryInterface

logger = logging.getLogger(__name__)


class RevisionRepository(RevisionRepositoryInterface):
    """Репозиторий ревизий.

    Ревизия видна запрашивающему, если он ее владелец или если она
    привязана к одному из его shared vault'ов. Список vault'ов передает
    вызывающий код; репозиторий сам членство не вычисляет.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_one_by_uuid(
        self,
        revision_uuid: Uuid,
        user_uuid: Uuid,
        shared_vault_uuids: List[Uuid]
    ) -> Optional[Revision]:
        """Получение ревизии по UUID с учетом видимости"""
        result = await self.session.execute(
            select(RevisionModel).where(
                RevisionModel.uuid == revision_uuid.value,
                self._visible_to(user_uuid, shared_vault_uuids)
            )
            .execution_options(populate_existing=True)
        )
        db_revision = result.scalar_one_or_none()
        return self._to_domain(db_revision) if db_revision else None

    async def find_metadata_by_item_id(
        self,
        item_uuid: Uuid,
        user_uuid: Uuid,
        shared_vault_uuids: List[Uuid]
    ) -> List[RevisionMetadata]:
        """Метаданные ревизий элемента, новые первыми"""
        result = await self.session.execute(
            select(
                RevisionModel.uuid,
                RevisionModel.item_uuid,
                RevisionModel.content_type,
                RevisionModel.shared_vault_uuid,
                RevisionModel.created_at,
                RevisionModel.updated_at
            )
            .where(
                RevisionModel.item_uuid == item_uuid.value,
                self._visible_to(user_uuid, shared_vault_uuids)
            )
            .order_by(RevisionModel.created_at.desc())
        )
        rows = result.all()

        logger.debug(f"Found {len(rows)} revisions entries for item {item_uuid.value}")

        return [self._metadata_to_domain(row) for row in rows]

    async def find_by_user_uuid(self, user_uuid: Uuid, offset: int = 0, limit: int = 100) -> List[Revision]:
        """Ревизии владельца, старые первыми"""
        result = await self.session.execute(
            select(RevisionModel)
            .where(RevisionModel.user_uuid == user_uuid.value)
            .order_by(RevisionModel.created_at.asc())
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        return [self._to_domain(db_revision) for db_revision in result.scalars().all()]

    async def count_by_user_uuid(self, user_uuid: Uuid) -> int:
        result = await self.session.execute(
            select(func.count(RevisionModel.uuid)).where(RevisionModel.user_uuid == user_uuid.value)
        )
        return result.scalar()

    async def insert(self, revision: Revision) -> Revision:
        """Сохранение новой ревизии"""
        db_revision = RevisionModel(
            uuid=revision.uuid.value,
            item_uuid=revision.item_uuid.value,
            user_uuid=revision.user_uuid.value,
            shared_vault_uuid=revision.shared_vault_uuid.value if revision.shared_vault_uuid else None,
            key_system_identifier=revision.key_system_identifier,
            content=revision.content,
            content_type=revision.content_type,
            items_key_id=revision.items_key_id,
            enc_item_key=revision.enc_item_key,
            auth_hash=revision.auth_hash,
            creation_date=revision.creation_date,
            created_at=revision.created_at,
            updated_at=revision.updated_at
        )

        self.session.add(db_revision)
        await self.session.commit()
        await self.session.refresh(db_revision)
        return self._to_domain(db_revision)

    async def remove_one_by_uuid(self, revision_uuid: Uuid, user_uuid: Uuid) -> None:
        """Удаление одной ревизии владельца; отсутствие строки не ошибка"""
        await self.session.execute(
            delete(RevisionModel)
            .where(
                RevisionModel.uuid == revision_uuid.value,
                RevisionModel.user_uuid == user_uuid.value
            )
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()

    async def remove_by_user_uuid(self, user_uuid: Uuid) -> None:
        """Удаление всех ревизий пользователя (удаление аккаунта)"""
        await self.session.execute(
            delete(RevisionModel)
            .where(RevisionModel.user_uuid == user_uuid.value)
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()

    async def clear_shared_vault_and_key_system_associations(
        self,
        shared_vault_uuid: Uuid,
        item_uuid: Optional[Uuid] = None
    ) -> None:
        """Отвязка ревизий от shared vault; сами ревизии сохраняются"""
        conditions = [RevisionModel.shared_vault_uuid == shared_vault_uuid.value]
        if item_uuid is not None:
            conditions.append(RevisionModel.item_uuid == item_uuid.value)

        await self.session.execute(
            update(RevisionModel)
            .where(*conditions)
            .values(shared_vault_uuid=None, key_system_identifier=None)
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()

    def _visible_to(self, user_uuid: Uuid, shared_vault_uuids: List[Uuid]):
        # пустой список: чистая проверка владельца, без IN ()
        if not shared_vault_uuids:
            return RevisionModel.user_uuid == user_uuid.value

        return or_(
            RevisionModel.user_uuid == user_uuid.value,
            RevisionModel.shared_vault_uuid.in_([uuid.value for uuid in shared_vault_uuids])
        )

    def _to_domain(self, db_revision: RevisionModel) -> Revision:
        """Преобразование модели БД в доменную сущность"""
        return Revision(
            uuid=Uuid.create(db_revision.uuid).get_value(),
            item_uuid=Uuid.create(db_revision.item_uuid).get_value(),
            user_uuid=Uuid.create(db_revision.user_uuid).get_value(),
            content=db_revision.content,
            content_type=db_revision.content_type,
            items_key_id=db_revision.items_key_id,
            enc_item_key=db_revision.enc_item_key,
            auth_hash=db_revision.auth_hash,
            shared_vault_uuid=(
                Uuid.create(db_revision.shared_vault_uuid).get_value()
                if db_revision.shared_vault_uuid else None
            ),
            key_system_identifier=db_revision.key_system_identifier,
            creation_date=db_revision.creation_date,
            created_at=db_revision.created_at,
            updated_at=db_revision.updated_at
        )

    def _metadata_to_domain(self, row) -> RevisionMetadata:
        return RevisionMetadata(
            uuid=Uuid.create(row.uuid).get_value(),
            item_uuid=Uuid.create(row.item_uuid).get_value(),
            content_type=row.content_type,
            shared_vault_uuid=Uuid.create(row.shared_vault_uuid).get_value() if row.shared_vault_uuid else None,
            created_at=row.created_at,
            updated_at=row.updated_at
        )
