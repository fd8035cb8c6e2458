import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from notesync.db.models.domain_event import DomainEventRecord
from notesync.domains.events.entities import DomainEvent

logger = logging.getLogger(__name__)

DomainEventHandler = Callable[[DomainEvent], Awaitable[None]]


class DomainEventPublisherInterface(ABC):

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None: ...


class InMemoryDomainEventPublisher(DomainEventPublisherInterface):
    """Публикация в памяти процесса с синхронной доставкой подписчикам"""

    def __init__(self):
        self.published_events: List[DomainEvent] = []
        self._handlers: Dict[str, List[DomainEventHandler]] = {}

    def subscribe(self, event_type: str, handler: DomainEventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    async def publish(self, event: DomainEvent) -> None:
        self.published_events.append(event)
        logger.info(f"Published {event.type} event")

        for handler in self._handlers.get(event.type, []):
            await handler(event)


class SQLDomainEventPublisher(DomainEventPublisherInterface):
    """Запись событий в таблицу-outbox; каждое событие коммитится отдельно"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def publish(self, event: DomainEvent) -> None:
        record = DomainEventRecord(
            type=event.type,
            origin=event.meta.origin,
            user_identifier=event.meta.user_identifier,
            payload=event.payload,
            created_at=event.created_at,
            updated_at=event.created_at
        )
        self.session.add(record)
        await self.session.commit()

        logger.info(f"Stored {event.type} event {record.uuid} in outbox")
