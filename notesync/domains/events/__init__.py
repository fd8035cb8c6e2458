from notesync.domains.events.entities import DomainEvent, DomainEventMeta, DomainEventType
from notesync.domains.events.factory import DomainEventFactory
from notesync.domains.events.publisher import (
    DomainEventPublisherInterface, InMemoryDomainEventPublisher, SQLDomainEventPublisher
)

__all__ = [
    "DomainEvent", "DomainEventMeta", "DomainEventType",
    "DomainEventFactory",
    "DomainEventPublisherInterface", "InMemoryDomainEventPublisher", "SQLDomainEventPublisher"
]
