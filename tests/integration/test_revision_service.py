"""
Integration tests for RevisionService and the shared vault removal handler.
"""

import pytest

from notesync.domains.common import FailureKind
from notesync.domains.events import DomainEventFactory, DomainEventType, InMemoryDomainEventPublisher
from notesync.domains.revisions import (
    RevisionCreate,
    RevisionQuery,
    RevisionService,
    SharedVaultRemovedEventHandler,
)


@pytest.fixture
def revision_service(session):
    return RevisionService.from_session(session)


class TestRevisionService:
    """Tests for RevisionService."""

    @pytest.mark.asyncio
    async def test_create_and_get_revision(self, revision_service, uuid_factory):
        owner, item = uuid_factory(), uuid_factory()
        created = await revision_service.create_revision(
            RevisionCreate(item_uuid=item, user_uuid=owner, content="payload", content_type="Note")
        )
        assert not created.is_failed()

        result = await revision_service.get_revision(created.get_value().uuid.value, RevisionQuery(user_uuid=owner))

        assert not result.is_failed()
        assert result.get_value().content == "payload"

    @pytest.mark.asyncio
    async def test_create_rejects_invalid_shared_vault_uuid(self, revision_service, uuid_factory):
        result = await revision_service.create_revision(
            RevisionCreate(item_uuid=uuid_factory(), user_uuid=uuid_factory(), shared_vault_uuid="vault")
        )
        assert result.is_failed()
        assert result.kind == FailureKind.VALIDATION

    @pytest.mark.asyncio
    async def test_get_revision_not_visible(self, revision_service, seed_revision, uuid_factory):
        revision = await seed_revision(item_uuid=uuid_factory(), user_uuid=uuid_factory(), shared_vault_uuid=uuid_factory())

        result = await revision_service.get_revision(revision.uuid.value, RevisionQuery(user_uuid=uuid_factory()))

        assert result.is_failed()
        assert result.kind == FailureKind.NOT_FOUND
        assert result.get_error() == f"Could not find revision with uuid: {revision.uuid.value}"

    @pytest.mark.asyncio
    async def test_get_revision_through_membership(self, revision_service, seed_revision, uuid_factory):
        """Revision X owned by A in vault V is visible to E only with V in E's set."""
        owner_a, user_e, vault_v = uuid_factory(), uuid_factory(), uuid_factory()
        revision_x = await seed_revision(item_uuid=uuid_factory(), user_uuid=owner_a, shared_vault_uuid=vault_v)

        with_membership = await revision_service.get_revision(
            revision_x.uuid.value, RevisionQuery(user_uuid=user_e, shared_vault_uuids=[vault_v])
        )
        without_membership = await revision_service.get_revision(
            revision_x.uuid.value, RevisionQuery(user_uuid=user_e, shared_vault_uuids=[])
        )

        assert with_membership.get_value() == revision_x
        assert without_membership.is_failed()

    @pytest.mark.asyncio
    async def test_invalid_membership_uuid_fails_before_query(self, revision_service, uuid_factory):
        result = await revision_service.get_revisions_metadata(
            uuid_factory(), RevisionQuery(user_uuid=uuid_factory(), shared_vault_uuids=["oops"])
        )
        assert result.is_failed()
        assert result.kind == FailureKind.VALIDATION

    @pytest.mark.asyncio
    async def test_get_revisions_metadata(self, revision_service, seed_revision, uuid_factory):
        owner, item = uuid_factory(), uuid_factory()
        await seed_revision(item_uuid=item, user_uuid=owner, minutes=1)
        await seed_revision(item_uuid=item, user_uuid=owner, minutes=2)

        result = await revision_service.get_revisions_metadata(item, RevisionQuery(user_uuid=owner))

        assert len(result.get_value()) == 2

    @pytest.mark.asyncio
    async def test_delete_revision_is_idempotent(self, revision_service, seed_revision, uuid_factory):
        owner = uuid_factory()
        revision = await seed_revision(item_uuid=uuid_factory(), user_uuid=owner)

        assert not (await revision_service.delete_revision(revision.uuid.value, owner)).is_failed()
        assert not (await revision_service.delete_revision(revision.uuid.value, owner)).is_failed()

        result = await revision_service.get_revision(revision.uuid.value, RevisionQuery(user_uuid=owner))
        assert result.is_failed()

    @pytest.mark.asyncio
    async def test_delete_revision_validation(self, revision_service, uuid_factory):
        result = await revision_service.delete_revision("", uuid_factory())
        assert result.kind == FailureKind.VALIDATION

    @pytest.mark.asyncio
    async def test_remove_revisions_for_user(self, revision_service, revision_repository, seed_revision, uuid_factory):
        owner = uuid_factory()
        revision = await seed_revision(item_uuid=uuid_factory(), user_uuid=owner)

        result = await revision_service.remove_revisions_for_user(owner)

        assert not result.is_failed()
        assert await revision_repository.count_by_user_uuid(revision.user_uuid) == 0


class TestSharedVaultRemovedEventHandler:
    """Tests for revision detachment on vault removal."""

    @pytest.mark.asyncio
    async def test_handler_detaches_revisions(self, revision_service, seed_revision, uuid_factory):
        owner, member, vault = uuid_factory(), uuid_factory(), uuid_factory()
        revision = await seed_revision(item_uuid=uuid_factory(), user_uuid=owner, shared_vault_uuid=vault,
                                       key_system_identifier="ks")

        publisher = InMemoryDomainEventPublisher()
        handler = SharedVaultRemovedEventHandler(revision_service)
        publisher.subscribe(DomainEventType.SHARED_VAULT_REMOVED, handler.handle)

        await publisher.publish(DomainEventFactory().create_shared_vault_removed_event(vault))

        as_member = await revision_service.get_revision(
            revision.uuid.value, RevisionQuery(user_uuid=member, shared_vault_uuids=[vault])
        )
        as_owner = await revision_service.get_revision(revision.uuid.value, RevisionQuery(user_uuid=owner))

        assert as_member.is_failed()
        assert as_owner.get_value().shared_vault_uuid is None
        assert as_owner.get_value().key_system_identifier is None

    @pytest.mark.asyncio
    async def test_handler_ignores_malformed_payload(self, revision_service):
        event = DomainEventFactory().create_shared_vault_removed_event("not-a-uuid")

        await SharedVaultRemovedEventHandler(revision_service).handle(event)
