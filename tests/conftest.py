"""
Shared fixtures: in-memory SQLite database and seeding helpers.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from notesync.core.config import Settings
from notesync.core.db import create_engine, create_session_factory, init_models
from notesync.db.repositories import (
    RevisionRepository,
    SharedVaultInviteRepository,
    SharedVaultRepository,
    SharedVaultUserRepository,
)
from notesync.domains.common import SharedVaultUserPermission, Uuid
from notesync.domains.revisions.entities import Revision
from notesync.domains.shared_vaults.entities import SharedVault, SharedVaultInvite, SharedVaultUser


def new_uuid() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def uuid_factory():
    """Generate fresh uuid strings."""
    return new_uuid


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:"),
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """Session from the application session factory."""
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def revision_repository(session):
    return RevisionRepository(session)


@pytest.fixture
def shared_vault_repository(session):
    return SharedVaultRepository(session)


@pytest.fixture
def shared_vault_user_repository(session):
    return SharedVaultUserRepository(session)


@pytest.fixture
def shared_vault_invite_repository(session):
    return SharedVaultInviteRepository(session)


@pytest.fixture
def seed_shared_vault(shared_vault_repository, shared_vault_user_repository, shared_vault_invite_repository):
    """Create a vault with its owner as a member plus extra members and invites."""

    async def _seed(owner_uuid: str, member_uuids=(), invitee_uuids=()) -> SharedVault:
        owner = Uuid.create(owner_uuid).get_value()
        vault = await shared_vault_repository.save(SharedVault.create_shared_vault(owner))

        await shared_vault_user_repository.save(
            SharedVaultUser.create_membership(vault.uuid, owner, SharedVaultUserPermission.ADMIN)
        )
        for member_uuid in member_uuids:
            await shared_vault_user_repository.save(
                SharedVaultUser.create_membership(vault.uuid, Uuid.create(member_uuid).get_value())
            )
        for invitee_uuid in invitee_uuids:
            await shared_vault_invite_repository.save(
                SharedVaultInvite.create_invite(
                    shared_vault_uuid=vault.uuid,
                    user_uuid=Uuid.create(invitee_uuid).get_value(),
                    sender_uuid=owner,
                    encrypted_message="encrypted",
                )
            )
        return vault

    return _seed


@pytest.fixture
def seed_revision(revision_repository):
    """Insert a revision with an explicit creation time offset."""
    base_time = datetime(2026, 1, 1, tzinfo=timezone.utc)

    async def _seed(
        item_uuid: str,
        user_uuid: str,
        shared_vault_uuid: str = None,
        key_system_identifier: str = None,
        minutes: int = 0,
    ) -> Revision:
        created_at = base_time + timedelta(minutes=minutes)
        revision = Revision(
            uuid=Uuid.generate(),
            item_uuid=Uuid.create(item_uuid).get_value(),
            user_uuid=Uuid.create(user_uuid).get_value(),
            content="004:encrypted-payload",
            content_type="Note",
            items_key_id="items-key",
            enc_item_key="enc-item-key",
            shared_vault_uuid=Uuid.create(shared_vault_uuid).get_value() if shared_vault_uuid else None,
            key_system_identifier=key_system_identifier,
            created_at=created_at,
            updated_at=created_at,
        )
        return await revision_repository.insert(revision)

    return _seed
