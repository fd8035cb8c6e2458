"""initial schema: revisions, shared vaults, domain events outbox

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "revisions_revisions",
        sa.Column("uuid", sa.String(36), primary_key=True),
        sa.Column("item_uuid", sa.String(36), nullable=False),
        sa.Column("user_uuid", sa.String(36), nullable=False),
        sa.Column("shared_vault_uuid", sa.String(36), nullable=True),
        sa.Column("key_system_identifier", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("content_type", sa.String(255), nullable=True),
        sa.Column("items_key_id", sa.String(255), nullable=True),
        sa.Column("enc_item_key", sa.Text(), nullable=True),
        sa.Column("auth_hash", sa.String(255), nullable=True),
        sa.Column("creation_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_revisions_revisions_item_uuid", "revisions_revisions", ["item_uuid"])
    op.create_index("ix_revisions_revisions_user_uuid", "revisions_revisions", ["user_uuid"])
    op.create_index("ix_revisions_revisions_shared_vault_uuid", "revisions_revisions", ["shared_vault_uuid"])
    op.create_index(
        "index_revisions_on_item_uuid_and_created_at",
        "revisions_revisions",
        ["item_uuid", "created_at"],
    )

    op.create_table(
        "shared_vaults",
        sa.Column("uuid", sa.String(36), primary_key=True),
        sa.Column("user_uuid", sa.String(36), nullable=False),
        sa.Column("file_upload_bytes_used", sa.BigInteger(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_shared_vaults_user_uuid", "shared_vaults", ["user_uuid"])

    op.create_table(
        "shared_vault_users",
        sa.Column("uuid", sa.String(36), primary_key=True),
        sa.Column("shared_vault_uuid", sa.String(36), nullable=False),
        sa.Column("user_uuid", sa.String(36), nullable=False),
        sa.Column("permission", sa.String(24), nullable=False, server_default="read"),
        *_timestamps(),
        sa.UniqueConstraint("shared_vault_uuid", "user_uuid", name="uq_shared_vault_users_vault_user"),
    )
    op.create_index("ix_shared_vault_users_shared_vault_uuid", "shared_vault_users", ["shared_vault_uuid"])
    op.create_index("ix_shared_vault_users_user_uuid", "shared_vault_users", ["user_uuid"])

    op.create_table(
        "shared_vault_invites",
        sa.Column("uuid", sa.String(36), primary_key=True),
        sa.Column("shared_vault_uuid", sa.String(36), nullable=False),
        sa.Column("user_uuid", sa.String(36), nullable=False),
        sa.Column("sender_uuid", sa.String(36), nullable=False),
        sa.Column("encrypted_message", sa.Text(), nullable=False),
        sa.Column("permission", sa.String(24), nullable=False, server_default="read"),
        *_timestamps(),
    )
    op.create_index("ix_shared_vault_invites_shared_vault_uuid", "shared_vault_invites", ["shared_vault_uuid"])
    op.create_index("ix_shared_vault_invites_user_uuid", "shared_vault_invites", ["user_uuid"])

    op.create_table(
        "domain_events",
        sa.Column("uuid", sa.String(36), primary_key=True),
        sa.Column("type", sa.String(255), nullable=False),
        sa.Column("origin", sa.String(255), nullable=False),
        sa.Column("user_identifier", sa.String(255), nullable=True),
        sa.Column("payload", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_domain_events_type", "domain_events", ["type"])


def downgrade() -> None:
    op.drop_table("domain_events")
    op.drop_table("shared_vault_invites")
    op.drop_table("shared_vault_users")
    op.drop_table("shared_vaults")
    op.drop_table("revisions_revisions")
