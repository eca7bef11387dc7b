"""initial_schema

Create the guestbook schema:
- Provider credentials (OAuth app client ID and secret per provider)
- Identities (Google accounts that signed in, with their last session credential)
- Greetings (guestbook entries, scoped by partition_key)

Revision ID: 3c1f9a2d7b10
Revises:
Create Date: 2026-10-19 10:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "provider_credentials",
        sa.Column("name", sa.String(50), primary_key=True),
        sa.Column("client_id", sa.Text(), nullable=False),
        sa.Column("client_secret", sa.Text(), nullable=False),
    )

    # provider_subject_id is deliberately not unique
    op.create_table(
        "identities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("provider_subject_id", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("email", sa.String(255), nullable=False, server_default=""),
        sa.Column("avatar_url", sa.Text(), nullable=False, server_default=""),
        sa.Column("credential_id", sa.String(255), nullable=False),
        sa.Column(
            "credential_identity_token", sa.Text(), nullable=False, server_default=""
        ),
        sa.Column("credential_access_token", sa.Text(), nullable=False),
        sa.Column("credential_token_type", sa.String(50), nullable=False),
        sa.Column(
            "credential_expires_at", sa.DateTime(timezone=True), nullable=False
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "idx_identities_provider_subject_id",
        "identities",
        ["provider_subject_id", "updated_at"],
    )

    op.create_table(
        "greetings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("partition_key", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "idx_greetings_partition_created",
        "greetings",
        ["partition_key", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_greetings_partition_created", table_name="greetings")
    op.drop_table("greetings")
    op.drop_index("idx_identities_provider_subject_id", table_name="identities")
    op.drop_table("identities")
    op.drop_table("provider_credentials")
