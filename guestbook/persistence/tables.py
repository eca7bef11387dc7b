"""SQLAlchemy table definitions for the guestbook.

They match the schema defined in Alembic migrations. Column types are kept
portable so the same tables run on PostgreSQL and SQLite.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROVIDER CREDENTIALS TABLE (one row per OAuth provider)
# ============================================================================
provider_credentials_table = Table(
    "provider_credentials",
    metadata,
    Column("name", String(50), primary_key=True),  # 'google'
    Column("client_id", Text, nullable=False),
    Column("client_secret", Text, nullable=False),
)

# ============================================================================
# IDENTITIES TABLE
# ============================================================================
# No unique constraint on provider_subject_id: racing logins can leave
# duplicates, and the resolver picks the latest updated_at.
identities_table = Table(
    "identities",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("provider_subject_id", String(255), nullable=False),
    Column("display_name", String(255), nullable=False, server_default=""),
    Column("email", String(255), nullable=False, server_default=""),
    Column("avatar_url", Text, nullable=False, server_default=""),
    # Embedded session credential
    Column("credential_id", String(255), nullable=False),
    Column("credential_identity_token", Text, nullable=False, server_default=""),
    Column("credential_access_token", Text, nullable=False),
    Column("credential_token_type", String(50), nullable=False),
    Column("credential_expires_at", DateTime(timezone=True), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index(
    "idx_identities_provider_subject_id",
    identities_table.c.provider_subject_id,
    identities_table.c.updated_at,
)

# ============================================================================
# GREETINGS TABLE (partitioned by partition_key)
# ============================================================================
greetings_table = Table(
    "greetings",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("partition_key", String(255), nullable=False),
    Column("author", String(255), nullable=False, server_default=""),
    Column("content", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index(
    "idx_greetings_partition_created",
    greetings_table.c.partition_key,
    greetings_table.c.created_at,
)
