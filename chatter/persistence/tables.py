"""SQLAlchemy table definitions for Chatter.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(30), nullable=False),
    Column("email", String(254), nullable=False, unique=True),  # Stored lower-cased
    Column("password_hash", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Usernames are unique regardless of case
Index("uq_users_username_lower", func.lower(users_table.c.username), unique=True)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("page_id", String(200), nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("author_username", String(30), nullable=False),  # Denormalised
    Column("content", Text, nullable=False),
    # No FK: soft-deleted parents stay, and validity is checked once at creation
    Column("parent_id", UUID(as_uuid=True), nullable=True),
    # Reaction sets; a user id never appears in both
    Column(
        "likes",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default=text("'{}'::uuid[]"),
    ),
    Column(
        "dislikes",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default=text("'{}'::uuid[]"),
    ),
    # Back-link cache of direct replies in insertion order
    Column(
        "reply_ids",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default=text("'{}'::uuid[]"),
    ),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_page_created",
    comments_table.c.page_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
