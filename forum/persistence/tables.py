"""SQLAlchemy table definitions for the forum.

Every table is keyed by its composite key: the entity's own identity plus
every ancestor identity. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()


def _envelope_columns() -> list[Column]:
    """Timestamp columns shared by every entity table."""
    return [
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
        Column("deleted_at", DateTime(timezone=True), nullable=True),
    ]


# ============================================================================
# TOPICS TABLE
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", String(255), primary_key=True),
    *_envelope_columns(),
)

Index("idx_topics_deleted_at", topics_table.c.deleted_at)

# ============================================================================
# POSTS TABLE (key: topic_id, id)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("topic_id", String(255), primary_key=True),
    Column("id", String(255), primary_key=True),
    Column("title", String(300), nullable=False, server_default=""),
    Column("content", Text, nullable=False, server_default=""),
    Column("votes", Integer, nullable=False, server_default="0"),
    *_envelope_columns(),
    ForeignKeyConstraint(["topic_id"], ["topics.id"], name="fk_posts_topic"),
)

Index("idx_posts_deleted_at", posts_table.c.deleted_at)
Index("idx_posts_created_at", posts_table.c.created_at)

# ============================================================================
# COMMENTS TABLE (key: topic_id, post_id, id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("topic_id", String(255), primary_key=True),
    Column("post_id", String(255), primary_key=True),
    Column("id", String(255), primary_key=True),
    Column("content", Text, nullable=False, server_default=""),
    Column("votes", Integer, nullable=False, server_default="0"),
    *_envelope_columns(),
    ForeignKeyConstraint(
        ["topic_id", "post_id"],
        ["posts.topic_id", "posts.id"],
        name="fk_comments_post",
    ),
)

Index("idx_comments_deleted_at", comments_table.c.deleted_at)
Index("idx_comments_created_at", comments_table.c.created_at)
