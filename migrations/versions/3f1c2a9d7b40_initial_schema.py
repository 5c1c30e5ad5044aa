"""initial_schema

Create the forum hierarchy:
- Topics (caller-chosen identity)
- Posts (keyed by topic_id, id)
- Comments (keyed by topic_id, post_id, id)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # TOPICS table
    # ========================================================================
    op.create_table(
        "topics",
        sa.Column("id", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_topics_deleted_at", "topics", ["deleted_at"])

    # ========================================================================
    # POSTS table (composite key: topic_id, id)
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("topic_id", sa.String(255), nullable=False),
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(300), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], name="fk_posts_topic"),
        sa.PrimaryKeyConstraint("topic_id", "id"),
    )
    op.create_index("idx_posts_deleted_at", "posts", ["deleted_at"])
    op.create_index("idx_posts_created_at", "posts", ["created_at"])

    # ========================================================================
    # COMMENTS table (composite key: topic_id, post_id, id)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("topic_id", sa.String(255), nullable=False),
        sa.Column("post_id", sa.String(255), nullable=False),
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["topic_id", "post_id"],
            ["posts.topic_id", "posts.id"],
            name="fk_comments_post",
        ),
        sa.PrimaryKeyConstraint("topic_id", "post_id", "id"),
    )
    op.create_index("idx_comments_deleted_at", "comments", ["deleted_at"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_deleted_at", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_index("idx_posts_deleted_at", table_name="posts")
    op.drop_table("posts")
    op.drop_index("idx_topics_deleted_at", table_name="topics")
    op.drop_table("topics")
