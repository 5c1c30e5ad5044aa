"""Binding of each entity type to its table, key columns and row mappers."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from sqlalchemy import Table

from forum.domain.model import Comment, Entity, Post, Topic
from forum.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_post,
    row_to_topic,
    topic_to_dict,
)
from forum.persistence.tables import comments_table, posts_table, topics_table


@dataclass(frozen=True)
class EntityTable:
    """Storage description of one entity type.

    ``key_columns`` line up with ``EntityKey.parts()``: a parent's key
    columns are matched by the leading key columns of its children.
    """

    entity_type: type[Entity]
    table: Table
    key_columns: tuple[str, ...]
    from_row: Callable[[Dict[str, Any]], Entity]
    to_row: Callable[[Any], Dict[str, Any]]
    parent_type: Optional[type[Entity]] = None

    @property
    def resource(self) -> str:
        return self.entity_type.resource

    def key_clause(self, parts: tuple[str, ...]) -> list:
        """Equality conditions on the leading key columns.

        A full key selects one row; a parent key's parts select its children.
        """
        return [
            self.table.c[column] == value
            for column, value in zip(self.key_columns, parts)
        ]

    def live(self):
        return self.table.c.deleted_at.is_(None)

    def ordering(self) -> list:
        return [self.table.c.created_at, self.table.c.id]


ENTITY_TABLES: dict[type[Entity], EntityTable] = {
    Topic: EntityTable(
        entity_type=Topic,
        table=topics_table,
        key_columns=("id",),
        from_row=row_to_topic,
        to_row=topic_to_dict,
    ),
    Post: EntityTable(
        entity_type=Post,
        table=posts_table,
        key_columns=("topic_id", "id"),
        from_row=row_to_post,
        to_row=post_to_dict,
        parent_type=Topic,
    ),
    Comment: EntityTable(
        entity_type=Comment,
        table=comments_table,
        key_columns=("topic_id", "post_id", "id"),
        from_row=row_to_comment,
        to_row=comment_to_dict,
        parent_type=Post,
    ),
}
