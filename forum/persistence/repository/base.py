"""Generic SQL implementation of the entity repositories.

One implementation serves topics, posts and comments. Each concrete
repository binds an ``EntityTable`` from ``forum.persistence.registry``, which
names the table, the key columns and the row mappers.
"""

from collections import defaultdict
from collections.abc import AsyncIterator, Iterable, Sequence
from contextlib import asynccontextmanager
from datetime import datetime
from typing import ClassVar, List, Optional

import logfire
from sqlalchemy import func, insert, select, tuple_, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ConflictError, NotFoundError, StorageError
from forum.domain.model import Entity
from forum.domain.model.common import ExpansionPlan
from forum.domain.repository.base import E, K, P, S, EntityRepository
from forum.persistence.registry import ENTITY_TABLES, EntityTable


class SqlEntityRepository(EntityRepository[E, K, S, P]):
    """SQLAlchemy Core implementation of EntityRepository."""

    mapping: ClassVar[EntityTable]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @property
    def _span_prefix(self) -> str:
        return f"{self.mapping.resource}_repository"

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        """Translate driver failures into StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            # The request transaction cannot commit after a failed statement
            await self.session.rollback()
            logfire.error(
                "Storage failure",
                resource=self.mapping.resource,
                operation=operation,
                error=str(e),
            )
            raise StorageError(operation, str(e)) from e

    async def create(self, entity: E) -> E:
        """Insert a new entity after checking its parent is live."""
        key = str(entity.key)
        with logfire.span(f"{self._span_prefix}.create", key=key):
            async with self._storage_errors("create"):
                parent = self.mapping.parent_type
                if parent is not None:
                    parent_parts = entity.key.parts()[:-1]
                    if not await self._is_live(ENTITY_TABLES[parent], parent_parts):
                        logfire.warn(
                            "Parent not found", resource=parent.resource, key=key
                        )
                        raise NotFoundError(parent.resource, "/".join(parent_parts))

                # Soft-deleted rows keep their key, so check every row
                if await self._exists(entity.key.parts()):
                    logfire.warn(
                        "Duplicate key", resource=self.mapping.resource, key=key
                    )
                    raise ConflictError(self.mapping.resource, key)

                try:
                    stmt = insert(self.mapping.table).values(
                        **self.mapping.to_row(entity)
                    )
                    await self.session.execute(stmt)
                    await self.session.flush()
                except IntegrityError as e:
                    # Lost a race with a concurrent insert of the same key
                    await self.session.rollback()
                    logfire.warn(
                        "Insert rejected", resource=self.mapping.resource, key=key
                    )
                    raise ConflictError(self.mapping.resource, key) from e

            logfire.info("Entity created", resource=self.mapping.resource, key=key)
            return entity

    async def get(self, key: K, expand: Iterable[str] = ()) -> E:
        """Fetch one live entity, expanding the requested relations."""
        plan = self.mapping.entity_type.expansion_plan(expand)
        with logfire.span(
            f"{self._span_prefix}.get", key=str(key), expand=sorted(plan)
        ):
            async with self._storage_errors("get"):
                stmt = select(self.mapping.table).where(
                    *self.mapping.key_clause(key.parts()), self.mapping.live()
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()

                if not row:
                    logfire.warn(
                        "Entity not found", resource=self.mapping.resource, key=str(key)
                    )
                    raise NotFoundError(self.mapping.resource, str(key))

                entity = self.mapping.from_row(row._asdict())
                expanded = await self._expand([entity], self.mapping, plan)
                return expanded[0]

    async def update(self, key: K, patch: P) -> E:
        """Write the fields set on the patch and re-read the entity."""
        changes = patch.changes()
        with logfire.span(
            f"{self._span_prefix}.update", key=str(key), fields=sorted(changes)
        ):
            if not changes:
                return await self.get(key)

            async with self._storage_errors("update"):
                stmt = (
                    update(self.mapping.table)
                    .where(*self.mapping.key_clause(key.parts()), self.mapping.live())
                    .values(**changes, updated_at=datetime.now())
                )
                result = await self.session.execute(stmt)
                if result.rowcount == 0:
                    logfire.warn(
                        "Entity not found for update",
                        resource=self.mapping.resource,
                        key=str(key),
                    )
                    raise NotFoundError(self.mapping.resource, str(key))
                await self.session.flush()

            return await self.get(key)

    async def delete(self, key: K) -> E:
        """Soft-delete the entity and every live descendant."""
        with logfire.span(f"{self._span_prefix}.delete", key=str(key)):
            entity = await self.get(key)
            deleted_at = datetime.now()

            async with self._storage_errors("delete"):
                stmt = (
                    update(self.mapping.table)
                    .where(*self.mapping.key_clause(key.parts()), self.mapping.live())
                    .values(deleted_at=deleted_at)
                )
                await self.session.execute(stmt)
                await self._cascade_delete(self.mapping, key.parts(), deleted_at)
                await self.session.flush()

            logfire.info("Entity deleted", resource=self.mapping.resource, key=str(key))
            return entity.model_copy(update={"deleted_at": deleted_at})

    async def list(self, scope: Optional[S] = None) -> List[E]:
        """List live entities, oldest first, optionally under a parent key."""
        with logfire.span(
            f"{self._span_prefix}.list", scope=str(scope) if scope else None
        ):
            async with self._storage_errors("list"):
                stmt = select(self.mapping.table).where(self.mapping.live())
                if scope is not None:
                    stmt = stmt.where(*self.mapping.key_clause(scope.parts()))
                stmt = stmt.order_by(*self.mapping.ordering())

                result = await self.session.execute(stmt)
                return [self.mapping.from_row(row._asdict()) for row in result.fetchall()]

    async def _exists(self, parts: tuple[str, ...]) -> bool:
        stmt = (
            select(func.count())
            .select_from(self.mapping.table)
            .where(*self.mapping.key_clause(parts))
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def _is_live(self, mapping: EntityTable, parts: tuple[str, ...]) -> bool:
        stmt = (
            select(func.count())
            .select_from(mapping.table)
            .where(*mapping.key_clause(parts), mapping.live())
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def _expand(
        self,
        entities: Sequence[Entity],
        mapping: EntityTable,
        plan: ExpansionPlan,
    ) -> List[Entity]:
        """Attach live children to each entity, one query per relation level.

        Args:
            entities: Parents, all of ``mapping.entity_type``
            mapping: Storage description of the parents
            plan: Relations to load below the parents

        Returns:
            Copies of the parents with the planned collections populated
        """
        if not plan or not entities:
            return list(entities)

        updates: dict[tuple[str, ...], dict[str, list]] = defaultdict(dict)
        for name, subplan in plan.items():
            child = ENTITY_TABLES[mapping.entity_type.relations[name]]
            children = await self._fetch_children(child, entities)
            children = await self._expand(children, child, subplan)

            grouped: dict[tuple[str, ...], list] = defaultdict(list)
            for item in children:
                grouped[item.key.parts()[:-1]].append(item)
            for entity in entities:
                parts = entity.key.parts()
                updates[parts][name] = grouped.get(parts, [])

        return [
            entity.model_copy(update=updates[entity.key.parts()])
            for entity in entities
        ]

    async def _fetch_children(
        self, child: EntityTable, parents: Sequence[Entity]
    ) -> List[Entity]:
        width = len(parents[0].key.parts())
        columns = [child.table.c[column] for column in child.key_columns[:width]]
        keys = [parent.key.parts() for parent in parents]

        if width == 1:
            scope = columns[0].in_([parts[0] for parts in keys])
        else:
            scope = tuple_(*columns).in_(keys)

        stmt = (
            select(child.table)
            .where(scope, child.live())
            .order_by(*child.ordering())
        )
        result = await self.session.execute(stmt)
        return [child.from_row(row._asdict()) for row in result.fetchall()]

    async def _cascade_delete(
        self,
        mapping: EntityTable,
        parts: tuple[str, ...],
        deleted_at: datetime,
    ) -> None:
        """Soft-delete live descendants sharing the key prefix ``parts``."""
        for child_type in mapping.entity_type.relations.values():
            child = ENTITY_TABLES[child_type]
            stmt = (
                update(child.table)
                .where(*child.key_clause(parts), child.live())
                .values(deleted_at=deleted_at)
            )
            result = await self.session.execute(stmt)
            logfire.debug(
                "Cascaded soft delete",
                resource=child.resource,
                scope="/".join(parts),
                count=result.rowcount,
            )
            await self._cascade_delete(child, parts, deleted_at)


class SqlVotableRepository(SqlEntityRepository[E, K, S, P]):
    """SQL repository for entities with a votes column."""

    async def vote(self, key: K, delta: int) -> None:
        """Atomically add ``delta`` to the votes column."""
        with logfire.span(f"{self._span_prefix}.vote", key=str(key), delta=delta):
            async with self._storage_errors("vote"):
                table = self.mapping.table
                # Votes don't update timestamps
                stmt = (
                    update(table)
                    .where(*self.mapping.key_clause(key.parts()), self.mapping.live())
                    .values(votes=table.c.votes + delta)
                )
                result = await self.session.execute(stmt)
                if result.rowcount == 0:
                    logfire.warn(
                        "Entity not found for vote",
                        resource=self.mapping.resource,
                        key=str(key),
                    )
                    raise NotFoundError(self.mapping.resource, str(key))
                await self.session.flush()
