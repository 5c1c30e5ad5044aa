"""In-memory repositories for testing.

The three repositories share one ``InMemoryDatabase`` so parent checks,
expansion and cascading deletes see every entity type, like the tables of a
real database.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime
from typing import ClassVar, List, Optional

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import Entity
from forum.domain.model.common import ExpansionPlan
from forum.domain.repository.base import E, K, P, S, EntityRepository

Row = tuple[str, ...]


class InMemoryDatabase:
    """Rows of every entity type, keyed by composite key parts.

    Dicts keep insertion order, which stands in for ordering by creation time.
    """

    def __init__(self) -> None:
        self._tables: dict[type[Entity], dict[Row, Entity]] = defaultdict(dict)

    def table(self, entity_type: type[Entity]) -> dict[Row, Entity]:
        return self._tables[entity_type]

    def live_under(self, entity_type: type[Entity], prefix: Row) -> List[Entity]:
        """Live rows whose key starts with ``prefix``."""
        return [
            entity
            for parts, entity in self.table(entity_type).items()
            if parts[: len(prefix)] == prefix and not entity.is_deleted
        ]


class InMemoryEntityRepository(EntityRepository[E, K, S, P]):
    """In-memory implementation of EntityRepository for testing."""

    entity_type: ClassVar[type[Entity]]
    parent_type: ClassVar[Optional[type[Entity]]] = None

    def __init__(self, database: Optional[InMemoryDatabase] = None) -> None:
        self.database = database or InMemoryDatabase()

    @property
    def _rows(self) -> dict[Row, Entity]:
        return self.database.table(self.entity_type)

    def _live(self, key: K) -> E:
        entity = self._rows.get(key.parts())
        if entity is None or entity.is_deleted:
            raise NotFoundError(self.entity_type.resource, str(key))
        return entity

    async def create(self, entity: E) -> E:
        """Store a new entity after checking its parent is live."""
        parts = entity.key.parts()
        if self.parent_type is not None:
            parent = self.database.table(self.parent_type).get(parts[:-1])
            if parent is None or parent.is_deleted:
                raise NotFoundError(self.parent_type.resource, "/".join(parts[:-1]))
        if parts in self._rows:
            raise ConflictError(self.entity_type.resource, str(entity.key))

        self._rows[parts] = entity
        return entity

    async def get(self, key: K, expand: Iterable[str] = ()) -> E:
        """Fetch one live entity, expanding the requested relations."""
        plan = self.entity_type.expansion_plan(expand)
        return self._expand(self._live(key), plan)

    async def update(self, key: K, patch: P) -> E:
        """Apply the fields set on the patch."""
        entity = self._live(key)
        changes = patch.changes()
        if changes:
            entity = entity.model_copy(update={**changes, "updated_at": datetime.now()})
            self._rows[key.parts()] = entity
        return entity

    async def delete(self, key: K) -> E:
        """Soft-delete the entity and every live descendant."""
        entity = self._live(key)
        deleted_at = datetime.now()
        deleted = entity.model_copy(update={"deleted_at": deleted_at})
        self._rows[key.parts()] = deleted
        self._cascade_delete(self.entity_type, key.parts(), deleted_at)
        return deleted

    async def list(self, scope: Optional[S] = None) -> List[E]:
        """List live entities in insertion order, optionally under a parent key."""
        prefix = scope.parts() if scope is not None else ()
        return self.database.live_under(self.entity_type, prefix)

    def _expand(self, entity: Entity, plan: ExpansionPlan) -> Entity:
        if not plan:
            return entity
        updates = {}
        for name, subplan in plan.items():
            child_type = type(entity).relations[name]
            children = self.database.live_under(child_type, entity.key.parts())
            updates[name] = [self._expand(child, subplan) for child in children]
        return entity.model_copy(update=updates)

    def _cascade_delete(
        self, entity_type: type[Entity], prefix: Row, deleted_at: datetime
    ) -> None:
        for child_type in entity_type.relations.values():
            rows = self.database.table(child_type)
            for child in self.database.live_under(child_type, prefix):
                rows[child.key.parts()] = child.model_copy(
                    update={"deleted_at": deleted_at}
                )
            self._cascade_delete(child_type, prefix, deleted_at)


class InMemoryVotableRepository(InMemoryEntityRepository[E, K, S, P]):
    """In-memory repository for entities with a votes counter."""

    async def vote(self, key: K, delta: int) -> None:
        """Add ``delta`` to the votes counter.

        There is no await between the read and the write, so concurrent
        votes on one event loop cannot interleave.
        """
        entity = self._live(key)
        self._rows[key.parts()] = entity.model_copy(
            update={"votes": entity.votes + delta}
        )
