"""Generic repository contract shared by every forum entity."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, Optional, TypeVar

from forum.domain.model import Entity, EntityPatch
from forum.domain.value import EntityKey

E = TypeVar("E", bound=Entity)
K = TypeVar("K", bound=EntityKey)
S = TypeVar("S", bound=EntityKey)
P = TypeVar("P", bound=EntityPatch)


class EntityRepository(ABC, Generic[E, K, S, P]):
    """Repository for one entity type.

    Type parameters:
        E: Entity type
        K: Key addressing one entity
        S: Key of the parent scope used by ``list``
        P: Patch type accepted by ``update``

    Every read filters on the full composite key and ignores soft-deleted
    rows, so a key with a mismatched ancestor finds nothing.
    """

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Insert a new entity.

        Args:
            entity: Entity to insert, with its full key populated

        Returns:
            The stored entity

        Raises:
            ConflictError: If the key is already taken (even by a deleted row)
            NotFoundError: If the parent is missing or soft-deleted
        """
        pass

    @abstractmethod
    async def get(self, key: K, expand: Iterable[str] = ()) -> E:
        """Fetch exactly one live entity.

        Args:
            key: Composite key of the entity
            expand: Relation names to load eagerly (dotted for nested levels)

        Returns:
            The entity with the requested collections populated

        Raises:
            NotFoundError: If no live row matches
            ValidationError: If a relation name is unknown
        """
        pass

    @abstractmethod
    async def update(self, key: K, patch: P) -> E:
        """Apply the fields set on ``patch`` to a live entity.

        Args:
            key: Composite key of the entity
            patch: Partial update; unset fields are left untouched

        Returns:
            The entity re-read after the write

        Raises:
            NotFoundError: If no live row matches
        """
        pass

    @abstractmethod
    async def list(self, scope: Optional[S] = None) -> list[E]:
        """List live entities under a parent scope.

        Args:
            scope: Parent key (None lists every live entity)

        Returns:
            Entities in insertion order, empty if nothing matches
        """
        pass

    @abstractmethod
    async def delete(self, key: K) -> E:
        """Soft-delete a live entity and its live descendants.

        Args:
            key: Composite key of the entity

        Returns:
            The entity with ``deleted_at`` set

        Raises:
            NotFoundError: If no live row matches
        """
        pass


class VotableRepository(EntityRepository[E, K, S, P]):
    """Repository for entities carrying a votes counter."""

    @abstractmethod
    async def vote(self, key: K, delta: int) -> None:
        """Add ``delta`` to the votes counter of a live entity.

        The increment happens inside storage in a single statement, so
        concurrent votes on the same entity are never lost.

        Args:
            key: Composite key of the entity
            delta: Amount to add (negative to subtract)

        Raises:
            NotFoundError: If no live row matches
        """
        pass
