"""Base models for all domain entities."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from forum.domain.error import ValidationError
from forum.domain.value import EntityKey

# Relation name -> nested expansion plan, e.g. {"posts": {"comments": {}}}
ExpansionPlan = dict[str, "ExpansionPlan"]


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class Entity(DomainModel):
    """Shared identity and timestamp envelope of Topic, Post and Comment.

    Subclasses declare:
    - ``resource``: name used in errors and log records
    - ``relations``: child collections that ``get`` may expand, keyed by the
      field that holds them
    - ``key``: the composite key, whose ``parts()`` line up with the key
      columns of the entity's table
    """

    resource: ClassVar[str] = "entity"
    relations: ClassVar[dict[str, type["Entity"]]] = {}

    id: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def key(self) -> EntityKey:
        """Composite key of this entity.

        Every concrete entity overrides this; the base envelope has no key.
        """
        raise NotImplementedError(f"{type(self).__name__} does not define a key")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @classmethod
    def expansion_plan(cls, expand: Iterable[str]) -> ExpansionPlan:
        """Parse relation names into a nested plan.

        Dotted names descend one level per segment: ``"posts.comments"`` on a
        topic expands its posts and each post's comments.

        Raises:
            ValidationError: If a name is not a relation of the entity it
                applies to
        """
        plan: ExpansionPlan = {}
        for path in expand:
            entity_type: type[Entity] = cls
            level = plan
            for name in path.split("."):
                child_type = entity_type.relations.get(name)
                if child_type is None:
                    raise ValidationError(
                        f"Unknown relation '{name}' for {entity_type.resource}"
                    )
                level = level.setdefault(name, {})
                entity_type = child_type
        return plan


class EntityPatch(DomainModel):
    """Partial update of an entity.

    Only fields explicitly set on the patch are written, so a field can be
    reset to an empty value without being mistaken for "unchanged".
    """

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set on this patch."""
        return self.model_dump(exclude_unset=True)
