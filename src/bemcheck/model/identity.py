"""Naming identity model: the BEM decomposition of a class name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IdentityShape(Enum):
    """The four mutually exclusive shapes a naming identity can take."""

    ENTITY = "entity"
    ENTITY_MODIFIER = "entity_modifier"
    SUB_ENTITY = "sub_entity"
    SUB_ENTITY_MODIFIER = "sub_entity_modifier"


@dataclass(frozen=True)
class Modifier:
    """A modifier attached to an entity or sub-entity.

    ``value`` is ``True`` for boolean modifiers (``block_disabled``) and the
    value string for key-value ones (``block_theme_dark``).
    """

    name: str
    value: str | bool = True


@dataclass(frozen=True)
class NamingIdentity:
    """A class name decomposed into entity, sub-entity and modifier."""

    entity: str
    sub_entity: str | None = None
    modifier: Modifier | None = None

    def __post_init__(self) -> None:
        if not self.entity:
            raise ValueError("NamingIdentity entity must be a non-empty string")

    @property
    def shape(self) -> IdentityShape:
        if self.sub_entity is None:
            if self.modifier is None:
                return IdentityShape.ENTITY
            return IdentityShape.ENTITY_MODIFIER
        if self.modifier is None:
            return IdentityShape.SUB_ENTITY
        return IdentityShape.SUB_ENTITY_MODIFIER
