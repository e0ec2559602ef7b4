"""Audit metadata enumerations."""

from __future__ import annotations

from enum import Enum


class RelationType(Enum):
    """Kinds of relations recorded on an entity configuration."""

    TO_ONE = "to_one"
    TO_ONE_NOT_OWNING = "to_one_not_owning"


class RelationTargetAuditMode(Enum):
    """Whether the target of an audited relation is itself audited."""

    AUDITED = "audited"
    NOT_AUDITED = "not_audited"


class AccessType(Enum):
    """How a property value is read from and written to an entity instance."""

    FIELD = "field"
    PROPERTY = "property"
