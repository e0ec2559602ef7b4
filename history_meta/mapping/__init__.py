"""Mapping layer - copy audited values between entities and audit rows."""

from __future__ import annotations

from history_meta.mapping.composite import MultiPropertyMapper, SinglePropertyMapper
from history_meta.mapping.id import MultipleIdMapper, SingleIdMapper
from history_meta.mapping.protocol import (
    AuditReader,
    CompositeMapperBuilder,
    IdMapper,
    PropertyMapper,
)
from history_meta.mapping.relation import (
    OneToOneNotOwningMapper,
    OneToOnePrimaryKeyJoinColumnMapper,
    ToOneIdMapper,
)

__all__ = [
    "IdMapper",
    "PropertyMapper",
    "CompositeMapperBuilder",
    "AuditReader",
    "SingleIdMapper",
    "MultipleIdMapper",
    "SinglePropertyMapper",
    "MultiPropertyMapper",
    "ToOneIdMapper",
    "OneToOneNotOwningMapper",
    "OneToOnePrimaryKeyJoinColumnMapper",
]
