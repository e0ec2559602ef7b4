"""Live schema model - the inputs audit metadata is generated from."""

from __future__ import annotations

from history_meta.model.properties import PropertyAuditingData, PropertyData
from history_meta.model.values import ManyToOne, OneToOne, ToOne, ignore_not_found

__all__ = [
    "PropertyData",
    "PropertyAuditingData",
    "ToOne",
    "ManyToOne",
    "OneToOne",
    "ignore_not_found",
]
