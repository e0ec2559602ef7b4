"""Property descriptors.

PropertyData is the stable key mappers are registered under.
PropertyAuditingData carries the audit settings read for one property.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from history_meta.core.enums import AccessType, RelationTargetAuditMode


@dataclass(frozen=True)
class PropertyData:
    """Name and accessor strategy of a single entity property."""

    name: str
    bean_name: str | None = None
    access_type: AccessType = AccessType.FIELD

    @property
    def attribute_name(self) -> str:
        return self.bean_name or self.name

    def get_value(self, obj: Any) -> Any:
        """Read the property value from an entity instance."""
        return getattr(obj, self.attribute_name)

    def set_value(self, obj: Any, value: Any) -> None:
        """Write the property value onto an entity instance.

        Field access bypasses __setattr__ so frozen dataclasses can be
        populated; property access goes through the normal setter.
        """
        if self.access_type is AccessType.FIELD:
            object.__setattr__(obj, self.attribute_name, value)
        else:
            setattr(obj, self.attribute_name, value)


@dataclass
class PropertyAuditingData:
    """Audit settings for one audited property."""

    name: str
    bean_name: str | None = None
    access_type: AccessType = AccessType.FIELD
    force_insertable: bool = False
    relation_target_audit_mode: RelationTargetAuditMode = RelationTargetAuditMode.AUDITED
    _property_data: PropertyData | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def property_data(self) -> PropertyData:
        if self._property_data is None:
            self._property_data = PropertyData(
                name=self.name,
                bean_name=self.bean_name,
                access_type=self.access_type,
            )
        return self._property_data
