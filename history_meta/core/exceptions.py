"""history-meta exception hierarchy.

Every failure raised while building audit metadata derives from
HistoryMetaError. Configuration errors abort the whole build pass.
"""

from __future__ import annotations


class HistoryMetaError(Exception):
    """Base exception for all history-meta errors."""


# --- Configuration ---


class ConfigurationError(HistoryMetaError):
    """Base for audit configuration errors raised at build time."""


class NonAuditedEntityError(ConfigurationError):
    """Raised when an audited relation targets an entity with no audit configuration."""

    def __init__(self, entity_name: str, detail: str | None = None) -> None:
        self.entity_name = entity_name
        super().__init__(detail or f"An audited relation to a non-audited entity {entity_name}!")


class DuplicateRelationError(ConfigurationError):
    """Raised when two relations are registered under the same property of one entity."""

    def __init__(self, entity_name: str, property_name: str) -> None:
        self.entity_name = entity_name
        self.property_name = property_name
        super().__init__(f"Relation '{property_name}' is already registered on entity {entity_name}")


class ColumnMismatchError(ConfigurationError):
    """Raised when a reference declares fewer columns than the referenced identifier needs."""

    def __init__(self, property_name: str, expected: int, actual: int) -> None:
        self.property_name = property_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Reference '{property_name}' maps {actual} column(s), "
            f"referenced identifier needs {expected}"
        )


class ColumnCollisionError(ConfigurationError):
    """Raised when a relation column would reuse a name already present in the fragment."""

    def __init__(self, entity_name: str, property_name: str, column_name: str) -> None:
        self.entity_name = entity_name
        self.property_name = property_name
        self.column_name = column_name
        super().__init__(
            f"Relation '{property_name}' of entity {entity_name} maps '{column_name}', "
            f"which is already defined"
        )


# --- Mapping ---


class MappingError(HistoryMetaError):
    """Base for value-mapper errors."""


class DuplicatePropertyError(MappingError):
    """Raised when a composite mapper already holds a mapper for a property."""

    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        super().__init__(f"A mapper for property '{property_name}' is already registered")
