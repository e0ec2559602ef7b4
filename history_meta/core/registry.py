"""Entity configuration registry.

Holds the EntityConfiguration of every entity processed by one build
pass, keyed by entity name. A registry is owned by the pass that fills
it; nothing here is process-wide.
"""

from __future__ import annotations

from collections.abc import Iterator

from history_meta.core.entities import EntityConfiguration
from history_meta.core.exceptions import NonAuditedEntityError


class EntitiesConfigurations:
    """Name-keyed registry of entity audit configurations."""

    def __init__(self) -> None:
        self._configurations: dict[str, EntityConfiguration] = {}

    def add(self, entity_name: str, configuration: EntityConfiguration) -> None:
        """Register (or replace) the configuration of an entity."""
        self._configurations[entity_name] = configuration

    def get(self, entity_name: str) -> EntityConfiguration | None:
        """Look up an entity configuration, None when the entity is not registered."""
        return self._configurations.get(entity_name)

    def require(self, entity_name: str) -> EntityConfiguration:
        """Look up an entity configuration.

        Raises:
            NonAuditedEntityError: If the entity is not registered.
        """
        try:
            return self._configurations[entity_name]
        except KeyError:
            raise NonAuditedEntityError(entity_name) from None

    def has(self, entity_name: str) -> bool:
        return entity_name in self._configurations

    @property
    def entity_names(self) -> list[str]:
        """All registered entity names, sorted alphabetically."""
        return sorted(self._configurations.keys())

    def __iter__(self) -> Iterator[str]:
        return iter(self._configurations)

    def __len__(self) -> int:
        return len(self._configurations)
