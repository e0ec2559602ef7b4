"""Live mapping values for single-valued references.

These describe how a to-one property is mapped in the live schema: the
referenced entity, the physical columns holding the foreign key and the
flags that influence audit metadata.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToOne:
    """A single-valued reference to another entity."""

    referenced_entity_name: str
    column_names: tuple[str, ...] = ()
    lazy: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "column_names", tuple(self.column_names))


@dataclass(frozen=True)
class ManyToOne(ToOne):
    """A many-to-one reference; the declaring side owns the foreign key."""

    ignore_not_found: bool = False


@dataclass(frozen=True)
class OneToOne(ToOne):
    """A one-to-one reference.

    referenced_property_name names the owning side's property when this is
    the inverse side. constrained marks a reference that shares the
    owner's primary key.
    """

    referenced_property_name: str | None = None
    constrained: bool = False


def ignore_not_found(value: ToOne) -> bool:
    """Whether a missing referenced row should be ignored rather than fail.

    Only many-to-one references can declare it; every other kind of value
    reports False.
    """
    if isinstance(value, ManyToOne):
        return value.ignore_not_found
    return False
