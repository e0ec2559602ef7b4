"""Generator configuration.

GeneratorConfig is a Pydantic model holding the settings shared by every
operation of one metadata-build pass.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeneratorConfig(BaseModel):
    """Configuration for audit metadata generation."""

    model_config = ConfigDict(frozen=True)

    relation_prefix_separator: str = Field(default="_", min_length=1)
    strict_columns: bool = True
    allow_not_audited_target: bool = True
