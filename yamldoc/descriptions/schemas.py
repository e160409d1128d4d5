"""Schemas for stored description trees."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class DescriptionSet(BaseModel):
    """A named description tree loaded from a YAML file."""

    key: str = Field(..., description="File stem the tree was loaded from")
    source: str = Field(..., description="Path of the YAML file")
    tree: Any = Field(
        default=None,
        description="The description tree: strings, or mappings with a __description__ field",
    )


class DescriptionSummary(BaseModel):
    """Lightweight summary for listing endpoints."""

    key: str
    source: str
    field_count: int = Field(default=0, description="Number of top-level described fields")
    description: Optional[str] = Field(
        default=None,
        description="Top-level __description__ of the tree, if any",
    )
