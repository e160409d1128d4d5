"""Named description trees loaded from YAML definitions."""

from yamldoc.descriptions.registry import DescriptionRegistry, get_description_registry
from yamldoc.descriptions.schemas import DescriptionSet, DescriptionSummary

__all__ = [
    "DescriptionRegistry",
    "DescriptionSet",
    "DescriptionSummary",
    "get_description_registry",
]
