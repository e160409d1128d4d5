"""Documentation of pydantic configuration models."""

from yamldoc.models.introspect import describe_model, document_model, dump_defaults

__all__ = [
    "describe_model",
    "document_model",
    "dump_defaults",
]
