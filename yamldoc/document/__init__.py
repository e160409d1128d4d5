"""Annotated rendering of data trees."""

from yamldoc.document.errors import SerializationError
from yamldoc.document.renderer import (
    DESCRIPTION_KEY,
    INDENT,
    classify,
    describe_key,
    render,
    serialize_leaf,
)
from yamldoc.document.schemas import TaggedValue, Value, ValueType

__all__ = [
    "DESCRIPTION_KEY",
    "INDENT",
    "SerializationError",
    "TaggedValue",
    "Value",
    "ValueType",
    "classify",
    "describe_key",
    "render",
    "serialize_leaf",
]
