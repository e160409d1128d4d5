"""Value model schemas for the document renderer.

Data trees are plain Python values (None, bool, int, float, str, list,
tuple, dict). The only wrapper type is TaggedValue, which carries a custom
YAML tag together with the value it annotates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence, Union


class ValueType(str, Enum):
    """Classification label printed next to every documented key."""

    NULL = "Null"
    BOOL = "Bool"
    NUMBER = "Number"
    STRING = "String"
    LIST = "List"
    MAPPING = "Mapping"
    TAGGED = "Tagged"


@dataclass(frozen=True)
class TaggedValue:
    """A value annotated with a custom tag, e.g. ``!Duration 30s``."""

    tag: str
    value: Any


# Union of everything the renderer accepts
Value = Union[None, bool, int, float, str, Sequence[Any], Mapping[Any, Any], TaggedValue]
