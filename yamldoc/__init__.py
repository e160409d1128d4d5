"""yamldoc - annotated documentation for YAML data.

Renders a data tree (usually a configuration object's default values) as an
indented listing of ``key (Type): value`` lines, with ``# comment`` lines
taken from a description tree that mirrors the data:
- Renderer core (yamldoc.document)
- YAML loading with custom tags (yamldoc.loader)
- pydantic model introspection (yamldoc.models)
- Stored description sets and an HTTP API
"""

from yamldoc.document import SerializationError, TaggedValue, ValueType, render

__version__ = "0.1.0"

__all__ = [
    "SerializationError",
    "TaggedValue",
    "ValueType",
    "render",
]
