"""Build data and description trees from pydantic configuration models.

A configuration model whose fields all have defaults documents itself:
the default instance gives the data tree, and ``Field(description=...)``
gives the description tree.

    class Server(BaseModel):
        port: int = Field(default=8001, description="Port to listen on")

    class Settings(BaseModel):
        server: Server = Field(default_factory=Server)

    document_model(Settings)
"""

import logging
import types
import typing
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from yamldoc.document.renderer import DESCRIPTION_KEY, render

logger = logging.getLogger(__name__)


def _nested_model(annotation: Any) -> Optional[type[BaseModel]]:
    """Return the model class behind a field annotation, unwrapping Optional."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return _nested_model(args[0])
    return None


def _summary_line(model_cls: type[BaseModel]) -> Optional[str]:
    doc = model_cls.__doc__
    if not doc or not doc.strip():
        return None
    return doc.strip().splitlines()[0].strip()


def dump_defaults(model_cls: type[BaseModel]) -> dict[str, Any]:
    """Instantiate ``model_cls`` with defaults and dump it as plain data.

    Raises:
        ValueError: If the model has required fields without defaults
    """
    try:
        instance = model_cls()
    except ValidationError as e:
        raise ValueError(
            f"{model_cls.__name__} cannot be built from defaults: {e.error_count()} field(s) missing"
        ) from e
    return instance.model_dump(mode="json", by_alias=True)


def _describe(model_cls: type[BaseModel], active: frozenset) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    active = active | {model_cls}
    for name, field in model_cls.model_fields.items():
        key = field.serialization_alias or field.alias or name
        nested = _nested_model(field.annotation)
        if nested is not None and nested not in active:
            children = _describe(nested, active)
            comment = field.description or _summary_line(nested)
            if comment:
                children = {DESCRIPTION_KEY: comment, **children}
            if children:
                tree[key] = children
        elif field.description:
            # Leaf fields, and models already being described, get just the field comment
            tree[key] = field.description
    return tree


def describe_model(model_cls: type[BaseModel]) -> dict[str, Any]:
    """Collect field descriptions into a description tree.

    Nested models become mappings whose ``__description__`` is the field's
    description, or the nested model's docstring summary when the field has
    none. Fields without any description are left out. A model nested inside
    itself is described only by the field's own description.
    """
    return _describe(model_cls, frozenset())


def document_model(model_cls: type[BaseModel]) -> str:
    """Render the default configuration of ``model_cls`` with its descriptions."""
    values = dump_defaults(model_cls)
    descriptions = describe_model(model_cls)
    logger.debug(f"Documenting {model_cls.__name__}: {len(values)} top-level fields")
    return render(values, descriptions)
