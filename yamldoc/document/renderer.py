"""Render a data tree as an annotated, indented text listing.

Each mapping entry becomes a ``key (Type): value`` line, optionally
preceded by a ``# comment`` line taken from a description tree that mirrors
the data tree's shape:

    # Description for foo
    foo (Mapping):
        # Description for bar
        bar (Number): 42

Leaves are written with their YAML text encoding. The description for a key
is either a plain string, or a mapping whose ``__description__`` field holds
the comment and whose other fields describe the value's children.
"""

from typing import Any, Mapping, NamedTuple, Optional, Union

import yaml

from yamldoc.document.errors import SerializationError
from yamldoc.document.schemas import TaggedValue, ValueType

INDENT = "    "
DESCRIPTION_KEY = "__description__"

# PyYAML closes a document holding a bare plain scalar with "..."
_DOCUMENT_END = "\n...\n"


class _DocumentDumper(yaml.SafeDumper):
    """SafeDumper that also knows about tuples and tagged values."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # (tag, text) of tagged scalars whose text resolves back to the inner type
        self.plain_tagged: dict[tuple[str, str], bool] = {}

    def choose_scalar_style(self):
        event = self.event
        if not event.style and self.plain_tagged.get((event.tag, event.value), False):
            if self.analysis is None:
                self.analysis = self.analyze_scalar(event.value)
            if not (self.simple_key_context and (self.analysis.empty or self.analysis.multiline)) and (
                (self.flow_level and self.analysis.allow_flow_plain)
                or (not self.flow_level and self.analysis.allow_block_plain)
            ):
                return ""
        return super().choose_scalar_style()


def _represent_tagged(dumper: _DocumentDumper, data: TaggedValue) -> yaml.Node:
    node = dumper.represent_data(data.value)
    if isinstance(node, yaml.ScalarNode):
        plain = node.style is None and dumper.resolve(yaml.ScalarNode, node.value, (True, False)) == node.tag
        key = (data.tag, node.value)
        # A (tag, text) pair seen once as a quoted string stays quoted
        dumper.plain_tagged[key] = dumper.plain_tagged.get(key, True) and plain
    node.tag = data.tag
    return node


_DocumentDumper.add_representer(TaggedValue, _represent_tagged)
_DocumentDumper.add_representer(tuple, yaml.SafeDumper.represent_list)


def _dump(value: Any, flow: bool) -> str:
    text = yaml.dump(
        value,
        Dumper=_DocumentDumper,
        default_flow_style=flow,
        allow_unicode=True,
        sort_keys=False,
        width=float("inf"),
    )
    if text.endswith(_DOCUMENT_END):
        text = text[: -len(_DOCUMENT_END) + 1]
    return text


class _Frame(NamedTuple):
    value: Any
    description: Any
    level: int


def classify(value: Any) -> ValueType:
    """Return the ValueType label for a node of the data tree.

    Raises:
        SerializationError: If the value is not part of the value model
    """
    if value is None:
        return ValueType.NULL
    # bool is an int subclass, test it first
    if isinstance(value, bool):
        return ValueType.BOOL
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, TaggedValue):
        return ValueType.TAGGED
    if isinstance(value, Mapping):
        return ValueType.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueType.LIST
    raise SerializationError(value, "not a null, bool, number, string, list, mapping or tagged value")


def describe_key(key: Any) -> str:
    """Render a mapping key for a key line.

    String keys are written as-is. Any other key is written in its
    single-line YAML flow form (``1``, ``[1, 2]``, ``!Tag x``), or with
    ``repr()`` when YAML cannot encode it.
    """
    if isinstance(key, str):
        return key
    try:
        return _dump(key, flow=True).rstrip("\n")
    except yaml.YAMLError:
        return repr(key)


def serialize_leaf(value: Any) -> str:
    """Encode a leaf value as YAML text, trailing newline included."""
    try:
        return _dump(value, flow=False)
    except yaml.YAMLError as e:
        raise SerializationError(value, str(e)) from e


def _comment_for(node: Any) -> Optional[str]:
    if isinstance(node, str):
        return node
    if isinstance(node, Mapping):
        comment = node.get(DESCRIPTION_KEY)
        if isinstance(comment, str):
            return comment
    return None


def _expand(frame: _Frame) -> list[Union[str, _Frame]]:
    """Turn one node into output fragments and child frames, in output order."""
    value_type = classify(frame.value)
    prefix = INDENT * frame.level

    if value_type is ValueType.MAPPING:
        items: list[Union[str, _Frame]] = []
        if frame.level > 0:
            items.append("\n")
        descriptions = frame.description if isinstance(frame.description, Mapping) else None
        for key, child in frame.value.items():
            child_type = classify(child)
            node = descriptions.get(key) if descriptions is not None else None
            comment = _comment_for(node)
            if comment is not None:
                items.append(f"{prefix}# {comment}\n")
            items.append(f"{prefix}{describe_key(key)} ({child_type.value}): ")
            child_description = node if isinstance(node, Mapping) else None
            items.append(_Frame(child, child_description, frame.level + 1))
        return items

    if value_type is ValueType.LIST:
        items = ["\n"]
        for element in frame.value:
            # Sequence positions never carry descriptions
            items.append(f"{prefix}- ")
            items.append(_Frame(element, None, frame.level + 1))
        return items

    return [serialize_leaf(frame.value)]


def render(value: Any, description: Any = None) -> str:
    """Render ``value`` as an annotated listing.

    Args:
        value: The data tree (usually default configuration values)
        description: Optional description tree mirroring ``value``'s shape.
            Shape mismatches only suppress comments, they never fail.

    Returns:
        The complete rendered text

    Raises:
        SerializationError: If a leaf cannot be encoded; nothing is returned
    """
    parts: list[str] = []
    # Explicit stack so nesting depth is not bounded by the recursion limit
    stack: list[Union[str, _Frame]] = [_Frame(value, description, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        else:
            stack.extend(reversed(_expand(item)))
    return "".join(parts)
