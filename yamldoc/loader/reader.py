"""Read YAML sources into data trees the renderer understands.

The loader is PyYAML's safe loader with two changes: custom tags such as
``!Duration 30s`` become TaggedValue instances instead of errors, and
timestamps stay strings so every loaded node is part of the value model.
"""

import logging
from pathlib import Path
from typing import Any, Union

import yaml
from yaml.constructor import ConstructorError

from yamldoc.document.schemas import TaggedValue

logger = logging.getLogger(__name__)

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class LoadError(ValueError):
    """A YAML source could not be parsed."""


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps custom tags and leaves timestamps as text."""

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark
            )
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            # Keys are built eagerly so sequence keys are complete before freezing
            key = self.construct_object(key_node, deep=True)
            if isinstance(key, list):
                key = tuple(key)
            try:
                hash(key)
            except TypeError as e:
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    f"found unhashable key ({e})", key_node.start_mark,
                ) from e
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


def _construct_tagged(loader: DocumentLoader, tag_suffix: str, node: yaml.Node) -> TaggedValue:
    if isinstance(node, yaml.ScalarNode):
        # Resolve the inner scalar as if it were untagged, so "!Port 80" holds 80
        implicit = (node.style is None, False)
        resolved = loader.resolve(yaml.ScalarNode, node.value, implicit)
        inner_node = yaml.ScalarNode(resolved, node.value, node.start_mark, node.end_mark, node.style)
        inner = loader.construct_object(inner_node, deep=True)
    elif isinstance(node, yaml.SequenceNode):
        inner = loader.construct_sequence(node, deep=True)
    else:
        inner = loader.construct_mapping(node, deep=True)
    return TaggedValue(node.tag, inner)


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_constructor(TIMESTAMP_TAG, yaml.SafeLoader.construct_yaml_str)
# Any tag without a registered constructor
DocumentLoader.add_multi_constructor(None, _construct_tagged)


def load_yaml(text: str, source: str = "<string>") -> Any:
    """Parse a single YAML document into a data tree.

    Args:
        text: YAML source text
        source: Name used in error messages

    Returns:
        The data tree; None for an empty document

    Raises:
        LoadError: If the text is not valid YAML
    """
    try:
        return yaml.load(text, Loader=DocumentLoader)
    except yaml.YAMLError as e:
        raise LoadError(f"Invalid YAML in {source}: {e}") from e


def load_yaml_file(path: Union[str, Path]) -> Any:
    """Parse a YAML file into a data tree."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    logger.debug(f"Loaded {len(text)} characters from {path}")
    return load_yaml(text, source=str(path))
