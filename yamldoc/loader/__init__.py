"""YAML loading for data and description trees."""

from yamldoc.loader.reader import DocumentLoader, LoadError, load_yaml, load_yaml_file

__all__ = [
    "DocumentLoader",
    "LoadError",
    "load_yaml",
    "load_yaml_file",
]
