"""Registry for description trees.

Loads every ``*.yaml`` / ``*.yml`` file of a definitions directory and
serves the trees by file stem.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from yamldoc.descriptions.schemas import DescriptionSet, DescriptionSummary
from yamldoc.document.renderer import DESCRIPTION_KEY
from yamldoc.loader.reader import LoadError, load_yaml_file

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"
DESCRIPTIONS_DIR_ENV = "YAMLDOC_DESCRIPTIONS_DIR"


def _default_definitions_dir() -> Path:
    override = os.environ.get(DESCRIPTIONS_DIR_ENV)
    return Path(override) if override else DEFINITIONS_DIR


class DescriptionRegistry:
    """Loads and serves description trees."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = Path(definitions_dir) if definitions_dir else _default_definitions_dir()
        self._sets: dict[str, DescriptionSet] = {}
        self._load_all()

    def _load_all(self) -> None:
        """Load all description files from the definitions directory."""
        if not self.definitions_dir.exists():
            logger.warning(f"Descriptions directory not found: {self.definitions_dir}")
            return

        paths = sorted(self.definitions_dir.glob("*.yaml")) + sorted(self.definitions_dir.glob("*.yml"))
        for path in paths:
            if path.stem in self._sets:
                logger.warning(f"Duplicate description key '{path.stem}', skipping {path}")
                continue
            try:
                tree = load_yaml_file(path)
            except (LoadError, OSError) as e:
                logger.error(f"Failed to load {path}: {e}")
                continue
            self._sets[path.stem] = DescriptionSet(key=path.stem, source=str(path), tree=tree)
            logger.debug(f"Loaded description set: {path.stem}")

        logger.info(f"Loaded {len(self._sets)} description sets from {self.definitions_dir}")

    def get(self, key: str) -> Optional[Any]:
        """Get a description tree by key."""
        desc_set = self._sets.get(key)
        return desc_set.tree if desc_set else None

    def get_set(self, key: str) -> Optional[DescriptionSet]:
        """Get a description tree with its source information."""
        return self._sets.get(key)

    def list_keys(self) -> list[str]:
        """List all description keys."""
        return list(self._sets.keys())

    def list_summaries(self) -> list[DescriptionSummary]:
        """List description set summaries."""
        summaries = []
        for desc_set in self._sets.values():
            tree = desc_set.tree
            field_count = 0
            description = None
            if isinstance(tree, dict):
                field_count = len([k for k in tree if k != DESCRIPTION_KEY])
                top = tree.get(DESCRIPTION_KEY)
                description = top if isinstance(top, str) else None
            summaries.append(
                DescriptionSummary(
                    key=desc_set.key,
                    source=desc_set.source,
                    field_count=field_count,
                    description=description,
                )
            )
        return summaries

    def count(self) -> int:
        return len(self._sets)

    def reload(self) -> None:
        """Reload description sets from disk."""
        self._sets.clear()
        self._load_all()


# Global registry instance
_registry: Optional[DescriptionRegistry] = None


def get_description_registry() -> DescriptionRegistry:
    """Get the global description registry instance."""
    global _registry
    if _registry is None:
        _registry = DescriptionRegistry()
    return _registry
