#!/usr/bin/env python3
"""Render annotated documentation for a YAML file.

Each mapping entry is printed as ``key (Type): value``, preceded by a
``# comment`` line when the description tree has text for it.

Usage:
    # No descriptions, just names, types and values
    python scripts/document_yaml.py defaults.yaml

    # Descriptions from a YAML file mirroring defaults.yaml
    python scripts/document_yaml.py defaults.yaml -d descriptions.yaml

    # Descriptions from a stored description set, written to a file
    python scripts/document_yaml.py defaults.yaml -k service -o CONFIG.txt
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from yamldoc.descriptions.registry import get_description_registry  # noqa: E402
from yamldoc.document import SerializationError, render  # noqa: E402
from yamldoc.loader import LoadError, load_yaml_file  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render annotated documentation for a YAML data file",
    )
    parser.add_argument("value", type=Path, help="YAML file holding the data to document")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-d", "--description",
        type=Path,
        help="YAML file holding the description tree",
    )
    source.add_argument(
        "-k", "--description-key",
        help="Key of a stored description set",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write the documentation to this file instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        value = load_yaml_file(args.value)
        description = None
        if args.description:
            description = load_yaml_file(args.description)
        elif args.description_key:
            description = get_description_registry().get(args.description_key)
            if description is None:
                print(f"Error: description set '{args.description_key}' not found", file=sys.stderr)
                return 1
        text = render(value, description)
    except (FileNotFoundError, LoadError, SerializationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {len(text)} characters to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
