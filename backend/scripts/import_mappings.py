#!/usr/bin/env python3
"""
Selector Mapping Import Script

Loads precomputed selector replacements from a JSON file into the
mapping store served by GET /api/mappings.

Usage:
    python import_mappings.py <mappings.json> [options]

Examples:
    python import_mappings.py release_2_4.json
    python import_mappings.py mappings.json --version 2.4.0
    python import_mappings.py mappings.json --dry-run

Accepted file formats:
    [{"original_selector": ".old", "replacement_selector": ".new", ...}, ...]
    {"mappings": [ ... same objects ... ]}
"""

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional, Tuple

# Get the backend directory path
SCRIPT_DIR = Path(__file__).parent.resolve()
BACKEND_DIR = SCRIPT_DIR.parent
APP_DIR = BACKEND_DIR / "app"

sys.path.insert(0, str(APP_DIR))

from analyzer.knowledge.mapping_store import MappingStore, MappingStoreError, SelectorMapping  # noqa: E402


def read_mappings_file(path: Path, version: Optional[str] = None) -> Tuple[List[SelectorMapping], List[str]]:
    """
    Parse and validate a mappings file.

    Returns:
        Tuple of (valid mappings, error messages for skipped entries)
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("mappings", [])
    if not isinstance(data, list):
        raise ValueError("Expected a list of mappings or an object with a 'mappings' list")

    mappings = []
    errors = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            errors.append(f"Entry {index}: not an object")
            continue
        try:
            mapping = SelectorMapping.from_dict(item)
        except (ValueError, TypeError) as e:
            errors.append(f"Entry {index}: {e}")
            continue
        if version:
            mapping.version = version
        mappings.append(mapping)

    return mappings, errors


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Import selector mappings into the analyzer mapping store"
    )
    parser.add_argument("file", help="JSON file with selector mappings")
    parser.add_argument("--version", help="Override the version of every imported mapping")
    parser.add_argument(
        "--mappings-dir",
        default=str(APP_DIR / "data" / "selector_mappings"),
        help="Mapping store directory (default: app/data/selector_mappings)"
    )
    parser.add_argument("--dry-run", action="store_true", help="Validate only, write nothing")
    args = parser.parse_args(argv)

    path = Path(args.file)
    if not path.exists():
        print(f"[ERROR] File not found: {path}")
        return 1

    try:
        mappings, errors = read_mappings_file(path, args.version)
    except (json.JSONDecodeError, ValueError) as e:
        print(f"[ERROR] Invalid mappings file: {e}")
        return 1

    for error in errors:
        print(f"[WARN] Skipped {error}")

    print(f"[INFO] {len(mappings)} valid mappings, {len(errors)} skipped")

    if args.dry_run:
        print("[INFO] Dry run - nothing written")
        return 0

    try:
        added = MappingStore(mappings_dir=args.mappings_dir).add_mappings(mappings)
    except MappingStoreError as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"[OK] Imported {added} mappings into {args.mappings_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
