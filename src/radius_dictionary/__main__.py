"""Command line entry point: load dictionaries and print a summary or JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .defaults import load_default_registry
from .errors import DictionaryError
from .parser import DictionaryParser, ParserOptions
from .registry import DictionaryRegistry, RegistryValidator


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="radius-dictionary",
        description="Load RADIUS dictionary files and report their contents.",
    )
    p.add_argument(
        "paths",
        nargs="*",
        help="dictionary files, merged in order (default: the bundled dictionary)",
    )
    p.add_argument("--json", action="store_true", help="print the registry as JSON")
    p.add_argument("--check", action="store_true", help="report consistency findings")
    p.add_argument("--encoding", default="utf-8", help="text encoding of the dictionary files")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return p


def _load(paths: Sequence[str], encoding: str) -> DictionaryRegistry:
    if not paths:
        return load_default_registry()
    parser = DictionaryParser(options=ParserOptions(encoding=encoding))
    for path in paths:
        parser.parse_file(path)
    return parser.registry


def _summary(registry: DictionaryRegistry) -> str:
    lines = [f"{len(registry)} attributes"]
    for vendor_id in registry.vendor_ids():
        name = registry.get_vendor_name(vendor_id) or "?"
        count = len(registry.attribute_types(vendor_id))
        lines.append(f"vendor {vendor_id} ({name}): {count} attributes")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        registry = _load(args.paths, args.encoding)
    except (DictionaryError, LookupError, OSError) as exc:
        print(f"radius-dictionary: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(registry.to_dict(), indent=2))
    else:
        print(_summary(registry))

    if args.check:
        findings = list(RegistryValidator(registry).validate())
        for finding in findings:
            print(f"warning: {finding}")
        if findings:
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
