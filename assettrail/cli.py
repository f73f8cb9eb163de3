#!/usr/bin/env python3
"""
assettrail CLI

Inspect how logical asset paths resolve:
  assettrail paths   - List search paths in priority order
  assettrail resolve - Resolve logical paths to real files
  assettrail find    - Resolve and build an asset, print it as JSON
  assettrail digest  - Print the environment digest

Usage:
  assettrail resolve <logical>... [-c config.yaml] [-r root] [-I path]... [--all]
  assettrail find <logical> [-c config.yaml]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_EXTENSIONS, EnvironmentConfig
from .environment import Environment
from .errors import FileNotFound


def load_environment(args) -> Environment:
    """
    Build an environment from --config, then apply command line overrides.

    --root replaces the configured root; -I paths and -e extensions are
    added after the configured ones.
    """
    if args.config:
        config = EnvironmentConfig.from_file(args.config)
    else:
        config = EnvironmentConfig(extensions=[] if args.ext else list(DEFAULT_EXTENSIONS))

    if args.root:
        config.root = args.root
    config.paths.extend(args.path or [])
    config.extensions.extend(args.ext or [])

    return Environment.from_config(config)


def cmd_paths(args) -> int:
    """List search paths."""
    env = load_environment(args)
    print(f"Root: {env.root}")
    for i, path in enumerate(env.paths()):
        print(f"  [{i}] {path}")
    return 0


def cmd_resolve(args) -> int:
    """Resolve logical paths."""
    env = load_environment(args)
    status = 0
    for logical_path in args.logical_path:
        if args.all:
            matches = list(env.resolve_each(logical_path))
            if not matches:
                print(f"{logical_path}: not found", file=sys.stderr)
                status = 1
            for path in matches:
                print(path)
            continue

        try:
            print(env.resolve(logical_path))
        except FileNotFound as e:
            print(f"ERROR: {e}", file=sys.stderr)
            status = 1
    return status


def cmd_find(args) -> int:
    """Resolve and build an asset."""
    env = load_environment(args)
    asset = env.find_asset(args.logical_path)
    if asset is None:
        print(f"ERROR: asset not found: {args.logical_path}", file=sys.stderr)
        return 1
    print(json.dumps(asset.to_dict(), indent=2))
    return 0


def cmd_digest(args) -> int:
    """Print the environment digest."""
    env = load_environment(args)
    print(env.digest)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--config", help="Environment YAML file")
    common.add_argument("-r", "--root", help="Root directory (default: config root or .)")
    common.add_argument("-I", "--path", action="append",
                        help="Search path, lowest priority last (repeatable)")
    common.add_argument("-e", "--ext", action="append",
                        help="Extension that may be omitted (repeatable)")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(
        prog="assettrail",
        description="assettrail - Logical asset path resolution",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("paths", parents=[common], help="List search paths")

    resolve_parser = subparsers.add_parser("resolve", parents=[common],
                                           help="Resolve logical paths")
    resolve_parser.add_argument("logical_path", nargs="+", help="Logical path(s)")
    resolve_parser.add_argument("--all", action="store_true",
                                help="Print every match, not just the first")

    find_parser = subparsers.add_parser("find", parents=[common],
                                        help="Find and build an asset")
    find_parser.add_argument("logical_path", help="Logical path (may be fingerprinted)")

    subparsers.add_parser("digest", parents=[common], help="Print environment digest")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "paths": cmd_paths,
        "resolve": cmd_resolve,
        "find": cmd_find,
        "digest": cmd_digest,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
