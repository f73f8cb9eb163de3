# assettrail/resolver.py
"""
Logical path resolution.

resolve_each() lazily yields every match in priority order; resolve()
takes the first one or raises FileNotFound.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from .errors import FileNotFound
from .finder import FilesystemPathFinder, PathFinder
from .fingerprint import parse

logger = logging.getLogger(__name__)


class Resolver:
    """
    Searches a trail's paths through a path finder.

    The trail is anything with a root, paths() and extensions(): a
    SearchPaths registry or a snapshot of one. It is read on every call,
    so mutations to a registry are seen by the next lookup.
    """

    def __init__(self, trail, finder: Optional[PathFinder] = None):
        self.trail = trail
        self.finder = finder or FilesystemPathFinder()

    def resolve_each(self, logical_path: str, options: Optional[Dict[str, Any]] = None) -> Iterator[Path]:
        """
        Yield every file matching a logical path, highest priority first.

        Any fingerprint in the logical path is stripped before searching.
        Stop iterating to stop the search.
        """
        options = dict(options or {})
        options.setdefault("base_path", self.trail.root)

        attributes = parse(logical_path)
        roots = self.trail.paths()
        extensions = self.trail.extensions()

        for path in self.finder.find(attributes.search_paths, roots, extensions, options):
            yield Path(path)

    def resolve(self, logical_path: str, options: Optional[Dict[str, Any]] = None) -> Path:
        """
        Find the expanded real path for a logical path.

            resolve("application.js")
            # => Path("/app/assets/javascripts/application.js.coffee")

        Raises:
            FileNotFound: if no search path contains the file
        """
        for path in self.resolve_each(logical_path, options):
            logger.debug(f"Resolved {logical_path} -> {path}")
            return path
        raise FileNotFound(logical_path)
