# assettrail/finder.py
"""
Path finders.

A finder answers one question: given candidate logical paths and an
ordered list of roots, which files exist? Resolution hands it the roots
and candidates; the finder decides how to look.

Finders are injected into the resolver, so tests can substitute a fake.
"""

import logging
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)


class PathFinder(ABC):
    """
    Base class for path finders.

    Subclasses implement find() as a generator so that callers can stop
    after the first match without touching the remaining roots.
    """

    @abstractmethod
    def find(
        self,
        logical_paths: Sequence[str],
        roots: Sequence[Path],
        extensions: Sequence[str],
        options: Optional[Dict[str, Any]] = None,
    ) -> Iterator[Path]:
        """
        Yield existing files matching any candidate, in priority order.

        Args:
            logical_paths: Candidate variants, most specific first
            roots: Search directories, highest priority first
            extensions: Extensions that may be omitted from a candidate
            options: Finder options (base_path for ./ and ../ lookups)

        Returns:
            Iterator of matching file paths
        """
        pass


class FilesystemPathFinder(PathFinder):
    """
    Looks candidates up directly on disk.

    Only the directory a candidate would live in is listed; nothing is
    walked. An entry matches when it is the candidate's basename followed
    by zero or more registered extensions, so "app.js" finds
    "app.js.coffee" and "app" finds "app.js".
    """

    def find(
        self,
        logical_paths: Sequence[str],
        roots: Sequence[Path],
        extensions: Sequence[str],
        options: Optional[Dict[str, Any]] = None,
    ) -> Iterator[Path]:
        options = options or {}
        base_path = options.get("base_path")

        for logical_path in logical_paths:
            if self._is_relative(logical_path):
                # ./ and ../ only make sense next to the requiring file
                if base_path is None:
                    continue
                yield from self._match(Path(base_path), logical_path, extensions)

        absolute = [p for p in logical_paths if not self._is_relative(p)]
        if not absolute:
            return

        for root in roots:
            for logical_path in absolute:
                yield from self._match(Path(root), logical_path, extensions)

    @staticmethod
    def _is_relative(logical_path: str) -> bool:
        return logical_path.startswith("./") or logical_path.startswith("../")

    def _match(self, base: Path, logical_path: str, extensions: Sequence[str]) -> Iterator[Path]:
        candidate = Path(os.path.normpath(base / logical_path))
        dirname = candidate.parent
        basename = candidate.name

        for entry in self._sorted_matches(dirname, basename, extensions):
            path = dirname / entry
            if path.is_file():
                logger.debug(f"Found {logical_path} -> {path}")
                yield path

    def _sorted_matches(self, dirname: Path, basename: str, extensions: Sequence[str]) -> List[str]:
        try:
            entries = sorted(os.listdir(dirname))
        except (FileNotFoundError, NotADirectoryError):
            return []

        pattern = self._pattern_for(basename, extensions)
        matches = [e for e in entries if pattern.match(e)]
        return sorted(matches, key=lambda e: self._extension_rank(e, basename, extensions))

    @staticmethod
    def _pattern_for(basename: str, extensions: Sequence[str]) -> re.Pattern:
        if not extensions:
            return re.compile(f"^{re.escape(basename)}$")
        alternatives = "|".join(re.escape(ext) for ext in extensions)
        return re.compile(f"^{re.escape(basename)}(?:{alternatives})*$")

    @staticmethod
    def _extension_rank(entry: str, basename: str, extensions: Sequence[str]) -> int:
        """Exact name first, then by registered order of the extra extensions."""
        extra = re.findall(r"\.[^.]+", entry[len(basename):])
        rank = 0
        for ext in extra:
            if ext in extensions:
                rank += list(extensions).index(ext) + 1
        return rank
