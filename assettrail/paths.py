# assettrail/paths.py
"""
Search path registry.

Holds the root every relative path is expanded against, the ordered list
of directories searched for logical paths, and the extensions that may be
omitted from a lookup.

Every mutation bumps a version stamp before the change becomes visible and
notifies listeners, so that anything derived from an older state (an index,
a digest) can tell it is stale.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

logger = logging.getLogger(__name__)

# Called with no arguments after the version is bumped
PathsListener = Callable[[], None]


def _normalize_extension(ext: str) -> str:
    ext = str(ext).strip()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class PathsSnapshot:
    """
    Immutable copy of a registry's state at a given version.

    Exposes the same root, paths() and extensions() readers as the
    registry, so a resolver can search it directly.
    """
    version: int
    root: Path
    search_paths: Tuple[Path, ...]
    extension_names: Tuple[str, ...]

    def paths(self) -> List[Path]:
        return list(self.search_paths)

    def extensions(self) -> List[str]:
        return list(self.extension_names)

    def is_stale(self, registry: "SearchPaths") -> bool:
        return registry.version != self.version


class SearchPaths:
    """
    Ordered, mutable list of search directories.

    Index 0 has the highest priority. Duplicates are allowed.

    Usage:
        trail = SearchPaths("/app", extensions=[".js", ".coffee"])
        trail.append_path("assets/javascripts")
        trail.prepend_path("vendor/assets")
        trail.paths()
        # => [Path("/app/vendor/assets"), Path("/app/assets/javascripts")]
    """

    def __init__(
        self,
        root: Path | str,
        paths: Iterable[Path | str] = (),
        extensions: Iterable[str] = (),
    ):
        self._root = Path(os.path.abspath(os.path.expanduser(str(root))))
        self._paths: List[Path] = [self._expand(p) for p in paths]
        self._extensions: List[str] = []
        for ext in extensions:
            ext = _normalize_extension(ext)
            if ext not in self._extensions:
                self._extensions.append(ext)
        self._version = 0
        self._listeners: List[PathsListener] = []

    def _expand(self, path: Path | str) -> Path:
        """Expand a path against root (absolute paths are kept as is)."""
        return Path(os.path.normpath(self._root / Path(path).expanduser()))

    @property
    def root(self) -> Path:
        return self._root

    @property
    def version(self) -> int:
        """Generation counter, incremented on every mutation."""
        return self._version

    def paths(self) -> List[Path]:
        """
        Return a copy of the search paths, highest priority first.

        Mutating the returned list has no effect on the registry. Use
        prepend_path, append_path and clear_paths instead.
        """
        return list(self._paths)

    def extensions(self) -> List[str]:
        """
        Return a copy of the extensions that may be omitted from lookups.

            # => [".js", ".css", ".coffee", ".scss"]
        """
        return list(self._extensions)

    def prepend_path(self, path: Path | str):
        """Add a path with the highest priority."""
        self._expire_index()
        self._paths.insert(0, self._expand(path))

    def append_path(self, path: Path | str):
        """Add a path with the lowest priority."""
        self._expire_index()
        self._paths.append(self._expand(path))

    def clear_paths(self):
        """
        Remove all paths.

        There is no way to reorder paths: clear them and append them
        again in the order you want.
        """
        self._expire_index()
        self._paths.clear()

    def add_listener(self, listener: PathsListener):
        """Register a hook fired on every mutation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: PathsListener) -> bool:
        if listener not in self._listeners:
            return False
        self._listeners.remove(listener)
        return True

    def snapshot(self) -> PathsSnapshot:
        return PathsSnapshot(
            version=self._version,
            root=self._root,
            search_paths=tuple(self._paths),
            extension_names=tuple(self._extensions),
        )

    def _expire_index(self):
        """Bump the version and notify listeners."""
        self._version += 1
        logger.debug(f"Search paths changed (version {self._version})")
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                logger.warning(f"Paths listener error: {e}")

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self):
        return iter(list(self._paths))
