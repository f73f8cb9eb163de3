# assettrail/environment.py
"""
Asset environment.

The environment owns the search path registry and is the only place
paths are mutated. Each mutation drops the memoized index and digest;
the next access rebuilds them from the current state.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from .asset import AssetBuilder, StaticAssetBuilder
from .base import Base
from .config import EnvironmentConfig
from .digest import contribute, new_digest
from .finder import FilesystemPathFinder, PathFinder
from .index import Index
from .paths import SearchPaths
from .resolver import Resolver

logger = logging.getLogger(__name__)


class Environment(Base):
    """
    Mutable asset environment.

    Usage:
        env = Environment("/app", extensions=[".js", ".coffee"])
        env.append_path("app/assets/javascripts")
        env.resolve("application.js")
        # => Path("/app/app/assets/javascripts/application.js.coffee")
        env.find_asset("application.js").digest_path
        # => "application-<digest>.js"
    """

    def __init__(
        self,
        root: Path | str = ".",
        paths: Iterable[Path | str] = (),
        extensions: Iterable[str] = (),
        finder: Optional[PathFinder] = None,
        builder: Optional[AssetBuilder] = None,
        digest_algorithm: str = "sha3_256",
        version: str = "",
    ):
        """
        Initialize the environment.

        Args:
            root: Directory relative search paths are expanded against
            paths: Initial search paths, highest priority first
            extensions: Extensions that may be omitted from logical paths
            finder: Path finder (defaults to FilesystemPathFinder)
            builder: Asset builder (defaults to StaticAssetBuilder)
            digest_algorithm: hashlib algorithm for the environment digest
            version: Arbitrary string mixed into the digest, bump to expire caches
        """
        self._trail = SearchPaths(root, paths, extensions)
        self.finder = finder or FilesystemPathFinder()
        self.builder = builder or StaticAssetBuilder(digest_algorithm)
        self.digest_algorithm = digest_algorithm
        self._version = version
        self._resolver = Resolver(self._trail, self.finder)
        self._index: Optional[Index] = None
        self._digest: Optional[str] = None
        self._trail.add_listener(self._expire_index)

    @classmethod
    def from_config(cls, config: EnvironmentConfig, **kwargs) -> "Environment":
        """Create an environment from a loaded config."""
        return cls(
            root=config.root,
            paths=config.paths,
            extensions=config.extensions,
            digest_algorithm=config.digest_algorithm,
            version=config.version,
            **kwargs,
        )

    @property
    def version(self) -> str:
        return self._version

    @version.setter
    def version(self, version: str):
        self._version = version
        self._expire_index()

    @property
    def trail(self) -> SearchPaths:
        return self._trail

    def prepend_path(self, path: Path | str):
        """Add a path with the highest priority."""
        self._trail.prepend_path(path)

    def append_path(self, path: Path | str):
        """Add a path with the lowest priority."""
        self._trail.append_path(path)

    def clear_paths(self):
        """Remove all paths."""
        self._trail.clear_paths()

    def _expire_index(self):
        self._index = None
        self._digest = None

    @property
    def digest(self) -> str:
        """
        Hex digest of the environment configuration.

        Changes whenever the version, the algorithm or the search paths
        (including their order) change.
        """
        if self._digest is None:
            digest = new_digest(self.digest_algorithm)
            digest.update(f"{self.digest_algorithm}:{self.version}\0".encode())
            self._digest = contribute(digest, self._trail).hexdigest()
        return self._digest

    @property
    def index(self) -> Index:
        """Memoized snapshot, rebuilt after any path change."""
        if self._index is None or self._index.is_stale():
            self._index = Index(self)
            logger.debug(f"Built index at version {self._index.version}")
        return self._index
