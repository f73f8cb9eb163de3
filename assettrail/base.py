# assettrail/base.py
"""
Lookups shared by Environment and Index.

Subclasses provide:
    _trail: a SearchPaths registry or a PathsSnapshot
    _resolver: a Resolver over _trail
    builder: an AssetBuilder
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .asset import Asset
from .fingerprint import parse, verify

logger = logging.getLogger(__name__)


class Base:
    """Read side of an asset environment."""

    @property
    def root(self) -> Path:
        """
        Root every relative search path is expanded against.

        Set it to the application's root directory.
        """
        return self._trail.root

    def paths(self) -> List[Path]:
        """Copy of the search paths, highest priority first."""
        return self._trail.paths()

    def extensions(self) -> List[str]:
        """Copy of the extensions that may be omitted from logical paths."""
        return self._trail.extensions()

    def resolve_each(self, logical_path: str, options: Optional[Dict[str, Any]] = None) -> Iterator[Path]:
        """Iterate over every real path matching a logical path."""
        return self._resolver.resolve_each(logical_path, options)

    def resolve(self, logical_path: str, options: Optional[Dict[str, Any]] = None) -> Path:
        """
        Find the real path for a logical path.

        Raises FileNotFound if no search path contains it.
        """
        return self._resolver.resolve(logical_path, options)

    def find_asset(self, logical_path: str, options: Optional[Dict[str, Any]] = None) -> Optional[Asset]:
        """
        Find and build an asset.

        Returns None if the file does not exist or if the logical path
        carries a fingerprint that does not match the built asset.
        """
        return self._find_asset_in_path(str(logical_path), options or {})

    def _find_asset_in_path(self, logical_path: str, options: Dict[str, Any]) -> Optional[Asset]:
        attributes = parse(logical_path)
        try:
            pathname = self.resolve(attributes.path, options)
            asset = self.builder.build(attributes.path, pathname, options)
        except FileNotFoundError:
            # FileNotFound from resolve, or a resolved file removed since
            logger.debug(f"Asset not found: {logical_path}")
            return None

        # Double check the requested fingerprint against the actual digest
        if not verify(asset.digest, attributes.fingerprint):
            logger.error(f"Nonexistent asset {logical_path} @ {attributes.fingerprint}")
            return None

        return asset

    def __getitem__(self, logical_path: str) -> Optional[Asset]:
        return self.find_asset(logical_path)
