# assettrail/index.py
"""
Immutable environment snapshot.

An Index freezes the environment's search paths at the version it was
built from and memoizes lookups against them. It never sees later
mutations; is_stale() reports when the environment has moved on.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .asset import Asset
from .base import Base
from .resolver import Resolver

logger = logging.getLogger(__name__)


class Index(Base):
    """
    Cached, read-only view of an Environment.

    Usage:
        index = environment.index
        index.find_asset("application.js")  # built once
        index.find_asset("application.js")  # served from memo
    """

    def __init__(self, environment):
        self._environment = environment
        self._trail = environment.trail.snapshot()
        self.finder = environment.finder
        self.builder = environment.builder
        self.digest = environment.digest
        self._environment_version = environment.version
        self._resolver = Resolver(self._trail, self.finder)
        self._resolved: Dict[str, Path] = {}
        self._assets: Dict[str, Optional[Asset]] = {}

    @property
    def version(self) -> int:
        """Registry version this index was built from."""
        return self._trail.version

    def is_stale(self) -> bool:
        """True once the environment's paths or version have changed."""
        if self._environment_version != self._environment.version:
            return True
        return self._trail.is_stale(self._environment.trail)

    def resolve(self, logical_path: str, options: Optional[Dict[str, Any]] = None) -> Path:
        if options:
            return super().resolve(logical_path, options)
        if logical_path not in self._resolved:
            self._resolved[logical_path] = super().resolve(logical_path)
        return self._resolved[logical_path]

    def find_asset(self, logical_path: str, options: Optional[Dict[str, Any]] = None) -> Optional[Asset]:
        logical_path = str(logical_path)
        if options:
            return super().find_asset(logical_path, options)
        if logical_path in self._assets:
            logger.debug(f"Index hit: {logical_path}")
            return self._assets[logical_path]
        asset = super().find_asset(logical_path)
        self._assets[logical_path] = asset
        return asset
