# assettrail - Logical asset path resolution
#
# Resolves logical asset references ("application.js") to real files by
# searching an ordered list of directories. Fingerprinted references
# ("application-<digest>.js") are stripped for lookup and checked against
# the built asset's digest afterwards.
#
# Core concepts:
# - SearchPaths: Ordered, versioned registry of search directories
# - Resolver: Searches the registry through an injected PathFinder
# - Environment: Owns the registry, builds assets, computes the digest
# - Index: Immutable, memoizing snapshot of an Environment

from .asset import Asset, AssetBuilder, StaticAssetBuilder
from .config import EnvironmentConfig
from .digest import contribute, relativize_root
from .environment import Environment
from .errors import FileNotFound
from .finder import FilesystemPathFinder, PathFinder
from .fingerprint import LogicalPath, fingerprint_path, parse, verify
from .index import Index
from .paths import PathsSnapshot, SearchPaths
from .resolver import Resolver

__all__ = [
    # Registry
    "SearchPaths",
    "PathsSnapshot",
    # Resolution
    "Resolver",
    "PathFinder",
    "FilesystemPathFinder",
    "FileNotFound",
    # Fingerprints
    "LogicalPath",
    "parse",
    "verify",
    "fingerprint_path",
    # Digest
    "contribute",
    "relativize_root",
    # Environment
    "Environment",
    "EnvironmentConfig",
    "Index",
    "Asset",
    "AssetBuilder",
    "StaticAssetBuilder",
]

__version__ = "0.1.0"
