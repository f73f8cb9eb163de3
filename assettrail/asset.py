# assettrail/asset.py
"""
Assets built from resolved paths.

The builder is the step after resolution: it turns a real file into an
Asset whose digest can be checked against a requested fingerprint.
StaticAssetBuilder hashes file content as-is; compiling builders are
outside this package.
"""

import hashlib
import logging
import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .fingerprint import fingerprint_path

logger = logging.getLogger(__name__)


def _file_hash(path: Path, algorithm: str = "sha3_256") -> str:
    """
    Compute content hash of a file.

    Returns the full hex digest.
    """
    hasher = hashlib.new(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


@dataclass
class Asset:
    """
    A built asset.

    Attributes:
        logical_path: Logical path the asset was requested as (no fingerprint)
        pathname: Real file it was built from
        digest: Hex digest of the content
        size_bytes: Content size
        mtime: Modification time of the source file
        content_type: MIME type guessed from the logical path
    """
    logical_path: str
    pathname: Path
    digest: str
    size_bytes: int = 0
    mtime: float = 0.0
    content_type: Optional[str] = None

    @property
    def digest_path(self) -> str:
        """Logical path with the digest embedded (app-<digest>.js)."""
        return fingerprint_path(self.logical_path, self.digest)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "logical_path": self.logical_path,
            "pathname": str(self.pathname),
            "digest": self.digest,
            "digest_path": self.digest_path,
            "size_bytes": self.size_bytes,
            "mtime": self.mtime,
            "content_type": self.content_type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Asset":
        return cls(
            logical_path=data["logical_path"],
            pathname=Path(data["pathname"]),
            digest=data["digest"],
            size_bytes=data.get("size_bytes", 0),
            mtime=data.get("mtime", 0.0),
            content_type=data.get("content_type"),
        )


class AssetBuilder(ABC):
    """
    Base class for asset builders.

    Subclasses implement build() to turn a resolved path into an Asset.
    """

    @abstractmethod
    def build(
        self,
        logical_path: str,
        pathname: Path,
        options: Optional[Dict[str, Any]] = None,
    ) -> Asset:
        """
        Build an asset.

        Args:
            logical_path: The requested logical path, fingerprint stripped
            pathname: Resolved file
            options: Builder options

        Returns:
            The built Asset
        """
        pass


class StaticAssetBuilder(AssetBuilder):
    """Builds assets from file content without transforming it."""

    def __init__(self, algorithm: str = "sha3_256"):
        self.algorithm = algorithm

    def build(
        self,
        logical_path: str,
        pathname: Path,
        options: Optional[Dict[str, Any]] = None,
    ) -> Asset:
        pathname = Path(pathname)
        stat = pathname.stat()
        content_type, _ = mimetypes.guess_type(logical_path)
        asset = Asset(
            logical_path=logical_path,
            pathname=pathname,
            digest=_file_hash(pathname, self.algorithm),
            size_bytes=stat.st_size,
            mtime=stat.st_mtime,
            content_type=content_type,
        )
        logger.debug(f"Built {logical_path} ({asset.size_bytes} bytes)")
        return asset
