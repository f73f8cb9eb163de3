# assettrail/fingerprint.py
"""
Fingerprint parsing and verification.

A fingerprinted logical path embeds the content digest of the asset
between its name and its extensions:

    application-5f2c1e0a9b.js  ->  application.js @ 5f2c1e0a9b

Lookups strip the token before searching. Once the asset is built, the
token is checked against the real digest; a mismatch means "not found",
never an exception.
"""

import posixpath
import re
from dataclasses import dataclass, field
from typing import List, Optional

# Short tokens are allowed (7 chars, like abbreviated git hashes) up to a
# full sha3_256/sha256 hex digest.
FINGERPRINT_PATTERN = re.compile(r"^(?P<name>.+)-(?P<fingerprint>[0-9a-f]{7,64})$")

EXTENSION_PATTERN = re.compile(r"\.[^.]+")


def _split_basename(basename: str):
    """Split a basename into (stem, extensions) at the first dot."""
    if basename.startswith("."):
        # Dotfiles have no stem, the whole name is a single extension
        return basename, []
    stem, dot, rest = basename.partition(".")
    return stem, EXTENSION_PATTERN.findall(dot + rest)


@dataclass
class LogicalPath:
    """
    A logical path broken into the pieces a lookup needs.

    Attributes:
        logical_path: The path as requested (fingerprint included)
        path: The path with any fingerprint removed
        fingerprint: The embedded hex token, or None
        extensions: Dotted suffixes of the basename, in order
        search_paths: Candidate variants to look for, in order
    """
    logical_path: str
    path: str
    fingerprint: Optional[str] = None
    extensions: List[str] = field(default_factory=list)
    search_paths: List[str] = field(default_factory=list)


def parse(logical_path: str) -> LogicalPath:
    """
    Parse a logical path, extracting any fingerprint.

    Examples:
        parse("app-deadbeef.js")  # path "app.js", fingerprint "deadbeef"
        parse("app.js")           # path "app.js", no fingerprint
    """
    logical_path = str(logical_path)
    dirname, basename = posixpath.split(logical_path)
    stem, extensions = _split_basename(basename)

    fingerprint = None
    match = FINGERPRINT_PATTERN.match(stem)
    if match:
        fingerprint = match.group("fingerprint")
        stem = match.group("name")

    ext = "".join(extensions)
    path = posixpath.join(dirname, stem + ext) if dirname else stem + ext

    search_paths = [path]
    if stem and stem != "index":
        index_dir = posixpath.join(dirname, stem) if dirname else stem
        search_paths.append(posixpath.join(index_dir, f"index{ext}"))

    return LogicalPath(
        logical_path=logical_path,
        path=path,
        fingerprint=fingerprint,
        extensions=extensions,
        search_paths=search_paths,
    )


def verify(digest: str, fingerprint: Optional[str]) -> bool:
    """
    Check a requested fingerprint against the built asset's digest.

    Returns True when no fingerprint was requested.
    """
    if fingerprint is None:
        return True
    return fingerprint == digest


def fingerprint_path(logical_path: str, digest: str) -> str:
    """
    Insert a digest into a logical path.

        fingerprint_path("js/app.js", "deadbeef")  # "js/app-deadbeef.js"
    """
    dirname, basename = posixpath.split(str(logical_path))
    stem, extensions = _split_basename(basename)
    name = f"{stem}-{digest}{''.join(extensions)}"
    return posixpath.join(dirname, name) if dirname else name
