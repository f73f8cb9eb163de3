# assettrail/digest.py
"""
Search path contribution to the environment digest.

Paths are written relative to the root so that the same configuration
produces the same digest on every machine.
"""

import hashlib
from pathlib import Path
from typing import Any

ROOT_TOKEN = "$root"


def relativize_root(path: Path | str, root: Path | str) -> str:
    """
    Replace the root prefix of a path with $root.

        relativize_root("/app/assets/js", "/app")  # "$root/assets/js"
        relativize_root("/usr/share/js", "/app")   # "/usr/share/js"
    """
    path = Path(path)
    root = Path(root)
    if path == root:
        return ROOT_TOKEN
    try:
        relative = path.relative_to(root)
    except ValueError:
        return path.as_posix()
    return f"{ROOT_TOKEN}/{relative.as_posix()}"


def contribute(digest: Any, trail) -> Any:
    """
    Add a trail's search paths to a running digest.

    Args:
        digest: A hashlib object (anything with update(bytes))
        trail: Object exposing root and paths()

    Returns:
        The same digest object, updated
    """
    for path in trail.paths():
        # NUL cannot occur in a path, so distinct lists never collide
        digest.update(relativize_root(path, trail.root).encode() + b"\0")
    return digest


def new_digest(algorithm: str = "sha3_256"):
    """Create an empty hashlib digest."""
    return hashlib.new(algorithm)
