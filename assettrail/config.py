# assettrail/config.py
"""
Environment configuration.

Configs are YAML files:

    root: .
    version: "2"
    digest_algorithm: sha3_256
    paths:
      - vendor/assets
      - app/assets/javascripts
    extensions: [.js, .css, .coffee]

Relative roots are taken relative to the config file's directory.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = [".js", ".css"]


@dataclass
class EnvironmentConfig:
    """Settings used to build an Environment."""
    root: str = "."
    paths: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    digest_algorithm: str = "sha3_256"
    version: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "EnvironmentConfig":
        data = data or {}
        extensions = data.get("extensions")
        if extensions is None:
            extensions = list(DEFAULT_EXTENSIONS)
        return cls(
            root=str(data.get("root", ".")),
            paths=[str(p) for p in data.get("paths") or []],
            extensions=[str(e) for e in extensions],
            digest_algorithm=data.get("digest_algorithm", "sha3_256"),
            version=str(data.get("version", "")),
        )

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "EnvironmentConfig":
        """Parse config from a YAML string."""
        data = yaml.safe_load(yaml_content)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Invalid config: expected a mapping, got {type(data).__name__}")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Path | str) -> "EnvironmentConfig":
        """Load config from a YAML file."""
        path = Path(path)
        with open(path, "r") as f:
            config = cls.from_yaml(f.read())
        root = Path(config.root).expanduser()
        if not root.is_absolute():
            config.root = str((path.parent / root).absolute())
        logger.debug(f"Loaded config from {path} (root {config.root})")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "paths": list(self.paths),
            "extensions": list(self.extensions),
            "digest_algorithm": self.digest_algorithm,
            "version": self.version,
        }
