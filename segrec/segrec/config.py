"""
Recording configuration.

Loaded from the `record` section of a YAML file:

    record:
      path: captures/record.ts
      overwrite: false
      segmented: true
      max_attempts: 1000

and optionally overridden from the command line. Only a missing path
disables recording.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from segrec.errors import ConfigError


@dataclass
class RecordConfig:
    """Configuration for a recording sink."""
    path: Optional[str] = None  # Output path template; None disables recording
    overwrite: bool = False  # Truncate existing files instead of skipping names
    segmented: bool = True  # Rotating segments vs one continuous file
    max_attempts: Optional[int] = None  # Collision retry cap; None is unbounded

    @property
    def enabled(self) -> bool:
        """Check if recording is enabled"""
        return self.path is not None

    def merged(self, **overrides: Any) -> "RecordConfig":
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<dict>") -> "RecordConfig":
        """Build a config from a mapping, checking value types."""
        if not isinstance(data, dict):
            raise ConfigError(source, "'record' section must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(source, f"unknown keys in 'record': {', '.join(unknown)}")

        path = data.get("path")
        if path is not None and not isinstance(path, str):
            raise ConfigError(source, f"'path' must be a string, got {type(path).__name__}")

        for key in ("overwrite", "segmented"):
            if key in data and not isinstance(data[key], bool):
                raise ConfigError(source, f"'{key}' must be true or false")

        max_attempts = data.get("max_attempts")
        if max_attempts is not None:
            if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
                raise ConfigError(source, "'max_attempts' must be a positive integer")

        return cls(
            path=path,
            overwrite=data.get("overwrite", False),
            segmented=data.get("segmented", True),
            max_attempts=max_attempts,
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "RecordConfig":
        """Load configuration from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(str(path), f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")

        return cls.from_dict(data.get("record") or {}, source=str(path))


def load_config(config_path: Optional[Union[str, Path]] = None) -> RecordConfig:
    """
    Load recording configuration.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        RecordConfig instance; defaults (recording disabled) without a file
    """
    if config_path is None:
        return RecordConfig()
    return RecordConfig.from_yaml(config_path)
