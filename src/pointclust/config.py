"""
Configuration for clustering runs.
"""

import math
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import yaml

__all__ = [
    "ClusteringConfig",
    "DEFAULT_THRESHOLD",
    "OUTPUT_FORMATS",
    "load_config",
    "apply_env_overrides",
]

DEFAULT_THRESHOLD = 3.0
OUTPUT_FORMATS = ("text", "json")


@dataclass
class ClusteringConfig:
    """Configuration for a clustering run."""

    # Classifier
    threshold: float = DEFAULT_THRESHOLD
    merge: bool = False  # Run the merge pass after classification

    # Output
    output_format: str = "text"
    log_dir: Optional[str] = None  # JSONL run log disabled when None
    verbose: bool = True

    def validate(self) -> None:
        """Raise ValueError on settings the classifier cannot use."""
        if math.isnan(self.threshold) or self.threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {self.threshold}")
        for name in ("merge", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}"
            )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ClusteringConfig":
        """Create from dict, filtering out unknown keys."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        if "threshold" in filtered:
            try:
                filtered["threshold"] = float(filtered["threshold"])
            except (TypeError, ValueError):
                raise ValueError(
                    f"threshold must be a number, got {filtered['threshold']!r}"
                ) from None
        return cls(**filtered)


def load_config(path: Path) -> ClusteringConfig:
    """
    Load config from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or does not hold a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    return ClusteringConfig.from_dict(data)


def apply_env_overrides(config: ClusteringConfig) -> ClusteringConfig:
    """Apply POINTCLUST_* environment variables on top of a config."""
    threshold = os.environ.get("POINTCLUST_THRESHOLD")
    if threshold:
        config.threshold = float(threshold)

    log_dir = os.environ.get("POINTCLUST_LOG_DIR")
    if log_dir:
        config.log_dir = log_dir

    return config
