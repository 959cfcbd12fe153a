"""Extraction settings and their YAML loader.

A configuration file is a flat YAML mapping, for example::

    isovalue: 3.2
    input: Isosurface.vtk
    output: surface.stl
    format: stl
    solid_name: isosurf
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from isosurf.march import DEFAULT_ISOVALUE

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "Isosurface.vtk"
OUTPUT_FORMATS = ("stl", "stl-ascii", "vtk")


class ConfigError(ValueError):
    """Raised for malformed configuration files or values."""


@dataclass(frozen=True)
class ExtractionConfig:
    isovalue: float = DEFAULT_ISOVALUE
    input: str = DEFAULT_INPUT
    output: Optional[str] = None
    format: str = "stl"
    solid_name: str = "isosurf"

    def __post_init__(self) -> None:
        try:
            iso = float(self.isovalue)
        except (TypeError, ValueError):
            raise ConfigError(f"isovalue must be a number, got {self.isovalue!r}") from None
        if not math.isfinite(iso):
            raise ConfigError(f"isovalue must be finite, got {iso}")
        object.__setattr__(self, "isovalue", iso)
        if self.format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.format!r}"
            )

    def merged(self, **overrides: Any) -> "ExtractionConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def _normalise(data: Dict[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(ExtractionConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
    out = dict(data)
    for key in ("input", "output", "format", "solid_name"):
        if out.get(key) is not None:
            out[key] = str(out[key])
    return out


def load_config(path: Path | str) -> ExtractionConfig:
    """Load an ``ExtractionConfig`` from a YAML file."""

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(f"configuration not found: {cfg_path}")
    import yaml

    try:
        with cfg_path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"configuration must be a mapping, got {type(data)!r}")

    config = ExtractionConfig(**_normalise(data))
    logger.debug("loaded %s from %s", config, cfg_path)
    return config


__all__ = [
    'ConfigError',
    'DEFAULT_INPUT',
    'ExtractionConfig',
    'OUTPUT_FORMATS',
    'load_config',
]
