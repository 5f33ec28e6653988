"""
environments/scenario.py

Build a FlockField from a YAML scenario file.

    field:
      delta_time: 0.0166
      include_self: true
      window_size: [500, 500]
    boids:
      - position: [0, 0]
        orientation: 0.0
        linear_speed: 100
        angular_speed: 1.57
        neighbor_radius: 20
        personal_radius: 2
    pseudo_boids:
      - position: [0, 0]
        pointer_driven: true

Anything left out falls back to the dataclass defaults.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from boid_flock.core.agent import BoidConfig
from boid_flock.core.errors import InvalidConfiguration
from boid_flock.environments.flock_field import FieldConfig, FlockField

logger = logging.getLogger(__name__)

DEFAULT_SCENARIO = Path(__file__).parent / "scenarios" / "default_flock.yaml"

_BOID_CONFIG_KEYS = ("neighbor_radius", "personal_radius", "coverage_angle")
_BOID_STATE_KEYS = ("position", "orientation", "linear_speed", "angular_speed")
_PSEUDO_BOID_KEYS = ("position", "pointer_driven")


def load_scenario(path: Optional[Union[str, Path]] = None) -> FlockField:
    """Load a scenario file and build the field it describes."""
    if path is None:
        path = DEFAULT_SCENARIO

    with open(path) as f:
        scenario = yaml.safe_load(f) or {}

    field = build_field(scenario)
    logger.info(f"Loaded scenario {path}: {field}")
    return field


def build_field(scenario: Dict[str, Any]) -> FlockField:
    """Build a field from an already-parsed scenario mapping."""
    if not isinstance(scenario, dict):
        raise InvalidConfiguration("scenario must be a mapping")

    field = FlockField(_field_config(scenario.get("field") or {}))

    for i, entry in enumerate(scenario.get("boids") or []):
        _check_entry("boid", i, entry, _BOID_CONFIG_KEYS + _BOID_STATE_KEYS)

        config = BoidConfig(**{k: float(entry[k]) for k in _BOID_CONFIG_KEYS if k in entry})
        field.add_boid(
            position=entry.get("position"),
            orientation=float(entry.get("orientation", 0.0)),
            linear_speed=float(entry.get("linear_speed", 0.0)),
            angular_speed=float(entry.get("angular_speed", 0.0)),
            boid_config=config,
        )

    for i, entry in enumerate(scenario.get("pseudo_boids") or []):
        _check_entry("pseudo_boid", i, entry, _PSEUDO_BOID_KEYS)
        field.add_pseudo_boid(
            position=entry.get("position"),
            pointer_driven=bool(entry.get("pointer_driven", False)),
        )

    return field


def _check_entry(kind: str, index: int, entry: Any, allowed: Tuple[str, ...]) -> None:
    if not isinstance(entry, dict):
        raise InvalidConfiguration(f"{kind} {index}: expected a mapping, got {entry!r}")
    unknown = set(entry) - set(allowed)
    if unknown:
        raise InvalidConfiguration(f"{kind} {index}: unknown keys {sorted(unknown)}")


def _field_config(section: Dict[str, Any]) -> FieldConfig:
    if not isinstance(section, dict):
        raise InvalidConfiguration("field section must be a mapping")

    defaults = FieldConfig()
    window = section.get("window_size", defaults.window_size)
    if not isinstance(window, (list, tuple)) or len(window) != 2:
        raise InvalidConfiguration(f"window_size must have two entries, got {window}")

    return FieldConfig(
        delta_time=float(section.get("delta_time", defaults.delta_time)),
        include_self=bool(section.get("include_self", defaults.include_self)),
        window_size=(float(window[0]), float(window[1])),
    )
