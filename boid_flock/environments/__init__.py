"""
Environments for flock experiments.

- flock_field: the open plane, its arenas and the tick driver
- scenario: YAML scenario loading
"""

from .flock_field import FieldConfig, FlockField, pointer_to_world, spawn_default_flock
from .scenario import build_field, load_scenario

__all__ = [
    "FieldConfig", "FlockField", "pointer_to_world", "spawn_default_flock",
    "build_field", "load_scenario",
]
