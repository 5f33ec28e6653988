"""
core/agent.py

A boid is a pose, two speeds, and two radii.

It senses what is near, turns toward the crowd,
turns away from the crush, and keeps moving forward.

Inspired by:
- Reynolds boids (cohesion, separation)
- Starling flocking (local neighbor attention)
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
from typing import List, Optional
import numpy as np

from .errors import InvalidConfiguration
from .geometry import as_vec3, forward_direction

logger = logging.getLogger(__name__)


@dataclass
class BoidConfig:
    """
    The unchanging nature of a boid.
    Set at spawn, honored throughout the run.
    """
    neighbor_radius: float = 20.0         # Who counts toward cohesion
    personal_radius: float = 2.0          # Who counts as too close
    coverage_angle: float = 1.5 * math.pi  # Field of view, reserved; sensing ignores it

    def validate(self) -> None:
        """Reject impossible radii. Called once, at creation."""
        for name in ("neighbor_radius", "personal_radius", "coverage_angle"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidConfiguration(f"{name} must be finite, got {value}")
            if value < 0:
                raise InvalidConfiguration(f"{name} must be non-negative, got {value}")

        if self.personal_radius > self.neighbor_radius:
            logger.warning(
                f"personal_radius {self.personal_radius} exceeds "
                f"neighbor_radius {self.neighbor_radius}"
            )


@dataclass
class BoidState:
    """
    What a boid IS at this moment.

    Position and orientation are written by integration,
    angular speed by planning. Nothing else changes mid-run.
    """
    position: np.ndarray           # (x, y, 0)
    orientation: float = 0.0       # Radians about +z
    linear_speed: float = 0.0      # Units per second along forward
    angular_speed: float = 0.0     # Radians per second, sign is turn direction

    def __post_init__(self):
        self.position = as_vec3(self.position)
        self.orientation = float(self.orientation)
        self.linear_speed = float(self.linear_speed)
        self.angular_speed = float(self.angular_speed)

    @property
    def forward(self) -> np.ndarray:
        return forward_direction(self.orientation)


@dataclass(frozen=True)
class Pose:
    """Where a boid is and which way it faces, as handed to a renderer."""
    position: np.ndarray
    orientation: float


class Boid:
    """
    A single member of the flock.

    Holds its own state and config; never holds references to other boids.
    Sensing results refer to neighbors by id only.
    """

    def __init__(
        self,
        boid_id: int,
        position: Optional[np.ndarray] = None,
        orientation: float = 0.0,
        linear_speed: float = 0.0,
        angular_speed: float = 0.0,
        config: Optional[BoidConfig] = None
    ):
        self.id = boid_id
        self.config = config or BoidConfig()
        self.config.validate()

        init_pos = position if position is not None else np.zeros(2)
        self.state = BoidState(
            position=init_pos,
            orientation=orientation,
            linear_speed=linear_speed,
            angular_speed=angular_speed,
        )
        self._validate_state()

        # History for observation (optional, for studies)
        self.history: List[Pose] = []
        self.record_history = False

    def _validate_state(self) -> None:
        state = self.state
        if not np.all(np.isfinite(state.position)):
            raise InvalidConfiguration(f"boid {self.id}: position must be finite")
        if not math.isfinite(state.orientation):
            raise InvalidConfiguration(f"boid {self.id}: orientation must be finite")
        if not math.isfinite(state.angular_speed):
            raise InvalidConfiguration(f"boid {self.id}: angular_speed must be finite")
        if not math.isfinite(state.linear_speed) or state.linear_speed < 0:
            raise InvalidConfiguration(
                f"boid {self.id}: linear_speed must be non-negative, "
                f"got {state.linear_speed}"
            )

    def pose(self) -> Pose:
        """Copy of the current pose."""
        return Pose(
            position=self.state.position.copy(),
            orientation=self.state.orientation
        )

    def record(self) -> None:
        """Record current pose for later analysis."""
        if self.record_history:
            self.history.append(self.pose())

    def distance_to(self, other: Boid) -> float:
        """Euclidean distance to another boid."""
        return float(np.linalg.norm(self.state.position - other.state.position))

    def __repr__(self) -> str:
        return (
            f"Boid(id={self.id}, "
            f"pos=[{self.state.position[0]:.2f}, {self.state.position[1]:.2f}], "
            f"heading={self.state.orientation:.2f}, "
            f"turn={self.state.angular_speed:.2f})"
        )


class PseudoBoid:
    """
    Something that influences boids but is not itself a boid.

    Position only. Moved exclusively by an outside driver, such as a pointer.
    """

    def __init__(self, boid_id: int, position=None, pointer_driven: bool = False):
        self.id = boid_id
        self.pointer_driven = pointer_driven
        self.move_to(position if position is not None else np.zeros(2))

    def move_to(self, position) -> None:
        """Move to a new point. Non-finite points are rejected; the old one is kept."""
        new_position = as_vec3(position)
        if not np.all(np.isfinite(new_position)):
            raise InvalidConfiguration(
                f"pseudo-boid {self.id}: position must be finite, got {position}"
            )
        self.position = new_position

    def __repr__(self) -> str:
        return (
            f"PseudoBoid(id={self.id}, "
            f"pos=[{self.position[0]:.2f}, {self.position[1]:.2f}])"
        )
