"""
environments/flock_field.py

An open 2D plane holding a flock and the things that tug at it.

Boids and pseudo-boids live in two arenas keyed by one shared id counter,
so a sensing result can name either without ambiguity.

Inspired by:
- Reynolds boids simulation
- Particle physics sandboxes
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import os
from typing import Dict, Optional, Tuple
import numpy as np

from boid_flock.core.agent import Boid, BoidConfig, Pose, PseudoBoid
from boid_flock.core.errors import AgentNotFound
from boid_flock.core.kinematics import KinematicIntegrator
from boid_flock.core.pipeline import advance
from boid_flock.core.sensing import SensorConfig, SpatialSensor
from boid_flock.core.steering import SteeringPlanner

logger = logging.getLogger(__name__)


@dataclass
class FieldConfig:
    """Configuration for the flock field."""
    delta_time: float = 1.0 / 60.0                  # Seconds per step()
    include_self: bool = True                       # Boid counts itself as a neighbor
    window_size: Tuple[float, float] = (500.0, 500.0)  # Pointer coordinate space

    @classmethod
    def from_env(cls) -> FieldConfig:
        """Create config from environment variables."""
        return cls(
            delta_time=float(os.environ.get("BOID_FLOCK_DELTA_TIME", str(1.0 / 60.0))),
            include_self=os.environ.get("BOID_FLOCK_INCLUDE_SELF", "true").lower()
            == "true",
            window_size=(
                float(os.environ.get("BOID_FLOCK_WINDOW_WIDTH", "500")),
                float(os.environ.get("BOID_FLOCK_WINDOW_HEIGHT", "500")),
            ),
        )


def pointer_to_world(
    screen_position: Tuple[float, float],
    window_size: Tuple[float, float]
) -> np.ndarray:
    """Map a window pixel position to simulation coordinates (origin at center)."""
    return np.asarray(screen_position, dtype=np.float64) - np.asarray(window_size) / 2.0


class FlockField:
    """
    2D environment for flock experiments.

    Features:
    - Boid and pseudo-boid arenas with stable integer ids
    - Pointer-driven pseudo-boids
    - Tick-based simulation (sense, plan, integrate)
    """

    def __init__(self, config: Optional[FieldConfig] = None):
        self.config = config or FieldConfig()
        self.boids: Dict[int, Boid] = {}
        self.pseudo_boids: Dict[int, PseudoBoid] = {}
        self.time = 0.0
        self.ticks = 0
        self._next_id = 0

        self.sensor = SpatialSensor(SensorConfig(include_self=self.config.include_self))
        self.planner = SteeringPlanner()
        self.integrator = KinematicIntegrator()

    def _allocate_id(self) -> int:
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    def add_boid(
        self,
        position: Optional[np.ndarray] = None,
        orientation: float = 0.0,
        linear_speed: float = 0.0,
        angular_speed: float = 0.0,
        boid_config: Optional[BoidConfig] = None
    ) -> Boid:
        """Add a boid to the field. Invalid configuration is rejected here."""
        # The id is only consumed once the boid passes validation
        boid = Boid(
            self._next_id,
            position=position,
            orientation=orientation,
            linear_speed=linear_speed,
            angular_speed=angular_speed,
            config=boid_config,
        )
        self._allocate_id()
        self.boids[boid.id] = boid
        return boid

    def remove_boid(self, boid_id: int) -> Optional[Boid]:
        """Remove a boid from the field."""
        return self.boids.pop(boid_id, None)

    def add_pseudo_boid(
        self,
        position: Optional[np.ndarray] = None,
        pointer_driven: bool = False
    ) -> PseudoBoid:
        """Add a position-only influence to the field."""
        pseudo = PseudoBoid(self._allocate_id(), position, pointer_driven)
        self.pseudo_boids[pseudo.id] = pseudo
        return pseudo

    def set_pseudo_boid_position(self, pseudo_id: int, position) -> None:
        """Move a pseudo-boid. Drivers call this before the next tick."""
        if pseudo_id not in self.pseudo_boids:
            raise AgentNotFound(pseudo_id)
        self.pseudo_boids[pseudo_id].move_to(position)

    # Renderer and input adapters address pseudo-boids as pseudo-agents
    set_pseudo_agent_position = set_pseudo_boid_position

    def follow_pointer(
        self,
        screen_position: Tuple[float, float],
        window_size: Optional[Tuple[float, float]] = None
    ) -> np.ndarray:
        """Move every pointer-driven pseudo-boid to the pointer's world position."""
        world_position = pointer_to_world(
            screen_position, window_size or self.config.window_size
        )
        for pseudo in self.pseudo_boids.values():
            if pseudo.pointer_driven:
                pseudo.move_to(world_position)
        return world_position

    def advance(self, delta_time: float) -> Dict[int, Pose]:
        """Advance simulation by `delta_time` seconds. Returns new poses."""
        poses = advance(
            self.boids,
            self.pseudo_boids,
            delta_time,
            sensor=self.sensor,
            planner=self.planner,
            integrator=self.integrator,
        )
        self.time += delta_time
        self.ticks += 1
        return poses

    def step(self) -> Dict[int, Pose]:
        """Advance by the configured fixed timestep."""
        return self.advance(self.config.delta_time)

    def get_poses(self) -> Dict[int, Pose]:
        """Get current pose of all boids."""
        return {bid: boid.pose() for bid, boid in self.boids.items()}

    def get_positions(self) -> np.ndarray:
        """Get (x, y) positions of all boids as an (n, 2) array."""
        if not self.boids:
            return np.zeros((0, 2))
        return np.array([b.state.position[:2] for b in self.boids.values()])

    def get_orientations(self) -> np.ndarray:
        """Get orientations of all boids."""
        return np.array([b.state.orientation for b in self.boids.values()])

    def get_angular_speeds(self) -> np.ndarray:
        """Get current turn rates of all boids."""
        return np.array([b.state.angular_speed for b in self.boids.values()])

    def __repr__(self) -> str:
        return (
            f"FlockField(boids={len(self.boids)}, "
            f"pseudo_boids={len(self.pseudo_boids)}, "
            f"ticks={self.ticks})"
        )


def spawn_default_flock(
    field: FlockField,
    n_boids: int = 5,
    n_pointer_boids: int = 5
) -> FlockField:
    """
    The classic start-up scene.

    Boids on a diagonal ten units apart, all flying at 100 units/s and
    turning at half pi rad/s, plus a stack of pointer-driven pseudo-boids
    at the origin.
    """
    for i in range(n_boids):
        field.add_boid(
            position=np.array([i * 10.0, i * 10.0]),
            linear_speed=100.0,
            angular_speed=0.5 * math.pi,
            boid_config=BoidConfig(
                neighbor_radius=20.0,
                personal_radius=2.0,
                coverage_angle=1.5 * math.pi,
            ),
        )

    for _ in range(n_pointer_boids):
        field.add_pseudo_boid(np.zeros(2), pointer_driven=True)

    logger.info(f"Spawned default flock: {field}")
    return field
