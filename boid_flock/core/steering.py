"""
core/steering.py

Two opposing pulls, averaged into one turn.

Cohesion draws a boid toward the middle of its neighbors.
Separation pushes it away from the middle of the crush.
Each tick the turn rate is decided afresh from geometry alone:
no memory, no smoothing, no blending with last tick.

Inspired by:
- Reynolds boids
- Excitatory/inhibitory balance
"""

from __future__ import annotations
import logging
import math
from typing import Dict, List, Mapping, Sequence
import numpy as np

from .agent import Boid, PseudoBoid
from .errors import AgentNotFound
from .geometry import centroid, normalize_or_zero, signed_angle_to
from .sensing import SensingResult

logger = logging.getLogger(__name__)


def cohesion(position: np.ndarray, neighbor_positions: Sequence[np.ndarray]) -> np.ndarray:
    """Unit vector toward the neighbors' centroid, or zero."""
    if len(neighbor_positions) == 0:
        return np.zeros(3)
    return normalize_or_zero(centroid(neighbor_positions) - position)


def separation(position: np.ndarray, too_close_positions: Sequence[np.ndarray]) -> np.ndarray:
    """Unit vector away from the too-close centroid, or zero."""
    if len(too_close_positions) == 0:
        return np.zeros(3)
    return normalize_or_zero(position - centroid(too_close_positions))


class SteeringPlanner:
    """
    Turns sensing results into angular velocities.

    Planning is two-step: every new turn rate goes into a buffer first,
    and the buffer is applied only once every boid has been planned.
    """

    def plan(
        self,
        boids: Mapping[int, Boid],
        pseudo_boids: Mapping[int, PseudoBoid],
        sensing: SensingResult
    ) -> Dict[int, float]:
        """Compute this tick's angular velocity for every boid."""
        turns: Dict[int, float] = {}

        for boid_id, boid in boids.items():
            if boid_id not in sensing.neighbor_map or boid_id not in sensing.too_close_map:
                raise AgentNotFound(boid_id)

            neighbors = self._resolve(sensing.neighbor_map[boid_id], boids, pseudo_boids)
            too_close = self._resolve(sensing.too_close_map[boid_id], boids, pseudo_boids)

            turns[boid_id] = self.steer(boid, neighbors, too_close)

        return turns

    def steer(
        self,
        boid: Boid,
        neighbor_positions: Sequence[np.ndarray],
        too_close_positions: Sequence[np.ndarray]
    ) -> float:
        """
        Signed turn rate for one boid.

        Mean of the signed angle to the cohesion vector and the signed
        angle to the separation vector. NaN collapses to 0 (fly straight).
        """
        position = boid.state.position
        forward = boid.state.forward

        cohesion_angle = signed_angle_to(forward, cohesion(position, neighbor_positions))
        separation_angle = signed_angle_to(forward, separation(position, too_close_positions))
        radians_delta = (cohesion_angle + separation_angle) / 2.0

        if math.isnan(radians_delta):
            logger.debug(f"Boid {boid.id}: undefined turn, flying straight")
            return 0.0
        return radians_delta

    @staticmethod
    def apply(boids: Mapping[int, Boid], turns: Mapping[int, float]) -> None:
        """Overwrite each boid's angular speed with its planned turn."""
        for boid_id, turn in turns.items():
            if boid_id not in boids:
                raise AgentNotFound(boid_id)
            boids[boid_id].state.angular_speed = turn

    @staticmethod
    def _resolve(
        entity_ids: Sequence[int],
        boids: Mapping[int, Boid],
        pseudo_boids: Mapping[int, PseudoBoid]
    ) -> List[np.ndarray]:
        positions = []
        for entity_id in entity_ids:
            if entity_id in boids:
                positions.append(boids[entity_id].state.position)
            elif entity_id in pseudo_boids:
                positions.append(pseudo_boids[entity_id].position)
            else:
                raise AgentNotFound(entity_id)
        return positions
