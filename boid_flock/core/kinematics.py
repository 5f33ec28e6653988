"""
core/kinematics.py

Move forward, then turn. Explicit Euler, one step per tick.
"""

from __future__ import annotations
import logging
import math
from typing import Mapping

from .agent import Boid
from .errors import InvalidConfiguration
from .geometry import forward_direction, wrap_angle

logger = logging.getLogger(__name__)


def check_delta_time(delta_time: float) -> None:
    """Reject a negative or non-finite timestep."""
    if not math.isfinite(delta_time) or delta_time < 0:
        raise InvalidConfiguration(
            f"delta_time must be non-negative and finite, got {delta_time}"
        )


class KinematicIntegrator:
    """Advances every boid's pose by its own linear and angular speed."""

    def integrate(self, boids: Mapping[int, Boid], delta_time: float) -> None:
        """
        position += dt * linear_speed * forward(orientation)
        orientation += dt * angular_speed

        Runs after planning has finished for every boid, so all boids
        move on the same tick's decisions. Position uses the orientation
        held before this tick's turn.
        """
        check_delta_time(delta_time)

        for boid in boids.values():
            state = boid.state
            direction = forward_direction(state.orientation)
            state.position = state.position + delta_time * state.linear_speed * direction
            state.orientation = wrap_angle(
                state.orientation + state.angular_speed * delta_time
            )
            boid.record()

        logger.debug(f"Integrated {len(boids)} boids over dt={delta_time:.4f}")
