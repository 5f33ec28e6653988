"""
core/pipeline.py

One tick: sense, plan, integrate. In that order, every time.

No phase starts before the previous one has seen every boid.
Sensing and planning read a stable snapshot; only integration writes poses.
"""

from __future__ import annotations
import logging
from typing import Dict, Mapping, Optional

from .agent import Boid, PseudoBoid, Pose
from .kinematics import KinematicIntegrator, check_delta_time
from .sensing import SpatialSensor
from .steering import SteeringPlanner

logger = logging.getLogger(__name__)


def advance(
    boids: Mapping[int, Boid],
    pseudo_boids: Mapping[int, PseudoBoid],
    delta_time: float,
    sensor: Optional[SpatialSensor] = None,
    planner: Optional[SteeringPlanner] = None,
    integrator: Optional[KinematicIntegrator] = None
) -> Dict[int, Pose]:
    """
    Advance the flock by one tick and return every boid's new pose.

    integrate(apply(plan(sense(world))))

    A bad delta_time is rejected before any phase runs.
    """
    check_delta_time(delta_time)

    sensor = sensor or SpatialSensor()
    planner = planner or SteeringPlanner()
    integrator = integrator or KinematicIntegrator()

    # Phase 1: Sense (read-only)
    sensing = sensor.sense(boids, pseudo_boids)

    # Phase 2: Plan into a buffer, then apply
    turns = planner.plan(boids, pseudo_boids, sensing)
    planner.apply(boids, turns)

    # Phase 3: Integrate (the only phase that moves anything)
    integrator.integrate(boids, delta_time)

    logger.debug(f"Tick done: {len(boids)} boids, dt={delta_time:.4f}")
    return {boid_id: boid.pose() for boid_id, boid in boids.items()}
