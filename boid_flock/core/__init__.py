"""
Core components of the boid flock.

- agent: Boid, PseudoBoid and their configuration
- sensing: who is near, who is too near
- steering: cohesion and separation into a turn rate
- kinematics: pose integration
- pipeline: the tick
"""

from .agent import Boid, BoidConfig, BoidState, Pose, PseudoBoid
from .errors import AgentNotFound, FlockError, InvalidConfiguration
from .kinematics import KinematicIntegrator
from .pipeline import advance
from .sensing import SensingResult, SensorConfig, SpatialSensor
from .steering import SteeringPlanner

__all__ = [
    "Boid", "BoidConfig", "BoidState", "Pose", "PseudoBoid",
    "AgentNotFound", "FlockError", "InvalidConfiguration",
    "KinematicIntegrator", "advance",
    "SensingResult", "SensorConfig", "SpatialSensor",
    "SteeringPlanner",
]
