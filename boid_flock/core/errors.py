"""
core/errors.py

Failures the flock can raise.

Degenerate geometry is not among them: an empty neighborhood or two
boids sharing a point simply means "no steering input".
"""

from __future__ import annotations


class FlockError(Exception):
    """Base class for every error raised by boid_flock."""


class AgentNotFound(FlockError, KeyError):
    """
    A sensing result or driver referenced an id that is not in either arena.

    This is a data-model inconsistency the caller must fix; the tick
    aborts instead of skipping the id.
    """

    def __init__(self, agent_id: int):
        self.agent_id = agent_id
        super().__init__(agent_id)

    def __str__(self) -> str:
        return f"no boid or pseudo-boid with id {self.agent_id!r}"


class InvalidConfiguration(FlockError, ValueError):
    """Rejected at creation time: negative radius, negative speed, bad dt."""
