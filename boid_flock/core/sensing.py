"""
core/sensing.py

Who is near? Who is too near?

Sensing is a pure read over one snapshot of positions.
Nothing moves until every boid has looked.

Scales as O(n^2) over boids plus O(n*p) over pseudo-boids, which is
fine for tens of boids. A uniform grid or k-d tree is the way past that.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Dict, Mapping, Tuple, Union
import numpy as np

from .agent import Boid, PseudoBoid

logger = logging.getLogger(__name__)


@dataclass
class SensorConfig:
    """Configuration for neighbor discovery."""
    # A boid sits at distance 0 from itself, which is inside any radius.
    # True keeps it in its own sets; False leaves it out.
    include_self: bool = True


@dataclass
class SensingResult:
    """
    One tick's worth of neighborhoods, keyed by boid id.

    Boid ids come first in arena order, then every pseudo-boid id.
    Discarded once planning has consumed it.
    """
    neighbor_map: Dict[int, Tuple[int, ...]] = field(default_factory=dict)
    too_close_map: Dict[int, Tuple[int, ...]] = field(default_factory=dict)

    def neighbors(self, boid_id: int) -> Tuple[int, ...]:
        return self.neighbor_map[boid_id]

    def too_close(self, boid_id: int) -> Tuple[int, ...]:
        return self.too_close_map[boid_id]


def is_within(
    distance: Union[float, np.ndarray],
    radius: Union[float, np.ndarray]
) -> Union[bool, np.ndarray]:
    """
    Radius test used everywhere in sensing. Inclusive.

    Works elementwise on arrays, returning a boolean mask.
    """
    return distance <= radius


class SpatialSensor:
    """
    Neighbor discovery over the whole flock.

    neighbors(A) = boids within A.neighbor_radius, plus all pseudo-boids
    too_close(A) = boids within A.personal_radius, plus all pseudo-boids

    Pseudo-boids are included whatever their distance.
    """

    def __init__(self, config: SensorConfig | None = None):
        self.config = config or SensorConfig()

    def sense(
        self,
        boids: Mapping[int, Boid],
        pseudo_boids: Mapping[int, PseudoBoid]
    ) -> SensingResult:
        """Build neighbor and too-close sets for every boid."""
        result = SensingResult()
        if not boids:
            return result

        ids = list(boids)
        pseudo_ids = tuple(pseudo_boids)

        # Single snapshot; later boids never see partially moved positions
        positions = np.array([boids[i].state.position for i in ids])
        distances = self.pairwise_distances(positions)

        neighbor_radii = np.array([boids[i].config.neighbor_radius for i in ids])
        personal_radii = np.array([boids[i].config.personal_radius for i in ids])

        neighbor_mask = is_within(distances, neighbor_radii[:, None])
        too_close_mask = is_within(distances, personal_radii[:, None])

        if not self.config.include_self:
            np.fill_diagonal(neighbor_mask, False)
            np.fill_diagonal(too_close_mask, False)

        for row, boid_id in enumerate(ids):
            result.neighbor_map[boid_id] = tuple(
                ids[j] for j in np.flatnonzero(neighbor_mask[row])
            ) + pseudo_ids
            result.too_close_map[boid_id] = tuple(
                ids[j] for j in np.flatnonzero(too_close_mask[row])
            ) + pseudo_ids

        logger.debug(
            f"Sensed {len(ids)} boids, {len(pseudo_ids)} pseudo-boids, "
            f"{int(neighbor_mask.sum())} neighbor pairs, "
            f"{int(too_close_mask.sum())} too-close pairs"
        )
        return result

    @staticmethod
    def pairwise_distances(positions: np.ndarray) -> np.ndarray:
        """Euclidean distance matrix for an (n, 3) position array."""
        diffs = positions[:, None, :] - positions[None, :, :]
        return np.linalg.norm(diffs, axis=2)
