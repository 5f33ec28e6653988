"""
observations/metrics.py

Watch. Measure. Then adjust.

A few numbers that say whether a flock is a flock:
how tight it is, how aligned, how crowded.
"""

from __future__ import annotations
import numpy as np


def centroid_spread(positions: np.ndarray) -> float:
    """Mean distance of each boid from the flock centroid."""
    positions = np.asarray(positions, dtype=np.float64)
    if len(positions) == 0:
        return 0.0
    centroid = positions.mean(axis=0)
    return float(np.linalg.norm(positions - centroid, axis=1).mean())


def polarization(orientations: np.ndarray) -> float:
    """
    How aligned the headings are.

    Mean resultant length of the heading unit vectors:
    1 = everyone flies the same way, ~0 = no agreement.
    """
    orientations = np.asarray(orientations, dtype=np.float64)
    if len(orientations) == 0:
        return 0.0
    # Heading at orientation 0 is +y; any fixed offset leaves the length unchanged
    headings = np.stack([-np.sin(orientations), np.cos(orientations)], axis=1)
    return float(np.linalg.norm(headings.mean(axis=0)))


def nearest_neighbor_distances(positions: np.ndarray) -> np.ndarray:
    """Distance from each boid to its closest other boid (inf if alone)."""
    positions = np.asarray(positions, dtype=np.float64)
    n = len(positions)
    if n == 0:
        return np.zeros(0)
    diffs = positions[:, None, :] - positions[None, :, :]
    distances = np.linalg.norm(diffs, axis=2)
    np.fill_diagonal(distances, np.inf)
    return distances.min(axis=1)
