"""
Study 03: Default Flock Observation

Run: python -m boid_flock.studies.03_default_flock.observe

Five boids and five pointer-driven pseudo-boids.
The pointer traces a slow circle around the window centre.
"""

import argparse
import logging
import math
import numpy as np

from boid_flock.environments.flock_field import FlockField, FieldConfig, spawn_default_flock
from boid_flock.environments.scenario import load_scenario
from boid_flock.observations.metrics import (
    centroid_spread,
    nearest_neighbor_distances,
    polarization,
)


def pointer_path(step: int, window_size, radius: float = 150.0, period: int = 600):
    """Pointer position in window pixels at a given step."""
    angle = 2 * math.pi * step / period
    cx, cy = window_size[0] / 2, window_size[1] / 2
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def run_study(
    steps: int = 600,
    scenario: str = None,
    follow_pointer: bool = True
):
    """Observe the default flock."""
    print("=" * 50)
    print("Study 03: Default Flock")
    print("=" * 50)
    print("\nMany boids, one pointer.")
    print("-" * 50)

    if scenario:
        field = load_scenario(scenario)
    else:
        field = spawn_default_flock(FlockField(FieldConfig()))

    print(f"\nField: {field}")
    print(f"\nRunning {steps} steps...")

    for step in range(steps):
        if follow_pointer:
            field.follow_pointer(pointer_path(step, field.config.window_size))
        field.step()

        if step % 100 == 0:
            positions = field.get_positions()
            centroid = positions.mean(axis=0)
            print(f"  Step {step}: centroid=[{centroid[0]:.1f}, {centroid[1]:.1f}], "
                  f"spread={centroid_spread(positions):.1f}, "
                  f"polarization={polarization(field.get_orientations()):.2f}")

    # Analysis
    print("\n" + "=" * 50)
    print("Observations")
    print("=" * 50)

    positions = field.get_positions()
    print(f"\nFinal spread: {centroid_spread(positions):.2f}")
    print(f"Polarization: {polarization(field.get_orientations()):.2f}")
    print(f"Closest approach: {np.min(nearest_neighbor_distances(positions)):.2f}")
    print(f"Turn rates: {np.round(field.get_angular_speeds(), 3)}")

    print("\n" + "=" * 50)
    print("Study complete. Did they flock?")
    print("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Default Flock Study")
    parser.add_argument("--steps", type=int, default=600)
    parser.add_argument("--scenario", type=str, default=None,
                        help="YAML scenario file (defaults to the built-in scene)")
    parser.add_argument("--static-pointer", action="store_true",
                        help="Leave the pseudo-boids where they start")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    run_study(
        steps=args.steps,
        scenario=args.scenario,
        follow_pointer=not args.static_pointer
    )


if __name__ == "__main__":
    main()
