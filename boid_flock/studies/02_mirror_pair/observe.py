"""
Study 02: Mirror Pair Observation

Run: python -m boid_flock.studies.02_mirror_pair.observe

Two boids placed as mirror images across the y axis.
Their turn rates should be exact negatives of each other.
"""

import argparse
import numpy as np

from boid_flock.core.agent import BoidConfig
from boid_flock.environments.flock_field import FlockField, FieldConfig
from boid_flock.observations.metrics import centroid_spread


def run_study(
    steps: int = 300,
    separation: float = 6.0,
    speed: float = 10.0
):
    """Observe a symmetric pair."""
    print("=" * 50)
    print("Study 02: Mirror Pair")
    print("=" * 50)
    print("\nSymmetry in, symmetry out.")
    print("-" * 50)

    field = FlockField(FieldConfig())
    config = BoidConfig(neighbor_radius=20.0, personal_radius=2.0)
    left = field.add_boid(
        position=np.array([-separation / 2, 0.0]),
        linear_speed=speed,
        boid_config=config,
    )
    right = field.add_boid(
        position=np.array([separation / 2, 0.0]),
        linear_speed=speed,
        boid_config=config,
    )
    print(f"Created: {left}")
    print(f"Created: {right}")

    print(f"\nRunning {steps} steps...")

    worst_asymmetry = 0.0
    for step in range(steps):
        field.step()
        asymmetry = abs(left.state.angular_speed + right.state.angular_speed)
        worst_asymmetry = max(worst_asymmetry, asymmetry)

        if step % 100 == 0:
            print(f"  Step {step}: turns=[{left.state.angular_speed:.3f}, "
                  f"{right.state.angular_speed:.3f}], "
                  f"spread={centroid_spread(field.get_positions()):.2f}")

    # Analysis
    print("\n" + "=" * 50)
    print("Observations")
    print("=" * 50)
    print(f"\nLargest |turn_left + turn_right|: {worst_asymmetry:.2e}")
    print(f"Final spread: {centroid_spread(field.get_positions()):.2f}")

    print("\n" + "=" * 50)
    print("Study complete. Did the mirror hold?")
    print("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Mirror Pair Study")
    parser.add_argument("--steps", type=int, default=300)
    parser.add_argument("--separation", type=float, default=6.0)
    parser.add_argument("--speed", type=float, default=10.0)
    args = parser.parse_args()

    run_study(
        steps=args.steps,
        separation=args.separation,
        speed=args.speed
    )


if __name__ == "__main__":
    main()
