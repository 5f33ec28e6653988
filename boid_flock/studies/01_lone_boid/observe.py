"""
Study 01: Lone Boid Observation

Run: python -m boid_flock.studies.01_lone_boid.observe

One boid, no neighbors, no pointer.
Nothing to steer toward, so it should fly straight.
"""

import argparse
import math
import numpy as np

from boid_flock.core.agent import BoidConfig
from boid_flock.environments.flock_field import FlockField, FieldConfig


def run_study(
    steps: int = 300,
    heading: float = 0.25 * math.pi,
    speed: float = 50.0,
    include_self: bool = True
):
    """
    Observe a single boid.

    Watch:
    - Angular speed (should be 0 after the first tick)
    - Heading (should never change after that)
    - Distance covered (speed * time)
    """
    print("=" * 50)
    print("Study 01: Lone Boid Observation")
    print("=" * 50)
    print("\nPrinciple: Understand one before many")
    print("-" * 50)

    field = FlockField(FieldConfig(include_self=include_self))
    boid = field.add_boid(
        position=np.array([0.0, 0.0]),
        orientation=heading,
        linear_speed=speed,
        angular_speed=1.0,
        boid_config=BoidConfig(neighbor_radius=20.0, personal_radius=2.0),
    )
    boid.record_history = True

    print(f"\nBoid created: {boid}")
    print(f"\nRunning {steps} steps...")

    max_turn = 0.0
    for step in range(steps):
        field.step()
        max_turn = max(max_turn, abs(boid.state.angular_speed))

        if step % 100 == 0:
            print(f"  Step {step}: {boid}")

    # Analysis
    print("\n" + "=" * 50)
    print("Observations")
    print("=" * 50)

    positions = np.array([pose.position[:2] for pose in boid.history])
    travelled = np.linalg.norm(np.diff(positions, axis=0), axis=1).sum()
    print(f"\nLargest turn rate seen: {max_turn:.4f} rad/s")
    print(f"Distance travelled: {travelled:.2f} (expected ~{speed * field.time:.2f})")
    print(f"Final heading: {boid.state.orientation:.4f} rad")

    print("\n" + "=" * 50)
    print("Study complete. Did it ever turn?")
    print("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Lone Boid Observation Study")
    parser.add_argument("--steps", type=int, default=300, help="Simulation steps")
    parser.add_argument("--speed", type=float, default=50.0, help="Linear speed")
    parser.add_argument("--exclude-self", action="store_true",
                        help="Leave a boid out of its own neighborhood")
    args = parser.parse_args()

    run_study(
        steps=args.steps,
        speed=args.speed,
        include_self=not args.exclude_self
    )


if __name__ == "__main__":
    main()
