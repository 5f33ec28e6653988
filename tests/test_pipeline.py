"""
Tests for core/pipeline.py

The whole tick, end to end.
"""

import math

import numpy as np
import pytest

from boid_flock.core.agent import Boid, BoidConfig, PseudoBoid
from boid_flock.core.errors import InvalidConfiguration
from boid_flock.core.geometry import forward_direction, normalize_or_zero
from boid_flock.core.pipeline import advance
from boid_flock.core.sensing import SensorConfig, SpatialSensor
from boid_flock.core.steering import SteeringPlanner


class TestAdvance:

    def test_returns_pose_per_boid(self):
        boids = {0: Boid(0), 5: Boid(5, position=[3.0, 0.0])}
        poses = advance(boids, {}, 0.1)
        assert set(poses) == {0, 5}

    def test_empty_world(self):
        assert advance({}, {}, 0.1) == {}

    def test_lone_boid_flies_straight(self):
        boid = Boid(0, orientation=0.25, linear_speed=10.0, angular_speed=3.0)
        boids = {0: boid}
        start = boid.state.position.copy()

        for _ in range(20):
            advance(boids, {}, 0.05)
            assert boid.state.angular_speed == 0.0

        # The first tick overwrites the initial turn before integrating
        assert boid.state.orientation == pytest.approx(0.25)
        expected = start + 20 * 0.05 * 10.0 * forward_direction(0.25)
        np.testing.assert_allclose(boid.state.position, expected)

    def test_coincident_boids_never_nan(self):
        boids = {
            0: Boid(0, position=[2.0, 2.0], linear_speed=0.0),
            1: Boid(1, position=[2.0, 2.0], linear_speed=0.0),
        }
        advance(boids, {}, 0.1)
        for boid in boids.values():
            assert np.all(np.isfinite(boid.state.position))
            assert math.isfinite(boid.state.orientation)

    def test_mirror_pair_stays_mirrored(self):
        boids = {
            0: Boid(0, position=[-3.0, 0.0], linear_speed=5.0),
            1: Boid(1, position=[3.0, 0.0], linear_speed=5.0),
        }
        for _ in range(10):
            advance(boids, {}, 0.05)
            left, right = boids[0].state, boids[1].state
            assert left.angular_speed == pytest.approx(-right.angular_speed, abs=1e-9)
            assert left.position[0] == pytest.approx(-right.position[0], abs=1e-9)
            assert left.position[1] == pytest.approx(right.position[1], abs=1e-9)

    def test_decisions_use_tick_start_snapshot(self):
        """Turns are identical to planning against the untouched flock."""
        def make():
            return {
                0: Boid(0, position=[0.0, 0.0], linear_speed=50.0),
                1: Boid(1, position=[4.0, 3.0], orientation=1.0, linear_speed=50.0),
                2: Boid(2, position=[-6.0, 2.0], orientation=-2.0, linear_speed=50.0),
            }

        reference = make()
        sensing = SpatialSensor().sense(reference, {})
        expected = SteeringPlanner().plan(reference, {}, sensing)

        boids = make()
        advance(boids, {}, 0.1)
        for boid_id, turn in expected.items():
            assert boids[boid_id].state.angular_speed == pytest.approx(turn)

    def test_three_boids_turn_toward_each_other(self):
        """
        (0,0), (5,5), (-5,5): radius 20, personal radius 2, no linear speed.
        After one tick each forward points closer to the other two.
        """
        config = BoidConfig(neighbor_radius=20.0, personal_radius=2.0)
        boids = {
            0: Boid(0, position=[0.0, 0.0], orientation=math.pi / 2, config=config),
            1: Boid(1, position=[5.0, 5.0], config=config),
            2: Boid(2, position=[-5.0, 5.0], config=config),
        }

        def misalignment(boid_id):
            boid = boids[boid_id]
            others = [b.state.position for i, b in boids.items() if i != boid_id]
            target = normalize_or_zero(np.mean(others, axis=0) - boid.state.position)
            return math.acos(np.clip(np.dot(boid.state.forward, target), -1.0, 1.0))

        before = {i: misalignment(i) for i in boids}
        advance(boids, {}, 1.0)

        assert boids[0].state.angular_speed < 0.0
        assert boids[1].state.angular_speed > 0.0
        assert boids[2].state.angular_speed < 0.0
        for boid_id in boids:
            assert misalignment(boid_id) < before[boid_id]

    @pytest.mark.parametrize("dt", [-1.0, float("nan")])
    def test_bad_dt_rejected_before_planning(self, dt):
        """A rejected tick leaves turn rates and poses as they were."""
        boids = {
            0: Boid(0, position=[0.0, 0.0], angular_speed=3.0, linear_speed=1.0),
            1: Boid(1, position=[5.0, 0.0], angular_speed=-2.0),
        }
        with pytest.raises(InvalidConfiguration):
            advance(boids, {}, dt)

        assert boids[0].state.angular_speed == 3.0
        assert boids[1].state.angular_speed == -2.0
        np.testing.assert_array_equal(boids[0].state.position, [0.0, 0.0, 0.0])

    def test_pseudo_boids_do_not_move(self):
        pseudo = {9: PseudoBoid(9, [1.0, 1.0])}
        advance({0: Boid(0, linear_speed=3.0)}, pseudo, 0.5)
        np.testing.assert_array_equal(pseudo[9].position, [1.0, 1.0, 0.0])

    def test_self_inclusion_does_not_change_turns(self):
        """Adding a boid's own position shrinks its offset but keeps the direction."""
        def make():
            return {
                0: Boid(0, position=[0.0, 0.0], orientation=0.4),
                1: Boid(1, position=[1.0, 1.0], orientation=-1.0),
                2: Boid(2, position=[-3.0, 8.0], orientation=2.5),
            }

        with_self = make()
        without_self = make()
        advance(with_self, {}, 0.1, sensor=SpatialSensor(SensorConfig(include_self=True)))
        advance(without_self, {}, 0.1, sensor=SpatialSensor(SensorConfig(include_self=False)))

        for boid_id in with_self:
            assert with_self[boid_id].state.angular_speed == pytest.approx(
                without_self[boid_id].state.angular_speed
            )
