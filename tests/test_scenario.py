"""
Tests for environments/scenario.py

YAML scenarios in, populated fields out.
"""

import numpy as np
import pytest

from boid_flock.core.errors import InvalidConfiguration
from boid_flock.environments.scenario import DEFAULT_SCENARIO, build_field, load_scenario


SCENARIO = """
field:
  delta_time: 0.05
  include_self: false
  window_size: [800, 600]
boids:
  - position: [1, 2]
    orientation: 0.5
    linear_speed: 10
    neighbor_radius: 15
    personal_radius: 3
  - position: [-4, 0]
pseudo_boids:
  - position: [0, 0]
    pointer_driven: true
"""


class TestLoadScenario:

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "scene.yaml"
        path.write_text(SCENARIO)

        field = load_scenario(path)

        assert field.config.delta_time == 0.05
        assert field.config.include_self is False
        assert field.config.window_size == (800.0, 600.0)
        assert len(field.boids) == 2
        assert len(field.pseudo_boids) == 1

        first = field.boids[0]
        np.testing.assert_array_equal(first.state.position, [1.0, 2.0, 0.0])
        assert first.state.orientation == 0.5
        assert first.config.neighbor_radius == 15.0
        assert first.config.personal_radius == 3.0

        second = field.boids[1]
        assert second.config.neighbor_radius == 20.0
        assert second.state.linear_speed == 0.0

    def test_default_scenario_matches_default_flock(self):
        assert DEFAULT_SCENARIO.exists()
        field = load_scenario()
        assert len(field.boids) == 5
        assert len(field.pseudo_boids) == 5
        np.testing.assert_allclose(field.get_positions()[-1], [40.0, 40.0])

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        field = load_scenario(path)
        assert len(field.boids) == 0


class TestBuildField:

    def test_negative_radius_rejected(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"boids": [{"neighbor_radius": -1}]})

    def test_negative_speed_rejected(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"boids": [{"linear_speed": -5}]})

    def test_unknown_key_rejected(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"boids": [{"velocity": 3}]})

    def test_bad_window_rejected(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"field": {"window_size": [1, 2, 3]}})

    def test_boid_entry_not_a_mapping(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"boids": [5]})

    def test_pseudo_boid_entry_not_a_mapping(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"pseudo_boids": ["here"]})

    def test_window_not_a_sequence(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"field": {"window_size": 500}})

    def test_field_section_not_a_mapping(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"field": [1, 2]})

    def test_unknown_pseudo_boid_key_rejected(self):
        with pytest.raises(InvalidConfiguration):
            build_field({"pseudo_boids": [{"velocity": 1}]})

    def test_not_a_mapping(self):
        with pytest.raises(InvalidConfiguration):
            build_field(["boids"])
