"""Tests for FlightBody: launch, per-tick forces, sync, reset and bounds."""

import unittest

import pytest
import numpy as np
from launch_sim.config import create_test_config
from launch_sim.design import Design
from launch_sim.flight import FlightBody, is_out_of_bounds
from launch_sim.parts import PartType, create_part


def test_launch_without_engines_is_exact():
    body = FlightBody(Design(), position=(0, 0))
    assert body.launch(0.0, 10.0)
    np.testing.assert_array_equal(body.velocity, [10.0, 0.0])
    assert body.angle == 0.0
    assert body.is_launched


def test_launch_adds_scaled_thrust():
    body = FlightBody(Design([create_part('engine')]), position=(0, 0))
    body.launch(0.0, 10.0)
    np.testing.assert_allclose(body.velocity, [15.0, 0.0], atol=1e-12)


def test_launch_faces_velocity():
    body = FlightBody(Design([create_part('engine')]), position=(0, 0))
    body.launch(np.pi / 2, 10.0)
    # (0, 10) + (5, 0)
    assert body.angle == pytest.approx(np.arctan2(10.0, 5.0))


def test_launch_is_idempotent():
    body = FlightBody(Design(), position=(0, 0))
    body.launch(0.0, 10.0)
    assert not body.launch(np.pi, 30.0)
    np.testing.assert_array_equal(body.velocity, [10.0, 0.0])


def test_default_position_is_launch_pad():
    config = create_test_config()
    body = FlightBody(Design(), config=config)
    np.testing.assert_array_equal(body.position, [config.launch_x, config.launch_y])


def test_step_before_launch_is_zero(basic_rocket):
    body = FlightBody(basic_rocket, position=(0, 0))
    breakdown = body.step()
    np.testing.assert_array_equal(breakdown['drag'], [0.0, 0.0])
    assert breakdown['torque'] == 0.0
    assert breakdown['inertia'] == pytest.approx(55.15625)
    np.testing.assert_array_equal(body.velocity, [0.0, 0.0])
    assert not body.is_launched


def test_step_after_launch(basic_rocket):
    body = FlightBody(basic_rocket, position=(0, 0))
    body.launch(0.0, 10.0)
    breakdown = body.step()
    # v = (15, 0), c = 0.0014
    np.testing.assert_allclose(breakdown['drag'], [-0.0014 * 225.0, 0.0], atol=1e-12)


def test_sync_updates_state_and_stats(basic_rocket):
    body = FlightBody(basic_rocket, position=(0, 100))
    body.launch(0.0, 10.0)
    body.sync((5.0, 40.0), (3.0, -4.0), -0.5, 0.02)
    np.testing.assert_array_equal(body.position, [5.0, 40.0])
    assert body.angular_velocity == 0.02
    stats = body.stats
    assert stats.max_altitude == pytest.approx(60.0)
    assert stats.max_speed == pytest.approx(15.0)
    assert stats.max_rotation == pytest.approx(0.5)


def test_sync_ignored_before_launch(basic_rocket):
    body = FlightBody(basic_rocket, position=(0, 0))
    body.sync((5.0, 5.0), (1.0, 1.0), 1.0, 1.0)
    np.testing.assert_array_equal(body.position, [0.0, 0.0])


def test_stats_are_read_only_copies(basic_rocket):
    body = FlightBody(basic_rocket, position=(0, 0))
    body.launch(0.0, 10.0)
    body.stats.max_speed = 1e9
    assert body.stats.max_speed == pytest.approx(15.0)


def test_reset(cockpit_rocket):
    body = FlightBody(cockpit_rocket, position=(10, 20))
    body.launch(0.3, 10.0)
    body.detach(['cockpit'])
    body.sync((500.0, 0.0), (1.0, 1.0), 2.0, 0.5)
    body.reset()
    np.testing.assert_array_equal(body.position, [10.0, 20.0])
    np.testing.assert_array_equal(body.velocity, [0.0, 0.0])
    assert body.angle == 0.0
    assert body.angular_velocity == 0.0
    assert not body.is_launched
    assert body.has_cockpit()
    assert body.stats.max_speed == 0.0
    assert body.launch(0.0, 5.0)


def test_detach_recomputes_snapshot(cockpit_rocket):
    body = FlightBody(cockpit_rocket)
    detached = body.detach(['cockpit', 'unknown'])
    assert [p.id for p in detached] == ['cockpit']
    assert body.mass == pytest.approx(3.5)
    assert not body.has_cockpit()
    assert body.detach(['cockpit']) == ()


def test_part_offset_rotates_with_body(cockpit_rocket):
    body = FlightBody(cockpit_rocket, position=(0, 0))
    cockpit = body.snapshot.first(PartType.COCKPIT)
    # COM at the origin, cockpit at sim (50, 0)
    np.testing.assert_allclose(body.part_offset(cockpit), [50.0, 0.0], atol=1e-12)
    body.launch(0.0, 1.0)
    body.sync((0.0, 0.0), (0.0, 1.0), np.pi / 2, 0.0)
    np.testing.assert_allclose(body.part_offset(cockpit), [0.0, 50.0], atol=1e-9)


class TestOutOfBounds(unittest.TestCase):
    """Boundary checks; the sky above is open."""

    def setUp(self):
        self.body = FlightBody(Design(), position=(0, 0))
        self.body.launch(0.0, 1.0)

    def _at(self, x, y):
        self.body.sync((x, y), (1.0, 0.0), 0.0, 0.0)
        return self.body.is_out_of_bounds(1000, 800, 100)

    def test_inside(self):
        self.assertFalse(self._at(500, 400))

    def test_right_edge(self):
        self.assertFalse(self._at(1100, 400))
        self.assertTrue(self._at(1100.1, 400))

    def test_bottom_edge(self):
        self.assertTrue(self._at(500, 901))

    def test_left_edge(self):
        self.assertTrue(self._at(-101, 400))

    def test_sky_is_open(self):
        self.assertFalse(self._at(500, -1e6))

    def test_config_defaults(self):
        config = create_test_config()
        self.assertTrue(is_out_of_bounds(
            (config.world_width + config.out_of_bounds_margin + 1, 0),
            config.world_width, config.world_height, config.out_of_bounds_margin))
        self.assertFalse(self.body.is_out_of_bounds())
