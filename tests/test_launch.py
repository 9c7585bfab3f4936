import pytest
import numpy as np
from launch_sim.config import create_test_config
from launch_sim.launch import LaunchPoint


def test_calculate_angle():
    pad = LaunchPoint(0.0, 0.0)
    assert pad.calculate_angle(10.0, 0.0) == pytest.approx(0.0)
    assert pad.calculate_angle(0.0, -10.0) == pytest.approx(-np.pi / 2)


def test_calculate_distance():
    assert LaunchPoint(1.0, 1.0).calculate_distance(4.0, 5.0) == pytest.approx(5.0)


@pytest.mark.parametrize("target, expected", [
    ((300.0, 400.0), 30.0),   # 50 clamped to max
    ((30.0, 40.0), 5.0),      # exactly 5
    ((10.0, 0.0), 5.0),       # 1 clamped to min
    ((120.0, 160.0), 20.0),
])
def test_calculate_speed(target, expected):
    pad = LaunchPoint(0.0, 0.0)
    assert pad.calculate_speed(*target, 5.0, 30.0, 10.0) == pytest.approx(expected)


def test_aim_returns_matching_velocity():
    pad = LaunchPoint(100.0, 500.0)
    angle, speed, velocity = pad.aim(220.0, 340.0, create_test_config())
    assert speed == pytest.approx(20.0)
    assert np.linalg.norm(velocity) == pytest.approx(speed)
    assert np.arctan2(velocity[1], velocity[0]) == pytest.approx(angle)


def test_from_config():
    config = create_test_config(launch_x=12.0, launch_y=34.0)
    pad = LaunchPoint.from_config(config)
    np.testing.assert_array_equal(pad.position, [12.0, 34.0])
