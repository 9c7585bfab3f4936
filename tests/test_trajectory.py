import pytest
import numpy as np
from launch_sim.config import create_test_config
from launch_sim.trajectory import TrajectoryPredictor, predict_trajectory


def test_first_point_is_start():
    points = predict_trajectory((100.0, 500.0), (10.0, -10.0), 1000, 1000)
    assert points[0] == (100.0, 500.0)


def test_explicit_euler_steps():
    config = create_test_config(gravity=0.5, trajectory_step_size=0.5)
    points = predict_trajectory((0.0, 0.0), (10.0, 0.0), 1000, 1000, config)
    # y += vy * h before vy += g * h
    assert points[1] == pytest.approx((5.0, 0.0))
    assert points[2] == pytest.approx((10.0, 0.125))
    assert points[3] == pytest.approx((15.0, 0.375))


def test_stops_before_leaving_bounds():
    points = predict_trajectory((0.0, 500.0), (100.0, 0.0), 1000, 1000)
    assert len(points) == 21
    assert points[-1][0] == pytest.approx(1000.0)
    for x, y in points:
        assert 0 <= x <= 1000
        assert 0 <= y <= 1000


def test_at_most_max_steps():
    floating = create_test_config(gravity=0.0)
    points = predict_trajectory((500.0, 500.0), (0.01, 0.0), 1000, 1000, floating)
    assert len(points) == 200

    short = create_test_config(gravity=0.0, trajectory_max_steps=50)
    assert len(predict_trajectory((500.0, 500.0), (0.0, 0.0), 1000, 1000, short)) == 50


def test_gravity_bends_arc_down():
    points = predict_trajectory((100.0, 900.0), (10.0, -20.0), 5000, 1000)
    ys = np.array([y for _, y in points])
    apex = int(np.argmin(ys))
    assert 0 < apex < len(ys) - 1


def test_predictor_is_restartable():
    predictor = TrajectoryPredictor((100.0, 500.0), (12.0, -8.0), 2000, 1000)
    first = list(predictor.iter_points())
    second = list(predictor)
    assert first == second
    assert predictor.points() == predict_trajectory((100.0, 500.0), (12.0, -8.0), 2000, 1000)


def test_lazy_iteration():
    predictor = TrajectoryPredictor((0.0, 0.0), (1.0, 1.0), 1e6, 1e6)
    iterator = predictor.iter_points()
    assert next(iterator) == (0.0, 0.0)
    assert next(iterator) == pytest.approx((0.5, 0.5))


def test_start_array_not_aliased():
    start = np.array([10.0, 10.0])
    predictor = TrajectoryPredictor(start, (1.0, 0.0), 100, 100)
    start[0] = 99.0
    assert predictor.points()[0] == (10.0, 10.0)
