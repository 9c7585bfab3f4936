import pytest
import numpy as np
from launch_sim import forces
from launch_sim.config import create_test_config
from launch_sim.design import Design
from launch_sim.parts import create_part


def _snapshot(*parts):
    return Design(parts).snapshot()


def test_drag_coefficient_modifiers():
    config = create_test_config()
    assert forces.compute_drag_coefficient(_snapshot(), config) == pytest.approx(0.002)
    with_nose = _snapshot(create_part('nose'))
    assert forces.compute_drag_coefficient(with_nose, config) == pytest.approx(0.0014)
    finned = _snapshot(create_part('wing'), create_part('wing'), create_part('fueltank'))
    assert forces.compute_drag_coefficient(finned, config) == pytest.approx(0.002 * 1.3 * 1.1)


def test_drag_coefficient_scales_with_air_density():
    config = create_test_config(air_density=2.0)
    assert forces.compute_drag_coefficient(_snapshot(), config) == pytest.approx(0.004)


def test_drag_force_opposes_velocity():
    drag = forces.compute_drag_force(np.array([10.0, 0.0]), 0.0014)
    np.testing.assert_allclose(drag, [-0.14, 0.0])


def test_drag_force_zero_at_rest():
    np.testing.assert_array_equal(forces.compute_drag_force(np.zeros(2), 0.002), [0.0, 0.0])
    np.testing.assert_array_equal(
        forces.compute_drag_force(np.array([0.05, 0.0]), 0.002), [0.0, 0.0]
    )


def test_drag_quadratic_in_speed():
    slow = np.linalg.norm(forces.compute_drag_force(np.array([0.0, 5.0]), 0.002))
    fast = np.linalg.norm(forces.compute_drag_force(np.array([0.0, 10.0]), 0.002))
    assert fast == pytest.approx(4.0 * slow)


def test_stability_coefficient_basic_rocket(basic_rocket):
    # Nose at x=50, COM at x=-12.5: margin 62.5 -> factor 1.625
    k = forces.compute_stability_coefficient(basic_rocket.snapshot())
    assert k == pytest.approx(0.00002 * 1.5 * 1.625)


def test_stability_coefficient_wings():
    snapshot = _snapshot(create_part('wing'), create_part('wing'))
    assert forces.compute_stability_coefficient(snapshot) == pytest.approx(0.00002 * 2.6)


def test_aft_center_of_mass_is_more_stable():
    light_tail = _snapshot(create_part('nose', 0, -50), create_part('body', 0, 0))
    heavy_tail = _snapshot(create_part('nose', 0, -50), create_part('body', 0, 0),
                           create_part('weight', 0, 80))
    assert forces.compute_static_margin(heavy_tail) > forces.compute_static_margin(light_tail)
    assert (forces.compute_stability_coefficient(heavy_tail)
            > forces.compute_stability_coefficient(light_tail))


def test_stability_torque_restores_heading():
    k = 1e-3
    v = np.array([10.0, 0.0])
    assert forces.compute_stability_torque(v, 0.0, k) == pytest.approx(0.0)
    assert forces.compute_stability_torque(v, 0.1, k) == pytest.approx(-0.1 * 10 * k)
    assert forces.compute_stability_torque(v, -0.1, k) == pytest.approx(0.1 * 10 * k)


def test_stability_torque_wraps_angle():
    k = 1e-3
    v = np.array([-10.0, 1e-9])
    # Heading -pi + 0.1 vs velocity ~pi: the short way is -0.1
    torque = forces.compute_stability_torque(v, -np.pi + 0.1, k)
    assert torque == pytest.approx(-0.1 * 10 * k, rel=1e-6)


def test_stability_torque_zero_when_slow():
    assert forces.compute_stability_torque(np.array([0.5, 0.0]), 1.0, 1.0) == 0.0


def test_engine_torque_and_inertia(offset_rocket):
    snapshot = offset_rocket.snapshot()
    assert forces.compute_engine_torque(snapshot) == pytest.approx(-62.5e-5)
    assert forces.compute_body_inertia(snapshot) == pytest.approx(56.09375)
    scaled = create_test_config(torque_scale=2.0)
    assert forces.compute_engine_torque(snapshot, scaled) == pytest.approx(-125e-5)


def test_compute_forces_breakdown(basic_rocket):
    breakdown = forces.compute_forces(basic_rocket.snapshot(), np.array([10.0, 0.0]), 0.1)
    np.testing.assert_allclose(breakdown['drag'], [-0.14, 0.0])
    assert breakdown['drag_magnitude'] == pytest.approx(0.14)
    assert breakdown['stability_torque'] < 0
    assert breakdown['torque'] == pytest.approx(
        breakdown['stability_torque'] + breakdown['engine_torque'])
    assert breakdown['inertia'] == pytest.approx(55.15625)


def test_compute_forces_without_aerodynamics(offset_rocket):
    config = create_test_config(enable_aerodynamics=False)
    breakdown = forces.compute_forces(offset_rocket.snapshot(), np.array([10.0, 5.0]), 1.0, config)
    np.testing.assert_array_equal(breakdown['drag'], [0.0, 0.0])
    assert breakdown['stability_torque'] == 0.0
    assert breakdown['torque'] == pytest.approx(-62.5e-5)


def test_zero_breakdown():
    breakdown = forces.zero_breakdown(2.0)
    assert breakdown['torque'] == 0.0
    assert breakdown['inertia'] == 2.0
