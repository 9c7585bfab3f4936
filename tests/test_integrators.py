import pytest
import numpy as np
from launch_sim import integrators, state
from launch_sim.forces import zero_breakdown


@pytest.fixture
def moving_state():
    return state.FlightState(
        position=np.array([0.0, 0.0]),
        velocity=np.array([10.0, 0.0]),
        launched=True,
    )


def _breakdown(drag=(0.0, 0.0), torque=0.0, inertia=1.0):
    breakdown = zero_breakdown(inertia)
    breakdown['drag'] = np.array(drag, dtype=float)
    breakdown['torque'] = torque
    return breakdown


def test_euler_step_returns_state(moving_state):
    s2 = integrators.euler_step(moving_state, _breakdown(), mass=1.0, dt=1.0)
    assert isinstance(s2, state.FlightState)
    assert s2.position.shape == (2,)
    assert s2.launched is True
    assert s2 is not moving_state


def test_gravity_only_step(moving_state):
    s2 = integrators.euler_step(moving_state, None, dt=1.0, gravity=0.5)
    # Semi-implicit: velocity first, then position
    np.testing.assert_allclose(s2.velocity, [10.0, 0.5])
    np.testing.assert_allclose(s2.position, [10.0, 0.5])


def test_drag_divides_by_mass(moving_state):
    s2 = integrators.euler_step(moving_state, _breakdown(drag=(-2.0, 0.0)), mass=4.0)
    np.testing.assert_allclose(s2.velocity, [9.5, 0.0])


def test_massless_body_ignores_drag(moving_state):
    s2 = integrators.euler_step(moving_state, _breakdown(drag=(-2.0, 0.0)), mass=0.0)
    np.testing.assert_allclose(s2.velocity, [10.0, 0.0])


def test_torque_spins_body(moving_state):
    s2 = integrators.euler_step(moving_state, _breakdown(torque=0.2, inertia=2.0), mass=1.0)
    assert s2.angular_velocity == pytest.approx(0.1)
    assert s2.angle == pytest.approx(0.1)


def test_air_friction_damps(moving_state):
    moving_state.angular_velocity = 1.0
    s2 = integrators.euler_step(moving_state, None, dt=1.0, air_friction=0.01)
    np.testing.assert_allclose(s2.velocity, [9.9, 0.0])
    assert s2.angular_velocity == pytest.approx(0.99)


def test_euler_step_invalid_dt(moving_state):
    with pytest.raises(ValueError):
        integrators.euler_step(moving_state, None, dt=0.0)


def test_euler_step_invalid_drag_shape(moving_state):
    breakdown = _breakdown()
    breakdown['drag'] = np.zeros(3)
    with pytest.raises(ValueError):
        integrators.euler_step(moving_state, breakdown, mass=1.0)


def test_euler_step_nan_forces(moving_state):
    with pytest.raises(ValueError):
        integrators.euler_step(moving_state, _breakdown(drag=(np.nan, 0.0)), mass=1.0)
    with pytest.raises(ValueError):
        integrators.euler_step(moving_state, _breakdown(torque=np.inf), mass=1.0)


def test_euler_step_zero_inertia(moving_state):
    with pytest.raises(ValueError):
        integrators.euler_step(moving_state, _breakdown(inertia=0.0), mass=1.0)
