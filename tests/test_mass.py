import pytest
import numpy as np
from launch_sim import mass, constants as C
from launch_sim.frames import cross2d
from launch_sim.parts import create_part


def _basic_parts(engine_x=0.0):
    return [
        create_part('nose', 0, -50),
        create_part('body', 0, 0),
        create_part('engine', engine_x, 50),
    ]


def test_center_of_mass_symmetric_rocket():
    com = mass.compute_center_of_mass(_basic_parts())
    np.testing.assert_allclose(com, [-12.5, 0.0], atol=1e-12)


def test_moment_of_inertia_symmetric_rocket():
    # Rectangles 1140.625 + parallel axis 4375
    inertia = mass.compute_moment_of_inertia(_basic_parts())
    assert inertia == pytest.approx(5515.625)


def test_torque_symmetric_rocket_is_zero():
    assert mass.compute_torque(_basic_parts()) == pytest.approx(0.0, abs=1e-9)


def test_offset_engine_fixture():
    parts = _basic_parts(engine_x=10.0)
    com = mass.compute_center_of_mass(parts)
    np.testing.assert_allclose(com, [-12.5, 3.75])
    assert mass.compute_torque(parts) == pytest.approx(-62.5)
    assert mass.compute_moment_of_inertia(parts) == pytest.approx(5609.375)


def test_thrust_vector_points_along_sim_x():
    thrust = mass.compute_thrust_vector(_basic_parts())
    np.testing.assert_allclose(thrust, [10.0, 0.0], atol=1e-12)
    assert mass.compute_total_thrust(_basic_parts()) == 10.0


def test_total_mass_and_average_drag():
    parts = _basic_parts()
    assert mass.compute_total_mass(parts) == pytest.approx(4.0)
    assert mass.compute_average_drag(parts) == pytest.approx((0.005 + 0.01 + 0.01) / 3)


def test_bounding_size_uses_sim_frame():
    # Single body: 40 wide x 50 tall in the design becomes 50 x 40
    width, height = mass.compute_bounding_size([create_part('body', 0, 0)])
    assert (width, height) == (50.0, 40.0)


def test_flight_parameters():
    params = mass.compute_flight_parameters(4.0, 0.02, 10.0)
    assert params['air_friction'] == 0.02
    assert params['density'] == pytest.approx(0.004)
    assert params['max_speed'] == pytest.approx(120.0)


def test_max_speed_has_no_ceiling():
    params = mass.compute_flight_parameters(1.0, 0.01, 1000.0)
    assert params['max_speed'] == pytest.approx(C.MAX_SPEED_BASE + 1000.0 * C.MAX_SPEED_PER_THRUST)


def test_empty_part_set_defaults():
    props = mass.compute_mass_properties([])
    assert props.total_mass == 0.0
    np.testing.assert_array_equal(props.center_of_mass, [0.0, 0.0])
    assert props.moment_of_inertia == 1.0
    assert props.torque == 0.0
    assert props.air_friction == pytest.approx(0.01)
    assert props.density == pytest.approx(0.001)
    assert props.max_speed == pytest.approx(30.0)
    assert (props.width, props.height) == (40.0, 80.0)


def test_massless_parts_keep_positive_inertia():
    parts = [create_part('body', 0, 0, mass=0.0)]
    assert mass.compute_moment_of_inertia(parts) > 0


def test_com_inside_hull_for_scattered_parts():
    parts = [
        create_part('weight', 100, 0),
        create_part('body', -40, 30),
        create_part('wing', 0, -70),
    ]
    com = mass.compute_center_of_mass(parts)
    corners = [p.sim_position for p in parts]
    signs = [
        np.sign(cross2d(b - a, com - a))
        for a, b in zip(corners, corners[1:] + corners[:1])
    ]
    # Same side of every edge of the triangle
    assert 0 not in signs
    assert len(set(signs)) == 1
    assert mass.compute_moment_of_inertia(parts) > 0


def test_thrust_angle_property():
    props = mass.compute_mass_properties(_basic_parts())
    assert props.thrust_angle == pytest.approx(0.0, abs=1e-12)
    assert mass.MassProperties().thrust_angle == 0.0
