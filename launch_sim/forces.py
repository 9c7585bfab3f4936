"""
Rocket Launch Game - Force Computations

This module implements the per-tick force model handed to the host physics
engine:
- Quadratic air drag
- Aerodynamic (weathervane) stability torque
- Engine torque from off-axis thrust

All quantities are in the simulation frame and in per-frame units.
"""

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .design import DesignSnapshot
from .frames import wrap_angle
from .parts import PartType
from .types import ForceBreakdown


# =============================================================================
# DRAG
# =============================================================================

def compute_drag_coefficient(snapshot: DesignSnapshot,
                             config: SimulationConfig = None) -> float:
    """
    Effective drag coefficient c of a design.

    c = base * air_density, x nose factor if a nose is fitted,
    x (1 + 0.15 * wings) x (1 + 0.1 * fuel tanks).

    Args:
        snapshot: Frozen design
        config: Simulation config (defaults if None)

    Returns:
        Drag coefficient (>= 0)
    """
    config = config or create_default_config()
    c = config.base_drag_coefficient * config.air_density

    if snapshot.has_type(PartType.NOSE):
        c *= config.nose_drag_factor
    c *= 1.0 + config.wing_drag_increment * snapshot.count(PartType.WING)
    c *= 1.0 + config.fuel_tank_drag_increment * snapshot.count(PartType.FUEL_TANK)
    return c


def compute_drag_force(v: np.ndarray, coefficient: float,
                       config: SimulationConfig = None) -> np.ndarray:
    """
    Quadratic drag opposite the velocity.

    F_drag = -c * |v|^2 * v_hat

    Returns zero below the drag speed threshold.
    """
    config = config or create_default_config()
    v = np.asarray(v, dtype=np.float64)
    speed = float(np.linalg.norm(v))
    if speed < config.drag_speed_threshold:
        return np.zeros(2)
    return -(v / speed) * coefficient * speed * speed


# =============================================================================
# AERODYNAMIC STABILITY
# =============================================================================

def compute_static_margin(snapshot: DesignSnapshot) -> float:
    """
    Distance the centre of mass sits behind the nose along the thrust axis.

    Positive when the COM is aft of the nose, 0 without a nose.
    """
    nose = snapshot.first(PartType.NOSE)
    if nose is None:
        return 0.0
    return float(nose.sim_position[0] - snapshot.properties.center_of_mass[0])


def compute_stability_coefficient(snapshot: DesignSnapshot,
                                  config: SimulationConfig = None) -> float:
    """
    Effective weathervane coefficient k of a design.

    k = base * stability_factor, x (1 + 0.8 * wings), x 1.5 with a nose,
    x (1 + max(0, margin / 100)) where margin is the COM distance aft of
    the nose.
    """
    config = config or create_default_config()
    k = config.base_stability_coefficient * config.stability_factor
    k *= 1.0 + config.wing_stability_increment * snapshot.count(PartType.WING)

    if snapshot.has_type(PartType.NOSE):
        k *= config.nose_stability_factor
        margin = compute_static_margin(snapshot) / config.static_stability_length
        k *= 1.0 + max(0.0, margin)
    return k


def compute_stability_torque(v: np.ndarray, angle: float, coefficient: float,
                             config: SimulationConfig = None) -> float:
    """
    Torque turning the body towards its direction of travel.

    tau = wrap(velocity_angle - angle) * speed * k

    Returns zero below the stability speed threshold.
    """
    config = config or create_default_config()
    speed = float(np.hypot(v[0], v[1]))
    if speed < config.stability_speed_threshold:
        return 0.0
    velocity_angle = float(np.arctan2(v[1], v[0]))
    return wrap_angle(velocity_angle - angle) * speed * coefficient


# =============================================================================
# ENGINE TORQUE & INERTIA
# =============================================================================

def compute_engine_torque(snapshot: DesignSnapshot,
                          config: SimulationConfig = None) -> float:
    """Design torque scaled into per-frame angular units."""
    config = config or create_default_config()
    return snapshot.properties.torque * config.engine_torque_scale * config.torque_scale


def compute_body_inertia(snapshot: DesignSnapshot,
                         config: SimulationConfig = None) -> float:
    """Rotational inertia handed to the host integrator."""
    config = config or create_default_config()
    return snapshot.properties.moment_of_inertia * config.inertia_scale


# =============================================================================
# TOTAL
# =============================================================================

def zero_breakdown(inertia: float = C.DEFAULT_INERTIA) -> ForceBreakdown:
    """Breakdown with no force and no torque."""
    return ForceBreakdown(
        drag=np.zeros(2),
        drag_magnitude=0.0,
        drag_coefficient=0.0,
        stability_torque=0.0,
        stability_coefficient=0.0,
        engine_torque=0.0,
        torque=0.0,
        inertia=inertia,
    )


def compute_forces(snapshot: DesignSnapshot, v: np.ndarray, angle: float,
                   config: SimulationConfig = None) -> ForceBreakdown:
    """
    Compute every force and torque for one tick.

    Args:
        snapshot: Frozen design of the flying body
        v: Velocity [x, y]
        angle: Orientation (rad)
        config: Simulation config (defaults if None)

    Returns:
        ForceBreakdown for the host integrator
    """
    config = config or create_default_config()
    engine_torque = compute_engine_torque(snapshot, config)
    inertia = compute_body_inertia(snapshot, config)

    if config.enable_aerodynamics:
        drag_coefficient = compute_drag_coefficient(snapshot, config)
        drag = compute_drag_force(v, drag_coefficient, config)
        stability_coefficient = compute_stability_coefficient(snapshot, config)
        stability_torque = compute_stability_torque(v, angle, stability_coefficient, config)
    else:
        drag_coefficient = 0.0
        drag = np.zeros(2)
        stability_coefficient = 0.0
        stability_torque = 0.0

    return ForceBreakdown(
        drag=drag,
        drag_magnitude=float(np.linalg.norm(drag)),
        drag_coefficient=drag_coefficient,
        stability_torque=stability_torque,
        stability_coefficient=stability_coefficient,
        engine_torque=engine_torque,
        torque=stability_torque + engine_torque,
        inertia=inertia,
    )
