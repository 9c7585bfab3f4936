"""
Rocket Launch Game - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing the flight core to be tuned without modifying global constants.
"""

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for the flight core.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Timing
      2. World
      3. Launch & aim
      4. Aerodynamics
      5. Engine torque & inertia
      6. Separation
      7. Trajectory preview
      8. Tolerances
      9. Misc
    """

    # ── 1. Timing ────────────────────────────────────────────────────────
    dt: float = C.DT
    fps: float = C.FPS
    max_frames: int = C.MAX_FRAMES
    gravity: float = C.GRAVITY
    post_separation_gravity: float = C.POST_SEPARATION_GRAVITY

    # ── 2. World ─────────────────────────────────────────────────────────
    world_width: float = C.WORLD_WIDTH
    world_height: float = C.WORLD_HEIGHT
    out_of_bounds_margin: float = C.OUT_OF_BOUNDS_MARGIN

    # ── 3. Launch & aim ──────────────────────────────────────────────────
    launch_x: float = C.LAUNCH_X
    launch_y: float = C.LAUNCH_Y
    min_launch_speed: float = C.MIN_LAUNCH_SPEED
    max_launch_speed: float = C.MAX_LAUNCH_SPEED
    speed_multiplier: float = C.SPEED_MULTIPLIER
    thrust_influence: float = C.THRUST_INFLUENCE

    # ── 4. Aerodynamics ──────────────────────────────────────────────────
    enable_aerodynamics: bool = True
    air_density: float = C.AIR_DENSITY
    stability_factor: float = C.STABILITY_FACTOR
    base_drag_coefficient: float = C.BASE_DRAG_COEFFICIENT
    nose_drag_factor: float = C.NOSE_DRAG_FACTOR
    wing_drag_increment: float = C.WING_DRAG_INCREMENT
    fuel_tank_drag_increment: float = C.FUEL_TANK_DRAG_INCREMENT
    drag_speed_threshold: float = C.DRAG_SPEED_THRESHOLD
    base_stability_coefficient: float = C.BASE_STABILITY_COEFFICIENT
    wing_stability_increment: float = C.WING_STABILITY_INCREMENT
    nose_stability_factor: float = C.NOSE_STABILITY_FACTOR
    static_stability_length: float = C.STATIC_STABILITY_LENGTH
    stability_speed_threshold: float = C.STABILITY_SPEED_THRESHOLD

    # ── 5. Engine torque & inertia ───────────────────────────────────────
    torque_scale: float = C.TORQUE_SCALE
    engine_torque_scale: float = C.ENGINE_TORQUE_SCALE
    inertia_scale: float = C.INERTIA_SCALE

    # ── 6. Separation ────────────────────────────────────────────────────
    separation_min_charge: float = C.SEPARATION_MIN_CHARGE
    separation_max_charge: float = C.SEPARATION_MAX_CHARGE
    separation_charge_rate: float = C.SEPARATION_CHARGE_RATE
    ejection_base_impulse: float = C.EJECTION_BASE_IMPULSE
    perfect_separation_bonus: float = C.PERFECT_SEPARATION_BONUS
    # Charge at or above which a release on the filling tick counts as perfect.
    # 100 keeps the exact-tick window; lower it for a tolerance band.
    perfect_charge_threshold: float = C.SEPARATION_MAX_CHARGE
    angular_velocity_inheritance: float = C.ANGULAR_VELOCITY_INHERITANCE
    payload_merge_delay: float = C.PAYLOAD_MERGE_DELAY
    min_remainder_mass: float = C.MIN_REMAINDER_MASS

    # ── 7. Trajectory preview ────────────────────────────────────────────
    trajectory_step_size: float = C.TRAJECTORY_STEP_SIZE
    trajectory_max_steps: int = C.TRAJECTORY_MAX_STEPS

    # ── 8. Tolerances ────────────────────────────────────────────────────
    zero_tolerance: float = C.ZERO_TOLERANCE

    # ── 9. Misc ──────────────────────────────────────────────────────────
    verbose: bool = True


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(max_frames: int = 200, **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(max_frames=max_frames, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
