"""
Rocket Launch Game - Reference Integrator

The game hands its forces to a host rigid-body engine. This module implements
a small semi-implicit Euler step that stands in for that engine in headless
runs and tests:

    v     <- v * (1 - air_friction * dt) + (F_drag / m + g) * dt
    x     <- x + v * dt
    omega <- omega * (1 - air_friction * dt) + (tau / I) * dt
    angle <- angle + omega * dt
"""

import numpy as np

from .state import FlightState
from .types import ForceBreakdown


def euler_step(state: FlightState, breakdown: ForceBreakdown = None,
               mass: float = 0.0, dt: float = 1.0, gravity: float = 0.0,
               air_friction: float = 0.0) -> FlightState:
    """
    Perform a single semi-implicit Euler step.

    Args:
        state: Current state
        breakdown: Forces for this frame (None for a ballistic body)
        mass: Body mass; a massless body ignores the drag force
        dt: Time step (frames)
        gravity: Downward acceleration (screen +y)
        air_friction: Per-frame velocity damping of the host engine

    Returns:
        New state after integration

    Raises:
        ValueError: If dt <= 0, or the forces have the wrong shape or are
            not finite
    """
    # Input validation
    if dt <= 0:
        raise ValueError(f"Time step dt must be positive, got {dt}")

    acceleration = np.array([0.0, gravity])
    alpha = 0.0
    if breakdown is not None:
        drag = np.asarray(breakdown['drag'], dtype=np.float64)
        if drag.shape != (2,):
            raise ValueError(f"Drag must have shape (2,), got {drag.shape}")
        if not np.all(np.isfinite(drag)) or not np.isfinite(breakdown['torque']):
            raise ValueError("Forces contain non-finite values")
        if breakdown['inertia'] <= 0:
            raise ValueError(f"Inertia must be positive, got {breakdown['inertia']}")

        if mass > 0:
            acceleration = acceleration + drag / mass
        alpha = breakdown['torque'] / breakdown['inertia']

    damping = max(0.0, 1.0 - air_friction * dt)
    velocity = state.velocity * damping + acceleration * dt
    angular_velocity = state.angular_velocity * damping + alpha * dt

    return FlightState(
        position=state.position + velocity * dt,
        velocity=velocity,
        angle=state.angle + angular_velocity * dt,
        angular_velocity=angular_velocity,
        launched=state.launched,
    )
