"""
Rocket Launch Game - Type Definitions

This module provides TypedDict definitions for structured return types,
improving type safety and IDE support.
"""

from typing import TypedDict

import numpy as np
from numpy.typing import NDArray


class ForceBreakdown(TypedDict):
    """Per-tick forces handed to the host integrator (simulation frame).

    Gravity is applied by the host world and is not part of the breakdown.
    """
    drag: NDArray[np.float64]  # Drag force vector
    drag_magnitude: float  # |drag|
    drag_coefficient: float  # Effective c in F = c * |v|^2
    stability_torque: float  # Weathervane torque towards the velocity heading
    stability_coefficient: float  # Effective k in tau = dtheta * speed * k
    engine_torque: float  # Scaled design torque
    torque: float  # stability_torque + engine_torque
    inertia: float  # Rotational inertia for the integrator


class PartRecord(TypedDict, total=False):
    """Flat persistence record of one part."""
    id: str
    type: str
    x: float
    y: float
    width: float
    height: float
    color: int
    mass: float
    thrust: float
    drag: float
    angle: float
    compositeGroupId: str
    side: str
    fuel: float
    stability: float
    imageKey: str
    isRare: bool


class FlightSummary(TypedDict):
    """Return type for the headless runner summary."""
    frames: int  # Frames simulated
    reason: str  # Why the run ended
    max_altitude: float  # Highest climb above the launch point
    max_speed: float  # Peak speed (world units / frame)
    max_speed_kmh: float  # Peak speed as shown in the HUD
    max_rotation: float  # Peak |angle| (rad)
    separated: bool  # Whether the cockpit was ejected
