"""
Rocket Launch Game - Reference Frame Transformations

This module implements the design-frame to simulation-frame transform and the
2D vector helpers shared by the mass, force and separation modules.

Frames:
- Design frame: the editor grid, "up" (-y) is the nose direction.
- Simulation frame: the flight world, +x is the thrust/launch direction.

Transform: (x, y) -> (-y, x), a +90 degree rotation. Widths and heights swap
and every mount angle advances by pi/2.
"""

import numpy as np

from . import constants as C


def design_to_sim(x: float, y: float) -> np.ndarray:
    """
    Map a design-frame point into the simulation frame.

    Args:
        x: Design-frame x
        y: Design-frame y (negative is towards the nose)

    Returns:
        Simulation-frame position [x, y]
    """
    return np.array([-y, x], dtype=np.float64)


def design_vector_to_sim(v: np.ndarray) -> np.ndarray:
    """Rotate a design-frame vector into the simulation frame."""
    return np.array([-v[1], v[0]], dtype=np.float64)


def design_size_to_sim(width: float, height: float) -> tuple:
    """Width and height swap under the quarter turn."""
    return float(height), float(width)


def design_angle_to_sim(angle: float) -> float:
    """Advance a design-frame angle by a quarter turn."""
    return float(angle) + np.pi / 2


def wrap_angle(angle: float) -> float:
    """
    Wrap an angle into [-pi, pi].

    Args:
        angle: Angle (rad)

    Returns:
        Equivalent angle in [-pi, pi]; 0 for a non-finite angle
    """
    wrapped = float(angle)
    if -np.pi <= wrapped <= np.pi:
        return wrapped
    # Non-finite angles carry no heading
    if not np.isfinite(wrapped):
        return 0.0
    return (wrapped + np.pi) % (2.0 * np.pi) - np.pi


def unit_vector(angle: float) -> np.ndarray:
    """Unit vector pointing along angle."""
    return np.array([np.cos(angle), np.sin(angle)], dtype=np.float64)


def polar_vector(angle: float, magnitude: float) -> np.ndarray:
    """Vector of the given magnitude pointing along angle."""
    return unit_vector(angle) * magnitude


def rotate(v: np.ndarray, angle: float) -> np.ndarray:
    """
    Rotate a 2D vector counter-clockwise (screen: clockwise) by angle.

    Args:
        v: Vector [x, y]
        angle: Rotation (rad)

    Returns:
        Rotated vector
    """
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([v[0] * c - v[1] * s, v[0] * s + v[1] * c], dtype=np.float64)


def cross2d(a: np.ndarray, b: np.ndarray) -> float:
    """Scalar z-component of the 2D cross product a x b."""
    return float(a[0] * b[1] - a[1] * b[0])


def tangential_velocity(omega: float, r: np.ndarray) -> np.ndarray:
    """
    Velocity of a point at offset r on a body spinning at omega.

    v = omega x r, which in 2D is (-omega * ry, omega * rx).
    """
    return np.array([-omega * r[1], omega * r[0]], dtype=np.float64)


def vector_angle(v: np.ndarray, default: float = 0.0) -> float:
    """Heading of a vector, or default for a zero-length vector."""
    if np.hypot(v[0], v[1]) < C.ZERO_TOLERANCE:
        return float(default)
    return float(np.arctan2(v[1], v[0]))
