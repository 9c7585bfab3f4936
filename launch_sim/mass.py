"""
Rocket Launch Game - Mass and inertia computations.

Every function here works in the simulation frame: part positions, sizes and
mount angles are transformed out of the design frame before any sum is taken.
"""

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from . import constants as C
from .frames import cross2d
from .parts import Part


@dataclass(frozen=True, eq=False)
class MassProperties:
    """
    Aggregates of a part set, all in the simulation frame.

    Attributes:
        total_mass: Sum of part masses
        average_drag: Mean per-part drag coefficient
        total_thrust: Sum of engine thrust magnitudes
        thrust_vector: Vector sum of engine thrust [x, y]
        center_of_mass: Mass-weighted centroid [x, y]
        moment_of_inertia: Rotational inertia about the centre of mass
        torque: Net engine torque about the centre of mass
        width, height: Bounding box size
        air_friction: Host engine air friction tuning value
        density: Host engine density tuning value
        max_speed: Launch speed ceiling
    """
    total_mass: float = 0.0
    average_drag: float = C.DEFAULT_AIR_FRICTION
    total_thrust: float = 0.0
    thrust_vector: np.ndarray = field(default_factory=lambda: np.zeros(2))
    center_of_mass: np.ndarray = field(default_factory=lambda: np.zeros(2))
    moment_of_inertia: float = C.DEFAULT_INERTIA
    torque: float = 0.0
    width: float = C.DEFAULT_WIDTH
    height: float = C.DEFAULT_HEIGHT
    air_friction: float = C.DEFAULT_AIR_FRICTION
    density: float = C.DEFAULT_DENSITY
    max_speed: float = C.DEFAULT_MAX_SPEED

    @property
    def thrust_angle(self) -> float:
        """Direction of the summed thrust, 0 without engines."""
        if np.linalg.norm(self.thrust_vector) < C.ZERO_TOLERANCE:
            return 0.0
        return float(np.arctan2(self.thrust_vector[1], self.thrust_vector[0]))


def compute_total_mass(parts: Sequence[Part]) -> float:
    """Sum of part masses."""
    return float(sum(p.mass for p in parts))


def compute_average_drag(parts: Sequence[Part]) -> float:
    """Mean part drag, or the default air friction for no parts."""
    if not parts:
        return C.DEFAULT_AIR_FRICTION
    return float(sum(p.drag for p in parts) / len(parts))


def compute_total_thrust(parts: Sequence[Part]) -> float:
    """Sum of engine thrust magnitudes."""
    return float(sum(p.thrust for p in parts if p.is_engine))


def compute_thrust_vector(parts: Sequence[Part]) -> np.ndarray:
    """Vector sum of every engine's simulation-frame thrust."""
    total = np.zeros(2)
    for part in parts:
        if part.is_engine:
            total += part.sim_thrust_vector()
    return total


def compute_center_of_mass(parts: Sequence[Part]) -> np.ndarray:
    """
    Mass-weighted centroid of the transformed part positions.

    Returns (0, 0) for no parts or zero total mass.
    """
    total_mass = compute_total_mass(parts)
    if not parts or total_mass < C.ZERO_TOLERANCE:
        return np.zeros(2)

    weighted = np.zeros(2)
    for part in parts:
        weighted += part.sim_position * part.mass
    return weighted / total_mass


def compute_moment_of_inertia(parts: Sequence[Part], com: np.ndarray = None) -> float:
    """
    Rotational inertia about the centre of mass.

    Each part is a thin rectangle plus a point mass at its offset
    (parallel axis theorem):

        I = sum( (w^2 + h^2) * m / 12 + m * d^2 )

    with w, h the simulation-frame size and d the distance to the COM.

    Args:
        parts: Part set
        com: Precomputed centre of mass (computed if None)

    Returns:
        Moment of inertia, 1.0 for no parts
    """
    if not parts:
        return C.DEFAULT_INERTIA
    if com is None:
        com = compute_center_of_mass(parts)

    inertia = 0.0
    for part in parts:
        width, height = part.sim_size
        d = part.sim_position - com
        inertia += (width * width + height * height) * part.mass / 12.0
        inertia += part.mass * float(np.dot(d, d))
    # Massless part sets still need a usable divisor downstream
    if inertia < C.ZERO_TOLERANCE:
        return C.DEFAULT_INERTIA
    return inertia


def compute_torque(parts: Sequence[Part], com: np.ndarray = None) -> float:
    """
    Net engine torque about the centre of mass: sum of r x F over engines.

    Args:
        parts: Part set
        com: Precomputed centre of mass (computed if None)

    Returns:
        Torque (positive turns +x towards +y)
    """
    if com is None:
        com = compute_center_of_mass(parts)

    torque = 0.0
    for part in parts:
        if part.is_engine:
            torque += cross2d(part.sim_position - com, part.sim_thrust_vector())
    return torque


def compute_bounding_size(parts: Sequence[Part]) -> tuple:
    """(width, height) of the simulation-frame bounding box."""
    if not parts:
        return C.DEFAULT_WIDTH, C.DEFAULT_HEIGHT

    min_x = min_y = np.inf
    max_x = max_y = -np.inf
    for part in parts:
        x, y = part.sim_position
        width, height = part.sim_size
        min_x = min(min_x, x - width / 2)
        max_x = max(max_x, x + width / 2)
        min_y = min(min_y, y - height / 2)
        max_y = max(max_y, y + height / 2)
    return float(max_x - min_x), float(max_y - min_y)


def compute_flight_parameters(total_mass: float, average_drag: float,
                              total_thrust: float) -> dict:
    """
    Host engine tuning values derived from the aggregates.

    The speed ceiling rises linearly with thrust and is never capped.
    """
    return {
        'air_friction': average_drag,
        'density': total_mass / C.DENSITY_MASS_DIVISOR,
        'max_speed': C.MAX_SPEED_BASE + total_thrust * C.MAX_SPEED_PER_THRUST,
    }


def compute_mass_properties(parts: Sequence[Part]) -> MassProperties:
    """
    Compute every aggregate of a part set in one pass.

    An empty set returns the neutral defaults (inertia 1).
    """
    parts = tuple(parts)
    if not parts:
        return MassProperties()

    total_mass = compute_total_mass(parts)
    average_drag = compute_average_drag(parts)
    total_thrust = compute_total_thrust(parts)
    com = compute_center_of_mass(parts)
    width, height = compute_bounding_size(parts)

    return MassProperties(
        total_mass=total_mass,
        average_drag=average_drag,
        total_thrust=total_thrust,
        thrust_vector=compute_thrust_vector(parts),
        center_of_mass=com,
        moment_of_inertia=compute_moment_of_inertia(parts, com),
        torque=compute_torque(parts, com),
        width=width,
        height=height,
        **compute_flight_parameters(total_mass, average_drag, total_thrust),
    )
