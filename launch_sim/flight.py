"""
Rocket Launch Game - Flying Rocket Body

This module implements FlightBody, the launched rocket. It owns the body's
kinematic state and a frozen snapshot of the design, and each frame hands a
ForceBreakdown to the host integrator. The host integrates and writes the
result back through sync().

Frame order: step() -> host integrator -> sync().
"""

import logging
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from .config import SimulationConfig, create_default_config
from .design import Design, DesignSnapshot
from .forces import compute_forces, compute_body_inertia, zero_breakdown
from .frames import rotate, vector_angle
from .mass import compute_mass_properties
from .parts import Part
from .state import FlightState, FlightStats
from .types import ForceBreakdown

logger = logging.getLogger(__name__)


def is_out_of_bounds(position, width: float, height: float, margin: float) -> bool:
    """
    True once a position has left the world past the margin.

    Only the right, bottom and left edges count; the sky above is open.
    """
    x, y = position[0], position[1]
    return bool(x > width + margin or y > height + margin or x < -margin)


class FlightBody:
    """
    A rocket in flight.

    Attributes:
        snapshot: Frozen design currently attached to the body
        state: Kinematic state (FlightState)
        launch_position: Grounded position restored by reset()
        config: Simulation config
    """

    def __init__(self, design: Union[Design, DesignSnapshot],
                 position: Optional[Iterable[float]] = None,
                 config: SimulationConfig = None):
        self.config = config or create_default_config()
        if isinstance(design, Design):
            design = design.snapshot()
        self._initial_snapshot = design
        self.snapshot = design

        if position is None:
            position = (self.config.launch_x, self.config.launch_y)
        self.launch_position = np.asarray(position, dtype=np.float64).copy()
        self.state = FlightState(position=self.launch_position.copy())
        self._stats = FlightStats()

    # --- Read access -------------------------------------------------------

    @property
    def is_launched(self) -> bool:
        return self.state.launched

    @property
    def position(self) -> np.ndarray:
        return self.state.position.copy()

    @property
    def velocity(self) -> np.ndarray:
        return self.state.velocity.copy()

    @property
    def angle(self) -> float:
        return self.state.angle

    @property
    def angular_velocity(self) -> float:
        return self.state.angular_velocity

    @property
    def speed(self) -> float:
        return self.state.speed

    @property
    def mass(self) -> float:
        return self.snapshot.properties.total_mass

    @property
    def inertia(self) -> float:
        return compute_body_inertia(self.snapshot, self.config)

    @property
    def stats(self) -> FlightStats:
        """Flight statistics (a copy; read-only to callers)."""
        return self._stats.copy()

    def has_cockpit(self) -> bool:
        return self.snapshot.has_cockpit()

    def part_offset(self, part: Part) -> np.ndarray:
        """World-frame offset of a part from the body's centre of mass."""
        local = part.sim_position - self.snapshot.properties.center_of_mass
        return rotate(local, self.state.angle)

    # --- Flight ------------------------------------------------------------

    def launch(self, angle: float, speed: float) -> bool:
        """
        Give the grounded rocket its launch velocity.

        v = (cos(angle), sin(angle)) * speed + thrust_vector * thrust_influence

        The body then faces along v. Calling launch again has no effect.

        Args:
            angle: Launch direction (rad)
            speed: Launch speed (world units / frame)

        Returns:
            True if this call launched the body
        """
        if self.state.launched:
            logger.debug("launch ignored: already launched")
            return False

        velocity = np.array([np.cos(angle) * speed, np.sin(angle) * speed])
        velocity += self.snapshot.properties.thrust_vector * self.config.thrust_influence

        self.state.velocity = velocity
        self.state.angle = vector_angle(velocity, default=angle)
        self.state.angular_velocity = 0.0
        self.state.launched = True
        self._stats.update(self.state, self.launch_position[1])

        logger.info(
            f"Launched {self.snapshot.name!r}: angle={np.degrees(angle):.1f}deg "
            f"speed={speed:.2f} -> v=({velocity[0]:.2f}, {velocity[1]:.2f})"
        )
        return True

    def step(self) -> ForceBreakdown:
        """
        Forces and torques for the current frame.

        Returns a zero breakdown and leaves the state alone while grounded.
        """
        if not self.state.launched:
            return zero_breakdown(self.inertia)
        return compute_forces(self.snapshot, self.state.velocity, self.state.angle, self.config)

    def sync(self, position, velocity, angle: float, angular_velocity: float) -> None:
        """Read back the kinematics integrated by the host."""
        if not self.state.launched:
            logger.debug("sync ignored: body not launched")
            return
        self.state.position = np.asarray(position, dtype=np.float64).copy()
        self.state.velocity = np.asarray(velocity, dtype=np.float64).copy()
        self.state.angle = float(angle)
        self.state.angular_velocity = float(angular_velocity)
        self._stats.update(self.state, self.launch_position[1])

    def apply_velocity_change(self, dv: np.ndarray) -> None:
        """Add an instantaneous velocity change (e.g. separation recoil)."""
        self.state.velocity = self.state.velocity + np.asarray(dv, dtype=np.float64)

    def detach(self, part_ids: Iterable[str]) -> Tuple[Part, ...]:
        """
        Remove parts from the flying body.

        The remaining parts become the body's new snapshot.

        Returns:
            The detached parts, in design order
        """
        wanted = set(part_ids)
        detached = tuple(p for p in self.snapshot.parts if p.id in wanted)
        if not detached:
            return ()
        remaining = tuple(p for p in self.snapshot.parts if p.id not in wanted)
        self.snapshot = DesignSnapshot(
            self.snapshot.name, remaining, compute_mass_properties(remaining)
        )
        logger.debug(f"Detached {len(detached)} part(s), {len(remaining)} remain")
        return detached

    def reset(self) -> None:
        """Put the rocket back on the pad with its full design."""
        self.snapshot = self._initial_snapshot
        self.state = FlightState(position=self.launch_position.copy())
        self._stats.reset()
        logger.debug("Flight body reset")

    def is_out_of_bounds(self, width: float = None, height: float = None,
                         margin: float = None) -> bool:
        """Whether the body has left the world (defaults from the config)."""
        width = self.config.world_width if width is None else width
        height = self.config.world_height if height is None else height
        margin = self.config.out_of_bounds_margin if margin is None else margin
        return is_out_of_bounds(self.state.position, width, height, margin)

    def __repr__(self) -> str:
        return f"FlightBody({self.snapshot.name!r}, {self.state})"
