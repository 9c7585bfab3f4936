"""
Rocket Launch Game - Flight State

This module defines the kinematic state of a flying body and the flight
statistics shown on the results screen.
"""

from dataclasses import dataclass, field
import numpy as np

from . import constants as C


@dataclass
class FlightState:
    """
    Kinematic state of one rigid body in the simulation frame.

    Attributes:
        position: Centre of mass position [x, y] (screen y grows downwards)
        velocity: Velocity [x, y] (world units / frame)
        angle: Orientation (rad)
        angular_velocity: Spin rate (rad / frame)
        launched: Whether the body has been launched
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(2))

    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))

    angle: float = 0.0

    angular_velocity: float = 0.0

    launched: bool = False

    def __post_init__(self):
        """Ensure arrays are numpy arrays with correct dtype."""
        for attr in ['position', 'velocity']:
            setattr(self, attr, np.asarray(getattr(self, attr), dtype=np.float64))
        self.angle = float(self.angle)
        self.angular_velocity = float(self.angular_velocity)

    def copy(self) -> 'FlightState':
        """Create a deep copy of the state."""
        return FlightState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            angle=self.angle,
            angular_velocity=self.angular_velocity,
            launched=self.launched,
        )

    def to_vector(self) -> np.ndarray:
        """Flat array [x, y, vx, vy, angle, angular_velocity]."""
        return np.concatenate([
            self.position, self.velocity, [self.angle, self.angular_velocity]
        ])

    @classmethod
    def from_vector(cls, vec: np.ndarray, launched: bool = True) -> 'FlightState':
        """
        Create a FlightState from a flat numpy array.

        Args:
            vec: State vector [position(2), velocity(2), angle, angular_velocity]
            launched: Launched flag to carry over
        """
        return cls(
            position=vec[0:2].copy(),
            velocity=vec[2:4].copy(),
            angle=vec[4],
            angular_velocity=vec[5],
            launched=launched,
        )

    @property
    def speed(self) -> float:
        """Magnitude of velocity."""
        return float(np.linalg.norm(self.velocity))

    @property
    def heading(self) -> float:
        """Direction of travel (rad), 0 at rest."""
        if self.speed < C.ZERO_TOLERANCE:
            return 0.0
        return float(np.arctan2(self.velocity[1], self.velocity[0]))

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"FlightState(x={self.position[0]:.1f}, y={self.position[1]:.1f}, "
            f"v={self.speed:.2f}, angle={np.degrees(self.angle):.1f}deg, "
            f"launched={self.launched})"
        )


@dataclass
class FlightStats:
    """
    Running maxima of one flight.

    Attributes:
        max_altitude: Highest climb above the launch height (world units)
        max_speed: Peak speed (world units / frame)
        max_rotation: Peak |angle| (rad)
    """
    max_altitude: float = 0.0
    max_speed: float = 0.0
    max_rotation: float = 0.0

    @property
    def max_speed_kmh(self) -> float:
        """Peak speed as shown on the HUD."""
        return self.max_speed * C.KMH_PER_SPEED_UNIT

    def update(self, state: FlightState, launch_y: float) -> None:
        """Fold one observed state into the maxima."""
        # Screen y grows downwards, so climbing lowers y
        self.max_altitude = max(self.max_altitude, launch_y - float(state.position[1]))
        self.max_speed = max(self.max_speed, state.speed)
        self.max_rotation = max(self.max_rotation, abs(state.angle))

    def reset(self) -> None:
        self.max_altitude = 0.0
        self.max_speed = 0.0
        self.max_rotation = 0.0

    def copy(self) -> 'FlightStats':
        return FlightStats(self.max_altitude, self.max_speed, self.max_rotation)
