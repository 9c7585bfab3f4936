"""
Rocket Launch Game - Launch Point

Aiming helpers: the launch angle and speed follow the pointer position
relative to the pad.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .config import SimulationConfig, create_default_config


@dataclass(frozen=True)
class LaunchPoint:
    """Launch pad position in the world."""
    x: float
    y: float

    @classmethod
    def from_config(cls, config: SimulationConfig = None) -> 'LaunchPoint':
        config = config or create_default_config()
        return cls(config.launch_x, config.launch_y)

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def calculate_angle(self, target_x: float, target_y: float) -> float:
        """Angle (rad) from the pad to the target."""
        return float(np.arctan2(target_y - self.y, target_x - self.x))

    def calculate_distance(self, target_x: float, target_y: float) -> float:
        """Distance from the pad to the target."""
        return float(np.hypot(target_x - self.x, target_y - self.y))

    def calculate_speed(self, target_x: float, target_y: float,
                        min_speed: float, max_speed: float,
                        speed_multiplier: float) -> float:
        """Launch speed: distance / multiplier, clamped to [min, max]."""
        distance = self.calculate_distance(target_x, target_y)
        return float(np.clip(distance / speed_multiplier, min_speed, max_speed))

    def aim(self, target_x: float, target_y: float,
            config: SimulationConfig = None) -> Tuple[float, float, np.ndarray]:
        """
        Aim at a pointer position.

        Returns:
            (angle, speed, velocity) with velocity = speed * (cos, sin)(angle)
        """
        config = config or create_default_config()
        angle = self.calculate_angle(target_x, target_y)
        speed = self.calculate_speed(
            target_x, target_y,
            config.min_launch_speed, config.max_launch_speed, config.speed_multiplier,
        )
        velocity = np.array([np.cos(angle), np.sin(angle)]) * speed
        return angle, speed, velocity
