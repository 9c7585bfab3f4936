"""
Rocket Launch Game - Trajectory Preview

Ballistic preview of the launch arc drawn while aiming. Drag, thrust and
rotation are ignored; the preview is a plain explicit Euler arc under gravity.
"""

from typing import Iterator, Tuple

import numpy as np

from .config import SimulationConfig, create_default_config

Point = Tuple[float, float]


class TrajectoryPredictor:
    """
    Restartable preview of a launch arc.

    Every call to iter_points() starts again from the initial conditions, so
    the same predictor always yields the same sequence.

    Attributes:
        start: Launch position [x, y]
        velocity: Launch velocity [x, y]
        width, height: Visible area; the arc ends on leaving [0, w] x [0, h]
    """

    def __init__(self, start, velocity, width: float, height: float,
                 config: SimulationConfig = None):
        self.config = config or create_default_config()
        self.start = np.asarray(start, dtype=np.float64).copy()
        self.velocity = np.asarray(velocity, dtype=np.float64).copy()
        self.width = float(width)
        self.height = float(height)

    def _in_bounds(self, x: float, y: float) -> bool:
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height

    def iter_points(self) -> Iterator[Point]:
        """
        Yield preview points.

        Per step: emit the point, then
            x += vx * h;  y += vy * h;  vy += g * h
        The start point is always emitted; the walk stops before the first
        point outside the area or after max_steps points.
        """
        h = self.config.trajectory_step_size
        g = self.config.gravity
        x, y = float(self.start[0]), float(self.start[1])
        vx, vy = float(self.velocity[0]), float(self.velocity[1])

        for _ in range(self.config.trajectory_max_steps):
            yield (x, y)
            x += vx * h
            y += vy * h
            vy += g * h
            if not self._in_bounds(x, y):
                return

    def points(self) -> Tuple[Point, ...]:
        return tuple(self.iter_points())

    def __iter__(self) -> Iterator[Point]:
        return self.iter_points()


def predict_trajectory(start, velocity, width: float, height: float,
                       config: SimulationConfig = None) -> Tuple[Point, ...]:
    """
    Predict the ballistic launch arc.

    Args:
        start: Launch position [x, y]
        velocity: Launch velocity [x, y]
        width, height: Visible area
        config: Simulation config (gravity, step size, max steps)

    Returns:
        Tuple of (x, y) points, at most max_steps long
    """
    return TrajectoryPredictor(start, velocity, width, height, config).points()
