"""
Rocket Launch Game - Headless Flight Runner

This module implements the headless flight loop:
- Launch from the pad with a given angle and speed
- Per frame: FlightBody.step() -> reference integrator -> FlightBody.sync()
- Optional cockpit separation at a chosen frame
- Data logging

Coordinate Frames:
- Simulation frame, screen convention: +x right, +y down
"""

import csv
import logging
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional, Union

import numpy as np

from .config import SimulationConfig, create_default_config
from .design import Design, DesignSnapshot
from .flight import FlightBody, is_out_of_bounds
from .integrators import euler_step
from .separation import SeparationEngine, SeparationResult
from .types import FlightSummary, ForceBreakdown

# Configure module logger
logger = logging.getLogger(__name__)

DEFAULT_LAUNCH_ANGLE = -np.pi / 4
DEFAULT_LAUNCH_SPEED = 20.0


@dataclass
class FlightLog:
    """Container for logged flight data."""
    frame: List[int] = field(default_factory=list)
    time: List[float] = field(default_factory=list)
    position_x: List[float] = field(default_factory=list)
    position_y: List[float] = field(default_factory=list)
    velocity_x: List[float] = field(default_factory=list)
    velocity_y: List[float] = field(default_factory=list)
    speed: List[float] = field(default_factory=list)
    altitude: List[float] = field(default_factory=list)
    angle: List[float] = field(default_factory=list)
    angular_velocity: List[float] = field(default_factory=list)
    drag_magnitude: List[float] = field(default_factory=list)
    stability_torque: List[float] = field(default_factory=list)
    engine_torque: List[float] = field(default_factory=list)
    mass: List[float] = field(default_factory=list)
    gravity: List[float] = field(default_factory=list)
    # Cockpit track, NaN before separation
    cockpit_x: List[float] = field(default_factory=list)
    cockpit_y: List[float] = field(default_factory=list)
    separation_frame: Optional[int] = None
    separation: Optional[SeparationResult] = None

    def append(self, frame: int, body: FlightBody, breakdown: ForceBreakdown,
               gravity: float, cockpit_position=None):
        """Log data from the current frame."""
        state = body.state
        self.frame.append(frame)
        self.time.append(frame * body.config.dt / body.config.fps)
        self.position_x.append(float(state.position[0]))
        self.position_y.append(float(state.position[1]))
        self.velocity_x.append(float(state.velocity[0]))
        self.velocity_y.append(float(state.velocity[1]))
        self.speed.append(state.speed)
        self.altitude.append(float(body.launch_position[1] - state.position[1]))
        self.angle.append(state.angle)
        self.angular_velocity.append(state.angular_velocity)
        self.drag_magnitude.append(breakdown['drag_magnitude'])
        self.stability_torque.append(breakdown['stability_torque'])
        self.engine_torque.append(breakdown['engine_torque'])
        self.mass.append(body.mass)
        self.gravity.append(gravity)
        if cockpit_position is None:
            self.cockpit_x.append(float('nan'))
            self.cockpit_y.append(float('nan'))
        else:
            self.cockpit_x.append(float(cockpit_position[0]))
            self.cockpit_y.append(float(cockpit_position[1]))

    def __len__(self) -> int:
        return len(self.frame)

    def to_csv(self, filename: str):
        """Write the logged flight to CSV for offline analysis."""
        os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
        columns = [
            'frame', 'time', 'position_x', 'position_y', 'velocity_x', 'velocity_y',
            'speed', 'altitude', 'angle', 'angular_velocity', 'drag_magnitude',
            'stability_torque', 'engine_torque', 'mass', 'gravity',
            'cockpit_x', 'cockpit_y',
        ]
        with open(filename, 'w', newline='') as fh:
            writer = csv.writer(fh)
            writer.writerow(columns)
            for row in zip(*(getattr(self, name) for name in columns)):
                writer.writerow(row)


def run_flight(design: Union[Design, DesignSnapshot],
               angle: float = DEFAULT_LAUNCH_ANGLE,
               speed: float = DEFAULT_LAUNCH_SPEED,
               config: SimulationConfig = None,
               separate_at_frame: Optional[int] = None,
               charge: float = 100.0,
               perfect: bool = False,
               verbose: bool = None) -> tuple:
    """
    Fly a design headless until it leaves the world or the frame limit.

    After a separation the flight follows the cockpit, and gravity switches to
    the post-separation value.

    Args:
        design: Design or frozen snapshot to fly
        angle: Launch angle (rad, screen convention: negative is up)
        speed: Launch speed (world units / frame)
        config: SimulationConfig instance. If None a default is created.
        separate_at_frame: Frame at which to release the cockpit (None: never)
        charge: Separation gauge charge used at release
        perfect: Whether the release counts as perfect
        verbose: Print progress rows. Defaults to config.verbose.

    Returns:
        (body, log, termination_reason) tuple
    """
    if config is None:
        config = create_default_config()
    if verbose is None:
        verbose = config.verbose

    body = FlightBody(design, config=config)
    separation = SeparationEngine(config)
    log = FlightLog()
    gravity = config.gravity
    reason = "Frame limit reached"

    logger.info(f"Starting flight: {body.snapshot.name!r}, {len(body.snapshot.parts)} parts, "
                f"max_frames={config.max_frames}")
    body.launch(angle, speed)

    if verbose:
        print("\n" + "=" * 72)
        print(f"ROCKET FLIGHT    | {body.snapshot.name} | mass={body.mass:.1f}")
        print("=" * 72)
        print(f"{'Frame':^8} | {'X':^10} | {'Y':^10} | {'Speed':^10} | {'Angle (deg)':^12}")
        print("-" * 72)

    start_time = time.time()
    frame = 0
    for frame in range(config.max_frames):
        if frame == separate_at_frame:
            result = separation.separate_cockpit(body, charge, perfect)
            if result is not None:
                gravity = config.post_separation_gravity
                log.separation_frame = frame
                log.separation = result
                logger.info(f"Gravity set to {gravity} after separation at frame {frame}")

        breakdown = body.step()
        new_state = euler_step(
            body.state, breakdown, body.mass, config.dt, gravity,
            body.snapshot.properties.air_friction,
        )
        body.sync(new_state.position, new_state.velocity,
                  new_state.angle, new_state.angular_velocity)

        for ejected in separation.ejected:
            ejected.state = euler_step(ejected.state, None, ejected.mass, config.dt, gravity)
        separation.advance(config.dt / config.fps)

        cockpit = separation.cockpit
        log.append(frame, body, breakdown, gravity,
                   None if cockpit is None else cockpit.position)

        if verbose and frame % 50 == 0:
            _print_status(frame, body)

        tracked = body.state.position if cockpit is None else cockpit.position
        if is_out_of_bounds(tracked, config.world_width, config.world_height,
                            config.out_of_bounds_margin):
            reason = "Cockpit out of bounds" if cockpit is not None else "Out of bounds"
            break

    elapsed = time.time() - start_time
    logger.info(f"Flight terminated: {reason}")
    _log_completion(body, frame + 1, elapsed, verbose)
    return body, log, reason


def summarize_flight(body: FlightBody, log: FlightLog, reason: str) -> FlightSummary:
    """Results-screen summary of a finished flight."""
    stats = body.stats
    return FlightSummary(
        frames=len(log),
        reason=reason,
        max_altitude=stats.max_altitude,
        max_speed=stats.max_speed,
        max_speed_kmh=stats.max_speed_kmh,
        max_rotation=stats.max_rotation,
        separated=log.separation_frame is not None,
    )


def _print_status(frame: int, body: FlightBody):
    """Print a formatted status row."""
    x, y = body.state.position
    msg = (f"{frame:8d} | {x:10.1f} | {y:10.1f} | "
           f"{body.speed:10.2f} | {np.degrees(body.angle):12.1f}")
    print(msg)
    logger.debug(msg)


def _log_completion(body: FlightBody, frames: int, elapsed: float, verbose: bool):
    """Log and print final statistics."""
    stats = body.stats
    logger.info(f"Flight complete: {frames} frames in {elapsed:.2f}s")
    logger.info(f"Max altitude={stats.max_altitude:.1f}, max speed={stats.max_speed_kmh:.1f} km/h")

    if verbose:
        print("-" * 72)
        print("FLIGHT COMPLETED")
        print("-" * 72)
        print(f"Frames:       {frames:,}")
        print(f"Max Altitude: {stats.max_altitude:.1f}")
        print(f"Max Speed:    {stats.max_speed_kmh:.1f} km/h")
        print(f"Max Rotation: {np.degrees(stats.max_rotation):.1f} deg")
        print("=" * 72)
