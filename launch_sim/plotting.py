"""
Rocket Launch Game - Flight Visualization

Plots of a headless flight (FlightLog) and of the launch trajectory preview.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class FlightData:
    """Flight log converted to arrays for plotting.

    Attributes:
        frame: Frame index
        position: Body position [n x 2] (screen convention, +y down)
        cockpit: Cockpit position [n x 2], NaN before separation
        speed: Speed (world units / frame)
        altitude: Climb above the launch height
        angle: Orientation (deg)
        drag: Drag force magnitude
        stability_torque: Weathervane torque
        engine_torque: Scaled engine torque
        separation_frame: Frame of the cockpit release, if any
    """
    frame: np.ndarray
    position: np.ndarray
    cockpit: np.ndarray
    speed: np.ndarray
    altitude: np.ndarray
    angle: np.ndarray
    drag: np.ndarray
    stability_torque: np.ndarray
    engine_torque: np.ndarray
    separation_frame: Optional[int] = None


def configure_plot_style() -> None:
    """Configure matplotlib defaults for flight plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'figure.dpi': 100,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'lines.linewidth': 1.8,
    })


def extract_log_data(log) -> FlightData:
    """Convert a FlightLog (or any object with the same lists) to arrays."""
    return FlightData(
        frame=np.array(log.frame),
        position=np.column_stack([log.position_x, log.position_y]),
        cockpit=np.column_stack([log.cockpit_x, log.cockpit_y]),
        speed=np.array(log.speed),
        altitude=np.array(log.altitude),
        angle=np.degrees(np.array(log.angle)),
        drag=np.array(log.drag_magnitude),
        stability_torque=np.array(log.stability_torque),
        engine_torque=np.array(log.engine_torque),
        separation_frame=getattr(log, 'separation_frame', None),
    )


# =============================================================================
# Individual Plot Functions
# =============================================================================

def _save(fig, output_dir: str, name: str) -> str:
    path = os.path.join(output_dir, name)
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


def _mark_separation(ax, data: FlightData) -> None:
    if data.separation_frame is not None:
        ax.axvline(data.separation_frame, color='gray', linestyle='--',
                   label=f'Separation (frame {data.separation_frame})')


def plot_flight_path(data: FlightData, output_dir: str) -> str:
    """World-space path of the rocket and, after separation, the cockpit."""
    fig, ax = plt.subplots()
    ax.plot(data.position[:, 0], data.position[:, 1], 'b-', label='Rocket')
    if np.any(np.isfinite(data.cockpit)):
        ax.plot(data.cockpit[:, 0], data.cockpit[:, 1], 'r-', label='Cockpit')
    ax.scatter([data.position[0, 0]], [data.position[0, 1]],
               c='green', s=60, marker='o', zorder=5, label='Launch')

    ax.set_xlabel('X (world units)')
    ax.set_ylabel('Y (world units)')
    ax.set_title('Flight Path', fontweight='bold')
    ax.invert_yaxis()
    ax.legend(loc='best')
    return _save(fig, output_dir, '01_flight_path.png')


def plot_speed_altitude(data: FlightData, output_dir: str) -> str:
    """Speed and altitude against frame."""
    fig, (ax_speed, ax_alt) = plt.subplots(2, 1, sharex=True)
    ax_speed.plot(data.frame, data.speed, 'b-', label='Speed')
    ax_speed.set_ylabel('Speed (units / frame)')
    _mark_separation(ax_speed, data)
    ax_speed.legend(loc='best')

    ax_alt.plot(data.frame, data.altitude, 'g-', label='Altitude')
    ax_alt.set_xlabel('Frame')
    ax_alt.set_ylabel('Altitude (world units)')
    _mark_separation(ax_alt, data)
    ax_alt.legend(loc='best')

    fig.suptitle('Speed and Altitude', fontweight='bold')
    return _save(fig, output_dir, '02_speed_altitude.png')


def plot_attitude_torques(data: FlightData, output_dir: str) -> str:
    """Orientation and the two torque sources against frame."""
    fig, (ax_angle, ax_torque) = plt.subplots(2, 1, sharex=True)
    ax_angle.plot(data.frame, data.angle, 'b-', label='Angle')
    ax_angle.set_ylabel('Angle (deg)')
    _mark_separation(ax_angle, data)
    ax_angle.legend(loc='best')

    ax_torque.plot(data.frame, data.stability_torque, 'm-', label='Stability')
    ax_torque.plot(data.frame, data.engine_torque, 'r--', label='Engine')
    ax_torque.set_xlabel('Frame')
    ax_torque.set_ylabel('Torque')
    ax_torque.legend(loc='best')

    fig.suptitle('Attitude and Torques', fontweight='bold')
    return _save(fig, output_dir, '03_attitude_torques.png')


def plot_drag(data: FlightData, output_dir: str) -> str:
    """Drag force magnitude against frame."""
    fig, ax = plt.subplots()
    ax.plot(data.frame, data.drag, 'k-', label='Drag')
    _mark_separation(ax, data)
    ax.set_xlabel('Frame')
    ax.set_ylabel('Drag force')
    ax.set_title('Air Drag', fontweight='bold')
    ax.legend(loc='best')
    return _save(fig, output_dir, '04_drag.png')


def plot_trajectory_preview(points: Sequence[Tuple[float, float]], output_dir: str,
                            width: float = None, height: float = None) -> str:
    """
    Plot a trajectory preview.

    Args:
        points: Preview points from predict_trajectory
        output_dir: Directory to save the plot
        width, height: Visible area drawn as a frame (optional)

    Returns:
        Path to saved plot file
    """
    os.makedirs(output_dir, exist_ok=True)
    fig, ax = plt.subplots()
    if points:
        xy = np.asarray(points, dtype=np.float64)
        ax.plot(xy[:, 0], xy[:, 1], 'b--', label='Preview')
    if width is not None and height is not None:
        ax.plot([0, width, width, 0, 0], [0, 0, height, height, 0], 'k-', linewidth=0.8)
    ax.set_xlabel('X (world units)')
    ax.set_ylabel('Y (world units)')
    ax.set_title('Trajectory Preview', fontweight='bold')
    ax.invert_yaxis()
    return _save(fig, output_dir, 'trajectory_preview.png')


# =============================================================================
# Main Entry Point
# =============================================================================

def generate_all_plots(log, output_dir: str = "plots") -> List[str]:
    """Generate every flight plot.

    Args:
        log: FlightLog from run_flight
        output_dir: Directory to save plots (created if doesn't exist)

    Returns:
        List of paths to saved plot files

    Example:
        >>> from launch_sim.main import run_flight
        >>> body, log, reason = run_flight(design)
        >>> plot_files = generate_all_plots(log, "output/plots")
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    if len(data.frame) == 0:
        logger.warning("Flight log is empty, no plots generated")
        return []

    saved_files = []
    for plot_function in (plot_flight_path, plot_speed_altitude,
                          plot_attitude_torques, plot_drag):
        saved_files.append(plot_function(data, output_dir))
        logger.debug(f"Saved {saved_files[-1]}")
    return saved_files
