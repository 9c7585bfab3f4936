"""
Rocket Launch Game - Flight Core Package

The rocket flight core of a 2D rocket-launching game: rockets are assembled
from parts, launched with an aimed velocity and flown by a host physics
engine that receives forces and torques from this package.

Modules:
    - constants: Game tuning constants and the part catalog
    - config: SimulationConfig dataclass
    - frames: Design-to-simulation transform and 2D vector helpers
    - parts: Part types, part records and the part factory
    - composites: Predefined multi-part templates
    - mass: Centre of mass, inertia, torque and flight parameters
    - design: Editable design with memoized mass properties
    - state: Flight state and statistics
    - forces: Drag, stability torque and engine torque
    - flight: FlightBody, the launched rocket
    - separation: Single-use cockpit separation and charge gauge
    - trajectory: Launch arc preview
    - launch: Launch point aiming
    - integrators: Reference semi-implicit Euler step
    - main: Headless flight runner
    - plotting: Flight and trajectory preview plots
    - cli: Command-line entry point
"""

from .parts import Part, PartType, create_part
from .design import Design, DesignSnapshot
from .mass import MassProperties, compute_mass_properties
from .flight import FlightBody
from .separation import SeparationEngine, ChargeGauge, compute_thrust_multiplier
from .trajectory import TrajectoryPredictor, predict_trajectory
from .launch import LaunchPoint
from .main import run_flight, FlightLog
from .config import SimulationConfig, create_default_config, create_test_config

__version__ = "1.0.0"
__author__ = "Rocket Launch Team"

__all__ = [
    'Part',
    'PartType',
    'create_part',
    'Design',
    'DesignSnapshot',
    'MassProperties',
    'compute_mass_properties',
    'FlightBody',
    'SeparationEngine',
    'ChargeGauge',
    'compute_thrust_multiplier',
    'TrajectoryPredictor',
    'predict_trajectory',
    'LaunchPoint',
    'run_flight',
    'FlightLog',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
]
