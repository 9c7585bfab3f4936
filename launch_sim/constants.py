"""
Rocket Launch Game - Tuning Constants and Part Catalog

This module defines the world geometry, physics tuning values, part catalog
defaults and separation constants used throughout the flight core.

Units are game units: positions in world pixels, velocities in pixels per
frame, angles in radians. Screen coordinates grow downwards, so gravity is +y.
"""

import numpy as np

# =============================================================================
# WORLD & CAMERA
# =============================================================================

SCREEN_WIDTH = 1200.0
SCREEN_HEIGHT = 800.0
CAMERA_ZOOM = 0.33

# The visible world is the screen divided by the camera zoom (~3x wider)
WORLD_WIDTH = SCREEN_WIDTH / CAMERA_ZOOM
WORLD_HEIGHT = SCREEN_HEIGHT / CAMERA_ZOOM

# Margin outside the world before a body counts as lost
OUT_OF_BOUNDS_MARGIN = 100.0

# =============================================================================
# GRAVITY & TIMING
# =============================================================================

# Downward gravity handed to the host engine (per frame^2)
GRAVITY = 0.5

# Gravity after the cockpit is jettisoned (the game makes the fall snappier)
POST_SEPARATION_GRAVITY = 1.0

# Host engine frame rate and step
FPS = 60.0
DT = 1.0

# Headless runs stop after this many frames
MAX_FRAMES = 2000

# =============================================================================
# LAUNCH POINT & AIM
# =============================================================================

LAUNCH_X = 100.0
LAUNCH_MARGIN_BOTTOM = 50.0
LAUNCH_Y = WORLD_HEIGHT - LAUNCH_MARGIN_BOTTOM

# Pointer distance / SPEED_MULTIPLIER, clamped to [MIN_SPEED, MAX_SPEED]
MIN_LAUNCH_SPEED = 5.0
MAX_LAUNCH_SPEED = 30.0
SPEED_MULTIPLIER = 10.0

# Share of the summed engine thrust added to the launch velocity
THRUST_INFLUENCE = 0.5

# =============================================================================
# AERODYNAMICS
# =============================================================================

AIR_DENSITY = 1.0
STABILITY_FACTOR = 1.0
TORQUE_SCALE = 1.0

# Quadratic drag: F = c * |v|^2 opposite v
BASE_DRAG_COEFFICIENT = 0.002
NOSE_DRAG_FACTOR = 0.7           # nose cone: -30 %
WING_DRAG_INCREMENT = 0.15       # each wing: +15 %
FUEL_TANK_DRAG_INCREMENT = 0.10  # each fuel tank: +10 %
DRAG_SPEED_THRESHOLD = 0.1

# Weathervane torque: wrap(velocity angle - heading) * speed * k
BASE_STABILITY_COEFFICIENT = 0.00002
WING_STABILITY_INCREMENT = 0.8
NOSE_STABILITY_FACTOR = 1.5
STATIC_STABILITY_LENGTH = 100.0  # COM-to-nose distance giving +100 %
STABILITY_SPEED_THRESHOLD = 1.0

# =============================================================================
# ENGINE TORQUE & INERTIA
# =============================================================================

ENGINE_TORQUE_SCALE = 0.00001
INERTIA_SCALE = 0.01

# =============================================================================
# DESIGN DEFAULTS (empty design)
# =============================================================================

DEFAULT_AIR_FRICTION = 0.01
DEFAULT_DENSITY = 0.001
DEFAULT_MAX_SPEED = 30.0
DEFAULT_WIDTH = 40.0
DEFAULT_HEIGHT = 80.0
DEFAULT_INERTIA = 1.0

# Derived flight parameters
DENSITY_MASS_DIVISOR = 1000.0
MAX_SPEED_BASE = 20.0
MAX_SPEED_PER_THRUST = 10.0  # no upper bound: more engines, higher ceiling

# =============================================================================
# SEPARATION (COCKPIT JETTISON)
# =============================================================================

SEPARATION_MIN_CHARGE = 30.0
SEPARATION_MAX_CHARGE = 100.0
SEPARATION_CHARGE_RATE = 3.0          # gauge gain per held frame

# jettison speed = 1 + ((charge - 30) / 70) * 2  ->  [1, 3]
JETTISON_BASE_SPEED = 1.0
JETTISON_SPEED_RANGE = 2.0

EJECTION_BASE_IMPULSE = 5.0           # scaled by the thrust multiplier
PERFECT_SEPARATION_BONUS = 1.0
ANGULAR_VELOCITY_INHERITANCE = 0.5
PAYLOAD_MERGE_DELAY = 0.1             # s before cockpit + payload merge

# Cockpit mass assumed when a cockpit carries no mass
DEFAULT_COCKPIT_MASS = 1.5

# Remainder mass floor for the recoil ratio
MIN_REMAINDER_MASS = 1e-3

# =============================================================================
# TRAJECTORY PREVIEW
# =============================================================================

TRAJECTORY_STEP_SIZE = 0.5
TRAJECTORY_MAX_STEPS = 200

# =============================================================================
# STATISTICS
# =============================================================================

# HUD shows speed in km/h: world units per frame * 3.6
KMH_PER_SPEED_UNIT = 3.6

# =============================================================================
# PART CATALOG
# =============================================================================

# Type-specific defaults. Engine mount angle pi/2 = nozzle points down in the
# design frame, so thrust pushes towards the nose.
PART_CATALOG = {
    'nose': dict(width=40.0, height=30.0, mass=0.5, drag=0.005, color=0xffd93d),
    'body': dict(width=40.0, height=50.0, mass=2.0, drag=0.01, color=0xff6b6b),
    'wing': dict(width=30.0, height=40.0, mass=0.8, drag=0.015, color=0x4ecdc4,
                 side='left'),
    'engine': dict(width=40.0, height=35.0, mass=1.5, drag=0.01, thrust=10.0,
                   angle=np.pi / 2, color=0xe74c3c),
    'fueltank': dict(width=40.0, height=60.0, mass=3.0, drag=0.01, color=0x95a5a6,
                     fuel=100.0),
    'cockpit': dict(width=50.0, height=50.0, mass=1.5, drag=0.008, color=0xffffff,
                    image_key='horochi'),
    # Rare parts
    'superengine': dict(width=50.0, height=45.0, mass=2.5, drag=0.015, thrust=80.0,
                        angle=np.pi / 2, color=0xff0000, is_rare=True),
    'ultralightengine': dict(width=30.0, height=25.0, mass=0.3, drag=0.003,
                             thrust=35.0, angle=np.pi / 2, color=0x00ffff,
                             is_rare=True),
    'weight': dict(width=40.0, height=40.0, mass=30.0, drag=0.03, color=0x34495e,
                   is_rare=True),
    'ultralightnose': dict(width=30.0, height=40.0, mass=0.3, drag=0.002,
                           color=0xf39c12, stability=0.8, is_rare=True),
    'reinforcedbody': dict(width=50.0, height=60.0, mass=3.5, drag=0.015,
                           color=0x7f8c8d, is_rare=True),
    'megafueltank': dict(width=50.0, height=80.0, mass=5.0, drag=0.02,
                         color=0x16a085, fuel=500.0, is_rare=True),
    'largewing': dict(width=80.0, height=15.0, mass=1.5, drag=0.015,
                      color=0xe67e22, stability=0.9, is_rare=True),
    'microengine': dict(width=20.0, height=20.0, mass=0.2, drag=0.003, thrust=20.0,
                        angle=np.pi / 2, color=0xc0392b, is_rare=True),
    'dualengine': dict(width=70.0, height=40.0, mass=3.0, drag=0.018, thrust=60.0,
                       angle=np.pi / 2, color=0x8e44ad, is_rare=True),
    'stabilizer': dict(width=60.0, height=20.0, mass=1.0, drag=0.01,
                       color=0x2980b9, stability=1.5, is_rare=True),
    # Single-use payload parts, jettisoned together with the cockpit
    'redengine': dict(width=50.0, height=50.0, mass=50.0, drag=0.05,
                      angle=np.pi / 2, color=0xe74c3c),
    'redbody': dict(width=60.0, height=60.0, mass=100.0, drag=0.08, color=0xc0392b),
    'rednose': dict(width=40.0, height=40.0, mass=20.0, drag=0.03, color=0xe74c3c),
}

# Fallbacks for fields a catalog entry does not set
DEFAULT_PART_SIZE = 40.0
DEFAULT_PART_MASS = 1.0
DEFAULT_PART_DRAG = 0.01
DEFAULT_PART_COLOR = 0xff6b6b

# Length of generated part / group ids
PART_ID_LENGTH = 9

# =============================================================================
# NUMERICAL TOLERANCES
# =============================================================================

ZERO_TOLERANCE = 1e-10
