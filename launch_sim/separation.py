"""
Rocket Launch Game - Cockpit Separation

This module implements the single-use cockpit jettison. The cockpit (and any
payload parts) leave the rocket with the parent's velocity, the tangential
velocity of the spin and an ejection impulse scaled by the charge. The rest of
the rocket recoils in proportion to the mass ratio.

The ejection impulse is energy the player injects; it is not balanced
against the recoil.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .frames import tangential_velocity, unit_vector
from .parts import Part
from .state import FlightState

logger = logging.getLogger(__name__)


# =============================================================================
# CHARGE FORMULAS
# =============================================================================

def compute_jettison_speed(charge: float, config: SimulationConfig = None) -> float:
    """
    Recoil speed scale of the remainder.

    1 at the minimum charge, 3 at the maximum:
        speed = 1 + ((charge - 30) / 70) * 2
    """
    config = config or create_default_config()
    span = config.separation_max_charge - config.separation_min_charge
    fraction = (charge - config.separation_min_charge) / span
    return C.JETTISON_BASE_SPEED + fraction * C.JETTISON_SPEED_RANGE


def compute_thrust_multiplier(charge: float, perfect: bool = False,
                              config: SimulationConfig = None) -> float:
    """
    Cockpit ejection multiplier.

    charge / 100 + 1, plus the perfect bonus when the release was perfect and
    the charge reached the perfect threshold.

    Examples:
        >>> compute_thrust_multiplier(100, perfect=True)
        3.0
        >>> compute_thrust_multiplier(99)
        1.99
    """
    config = config or create_default_config()
    multiplier = charge / config.separation_max_charge + 1.0
    if perfect and charge >= config.perfect_charge_threshold:
        multiplier += config.perfect_separation_bonus
    return multiplier


# =============================================================================
# EJECTED BODIES
# =============================================================================

@dataclass
class EjectedBody:
    """
    A free body that left the rocket.

    Attributes:
        kind: 'cockpit', 'payload' or 'composite' (merged cockpit + payload)
        parts: Parts carried by this body
        state: Independent kinematic state
    """
    kind: str
    parts: Tuple[Part, ...]
    state: FlightState = field(default_factory=FlightState)

    @property
    def mass(self) -> float:
        return float(sum(p.mass for p in self.parts))

    @property
    def position(self) -> np.ndarray:
        return self.state.position

    @property
    def velocity(self) -> np.ndarray:
        return self.state.velocity

    @property
    def angular_velocity(self) -> float:
        return self.state.angular_velocity


@dataclass(frozen=True, eq=False)
class SeparationResult:
    """Outcome of a successful separation."""
    cockpit: EjectedBody
    payload: Tuple[EjectedBody, ...]
    charge: float
    perfect: bool
    thrust_multiplier: float
    jettison_speed: float
    ejected_mass: float
    remainder_mass: float
    recoil: np.ndarray


# =============================================================================
# SEPARATION ENGINE
# =============================================================================

class SeparationEngine:
    """
    Single-use cockpit separation for one flight.

    Attributes:
        separation_count: 0 before separation, 1 after
        ejected: Ejected bodies (cockpit first, then payload; a single
            composite body once merged)
        merged: Whether cockpit and payload have been merged
    """

    def __init__(self, config: SimulationConfig = None):
        self.config = config or create_default_config()
        self.reset()

    def reset(self) -> None:
        """Clear the separation state for a retry."""
        self.separation_count = 0
        self.ejected: Tuple[EjectedBody, ...] = ()
        self.merged = False
        self.elapsed = 0.0
        self.last_result: Optional[SeparationResult] = None

    @property
    def is_separated(self) -> bool:
        return self.separation_count > 0

    @property
    def cockpit(self) -> Optional[EjectedBody]:
        """The body carrying the cockpit, if separated."""
        return self.ejected[0] if self.ejected else None

    def can_separate(self, body, charge: float) -> bool:
        """Whether separate_cockpit would act."""
        return (
            self.separation_count == 0
            and body.is_launched
            and body.has_cockpit()
            and charge >= self.config.separation_min_charge
        )

    def separate_cockpit(self, body, charge: float,
                         perfect: bool = False) -> Optional[SeparationResult]:
        """
        Jettison the cockpit (and payload parts) from a flying body.

        Does nothing and returns None when already separated, when the body is
        grounded or has no cockpit, or when the charge is below the minimum.

        Args:
            body: Launched FlightBody
            charge: Gauge charge (30-100)
            perfect: Released on the tick the gauge filled

        Returns:
            SeparationResult, or None for a no-op
        """
        if not self.can_separate(body, charge):
            logger.debug(
                f"separate_cockpit ignored: count={self.separation_count} "
                f"launched={body.is_launched} cockpit={body.has_cockpit()} charge={charge}"
            )
            return None

        config = self.config
        charge = min(float(charge), config.separation_max_charge)
        cockpits = tuple(p for p in body.snapshot.parts if p.is_cockpit)
        payload = tuple(p for p in body.snapshot.parts if p.is_payload)

        cockpit_mass = sum(p.mass if p.mass > 0 else C.DEFAULT_COCKPIT_MASS for p in cockpits)
        ejected_mass = cockpit_mass + sum(p.mass for p in payload)
        remainder_mass = max(body.mass - ejected_mass, config.min_remainder_mass)

        jettison_speed = compute_jettison_speed(charge, config)
        multiplier = compute_thrust_multiplier(charge, perfect, config)
        # A quarter turn back from the heading
        direction = unit_vector(body.angle - np.pi / 2)
        omega = body.angular_velocity
        parent_velocity = body.velocity
        parent_position = body.position

        def spawn(kind, part, impulse):
            offset = body.part_offset(part)
            velocity = parent_velocity + tangential_velocity(omega, offset) + impulse
            state = FlightState(
                position=parent_position + offset,
                velocity=velocity,
                angle=body.angle,
                angular_velocity=omega * config.angular_velocity_inheritance,
                launched=True,
            )
            return EjectedBody(kind, (part,), state)

        # Extra cockpits ride along like payload
        cockpit_body = spawn('cockpit', cockpits[0],
                             direction * config.ejection_base_impulse * multiplier)
        payload_bodies = tuple(spawn('payload', p, np.zeros(2))
                               for p in cockpits[1:] + payload)

        recoil = -direction * jettison_speed * (ejected_mass / remainder_mass)
        body.detach([p.id for p in cockpits + payload])
        body.apply_velocity_change(recoil)

        self.separation_count += 1
        self.ejected = (cockpit_body,) + payload_bodies
        self.merged = not payload_bodies
        self.elapsed = 0.0

        result = SeparationResult(
            cockpit=cockpit_body,
            payload=payload_bodies,
            charge=charge,
            perfect=bool(perfect and charge >= config.perfect_charge_threshold),
            thrust_multiplier=multiplier,
            jettison_speed=jettison_speed,
            ejected_mass=ejected_mass,
            remainder_mass=remainder_mass,
            recoil=recoil,
        )
        self.last_result = result

        logger.info(
            f"Cockpit separated: charge={charge:.0f} multiplier={multiplier:.2f} "
            f"payload={len(payload_bodies)} recoil=|{np.linalg.norm(recoil):.3f}|"
        )
        logger.debug(
            f"Momentum: ejected={ejected_mass:.2f} remainder={remainder_mass:.2f} "
            f"cockpit v=({cockpit_body.velocity[0]:.2f}, {cockpit_body.velocity[1]:.2f})"
        )
        return result

    def advance(self, dt: float) -> bool:
        """
        Advance the post-separation clock.

        Once the merge delay has passed, the cockpit and payload bodies are
        merged into one composite body that keeps the cockpit's velocity and
        spin.

        Args:
            dt: Elapsed time (s)

        Returns:
            True if the merge happened during this call
        """
        if not self.is_separated or self.merged:
            return False
        self.elapsed += dt
        if self.elapsed < self.config.payload_merge_delay:
            return False

        cockpit = self.ejected[0]
        parts = tuple(p for body in self.ejected for p in body.parts)
        masses = np.array([max(b.mass, C.ZERO_TOLERANCE) for b in self.ejected])
        positions = np.array([b.position for b in self.ejected])
        centroid = (positions * masses[:, None]).sum(axis=0) / masses.sum()

        composite = EjectedBody('composite', parts, FlightState(
            position=centroid,
            velocity=cockpit.velocity.copy(),
            angle=cockpit.state.angle,
            angular_velocity=cockpit.angular_velocity,
            launched=True,
        ))
        self.ejected = (composite,)
        self.merged = True
        logger.info(f"Merged cockpit with {len(parts) - 1} payload part(s)")
        return True


# =============================================================================
# CHARGE GAUGE
# =============================================================================

class ChargeGauge:
    """
    Hold-to-charge separation gauge.

    The gauge fills by the charge rate on every held tick up to the maximum.
    A release is perfect when the gauge crossed the perfect threshold on the
    very tick before the release.
    """

    def __init__(self, config: SimulationConfig = None):
        self.config = config or create_default_config()
        self.charge = 0.0
        self._filled_this_tick = False

    @property
    def fraction(self) -> float:
        return self.charge / self.config.separation_max_charge

    @property
    def is_full(self) -> bool:
        return self.charge >= self.config.separation_max_charge

    def tick(self, holding: bool, active: bool = True) -> float:
        """
        Advance one frame.

        Args:
            holding: Whether the input is held this frame
            active: Whether charging is allowed (launched and not separated)

        Returns:
            Current charge
        """
        previous = self.charge
        if holding and active:
            self.charge = min(self.config.separation_max_charge,
                              self.charge + self.config.separation_charge_rate)
        threshold = self.config.perfect_charge_threshold
        self._filled_this_tick = previous < threshold <= self.charge
        return self.charge

    def release(self) -> Tuple[float, bool]:
        """
        Let go of the input.

        Returns:
            (charge, perfect); the gauge is emptied
        """
        result = (self.charge, self._filled_this_tick)
        self.reset()
        return result

    def reset(self) -> None:
        self.charge = 0.0
        self._filled_this_tick = False
