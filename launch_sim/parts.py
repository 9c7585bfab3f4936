"""
Rocket Launch Game - Rocket Parts

A part is the atomic building block of a rocket design. Part kinds are a
tagged variant: one PartType enum plus a shared immutable record with optional
type-specific fields (side, fuel, stability, image key).
"""

import logging
import random
import string
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

import numpy as np

from . import constants as C
from .frames import (
    design_to_sim, design_size_to_sim, design_angle_to_sim, polar_vector,
)
from .types import PartRecord

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


class PartType(str, Enum):
    """Every kind of part the editor can place."""
    NOSE = 'nose'
    BODY = 'body'
    WING = 'wing'
    ENGINE = 'engine'
    FUEL_TANK = 'fueltank'
    COCKPIT = 'cockpit'
    # Rare variants
    SUPER_ENGINE = 'superengine'
    ULTRALIGHT_ENGINE = 'ultralightengine'
    WEIGHT = 'weight'
    ULTRALIGHT_NOSE = 'ultralightnose'
    REINFORCED_BODY = 'reinforcedbody'
    MEGA_FUEL_TANK = 'megafueltank'
    LARGE_WING = 'largewing'
    MICRO_ENGINE = 'microengine'
    DUAL_ENGINE = 'dualengine'
    STABILIZER = 'stabilizer'
    # Payload, ejected with the cockpit
    RED_ENGINE = 'redengine'
    RED_BODY = 'redbody'
    RED_NOSE = 'rednose'

    @classmethod
    def parse(cls, value) -> Optional['PartType']:
        """Return the PartType for value, or None if it is not a known type."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


ENGINE_TYPES = frozenset({
    PartType.ENGINE,
    PartType.SUPER_ENGINE,
    PartType.ULTRALIGHT_ENGINE,
    PartType.MICRO_ENGINE,
    PartType.DUAL_ENGINE,
})

PAYLOAD_TYPES = frozenset({
    PartType.RED_ENGINE,
    PartType.RED_BODY,
    PartType.RED_NOSE,
})


def generate_id(length: int = C.PART_ID_LENGTH) -> str:
    """Random base-36 identifier."""
    return ''.join(random.choices(_ID_ALPHABET, k=length))


@dataclass(frozen=True)
class Part:
    """
    One placed rocket part.

    Attributes:
        id: Unique identifier within a design
        type: Part kind
        x, y: Centre in the design frame
        width, height: Size in the design frame
        mass: Part mass
        drag: Per-part drag coefficient
        thrust: Thrust magnitude (engines only, 0 otherwise)
        angle: Mount angle (rad), direction the nozzle points
        color: Display colour (0xRRGGBB)
        side: Wing side, 'left' or 'right'
        group_id: Composite template instance this part belongs to
        fuel: Fuel capacity (tanks)
        stability: Stability rating (rare fins / noses)
        image_key: Sprite key (cockpit)
        is_rare: Unlocked through trophies
    """
    type: PartType
    x: float = 0.0
    y: float = 0.0
    width: float = C.DEFAULT_PART_SIZE
    height: float = C.DEFAULT_PART_SIZE
    mass: float = C.DEFAULT_PART_MASS
    drag: float = C.DEFAULT_PART_DRAG
    thrust: float = 0.0
    angle: float = 0.0
    color: int = C.DEFAULT_PART_COLOR
    side: Optional[str] = None
    group_id: Optional[str] = None
    fuel: Optional[float] = None
    stability: Optional[float] = None
    image_key: Optional[str] = None
    is_rare: bool = False
    id: str = field(default_factory=generate_id)

    def __post_init__(self):
        """Coerce numeric fields and enforce the engine-only thrust rule."""
        object.__setattr__(self, 'type', PartType(self.type))
        for attr in ('x', 'y', 'width', 'height', 'mass', 'drag', 'thrust', 'angle'):
            object.__setattr__(self, attr, float(getattr(self, attr)))
        if self.type not in ENGINE_TYPES and self.thrust != 0.0:
            object.__setattr__(self, 'thrust', 0.0)

    @property
    def is_engine(self) -> bool:
        return self.type in ENGINE_TYPES

    @property
    def is_payload(self) -> bool:
        return self.type in PAYLOAD_TYPES

    @property
    def is_cockpit(self) -> bool:
        return self.type is PartType.COCKPIT

    # --- Simulation-frame views --------------------------------------------

    @property
    def sim_position(self) -> np.ndarray:
        """Centre in the simulation frame."""
        return design_to_sim(self.x, self.y)

    @property
    def sim_size(self) -> tuple:
        """(width, height) in the simulation frame."""
        return design_size_to_sim(self.width, self.height)

    @property
    def sim_angle(self) -> float:
        """Mount angle in the simulation frame."""
        return design_angle_to_sim(self.angle)

    def thrust_vector(self) -> np.ndarray:
        """
        Design-frame thrust. The exhaust leaves along the mount angle, so the
        push is opposite it (angle + pi).
        """
        if not self.is_engine:
            return np.zeros(2)
        return polar_vector(self.angle + np.pi, self.thrust)

    def sim_thrust_vector(self) -> np.ndarray:
        """Simulation-frame thrust."""
        if not self.is_engine:
            return np.zeros(2)
        return polar_vector(self.sim_angle + np.pi, self.thrust)

    def moved_to(self, x: float, y: float) -> 'Part':
        """Copy of this part at a new design-frame position."""
        return replace(self, x=float(x), y=float(y))

    # --- Serialization -----------------------------------------------------

    def to_dict(self) -> PartRecord:
        """Flat record in the persistence format."""
        record: PartRecord = {
            'id': self.id,
            'type': self.type.value,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'color': self.color,
            'mass': self.mass,
            'thrust': self.thrust,
            'drag': self.drag,
            'angle': self.angle,
            'compositeGroupId': self.group_id,
        }
        if self.side is not None:
            record['side'] = self.side
        if self.fuel is not None:
            record['fuel'] = self.fuel
        if self.stability is not None:
            record['stability'] = self.stability
        if self.image_key is not None:
            record['imageKey'] = self.image_key
        if self.is_rare:
            record['isRare'] = True
        return record

    @classmethod
    def from_dict(cls, record: PartRecord) -> Optional['Part']:
        """
        Build a part from a flat record. Missing fields fall back to the
        catalog defaults of its type.

        Returns:
            The part, or None when the record has an unknown type.
        """
        part_type = PartType.parse(record.get('type'))
        if part_type is None:
            logger.warning(f"Skipping part with unknown type: {record.get('type')!r}")
            return None

        overrides = {}
        for key, attr in _RECORD_FIELDS.items():
            value = record.get(key)
            if value is not None:
                overrides[attr] = value
        return create_part(part_type, **overrides)


# Persistence key -> Part attribute
_RECORD_FIELDS = {
    'id': 'id',
    'x': 'x',
    'y': 'y',
    'width': 'width',
    'height': 'height',
    'color': 'color',
    'mass': 'mass',
    'thrust': 'thrust',
    'drag': 'drag',
    'angle': 'angle',
    'compositeGroupId': 'group_id',
    'side': 'side',
    'fuel': 'fuel',
    'stability': 'stability',
    'imageKey': 'image_key',
    'isRare': 'is_rare',
}


def create_part(part_type, x: float = 0.0, y: float = 0.0, **overrides) -> Part:
    """
    Create a part with the catalog defaults of its type.

    Args:
        part_type: PartType or its string value
        x, y: Design-frame centre
        **overrides: Any Part field to replace the catalog value

    Returns:
        New Part
    """
    part_type = PartType(part_type)
    spec = dict(C.PART_CATALOG.get(part_type.value, {}))
    spec.update(overrides)
    return Part(type=part_type, x=x, y=y, **spec)
