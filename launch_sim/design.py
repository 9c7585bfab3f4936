"""
Rocket Launch Game - Rocket Design

A Design is the ordered, id-unique part list built in the editor together with
its memoized mass properties. Aggregates are recomputed after every mutation.
Unknown ids and duplicate adds are ignored rather than raised, so the editor
can call these operations freely.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from . import constants as C
from .mass import MassProperties, compute_mass_properties
from .parts import Part, PartType

logger = logging.getLogger(__name__)

DEFAULT_DESIGN_NAME = 'My Rocket'


@dataclass(frozen=True)
class DesignSnapshot:
    """Immutable view of a design taken at launch time."""
    name: str
    parts: Tuple[Part, ...]
    # Derived from parts; left out of equality and hashing
    properties: MassProperties = field(compare=False)

    def has_cockpit(self) -> bool:
        return any(p.is_cockpit for p in self.parts)

    def has_type(self, part_type: PartType) -> bool:
        return any(p.type is part_type for p in self.parts)

    def count(self, part_type: PartType) -> int:
        return sum(1 for p in self.parts if p.type is part_type)

    def first(self, part_type: PartType) -> Optional[Part]:
        return next((p for p in self.parts if p.type is part_type), None)


class Design:
    """
    Editable rocket design.

    Attributes:
        name: Display name
        parts: Ordered parts (read-only tuple view)
        properties: Current aggregates (MassProperties)
    """

    def __init__(self, parts: Iterable[Part] = (), name: str = DEFAULT_DESIGN_NAME):
        self.name = name
        self._parts: List[Part] = []
        for part in parts:
            self._append(part)
        self._properties = compute_mass_properties(self._parts)

    # --- Read access -------------------------------------------------------

    @property
    def parts(self) -> Tuple[Part, ...]:
        return tuple(self._parts)

    @property
    def properties(self) -> MassProperties:
        return self._properties

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self):
        return iter(tuple(self._parts))

    def __contains__(self, part_id) -> bool:
        return self._index_of(part_id) is not None

    def get_part(self, part_id: str) -> Optional[Part]:
        """Part with the given id, or None."""
        index = self._index_of(part_id)
        return None if index is None else self._parts[index]

    def has_cockpit(self) -> bool:
        return any(p.is_cockpit for p in self._parts)

    def count(self, part_type: PartType) -> int:
        return sum(1 for p in self._parts if p.type is part_type)

    def snapshot(self) -> DesignSnapshot:
        """Freeze the current parts and aggregates."""
        return DesignSnapshot(self.name, tuple(self._parts), self._properties)

    # Aggregate shortcuts
    @property
    def total_mass(self) -> float:
        return self._properties.total_mass

    @property
    def center_of_mass(self):
        return self._properties.center_of_mass.copy()

    @property
    def moment_of_inertia(self) -> float:
        return self._properties.moment_of_inertia

    @property
    def torque(self) -> float:
        return self._properties.torque

    @property
    def thrust_vector(self):
        return self._properties.thrust_vector.copy()

    # --- Mutation ----------------------------------------------------------

    def add_part(self, part: Part) -> MassProperties:
        """Append a part. A part whose id is already present is ignored."""
        if self._append(part):
            self.recompute()
        return self._properties

    def add_parts(self, parts: Iterable[Part]) -> MassProperties:
        """Append several parts (e.g. an instantiated composite) at once."""
        added = [self._append(part) for part in parts]
        if any(added):
            self.recompute()
        return self._properties

    def remove_part(self, part_id: str) -> MassProperties:
        """Remove a part by id; unknown ids are a no-op."""
        index = self._index_of(part_id)
        if index is None:
            logger.debug(f"remove_part: no part with id {part_id!r}")
            return self._properties
        del self._parts[index]
        self.recompute()
        return self._properties

    def remove_group(self, group_id: str) -> MassProperties:
        """Remove every part of one composite instance."""
        kept = [p for p in self._parts if p.group_id != group_id or group_id is None]
        if len(kept) != len(self._parts):
            self._parts = kept
            self.recompute()
        return self._properties

    def move_part(self, part_id: str, x: float, y: float) -> MassProperties:
        """
        Place a part at a new design-frame position.

        Parts are immutable, so the stored entry is replaced by a moved copy
        and a fresh aggregate snapshot is returned.
        """
        index = self._index_of(part_id)
        if index is None:
            logger.debug(f"move_part: no part with id {part_id!r}")
            return self._properties
        self._parts[index] = self._parts[index].moved_to(x, y)
        self.recompute()
        return self._properties

    def clear_parts(self) -> MassProperties:
        """Remove every part."""
        self._parts = []
        self.recompute()
        return self._properties

    def recompute(self) -> MassProperties:
        """Rebuild the memoized aggregates from the current parts."""
        self._properties = compute_mass_properties(self._parts)
        return self._properties

    # --- Serialization -----------------------------------------------------

    def to_dict(self) -> dict:
        """Persistence record: name, flat part list, size and physics."""
        props = self._properties
        return {
            'name': self.name,
            'parts': [p.to_dict() for p in self._parts],
            'size': {'width': props.width, 'height': props.height},
            'physics': {
                'frictionAir': props.air_friction,
                'density': props.density,
                'minSpeed': C.MIN_LAUNCH_SPEED,
                'maxSpeed': props.max_speed,
                'speedMultiplier': C.SPEED_MULTIPLIER,
            },
        }

    @classmethod
    def from_dict(cls, record: dict) -> 'Design':
        """
        Rebuild a design from a persistence record.

        Size and physics are derived again from the parts rather than trusted
        from the record. Records with an unknown part type are skipped.
        """
        parts = []
        for part_record in record.get('parts') or []:
            part = Part.from_dict(part_record)
            if part is not None:
                parts.append(part)
        return cls(parts, name=record.get('name') or DEFAULT_DESIGN_NAME)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> 'Design':
        return cls.from_dict(json.loads(text))

    # --- Internals ---------------------------------------------------------

    def _index_of(self, part_id) -> Optional[int]:
        for i, part in enumerate(self._parts):
            if part.id == part_id:
                return i
        return None

    def _append(self, part: Part) -> bool:
        if self._index_of(part.id) is not None:
            logger.debug(f"add_part: duplicate id {part.id!r} ignored")
            return False
        self._parts.append(part)
        return True

    def __repr__(self) -> str:
        props = self._properties
        return (
            f"Design(name={self.name!r}, parts={len(self._parts)}, "
            f"mass={props.total_mass:.2f}, thrust={props.total_thrust:.1f})"
        )
