"""
Rocket Launch Game - Composite Part Templates

Predefined multi-part blocks the editor can drop in one go. Instantiating a
template creates fresh parts that share one composite group id.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import numpy as np

from .parts import Part, PartType, create_part, generate_id

logger = logging.getLogger(__name__)

# Nominal footprint used for template bounds
_TEMPLATE_CELL = 40.0


@dataclass(frozen=True)
class PartSlot:
    """One part of a template, offset from the template centre."""
    type: PartType
    offset_x: float = 0.0
    offset_y: float = 0.0
    side: Optional[str] = None
    angle: Optional[float] = None

    def rotated(self) -> 'PartSlot':
        """Quarter turn clockwise on screen: (x, y) -> (y, -x)."""
        angle = self.angle
        if angle is not None:
            angle = (angle + np.pi / 2) % (2 * np.pi)
        side = self.side
        if self.type in (PartType.WING, PartType.LARGE_WING) and side is not None:
            side = 'right' if side == 'left' else 'left'
        return replace(self, offset_x=self.offset_y, offset_y=-self.offset_x,
                       angle=angle, side=side)


@dataclass(frozen=True)
class CompositeInstance:
    """Parts created by one template instantiation."""
    group_id: str
    name: str
    parts: Tuple[Part, ...]
    center_x: float
    center_y: float


@dataclass(frozen=True)
class CompositeTemplate:
    """
    Named block of parts.

    Attributes:
        name: Display name
        description: Short description
        slots: Part slots relative to the template centre
        tier: 'normal', 'rare' or 'modified'
        rotation_count: Quarter turns applied (0-3)
    """
    name: str
    description: str
    slots: Tuple[PartSlot, ...]
    tier: str = 'normal'
    rotation_count: int = 0

    def rotate(self) -> 'CompositeTemplate':
        """Template turned a quarter turn clockwise."""
        return replace(
            self,
            slots=tuple(slot.rotated() for slot in self.slots),
            rotation_count=(self.rotation_count + 1) % 4,
        )

    def instantiate(self, x: float, y: float) -> CompositeInstance:
        """
        Create the template's parts centred on (x, y) in the design frame.

        Args:
            x, y: Template centre

        Returns:
            CompositeInstance with a fresh group id
        """
        group_id = 'composite_' + generate_id()
        parts = []
        for slot in self.slots:
            overrides = {'group_id': group_id}
            if slot.side is not None:
                overrides['side'] = slot.side
            if slot.angle is not None:
                overrides['angle'] = slot.angle
            parts.append(create_part(slot.type, x + slot.offset_x, y + slot.offset_y,
                                     **overrides))
        logger.debug(f"Instantiated {self.name} as {group_id} ({len(parts)} parts)")
        return CompositeInstance(group_id, self.name, tuple(parts), float(x), float(y))

    def bounds(self) -> dict:
        """Approximate bounds of the slot offsets."""
        if not self.slots:
            return dict(min_x=0.0, max_x=0.0, min_y=0.0, max_y=0.0, width=0.0, height=0.0)
        half = _TEMPLATE_CELL / 2
        min_x = min(s.offset_x for s in self.slots) - half
        max_x = max(s.offset_x for s in self.slots) + half
        min_y = min(s.offset_y for s in self.slots) - half
        max_y = max(s.offset_y for s in self.slots) + half
        return dict(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y,
                    width=max_x - min_x, height=max_y - min_y)


def _template(name, description, slots, tier='normal') -> CompositeTemplate:
    return CompositeTemplate(
        name, description,
        tuple(PartSlot(PartType(t), *rest) for t, *rest in slots),
        tier,
    )


_DOWN = np.pi / 2

COCKPIT_TEMPLATE = _template('Cockpit', 'Pilot cockpit', [('cockpit', 0, 0)])

COMPOSITE_TEMPLATES: List[CompositeTemplate] = [
    _template('I Body', 'Three stacked bodies',
              [('body', 0, -50), ('body', 0, 0), ('body', 0, 50)]),
    _template('L Rocket', 'Nose and two bodies',
              [('nose', 0, -50), ('body', 0, 0), ('body', 0, 50)]),
    _template('T Fins', 'Body with a wing each side',
              [('body', 0, 0), ('wing', -40, 0, 'left'), ('wing', 40, 0, 'right')]),
    _template('Twin Engine', 'Two engines',
              [('engine', -25, 0, None, _DOWN), ('engine', 25, 0, None, _DOWN)]),
    _template('Basic Rocket', 'Complete small rocket',
              [('nose', 0, -50), ('body', 0, 0), ('engine', 0, 50, None, _DOWN)]),
    _template('Fuel Unit', 'Fuel tank and body',
              [('fueltank', 0, -30), ('body', 0, 30)]),
    _template('Engine Cluster', 'Three engines side by side',
              [('engine', -40, 0, None, _DOWN), ('engine', 0, 0, None, _DOWN),
               ('engine', 40, 0, None, _DOWN)]),
    _template('Nose Fins', 'Nose with stabilising wings',
              [('nose', 0, -25), ('wing', -35, 25, 'left'), ('wing', 35, 25, 'right')]),
    _template('Power Unit', 'Body, fuel tank and engine',
              [('body', 0, -45), ('fueltank', 0, 0), ('engine', 0, 50, None, _DOWN)]),
    _template('Thruster Unit', 'Body with side engines',
              [('body', 0, 0), ('engine', -40, 0, None, np.pi), ('engine', 40, 0, None, 0.0)]),
    _template('Long Body', 'Four stacked bodies',
              [('body', 0, -60), ('body', 0, -20), ('body', 0, 20), ('body', 0, 60)]),
    _template('Finned Engine', 'Engine with wings',
              [('engine', 0, 0, None, _DOWN), ('wing', -35, -20, 'left'),
               ('wing', 35, -20, 'right')]),
]

RARE_COMPOSITE_TEMPLATES: List[CompositeTemplate] = [
    _template('Super Booster', 'Super engine and body',
              [('superengine', 0, 0), ('body', 0, -40)], 'rare'),
    _template('Featherweight', 'Two ultralight engines and an ultralight nose',
              [('ultralightnose', 0, -40), ('ultralightengine', -25, 15),
               ('ultralightengine', 25, 15)], 'rare'),
    _template('Ballast', 'Weight and body',
              [('weight', 0, 0), ('body', 0, -40)], 'rare'),
    _template('Steady Flyer', 'Stabilizer and large wing',
              [('stabilizer', 0, 0), ('largewing', 0, 20, 'left')], 'rare'),
    _template('Twin Turbo', 'Dual engine and mega tank',
              [('dualengine', 0, 0), ('megafueltank', 0, -60)], 'rare'),
    _template('Mega Tanker', 'Mega tank and reinforced body',
              [('megafueltank', 0, 0), ('reinforcedbody', 0, -80)], 'rare'),
    _template('Micro Cluster', 'Three micro engines',
              [('microengine', 0, 0), ('microengine', -25, 0), ('microengine', 25, 0)],
              'rare'),
    _template('Heavy Duty', 'Weight, reinforced body and super engine',
              [('weight', 0, -40), ('reinforcedbody', 0, 0), ('superengine', 0, 60)],
              'rare'),
    _template('Ultimate Stability', 'Ultralight nose, stabilizer and large wing',
              [('ultralightnose', 0, -40), ('stabilizer', 0, 0),
               ('largewing', 0, 20, 'left')], 'rare'),
    _template('Hybrid Rocket', 'Super engine, ultralight engine and mega tank',
              [('superengine', -30, 40), ('ultralightengine', 30, 40),
               ('megafueltank', 0, -30)], 'rare'),
]

MODIFIED_COMPOSITE_TEMPLATES: List[CompositeTemplate] = [
    _template('Quad Thruster', 'Four super engines',
              [('superengine', -40, 0, None, _DOWN), ('superengine', 40, 0, None, _DOWN),
               ('superengine', 0, -40, None, _DOWN), ('superengine', 0, 40, None, _DOWN)],
              'modified'),
    _template('Hexa Booster', 'Six ultralight engines',
              [('ultralightengine', -50, -30), ('ultralightengine', 0, -30),
               ('ultralightengine', 50, -30), ('ultralightengine', -50, 30),
               ('ultralightengine', 0, 30), ('ultralightengine', 50, 30)], 'modified'),
    _template('Triple Dual', 'Three dual engines',
              [('dualengine', -50, 0), ('dualengine', 0, 0), ('dualengine', 50, 0)],
              'modified'),
    _template('Heavy Striker', 'Super engine and two weights',
              [('superengine', 0, 40, None, _DOWN), ('weight', -40, -20),
               ('weight', 40, -20)], 'modified'),
    _template('Dual Mega Tank', 'Two mega tanks',
              [('megafueltank', -30, 0), ('megafueltank', 30, 0)], 'modified'),
    _template('Mega Thruster', 'Two super engines and a mega tank',
              [('superengine', -30, 40, None, _DOWN), ('superengine', 30, 40, None, _DOWN),
               ('megafueltank', 0, -40)], 'modified'),
]


def all_templates() -> List[CompositeTemplate]:
    """Cockpit first, then every tier."""
    return ([COCKPIT_TEMPLATE] + COMPOSITE_TEMPLATES + RARE_COMPOSITE_TEMPLATES
            + MODIFIED_COMPOSITE_TEMPLATES)


def find_template(name: str) -> Optional[CompositeTemplate]:
    """Template by case-insensitive name."""
    wanted = name.strip().lower()
    return next((t for t in all_templates() if t.name.lower() == wanted), None)
