"""
Atom entity: damped 2D motion, chemistry-derived styling and bond queries.

Units are whatever the owning loop uses: velocity is displacement per unit of
`delta`, sizes are pixels. Bonds are never stored on the atom; every bond query
takes the current bond list explicitly.
"""

from __future__ import annotations

import colorsys
import logging
import math
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from atomlab.elements import ELEMENTS, Isotope
from atomlab.ids import generate_atom_id
from atomlab.vector import Vector2

if TYPE_CHECKING:  # pragma: no cover
    from atomlab.bond import Bond
    from atomlab.ui.canvas import RenderSurface

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

DEFAULT_SIZE = 25.0
DEFAULT_FRICTION = 1.0
DEFAULT_SIZE_MASS = 1.0
DEFAULT_DAMPING_MASS = 2.0
DAMPING_SCALE = 20.0
REST_SPEED = 1e-5
GOLDEN_ANGLE_DEGREES = 137.508
SELECTION_BORDER = 5.0
RING_WIDTH = 3
RANDOM_REGION = 500.0
MAX_SUBSTEPS = 1000

WHITE: Color = (255, 255, 255)
DEFAULT_STYLE_COLOR: Color = (0, 149, 221)
LOW_ELECTRONEGATIVITY_COLOR: Color = (116, 215, 127)
MODERATE_ELECTRONEGATIVITY_COLOR: Color = (255, 241, 118)
HIGH_ELECTRONEGATIVITY_COLOR: Color = (255, 112, 67)


@dataclass
class AtomProperties:
    atomic_number: Optional[int] = None
    atomic_mass: Optional[float] = None
    symbol: Optional[str] = None
    electron_configuration: Optional[str] = None
    atomic_radius: Optional[float] = None
    electronegativity: Optional[float] = None
    ionization_energy: Optional[float] = None
    electron_affinity: Optional[float] = None
    oxidation_state: Optional[int] = None
    protons: Optional[int] = None
    neutrons: Optional[int] = None
    electrons: Optional[int] = None
    isotopes: List[Isotope] = field(default_factory=list)


@dataclass
class AtomStyle:
    color: Color = DEFAULT_STYLE_COLOR
    atomic_number_size: float = 10.0
    symbol_font_size: float = 24.0
    atomic_mass_size: float = 8.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def hue_color(atomic_number: Optional[int]) -> Color:
    """hsl(atomic_number * golden angle, 50%, 50%) as an RGB triple."""
    hue = ((atomic_number or 0) * GOLDEN_ANGLE_DEGREES) % 360.0
    red, green, blue = colorsys.hls_to_rgb(hue / 360.0, 0.5, 0.5)
    return (round(red * 255), round(green * 255), round(blue * 255))


class Atom:
    def __init__(
        self,
        position: Optional[Vector2] = None,
        velocity: Optional[Vector2] = None,
        size: Optional[float] = None,
        id: Optional[str] = None,
        friction: Optional[float] = None,
        properties: Optional[AtomProperties] = None,
    ):
        self.position = position if position is not None else Vector2.zero()
        self.velocity = velocity if velocity is not None else Vector2.zero()
        self.selected = False
        self.size = size if size is not None else DEFAULT_SIZE
        self.id = id or generate_atom_id()
        self.friction = friction if friction is not None else DEFAULT_FRICTION
        self.properties = properties if properties is not None else AtomProperties()

        mass = self.properties.atomic_mass
        size_mass = mass if mass and mass > 0 else DEFAULT_SIZE_MASS
        self.size += size_mass ** 1.2 / 10
        if mass and mass <= 1:
            logger.warning(
                "Atom %s has atomic mass %s <= 1; damping uses mass %s instead.",
                self.id,
                mass,
                DEFAULT_DAMPING_MASS,
            )

    def __repr__(self) -> str:
        symbol = self.properties.symbol or "?"
        return f"Atom(id={self.id!r}, symbol={symbol!r}, position={self.position.to_tuple()})"

    def get_animated_size(self) -> float:
        speed = self.velocity.length()
        return self.size * (1 + min(speed, self.size * 2) / (self.size * 10))

    def get_style(self) -> AtomStyle:
        """Derive presentation parameters from the current properties."""
        properties = self.properties
        style = AtomStyle()

        if properties.electronegativity:
            electronegativity = properties.electronegativity
            if electronegativity <= 1.0:
                style.color = LOW_ELECTRONEGATIVITY_COLOR
            elif electronegativity <= 2.0:
                style.color = MODERATE_ELECTRONEGATIVITY_COLOR
            else:
                style.color = HIGH_ELECTRONEGATIVITY_COLOR

        if properties.atomic_number:
            style.atomic_number_size = _clamp(properties.atomic_number / 10, 8, 20)

        if properties.atomic_mass:
            style.atomic_mass_size = _clamp(properties.atomic_mass / 40, 6, 14)

        if properties.symbol:
            style.symbol_font_size = _clamp(style.symbol_font_size + len(properties.symbol) * 2, 16, 32)

        return style

    def draw(self, surface: "RenderSurface", selected: Optional[bool] = None) -> None:
        """Emit ring, disc and symbol draw calls onto a rendering surface."""
        if selected is None:
            selected = self.selected
        style = self.get_style()
        radius = self.get_animated_size()
        border_spacing = SELECTION_BORDER if selected else 0.0
        color = hue_color(self.properties.atomic_number)
        center = self.position.to_tuple()

        surface.stroke_circle(center, radius + border_spacing, WHITE if selected else color, RING_WIDTH)
        surface.fill_circle(center, radius, color)

        if self.properties.symbol:
            baseline = self.position.y + style.symbol_font_size / 4 + 2
            surface.draw_text(self.properties.symbol, self.position.x, baseline, style.symbol_font_size, WHITE)

    def damping_factor(self) -> float:
        """20 / ln(mass); masses at or below 1 fall back to the default damping mass."""
        mass = self.properties.atomic_mass or DEFAULT_DAMPING_MASS
        if mass <= 1:
            mass = DEFAULT_DAMPING_MASS
        return DAMPING_SCALE / math.log(mass)

    def calc_position(self, delta: float) -> None:
        """
        Advance one frame of damped semi-implicit Euler integration.

        A frame whose decay `delta * k * friction` exceeds 1 is split into
        equal substeps so each substep keeps the velocity multiplier in [0, 1].
        """
        if self.velocity.length() < REST_SPEED:
            self.velocity = Vector2.zero()
            return

        step = delta * self.damping_factor()
        decay = step * self.friction
        substeps = min(MAX_SUBSTEPS, math.ceil(decay)) if decay > 1 else 1
        sub_step = step / substeps
        for _ in range(substeps):
            retained = 1.0 - self.friction * sub_step
            if substeps == MAX_SUBSTEPS and retained < 0:
                # Out of substeps: stop rather than overshoot.
                retained = 0.0
            self.velocity = self.velocity.scale(retained)
            # Semi-implicit: displacement uses the already damped velocity.
            self.position = self.position.add(self.velocity.scale(sub_step))

    def is_bonded_with(self, bonds: Iterable["Bond"], other: "Atom") -> bool:
        return any(bond.involves(self, other) for bond in bonds)

    @staticmethod
    def calculate_angle(bonds: Iterable["Bond"], atom1: "Atom", atom2: "Atom", atom3: "Atom") -> Optional[float]:
        """
        Angle in degrees at atom2 from ray atom2->atom1 to ray atom2->atom3.

        Returns None unless the three atoms form a closed bonded triangle
        (atom1-atom2, atom2-atom3 and atom3-atom1 all bonded). The result lies in
        [0, 360) and grows from +x towards +y. On a y-down screen that sweep is
        clockwise.
        """
        bonds = list(bonds)
        connected = (
            atom1.is_bonded_with(bonds, atom2)
            and atom2.is_bonded_with(bonds, atom3)
            and atom3.is_bonded_with(bonds, atom1)
        )
        if not connected:
            return None
        return ray_angle(atom2.position, atom1.position, atom3.position)

    @staticmethod
    def generate_random_atom(
        position: Optional[Vector2] = None, rng: Optional[random.Random] = None
    ) -> "Atom":
        chooser = rng or random
        element = chooser.choice(ELEMENTS)
        if position is None:
            position = Vector2(chooser.random() * RANDOM_REGION, chooser.random() * RANDOM_REGION)
        return Atom(
            position=position,
            properties=AtomProperties(
                atomic_number=element.number,
                atomic_mass=element.weight,
                symbol=element.symbol,
            ),
        )


def ray_angle(vertex: Vector2, first: Vector2, second: Vector2) -> float:
    """Angle in degrees, [0, 360), swept from vertex->first to vertex->second."""
    vector1 = first.subtract(vertex)
    vector2 = second.subtract(vertex)
    radians = math.atan2(vector2.y, vector2.x) - math.atan2(vector1.y, vector1.x)
    if radians < 0:
        radians += 2 * math.pi
    degrees = math.degrees(radians)
    # -tiny + 2*pi can round up to a full turn.
    return 0.0 if degrees >= 360.0 else degrees
