"""
Sandbox owning the atom and bond collections.

The atom core never mutates topology; this class is the single owner that adds
and removes atoms and bonds between frames, advances every atom once per frame
and answers angle queries against its own bond list.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from atomlab.atom import Atom, ray_angle
from atomlab.bond import Bond
from atomlab.vector import Vector2

if TYPE_CHECKING:  # pragma: no cover
    from atomlab.ui.canvas import RenderSurface

logger = logging.getLogger(__name__)

BOND_COLOR = (180, 180, 180)
BOND_WIDTH = 2


@dataclass
class SandboxSettings:
    world_width: float = 500.0
    world_height: float = 500.0
    speed_multiplier: float = 1.0


@dataclass
class AtomState:
    id: str
    symbol: Optional[str]
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    size: float
    selected: bool


@dataclass
class SandboxSnapshot:
    step_count: int
    elapsed: float
    atoms: List[AtomState]
    bonds: List[Tuple[str, str]] = field(default_factory=list)


class Sandbox:
    def __init__(
        self,
        atoms: Iterable[Atom] = (),
        bonds: Iterable[Bond] = (),
        settings: Optional[SandboxSettings] = None,
    ):
        self.settings = settings or SandboxSettings()
        self.atoms: List[Atom] = []
        self.bonds: List[Bond] = []
        self.step_count: int = 0
        self.elapsed: float = 0.0
        for atom in atoms:
            self.add_atom(atom)
        for bond in bonds:
            self.add_bond(bond.atom1, bond.atom2)

    def add_atom(self, atom: Atom) -> Atom:
        if self._contains(atom):
            return atom
        self.atoms.append(atom)
        logger.debug("Added atom %s", atom.id)
        return atom

    def remove_atom(self, atom: Atom) -> bool:
        if not self._contains(atom):
            return False
        self.atoms = [existing for existing in self.atoms if existing is not atom]
        dropped = [bond for bond in self.bonds if bond.contains(atom)]
        self.bonds = [bond for bond in self.bonds if not bond.contains(atom)]
        logger.debug("Removed atom %s and %d bond(s)", atom.id, len(dropped))
        return True

    def get_atom(self, atom_id: str) -> Optional[Atom]:
        for atom in self.atoms:
            if atom.id == atom_id:
                return atom
        return None

    def add_bond(self, atom_a: Atom, atom_b: Atom) -> Bond:
        """Bond two sandbox atoms, reusing an existing bond for the same pair."""
        if atom_a is atom_b:
            raise ValueError(f"Cannot bond atom {atom_a.id} to itself.")
        for atom in (atom_a, atom_b):
            if not self._contains(atom):
                raise ValueError(f"Atom {atom.id} is not part of the sandbox.")
        existing = self._find_bond(atom_a, atom_b)
        if existing is not None:
            return existing
        bond = Bond(atom_a, atom_b)
        self.bonds.append(bond)
        logger.debug("Bonded %s-%s", atom_a.id, atom_b.id)
        return bond

    def remove_bond(self, atom_a: Atom, atom_b: Atom) -> bool:
        bond = self._find_bond(atom_a, atom_b)
        if bond is None:
            return False
        self.bonds = [existing for existing in self.bonds if existing is not bond]
        logger.debug("Unbonded %s-%s", atom_a.id, atom_b.id)
        return True

    def bonded_atoms(self, atom: Atom) -> List[Atom]:
        return [bond.other(atom) for bond in self.bonds if bond.contains(atom)]

    def populate_random(self, count: int, rng: Optional[random.Random] = None) -> List[Atom]:
        chooser = rng or random
        spawned: List[Atom] = []
        for _ in range(count):
            position = Vector2(
                chooser.random() * self.settings.world_width,
                chooser.random() * self.settings.world_height,
            )
            spawned.append(self.add_atom(Atom.generate_random_atom(position, rng=rng)))
        logger.info("Spawned %d random atom(s)", count)
        return spawned

    def step(self, delta: float) -> None:
        scaled = delta * self.settings.speed_multiplier
        for atom in self.atoms:
            atom.calc_position(scaled)
        self.step_count += 1
        self.elapsed += scaled

    def angle(self, atom_a: Atom, atom_b: Atom, atom_c: Atom) -> Optional[float]:
        """Angle at atom_b; requires a closed bonded triangle."""
        return Atom.calculate_angle(self.bonds, atom_a, atom_b, atom_c)

    def vertex_angle(self, atom_a: Atom, atom_b: Atom, atom_c: Atom) -> Optional[float]:
        """Angle at atom_b requiring only the a-b and b-c bonds."""
        if not (atom_b.is_bonded_with(self.bonds, atom_a) and atom_b.is_bonded_with(self.bonds, atom_c)):
            return None
        return ray_angle(atom_b.position, atom_a.position, atom_c.position)

    def atom_at(self, point: Tuple[float, float]) -> Optional[Atom]:
        probe = Vector2(point[0], point[1])
        # Last drawn is on top.
        for atom in reversed(self.atoms):
            if atom.position.subtract(probe).length() <= atom.get_animated_size():
                return atom
        return None

    def draw(self, surface: "RenderSurface") -> None:
        for bond in self.bonds:
            surface.draw_line(bond.atom1.position.to_tuple(), bond.atom2.position.to_tuple(), BOND_COLOR, BOND_WIDTH)
        for atom in self.atoms:
            atom.draw(surface)

    def snapshot(self) -> SandboxSnapshot:
        atom_states = [
            AtomState(
                id=atom.id,
                symbol=atom.properties.symbol,
                position=atom.position.to_tuple(),
                velocity=atom.velocity.to_tuple(),
                size=atom.size,
                selected=atom.selected,
            )
            for atom in self.atoms
        ]
        return SandboxSnapshot(
            step_count=self.step_count,
            elapsed=self.elapsed,
            atoms=atom_states,
            bonds=[(bond.atom1.id, bond.atom2.id) for bond in self.bonds],
        )

    def _contains(self, atom: Atom) -> bool:
        return any(existing is atom for existing in self.atoms)

    def _find_bond(self, atom_a: Atom, atom_b: Atom) -> Optional[Bond]:
        for bond in self.bonds:
            if bond.involves(atom_a, atom_b):
                return bond
        return None
