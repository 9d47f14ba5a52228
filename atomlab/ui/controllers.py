"""
Controllers connecting the pygame UI and the sandbox.

Neither controller touches pygame directly so both can be driven from tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, List, Optional, Tuple

from atomlab.atom import Atom
from atomlab.sandbox import Sandbox
from atomlab.vector import Vector2

MAX_SELECTION = 3
DEFAULT_FRAME_DELTA = 1.0 / 60.0


@dataclass
class SimulationController:
    sandbox: Sandbox
    is_running: bool = True
    frame_delta: float = DEFAULT_FRAME_DELTA

    @property
    def speed_multiplier(self) -> float:
        return self.sandbox.settings.speed_multiplier

    @speed_multiplier.setter
    def speed_multiplier(self, value: float) -> None:
        self.sandbox.settings.speed_multiplier = max(0.0, value)

    def toggle_running(self) -> None:
        self.is_running = not self.is_running

    def step(self, steps: int = 1) -> None:
        for _ in range(steps):
            self.sandbox.step(self.frame_delta)

    def update(self, dt_seconds: float) -> None:
        if not self.is_running:
            return
        self.sandbox.step(dt_seconds)


@dataclass
class SelectionController:
    """
    Click selection of up to three atoms.

    The order of selection matters for angles: the second selected atom is the
    vertex, measured from the first towards the third.
    """

    sandbox: Sandbox
    throw_scale: float = 0.5
    selected: List[Atom] = field(default_factory=list)
    _drag_atom: Optional[Atom] = field(default=None, init=False, repr=False)
    _drag_start: Optional[Tuple[float, float]] = field(default=None, init=False, repr=False)

    def select_at(self, point: Tuple[float, float]) -> Optional[Atom]:
        atom = self.sandbox.atom_at(point)
        if atom is None:
            return None
        if atom.selected:
            self._deselect(atom)
            return atom
        if len(self.selected) >= MAX_SELECTION:
            self._deselect(self.selected[0])
        atom.selected = True
        self.selected.append(atom)
        return atom

    def clear(self) -> None:
        for atom in self.selected:
            atom.selected = False
        self.selected = []

    def bond_selected(self) -> int:
        """Bond every pair of selected atoms; returns the number of new bonds."""
        before = len(self.sandbox.bonds)
        for atom_a, atom_b in combinations(self.selected, 2):
            self.sandbox.add_bond(atom_a, atom_b)
        return len(self.sandbox.bonds) - before

    def delete_selected(self) -> int:
        removed = sum(1 for atom in self.selected if self.sandbox.remove_atom(atom))
        self.selected = []
        return removed

    def selected_angle(self) -> Optional[float]:
        if len(self.selected) != MAX_SELECTION:
            return None
        first, vertex, last = self.selected
        return self.sandbox.angle(first, vertex, last)

    def begin_drag(self, point: Tuple[float, float]) -> Optional[Atom]:
        self._drag_atom = self.sandbox.atom_at(point)
        self._drag_start = point if self._drag_atom is not None else None
        return self._drag_atom

    def end_drag(self, point: Tuple[float, float]) -> Optional[Atom]:
        """Throw the dragged atom with a velocity proportional to the drag vector."""
        atom, start = self._drag_atom, self._drag_start
        self._drag_atom = None
        self._drag_start = None
        if atom is None or start is None:
            return None
        drag = Vector2(point[0] - start[0], point[1] - start[1])
        if drag.length() == 0:
            return None
        atom.velocity = drag.scale(self.throw_scale)
        return atom

    def inspector_info(self) -> Dict[str, str]:
        info: Dict[str, str] = {"Atoms": str(len(self.sandbox.atoms)), "Bonds": str(len(self.sandbox.bonds))}
        for index, atom in enumerate(self.selected, start=1):
            properties = atom.properties
            speed = atom.velocity.length()
            info[f"#{index}"] = (
                f"{properties.symbol or '?'} Z={properties.atomic_number or '-'} "
                f"m={properties.atomic_mass or '-'} v={speed:.2f}"
            )
        if len(self.selected) == MAX_SELECTION:
            angle = self.selected_angle()
            info["Angle"] = f"{angle:.1f} deg" if angle is not None else "not a bonded triangle"
        return info

    def _deselect(self, atom: Atom) -> None:
        atom.selected = False
        self.selected = [existing for existing in self.selected if existing is not atom]
