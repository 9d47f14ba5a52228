"""Undirected bond between two atoms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from atomlab.atom import Atom


@dataclass(eq=False)
class Bond:
    """
    Relation between two shared atom references.

    Membership is checked by object identity, never by atom id, so two distinct
    atoms that happen to share an id are still different bond ends.
    """

    atom1: "Atom"
    atom2: "Atom"

    def involves(self, atom_a: "Atom", atom_b: "Atom") -> bool:
        return (self.atom1 is atom_a and self.atom2 is atom_b) or (
            self.atom1 is atom_b and self.atom2 is atom_a
        )

    def contains(self, atom: "Atom") -> bool:
        return self.atom1 is atom or self.atom2 is atom

    def other(self, atom: "Atom") -> "Atom":
        if self.atom1 is atom:
            return self.atom2
        if self.atom2 is atom:
            return self.atom1
        raise ValueError(f"Atom {atom.id} is not part of this bond.")
