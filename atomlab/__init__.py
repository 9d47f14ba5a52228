"""
atomlab: 2D atom sandbox with damped motion, bonds and bond-angle queries.
"""

from atomlab.atom import Atom, AtomProperties, AtomStyle
from atomlab.bond import Bond
from atomlab.vector import Vector2

__all__ = ["Atom", "AtomProperties", "AtomStyle", "Bond", "Vector2"]
