"""Static element dataset used by the random atom factory and config loader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Element:
    number: int
    symbol: str
    name: str
    weight: float
    electronegativity: Optional[float] = None


@dataclass(frozen=True)
class Isotope:
    mass_number: int
    atomic_mass: float
    abundance: Optional[float] = None


# Standard atomic weights (amu) and Pauling electronegativities.
ELEMENTS: Tuple[Element, ...] = (
    Element(1, "H", "Hydrogen", 1.008, 2.20),
    Element(2, "He", "Helium", 4.0026),
    Element(3, "Li", "Lithium", 6.94, 0.98),
    Element(4, "Be", "Beryllium", 9.0122, 1.57),
    Element(5, "B", "Boron", 10.81, 2.04),
    Element(6, "C", "Carbon", 12.011, 2.55),
    Element(7, "N", "Nitrogen", 14.007, 3.04),
    Element(8, "O", "Oxygen", 15.999, 3.44),
    Element(9, "F", "Fluorine", 18.998, 3.98),
    Element(10, "Ne", "Neon", 20.180),
    Element(11, "Na", "Sodium", 22.990, 0.93),
    Element(12, "Mg", "Magnesium", 24.305, 1.31),
    Element(13, "Al", "Aluminium", 26.982, 1.61),
    Element(14, "Si", "Silicon", 28.085, 1.90),
    Element(15, "P", "Phosphorus", 30.974, 2.19),
    Element(16, "S", "Sulfur", 32.06, 2.58),
    Element(17, "Cl", "Chlorine", 35.45, 3.16),
    Element(18, "Ar", "Argon", 39.948),
    Element(19, "K", "Potassium", 39.098, 0.82),
    Element(20, "Ca", "Calcium", 40.078, 1.00),
    Element(21, "Sc", "Scandium", 44.956, 1.36),
    Element(22, "Ti", "Titanium", 47.867, 1.54),
    Element(23, "V", "Vanadium", 50.942, 1.63),
    Element(24, "Cr", "Chromium", 51.996, 1.66),
    Element(25, "Mn", "Manganese", 54.938, 1.55),
    Element(26, "Fe", "Iron", 55.845, 1.83),
    Element(27, "Co", "Cobalt", 58.933, 1.88),
    Element(28, "Ni", "Nickel", 58.693, 1.91),
    Element(29, "Cu", "Copper", 63.546, 1.90),
    Element(30, "Zn", "Zinc", 65.38, 1.65),
    Element(31, "Ga", "Gallium", 69.723, 1.81),
    Element(32, "Ge", "Germanium", 72.630, 2.01),
    Element(33, "As", "Arsenic", 74.922, 2.18),
    Element(34, "Se", "Selenium", 78.971, 2.55),
    Element(35, "Br", "Bromine", 79.904, 2.96),
    Element(36, "Kr", "Krypton", 83.798, 3.00),
)

_BY_SYMBOL: Dict[str, Element] = {element.symbol: element for element in ELEMENTS}


def get_element(symbol: str) -> Element | None:
    """Return the element record for symbol if known."""

    return _BY_SYMBOL.get(symbol)
