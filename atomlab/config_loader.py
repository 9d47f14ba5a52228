"""
Utilities for loading atomlab sandboxes from YAML configuration files.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import yaml

from atomlab.atom import Atom, AtomProperties
from atomlab.elements import get_element
from atomlab.sandbox import Sandbox, SandboxSettings
from atomlab.vector import Vector2

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "config"
DEFAULT_CONFIG = CONFIG_DIR / "template.yaml"


@dataclass
class DisplaySettings:
    width: int = 900
    height: int = 640
    title: str = "atomlab"
    target_fps: int = 60
    background_color: Tuple[int, int, int] = (15, 15, 30)


@dataclass
class SandboxBundle:
    """Container returned by configuration loader."""

    sandbox: Sandbox
    display: DisplaySettings = field(default_factory=DisplaySettings)
    logging: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)


def load_sandbox_from_yaml(path: Path) -> SandboxBundle:
    """Load a Sandbox plus display/logging settings from a YAML config."""
    data = _load_yaml(Path(path))
    return build_sandbox_bundle(data)


def build_sandbox_bundle(data: Dict[str, Any]) -> SandboxBundle:
    simulation_config = data.get("simulation") or {}
    settings = _build_settings(simulation_config)
    system = data.get("system") or {}
    atoms = _build_atoms(system.get("atoms") or [])
    sandbox = Sandbox(atoms, settings=settings)
    _build_bonds(sandbox, system.get("bonds") or [])

    random_count = int(simulation_config.get("random_atoms", 0))
    if random_count:
        seed = simulation_config.get("seed")
        sandbox.populate_random(random_count, rng=random.Random(seed) if seed is not None else None)

    logger.info("Loaded sandbox with %d atom(s) and %d bond(s)", len(sandbox.atoms), len(sandbox.bonds))
    return SandboxBundle(
        sandbox=sandbox,
        display=_build_display(data.get("display") or {}),
        logging=dict(data.get("logging") or {}),
        metadata=dict(data.get("metadata") or {}),
    )


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        content = yaml.safe_load(handle)
    if not isinstance(content, dict):
        raise ValueError(f"YAML file {path} must contain a mapping at the root.")
    return content


def _build_settings(config: Dict[str, Any]) -> SandboxSettings:
    return SandboxSettings(
        world_width=float(config.get("world_width", 500.0)),
        world_height=float(config.get("world_height", 500.0)),
        speed_multiplier=float(config.get("speed_multiplier", 1.0)),
    )


def _build_display(config: Dict[str, Any]) -> DisplaySettings:
    defaults = DisplaySettings()
    background = config.get("background_color", defaults.background_color)
    if not isinstance(background, Iterable) or len(list(background)) != 3:
        raise ValueError("display.background_color must contain exactly 3 entries.")
    red, green, blue = (int(value) for value in background)
    return DisplaySettings(
        width=int(config.get("width", defaults.width)),
        height=int(config.get("height", defaults.height)),
        title=str(config.get("title", defaults.title)),
        target_fps=int(config.get("target_fps", defaults.target_fps)),
        background_color=(red, green, blue),
    )


def _build_atoms(atom_list: List[Dict[str, Any]]) -> List[Atom]:
    atoms: List[Atom] = []
    seen_ids = set()
    for entry in atom_list:
        position = _parse_vector(entry, "position")
        if position is None:
            raise ValueError("Each atom requires a position.")
        velocity = _parse_vector(entry, "velocity", default=Vector2.zero())
        atom_id = str(entry["id"]) if entry.get("id") is not None else None
        if atom_id is not None and atom_id in seen_ids:
            raise ValueError(f"Duplicate atom id {atom_id!r}.")
        seen_ids.add(atom_id)
        atoms.append(
            Atom(
                position=position,
                velocity=velocity,
                size=_optional_float(entry.get("size")),
                id=atom_id,
                friction=_optional_float(entry.get("friction")),
                properties=_build_properties(entry),
            )
        )
    return atoms


def _build_properties(entry: Dict[str, Any]) -> AtomProperties:
    symbol = entry.get("element")
    if symbol is None:
        return AtomProperties()
    element = get_element(str(symbol))
    if element is None:
        raise ValueError(f"Unknown element symbol {symbol!r}.")
    electronegativity = entry.get("electronegativity", element.electronegativity)
    atomic_mass = float(entry.get("mass", element.weight))
    if atomic_mass <= 0:
        raise ValueError(f"Atom mass must be positive, got {atomic_mass!r}.")
    return AtomProperties(
        atomic_number=element.number,
        atomic_mass=atomic_mass,
        symbol=element.symbol,
        electronegativity=_optional_float(electronegativity),
    )


def _build_bonds(sandbox: Sandbox, bond_list: List[Any]) -> None:
    for entry in bond_list:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError("Each bond must be a pair of atom ids.")
        atoms = []
        for atom_id in entry:
            atom = sandbox.get_atom(str(atom_id))
            if atom is None:
                raise ValueError(f"Bond references unknown atom id {atom_id!r}.")
            atoms.append(atom)
        sandbox.add_bond(atoms[0], atoms[1])


def _parse_vector(
    entry: Dict[str, Any],
    key: str,
    *,
    default: Optional[Vector2] = None,
) -> Optional[Vector2]:
    value = entry.get(key)
    if value is None:
        return default
    if not isinstance(value, Iterable) or isinstance(value, (str, bytes)):
        raise ValueError(f"Vector field {key!r} must be iterable with 2 numbers.")
    values = list(value)
    if len(values) != 2:
        raise ValueError(f"Vector field {key!r} must contain exactly 2 entries.")
    return Vector2(float(values[0]), float(values[1]))


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None
