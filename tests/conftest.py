"""
Shared pytest fixtures for atomlab.

Fixtures expose parsed configuration assets and a small bonded scene so the
unit tests do not duplicate I/O or setup logic.
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any, Dict, Tuple

import pytest
import yaml

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from atomlab.atom import Atom, AtomProperties  # noqa: E402
from atomlab.bond import Bond  # noqa: E402
from atomlab.vector import Vector2  # noqa: E402


@pytest.fixture(scope="session")
def project_root() -> pathlib.Path:
    """Return repository root directory."""
    return REPO_ROOT


@pytest.fixture(scope="session")
def config_template(project_root: pathlib.Path) -> Dict[str, Any]:
    """Parsed representation of the default sandbox config template."""
    with (project_root / "atomlab" / "config" / "template.yaml").open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def make_atom(x: float = 0.0, y: float = 0.0, **properties: Any) -> Atom:
    return Atom(position=Vector2(x, y), properties=AtomProperties(**properties))


@pytest.fixture
def right_triangle() -> Tuple[Atom, Atom, Atom, list]:
    """Atoms at (0,0), (1,0), (1,1), pairwise bonded."""
    a = make_atom(0.0, 0.0, symbol="H")
    b = make_atom(1.0, 0.0, symbol="O")
    c = make_atom(1.0, 1.0, symbol="H")
    bonds = [Bond(a, b), Bond(b, c), Bond(c, a)]
    return a, b, c, bonds
