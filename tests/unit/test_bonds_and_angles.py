"""Tests for bond membership and the bonded-triangle angle query."""

from __future__ import annotations

import itertools
import math

import pytest

from atomlab.atom import Atom, AtomProperties, ray_angle
from atomlab.bond import Bond
from atomlab.vector import Vector2


def make_atom(x: float, y: float, atom_id: str | None = None) -> Atom:
    return Atom(position=Vector2(x, y), id=atom_id, properties=AtomProperties(symbol="C"))


def test_bond_membership_is_symmetric() -> None:
    a, b, c = make_atom(0, 0), make_atom(1, 0), make_atom(2, 0)
    bonds = [Bond(a, b)]
    assert a.is_bonded_with(bonds, b)
    assert b.is_bonded_with(bonds, a)
    assert not a.is_bonded_with(bonds, c)
    assert not c.is_bonded_with(bonds, a)
    assert not a.is_bonded_with([], b)


def test_bond_keeps_given_order() -> None:
    a, b = make_atom(0, 0), make_atom(1, 0)
    bond = Bond(b, a)
    assert bond.atom1 is b
    assert bond.atom2 is a
    assert bond.involves(a, b)
    assert bond.involves(b, a)


def test_bond_uses_identity_not_id() -> None:
    a = make_atom(0, 0, atom_id="same")
    twin = make_atom(0, 0, atom_id="same")
    b = make_atom(1, 0)
    bonds = [Bond(a, b)]
    assert a.is_bonded_with(bonds, b)
    assert not twin.is_bonded_with(bonds, b)


def test_bond_other_and_contains() -> None:
    a, b, c = make_atom(0, 0), make_atom(1, 0), make_atom(2, 0)
    bond = Bond(a, b)
    assert bond.contains(a) and bond.contains(b)
    assert not bond.contains(c)
    assert bond.other(a) is b
    assert bond.other(b) is a
    with pytest.raises(ValueError):
        bond.other(c)


def test_right_angle_in_bonded_triangle(right_triangle) -> None:
    a, b, c, bonds = right_triangle
    # Counter-clockwise from b->c towards b->a is a quarter turn.
    assert Atom.calculate_angle(bonds, c, b, a) == pytest.approx(90.0)
    assert Atom.calculate_angle(bonds, a, b, c) == pytest.approx(270.0)


def test_angle_requires_all_three_bonds(right_triangle) -> None:
    a, b, c, bonds = right_triangle
    for missing in range(3):
        partial = [bond for index, bond in enumerate(bonds) if index != missing]
        assert Atom.calculate_angle(partial, a, b, c) is None
    assert Atom.calculate_angle([], a, b, c) is None


def test_angle_accepts_bonds_in_any_orientation(right_triangle) -> None:
    a, b, c, _ = right_triangle
    bonds = [Bond(b, a), Bond(c, b), Bond(a, c)]
    assert Atom.calculate_angle(bonds, c, b, a) == pytest.approx(90.0)


def test_angle_always_within_full_turn() -> None:
    points = [(0, 0), (3, 1), (-2, 4), (5, -5), (-1, -3)]
    for (x1, y1), (x2, y2), (x3, y3) in itertools.permutations(points, 3):
        a, b, c = make_atom(x1, y1), make_atom(x2, y2), make_atom(x3, y3)
        bonds = [Bond(a, b), Bond(b, c), Bond(c, a)]
        angle = Atom.calculate_angle(bonds, a, b, c)
        assert angle is not None
        assert 0.0 <= angle < 360.0


def test_ray_angle_collinear_rays() -> None:
    vertex = Vector2(0, 0)
    assert ray_angle(vertex, Vector2(1, 0), Vector2(2, 0)) == pytest.approx(0.0)
    assert ray_angle(vertex, Vector2(1, 0), Vector2(-1, 0)) == pytest.approx(180.0)


def test_ray_angle_matches_atan2_difference() -> None:
    vertex = Vector2(1, 1)
    first = Vector2(2, 3)
    second = Vector2(-1, 2)
    expected = math.degrees(math.atan2(1, -2) - math.atan2(2, 1))
    assert ray_angle(vertex, first, second) == pytest.approx(expected % 360)
