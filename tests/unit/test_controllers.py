"""Tests for the UI controllers (no pygame required)."""

from __future__ import annotations

import pytest

from atomlab.atom import Atom, AtomProperties
from atomlab.sandbox import Sandbox
from atomlab.ui.controllers import SelectionController, SimulationController
from atomlab.vector import Vector2


def make_sandbox() -> Sandbox:
    atoms = [
        Atom(position=Vector2(0, 0), id="a", properties=AtomProperties(symbol="H", atomic_mass=1.008)),
        Atom(position=Vector2(100, 0), id="b", properties=AtomProperties(symbol="O", atomic_mass=15.999)),
        Atom(position=Vector2(100, 100), id="c", properties=AtomProperties(symbol="H", atomic_mass=1.008)),
        Atom(position=Vector2(300, 300), id="d"),
    ]
    return Sandbox(atoms)


def test_simulation_controller_pauses() -> None:
    sandbox = make_sandbox()
    controller = SimulationController(sandbox)
    controller.toggle_running()
    controller.update(0.016)
    assert sandbox.step_count == 0
    controller.step(3)
    assert sandbox.step_count == 3
    controller.toggle_running()
    controller.update(0.016)
    assert sandbox.step_count == 4


def test_speed_multiplier_is_not_negative() -> None:
    controller = SimulationController(make_sandbox())
    controller.speed_multiplier = -3.0
    assert controller.speed_multiplier == 0.0
    controller.speed_multiplier = 2.5
    assert controller.sandbox.settings.speed_multiplier == 2.5


def test_selection_toggles_and_caps_at_three() -> None:
    sandbox = make_sandbox()
    selection = SelectionController(sandbox)
    a, b, c, d = sandbox.atoms
    for point in [(0, 0), (100, 0), (100, 100), (300, 300)]:
        selection.select_at(point)
    assert selection.selected == [b, c, d]
    assert a.selected is False
    assert all(atom.selected for atom in (b, c, d))

    selection.select_at((100, 0))
    assert selection.selected == [c, d]
    assert b.selected is False
    assert selection.select_at((600, 600)) is None


def test_bond_selected_closes_triangle_and_reports_angle() -> None:
    sandbox = make_sandbox()
    selection = SelectionController(sandbox)
    for point in [(100, 100), (100, 0), (0, 0)]:
        selection.select_at(point)
    assert selection.selected_angle() is None
    assert selection.bond_selected() == 3
    assert selection.bond_selected() == 0
    assert selection.selected_angle() == pytest.approx(90.0)
    assert selection.inspector_info()["Angle"] == "90.0 deg"


def test_delete_selected_removes_atoms_and_bonds() -> None:
    sandbox = make_sandbox()
    selection = SelectionController(sandbox)
    selection.select_at((0, 0))
    selection.select_at((100, 0))
    selection.bond_selected()
    selection.clear()
    selection.select_at((100, 0))
    assert selection.delete_selected() == 1
    assert sandbox.get_atom("b") is None
    assert sandbox.bonds == []
    assert selection.selected == []


def test_drag_throws_atom() -> None:
    sandbox = make_sandbox()
    selection = SelectionController(sandbox, throw_scale=0.5)
    assert selection.begin_drag((300, 300)) is sandbox.atoms[3]
    thrown = selection.end_drag((320, 290))
    assert thrown is sandbox.atoms[3]
    assert thrown.velocity == Vector2(10.0, -5.0)


def test_drag_without_atom_or_motion_does_nothing() -> None:
    sandbox = make_sandbox()
    selection = SelectionController(sandbox)
    assert selection.begin_drag((700, 700)) is None
    assert selection.end_drag((710, 700)) is None
    selection.begin_drag((0, 0))
    assert selection.end_drag((0, 0)) is None
    assert sandbox.atoms[0].velocity == Vector2(0.0, 0.0)
