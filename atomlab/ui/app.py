"""
pygame application for the atomlab sandbox.

Controls:
    space   run / pause
    .       single step
    click   select / deselect an atom (up to three, second is the angle vertex)
    drag    throw the atom under the cursor
    r       spawn a random atom at the cursor
    b       bond the selected atoms
    x       delete the selected atoms
    c       clear the selection
    bksp    reload the sandbox from its config
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

try:
    import pygame
except ImportError:  # pragma: no cover
    pygame = None  # type: ignore

from atomlab.atom import Atom
from atomlab.config_loader import DEFAULT_CONFIG, DisplaySettings, SandboxBundle, load_sandbox_from_yaml
from atomlab.sandbox import Sandbox
from atomlab.utils import setup_logging
from atomlab.vector import Vector2

from .canvas import PygameSurface
from .controllers import SelectionController, SimulationController
from .panels import InspectorPanel

logger = logging.getLogger(__name__)

SIDEBAR_WIDTH = 280
CLICK_TOLERANCE_PX = 3


@dataclass
class AppState:
    running: bool = True
    mouse_down_at: Optional[Tuple[int, int]] = None
    clock: Optional["pygame.time.Clock"] = field(default=None, repr=False)


class SandboxApp:
    """
    High-level pygame application manager.

    Owns the window, routes events to the controllers, advances the sandbox
    once per frame and renders atoms through a `PygameSurface`.
    """

    def __init__(self, bundle: SandboxBundle, config_path: Optional[Path] = None):
        if pygame is None:
            raise RuntimeError("pygame is not installed. Install it to run the sandbox UI.")
        self.bundle = bundle
        self.config_path = config_path
        self.display: DisplaySettings = bundle.display
        self.state = AppState()
        self.screen: Optional["pygame.Surface"] = None
        self.canvas: Optional[PygameSurface] = None
        self.inspector_panel: Optional[InspectorPanel] = None
        self.viewport_rect: Optional["pygame.Rect"] = None
        self._set_sandbox(bundle.sandbox)

    def setup(self) -> None:
        """Initialize pygame context and create root surfaces."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.display.width, self.display.height))
        pygame.display.set_caption(self.display.title)
        self.state.clock = pygame.time.Clock()

        font = pygame.font.SysFont("Helvetica", 16)
        self.viewport_rect = pygame.Rect(0, 0, self.display.width - SIDEBAR_WIDTH, self.display.height)
        inspector_rect = pygame.Rect(self.display.width - SIDEBAR_WIDTH, 0, SIDEBAR_WIDTH, self.display.height)
        self.canvas = PygameSurface(self.screen.subsurface(self.viewport_rect))
        self.inspector_panel = InspectorPanel(rect=inspector_rect, font=font)
        logger.info("Window %dx%d ready", self.display.width, self.display.height)

    def handle_event(self, event: "pygame.event.Event") -> None:
        """Dispatch a single pygame event."""
        if event.type == pygame.QUIT:
            self.state.running = False
            return

        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._in_viewport(event.pos):
                self.state.mouse_down_at = event.pos
                self.selection.begin_drag(self._to_world(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            start = self.state.mouse_down_at
            self.state.mouse_down_at = None
            if start is None:
                return
            moved = abs(event.pos[0] - start[0]) + abs(event.pos[1] - start[1])
            if moved <= CLICK_TOLERANCE_PX:
                self.selection.end_drag(self._to_world(start))
                self.selection.select_at(self._to_world(event.pos))
            else:
                self.selection.end_drag(self._to_world(event.pos))

    def update(self, dt_seconds: float) -> None:
        """Advance simulation and UI state."""
        self.sim_controller.update(dt_seconds)
        if self.inspector_panel:
            info = self.selection.inspector_info()
            info["Status"] = "running" if self.sim_controller.is_running else "paused"
            self.inspector_panel.update(info)

    def render(self) -> None:
        """Render the current frame."""
        if self.screen is None or self.canvas is None:
            return
        self.screen.fill(self.display.background_color)
        self.sandbox.draw(self.canvas)
        if self.inspector_panel:
            self.inspector_panel.render(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop entry point."""
        if self.screen is None or self.state.clock is None:
            self.setup()

        assert self.state.clock is not None
        while self.state.running:
            dt_ms = self.state.clock.tick(self.display.target_fps)
            for event in pygame.event.get():
                self.handle_event(event)
            self.update(dt_ms / 1000.0)
            self.render()

        logger.info("Shutting down after %d step(s)", self.sandbox.step_count)
        pygame.quit()

    def spawn_random_atom(self, position_px: Tuple[int, int]) -> Atom:
        world = self._to_world(position_px)
        atom = Atom.generate_random_atom(Vector2(world[0], world[1]))
        self.sandbox.add_atom(atom)
        logger.debug("Spawned %s at %.0f,%.0f", atom.properties.symbol, world[0], world[1])
        return atom

    def reset(self) -> None:
        if self.config_path is None:
            self._set_sandbox(Sandbox(settings=self.sandbox.settings))
            return
        self._set_sandbox(load_sandbox_from_yaml(self.config_path).sandbox)

    def _set_sandbox(self, sandbox: Sandbox) -> None:
        self.sandbox = sandbox
        self.sim_controller = SimulationController(sandbox)
        self.selection = SelectionController(sandbox)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self.sim_controller.toggle_running()
        elif key == pygame.K_PERIOD:
            self.sim_controller.step(1)
        elif key == pygame.K_r:
            self.spawn_random_atom(pygame.mouse.get_pos())
        elif key == pygame.K_b:
            self.selection.bond_selected()
        elif key == pygame.K_x:
            self.selection.delete_selected()
        elif key == pygame.K_c:
            self.selection.clear()
        elif key == pygame.K_BACKSPACE:
            self.reset()

    def _in_viewport(self, position_px: Tuple[int, int]) -> bool:
        return self.viewport_rect is not None and self.viewport_rect.collidepoint(position_px)

    def _to_world(self, position_px: Tuple[int, int]) -> Tuple[float, float]:
        origin = self.viewport_rect.topleft if self.viewport_rect is not None else (0, 0)
        return float(position_px[0] - origin[0]), float(position_px[1] - origin[1])


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive 2D atom sandbox.")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help="Path to a sandbox YAML configuration.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    bundle = load_sandbox_from_yaml(args.config)
    setup_logging(bundle.logging)
    app = SandboxApp(bundle, config_path=args.config)
    app.run()


if __name__ == "__main__":
    main()
