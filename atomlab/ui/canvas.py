"""
Rendering surfaces consumed by `Atom.draw` and `Sandbox.draw`.

`RecordingSurface` keeps the ordered primitive calls for inspection or replay;
`PygameSurface` rasterises them with pygame primitives.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

try:
    import pygame
except ImportError:  # pragma: no cover
    pygame = None  # type: ignore

Color = Tuple[int, int, int]
Point = Tuple[float, float]


class RenderSurface(Protocol):
    def stroke_circle(self, center: Point, radius: float, color: Color, width: int) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: Color) -> None: ...

    def draw_text(self, text: str, center_x: float, baseline_y: float, font_size: float, color: Color) -> None: ...

    def draw_line(self, start: Point, end: Point, color: Color, width: int) -> None: ...


@dataclass
class DrawCommand:
    kind: str
    params: Dict[str, Any]


@dataclass
class RecordingSurface:
    commands: List[DrawCommand] = field(default_factory=list)

    def stroke_circle(self, center: Point, radius: float, color: Color, width: int) -> None:
        self.commands.append(
            DrawCommand("stroke_circle", {"center": center, "radius": radius, "color": color, "width": width})
        )

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self.commands.append(DrawCommand("fill_circle", {"center": center, "radius": radius, "color": color}))

    def draw_text(self, text: str, center_x: float, baseline_y: float, font_size: float, color: Color) -> None:
        self.commands.append(
            DrawCommand(
                "text",
                {"text": text, "center_x": center_x, "baseline_y": baseline_y, "font_size": font_size, "color": color},
            )
        )

    def draw_line(self, start: Point, end: Point, color: Color, width: int) -> None:
        self.commands.append(DrawCommand("line", {"start": start, "end": end, "color": color, "width": width}))

    def kinds(self) -> List[str]:
        return [command.kind for command in self.commands]

    def clear(self) -> None:
        self.commands.clear()


class PygameSurface:
    """
    Adapter drawing primitive calls onto a pygame surface with a world offset.

    Primitives with a non-finite coordinate or size are skipped; pygame cannot
    rasterise them.
    """

    def __init__(self, surface: "pygame.Surface", offset: Point = (0.0, 0.0), font_name: Optional[str] = "arial"):
        if pygame is None:
            raise RuntimeError("pygame must be installed to use PygameSurface.")
        self.surface = surface
        self.offset = offset
        self.font_name = font_name
        self._fonts: Dict[int, "pygame.font.Font"] = {}

    def _to_screen(self, point: Point) -> Tuple[int, int]:
        return int(round(point[0] + self.offset[0])), int(round(point[1] + self.offset[1]))

    def stroke_circle(self, center: Point, radius: float, color: Color, width: int) -> None:
        if not _finite(*center, radius):
            return
        pygame.draw.circle(self.surface, color, self._to_screen(center), max(1, int(round(radius))), width=width)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        if not _finite(*center, radius):
            return
        pygame.draw.circle(self.surface, color, self._to_screen(center), max(1, int(round(radius))))

    def draw_text(self, text: str, center_x: float, baseline_y: float, font_size: float, color: Color) -> None:
        if not _finite(center_x, baseline_y, font_size):
            return
        font = self._font(int(round(font_size)))
        label = font.render(text, True, color)
        x, baseline = self._to_screen((center_x, baseline_y))
        rect = label.get_rect(centerx=x, top=baseline - font.get_ascent())
        self.surface.blit(label, rect)

    def draw_line(self, start: Point, end: Point, color: Color, width: int) -> None:
        if not _finite(*start, *end):
            return
        pygame.draw.line(self.surface, color, self._to_screen(start), self._to_screen(end), width=width)

    def _font(self, size: int) -> "pygame.font.Font":
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            if self.font_name:
                font = pygame.font.SysFont(self.font_name, size)
            else:
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font


def _finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)
