"""
Inspector panel for the pygame UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

try:
    import pygame
except ImportError:  # pragma: no cover
    pygame = None  # type: ignore

Color = Tuple[int, int, int]


@dataclass
class InspectorPanel:
    rect: "pygame.Rect"
    font: "pygame.font.Font"
    title: str = "Inspector"
    background_color: Color = (18, 18, 32)
    text_color: Color = (180, 180, 190)
    line_height: int = 20
    lines: Dict[str, str] = field(default_factory=dict)

    def render(self, surface: "pygame.Surface") -> None:
        if pygame is None:
            return
        pygame.draw.rect(surface, self.background_color, self.rect)
        title = self.font.render(self.title, True, (200, 200, 210))
        surface.blit(title, (self.rect.x + 12, self.rect.y + 12))
        y = self.rect.y + 40
        for key, value in self.lines.items():
            if y + self.line_height > self.rect.bottom:
                break
            label = self.font.render(f"{key}: {value}", True, self.text_color)
            surface.blit(label, (self.rect.x + 12, y))
            y += self.line_height

    def update(self, lines: Dict[str, str]) -> None:
        self.lines = dict(lines)
