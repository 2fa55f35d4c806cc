"""pygame rendering of a generation of biomorphs."""

from __future__ import annotations

from typing import List, Optional, Tuple

import pygame

from .expander import Segment, expand_genotype
from .gene import genotype_label
from .generation import GenerationManager, Panel

BACKGROUND_COLOR = (0, 0, 0)
BOX_COLOR = (128, 128, 128)
HIGHLIGHT_COLOR = (128, 128, 128)
LABEL_COLOR = (255, 255, 255)
TEXT_SIZE = 14
TEXT_MARGIN = 5


class Renderer:
    def __init__(
        self,
        manager: GenerationManager,
        screen: pygame.Surface,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self.manager = manager
        self.screen = screen
        self.font = font or pygame.font.SysFont("consolas", TEXT_SIZE)

    def draw(self, mouse_pos: Tuple[int, int]) -> None:
        for panel in self.manager.panels:
            self.draw_panel(panel, panel.contains(*mouse_pos))

    def draw_panel(self, panel: Panel, hovered: bool) -> None:
        rect = pygame.Rect(*panel.rect())
        if hovered:
            pygame.draw.rect(self.screen, HIGHLIGHT_COLOR, rect)
        pygame.draw.rect(self.screen, BOX_COLOR, rect, 1)
        self.draw_segments(self.panel_segments(panel))
        if hovered:
            surface = self.font.render(genotype_label(panel.genotype), True, LABEL_COLOR)
            # long labels must not spill into the neighbouring panel
            self.screen.set_clip(rect)
            self.screen.blit(surface, (panel.x + TEXT_MARGIN, panel.y + panel.height - TEXT_SIZE - TEXT_MARGIN))
            self.screen.set_clip(None)

    def draw_segments(self, segments: List[Segment]) -> None:
        for segment in segments:
            pygame.draw.line(
                self.screen,
                segment.color,
                (segment.x1, segment.y1),
                (segment.x2, segment.y2),
            )

    @staticmethod
    def panel_segments(panel: Panel) -> List[Segment]:
        x, y = panel.center()
        return expand_genotype(panel.genotype, x, y)
