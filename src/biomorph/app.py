"""Biomorph Explorer - breed branching shapes by eye.

Twelve biomorphs are shown at once: a parent and one single-locus mutant per
locus. Clicking a biomorph breeds the next generation from it, ``S`` saves the
biomorph under the pointer and ``Esc`` quits.
"""

from __future__ import annotations

import logging
import random
import sys
from typing import Optional, Sequence

import pygame

from .config import WINDOW_CAPTION, AppConfig, configure_logging, parse_args
from .gene import default_genotype
from .generation import GenerationManager
from .render import BACKGROUND_COLOR, Renderer
from .storage import save_genotype

log = logging.getLogger("biomorph.app")

SELECT_BUTTONS = (1, 3)


# ---------------------------------------------------------------------------
# Event dispatch
# ---------------------------------------------------------------------------


def handle_event(
    event: pygame.event.Event,
    manager: GenerationManager,
    config: AppConfig,
    mouse_pos: Sequence[int],
) -> bool:
    """Apply one input event; return ``False`` once the session should end."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.MOUSEBUTTONDOWN and event.button in SELECT_BUTTONS:
        manager.select_at(*event.pos)
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_s:
            save_hovered(manager, config, mouse_pos)
    return True


def save_hovered(manager: GenerationManager, config: AppConfig, mouse_pos: Sequence[int]) -> None:
    genotype = manager.genotype_at(*mouse_pos)
    if genotype is None:
        log.debug("Nothing under the pointer to save")
        return
    try:
        save_genotype(genotype, config.save_dir)
    except OSError as exc:
        log.warning("Could not save genotype to %s: %s", config.save_dir, exc)


# ---------------------------------------------------------------------------
# Application entry point and event loop
# ---------------------------------------------------------------------------


def run(config: AppConfig) -> None:
    pygame.init()
    pygame.display.set_caption(WINDOW_CAPTION)
    screen = pygame.display.set_mode((config.width, config.height))
    clock = pygame.time.Clock()

    manager = GenerationManager(config.width, config.height, random.Random(config.seed))
    renderer = Renderer(manager, screen)
    manager.select(default_genotype())

    running = True
    while running:
        clock.tick(config.fps)
        for event in pygame.event.get():
            if not handle_event(event, manager, config, pygame.mouse.get_pos()):
                running = False
                break

        screen.fill(BACKGROUND_COLOR)
        renderer.draw(pygame.mouse.get_pos())
        pygame.display.flip()

    pygame.quit()
    log.info("I for one welcome our new biomorphic overlords... thanks and goodbye!")


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = parse_args(argv)
    configure_logging(config.debug)
    try:
        run(config)
    except KeyboardInterrupt:
        pygame.quit()
        sys.exit(0)


if __name__ == "__main__":
    main()
