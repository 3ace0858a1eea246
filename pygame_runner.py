# pygame_runner.py
"""
Pygame-CE frontend for Biome Flock.

Architecture:
- Map space: one unit per tile; the scene is drawn onto a map-sized surface
- Screen space: actual window pixels, map surface scaled by PIXEL_SIZE

Mouse input transforms: screen -> map (divide by PIXEL_SIZE, clamp to bounds)

Controls:
- F: toggle pointer-follow
- R: regenerate map
- H: show help
- ESC: quit
"""
from __future__ import annotations

import logging
import sys

try:
    import pygame
except ImportError as exc:
    raise SystemExit("pygame-ce is required. Install with: pip install pygame-ce") from exc

from config import DEFAULT_VIEWPORT, TARGET_FPS, LOG_LEVEL
from keybindings import (
    CONTROL_DESCRIPTIONS,
    FOLLOW_POINTER_KEY,
    REGENERATE_KEY,
    QUIT_KEY,
    HELP_KEY,
)
from main import build_initial_state, regenerate_map, toggle_follow_pointer
from render.config import FONT_SIZE, LINE_HEIGHT, COLOR_BG_DARK, COLOR_TEXT_HIGHLIGHT
from render.coordinator import RenderCoordinator
from render.primitives import draw_text
from render.surface import PygameSurface

logger = logging.getLogger(__name__)


def blit_map_to_screen(map_surface: pygame.Surface, screen: pygame.Surface, pixel_size: int) -> None:
    """Scale the map-resolution surface up by pixel_size onto the window."""
    screen.fill(COLOR_BG_DARK)
    w, h = map_surface.get_size()
    scaled = pygame.transform.scale(map_surface, (w * pixel_size, h * pixel_size))
    screen.blit(scaled, (0, 0))


def render_overlay(screen: pygame.Surface, font, lines) -> None:
    """Draw text lines in the top-left corner of the window."""
    y = 8
    for line in lines:
        draw_text(screen, font, line, (8, y), color=COLOR_TEXT_HIGHLIGHT)
        y += LINE_HEIGHT


def run(viewport=DEFAULT_VIEWPORT) -> None:
    """Main loop: redraw every frame, tick the flock on a fixed interval."""
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()

    screen = pygame.display.set_mode(viewport, pygame.RESIZABLE)
    pygame.display.set_caption("Biome Flock")

    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()

    state = build_initial_state(*screen.get_size())
    map_surface = pygame.Surface((state.width, state.height))
    coordinator = RenderCoordinator(state, PygameSurface(map_surface))
    show_help = False

    running = True
    while running:
        dt = clock.tick(TARGET_FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue

            if event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
                size = screen.get_size()
                if coordinator.resize(size):
                    map_surface = pygame.Surface((state.width, state.height))
                    coordinator.surface = PygameSurface(map_surface)
                continue

            if event.type == pygame.KEYDOWN:
                if event.key == QUIT_KEY:
                    running = False
                elif event.key == FOLLOW_POINTER_KEY:
                    toggle_follow_pointer(state)
                elif event.key == REGENERATE_KEY:
                    regenerate_map(state)
                elif event.key == HELP_KEY:
                    show_help = not show_help

        coordinator.update_pointer(pygame.mouse.get_pos())

        # Simulation cadence (fixed interval), then redraw
        coordinator.advance(dt)
        coordinator.draw_frame()

        blit_map_to_screen(map_surface, screen, state.pixel_size)
        if show_help:
            render_overlay(screen, font, CONTROL_DESCRIPTIONS)
        elif state.messages:
            render_overlay(screen, font, [state.messages[-1]])

        pygame.display.flip()

    pygame.quit()


def main() -> None:
    try:
        run()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
