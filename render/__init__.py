"""
Rendering module for the Biome Flock pygame frontend.

Provides the drawing surface interface and rendering functions for the map,
the flock and text. The RenderCoordinator lives in render.coordinator.
"""
from render.colors import Color, darken, color_for_tile
from render.primitives import draw_text
from render.map import build_pixel_buffer, render_map
from render.boid_renderer import boid_pose, render_flock
from render.surface import DrawingSurface, PygameSurface, transform_points

__all__ = [
    # Colors
    "Color",
    "darken",
    "color_for_tile",
    # Primitives
    "draw_text",
    # Map
    "build_pixel_buffer",
    "render_map",
    # Boids
    "boid_pose",
    "render_flock",
    # Surface
    "DrawingSurface",
    "PygameSurface",
    "transform_points",
]
