"""
keybindings.py - Centralized key mappings for Biome Flock (Pygame version)

Single source of truth for all keyboard controls.
"""
from __future__ import annotations

import pygame


def _key(name: str) -> int:
    """Get pygame key constant by name, or 0 if unknown."""
    return getattr(pygame, f"K_{name}", 0)


FOLLOW_POINTER_KEY = _key("f")   # Toggle flock attraction between map center and pointer
REGENERATE_KEY = _key("r")       # Generate a new map at the current size

# System keys
QUIT_KEY = _key("ESCAPE")
HELP_KEY = _key("h")

# Control descriptions for help display
CONTROL_DESCRIPTIONS = [
    "F: follow pointer",
    "R: new map",
    "H: help",
    "Esc: quit",
]
