"""Scene state management module."""

from game_state.state import SceneState
from game_state.initialization import build_initial_state

__all__ = [
    'SceneState',
    'build_initial_state',
]
