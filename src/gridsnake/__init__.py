from .engine import GameEngine
from .state import DOWN, LEFT, NONE, RIGHT, UP, GameState

__all__ = ["GameEngine", "GameState", "UP", "DOWN", "LEFT", "RIGHT", "NONE"]
