# src/snake/__init__.py
"""Classic Snake: grid game state plus a pygame front end."""

from .config import CFG, Config
from .game import Direction, GameState, RunState, Snapshot

__all__ = ["CFG", "Config", "Direction", "GameState", "RunState", "Snapshot"]
