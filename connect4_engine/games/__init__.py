from __future__ import annotations

from .connect4 import Connect4Board, Connect4Game, Connect4State

__all__ = ["Connect4Board", "Connect4Game", "Connect4State"]
