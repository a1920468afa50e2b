# errors.py
from __future__ import annotations

from enum import Enum


class Rejection(Enum):
    GAME_OVER = "game over"
    OUT_OF_BOUNDS = "out of bounds"
    OCCUPIED = "cell is not empty"
    NO_PIECES_LEFT = "no pieces left"


class GameError(Exception):
    """Base class for everything the game core raises."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPlacement(GameError):
    def __init__(self, reason: Rejection, pos=None):
        msg = f"cannot place at {pos}: {reason.value}" if pos is not None else reason.value
        super().__init__(msg)
        self.reason = reason
        self.pos = pos


class NothingToUndo(GameError):
    def __init__(self):
        super().__init__("only the initial position is left")


class OutOfRange(GameError, IndexError):
    """Malformed coordinates. A bug in the caller, not a user mistake."""

    def __init__(self, pos):
        super().__init__(f"position {pos} is outside the board")
        self.pos = pos
