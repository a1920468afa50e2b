# history.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from errors import NothingToUndo

if TYPE_CHECKING:
    from game import GameState

logger = logging.getLogger(__name__)


def snapshot(state: "GameState") -> "GameState":
    """Independent copy of a state; later changes to either side do not leak."""
    return state.clone()


class History:
    """
    Full-state snapshots, one per position reached. The first entry is the
    starting position and is never removed, so undo always has a target.
    """

    def __init__(self, initial: "GameState"):
        self.entries: List["GameState"] = []
        self.reset(initial)

    def __len__(self) -> int:
        return len(self.entries)

    def reset(self, initial: "GameState") -> None:
        self.entries = [snapshot(initial)]

    def record(self, state: "GameState") -> None:
        self.entries.append(snapshot(state))

    def undo(self) -> "GameState":
        if len(self.entries) <= 1:
            raise NothingToUndo()
        self.entries.pop()
        logger.debug("undo: %d entries left", len(self.entries))
        return snapshot(self.entries[-1])

    def current(self) -> "GameState":
        return snapshot(self.entries[-1])
