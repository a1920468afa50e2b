# game.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

from board import (
    BOARD_SIZE,
    PIECES_PER_PLAYER,
    Board,
    Cell,
    Player,
    Pos,
    create_board,
    in_bounds,
    other,
)
from errors import InvalidPlacement, NothingToUndo, Rejection
from history import History
from scoring import compute_largest_component

logger = logging.getLogger(__name__)

TOTAL_MOVES = PIECES_PER_PLAYER * 2
NO_PIECES = PIECES_PER_PLAYER + 1


@dataclass
class GameState:
    board: Board
    blocked: Pos
    move_count: int = 0
    current: Player = Player.BLUE
    next_value: Dict[Player, int] = field(default_factory=lambda: {p: 1 for p in Player})
    game_over: bool = False
    score: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    highlight: Dict[Player, FrozenSet[Pos]] = field(
        default_factory=lambda: {p: frozenset() for p in Player}
    )

    def clone(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            blocked=self.blocked,
            move_count=self.move_count,
            current=self.current,
            next_value=dict(self.next_value),
            game_over=self.game_over,
            score=dict(self.score),
            highlight=dict(self.highlight),
        )


def initial_state(blocked: Pos) -> GameState:
    return GameState(board=create_board(blocked), blocked=blocked)


def new_history(blocked: Pos) -> History:
    return History(initial_state(blocked))


def place(state: GameState, pos: Pos) -> GameState:
    """
    Put the current player's next piece on pos.

    Raises InvalidPlacement and leaves state untouched if the move is not
    allowed. The 24th piece finalizes the game before returning.
    """
    if state.game_over:
        raise InvalidPlacement(Rejection.GAME_OVER, pos)
    if not in_bounds(pos, state.board.size):
        raise InvalidPlacement(Rejection.OUT_OF_BOUNDS, pos)
    if not state.board[pos].is_empty:
        raise InvalidPlacement(Rejection.OCCUPIED, pos)

    p = state.current
    v = state.next_value[p]
    if v > PIECES_PER_PLAYER:
        raise InvalidPlacement(Rejection.NO_PIECES_LEFT, pos)

    state.board[pos] = Cell.owned(p, v)
    state.move_count += 1
    state.next_value[p] = v + 1
    state.current = other(p)

    if state.move_count >= TOTAL_MOVES:
        finalize(state)
    return state


def finalize(state: GameState) -> None:
    for p in Player:
        res = compute_largest_component(state.board, p)
        state.score[p] = res.score
        state.highlight[p] = res.highlight
    state.game_over = True

    logger.info(
        "game over: blue %d, red %d (%s)",
        state.score[Player.BLUE], state.score[Player.RED], result_text(state),
    )
    logger.debug("final board:\n%s", state.board.printable())


def winner(state: GameState) -> Optional[Player]:
    """Higher score wins. None while the game runs and for a draw."""
    if not state.game_over:
        return None
    blue, red = state.score[Player.BLUE], state.score[Player.RED]
    if blue > red:
        return Player.BLUE
    if red > blue:
        return Player.RED
    return None


def result_text(state: GameState) -> str:
    w = winner(state)
    return f"Winner: {w.label}" if w is not None else "Draw"


class Game:
    """One live game plus its undo history. The UI owns exactly one of these."""

    def __init__(self, rng: Optional[random.Random] = None, blocked: Optional[Pos] = None):
        self.rng = rng or random.Random()
        if blocked is None:
            blocked = self._random_block()
        self.state = initial_state(blocked)
        self.history = History(self.state)

    def _random_block(self) -> Pos:
        i = self.rng.randrange(BOARD_SIZE * BOARD_SIZE)
        return (i // BOARD_SIZE, i % BOARD_SIZE)

    def new_game(self) -> None:
        self._restart(self._random_block())

    def reset_same_block(self) -> None:
        self._restart(self.state.blocked)

    def _restart(self, blocked: Pos) -> None:
        self.state = initial_state(blocked)
        self.history = new_history(blocked)
        logger.info("new game, blocked cell at %s", blocked)

    def place(self, pos: Pos) -> bool:
        try:
            place(self.state, pos)
        except InvalidPlacement as e:
            logger.debug("placement rejected: %s", e.message)
            return False
        self.history.record(self.state)
        return True

    def undo(self) -> bool:
        try:
            self.state = self.history.undo()
        except NothingToUndo:
            logger.debug("nothing to undo")
            return False
        return True

    # ---- status text for the presentation layer ----
    def turn_label(self) -> str:
        t = min(self.state.move_count + 1, TOTAL_MOVES)
        return f"Turn: {t} / {TOTAL_MOVES}"

    def player_label(self) -> str:
        return f"Current: {self.state.current.label}"

    def next_piece(self, player: Player) -> str:
        v = self.state.next_value[player]
        return str(v) if v <= PIECES_PER_PLAYER else "—"

    def next_piece_label(self) -> str:
        return f"Next piece — Blue: {self.next_piece(Player.BLUE)} · Red: {self.next_piece(Player.RED)}"

    def winner(self) -> Optional[Player]:
        return winner(self.state)

    def result_label(self) -> str:
        return result_text(self.state)
