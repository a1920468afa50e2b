import os
import random
import sys

import pytest

# Ensure the project root (containing the flat game modules) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from board import Cell, Player, create_board  # noqa: E402
from game import Game, initial_state  # noqa: E402


def _board_from(rows, blocked=(4, 4)):
    """Rows of tokens: '.' empty, '#' blocked (ignored, see blocked), 'B5' blue 5, 'R3' red 3."""
    b = create_board(blocked)
    for r, row in enumerate(rows):
        for c, tok in enumerate(row.split()):
            if tok in ('.', '#'):
                continue
            player = Player.BLUE if tok[0] == 'B' else Player.RED
            b[(r, c)] = Cell.owned(player, int(tok[1:]))
    return b


@pytest.fixture()
def make_board():
    return _board_from


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def game(rng):
    return Game(rng, blocked=(0, 0))


@pytest.fixture()
def fresh_state():
    return initial_state((0, 0))


@pytest.fixture()
def checkerboard_moves():
    """Row-major fill around a blocked (0, 0). Colors alternate, so every piece is isolated."""
    return [(r, c) for r in range(5) for c in range(5) if (r, c) != (0, 0)]


@pytest.fixture()
def red_wins_moves():
    """
    Blocked (4, 4). Blue: rows 0-1 and (2, 0) as values 1..11, then a lone 12 at (4, 0).
    Red: the connected rest, values 1..12.
    """
    blue = [(r, c) for r in range(2) for c in range(5)] + [(2, 0), (4, 0)]
    red = [(2, c) for c in range(1, 5)] + [(3, c) for c in range(5)] + [(4, 1), (4, 2), (4, 3)]
    moves = []
    for b, r in zip(blue, red):
        moves.extend([b, r])
    return moves


@pytest.fixture()
def finished_game(game, checkerboard_moves):
    for pos in checkerboard_moves:
        assert game.place(pos)
    return game
