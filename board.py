# board.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from errors import OutOfRange

BOARD_SIZE = 5
PIECES_PER_PLAYER = 12

Pos = Tuple[int, int]


class Player(IntEnum):
    BLUE = 1  # moves first
    RED = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


def other(player: Player) -> Player:
    return Player.RED if player == Player.BLUE else Player.BLUE


class CellKind(Enum):
    EMPTY = "empty"
    BLOCKED = "blocked"
    OWNED = "owned"


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    player: Optional[Player] = None
    value: int = 0

    @staticmethod
    def owned(player: Player, value: int) -> "Cell":
        if not 1 <= value <= PIECES_PER_PLAYER:
            raise ValueError(f"piece value {value} outside 1..{PIECES_PER_PLAYER}")
        return Cell(CellKind.OWNED, player, value)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    def owned_by(self, player: Player) -> bool:
        return self.kind is CellKind.OWNED and self.player == player


EMPTY = Cell(CellKind.EMPTY)
BLOCKED = Cell(CellKind.BLOCKED)


def in_bounds(pos: Pos, size: int = BOARD_SIZE) -> bool:
    r, c = pos
    return 0 <= r < size and 0 <= c < size


def neighbors4(pos: Pos, size: int = BOARD_SIZE) -> List[Pos]:
    r, c = pos
    out = []
    if r > 0:
        out.append((r - 1, c))
    if r < size - 1:
        out.append((r + 1, c))
    if c > 0:
        out.append((r, c - 1))
    if c < size - 1:
        out.append((r, c + 1))
    return out


@dataclass
class Board:
    """
    Square grid of cells, row-major, addressed by (row, col).
    Cells are immutable, so copying the board only copies the rows.
    """
    size: int = BOARD_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self):
        if not self.grid:
            self.grid = [[EMPTY] * self.size for _ in range(self.size)]

    def __getitem__(self, pos: Pos) -> Cell:
        return cell_at(self, pos)

    def __setitem__(self, pos: Pos, cell: Cell) -> None:
        if not in_bounds(pos, self.size):
            raise OutOfRange(pos)
        r, c = pos
        self.grid[r][c] = cell

    def positions(self):
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def copy(self) -> "Board":
        return Board(self.size, [row[:] for row in self.grid])

    def printable(self) -> str:
        rows = []
        for row in self.grid:
            out = []
            for cell in row:
                if cell.kind is CellKind.EMPTY:
                    out.append(" .")
                elif cell.kind is CellKind.BLOCKED:
                    out.append(" #")
                else:
                    out.append(f"{cell.player.name[0]}{cell.value}")
            rows.append(" ".join(f"{s:>3}" for s in out))
        return "\n".join(rows)


def create_board(blocked: Pos, size: int = BOARD_SIZE) -> Board:
    if not in_bounds(blocked, size):
        raise OutOfRange(blocked)
    b = Board(size)
    b[blocked] = BLOCKED
    return b


def cell_at(board: Board, pos: Pos) -> Cell:
    if not in_bounds(pos, board.size):
        raise OutOfRange(pos)
    r, c = pos
    return board.grid[r][c]
