# scoring.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, List

from board import Board, Player, Pos, neighbors4


@dataclass(frozen=True)
class Component:
    size: int
    total: int
    cells: FrozenSet[Pos]


@dataclass(frozen=True)
class ScoreResult:
    score: int
    highlight: FrozenSet[Pos]


NO_SCORE = ScoreResult(0, frozenset())


def find_components(board: Board, player: Player) -> List[Component]:
    """
    Split the player's pieces into maximal 4-connected groups.

    Components come out in row-major order of their first cell. Empty,
    blocked and opponent cells never join a group and cut connectivity.
    """
    n = board.size
    g = board.grid
    vis = [[False] * n for _ in range(n)]
    comps: List[Component] = []

    for r in range(n):
        for c in range(n):
            if vis[r][c] or not g[r][c].owned_by(player):
                continue

            vis[r][c] = True
            q = deque([(r, c)])
            cells = []
            total = 0
            while q:
                cr, cc = q.popleft()
                cells.append((cr, cc))
                total += g[cr][cc].value
                for nr, nc in neighbors4((cr, cc), n):
                    if not vis[nr][nc] and g[nr][nc].owned_by(player):
                        vis[nr][nc] = True
                        q.append((nr, nc))

            comps.append(Component(len(cells), total, frozenset(cells)))
    return comps


def compute_largest_component(board: Board, player: Player) -> ScoreResult:
    comps = find_components(board, player)
    if not comps:
        return NO_SCORE

    # max() keeps the first of equal keys, so full ties go to the earliest scan
    best = max(comps, key=lambda comp: (comp.size, comp.total))
    return ScoreResult(best.total, best.cells)
