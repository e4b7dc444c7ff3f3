"""Piece model, shapes, SRS rotation"""
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from tetris_config import COLS

Matrix = Tuple[Tuple[int, ...], ...]

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]

@lru_cache(maxsize=None)
def shape_matrix(kind: str, state: int) -> Matrix:
    """Template for `kind` turned clockwise `state` quarter-turns."""
    m = SHAPES[kind]
    for _ in range(state % 4):
        m = rotate_cw(m)
    return tuple(tuple(r) for r in m)

JLSTZ_KICKS = {
    (0,1):[(0,0),(-1,0),(-1,1),(0,-2),(-1,-2)],
    (1,0):[(0,0),(1,0),(1,-1),(0,2),(1,2)],
    (1,2):[(0,0),(1,0),(1,-1),(0,2),(1,2)],
    (2,1):[(0,0),(-1,0),(-1,1),(0,-2),(-1,-2)],
    (2,3):[(0,0),(1,0),(1,1),(0,-2),(1,-2)],
    (3,2):[(0,0),(-1,0),(-1,-1),(0,2),(-1,2)],
    (3,0):[(0,0),(-1,0),(-1,-1),(0,2),(-1,2)],
    (0,3):[(0,0),(1,0),(1,1),(0,-2),(1,-2)],
}
I_KICKS = {
    (0,1):[(0,0),(-2,0),(1,0),(-2,-1),(1,2)],
    (1,0):[(0,0),(2,0),(-1,0),(2,1),(-1,-2)],
    (1,2):[(0,0),(-1,0),(2,0),(-1,2),(2,-1)],
    (2,1):[(0,0),(1,0),(-2,0),(1,-2),(-2,1)],
    (2,3):[(0,0),(2,0),(-1,0),(2,1),(-1,-2)],
    (3,2):[(0,0),(-2,0),(1,0),(-2,-1),(1,2)],
    (3,0):[(0,0),(1,0),(-2,0),(1,-2),(-2,1)],
    (0,3):[(0,0),(-1,0),(2,0),(-1,2),(2,-1)],
}

def kicks_for(kind: str, old: int, new: int) -> List[Tuple[int,int]]:
    """Ordered (dx, dy) candidates for turning `kind` from `old` to `new`."""
    table = I_KICKS if kind == "I" else JLSTZ_KICKS
    try:
        return table[(old, new)]
    except KeyError:
        raise ValueError(f"no kick data for {kind} {old}->{new}") from None

def target_state(state: int, direction: int) -> int:
    return (state + (1 if direction > 0 else 3)) % 4

@dataclass
class Piece:
    kind: str
    state: int = 0
    x: int = 0
    y: int = 0
    locked: bool = False

    @property
    def matrix(self) -> Matrix:
        return shape_matrix(self.kind, self.state)

    @staticmethod
    def spawn(kind: str) -> "Piece":
        s = SHAPES[kind]
        w = len(s[0])
        empty = 0
        for r in s:
            if all(v==0 for v in r): empty+=1
            else: break
        return Piece(kind, 0, (COLS-w)//2, -min(empty,2))

    def cells(self, dx: int = 0, dy: int = 0, matrix: Matrix = None):
        """Absolute (x, y) of every filled cell, optionally offset."""
        m = self.matrix if matrix is None else matrix
        return [(self.x+dx+c, self.y+dy+r)
                for r,row in enumerate(m) for c,v in enumerate(row) if v]
