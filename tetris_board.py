"""Board: collision, merge, line clear, ghost"""
from typing import List, Optional
from tetris_config import COLS, ROWS
from tetris_piece import Piece, Matrix

Grid = List[List[Optional[str]]]

class Board:
    def __init__(self, width: int = COLS, height: int = ROWS):
        self.width, self.height = width, height
        self.grid: Grid = [[None]*width for _ in range(height)]
        self.cleared_rows: List[int] = []

    def collision(self, piece: Piece, dx: int = 0, dy: int = 0, matrix: Optional[Matrix] = None) -> bool:
        """True if the piece, shifted by (dx, dy), leaves the well or hits a locked cell.

        Cells above the top row only test the side walls, so pieces may
        spawn or rotate partly off the board.
        """
        for bx,by in piece.cells(dx, dy, matrix):
            if bx<0 or bx>=self.width or by>=self.height: return True
            if by>=0 and self.grid[by][bx]: return True
        return False

    def merge(self, piece: Piece):
        for bx,by in piece.cells():
            if by>=0: self.grid[by][bx]=piece.kind
        piece.locked = True

    def is_full_row(self, y: int) -> bool:
        return all(self.grid[y])

    def clear_lines(self) -> int:
        """Remove full rows bottom-up and return how many went.

        After a removal the same index is checked again since the row
        above has shifted into it.
        """
        removed=[]; y=self.height-1
        while y>=0:
            if self.is_full_row(y):
                del self.grid[y]; self.grid.insert(0,[None]*self.width)
                removed.append(y - len(removed))
            else: y-=1
        self.cleared_rows = sorted(removed)
        return len(removed)

def ghost_y(board: Board, piece: Piece) -> int:
    """Lowest y the piece reaches by dropping straight down."""
    gy = piece.y
    while not board.collision(piece, 0, gy-piece.y+1): gy+=1
    return gy
