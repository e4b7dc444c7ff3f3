# tetris_layout.py
from dataclasses import dataclass, field
from typing import List, Tuple
from tetris_config import CONFIG, COLS, ROWS

Box = Tuple[int, int, int, int]

@dataclass
class Dims:
    cell: int
    pv_cell: int
    board: Box
    panel: Box
    hold_box: Box
    next_boxes: List[Box] = field(default_factory=list)
    hud_y: int = 0
    total_w: int = 0
    total_h: int = 0

def compute_dims(previews: int = 2) -> Dims:
    """Window geometry for the current CELL_SIZE: board on the left, a side
    panel with the hold box, `previews` stacked next boxes and the HUD."""
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    pv_cell = max(12, int(cell*0.6))
    box = pv_cell*4 + 12
    panel_w = max(180, box + 2*margin)

    board = (margin, margin, COLS*cell, ROWS*cell)
    px = margin + board[2] + margin
    panel = (px, margin, panel_w, board[3])

    # label row (22px) above every box
    y = margin + 30
    hold_box = (px + margin, y, box, box)
    y += box + 30
    next_boxes = []
    for _ in range(previews):
        next_boxes.append((px + margin, y, box, box))
        y += box + 8

    return Dims(
        cell=cell, pv_cell=pv_cell,
        board=board, panel=panel,
        hold_box=hold_box, next_boxes=next_boxes,
        hud_y=y + 16,
        total_w=px + panel_w + margin,
        total_h=margin + board[3] + margin,
    )
