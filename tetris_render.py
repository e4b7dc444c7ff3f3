"""
Rendering helpers for the pygame front end.

- Pre-render block cell Surfaces per kind (solid + ghost outline) and blit them.
- Pre-render the static background (grid + panel + preview frames) per Dims.
- Cache HUD text and preview surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all locked blocks; rebuild it only when the grid changes.

Everything here reads a GameState; nothing writes to it.
"""
from __future__ import annotations
import random
import pygame
from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional
from tetris_config import COLS, ROWS
from tetris_layout import Dims
from tetris_piece import shape_matrix

# Colors per tetromino kind
COLORS: Dict[str, Tuple[int,int,int]] = {
    "S": (76,195,103),
    "Z": (228,77,97),
    "L": (242,163,60),
    "J": (78,108,231),
    "T": (168,85,247),
    "O": (230,211,74),
    "I": (44,198,216),
}

TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

CONTROLS = [
    "←/→ Move",
    "↓ Soft drop",
    "↑ Rot CW • Z Rot CCW",
    "Space Hard drop",
    "Shift/C Hold",
    "P Pause • R Restart",
]

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    previews: Dict[str, pygame.Surface] = field(default_factory=dict)
    labels: Dict[str, pygame.Surface] = field(default_factory=dict)
    controls: List[pygame.Surface] = field(default_factory=list)

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        bx, by, bw, bh = dims.board
        self.board_rect = pygame.Rect(bx, by, bw, bh)
        self.board_surface = pygame.Surface((bw, bh), pygame.SRCALPHA)
        self._board_key: Optional[tuple] = None

    # ---------- Static background (grid + panel + boxes) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((17,24,39))
        grid_col = (40,50,90)
        bx, by, bw, bh = d.board
        for x in range(COLS+1):
            X = bx + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, by), (X, by + bh))
        for y in range(ROWS+1):
            Y = by + y*d.cell
            pygame.draw.line(self.bg, grid_col, (bx, Y), (bx + bw, Y))
        panel_rect = pygame.Rect(*d.panel)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        for box in [d.hold_box] + d.next_boxes:
            frame = pygame.Rect(*box)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g

    # ---------- Board surface cache ----------
    def sync_board_surface(self, grid: List[List[Optional[str]]]):
        """Rebuild the locked-blocks surface only when the grid changed."""
        key = tuple(tuple(r) for r in grid)
        if key == self._board_key:
            return
        self._board_key = key
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                t = grid[y][x]
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c + 1, y*c + 1))

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def cell_pos(self, bx: int, by: int, inset: int, ox: int = 0, oy: int = 0):
        return (self.dims.board[0] + bx*self.dims.cell + inset + ox,
                self.dims.board[1] + by*self.dims.cell + inset + oy)

    # ---------- Previews ----------
    def preview_surface(self, kind: str) -> pygame.Surface:
        """Spawn-orientation matrix cropped to its filled cells and centred in a box."""
        if kind in self.hud.previews:
            return self.hud.previews[kind]
        pc = self.dims.pv_cell
        size = pc*4
        s = pygame.Surface((size, size), pygame.SRCALPHA)
        m = shape_matrix(kind, 0)
        filled = [(x, y) for y, row in enumerate(m) for x, v in enumerate(row) if v]
        min_x = min(x for x, _ in filled); max_x = max(x for x, _ in filled)
        min_y = min(y for _, y in filled); max_y = max(y for _, y in filled)
        ox = (size - (max_x - min_x + 1)*pc) // 2
        oy = (size - (max_y - min_y + 1)*pc) // 2
        block = pygame.Surface((pc-2, pc-2))
        block.fill(COLORS[kind])
        for x, y in filled:
            s.blit(block, (ox + (x - min_x)*pc + 1, oy + (y - min_y)*pc + 1))
        self.hud.previews[kind] = s
        return s

    def _label(self, text: str) -> pygame.Surface:
        if text not in self.hud.labels:
            self.hud.labels[text] = self.font.render(text, True, TEXT)
        return self.hud.labels[text]

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, game):
        d = self.dims
        f = self.font
        if game.score != self.hud.score:
            self.hud.score = game.score
            self.hud.score_s = f.render(f"Score: {game.score}", True, TEXT)
        if game.level != self.hud.level:
            self.hud.level = game.level
            self.hud.level_s = f.render(f"Level: {game.level}", True, TEXT)
        if game.lines != self.hud.lines:
            self.hud.lines = game.lines
            self.hud.lines_s = f.render(f"Lines: {game.lines}", True, TEXT)

        hx, hy, _, _ = d.hold_box
        screen.blit(self._label("Hold:"), (hx, hy - 22))
        if game.held:
            screen.blit(self.preview_surface(game.held), (hx + 6, hy + 6))
        nx, ny, _, _ = d.next_boxes[0]
        screen.blit(self._label("Next:"), (nx, ny - 22))
        for box, kind in zip(d.next_boxes, game.preview()):
            screen.blit(self.preview_surface(kind), (box[0] + 6, box[1] + 6))

        x = d.panel[0] + 16
        screen.blit(self.hud.score_s, (x, d.hud_y))
        screen.blit(self.hud.level_s, (x, d.hud_y + 24))
        screen.blit(self.hud.lines_s, (x, d.hud_y + 48))
        if not self.hud.controls:
            self.hud.controls = [f.render("Controls:", True, TEXT)]
            self.hud.controls += [f.render(c, True, DIM_TEXT) for c in CONTROLS]
        y = d.hud_y + 84
        for surf in self.hud.controls:
            screen.blit(surf, (x, y)); y += 20

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, game):
        screen.blit(self.bg, (0,0))
        self.sync_board_surface(game.board.grid)

        # Shake jitters the whole well by up to `shake` cells
        ox = oy = 0
        if game.shake > 0:
            amp = game.shake * self.dims.cell
            ox = int(random.uniform(-amp, amp)); oy = int(random.uniform(-amp, amp))
        screen.blit(self.board_surface, (self.board_rect.x + ox, self.board_rect.y + oy))

        cur = game.current
        if not game.over:
            gy = game.ghost_y()
            for bx, by in cur.cells(0, gy - cur.y):
                if by >= 0:
                    screen.blit(self.ghost_surf[cur.kind], self.cell_pos(bx, by, 4, ox, oy))
        for bx, by in cur.cells():
            if by >= 0:
                screen.blit(self.cell_surf[cur.kind], self.cell_pos(bx, by, 1, ox, oy))

        alpha = game.flash_alpha()
        if alpha > 0:
            flash = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
            flash.fill((255,255,255,int(255*alpha)))
            screen.blit(flash, self.board_rect.topleft)

        self.draw_panel_hud(screen, game)

        if game.over:
            self._banner(screen, "GAME OVER", "R to Restart")
        elif game.paused:
            self._banner(screen, "PAUSED", "P to Resume")

    def _banner(self, screen: pygame.Surface, title: str, hint: str):
        r = self.board_rect
        band = pygame.Surface((r.w, r.h // 4), pygame.SRCALPHA)
        band.fill((0,0,0,153))
        screen.blit(band, (r.x, r.centery - band.get_height() // 2))
        msg = self.big_font.render(title, True, (255,255,255))
        screen.blit(msg, msg.get_rect(center=(r.centerx, r.centery - 12)))
        sub = self.font.render(hint, True, (220,230,255))
        screen.blit(sub, sub.get_rect(center=(r.centerx, r.centery + 20)))
