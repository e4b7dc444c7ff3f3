"""Game state machine: spawn, hold, moves, gravity, lock delay, scoring"""
import logging
from typing import Dict, List, Optional

from tetris_board import Board, ghost_y
from tetris_config import CONFIG
from tetris_input import InputState, ShiftRepeat
from tetris_piece import Piece, kicks_for, shape_matrix, target_state
from tetris_rng import BagRandom
from tetris_rules import (HARD_DROP_PER_CELL, SOFT_DROP_PER_CELL, drop_interval,
                          level_for_lines, line_clear_score)

log = logging.getLogger(__name__)

ACTIVE, PAUSED, GAME_OVER = "active", "paused", "game_over"
PREVIEW_COUNT = 2


class GameState:
    def __init__(self, config: Optional[Dict] = None, seed: Optional[int] = None):
        self.config = dict(CONFIG)
        if config:
            self.config.update(config)
        if seed is None:
            seed = self.config["SEED"]

        self.board = Board()
        self.bag = BagRandom(seed)
        self.current: Piece = Piece.spawn(self.bag.next_piece())
        self.queue: List[str] = [self.bag.next_piece() for _ in range(PREVIEW_COUNT)]
        self.held: Optional[str] = None
        self.can_hold = True

        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval = drop_interval(self.level)
        self.elapsed = 0.0

        self.lock_delay = self.config["LOCK_DELAY_MS"]
        self.lock_timer = 0.0
        self.grounded = False

        self.paused = False
        self.over = False

        # Advisory only: read by the renderer, no effect on play
        self.flash_ms = 0.0
        self.shake = 0.0
        self.cleared_rows: List[int] = []

        self.input = InputState()
        self.shift = ShiftRepeat(self.config["DAS_MS"], self.config["ARR_MS"])

        self._check_spawn()

    # ---------- status ----------
    @property
    def status(self) -> str:
        if self.over: return GAME_OVER
        if self.paused: return PAUSED
        return ACTIVE

    @property
    def active(self) -> bool:
        return not (self.paused or self.over)

    def toggle_pause(self) -> bool:
        if not self.over:
            self.paused = not self.paused
        return self.paused

    # ---------- read-outs for presentation ----------
    def ghost_y(self) -> int:
        return ghost_y(self.board, self.current)

    def preview(self) -> List[str]:
        return self.queue[:PREVIEW_COUNT]

    def held_matrix(self):
        return shape_matrix(self.held, 0) if self.held else None

    def flash_alpha(self) -> float:
        if self.flash_ms <= 0: return 0.0
        return 0.35 * self.flash_ms / self.config["FLASH_MS"]

    # ---------- spawning ----------
    def _reset_lock(self):
        self.lock_timer = 0.0
        self.grounded = False

    def _check_spawn(self):
        if self.board.collision(self.current, 0, 0):
            self.over = True
            self.paused = True
            log.info("game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)

    def _spawn_next(self):
        self.current = Piece.spawn(self.queue.pop(0))
        self.queue.append(self.bag.next_piece())
        self.can_hold = True
        self._reset_lock()
        self._check_spawn()

    def _can_fall(self) -> bool:
        return not self.board.collision(self.current, 0, 1)

    # ---------- commands ----------
    def move(self, dx: int) -> bool:
        if not self.active or self.board.collision(self.current, dx, 0):
            return False
        self.current.x += dx
        if self._can_fall():
            self._reset_lock()
        return True

    def rotate(self, direction: int) -> bool:
        """Turn the piece a quarter clockwise (direction > 0) or counter-clockwise.

        The first kick offset that fits is applied. O never turns.
        """
        p = self.current
        if not self.active or p.kind == "O":
            return False
        new = target_state(p.state, direction)
        matrix = shape_matrix(p.kind, new)
        for dx, dy in kicks_for(p.kind, p.state, new):
            if not self.board.collision(p, dx, dy, matrix):
                p.x += dx; p.y += dy; p.state = new
                if self._can_fall():
                    self._reset_lock()
                return True
        return False

    def soft_drop(self) -> bool:
        """One cell down for a point; returns False (and grounds) when blocked."""
        if not self.active:
            return False
        if self._can_fall():
            self.current.y += 1
            self.score += SOFT_DROP_PER_CELL
            self._reset_lock()
            return True
        self.grounded = True
        return False

    def hard_drop(self) -> int:
        if not self.active:
            return 0
        dist = 0
        while self._can_fall():
            self.current.y += 1
            dist += 1
        self.score += dist * HARD_DROP_PER_CELL
        self.lock_down()
        return dist

    def hold_piece(self) -> bool:
        if not self.active or not self.can_hold:
            return False
        self.can_hold = False
        swap, self.held = self.held, self.current.kind
        if swap:
            self.current = Piece.spawn(swap)
        else:
            self.current = Piece.spawn(self.queue.pop(0))
            self.queue.append(self.bag.next_piece())
        self._reset_lock()
        self._check_spawn()
        return True

    def lock_down(self):
        if not self.active:
            return
        self.board.merge(self.current)
        cleared = self.board.clear_lines()
        self.cleared_rows = list(self.board.cleared_rows)
        if cleared:
            self.score += line_clear_score(cleared, self.level)
            self.lines += cleared
            self.level = level_for_lines(self.lines)
            self.drop_interval = drop_interval(self.level)
            self.flash_ms = self.config["FLASH_MS"]
            self.shake = min(0.6, 0.25 + cleared * 0.12)
            log.debug("cleared %d line(s): score=%d lines=%d level=%d",
                      cleared, self.score, self.lines, self.level)
        else:
            self.shake = max(self.shake, 0.18)
        self._spawn_next()

    # ---------- frame update ----------
    def update(self, dt: float, inputs: Optional[InputState] = None):
        if dt < 0:
            raise ValueError(f"negative frame delta: {dt}")
        if not self.active:
            return
        if inputs is None:
            inputs = self.input

        self.flash_ms = max(0.0, self.flash_ms - dt)
        self.shake = max(0.0, self.shake - dt * self.config["SHAKE_DECAY_PER_MS"])

        # Gravity
        self.elapsed += dt
        if self.elapsed >= self.drop_interval:
            self.elapsed = 0.0
            # a natural fall scores like a soft drop
            self.soft_drop()

        # DAS/ARR
        d = inputs.direction
        for _ in range(self.shift.update(dt, d)):
            self.move(d)

        # Lock delay
        if self.grounded:
            self.lock_timer += dt
            if self._can_fall():
                self._reset_lock()
            elif self.lock_timer >= self.lock_delay:
                self.lock_down()
