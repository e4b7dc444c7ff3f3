"""Input flags and DAS/ARR controller"""
from dataclasses import dataclass
from typing import Optional
from tetris_config import CONFIG

@dataclass
class InputState:
    left: bool = False
    right: bool = False

    @property
    def direction(self) -> int:
        return (-1 if self.left else 0)+(1 if self.right else 0)

class ShiftRepeat:
    """
    Horizontal auto-shift.

    A new direction steps once at once. Holding it past das_ms starts
    repeats every arr_ms; a long frame can yield several repeats.
    Releasing, or holding both sides, clears everything.
    """
    def __init__(self, das_ms: Optional[float] = None, arr_ms: Optional[float] = None):
        self.das_ms = CONFIG["DAS_MS"] if das_ms is None else das_ms
        self.arr_ms = CONFIG["ARR_MS"] if arr_ms is None else arr_ms
        self.dir=0; self.das=0.0; self.arr=0.0

    def reset(self):
        self.dir=0; self.das=0.0; self.arr=0.0

    def update(self, dt, direction: int) -> int:
        """Return how many single-column steps to take in `direction` this frame."""
        if direction == 0:
            self.reset(); return 0
        if direction != self.dir:
            self.dir=direction; self.das=0.0; self.arr=0.0
            return 1
        self.das+=dt
        if self.das < self.das_ms: return 0
        self.arr+=dt
        if self.arr_ms <= 0:
            self.arr=0.0; return 1
        steps=0
        while self.arr >= self.arr_ms:
            self.arr-=self.arr_ms; steps+=1
        return steps
