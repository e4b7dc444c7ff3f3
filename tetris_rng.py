"""7-bag randomizer module"""
import random
from typing import List, Optional

class BagRandom:
    """Deals all seven kinds once per bag, shuffled, before refilling."""
    PIECES = ["S","Z","L","J","T","O","I"]
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.pool: List[str] = []

    def _refill(self):
        self.pool = list(self.PIECES)
        # Fisher-Yates, last index down to 1
        for i in range(len(self.pool)-1, 0, -1):
            j = self.rng.randint(0, i)
            self.pool[i], self.pool[j] = self.pool[j], self.pool[i]

    def next_piece(self) -> str:
        if not self.pool:
            self._refill()
        return self.pool.pop()

    def __iter__(self): return self
    def __next__(self) -> str: return self.next_piece()
