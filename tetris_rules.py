"""Scoring and level/gravity curve"""

LINE_SCORES = [0, 100, 300, 500, 800]
LINES_PER_LEVEL = 10
SOFT_DROP_PER_CELL = 1
HARD_DROP_PER_CELL = 2

def line_clear_score(cleared: int, level: int) -> int:
    if cleared >= len(LINE_SCORES): cleared = len(LINE_SCORES)-1
    return LINE_SCORES[cleared] * level

def level_for_lines(lines: int) -> int:
    return max(1, lines // LINES_PER_LEVEL + 1)

def drop_interval(level: int) -> int:
    """Milliseconds between gravity steps: 1000 at level 1, 70 faster per level, floor 80."""
    base, step = 1000, 70
    return max(80, base - (level - 1) * step)
