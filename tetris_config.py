
COLS, ROWS = 10, 20

CONFIG = {
    "CELL_SIZE": 32,
    "DAS_MS": 150,
    "ARR_MS": 40,
    "LOCK_DELAY_MS": 500,
    "FLASH_MS": 220,
    "SHAKE_DECAY_PER_MS": 0.0035,
    "SEED": None,
}
