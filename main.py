import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import GameState
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger(__name__)

HOLD_KEYS = (pygame.K_LSHIFT, pygame.K_RSHIFT, pygame.K_c)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def handle_keydown(game, key, repeat):
    """One-shot commands. OS key repeat only re-fires soft drop."""
    if repeat:
        if key == pygame.K_DOWN:
            game.soft_drop()
        return
    if key == pygame.K_DOWN:
        game.soft_drop()
    elif key == pygame.K_UP:
        game.rotate(1)
    elif key == pygame.K_z:
        game.rotate(-1)
    elif key == pygame.K_SPACE:
        game.hard_drop()
    elif key in HOLD_KEYS:
        game.hold_piece()
    elif key == pygame.K_p:
        game.toggle_pause()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])
    pygame.key.set_repeat(CONFIG["DAS_MS"], CONFIG["ARR_MS"])

    game = GameState()
    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris — 7-bag, SRS, Hold")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    down_keys = set()

    while True:
        dt = clock.tick_busy_loop(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                repeat = e.key in down_keys
                down_keys.add(e.key)
                if e.key == pygame.K_r and not repeat:
                    log.info("restart (score=%d)", game.score)
                    game = GameState()
                    continue
                handle_keydown(game, e.key, repeat)
            if e.type == pygame.KEYUP:
                down_keys.discard(e.key)

        keys = pygame.key.get_pressed()
        game.input.left = bool(keys[pygame.K_LEFT])
        game.input.right = bool(keys[pygame.K_RIGHT])
        game.update(dt)

        render.draw(screen, game)
        pygame.display.flip()


if __name__ == '__main__':
    main()
