
import logging
import sys

import pygame

from blockfall_config import CONFIG, GameConfig
from blockfall_game import Game
from blockfall_input import command_for
from blockfall_layout import compute_dims
from blockfall_render import Renderer


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig.from_mapping(CONFIG)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims(config)
    screen = recreate_window(dims)
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = Renderer(dims, config, font, big_font)
    clock = pygame.time.Clock()
    game = Game(config)

    while True:
        dt = clock.tick(CONFIG["FPS"]) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if e.key == pygame.K_r:
                    game.restart()
                    continue
            cmd = command_for(e)
            if cmd is not None:
                game.submit_command(cmd)

        game.tick(dt)
        render.draw(screen, game.snapshot())
        pygame.display.flip()


if __name__ == '__main__':
    main()
