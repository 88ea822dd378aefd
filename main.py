import logging

import pygame

from tetris_config import load_config
from tetris_game import Phase, Session
from tetris_layout import compute_dims
from tetris_render import PygameRenderer

KEY_TO_ACTION = {
    pygame.K_LEFT: "L",
    pygame.K_RIGHT: "R",
    pygame.K_DOWN: "SD",
    pygame.K_SPACE: "HD",
    pygame.K_UP: "SR",
    pygame.K_x: "SR",
    pygame.K_z: "SL",
    pygame.K_p: "Pause",
    pygame.K_c: "Continue",
    pygame.K_RETURN: "Start",
}

STATUS = {
    Phase.PAUSED: "PAUSED (C to continue)",
    Phase.GAME_OVER: "GAME OVER (Enter)",
}


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(**overrides):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    cfg = load_config(**overrides)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims(cfg)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    clock = pygame.time.Clock()

    render = PygameRenderer(screen, dims, font, clear_row_ms=cfg["CLEAR_ROW_MS"])
    session = Session(render, cfg)
    session.start(pygame.time.get_ticks())

    # the button pad only ever tracks one held key
    held = None
    try:
        while True:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    return
                if e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        return
                    action = KEY_TO_ACTION.get(e.key)
                    if action is None:
                        continue
                    if held is not None:
                        session.key_up()
                    held = e.key
                    session.key_down(action, pygame.time.get_ticks())
                if e.type == pygame.KEYUP and e.key == held:
                    held = None
                    session.key_up()

            session.tick(pygame.time.get_ticks())
            render.draw_panel_hud(session.score, STATUS.get(session.phase, ""))
            pygame.display.flip()
            clock.tick(60)
    finally:
        session.close()
        pygame.quit()


if __name__ == '__main__':
    main()
