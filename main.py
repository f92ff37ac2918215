import logging
import pygame
from config import W, H, WINDOW_SCALE, FPS, LOG_LEVEL
from controls import InputController
from records import JsonRecordStore
from game import GameStateMachine
from ui import load_fonts, render

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()

    screen = pygame.display.set_mode((int(W * WINDOW_SCALE), int(H * WINDOW_SCALE)), pygame.RESIZABLE)
    pygame.display.set_caption("Penalty Kick")
    canvas = pygame.Surface((W, H))
    clock = pygame.time.Clock()
    fonts = load_fonts()

    store = JsonRecordStore()
    game = GameStateMachine(store)
    controls = InputController(screen.get_size())
    logger.info("Record file: %s (best %d)", store.path, game.session.readouts.best)

    show_debug = False
    running = True
    while running:
        clock.tick(FPS)
        controls.resize(*screen.get_size())

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
                continue
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                    continue
                if e.key == pygame.K_F3:
                    show_debug = not show_debug
            for cmd in controls.translate(e, restart_active=game.session.score.game_over):
                game.handle(cmd)

        game.tick()

        render(canvas, game.session, fonts, clock.get_fps(), show_debug)
        screen.blit(pygame.transform.smoothscale(canvas, screen.get_size()), (0, 0))
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
