"""
Render smoke tests on an off-screen canvas (SDL dummy video driver).
"""

import pygame
import pytest

from config import W, H, SAND, BALL_START
from controls import Command
from game import Phase
from ui import load_fonts, render


@pytest.fixture(scope="module")
def fonts():
    pygame.init()
    yield load_fonts()
    pygame.quit()


@pytest.fixture
def canvas():
    return pygame.Surface((W, H))


def pixel(surf, x, y):
    return tuple(surf.get_at((int(x), int(y))))[:3]


class TestRender:

    def test_ball_drawn_at_spot(self, game, fonts, canvas):
        render(canvas, game.session, fonts)
        assert pixel(canvas, *BALL_START) == SAND

    def test_shake_offsets_whole_frame(self, game, fonts, canvas):
        game.session.juice.offset = (10.0, 0.0)
        render(canvas, game.session, fonts)
        bx, by = BALL_START
        assert pixel(canvas, bx + 10, by) == SAND

    @pytest.mark.parametrize("phase", list(Phase))
    def test_every_phase_renders(self, game, fonts, canvas, phase):
        game.session.phase = phase
        game.session.result_msg = "Saved!" if phase == Phase.RESULT else ""
        render(canvas, game.session, fonts, fps=60.0, show_debug=True)

    def test_goal_frame_with_juice_renders(self, game, fonts, canvas):
        game.handle(Command.confirm())
        game.handle(Command.confirm())
        game.session.keeper.x = game.session.keeper.target_x = 235
        while game.tick() is None:
            pass
        assert game.session.juice.flash > 0
        render(canvas, game.session, fonts)

    def test_game_over_shows_restart(self, game, fonts, canvas):
        game.session.phase = Phase.RESULT
        game.session.result_msg = "You win!"
        game.session.score.game_over = True
        game.session.readouts.best = 7
        render(canvas, game.session, fonts)
