import pygame
import pytest

from config import W, H, RESTART_BTN
from controls import Command, CommandType, InputController


def ev(kind, **attrs):
    return pygame.event.Event(kind, **attrs)


class TestPointer:

    def test_motion_is_scaled_to_canvas(self):
        controls = InputController((W // 2, H // 2))
        cmds = controls.translate(ev(pygame.MOUSEMOTION, pos=(100, 150), rel=(0, 0), buttons=(0, 0, 0), touch=False))
        assert cmds == [Command.set_aim(200, 300)]

    def test_resize_changes_scale(self):
        controls = InputController()
        controls.resize(640, 800)
        (cmd,) = controls.translate(ev(pygame.MOUSEMOTION, pos=(320, 400), rel=(0, 0), buttons=(0, 0, 0), touch=False))
        assert cmd.type == CommandType.SET_AIM
        assert (cmd.x, cmd.y) == pytest.approx((400, 500))

    def test_left_click_confirms(self):
        controls = InputController()
        cmds = controls.translate(ev(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1, touch=False))
        assert cmds == [Command.confirm()]

    def test_other_buttons_ignored(self):
        controls = InputController()
        assert controls.translate(ev(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=3, touch=False)) == []

    def test_touch_synthesised_mouse_ignored(self):
        controls = InputController()
        assert controls.translate(ev(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1, touch=True)) == []
        assert controls.translate(ev(pygame.MOUSEMOTION, pos=(10, 10), rel=(0, 0), buttons=(0, 0, 0), touch=True)) == []

    def test_restart_button_only_when_active(self):
        controls = InputController()
        center = pygame.Rect(RESTART_BTN).center
        click = ev(pygame.MOUSEBUTTONDOWN, pos=center, button=1, touch=False)
        assert controls.translate(click, restart_active=True) == [Command.restart()]
        assert controls.translate(click, restart_active=False) == [Command.confirm()]


class TestTouch:

    def test_finger_down_and_motion_aim(self):
        controls = InputController((123, 456))
        down = controls.translate(ev(pygame.FINGERDOWN, x=0.5, y=0.25, dx=0.0, dy=0.0, finger_id=0, touch_id=0))
        move = controls.translate(ev(pygame.FINGERMOTION, x=0.25, y=0.5, dx=0.0, dy=0.0, finger_id=0, touch_id=0))
        assert down == [Command.set_aim(W * 0.5, H * 0.25)]
        assert move == [Command.set_aim(W * 0.25, H * 0.5)]

    def test_finger_up_confirms(self):
        controls = InputController()
        up = ev(pygame.FINGERUP, x=0.1, y=0.1, dx=0.0, dy=0.0, finger_id=0, touch_id=0)
        assert controls.translate(up) == [Command.confirm()]


class TestKeys:

    def test_space_confirms(self):
        assert InputController().translate(ev(pygame.KEYDOWN, key=pygame.K_SPACE)) == [Command.confirm()]

    def test_r_restarts(self):
        assert InputController().translate(ev(pygame.KEYDOWN, key=pygame.K_r)) == [Command.restart()]

    def test_other_keys_ignored(self):
        assert InputController().translate(ev(pygame.KEYDOWN, key=pygame.K_a)) == []
        assert InputController().translate(ev(pygame.KEYUP, key=pygame.K_SPACE)) == []
