from dataclasses import dataclass
from enum import Enum
import pygame
from config import W, H, RESTART_BTN


class CommandType(Enum):
    SET_AIM = "set_aim"
    CONFIRM = "confirm"
    RESTART = "restart"


@dataclass(frozen=True)
class Command:
    type: CommandType
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def set_aim(cls, x, y):
        return cls(CommandType.SET_AIM, float(x), float(y))

    @classmethod
    def confirm(cls):
        return cls(CommandType.CONFIRM)

    @classmethod
    def restart(cls):
        return cls(CommandType.RESTART)


CONFIRM_KEYS = (pygame.K_SPACE,)
RESTART_KEYS = (pygame.K_r,)


class InputController:
    """Turns raw pygame events into game commands.

    Window coordinates are scaled onto the fixed W x H canvas, so the game
    never sees the size of the window it is shown in.
    """

    def __init__(self, view_size=(W, H)):
        self.restart_rect = pygame.Rect(RESTART_BTN)
        self.resize(*view_size)

    def resize(self, width, height):
        self.view_w = max(1, width)
        self.view_h = max(1, height)

    def to_canvas(self, x, y):
        return x * (W / self.view_w), y * (H / self.view_h)

    def translate(self, e, restart_active=False):
        # SDL mirrors touches as mouse events; the finger events already cover them
        if e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN) and getattr(e, "touch", False):
            return []

        if e.type == pygame.MOUSEMOTION:
            return [Command.set_aim(*self.to_canvas(*e.pos))]

        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            cx, cy = self.to_canvas(*e.pos)
            if restart_active and self.restart_rect.collidepoint(cx, cy):
                return [Command.restart()]
            return [Command.confirm()]

        if e.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            return [Command.set_aim(e.x * W, e.y * H)]

        if e.type == pygame.FINGERUP:
            if restart_active and self.restart_rect.collidepoint(e.x * W, e.y * H):
                return [Command.restart()]
            return [Command.confirm()]

        if e.type == pygame.KEYDOWN:
            if e.key in CONFIRM_KEYS:
                return [Command.confirm()]
            if e.key in RESTART_KEYS:
                return [Command.restart()]

        return []
