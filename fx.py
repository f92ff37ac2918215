import math
import random
import pygame
from config import (
    ROYAL, PARTICLE_COUNT, PARTICLE_SPEED, PARTICLE_LIFT, PARTICLE_GRAVITY,
    PARTICLE_DRAG, PARTICLE_DECAY, PARTICLE_R, FLASH_DECAY,
)

class Particles:
    def __init__(self, rng=None):
        self.parts = []
        self.rng = rng or random

    def __len__(self):
        return len(self.parts)

    def spawn(self, origin, count=PARTICLE_COUNT, color=ROYAL):
        cx, cy = origin
        for i in range(count):
            a = math.tau * i / count + self.rng.random()
            self.parts.append({
                "p": [cx, cy],
                "v": [math.cos(a) * PARTICLE_SPEED, math.sin(a) * PARTICLE_SPEED - PARTICLE_LIFT],
                "life": 1.0,
                "col": color,
            })

    def advance(self):
        alive = []
        for p in self.parts:
            p["v"][1] += PARTICLE_GRAVITY
            p["v"][0] *= PARTICLE_DRAG
            p["v"][1] *= PARTICLE_DRAG
            p["p"][0] += p["v"][0]
            p["p"][1] += p["v"][1]
            p["life"] -= PARTICLE_DECAY
            if p["life"] <= 0:
                continue
            alive.append(p)
        self.parts = alive

    def clear(self):
        self.parts = []

    def draw(self, surf):
        for p in self.parts:
            x, y = p["p"]
            a = int(255 * max(0.0, min(1.0, p["life"])))
            dot = pygame.Surface((PARTICLE_R * 2, PARTICLE_R * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, (*p["col"], a), (PARTICLE_R, PARTICLE_R), PARTICLE_R)
            surf.blit(dot, (int(x) - PARTICLE_R, int(y) - PARTICLE_R))

class Juice:
    """Goal flash and screen shake, both decaying to zero frame by frame."""

    def __init__(self):
        self.clear()

    def clear(self):
        self.shake = 0
        self.flash = 0.0
        self.offset = (0.0, 0.0)

    def kick(self, shake, flash):
        self.shake = shake
        self.flash = flash

    def advance(self, rng=None):
        rng = rng or random
        if self.shake > 0:
            self.shake -= 1
        if self.flash > 0:
            self.flash = max(0.0, self.flash - FLASH_DECAY)
        if self.shake > 0:
            self.offset = ((rng.random() - 0.5) * self.shake, (rng.random() - 0.5) * self.shake)
        else:
            self.offset = (0.0, 0.0)
