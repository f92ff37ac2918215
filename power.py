from config import (
    POWER_SPEED, SWEET_SPOT_SIZE, GOOD_ZONE, SHOT_POWER,
    QUALITY_PERFECT, QUALITY_GOOD, QUALITY_WEAK,
)

def power_quality(pos, sweet_half_width=SWEET_SPOT_SIZE / 2):
    if 0.5 - sweet_half_width <= pos <= 0.5 + sweet_half_width:
        return QUALITY_PERFECT
    if GOOD_ZONE[0] <= pos <= GOOD_ZONE[1]:
        return QUALITY_GOOD
    return QUALITY_WEAK

class PowerMeter:
    """Triangle-wave power bar swept while the shot is charging."""

    def __init__(self, speed=POWER_SPEED, sweet_half_width=SWEET_SPOT_SIZE / 2, shot_power=SHOT_POWER):
        self.speed = speed
        self.sweet_half_width = sweet_half_width
        self.shot_power = shot_power
        self.reset()

    def reset(self):
        self.pos = 0.5
        self.direction = 1

    def advance(self):
        self.pos += self.direction * self.speed
        if self.pos >= 1:
            self.pos = 1.0
            self.direction = -1
        elif self.pos <= 0:
            self.pos = 0.0
            self.direction = 1

    def quality(self):
        return power_quality(self.pos, self.sweet_half_width)

    @property
    def sweet_range(self):
        return 0.5 - self.sweet_half_width, 0.5 + self.sweet_half_width
