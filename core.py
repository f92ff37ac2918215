import math
from dataclasses import dataclass
from enum import Enum
from config import (
    W, H, BALL_R, BALL_START, GRAVITY, DRAG,
    GOAL_TOP, GOAL_BOTTOM, GOAL_LEFT, GOAL_RIGHT,
    KEEPER_Y, KEEPER_W, KEEPER_H,
    BASE_SPEED_MIN, SPEED_RANGE, POST_DAMPING, BAR_DAMPING, OUT_MARGIN,
)

class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __sub__(self, o): return Vec2(self.x - o.x, self.y - o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    def __repr__(self): return f"Vec2({self.x:.3f}, {self.y:.3f})"
    def length(self): return math.hypot(self.x, self.y)
    def normalized(self):
        l = self.length()
        if l <= 1e-9:
            return Vec2(0, 0)
        return Vec2(self.x / l, self.y / l)

UP = Vec2(0, -1)

class Outcome(Enum):
    GOAL = "goal"
    SAVED = "saved"
    MISS = "miss"

@dataclass
class Ball:
    pos: Vec2
    r: float = BALL_R
    vel: Vec2 = None
    def __post_init__(self):
        if self.vel is None:
            self.vel = Vec2(0, 0)

@dataclass
class Keeper:
    x: float = W / 2
    target_x: float = W / 2
    y: float = KEEPER_Y
    w: float = KEEPER_W
    h: float = KEEPER_H

    @property
    def left(self):
        return self.x - self.w / 2

    @property
    def right(self):
        return self.x + self.w / 2

def clamp(v, a, b):
    return max(a, min(b, v))

def reset_ball(ball: Ball):
    ball.pos = Vec2(*BALL_START)
    ball.vel = Vec2(0, 0)

def shot_speed(shot_power, quality):
    return (BASE_SPEED_MIN + shot_power * SPEED_RANGE) * quality

def shot_velocity(start: Vec2, aim: Vec2, shot_power, quality) -> Vec2:
    """Launch velocity from the ball towards the frozen aim point.

    A zero-length aim vector kicks straight up instead of producing NaN.
    """
    direction = (aim - start).normalized()
    if direction.length() == 0:
        direction = UP
    return direction * shot_speed(shot_power, quality)

def step_ball(ball: Ball):
    # gravity, then drag, then position: trajectories depend on this order
    ball.vel.y += GRAVITY
    ball.vel.x *= DRAG
    ball.vel.y *= DRAG
    ball.pos.x += ball.vel.x
    ball.pos.y += ball.vel.y

def crossed_goal_line(ball: Ball):
    return ball.pos.y - ball.r < GOAL_TOP

def check_goal_line(ball: Ball, keeper: Keeper):
    x, r = ball.pos.x, ball.r
    in_width = GOAL_LEFT + r < x < GOAL_RIGHT - r
    saved = in_width and keeper.left - r < x < keeper.right + r
    if in_width and not saved:
        return Outcome.GOAL
    if saved:
        return Outcome.SAVED
    return Outcome.MISS

def out_of_bounds(ball: Ball):
    x, y = ball.pos.x, ball.pos.y
    return y < -OUT_MARGIN or y > H + OUT_MARGIN or x < -OUT_MARGIN or x > W + OUT_MARGIN

def bounce_frame(ball: Ball):
    x, y, r = ball.pos.x, ball.pos.y, ball.r
    bounced = False
    post_left = x < GOAL_LEFT + r and y < GOAL_BOTTOM
    post_right = x > GOAL_RIGHT - r and y < GOAL_BOTTOM
    if post_left or post_right:
        ball.vel.x *= -POST_DAMPING
        ball.pos.x = GOAL_LEFT + r if x < W / 2 else GOAL_RIGHT - r
        bounced = True
    crossbar = y < GOAL_TOP + r and GOAL_LEFT < x < GOAL_RIGHT
    if crossbar and ball.vel.y < 0:
        ball.vel.y *= -BAR_DAMPING
        ball.pos.y = GOAL_TOP + r
        bounced = True
    return bounced

def resolve_frame(ball: Ball, keeper: Keeper):
    if crossed_goal_line(ball):
        return check_goal_line(ball, keeper)
    if out_of_bounds(ball):
        return Outcome.MISS
    bounce_frame(ball)
    return None
