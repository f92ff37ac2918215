import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from config import (
    BALL_START, GOAL_TOP, GOAL_BOTTOM, GOAL_LEFT, GOAL_RIGHT, AIM_MARGIN,
    WIN_SCORE, SHAKE_START, FLASH_START, PARTICLE_COUNT, ROYAL,
)
from core import Vec2, Ball, Keeper, Outcome, clamp, reset_ball, shot_velocity, step_ball, resolve_frame
from power import PowerMeter
from ai import KeeperAI
from fx import Particles, Juice
from controls import CommandType

logger = logging.getLogger(__name__)


class Phase(Enum):
    AIMING = "aiming"
    CHARGING = "charging"
    RESOLVING = "resolving"
    RESULT = "result"


RESULT_TEXT = {
    Outcome.SAVED: "Saved!",
    Outcome.MISS: "Miss!",
}


def goal_center():
    return Vec2((GOAL_LEFT + GOAL_RIGHT) / 2, (GOAL_TOP + GOAL_BOTTOM) / 2)


def clamp_aim(x, y):
    return Vec2(
        clamp(x, GOAL_LEFT + AIM_MARGIN, GOAL_RIGHT - AIM_MARGIN),
        clamp(y, GOAL_TOP + AIM_MARGIN, GOAL_BOTTOM - AIM_MARGIN),
    )


@dataclass
class Score:
    score: int = 0
    attempts: int = 0
    game_over: bool = False


@dataclass
class Readouts:
    score: int = 0
    attempts: int = 0
    best: int = 0


@dataclass
class GameSession:
    """Everything that changes while the game runs."""

    ball: Ball = field(default_factory=lambda: Ball(Vec2(*BALL_START)))
    keeper: Keeper = field(default_factory=Keeper)
    aim: Vec2 = field(default_factory=goal_center)
    power: PowerMeter = field(default_factory=PowerMeter)
    score: Score = field(default_factory=Score)
    readouts: Readouts = field(default_factory=Readouts)
    particles: Particles = field(default_factory=Particles)
    juice: Juice = field(default_factory=Juice)
    phase: Phase = Phase.AIMING
    result_msg: str = ""
    quality: float = 0.0


class GameStateMachine:
    def __init__(self, store, rng=None, session=None):
        self.store = store
        self.rng = rng or random
        self.session = session or GameSession(particles=Particles(self.rng))
        self.keeper_ai = KeeperAI(self.rng)
        self.init()

    def _enter(self, phase, msg=""):
        s = self.session
        logger.debug("phase %s -> %s", s.phase.value, phase.value)
        s.phase = phase
        s.result_msg = msg

    def _refresh_readouts(self):
        s = self.session
        s.readouts = Readouts(s.score.score, s.score.attempts, self.store.read())

    def init(self):
        s = self.session
        s.score = Score()
        s.particles.clear()
        s.juice.clear()
        self.reset_shot()
        self._refresh_readouts()

    def reset_shot(self):
        s = self.session
        reset_ball(s.ball)
        self.keeper_ai.reset(s.keeper)
        s.power.reset()
        s.aim = goal_center()
        s.quality = 0.0
        self._enter(Phase.AIMING)

    def restart(self):
        logger.info("Restarting session")
        self.init()

    def kick(self):
        s = self.session
        s.quality = s.power.quality()
        s.ball.vel = shot_velocity(s.ball.pos, s.aim, s.power.shot_power, s.quality)
        s.score.attempts += 1
        self._enter(Phase.RESOLVING)

    def handle(self, cmd):
        s = self.session
        if cmd.type == CommandType.RESTART:
            self.restart()
        elif cmd.type == CommandType.SET_AIM:
            if s.phase == Phase.AIMING:
                s.aim = clamp_aim(cmd.x, cmd.y)
        elif cmd.type == CommandType.CONFIRM:
            if s.phase == Phase.AIMING:
                s.aim = clamp_aim(s.aim.x, s.aim.y)
                self._enter(Phase.CHARGING)
            elif s.phase == Phase.CHARGING:
                self.kick()
            elif s.phase == Phase.RESULT and not s.score.game_over:
                self.reset_shot()

    def _apply_outcome(self, outcome):
        s = self.session
        msg = RESULT_TEXT.get(outcome, "")
        if outcome == Outcome.GOAL:
            s.score.score += 1
            s.juice.kick(SHAKE_START, FLASH_START)
            s.particles.spawn((s.ball.pos.x, s.ball.pos.y), PARTICLE_COUNT, ROYAL)
            msg = "Perfect!" if s.quality == 1.0 else "GOAL!"
            if s.score.score >= WIN_SCORE:
                msg = "You win!"
                s.score.game_over = True
                self._save_record()
        logger.info("Attempt %d: %s (score %d)", s.score.attempts, outcome.value, s.score.score)
        self._enter(Phase.RESULT, msg)
        self._refresh_readouts()

    def _save_record(self):
        attempts = self.session.score.attempts
        prev = self.store.read()
        if prev == 0 or attempts < prev:
            logger.info("New record: %d attempts (previous %s)", attempts, prev or "none")
            self.store.write(attempts)

    def tick(self):
        """Advance one frame. Returns the outcome resolved this frame, if any.

        After the win only the flash, shake and particles keep moving.
        """
        s = self.session
        s.juice.advance(self.rng)
        outcome = None

        if s.score.game_over:
            pass

        elif s.phase == Phase.CHARGING:
            s.power.advance()

        elif s.phase == Phase.RESOLVING:
            step_ball(s.ball)
            self.keeper_ai.update(s.keeper)
            outcome = resolve_frame(s.ball, s.keeper)
            if outcome is not None:
                self._apply_outcome(outcome)

        s.particles.advance()
        return outcome
