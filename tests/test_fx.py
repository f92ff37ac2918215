import math
import pytest

from config import (
    ROYAL, PARTICLE_SPEED, PARTICLE_LIFT, PARTICLE_GRAVITY, PARTICLE_DRAG, FLASH_DECAY,
)
from fx import Particles, Juice


class ZeroRandom:
    def random(self):
        return 0.0


class TestParticles:

    def test_spawn_even_ring(self):
        parts = Particles(ZeroRandom())
        parts.spawn((100, 200), 4, ROYAL)
        assert len(parts) == 4
        for i, p in enumerate(parts.parts):
            a = math.tau * i / 4
            assert p["p"] == [100, 200]
            assert p["v"][0] == pytest.approx(math.cos(a) * PARTICLE_SPEED)
            assert p["v"][1] == pytest.approx(math.sin(a) * PARTICLE_SPEED - PARTICLE_LIFT)
            assert p["life"] == 1.0
            assert p["col"] == ROYAL

    def test_advance_applies_gravity_and_drag(self):
        parts = Particles(ZeroRandom())
        parts.spawn((0, 0), 1)
        parts.advance()
        p = parts.parts[0]
        vx = PARTICLE_SPEED * PARTICLE_DRAG
        vy = (-PARTICLE_LIFT + PARTICLE_GRAVITY) * PARTICLE_DRAG
        assert p["v"][0] == pytest.approx(vx)
        assert p["v"][1] == pytest.approx(vy)
        assert p["p"][0] == pytest.approx(vx)
        assert p["p"][1] == pytest.approx(vy)

    def test_life_decreases_every_advance(self):
        parts = Particles()
        parts.spawn((0, 0), 12)
        last = 1.0
        for _ in range(20):
            parts.advance()
            life = parts.parts[0]["life"]
            assert life < last
            last = life

    def test_gone_by_frame_26(self):
        parts = Particles()
        parts.spawn((0, 0), 12)
        for _ in range(24):
            parts.advance()
        assert len(parts) == 12
        parts.advance()
        parts.advance()
        assert len(parts) == 0

    def test_clear(self):
        parts = Particles()
        parts.spawn((0, 0), 5)
        parts.clear()
        assert len(parts) == 0


class TestJuice:

    def test_kick_and_decay(self):
        juice = Juice()
        juice.kick(12, 0.4)
        juice.advance()
        assert juice.shake == 11
        assert juice.flash == pytest.approx(0.4 - FLASH_DECAY)
        ox, oy = juice.offset
        assert abs(ox) <= 5.5 and abs(oy) <= 5.5

    def test_settles_to_zero(self):
        juice = Juice()
        juice.kick(12, 0.4)
        for _ in range(40):
            juice.advance()
        assert juice.shake == 0
        assert juice.flash == 0.0
        assert juice.offset == (0.0, 0.0)
