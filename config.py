import os
from pathlib import Path

W, H = 800, 1000
WINDOW_SCALE = 0.8
FPS = 60

BG = (247, 245, 242)
INK = (44, 44, 44)
ROYAL = (65, 105, 225)
SAND = (201, 185, 154)
LINEN = (232, 228, 223)
WHITE = (255, 255, 255)
GRAY = (130, 130, 130)

GRAVITY = 0.1
DRAG = 0.99
BALL_R = 20

BALL_START = (W / 2, H - 260)
PITCH_TOP = H - 280

GOAL_TOP = 140
GOAL_BOTTOM = 460
GOAL_LEFT = 180
GOAL_RIGHT = W - 180
GOAL_POST_THICK = 8
NET_COLS = 8
NET_ROWS = 6

KEEPER_Y = 190
KEEPER_W = 110
KEEPER_H = 44
KEEPER_EASE = 0.12

AIM_MARGIN = 15
AIM_R = 16

POWER_METER_W = 240
POWER_METER_H = 32
POWER_SPEED = 0.018
SWEET_SPOT_SIZE = 0.22
GOOD_ZONE = (0.3, 0.7)
SHOT_POWER = 0.8

QUALITY_PERFECT = 1.0
QUALITY_GOOD = 0.85
QUALITY_WEAK = 0.6

BASE_SPEED_MIN = 14.0
SPEED_RANGE = 6.0

POST_DAMPING = 0.6
BAR_DAMPING = 0.5
OUT_MARGIN = BALL_R * 2

WIN_SCORE = 5

SHAKE_START = 12
FLASH_START = 0.4
FLASH_DECAY = 0.02

PARTICLE_COUNT = 12
PARTICLE_SPEED = 4.0
PARTICLE_LIFT = 2.0
PARTICLE_GRAVITY = 0.15
PARTICLE_DRAG = 0.98
PARTICLE_DECAY = 0.04
PARTICLE_R = 8

RESTART_BTN = (W // 2 - 110, H // 2 + 100, 220, 56)

RECORD_KEY = "penalty_kick.highscore"
RECORD_PATH = Path(os.environ.get("PENALTY_KICK_RECORD", Path.home() / ".penalty_kick" / "record.json"))
LOG_LEVEL = os.environ.get("PENALTY_KICK_LOG", "INFO").upper()
