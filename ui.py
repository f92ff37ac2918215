import math
import pygame
from config import (
    W, H, BG, INK, ROYAL, SAND, LINEN, WHITE, GRAY,
    BALL_START, PITCH_TOP, GOAL_TOP, GOAL_BOTTOM, GOAL_LEFT, GOAL_RIGHT, GOAL_POST_THICK,
    NET_COLS, NET_ROWS, AIM_R, POWER_METER_W, POWER_METER_H, RESTART_BTN,
)
from game import Phase

FONT_NAMES = "helvetica,arial"


def load_fonts():
    return {
        "big": pygame.font.SysFont(FONT_NAMES, 52, bold=True),
        "mid": pygame.font.SysFont(FONT_NAMES, 30),
        "small": pygame.font.SysFont(FONT_NAMES, 24, bold=True),
        "hud": pygame.font.SysFont(FONT_NAMES, 26),
        "debug": pygame.font.SysFont("consolas", 18),
    }


def blit_alpha_rect(surf, color, alpha, rect):
    r = pygame.Rect(rect)
    s = pygame.Surface((r.w, r.h), pygame.SRCALPHA)
    s.fill((*color, int(255 * max(0.0, min(1.0, alpha)))))
    surf.blit(s, r.topleft)


def draw_text(surf, font, text, color, center):
    t = font.render(text, True, color)
    surf.blit(t, t.get_rect(center=center))


def draw_dashed_line(surf, color, start, end, width=4, dash=8):
    x1, y1 = start
    x2, y2 = end
    length = math.hypot(x2 - x1, y2 - y1)
    if length < 1:
        return
    ux, uy = (x2 - x1) / length, (y2 - y1) / length
    d = 0.0
    while d < length:
        e = min(d + dash, length)
        pygame.draw.line(surf, color, (x1 + ux * d, y1 + uy * d), (x1 + ux * e, y1 + uy * e), width)
        d += dash * 2


def draw_pitch(surf):
    surf.fill(BG)
    pygame.draw.rect(surf, ROYAL, (0, PITCH_TOP, W, H - PITCH_TOP))
    for i in range(10):
        blit_alpha_rect(surf, WHITE, 0.05, (0, PITCH_TOP + i * 56, W, 28))


def draw_goal(surf):
    gw = GOAL_RIGHT - GOAL_LEFT
    gh = GOAL_BOTTOM - GOAL_TOP
    net = pygame.Surface((gw + 1, gh + 1), pygame.SRCALPHA)
    for i in range(NET_COLS + 1):
        x = gw * i // NET_COLS
        pygame.draw.line(net, (*INK, 38), (x, 0), (x, gh), 1)
    for i in range(NET_ROWS + 1):
        y = gh * i // NET_ROWS
        pygame.draw.line(net, (*INK, 38), (0, y), (gw, y), 1)
    surf.blit(net, (GOAL_LEFT, GOAL_TOP))
    blit_alpha_rect(surf, WHITE, 0.2, (GOAL_LEFT + 3, GOAL_TOP + 3, gw - 6, gh - 6))
    pygame.draw.rect(surf, INK, (GOAL_LEFT, GOAL_TOP, gw, gh), GOAL_POST_THICK)


def draw_keeper(surf, keeper):
    pygame.draw.rect(surf, INK, (int(keeper.left), int(keeper.y - keeper.h / 2), int(keeper.w), int(keeper.h)))


def draw_aim(surf, aim):
    draw_dashed_line(surf, ROYAL, BALL_START, (aim.x, aim.y))
    dot = pygame.Surface((AIM_R * 2 + 2, AIM_R * 2 + 2), pygame.SRCALPHA)
    pygame.draw.circle(dot, (*SAND, 230), (AIM_R + 1, AIM_R + 1), AIM_R)
    pygame.draw.circle(dot, INK, (AIM_R + 1, AIM_R + 1), AIM_R, 1)
    surf.blit(dot, (int(aim.x) - AIM_R - 1, int(aim.y) - AIM_R - 1))


def draw_ball(surf, ball):
    x, y, r = int(ball.pos.x), int(ball.pos.y), int(ball.r)
    shadow = pygame.Surface((r * 2 + 8, r * 2 + 8), pygame.SRCALPHA)
    pygame.draw.circle(shadow, (0, 0, 0, 50), (r + 4, r + 4), r + 2)
    surf.blit(shadow, (x - r - 4, y - r - 2))
    pygame.draw.circle(surf, SAND, (x, y), r)
    pygame.draw.circle(surf, INK, (x, y), r, 4)


def draw_power_meter(surf, font, power):
    mx = W // 2 - POWER_METER_W // 2
    my = H - 160
    pygame.draw.rect(surf, LINEN, (mx + 4, my + 4, POWER_METER_W - 8, POWER_METER_H - 8))
    lo, hi = power.sweet_range
    blit_alpha_rect(surf, ROYAL, 0.5, (mx + lo * POWER_METER_W, my + 4, (hi - lo) * POWER_METER_W, POWER_METER_H - 8))
    pygame.draw.rect(surf, ROYAL, (mx + power.pos * (POWER_METER_W - 16), my + 4, 16, POWER_METER_H - 8))
    pygame.draw.rect(surf, INK, (mx, my, POWER_METER_W, POWER_METER_H), 4)
    draw_text(surf, font, "Press SPACE in sweet spot", WHITE, (W // 2, my - 24))


def draw_button(surf, font, rect, text):
    pygame.draw.rect(surf, ROYAL, rect, border_radius=12)
    pygame.draw.rect(surf, WHITE, rect, 2, border_radius=12)
    draw_text(surf, font, text, WHITE, pygame.Rect(rect).center)


def draw_overlay(surf, fonts, msg, game_over):
    blit_alpha_rect(surf, INK, 0.92, (W // 2 - 200, H // 2 - 80, 400, 160))
    draw_text(surf, fonts["big"], msg, WHITE, (W // 2, H // 2 - 30))
    hint = "Press Play again" if game_over else "Press SPACE to continue"
    draw_text(surf, fonts["mid"], hint, WHITE, (W // 2, H // 2 + 40))


def draw_hud(surf, font, readouts):
    best = str(readouts.best) if readouts.best > 0 else "—"
    line = f"Score {readouts.score}    Attempts {readouts.attempts}    Best {best}"
    draw_text(surf, font, line, INK, (W // 2, 60))


def draw_debug(surf, font, session, fps):
    s = session
    lines = [
        f"FPS: {fps:5.1f}   phase: {s.phase.value}",
        f"BALL  x={s.ball.pos.x:7.1f} y={s.ball.pos.y:7.1f}",
        f"      vx={s.ball.vel.x:7.2f} vy={s.ball.vel.y:7.2f}",
        f"KEEP  x={s.keeper.x:7.1f} target={s.keeper.target_x:7.1f}",
        f"POWER pos={s.power.pos:5.3f} quality={s.power.quality():4.2f}",
        f"PARTICLES {len(s.particles)}   shake {s.juice.shake}",
    ]
    y = H - 150
    for text in lines:
        t = font.render(text, True, GRAY)
        surf.blit(t, (14, y))
        y += 20


def render(canvas, session, fonts, fps=0.0, show_debug=False):
    s = session
    frame = pygame.Surface((W, H))
    draw_pitch(frame)
    draw_goal(frame)

    if s.phase in (Phase.AIMING, Phase.CHARGING):
        draw_aim(frame, s.aim)

    draw_keeper(frame, s.keeper)
    draw_ball(frame, s.ball)
    s.particles.draw(frame)

    if s.phase == Phase.CHARGING:
        draw_power_meter(frame, fonts["small"], s.power)
    if s.phase == Phase.AIMING:
        draw_text(frame, fonts["mid"], "Aim with mouse · Press SPACE to lock aim", WHITE, (W // 2, H - 110))
    if s.phase == Phase.RESULT and s.result_msg:
        draw_overlay(frame, fonts, s.result_msg, s.score.game_over)

    canvas.fill(BG)
    ox, oy = s.juice.offset
    canvas.blit(frame, (int(ox), int(oy)))

    if s.juice.flash > 0:
        blit_alpha_rect(canvas, ROYAL, s.juice.flash, (0, 0, W, H))

    draw_hud(canvas, fonts["hud"], s.readouts)
    if s.score.game_over:
        draw_button(canvas, fonts["small"], RESTART_BTN, "PLAY AGAIN")
    if show_debug:
        draw_debug(canvas, fonts["debug"], s, fps)
