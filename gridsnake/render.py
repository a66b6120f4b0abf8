"""Drawing. Everything here reads GameState and never mutates it."""

import math

import pygame

from .achievements import ACHIEVEMENTS
from .config import *
from .food import FOOD_TYPES
from .state import Session

RAINBOW = [(255, 0, 0), (255, 128, 0), (255, 255, 0), (0, 255, 0), (0, 0, 255), (128, 0, 255)]
EYE_OFFSETS = {
    "right": ((4, -4), (4, 4)),
    "left": ((-4, -4), (-4, 4)),
    "up": ((-4, -4), (4, -4)),
    "down": ((-4, 4), (4, 4)),
}


class Fonts:
    """Fonts used by the renderer; pygame.font must be initialised first."""

    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self.large = pygame.font.Font(None, 40)
        self.normal = pygame.font.Font(None, 28)
        self.small = pygame.font.Font(None, 22)
        self.tiny = pygame.font.Font(None, 16)


def cell_rect(cell, size=CELL_SIZE):
    x, y = cell
    return pygame.Rect(x * size, y * size, size, size)


def cell_center(cell, size=CELL_SIZE):
    x, y = cell
    return (x * size + size / 2, y * size + size / 2)


def body_color(index):
    color = pygame.Color(0, 0, 0)
    color.hsla = ((index * 25) % 360, 100, 70, 100)
    return color


def draw_text(surface, font, text, pos, color=WHITE, center=True):
    text_surface = font.render(text, True, color)
    rect = text_surface.get_rect(center=pos) if center else text_surface.get_rect(topleft=pos)
    surface.blit(text_surface, rect)
    return rect


def draw_board(surface, width, height):
    """Fill the play area and draw the grid lines."""
    pw, ph = width * CELL_SIZE, height * CELL_SIZE
    surface.fill(BOARD_COLOR, pygame.Rect(0, 0, pw, ph))
    for x in range(0, pw + 1, CELL_SIZE):
        pygame.draw.line(surface, GRID_LINE_COLOR, (x, 0), (x, ph))
    for y in range(0, ph + 1, CELL_SIZE):
        pygame.draw.line(surface, GRID_LINE_COLOR, (0, y), (pw, y))


def draw_snake(surface, snake):
    body = snake.body
    last = len(body) - 1
    for index, segment in enumerate(body):
        if index == 0:
            cx, cy = cell_center(segment)
            pygame.draw.circle(surface, GOLD, (int(cx), int(cy)), CELL_SIZE // 2 - 1)
            for dx, dy in EYE_OFFSETS[snake.heading]:
                pygame.draw.circle(surface, PURPLE, (int(cx + dx), int(cy + dy)), 2)
        elif index == last:
            draw_tail(surface, segment, body[index - 1], body_color(index))
        else:
            rect = cell_rect(segment)
            rect.size = (CELL_SIZE - 2, CELL_SIZE - 2)
            surface.fill(body_color(index), rect)


def draw_tail(surface, segment, previous, color):
    """Triangle pointing away from the rest of the body."""
    margin = 4
    size = CELL_SIZE - margin * 2
    left, top = segment[0] * CELL_SIZE + margin, segment[1] * CELL_SIZE + margin
    dx, dy = segment[0] - previous[0], segment[1] - previous[1]
    if dx > 0:
        points = [(left, top), (left, top + size), (left + size, top + size / 2)]
    elif dx < 0:
        points = [(left + size, top), (left + size, top + size), (left, top + size / 2)]
    elif dy > 0:
        points = [(left, top), (left + size, top), (left + size / 2, top + size)]
    else:
        # pointing up; also used while a fresh grow stacks the tail on itself
        points = [(left, top + size), (left + size, top + size), (left + size / 2, top)]
    pygame.draw.polygon(surface, color, points)


def draw_star(surface, color, center, spikes, outer, inner):
    cx, cy = center
    points = []
    rot = math.pi / 2 * 3
    step = math.pi / spikes
    for _ in range(spikes):
        points.append((cx + math.cos(rot) * outer, cy + math.sin(rot) * outer))
        rot += step
        points.append((cx + math.cos(rot) * inner, cy + math.sin(rot) * inner))
        rot += step
    pygame.draw.polygon(surface, color, points)


def draw_food(surface, food, pulse_frame, fonts=None):
    """Draw food with a shape keyed by its type and a pulsing size."""
    food_type = FOOD_TYPES[food.kind]
    cx, cy = cell_center(food.position)
    center = (int(cx), int(cy))
    pulse = 1 + math.sin(pulse_frame * 0.2) * 0.1
    color = food_type.color

    if food.kind == "star":
        draw_star(surface, color, (cx, cy), 5,
                  (CELL_SIZE / 2 - 2) * pulse, (CELL_SIZE / 4 - 1) * pulse)
    elif food.kind == "speed":
        s = CELL_SIZE * pulse * 0.8
        points = [(cx - s / 4, cy - s / 2), (cx + s / 4, cy - s / 4),
                  (cx - s / 4, cy + s / 4), (cx + s / 4, cy + s / 2)]
        pygame.draw.lines(surface, color, False, points, 3)
    elif food.kind == "rainbow":
        radius = CELL_SIZE * pulse / 2 - 2
        for i, ring_color in enumerate(reversed(RAINBOW)):
            r = radius * (len(RAINBOW) - i) / len(RAINBOW)
            pygame.draw.circle(surface, ring_color, center, max(1, int(r)))
    elif food.kind == "small":
        s = CELL_SIZE * pulse * 0.8
        points = [(cx, cy - s / 2), (cx + s / 2, cy), (cx, cy + s / 2), (cx - s / 2, cy)]
        pygame.draw.polygon(surface, color, points)
    else:
        radius = max(1, int((CELL_SIZE / 2 - 2) * pulse))
        pygame.draw.circle(surface, color, center, radius)
        if food.kind == "bomb":
            pygame.draw.line(surface, ORANGE, (cx, cy - radius), (cx + 4, cy - radius - 4), 2)

    if food_type.timed and fonts is not None:
        draw_text(surface, fonts.tiny, f"{food.time_left}s", (cx, cy - CELL_SIZE), WHITE)


def _overlay(surface, width, height, alpha):
    shade = pygame.Surface((width, height), pygame.SRCALPHA)
    shade.fill((0, 0, 0, alpha))
    surface.blit(shade, (0, 0))


def draw_hud(surface, state, fonts, now=None):
    """Score, level, effects and achievements in the side panel."""
    pw, ph = state.width * CELL_SIZE, state.height * CELL_SIZE
    surface.fill(INFO_PANEL_COLOR, pygame.Rect(pw, 0, INFO_PANEL_WIDTH, ph))
    x = pw + 10
    y = 10
    lines = [
        (f"Score: {state.score}", WHITE),
        (f"High: {state.high_score}", WHITE),
        (f"Level: {state.level}", WHITE),
        (f"Mode: {state.difficulty}", YELLOW),
        (f"Sound: {'on' if state.sound_enabled else 'off'}", WHITE if state.sound_enabled else RED),
    ]
    effects = state.effects
    if effects.speed:
        lines.append((_effect_label("SPEED", effects.speed_until, now), FOOD_TYPES["speed"].color))
    if effects.double:
        lines.append((_effect_label("x2 SCORE", effects.double_until, now), FOOD_TYPES["rainbow"].color))
    for text, color in lines:
        rect = draw_text(surface, fonts.small, text, (x, y), color, center=False)
        y = rect.bottom + 6

    y += 10
    draw_text(surface, fonts.small, "Achievements", (x, y), GOLD, center=False)
    y += 22
    for achievement in ACHIEVEMENTS:
        unlocked = achievement.id in state.unlocked
        mark = "*" if unlocked else "-"
        color = GOLD if unlocked else DARK_GREY
        draw_text(surface, fonts.tiny, f"{mark} {achievement.name}: {achievement.description}",
                  (x, y), color, center=False)
        y += 16

    draw_text(surface, fonts.tiny, "Arrows/WASD move  Space pause", (x, ph - 48), WHITE, center=False)
    draw_text(surface, fonts.tiny, "Enter start  1-5 mode  M sound", (x, ph - 32), WHITE, center=False)
    draw_text(surface, fonts.tiny, "N step  Esc quit", (x, ph - 16), WHITE, center=False)


def _effect_label(label, until, now):
    if until is None or now is None:
        return label
    return f"{label} {max(0.0, until - now):.1f}s"


def render(surface, state, fonts, now=None):
    """Draw one full frame of state onto surface."""
    pw, ph = state.width * CELL_SIZE, state.height * CELL_SIZE
    draw_board(surface, state.width, state.height)
    draw_snake(surface, state.snake)
    if state.food is not None:
        draw_food(surface, state.food, state.pulse_frame, fonts)
    draw_hud(surface, state, fonts, now)

    if state.level_banner:
        draw_text(surface, fonts.normal, f"LEVEL UP! Level {state.level}", (pw // 2, 50), GOLD)
    for i, achievement in enumerate(state.toasts):
        draw_text(surface, fonts.small, f"Achievement unlocked: {achievement.name}",
                  (pw // 2, ph - 30 - i * 24), GOLD)

    if state.session is Session.IDLE:
        _overlay(surface, pw, ph, 120)
        draw_text(surface, fonts.large, "GRID SNAKE", (pw // 2, ph // 2 - 30), WHITE)
        draw_text(surface, fonts.small, "Press Enter to start", (pw // 2, ph // 2 + 20), YELLOW)
    elif state.session is Session.PAUSED:
        draw_text(surface, fonts.large, "PAUSED", (pw // 2, ph // 2), YELLOW)
    elif state.session is Session.GAME_OVER:
        _overlay(surface, pw, ph, 200)
        draw_text(surface, fonts.large, "GAME OVER!", (pw // 2, ph // 2 - 40), WHITE)
        draw_text(surface, fonts.normal, f"Final Score: {state.score}", (pw // 2, ph // 2), WHITE)
        if state.new_record:
            draw_text(surface, fonts.normal, "New Record!", (pw // 2, ph // 2 + 30), GOLD)
        draw_text(surface, fonts.small, "Press Enter to play again", (pw // 2, ph // 2 + 70), WHITE)
