"""Pygame drawing for every screen. Reads a RenderView, never game objects."""
import pygame

from .session import GameState
from .settings import (
    BG,
    FONT_NAME,
    FOOD,
    GAME_OVER,
    HIGHLIGHT,
    HINT,
    IDLE,
    MENU_SNAKE,
    OVERLAY,
    SNAKE,
    TEXT,
    TILE_SIZE,
)
from .title import pulse_alpha


def grid_to_px(cell):
    """Convert a (x, y) grid coordinate to a pygame.Rect in pixels."""
    x, y = cell
    return pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)


def option_label(option, selected):
    return f"> {option} <" if selected else option


class Renderer:
    def __init__(self, surface):
        self.surface = surface
        self._fonts = {}
        self._draw = {
            GameState.MENU: self.draw_main_menu,
            GameState.VIEW_HIGH_SCORE: self.draw_high_score,
            GameState.RUNNING: self.draw_game,
            GameState.PAUSED: self.draw_paused,
            GameState.GAME_OVER: self.draw_game_over,
        }

    def font(self, size):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(FONT_NAME, size)
        return self._fonts[size]

    def draw(self, view):
        self.surface.fill(BG)
        self._draw[view.state](view)

    # ----------------------------- Helpers -------------------------------- #
    def draw_centered_text(self, text, color, size, y, alpha=None):
        render = self.font(size).render(text, True, color)
        if alpha is not None:
            render.set_alpha(alpha)
        rect = render.get_rect(center=(self.surface.get_width() // 2, y))
        self.surface.blit(render, rect)

    def draw_cells(self, cells, color):
        for cell in cells:
            pygame.draw.rect(self.surface, color, grid_to_px(cell))

    def draw_food(self, view):
        if view.food is not None:
            pygame.draw.ellipse(self.surface, FOOD, grid_to_px(view.food))

    def draw_options(self, options, selected, size, top, gap):
        for i, option in enumerate(options):
            color = HIGHLIGHT if i == selected else IDLE
            self.draw_centered_text(option_label(option, i == selected), color, size, top + i * gap)

    # ----------------------------- Screens -------------------------------- #
    def draw_main_menu(self, view):
        height = self.surface.get_height()
        title_y = height // 6
        self.draw_centered_text(view.menu_title, SNAKE, 56, title_y, alpha=pulse_alpha(view.title_pulse))

        menu_top = title_y + 80
        self.draw_options(view.menu_options, view.selected, 34, menu_top, 50)

        hint_y = menu_top + len(view.menu_options) * 50 + 10
        self.draw_centered_text("USE ARROW KEYS TO NAVIGATE", HINT, 20, hint_y)
        self.draw_centered_text("PRESS ENTER TO SELECT", HINT, 20, hint_y + 20)

        self.draw_cells(view.menu_snake, MENU_SNAKE)

    def draw_high_score(self, view):
        center_y = self.surface.get_height() // 2 - 40
        self.draw_centered_text("HIGH SCORE", HIGHLIGHT, 44, center_y)
        self.draw_centered_text(f"Your Best: {view.high_score}", TEXT, 32, center_y + 40)
        self.draw_centered_text("Press Enter or Esc to return", HINT, 22, center_y + 100)

    def draw_game(self, view):
        self.draw_food(view)
        self.draw_cells(view.snake, SNAKE)
        self.draw_centered_text(f"Score: {view.score}     High Score: {view.high_score}", TEXT, 24, 24)

    def draw_paused(self, view):
        self.draw_game(view)
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self.surface.blit(overlay, (0, 0))

        center_y = self.surface.get_height() // 2
        self.draw_centered_text(view.menu_title, HIGHLIGHT, 44, center_y - 80)
        self.draw_options(view.menu_options, view.selected, 28, center_y - 20, 40)

    def draw_game_over(self, view):
        self.draw_cells(view.snake, SNAKE)
        self.draw_food(view)

        top = 50
        self.draw_centered_text("GAME OVER", GAME_OVER, 44, top)
        self.draw_centered_text(f"Score: {view.score}", TEXT, 26, top + 40)
        self.draw_centered_text(f"High Score: {view.high_score}", HIGHLIGHT, 26, top + 70)
        self.draw_centered_text("Press Enter to Restart", HINT, 22, top + 120)
        self.draw_centered_text("Press Esc to Menu", HINT, 22, top + 150)
