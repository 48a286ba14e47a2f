"""
Top-level state machine: which screen is showing, what each key does
there, and the clocks that drive gameplay and the title animation.

Every screen is a small object with the same two methods:

- ``handle_input(session, key)`` reacts to one key press
- ``describe(session)`` returns the ``RenderView`` to draw

so adding a screen means adding a class, not growing a switch.
"""
import enum
import logging
import random
from dataclasses import dataclass

from .game import Game
from .menus import Menu
from .model import Direction
from .scheduler import IntervalTimer
from .settings import (
    ANIMATION_MS,
    BASE_SPEED_MS,
    MAIN_MENU_OPTIONS,
    PAUSE_MENU_OPTIONS,
    TITLE,
)
from .title import TitleAnimation

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"


class GameState(enum.Enum):
    MENU = "menu"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    VIEW_HIGH_SCORE = "view_high_score"


KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}
PREVIOUS_KEYS = (Key.UP, Key.LEFT)
NEXT_KEYS = (Key.DOWN, Key.RIGHT)


@dataclass(frozen=True)
class RenderView:
    """Everything the renderer needs for one frame."""
    state: GameState
    snake: tuple = ()
    food: tuple = None
    score: int = 0
    high_score: int = 0
    menu_title: str = ""
    menu_options: tuple = ()
    selected: int = 0
    title_pulse: float = 0.0
    menu_snake: tuple = ()


# ------------------------------- Screens ---------------------------------- #
class Screen:
    state = None

    def handle_input(self, session, key):
        pass

    def describe(self, session):
        return RenderView(state=self.state, high_score=session.high_score)


def _navigate(menu, key):
    """Move a menu selection for arrow keys. Returns True if the key was used."""
    if key in PREVIOUS_KEYS:
        menu.previous()
        return True
    if key in NEXT_KEYS:
        menu.next()
        return True
    return False


def _game_view(state, session, **extra):
    game = session.game
    return RenderView(
        state=state,
        snake=tuple(game.snake),
        food=game.food,
        score=game.score,
        high_score=session.high_score,
        **extra
    )


class MainMenuScreen(Screen):
    state = GameState.MENU

    def handle_input(self, session, key):
        menu = session.main_menu
        if _navigate(menu, key):
            return
        if key == Key.ENTER:
            if menu.selected == 0:
                session.start_game()
            elif menu.selected == 1:
                session.set_state(GameState.VIEW_HIGH_SCORE)
            else:
                session.request_exit()

    def describe(self, session):
        return RenderView(
            state=self.state,
            high_score=session.high_score,
            menu_title=TITLE,
            menu_options=session.main_menu.options,
            selected=session.main_menu.selected,
            title_pulse=session.title.pulse,
            menu_snake=tuple(session.title.menu_snake),
        )


class HighScoreScreen(Screen):
    state = GameState.VIEW_HIGH_SCORE

    def handle_input(self, session, key):
        if key in (Key.ENTER, Key.ESCAPE):
            session.set_state(GameState.MENU)


class RunningScreen(Screen):
    state = GameState.RUNNING

    def handle_input(self, session, key):
        if key in KEY_DIRECTIONS:
            session.game.set_direction(KEY_DIRECTIONS[key])
        elif key == Key.ESCAPE:
            # The gameplay clock keeps firing; ticks are ignored while paused.
            session.set_state(GameState.PAUSED)

    def describe(self, session):
        return _game_view(self.state, session)


class PauseScreen(Screen):
    state = GameState.PAUSED

    def handle_input(self, session, key):
        menu = session.pause_menu
        if _navigate(menu, key):
            return
        if key == Key.ESCAPE:
            session.set_state(GameState.RUNNING)
        elif key == Key.ENTER:
            if menu.selected == 0:
                session.set_state(GameState.RUNNING)
            elif menu.selected == 1:
                session.start_game()
            else:
                session.request_exit()

    def describe(self, session):
        return _game_view(
            self.state,
            session,
            menu_title="PAUSED",
            menu_options=session.pause_menu.options,
            selected=session.pause_menu.selected,
        )


class GameOverScreen(Screen):
    state = GameState.GAME_OVER

    def handle_input(self, session, key):
        if key == Key.ENTER:
            session.start_game()
        elif key == Key.ESCAPE:
            session.set_state(GameState.MENU)

    def describe(self, session):
        return _game_view(self.state, session)


SCREENS = (MainMenuScreen, HighScoreScreen, RunningScreen, PauseScreen, GameOverScreen)


# ------------------------------- Session ---------------------------------- #
class Session:
    """
    Owns all mutable game state for one process: the current screen, the
    current round, the high score and both clocks.

    Nothing here touches pygame; the entry point feeds in keys and elapsed
    time and draws whatever ``view()`` returns.
    """

    def __init__(self, store, rng=None):
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.high_score = store.load()
        self.state = GameState.MENU
        self.game = None
        self.main_menu = Menu(MAIN_MENU_OPTIONS)
        self.pause_menu = Menu(PAUSE_MENU_OPTIONS)
        self.title = TitleAnimation()
        self.game_timer = IntervalTimer(BASE_SPEED_MS)
        self.animation_timer = IntervalTimer(ANIMATION_MS, running=True)
        self.exit_requested = False
        self.screens = {cls.state: cls() for cls in SCREENS}

    @property
    def screen(self):
        return self.screens[self.state]

    def set_state(self, state):
        if state != self.state:
            logger.debug("State %s -> %s", self.state.name, state.name)
        self.state = state

    def handle_key(self, key):
        if key is None:
            return
        self.screen.handle_input(self, key)

    def start_game(self):
        self.game = Game(self.rng)
        self.pause_menu.reset()
        self.game_timer.start(BASE_SPEED_MS)
        self.set_state(GameState.RUNNING)
        logger.info("New game started")

    def request_exit(self):
        logger.info("Exit requested")
        self.exit_requested = True

    def tick(self):
        """One gameplay step. Does nothing unless a game is running."""
        if self.state != GameState.RUNNING or self.game is None:
            return
        if not self.game.tick():
            self.game_over()
            return
        self.game_timer.interval_ms = self.game.tick_interval

    def game_over(self):
        self.set_state(GameState.GAME_OVER)
        self.game_timer.stop()
        score = self.game.score
        if score > self.high_score:
            self.high_score = score
            self.store.save(score)
            logger.info("New high score %d", score)

    def animate(self):
        """One title animation frame; only the main menu animates."""
        if self.state == GameState.MENU:
            self.title.step()

    def advance_time(self, dt_ms):
        """Feed elapsed wall time to both clocks and run whatever fell due."""
        self.game_timer.update(dt_ms)
        while self.game_timer.due():
            self.tick()
        self.animation_timer.update(dt_ms)
        while self.animation_timer.due():
            self.animate()

    def view(self):
        return self.screen.describe(self)
