"""Grid snake with a main menu, pause menu, game-over screen and high score."""
from .game import Game, speed_for_score
from .highscore import HighScoreStore
from .model import Direction, Snake, check_collisions, spawn_food
from .session import GameState, Key, RenderView, Session

__version__ = "1.0.0"
