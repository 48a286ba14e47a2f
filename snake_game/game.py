"""One round of snake: movement, collisions, feeding, score and speed."""
import logging
import random

from .model import Direction, Snake, check_collisions, spawn_food
from .settings import (
    BASE_SPEED_MS,
    FOOD_SCORE,
    MIN_SPEED_MS,
    SPEEDUP_EVERY,
    SPEEDUP_STEP_MS,
    START_CELL,
)

logger = logging.getLogger(__name__)


def speed_for_score(score):
    """Tick delay in ms: 2ms faster every 10 points, never below 50ms."""
    return max(MIN_SPEED_MS, BASE_SPEED_MS - (score // SPEEDUP_EVERY) * SPEEDUP_STEP_MS)


class Game:
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake([START_CELL], Direction.RIGHT)
        self.score = 0
        self.over = False
        self.tick_interval = BASE_SPEED_MS
        self.food = spawn_food(self.snake, self.rng)

    def set_direction(self, direction):
        return self.snake.set_direction(direction)

    def tick(self):
        """
        Advance the round by one step. Returns False once the round is over.

        The collision check always runs before the food check, so a move
        that crashes never scores.
        """
        if self.over:
            return False

        self.snake.advance()

        if check_collisions(self.snake):
            self.over = True
            logger.info("Game over at %s with score %d", self.snake.head, self.score)
            return False

        if self.snake.head == self.food:
            self.score += FOOD_SCORE
            self.snake.grow()
            self.tick_interval = speed_for_score(self.score)
            self.food = spawn_food(self.snake, self.rng)
            logger.debug("Ate food, score %d, tick %dms", self.score, self.tick_interval)

        return True
