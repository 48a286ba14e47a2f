"""
Grid geometry, the snake itself, collision rules and food placement.

Cells are plain ``(x, y)`` tuples with ``0 <= x < GRID_WIDTH`` and
``0 <= y < GRID_HEIGHT``. The snake keeps its head at index 0.
"""
import enum
import random
from collections import deque
from itertools import islice

from .settings import GRID_WIDTH, GRID_HEIGHT


class Direction(enum.Enum):
    """Movement directions as (dx, dy) grid offsets."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


def step(cell, direction):
    """Return the cell one step away from ``cell`` in ``direction``."""
    x, y = cell
    dx, dy = direction.value
    return (x + dx, y + dy)


def inside_grid(cell, width=GRID_WIDTH, height=GRID_HEIGHT):
    x, y = cell
    return 0 <= x < width and 0 <= y < height


class Snake:
    """
    Ordered body segments, head first.

    ``direction`` is the heading used by the last move; ``next_direction``
    is what the next move will use. Turns are checked against
    ``direction`` so two quick presses inside one tick can never add up
    to a reversal.
    """

    def __init__(self, cells, direction=Direction.RIGHT):
        if not cells:
            raise ValueError("A snake needs at least one cell.")
        self.body = deque(cells)
        self.direction = direction
        self.next_direction = direction

    def __len__(self):
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __contains__(self, cell):
        return cell in self.body

    @property
    def head(self):
        return self.body[0]

    @property
    def tail(self):
        return self.body[-1]

    def set_direction(self, new_dir):
        """Queue a turn unless it is an immediate reverse. Returns True if accepted."""
        if new_dir == self.direction.opposite:
            return False
        self.next_direction = new_dir
        return True

    def advance(self, direction=None):
        """
        Move one cell: push a new head and drop the tail.

        A pending growth (see ``grow``) leaves a duplicate tail cell in the
        body, so dropping one copy keeps the snake one segment longer.
        """
        if direction is not None:
            self.set_direction(direction)
        self.direction = self.next_direction
        new_head = step(self.head, self.direction)
        self.body.appendleft(new_head)
        self.body.pop()
        return new_head

    def grow(self):
        """Duplicate the tail cell once; the next advance keeps it."""
        self.body.append(self.body[-1])


# ------------------------------ Collisions -------------------------------- #
def hits_wall(snake, width=GRID_WIDTH, height=GRID_HEIGHT):
    return not inside_grid(snake.head, width, height)


def hits_self(snake):
    """True if the head shares a cell with any later segment."""
    head = snake.head
    return any(cell == head for cell in islice(snake.body, 1, None))


def check_collisions(snake, width=GRID_WIDTH, height=GRID_HEIGHT):
    """True when the snake has crashed into a wall or into itself."""
    return hits_wall(snake, width, height) or hits_self(snake)


# -------------------------------- Food ------------------------------------ #
def spawn_food(snake, rng=random, width=GRID_WIDTH, height=GRID_HEIGHT):
    """
    Return a uniformly random cell not covered by the snake.

    Rejection sampling; this only terminates while the snake leaves at
    least one cell free. On a 20x20 board that is never a concern in
    play, so it is not guarded.
    """
    occupied = set(snake.body)
    while True:
        cell = (rng.randrange(width), rng.randrange(height))
        if cell not in occupied:
            return cell
