"""
Title screen decoration: a short snake sliding along the bottom row and a
pulsing brightness for the title text.
"""
from .settings import (
    GRID_WIDTH,
    MENU_SNAKE_LENGTH,
    MENU_SNAKE_ROW,
    PULSE_MAX,
    PULSE_MIN,
    PULSE_START,
    PULSE_STEP,
)


def pulse_alpha(pulse):
    """Map a pulse value to a 0-255 alpha, clamped."""
    return int(255 * max(0.0, min(1.0, pulse)))


class TitleAnimation:
    def __init__(self, width=GRID_WIDTH, row=MENU_SNAKE_ROW, length=MENU_SNAKE_LENGTH):
        self.width = width
        # Cells ordered left to right regardless of travel direction.
        self.menu_snake = [(x, row) for x in range(length)]
        self.moving_right = True
        self.pulse = PULSE_START
        self.pulse_rising = True

    def step_snake(self):
        """Slide one cell; at an edge turn around and sit still for this frame."""
        if self.moving_right:
            x, y = self.menu_snake[-1]
            if x + 1 >= self.width:
                self.moving_right = False
            else:
                self.menu_snake = self.menu_snake[1:] + [(x + 1, y)]
        else:
            x, y = self.menu_snake[0]
            if x - 1 < 0:
                self.moving_right = True
            else:
                self.menu_snake = [(x - 1, y)] + self.menu_snake[:-1]

    def step_pulse(self):
        # Rounded so the bounds are hit exactly instead of drifting.
        if self.pulse_rising:
            self.pulse = round(self.pulse + PULSE_STEP, 4)
            if self.pulse >= PULSE_MAX:
                self.pulse_rising = False
        else:
            self.pulse = round(self.pulse - PULSE_STEP, 4)
            if self.pulse <= PULSE_MIN:
                self.pulse_rising = True

    def step(self):
        self.step_snake()
        self.step_pulse()

    @property
    def alpha(self):
        return pulse_alpha(self.pulse)
