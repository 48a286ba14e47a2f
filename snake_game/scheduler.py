"""Fixed-interval clock driven by elapsed milliseconds instead of wall time."""


class IntervalTimer:
    """
    Accumulates elapsed time and reports when whole intervals have passed.

    The owner feeds it deltas with ``update`` (from ``pygame.time.Clock``
    in the real loop, synthetic numbers in tests) and then drains it:

        timer.update(dt)
        while timer.due():
            do_work()

    Changing ``interval_ms`` keeps whatever time has already built up,
    so a speed change applies from the next firing on.
    """

    def __init__(self, interval_ms, running=False):
        self.interval_ms = interval_ms
        self.running = running
        self._elapsed = 0

    def start(self, interval_ms=None):
        if interval_ms is not None:
            self.interval_ms = interval_ms
        self._elapsed = 0
        self.running = True

    def stop(self):
        self.running = False
        self._elapsed = 0

    def update(self, dt_ms):
        if self.running:
            self._elapsed += dt_ms

    def due(self):
        """Consume one interval if enough time has built up."""
        if self.running and self._elapsed >= self.interval_ms:
            self._elapsed -= self.interval_ms
            return True
        return False
