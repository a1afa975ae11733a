"""Fixed-timestep accumulator that decouples simulation rate from frame rate."""

from .errors import ConfigError

# Float drift allowed when comparing accumulated time to the step
_EPSILON = 1e-9


class FixedTimestep:
    def __init__(self, rate=100, max_steps=None):
        if rate <= 0:
            raise ConfigError("update rate must be positive", key="update_rate")
        self.rate = rate
        self.step = 1.0 / rate
        self.max_steps = max_steps or None
        self.accumulated = 0.0
        self.ticks = 0
        self.dropped = 0

    def advance(self, delta, tick_fn):
        """
        Add ``delta`` seconds of real time and call ``tick_fn`` once per
        whole step available. Returns the number of ticks run this frame.

        When ``max_steps`` is set, steps beyond it are dropped and counted in
        ``dropped``; only the fractional remainder carries into the next frame.
        """
        self.accumulated += max(delta, 0.0)
        steps = 0
        while self.accumulated + _EPSILON >= self.step:
            if self.max_steps is not None and steps >= self.max_steps:
                backlog = int((self.accumulated + _EPSILON) // self.step)
                self.dropped += backlog
                self.accumulated -= backlog * self.step
                break
            tick_fn()
            self.accumulated -= self.step
            steps += 1
        self.accumulated = max(self.accumulated, 0.0)
        self.ticks += steps
        return steps
