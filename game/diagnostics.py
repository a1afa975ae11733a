class FpsMeter:
    """Average frame rate over rolling real-time windows."""

    def __init__(self, window=5.0):
        self.window = window
        self._readings = []
        self._elapsed = 0.0

    def frame(self, dt):
        """Record one frame; returns the window average once it closes, else None."""
        if dt > 0:
            self._readings.append(1.0 / dt)
        self._elapsed += max(dt, 0.0)
        if self._elapsed < self.window or not self._readings:
            return None
        average = sum(self._readings) / len(self._readings)
        self._readings.clear()
        self._elapsed = 0.0
        return average
