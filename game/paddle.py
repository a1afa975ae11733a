from enum import Enum


class MovementDirection(Enum):
    UP = "up"
    DOWN = "down"
    IDLE = "idle"


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self):
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class Paddle:
    def __init__(self, x, y, width, height, side=Side.LEFT, speed=2.0, field_top=0, field_bottom=600):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.side = side
        # Speed is in field units per tick
        self.speed = speed
        self.field_top = field_top
        self.field_bottom = field_bottom

    def update(self, direction: MovementDirection):
        if direction is MovementDirection.UP:
            self.y = max(self.field_top, self.y - self.speed)
        elif direction is MovementDirection.DOWN:
            self.y = min(self.field_bottom - self.height, self.y + self.speed)

    def track(self, target_y: float, deadzone: float = 6.0) -> MovementDirection:
        # Follow a target with the same per-tick speed as the player
        direction = MovementDirection.IDLE
        if target_y < self.center_y() - deadzone:
            direction = MovementDirection.UP
        elif target_y > self.center_y() + deadzone:
            direction = MovementDirection.DOWN
        self.update(direction)
        return direction

    @property
    def contact_x(self) -> float:
        """Inner edge facing the play field."""
        if self.side is Side.LEFT:
            return self.x + self.width
        return self.x

    def in_reach(self, x: float) -> bool:
        if self.side is Side.LEFT:
            return x <= self.contact_x
        return x >= self.contact_x

    def touches(self, x: float, y: float) -> bool:
        # Inclusive on every edge: a ball exactly on the boundary counts
        return self.in_reach(x) and self.y <= y <= self.y + self.height

    def center_y(self):
        return self.y + self.height / 2.0
