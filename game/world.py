"""World owns every entity and advances them one fixed tick at a time."""

from config import SimulationConfig

from .ball import Ball
from .logger import get_logger
from .paddle import MovementDirection, Paddle, Side


class BallState:
    __slots__ = ("x", "y", "radius")

    def __init__(self, x, y, radius):
        self.x, self.y, self.radius = x, y, radius


class PaddleState:
    __slots__ = ("side", "x", "y", "width", "height")

    def __init__(self, side, x, y, width, height):
        self.side, self.x, self.y, self.width, self.height = side, x, y, width, height


class WorldSnapshot:
    """Read-only view handed to the renderer after the catch-up loop."""

    __slots__ = ("tick", "width", "height", "ball", "paddles", "scores")

    def __init__(self, tick, width, height, ball, paddles, scores):
        self.tick = tick
        self.width = width
        self.height = height
        self.ball = ball
        self.paddles = paddles
        self.scores = scores

    def to_dict(self):
        return {
            "tick": self.tick,
            "field": {"width": self.width, "height": self.height},
            "ball": {"x": self.ball.x, "y": self.ball.y, "radius": self.ball.radius},
            "paddles": [{"side": p.side.value, "x": p.x, "y": p.y, "width": p.width, "height": p.height}
                        for p in self.paddles],
            "scores": {side.value: score for side, score in self.scores.items()},
        }


class World:
    def __init__(self, config=None):
        config = config or SimulationConfig()
        self.config = config
        self.width = config.field_width
        self.height = config.field_height
        self.paddle_width = config.paddle_width
        self.paddle_height = config.paddle_height
        self.opponent = config.opponent
        self.tick = 0
        self._movement = MovementDirection.IDLE
        self._log = get_logger()

        start_y = (self.height - self.paddle_height) / 2.0
        sides = [Side.LEFT, Side.RIGHT][:config.paddle_count]
        self.paddles = [
            Paddle(0 if side is Side.LEFT else self.width - self.paddle_width, start_y,
                   self.paddle_width, self.paddle_height, side=side, speed=config.paddle_speed,
                   field_top=0, field_bottom=self.height)
            for side in sides
        ]

        # Guarded sides stop the ball at the paddle face; the rest are walls
        left = self.paddle_on(Side.LEFT)
        right = self.paddle_on(Side.RIGHT)
        vx, vy = config.ball_velocity
        self.ball = Ball(self.width / 2.0, self.height / 2.0, vx, vy, radius=config.ball_radius,
                         left_limit=left.contact_x if left else 0,
                         right_limit=right.contact_x if right else self.width,
                         field_top=0, field_bottom=self.height,
                         walls=[side for side in Side if self.paddle_on(side) is None])
        self.scores = {side: 0 for side in Side}

    @property
    def player(self):
        return self.paddles[0]

    @property
    def movement(self):
        return self._movement

    def set_movement(self, direction: MovementDirection):
        self._movement = direction

    def paddle_on(self, side):
        for paddle in self.paddles:
            if paddle.side is side:
                return paddle
        return None

    def ball_touches_paddle(self):
        return any(paddle.touches(self.ball.x, self.ball.y) for paddle in self.paddles)

    def update(self):
        self.player.update(self._movement)
        for paddle in self.paddles[1:]:
            if self.opponent == "tracking":
                paddle.track(self.ball.y)
            else:
                paddle.update(MovementDirection.IDLE)

        missed = self.ball.update(self.ball_touches_paddle())
        if missed is not None:
            scorer = missed.opposite
            self.scores[scorer] += 1
            self._log.info("point", tick=self.tick, scorer=scorer.value,
                           left=self.scores[Side.LEFT], right=self.scores[Side.RIGHT])
        self.tick += 1

    def snapshot(self):
        return WorldSnapshot(
            self.tick, self.width, self.height,
            BallState(self.ball.x, self.ball.y, self.ball.radius),
            [PaddleState(p.side, p.x, p.y, p.width, p.height) for p in self.paddles],
            dict(self.scores),
        )
