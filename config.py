import json
from pathlib import Path

from game.errors import ConfigError
from game.logger import LogLevel

_DEFAULT_CONFIG = Path(__file__).parent / "game" / "config.json"

OPPONENTS = ("tracking", "idle")


class SimulationConfig:
    __slots__ = ("update_rate", "max_catch_up_steps", "field_width", "field_height",
                 "paddle_count", "paddle_width", "paddle_height", "paddle_speed",
                 "ball_radius", "ball_velocity", "opponent")

    def __init__(self, update_rate=100, max_catch_up_steps=25, field_width=800, field_height=600,
                 paddle_count=1, paddle_width=32, paddle_height=128, paddle_speed=2.0,
                 ball_radius=4.0, ball_velocity=(-3.0, 2.0), opponent="tracking"):
        self.update_rate = update_rate
        self.max_catch_up_steps = max_catch_up_steps
        self.field_width = field_width
        self.field_height = field_height
        self.paddle_count = paddle_count
        self.paddle_width = paddle_width
        self.paddle_height = paddle_height
        self.paddle_speed = paddle_speed
        self.ball_radius = ball_radius
        self.ball_velocity = ball_velocity
        self.opponent = opponent
        self.validate()
        self.ball_velocity = tuple(ball_velocity)

    def validate(self):
        if self.update_rate <= 0:
            raise ConfigError("update_rate must be positive", key="update_rate")
        if self.max_catch_up_steps is not None and self.max_catch_up_steps < 0:
            raise ConfigError("max_catch_up_steps must not be negative", key="max_catch_up_steps")
        if self.field_width <= 0 or self.field_height <= 0:
            raise ConfigError("field size must be positive", key="field_width")
        if self.paddle_count not in (1, 2):
            raise ConfigError("paddle_count must be 1 or 2", key="paddle_count")
        if not 0 < self.paddle_height <= self.field_height:
            raise ConfigError("paddle_height must fit the field", key="paddle_height")
        if not 0 < self.paddle_width * self.paddle_count < self.field_width:
            raise ConfigError("paddle_width must fit the field", key="paddle_width")
        if self.paddle_speed <= 0:
            raise ConfigError("paddle_speed must be positive", key="paddle_speed")
        if self.ball_radius <= 0:
            raise ConfigError("ball_radius must be positive", key="ball_radius")
        if not isinstance(self.ball_velocity, (list, tuple)) or len(self.ball_velocity) != 2:
            raise ConfigError("ball_velocity must be [vx, vy]", key="ball_velocity")
        if self.opponent not in OPPONENTS:
            raise ConfigError(f"opponent must be one of {OPPONENTS}", key="opponent")


class DisplayConfig:
    __slots__ = ("caption", "fps", "fps_sample_seconds")

    def __init__(self, caption="Pong - Fixed Step", fps=60, fps_sample_seconds=5.0):
        self.caption = caption
        self.fps = fps
        self.fps_sample_seconds = fps_sample_seconds


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file
        self.validate()

    def validate(self):
        if str(self.level).upper() not in LogLevel.__members__:
            raise ConfigError(f"level must be one of {list(LogLevel.__members__)}", key="level")


class Config:
    __slots__ = ("simulation", "display", "logging")

    def __init__(self, simulation=None, display=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.display = display or DisplayConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            _section(SimulationConfig, d, "simulation"),
            _section(DisplayConfig, d, "display"),
            _section(LoggingConfig, d, "logging"),
        )


def _section(section_cls, d, name):
    values = d.get(name, {})
    unknown = sorted(set(values) - set(section_cls.__slots__))
    if unknown:
        raise ConfigError(f"unknown config key: {name}.{unknown[0]}", key=f"{name}.{unknown[0]}")
    return section_cls(**values)


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
