import pygame

from config import Config

from .controls import MovementControls
from .diagnostics import FpsMeter
from .logger import get_logger
from .paddle import Side
from .timestep import FixedTimestep
from .world import World

WHITE = (255, 255, 255)
DIM = (90, 90, 90)

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


# ----------------- Game Engine -----------------
class GameEngine:
    """
    Drives the World at a fixed tick rate from variable-length frames.

    Input events become a movement command, real time is drained in fixed
    steps, then the renderer draws a snapshot of the settled world.
    """

    def __init__(self, config=None):
        self.config = config or Config()
        sim = self.config.simulation

        self.world = World(sim)
        self.timestep = FixedTimestep(sim.update_rate, max_steps=sim.max_catch_up_steps)
        self.controls = MovementControls()
        self.fps = FpsMeter(window=self.config.display.fps_sample_seconds)

        self.request_quit = False
        self._font = None
        self._log = get_logger()

    # ---------- Input ----------
    def handle_input(self, events):
        for event in events:
            if event.type == pygame.QUIT:
                self.request_quit = True
            elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
                self.request_quit = True
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                self.world.set_movement(self.controls.handle_event(event))

    # ---------- Update ----------
    def update(self, dt: float):
        dropped = self.timestep.dropped
        steps = self.timestep.advance(dt, self.world.update)
        if self.timestep.dropped > dropped:
            self._log.warn("catch-up capped", ran=steps,
                           dropped=self.timestep.dropped - dropped, tick=self.world.tick)

        avg = self.fps.frame(dt)
        if avg is not None:
            self._log.info(f"avg fps ({self.fps.window:g}s)", fps=round(avg, 1), tick=self.world.tick)
        return steps

    # ---------- Render ----------
    def render(self, screen):
        snap = self.world.snapshot()

        pygame.draw.line(screen, DIM, (snap.width // 2, 0), (snap.width // 2, snap.height))
        for paddle in snap.paddles:
            rect = pygame.Rect(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))
            pygame.draw.rect(screen, WHITE, rect, 1)
        ball = snap.ball
        pygame.draw.circle(screen, WHITE, (int(ball.x), int(ball.y)), max(1, int(ball.radius)), 1)

        # HUD: points per side
        if self._font is None:
            self._font = pygame.font.Font(None, 36)
        left = self._font.render(str(snap.scores[Side.LEFT]), True, WHITE)
        right = self._font.render(str(snap.scores[Side.RIGHT]), True, WHITE)
        screen.blit(left, left.get_rect(midtop=(snap.width // 4, 16)))
        screen.blit(right, right.get_rect(midtop=(snap.width * 3 // 4, 16)))
