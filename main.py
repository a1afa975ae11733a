import pygame

from config import load_config
from game.crash import install_crash_handler
from game.game_engine import GameEngine
from game.logger import LogLevel, StructuredLogger

# Colors
BLACK = (0, 0, 0)


def main(config=None):
    config = config or load_config()
    install_crash_handler(config.logging.crash_file)
    log = StructuredLogger.configure(min_level=LogLevel[config.logging.level.upper()])

    # Initialize pygame/Start application
    pygame.init()
    width, height = config.simulation.field_width, config.simulation.field_height
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(config.display.caption)

    clock = pygame.time.Clock()
    engine = GameEngine(config)
    log.info("game start", width=width, height=height,
             update_rate=config.simulation.update_rate, paddles=config.simulation.paddle_count)

    running = True
    while running:
        dt = clock.tick(config.display.fps) / 1000.0  # seconds since last frame

        # Handle input & catch the simulation up to real time
        engine.handle_input(pygame.event.get())
        engine.update(dt)

        # Render
        screen.fill(BLACK)
        engine.render(screen)
        pygame.display.flip()

        if engine.request_quit:
            running = False

    log.info("game stop", tick=engine.world.tick)
    pygame.quit()


if __name__ == "__main__":
    main()
