import pygame

from .paddle import MovementDirection

UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)


class MovementControls:
    """Turns key events into the movement command for the player paddle."""

    def __init__(self):
        self.direction = MovementDirection.IDLE

    def handle_event(self, event) -> MovementDirection:
        if event.type == pygame.KEYDOWN:
            if event.key in UP_KEYS:
                self.direction = MovementDirection.UP
            elif event.key in DOWN_KEYS:
                self.direction = MovementDirection.DOWN
        elif event.type == pygame.KEYUP:
            # Only releasing the key behind the current command stops the paddle
            if event.key in UP_KEYS and self.direction is MovementDirection.UP:
                self.direction = MovementDirection.IDLE
            elif event.key in DOWN_KEYS and self.direction is MovementDirection.DOWN:
                self.direction = MovementDirection.IDLE
        return self.direction
