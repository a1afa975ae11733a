from .paddle import Side


class Ball:
    """
    Circle moving by a fixed delta per tick.

    Horizontal travel is limited to [left_limit, right_limit]. A side listed
    in ``walls`` always bounces; any other side is guarded by a paddle and
    only bounces when the caller reports contact.
    """

    def __init__(self, x, y, vx, vy, radius=4.0, left_limit=0, right_limit=800,
                 field_top=0, field_bottom=600, walls=()):
        self.spawn_x = float(x)
        self.spawn_y = float(y)
        self.spawn_vx = float(vx)
        self.spawn_vy = float(vy)
        self.x = float(x)
        self.y = float(y)
        self.vx = float(vx)
        self.vy = float(vy)
        self.radius = radius
        self.left_limit = left_limit
        self.right_limit = right_limit
        self.field_top = field_top
        self.field_bottom = field_bottom
        self.walls = frozenset(walls)

    def edge(self):
        """Side the ball has reached while still moving toward it, if any."""
        if self.vx < 0 and self.x <= self.left_limit:
            return Side.LEFT
        if self.vx > 0 and self.x >= self.right_limit:
            return Side.RIGHT
        return None

    def update(self, touches_paddle: bool):
        """Advance one tick; returns the side that missed the ball, or None."""
        side = self.edge()
        if side is not None:
            if touches_paddle or side in self.walls:
                self.vx = -self.vx
            else:
                self.reset(serve_from=side)
                return side

        self.x = min(max(self.x + self.vx, self.left_limit), self.right_limit)
        self.y += self.vy

        if self.y <= self.field_top:
            self.y = self.field_top
            self.vy = abs(self.vy)
        elif self.y >= self.field_bottom:
            self.y = self.field_bottom
            self.vy = -abs(self.vy)
        return None

    def reset(self, serve_from=None):
        # Back to the spawn point, served away from the side that missed
        self.x = self.spawn_x
        self.y = self.spawn_y
        self.vx = self.spawn_vx
        self.vy = self.spawn_vy
        if serve_from is Side.LEFT:
            self.vx = abs(self.vx)
        elif serve_from is Side.RIGHT:
            self.vx = -abs(self.vx)
