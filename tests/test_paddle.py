"""Unit tests for Paddle."""

from game.paddle import MovementDirection, Paddle, Side


class TestPaddleMovement:
    """Tests for Paddle.update."""

    def test_up_moves_by_speed(self, paddle):
        """UP decreases y by one speed step."""
        paddle.update(MovementDirection.UP)
        assert paddle.y == 98

    def test_down_moves_by_speed(self, paddle):
        """DOWN increases y by one speed step."""
        paddle.update(MovementDirection.DOWN)
        assert paddle.y == 102

    def test_idle_is_idempotent(self, paddle):
        """Repeated IDLE updates leave y unchanged."""
        for _ in range(50):
            paddle.update(MovementDirection.IDLE)
        assert paddle.y == 100

    def test_down_clamps_at_bottom(self, paddle):
        """300 DOWN ticks stop at field_bottom - height."""
        for _ in range(300):
            paddle.update(MovementDirection.DOWN)
            assert paddle.y <= 272
        assert paddle.y == 272

    def test_up_clamps_at_top(self, paddle):
        """UP never goes above the field top."""
        for _ in range(300):
            paddle.update(MovementDirection.UP)
            assert paddle.y >= 0
        assert paddle.y == 0

    def test_mixed_sequence_stays_in_bounds(self, paddle):
        """Any command sequence keeps y inside the clamp range."""
        pattern = [MovementDirection.UP] * 70 + [MovementDirection.DOWN] * 200 + [MovementDirection.IDLE] * 5
        for direction in pattern * 3:
            paddle.update(direction)
            assert 0 <= paddle.y <= 400 - 128


class TestPaddleContact:
    """Tests for contact geometry."""

    def test_left_contact_edge(self, paddle):
        """Left paddle contact edge is its right side."""
        assert paddle.contact_x == 32

    def test_right_contact_edge(self):
        """Right paddle contact edge is its left side."""
        right = Paddle(x=768, y=0, width=32, height=128, side=Side.RIGHT)
        assert right.contact_x == 768
        assert right.in_reach(768)
        assert not right.in_reach(767)

    def test_touch_inclusive_top_edge(self, paddle):
        """Ball exactly at paddle.y counts as touching."""
        assert paddle.touches(32, 100)

    def test_touch_inclusive_bottom_edge(self, paddle):
        """Ball exactly at paddle.y + height counts as touching."""
        assert paddle.touches(32, 228)

    def test_no_touch_outside_span(self, paddle):
        """Ball just past the paddle span is not touching."""
        assert not paddle.touches(32, 99.5)
        assert not paddle.touches(32, 228.5)

    def test_no_touch_before_contact_x(self, paddle):
        """Ball not yet at the contact edge is not touching."""
        assert not paddle.touches(33, 150)


class TestPaddleTracking:
    """Tests for Paddle.track."""

    def test_track_moves_toward_target(self, paddle):
        """Target below the centre moves the paddle down."""
        assert paddle.track(350) is MovementDirection.DOWN
        assert paddle.y == 102

    def test_track_holds_inside_deadzone(self, paddle):
        """Target near the centre keeps the paddle still."""
        assert paddle.track(paddle.center_y() + 3) is MovementDirection.IDLE
        assert paddle.y == 100
