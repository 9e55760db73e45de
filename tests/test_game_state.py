from brickbreaker.canvas import Color, Pencil, Style
from brickbreaker.game_state import (BRICK_COLUMNS, BRICK_ROWS, GameState,
                                     contains, playfield_width)
from brickbreaker.vec2 import Vec2


def test_construction_from_window_size(state):
    assert state.dimensions == Vec2(105, 30)
    assert state.paddle_position == Vec2(5, 25)
    assert state.paddle_size == Vec2(12, 2)
    assert state.ball_position == Vec2(5, 20)
    assert state.ball_speed == Vec2(1, -1)
    assert playfield_width() == 105


def test_playfield_width_ignores_window_width():
    assert GameState(Vec2.xy(200, 40)).dimensions == Vec2(105, 40)


def test_brick_grid_layout(state):
    assert len(state.bricks) == BRICK_ROWS * BRICK_COLUMNS == 20
    assert all(not b.broken for b in state.bricks)
    assert state.bricks[0].position == Vec2(5, 5)
    xs = sorted({b.position.x for b in state.bricks})
    assert xs == [5, 25, 45, 65, 85]
    assert all(b.size == Vec2(15, 2) for b in state.bricks)


def test_bricks_do_not_overlap(state):
    cells = set()
    for brick in state.bricks:
        for x in range(brick.position.x, brick.position.x + brick.size.x):
            for y in range(brick.position.y, brick.position.y + brick.size.y):
                assert (x, y) not in cells
                cells.add((x, y))


def test_contains_is_inclusive_on_all_edges():
    pos, size = Vec2(5, 25), Vec2(12, 2)
    assert contains(pos, size, Vec2(5, 25))
    assert contains(pos, size, Vec2(17, 27))
    assert not contains(pos, size, Vec2(18, 26))
    assert not contains(pos, size, Vec2(10, 24))


def test_update_moves_ball_by_speed(state):
    state.update()
    assert state.ball_position == Vec2(6, 19)
    assert state.ball_speed == Vec2(1, -1)


def test_paddle_clamped_right(state):
    state.move_paddle(200)
    state.update()
    assert state.paddle_position.x == 105 - 12 - 1


def test_paddle_clamped_left(state):
    state.move_paddle(-50)
    state.update()
    assert state.paddle_position.x == 1


def test_paddle_inside_bounds_is_untouched(state):
    state.move_paddle(86)  # x = 91
    state.update()
    assert state.paddle_position.x == 91


def test_right_wall_flips_horizontal_only(state):
    state.ball_position = Vec2(104, 20)
    state.ball_speed = Vec2(1, 1)
    state.update()
    assert state.ball_position == Vec2(105, 21)
    assert state.ball_speed == Vec2(-1, 1)


def test_left_wall_flips_horizontal_only(state):
    state.ball_position = Vec2(2, 20)
    state.ball_speed = Vec2(-1, -1)
    state.update()
    assert state.ball_speed == Vec2(1, -1)


def test_top_wall_flips_vertical(state):
    state.ball_position = Vec2(50, 2)
    state.update()
    assert state.ball_position == Vec2(51, 1)
    assert state.ball_speed == Vec2(1, 1)


def test_single_brick_hit_breaks_and_flips(state):
    state.ball_position = Vec2(10, 14)
    state.update()
    hit = [b for b in state.bricks if b.broken]
    assert [b.position for b in hit] == [Vec2(5, 11)]
    assert state.ball_speed == Vec2(1, 1)


def test_shared_edge_hits_two_bricks_and_flips_cancel(state):
    state.ball_position = Vec2(10, 12)
    state.update()
    hit = [b.position for b in state.bricks if b.broken]
    assert hit == [Vec2(5, 9), Vec2(5, 11)]
    assert state.ball_speed == Vec2(1, -1)


def test_broken_brick_no_longer_collides(state):
    state.bricks[15].broken = True  # (5, 11)
    state.ball_position = Vec2(10, 14)
    state.update()
    assert state.ball_speed == Vec2(1, -1)
    assert state.bricks[15].broken


def test_paddle_flips_vertical_without_changing_angle(state):
    state.ball_position = Vec2(10, 24)
    state.ball_speed = Vec2(1, 1)
    state.update()
    assert state.ball_position == Vec2(11, 25)
    assert state.ball_speed == Vec2(1, -1)


def test_long_run_keeps_invariants(state):
    broken = set()
    for _ in range(2000):
        if state.is_over():
            break
        before_pos, before_speed = state.ball_position, state.ball_speed
        state.update()
        assert state.ball_position == before_pos + before_speed
        assert abs(state.ball_speed.x) == 1 and abs(state.ball_speed.y) == 1
        assert 1 <= state.paddle_position.x <= 105 - 12 - 1
        now_broken = {i for i, b in enumerate(state.bricks) if b.broken}
        assert broken <= now_broken
        broken = now_broken


def test_is_over_at_playfield_height(state):
    state.ball_position = Vec2(50, 29)
    assert not state.is_over()
    state.ball_position = Vec2(50, 30)
    assert state.is_over()


def test_render_draws_border_paddle_bricks_and_ball(state, canvas):
    state.render(Pencil(canvas))

    assert canvas.cell(Vec2(0, 0)).value == "╔"
    assert canvas.cell(Vec2(104, 0)).value == "╗"
    assert canvas.cell(Vec2(0, 29)).value == "╚"
    assert canvas.cell(Vec2(104, 29)).value == "╝"

    paddle = canvas.cell(Vec2(5, 25))
    assert paddle.value == "╭" and paddle.foreground == Color.xterm(3)
    assert canvas.cell(Vec2(16, 26)).value == "╯"

    brick = canvas.cell(Vec2(5, 5))
    assert brick.value == "┌" and brick.foreground == Color.xterm(1)
    assert canvas.cell(Vec2(19, 6)).value == "┘"

    ball = canvas.cell(Vec2(5, 20))
    assert ball.value == "o"
    assert ball.style == Style.BOLD
    assert ball.foreground == Color.xterm(2)


def test_render_skips_broken_bricks(state, canvas):
    state.bricks[0].broken = True
    state.render(Pencil(canvas))
    assert canvas.cell(Vec2(5, 5)).value == " "
    assert canvas.cell(Vec2(25, 5)).value == "┌"
