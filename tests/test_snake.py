import pytest

from gridsnake.snake import Snake


def test_advance_moves_head_and_keeps_length():
    snake = Snake()
    for n in range(1, 6):
        snake.advance()
        assert snake.head == (10 + n, 10)
        assert len(snake) == 3


def test_advance_keeping_tail_grows_by_one():
    snake = Snake()
    snake.advance(keep_tail=True)
    assert snake.body == [(11, 10), (10, 10), (9, 10), (8, 10)]


def test_reversal_is_ignored():
    snake = Snake()
    assert snake.turn("left") is False
    assert snake.heading == "right"


def test_ninety_degree_and_same_direction_turns_accepted():
    snake = Snake()
    assert snake.turn("right") is True
    assert snake.turn("up") is True
    assert snake.heading == "up"


def test_two_turns_in_one_tick_cannot_reverse():
    snake = Snake()
    assert snake.turn("up")
    # still physically moving right until the next advance
    assert snake.turn("left") is False
    snake.advance()
    assert snake.turn("left") is True


def test_unknown_heading_raises():
    with pytest.raises(ValueError):
        Snake().turn("sideways")


def test_grow_appends_two_tail_copies():
    snake = Snake()
    snake.grow()
    assert snake.body == [(10, 10), (9, 10), (8, 10), (8, 10), (8, 10)]
    assert not snake.check_self_collision()


def test_shrink_respects_minimum_length():
    snake = Snake(body=[(10, 10), (9, 10), (8, 10)])
    assert snake.shrink() == 0
    assert len(snake) == 3

    snake = Snake(body=[(10, 10), (9, 10), (8, 10), (7, 10)])
    assert snake.shrink() == 1
    assert snake.body == [(10, 10), (9, 10), (8, 10)]

    snake = Snake(body=[(10, 10), (9, 10), (8, 10), (7, 10), (6, 10), (5, 10)])
    assert snake.shrink() == 2
    assert snake.body == [(10, 10), (9, 10), (8, 10), (7, 10)]


def test_wall_collision():
    snake = Snake(body=[(0, 5), (1, 5), (2, 5)], heading="left")
    assert not snake.check_wall_collision(30, 20)
    snake.advance()
    assert snake.head == (-1, 5)
    assert snake.check_wall_collision(30, 20)

    snake = Snake(body=[(29, 5), (28, 5), (27, 5)])
    snake.advance()
    assert snake.check_wall_collision(30, 20)


def test_self_collision():
    snake = Snake(body=[(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)], heading="down")
    snake.advance()
    assert snake.head == (5, 6)
    assert snake.check_self_collision()


def test_moving_into_vacated_tail_cell_is_safe():
    snake = Snake(body=[(5, 5), (6, 5), (6, 6), (5, 6)], heading="down")
    snake.advance()
    assert snake.head == (5, 6)
    assert not snake.check_self_collision()
