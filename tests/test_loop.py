from collections import deque

from snake.game import INITIAL_SPEED, Direction, GamePhase, Position, SnakeGame
from snake.loop import GameLoop


def running_loop(seed=21):
    game = SnakeGame(seed=seed)
    game.init_game()
    game.food = Position(0, 0)
    loop = GameLoop(game, clock=lambda: 0)
    loop.start()
    loop.poll(0)  # arms the timer
    return game, loop


def test_ticks_at_speed_interval():
    game, loop = running_loop()
    assert loop.armed
    assert not loop.poll(INITIAL_SPEED - 1)
    assert game.snake[0] == (10, 10)
    assert loop.poll(INITIAL_SPEED)
    assert game.snake[0] == (11, 10)
    assert not loop.poll(INITIAL_SPEED + 100)
    assert loop.poll(2 * INITIAL_SPEED)
    assert game.snake[0] == (12, 10)


def test_idle_before_start():
    game = SnakeGame(seed=1)
    loop = GameLoop(game)
    loop.start()
    assert not loop.poll(10_000)
    assert not loop.armed


def test_rearms_when_speed_changes():
    game, loop = running_loop()
    game.food = Position(11, 10)
    assert loop.poll(150)
    assert game.speed == INITIAL_SPEED - 2
    assert loop.interval == INITIAL_SPEED - 2
    assert not loop.poll(150 + 147)
    assert loop.poll(150 + 148)


def test_pause_keeps_timer_phase():
    game, loop = running_loop()
    game.toggle_pause()
    assert loop.poll(150)  # fires, but paused tick is a no-op
    assert game.snake[0] == (10, 10)
    game.toggle_pause()
    assert not loop.poll(299)
    assert loop.poll(300)
    assert game.snake[0] == (11, 10)


def test_no_tick_after_stop():
    game, loop = running_loop()
    loop.stop()
    assert not loop.poll(10_000)
    assert game.snake[0] == (10, 10)


def test_stops_on_game_over_and_resumes_on_new_session():
    game, loop = running_loop()
    game.snake = deque([Position(19, 10), Position(18, 10), Position(17, 10)])
    assert loop.poll(150)
    assert game.phase is GamePhase.GAME_OVER
    assert not loop.armed
    assert not loop.poll(300)

    game.init_game()
    game.food = Position(0, 0)
    assert not loop.poll(1000)  # re-arm from here
    assert loop.poll(1150)
    assert game.snake[0] == (11, 10)


def test_input_before_tick_is_applied():
    game, loop = running_loop()
    game.set_direction(Direction.DOWN)
    loop.poll(150)
    assert game.snake[0] == (10, 11)


def test_late_poll_fires_once():
    game, loop = running_loop()
    assert loop.poll(1000)
    assert not loop.poll(1000)
    assert game.snake[0] == (11, 10)
    assert loop.poll(1150)


def test_uses_clock_when_no_time_given():
    now = [0]
    game = SnakeGame(seed=2)
    game.init_game()
    game.food = Position(0, 0)
    loop = GameLoop(game, clock=lambda: now[0])
    loop.start()
    loop.poll()
    now[0] = 150
    assert loop.poll()
