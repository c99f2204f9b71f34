from snake.game import GamePhase, SnakeGame
from snake.render import overlay_lines


def test_overlay_text_per_phase():
    game = SnakeGame(seed=4)
    assert overlay_lines(game.snapshot())[0] == "Snake Game"

    game.init_game()
    assert overlay_lines(game.snapshot()) == []

    game.toggle_pause()
    assert overlay_lines(game.snapshot()) == ["PAUSED"]

    game.toggle_pause()
    game.score = 40
    game.phase = GamePhase.GAME_OVER
    lines = overlay_lines(game.snapshot())
    assert lines[0] == "Game Over!"
    assert "Final Score: 40" in lines
