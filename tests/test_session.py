from __future__ import annotations

import random

import pytest

from snake_game.model import Direction, step
from snake_game.session import GameState, Key, Session


def feed(session, times):
    """Put food right in front of the snake and tick, ``times`` times."""
    for _ in range(times):
        game = session.game
        game.food = step(game.snake.head, game.snake.next_direction)
        session.tick()


def crash(session):
    while session.state == GameState.RUNNING:
        session.game.food = (0, 0)
        session.tick()


def start(session):
    session.handle_key(Key.ENTER)
    session.game.food = (0, 0)


def test_initial_state(session):
    assert session.state == GameState.MENU
    assert session.game is None
    assert session.high_score == 0
    assert not session.exit_requested


def test_main_menu_navigation_wraps(session):
    session.handle_key(Key.UP)
    assert session.main_menu.selected == 2
    session.handle_key(Key.RIGHT)
    assert session.main_menu.selected == 0
    session.handle_key(Key.LEFT)
    session.handle_key(Key.DOWN)
    assert session.main_menu.selected == 0


def test_start_game(session):
    start(session)
    assert session.state == GameState.RUNNING
    assert list(session.game.snake) == [(10, 10)]
    assert session.game.score == 0
    assert session.game_timer.running
    assert session.game_timer.interval_ms == 120


def test_view_high_score_and_back(session):
    session.handle_key(Key.DOWN)
    session.handle_key(Key.ENTER)
    assert session.state == GameState.VIEW_HIGH_SCORE
    session.handle_key(Key.UP)
    assert session.state == GameState.VIEW_HIGH_SCORE
    session.handle_key(Key.ESCAPE)
    assert session.state == GameState.MENU

    session.handle_key(Key.ENTER)
    assert session.state == GameState.VIEW_HIGH_SCORE
    session.handle_key(Key.ENTER)
    assert session.state == GameState.MENU


def test_exit_from_main_menu(session):
    session.handle_key(Key.UP)
    session.handle_key(Key.ENTER)
    assert session.exit_requested


def test_none_key_is_ignored(session):
    session.handle_key(None)
    assert session.state == GameState.MENU
    assert session.main_menu.selected == 0


def test_direction_keys_while_running(session):
    start(session)
    session.handle_key(Key.UP)
    assert session.game.snake.next_direction == Direction.UP
    session.handle_key(Key.LEFT)  # reverse of the last move, ignored
    assert session.game.snake.next_direction == Direction.UP
    session.handle_key(Key.ENTER)
    assert session.state == GameState.RUNNING
    session.tick()
    assert session.game.snake.head == (10, 9)


def test_pause_gates_ticks_without_stopping_clock(session):
    start(session)
    session.handle_key(Key.ESCAPE)
    assert session.state == GameState.PAUSED
    session.advance_time(1000)
    assert session.game_timer.running
    assert session.game.snake.head == (10, 10)

    session.handle_key(Key.ESCAPE)
    assert session.state == GameState.RUNNING
    session.advance_time(120)
    assert session.game.snake.head == (11, 10)


def test_pause_menu_resume_restart_exit(session):
    start(session)
    session.advance_time(120)
    session.handle_key(Key.ESCAPE)
    session.handle_key(Key.ENTER)
    assert session.state == GameState.RUNNING
    assert session.game.snake.head == (11, 10)

    session.handle_key(Key.ESCAPE)
    session.handle_key(Key.DOWN)
    assert session.pause_menu.current == "Restart"
    session.handle_key(Key.ENTER)
    assert session.state == GameState.RUNNING
    assert list(session.game.snake) == [(10, 10)]
    assert session.pause_menu.selected == 0

    session.handle_key(Key.ESCAPE)
    session.handle_key(Key.LEFT)
    assert session.pause_menu.current == "Exit"
    session.handle_key(Key.ENTER)
    assert session.exit_requested


def test_clock_drives_ticks(session):
    start(session)
    session.advance_time(119)
    assert session.game.snake.head == (10, 10)
    session.advance_time(1)
    assert session.game.snake.head == (11, 10)
    session.advance_time(240)
    assert session.game.snake.head == (13, 10)


def test_eating_speeds_up_clock(session):
    start(session)
    feed(session, 2)
    assert session.game.score == 20
    assert session.game_timer.interval_ms == 116


def test_game_over_stops_clock_and_records_high_score(session, store):
    start(session)
    feed(session, 3)
    crash(session)
    assert session.state == GameState.GAME_OVER
    assert not session.game_timer.running
    assert session.high_score == 30
    assert store.path.read_text() == "30"

    reloaded = Session(store, rng=random.Random(0))
    assert reloaded.high_score == 30


def test_lower_score_keeps_high_score(session, store):
    store.save(100)
    session = Session(store)
    start(session)
    feed(session, 1)
    crash(session)
    assert session.high_score == 100
    assert store.path.read_text() == "100"


def test_game_over_screen(session):
    start(session)
    crash(session)
    session.handle_key(Key.UP)
    assert session.state == GameState.GAME_OVER
    session.handle_key(Key.ENTER)
    assert session.state == GameState.RUNNING
    assert session.game.score == 0

    crash(session)
    session.handle_key(Key.ESCAPE)
    assert session.state == GameState.MENU


def test_ticks_after_game_over_do_nothing(session):
    start(session)
    crash(session)
    snake = list(session.game.snake)
    session.tick()
    session.advance_time(5000)
    assert list(session.game.snake) == snake


def test_title_animates_only_on_main_menu(session):
    session.advance_time(150)
    assert session.title.menu_snake[0] == (1, 18)
    assert session.title.pulse == pytest.approx(0.05)

    start(session)
    session.advance_time(150)
    assert session.title.menu_snake[0] == (1, 18)
    assert session.title.pulse == pytest.approx(0.05)


def test_views(session):
    view = session.view()
    assert view.state == GameState.MENU
    assert view.menu_title == "SNAKE GAME"
    assert view.menu_options == ("Start Game", "View High Score", "Exit")
    assert len(view.menu_snake) == 6

    start(session)
    view = session.view()
    assert view.state == GameState.RUNNING
    assert view.snake == ((10, 10),)
    assert view.food == (0, 0)
    assert view.score == 0

    session.handle_key(Key.ESCAPE)
    view = session.view()
    assert view.state == GameState.PAUSED
    assert view.menu_options == ("Resume", "Restart", "Exit")
    assert view.selected == 0
