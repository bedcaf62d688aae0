import pytest

from blockdrop.core.config import Settings
from blockdrop.core.factory import SequenceShapeSource
from blockdrop.models.board import Position
from blockdrop.session import CONTROL_BUTTONS, Command, GameSession, GravityTimer


def make_session(*kinds, **settings):
    return GameSession(Settings(**settings), SequenceShapeSource(kinds or ("O",)))


def test_timer_counts_due_ticks():
    timer = GravityTimer(1000)
    assert timer.advance(0.5) == 0
    assert timer.advance(0.5) == 1
    assert timer.advance(2.5) == 2
    assert timer.advance(0.5) == 1


def test_timer_stops_after_cancel():
    timer = GravityTimer(100)
    timer.cancel()
    assert timer.cancelled
    assert timer.advance(10.0) == 0


def test_timer_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        GravityTimer(0)


def test_commands_are_applied_in_order():
    session = make_session("O")
    session.submit(Command.MOVE_LEFT)
    session.submit(Command.MOVE_LEFT)
    session.submit(Command.SOFT_DROP)
    assert len(session.queue) == 3
    assert session.process() == 3
    assert session.state.piece.position == Position(1, 2)
    assert not session.queue


def test_rejected_commands_do_not_count_as_changes():
    session = make_session("O")
    for _ in range(6):
        session.submit(Command.MOVE_LEFT)
    assert session.process() == 4
    assert session.state.piece.position.col == 0


def test_update_turns_elapsed_time_into_ticks():
    session = make_session("O", tick_ms=500)
    session.update(0.25)
    assert session.state.piece.position == Position(0, 4)
    session.update(1.0)
    assert session.state.piece.position == Position(2, 4)


def test_game_over_cancels_timer_and_drops_commands():
    session = make_session("O", rows=4, cols=4)
    session.update(10.0)
    assert session.game_over
    assert session.timer.cancelled
    assert not session.queue

    board = session.state.board
    session.submit(Command.MOVE_LEFT)
    session.update(5.0)
    assert not session.queue
    assert session.state.board == board


def test_snapshot_reports_display_grid_and_flag():
    session = make_session("O")
    snap = session.snapshot()
    assert (snap.rows, snap.cols) == (20, 10)
    assert snap.cell(0, 4) == "O"
    assert snap.cell(1, 5) == "O"
    assert snap.cell(2, 4) == 0
    assert snap.game_over is False
    assert list(session.state.board.occupied_cells()) == []


def test_restart_starts_a_fresh_state():
    session = make_session("O", rows=4, cols=4)
    session.update(10.0)
    assert session.game_over
    session.restart()
    assert not session.game_over
    assert not session.timer.cancelled
    assert list(session.state.board.occupied_cells()) == []


def test_close_stops_everything():
    session = make_session("O")
    session.submit(Command.ROTATE)
    session.close()
    assert session.closed
    assert session.timer.cancelled
    assert not session.queue
    session.submit(Command.SOFT_DROP)
    session.update(3.0)
    assert session.state.piece.position == Position(0, 4)


def test_seeded_sessions_play_the_same_pieces():
    a = GameSession(Settings(seed=99))
    b = GameSession(Settings(seed=99))
    for _ in range(60):
        a.submit(Command.TICK)
        b.submit(Command.TICK)
    a.process()
    b.process()
    assert a.snapshot() == b.snapshot()


def test_control_buttons_cover_every_player_command():
    commands = [command for _, command in CONTROL_BUTTONS]
    assert commands == [Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.SOFT_DROP, Command.ROTATE]
    assert all(label for label, _ in CONTROL_BUTTONS)


def test_dispatch_applies_button_command_at_once():
    session = make_session("T")
    assert session.dispatch(Command.MOVE_RIGHT) == 1
    assert session.state.piece.position == Position(0, 5)
    assert session.dispatch(Command.ROTATE) == 1
    assert session.state.piece.shape.cells == ((1, 0), (1, 1), (1, 0))
    assert session.dispatch(Command.SOFT_DROP) == 1
    assert session.state.piece.position == Position(1, 5)
    assert not session.queue


def test_dispatch_after_game_over_is_ignored():
    session = make_session("O", rows=4, cols=4)
    session.update(10.0)
    board = session.state.board
    assert session.dispatch(Command.MOVE_LEFT) == 0
    assert session.state.board == board


def test_restart_with_seed_replaces_injected_source():
    session = make_session("O")
    session.restart(seed=5)
    other = GameSession(Settings(seed=5))
    for _ in range(40):
        session.submit(Command.TICK)
        other.submit(Command.TICK)
    session.process()
    other.process()
    assert session.snapshot() == other.snapshot()


def test_restart_without_seed_keeps_injected_source():
    session = make_session("I")
    session.restart()
    assert session.state.piece.shape.kind == "I"
