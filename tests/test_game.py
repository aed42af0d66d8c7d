from minefield.field import Field
from minefield.game import GameManager, GameSession
from minefield.model import GameState, Visibility


def test_open_command(field):
    session = GameSession(field)
    outcome = session.execute("Open A 2")
    assert outcome.message == ""
    assert not outcome.game_over
    assert field.tile_at(0, 2).is_open


def test_fail_and_refuse(field):
    session = GameSession(field)
    outcome = session.execute("OA0")
    assert outcome.message == "You failed!"
    assert outcome.game_over

    outcome = session.execute("OB1")
    assert outcome.message == "The game is already over"
    assert not field.tile_at(1, 1).is_open


def test_win(field):
    session = GameSession(field)
    session.execute("OA2")
    outcome = session.execute("open c0")
    assert outcome.message == "You won!"
    assert outcome.game_over
    assert field.state == GameState.SOLVED


def test_out_of_bounds_is_reported(field):
    session = GameSession(field)
    outcome = session.execute("Open D 0")
    assert outcome.message == "D0 is outside the field"
    assert not outcome.game_over
    assert field.count_by_visibility(Visibility.CLOSED) == 12

    assert session.execute("M A 9").message == "A9 is outside the field"


def test_malformed_is_reported(field):
    session = GameSession(field)
    outcome = session.execute("dig here")
    assert outcome.message == "Invalid command: 'dig here'"
    assert not outcome.game_over
    assert not outcome.quit


def test_mark_messages(field):
    session = GameSession(field)
    assert session.execute("M B1").message == ""
    assert session.execute("O B1").message == "B1 is already open or marked"
    assert session.execute("M B1").message == ""
    session.execute("O B1")
    assert session.execute("M B1").message == "B1 is already open and cannot be marked"


def test_quit_keeps_state(field):
    outcome = GameSession(field).execute("Quit")
    assert outcome.quit
    assert not outcome.game_over
    assert field.state == GameState.PLAYING


def test_usage(field):
    usage = GameSession(field).usage()
    assert "Row: A - C" in usage
    assert "Column: 0 - 3" in usage


def test_game_manager():
    mgr = GameManager()
    session = GameSession(Field(3, 3, 1, seed=1))

    assert not mgr.is_running("s1")
    assert mgr.create("s1", session) is session
    assert mgr.is_running("s1")
    assert mgr.get("s1") is session
    assert mgr.get("s2") is None

    mgr.stop("s1")
    mgr.stop("s1")
    assert not mgr.is_running("s1")
