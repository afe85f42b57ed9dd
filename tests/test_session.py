from rl7d.config import GenerationSettings
from rl7d.input import InputAction
from rl7d.rng import SeededRandom
from rl7d.session import GameEvent, GameSession


def tiny_settings(**kw):
    params = dict(width=30, height=20, room_min_size=4, room_max_size=6, max_rooms=8)
    params.update(kw)
    return GenerationSettings(**params)


def test_player_starts_at_first_room_center():
    session = GameSession(tiny_settings(), SeededRandom(5))
    assert session.rooms
    assert session.player_pos == session.rooms[0].center()
    assert not session.grid.is_blocked(*session.player_pos)


def test_scripted_session_moves_and_emits(scripted):
    # one 5x5 room at (2, 2): interior x/y 3..6, player at (4, 4)
    session = GameSession(tiny_settings(room_min_size=5, room_max_size=5, max_rooms=1), scripted(ints=[5, 5, 2, 2]))
    assert session.player_pos == (4, 4)
    events = []
    session.add_listener(lambda e, s: events.append(e))

    assert session.handle(InputAction.MOVE_RIGHT) is False
    assert session.player_pos == (5, 4)
    assert events == [GameEvent.PLAYER_MOVED]

    session.handle(InputAction.MOVE_RIGHT)
    session.handle(InputAction.MOVE_RIGHT)  # (7, 4) is the east wall
    assert session.player_pos == (6, 4)
    assert events == [GameEvent.PLAYER_MOVED, GameEvent.PLAYER_MOVED]

    session.handle(InputAction.MOVE_UP)
    assert session.player_pos == (6, 3)


def test_zero_rooms_player_cannot_move():
    session = GameSession(tiny_settings(max_rooms=0), SeededRandom(1))
    assert session.rooms == []
    assert session.player_pos == (15, 10)
    for action in (InputAction.MOVE_UP, InputAction.MOVE_DOWN, InputAction.MOVE_LEFT, InputAction.MOVE_RIGHT):
        assert session.handle(action) is False
        assert session.player_pos == (15, 10)


def test_exit_and_fullscreen_actions():
    session = GameSession(tiny_settings(), SeededRandom(2))
    events = []
    session.add_listener(lambda e, s: events.append((e, s.fullscreen)))
    assert session.fullscreen is False
    assert session.handle(InputAction.TOGGLE_FULLSCREEN) is False
    assert session.handle(InputAction.TOGGLE_FULLSCREEN) is False
    assert events == [(GameEvent.FULLSCREEN_TOGGLED, True), (GameEvent.FULLSCREEN_TOGGLED, False)]
    assert session.handle(None) is False
    assert session.handle(InputAction.EXIT) is True


def test_diagonal_move_refused():
    session = GameSession(tiny_settings(), SeededRandom(3))
    start = session.player_pos
    assert session.move(1, 1) is False
    assert session.player_pos == start
