from rl7d.dungeon.rect import Rect
from rl7d.dungeon.rooms import RoomPlacer, carve_room, fits
from rl7d.dungeon.tiles import TileGrid


def test_fits_is_pure():
    accepted = [Rect(0, 0, 4, 4)]
    before = list(accepted)
    candidate = Rect(10, 10, 14, 14)
    assert fits(candidate, accepted) is True
    assert fits(Rect(4, 0, 8, 4), accepted) is False
    assert accepted == before


def test_fits_with_no_rooms():
    assert fits(Rect(0, 0, 3, 3), []) is True


def test_carve_room_only_touches_interior():
    grid = TileGrid(6, 5)
    room = Rect(0, 0, 4, 3)
    carve_room(grid, room)
    assert grid.to_lines() == [
        "######",
        "#...##",
        "#...##",
        "######",
        "######",
    ]


def test_sample_draws_size_then_origin_within_bounds(scripted):
    grid = TileGrid(20, 12)
    rng = scripted(ints=[5, 3, 7, 2])
    placer = RoomPlacer(grid, 3, 6, rng)
    room = placer.sample()
    assert room == Rect(7, 2, 12, 5)
    assert rng.int_calls == [(3, 6), (3, 6), (0, 20 - 5 - 1), (0, 12 - 3 - 1)]


def test_attempt_accepts_and_carves(scripted):
    grid = TileGrid(20, 12)
    placer = RoomPlacer(grid, 4, 4, scripted(ints=[4, 4, 1, 1]))
    room = placer.attempt()
    assert room == Rect(1, 1, 5, 5)
    assert placer.rooms == [room]
    for x, y in room.interior():
        assert not grid.is_blocked(x, y)
    assert grid.floor_count() == 9


def test_overlapping_attempt_is_discarded_silently(scripted):
    grid = TileGrid(20, 12)
    # second candidate shares the first room's right border column
    placer = RoomPlacer(grid, 4, 4, scripted(ints=[4, 4, 1, 1, 4, 4, 5, 1]))
    first = placer.attempt()
    snapshot = grid.snapshot()
    second = placer.attempt()
    assert first is not None
    assert second is None
    assert placer.rooms == [first]
    assert grid.snapshot() == snapshot


def test_rooms_keep_acceptance_order(scripted):
    grid = TileGrid(30, 12)
    placer = RoomPlacer(grid, 4, 4, scripted(ints=[4, 4, 20, 1, 4, 4, 2, 1]))
    a = placer.attempt()
    b = placer.attempt()
    assert placer.rooms == [a, b]
    assert a.x1 > b.x1
