from rl7d.dungeon.generator import generate_map
from rl7d.rng import SeededRandom, derive_seed


def run(seed, **kw):
    params = dict(width=60, height=40, room_min_size=5, room_max_size=9, max_rooms=25)
    params.update(kw)
    return generate_map(rng=SeededRandom(seed), **params)


def test_same_seed_same_grid_and_rooms():
    a = run(12345)
    b = run(12345)
    assert a.grid.snapshot() == b.grid.snapshot()
    assert a.rooms == b.rooms


def test_string_seeds_are_stable():
    a = run("test-seed-123")
    b = run("test-seed-123")
    assert a.grid.snapshot() == b.grid.snapshot()
    assert a.rooms == b.rooms


def test_different_seeds_change_layout():
    a = run("seed-A")
    b = run("seed-B")
    # A full collision is possible in theory but not for these seeds.
    assert a.grid.snapshot() != b.grid.snapshot() or a.rooms != b.rooms


def test_derive_seed():
    assert derive_seed(42) == 42
    assert derive_seed("floor-001") == derive_seed("floor-001")
    assert derive_seed("floor-001") != derive_seed("floor-002")
    assert derive_seed("0x2a") == derive_seed(b"\x2a")
    assert 0 <= derive_seed(-5) < 2**64


def test_seeded_random_matches_stdlib_for_int_seed():
    import random

    ours = SeededRandom(99)
    theirs = random.Random(99)
    assert [ours.randint(0, 1000) for _ in range(10)] == [theirs.randint(0, 1000) for _ in range(10)]


def test_unseeded_random_reports_effective_seed():
    rng = SeededRandom()
    replay = SeededRandom(rng.effective_seed)
    assert [rng.randint(0, 10**6) for _ in range(5)] == [replay.randint(0, 10**6) for _ in range(5)]


def test_coin_flip_is_roughly_fair():
    rng = SeededRandom(7)
    heads = sum(rng.coin_flip() for _ in range(2000))
    assert 850 < heads < 1150
