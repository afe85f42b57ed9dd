import pytest

from rl7d.input import MOVE_DELTAS, InputAction, InputMapper


@pytest.mark.parametrize(
    "key,action",
    [
        ("UP", InputAction.MOVE_UP),
        ("W", InputAction.MOVE_UP),
        ("w", InputAction.MOVE_UP),
        ("DOWN", InputAction.MOVE_DOWN),
        ("S", InputAction.MOVE_DOWN),
        ("LEFT", InputAction.MOVE_LEFT),
        ("a", InputAction.MOVE_LEFT),
        ("RIGHT", InputAction.MOVE_RIGHT),
        ("D", InputAction.MOVE_RIGHT),
        ("ESCAPE", InputAction.EXIT),
        ("esc", InputAction.EXIT),
    ],
)
def test_default_bindings(key, action):
    assert InputMapper.default().translate_key(key) == action


def test_alt_enter_toggles_fullscreen():
    mapper = InputMapper.default()
    assert mapper.translate_key("ENTER", modifiers=["ALT"]) == InputAction.TOGGLE_FULLSCREEN
    assert mapper.translate_key("return", modifiers={"alt"}) == InputAction.TOGGLE_FULLSCREEN
    assert mapper.translate_key("ENTER", modifiers=["CTRL"]) is None


def test_plain_enter_is_unbound():
    assert InputMapper.default().translate_key("ENTER") is None


def test_modifiers_fall_back_to_bare_key():
    assert InputMapper.default().translate_key("UP", modifiers=["SHIFT"]) == InputAction.MOVE_UP


def test_unbound_and_invalid_keys():
    mapper = InputMapper.default()
    assert mapper.translate_key("F13") is None
    assert mapper.translate_key("") is None
    assert mapper.translate_key(None) is None


def test_rebinding_and_unbinding():
    mapper = InputMapper.default()
    mapper.bind("q", InputAction.EXIT)
    assert mapper.translate_key("Q") == InputAction.EXIT
    mapper.unbind("W")
    assert mapper.translate_key("W") is None
    mapper.bind("  ", InputAction.EXIT)
    assert mapper.translate_key("  ") is None


def test_move_deltas_are_cardinal_steps():
    assert set(MOVE_DELTAS.values()) == {(0, -1), (0, 1), (-1, 0), (1, 0)}
    assert InputAction.EXIT not in MOVE_DELTAS
    assert InputAction.TOGGLE_FULLSCREEN not in MOVE_DELTAS


@pytest.mark.parametrize("mods", [["ALT", "SHIFT"], ["shift", "alt"], ["CTRL", "ALT"], ["CTRL", "ALT", "SHIFT"]])
def test_alt_enter_with_extra_modifiers_still_toggles(mods):
    assert InputMapper.default().translate_key("ENTER", modifiers=mods) == InputAction.TOGGLE_FULLSCREEN


def test_most_specific_chord_wins():
    mapper = InputMapper.default()
    mapper.bind("ALT+SHIFT+ENTER", InputAction.EXIT)
    assert mapper.translate_key("ENTER", modifiers=["SHIFT", "ALT"]) == InputAction.EXIT
    assert mapper.translate_key("ENTER", modifiers=["ALT"]) == InputAction.TOGGLE_FULLSCREEN
