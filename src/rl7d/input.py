from __future__ import annotations

import logging
from enum import Enum, auto
from itertools import combinations
from typing import Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


class InputAction(Enum):
    """Logical actions the session understands, independent of the keyboard backend."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    TOGGLE_FULLSCREEN = auto()
    EXIT = auto()


MOVE_DELTAS: Dict[InputAction, Tuple[int, int]] = {
    InputAction.MOVE_UP: (0, -1),
    InputAction.MOVE_DOWN: (0, 1),
    InputAction.MOVE_LEFT: (-1, 0),
    InputAction.MOVE_RIGHT: (1, 0),
}

MODIFIER_ORDER = ("CTRL", "ALT", "SHIFT")


class InputMapper:
    """Rebindable mapping from key names (optionally with modifiers) to actions.

    Keys are case-insensitive strings, so any backend only has to translate
    its key constants to names. A chord is written as ``"ALT+ENTER"``; when a
    key is pressed with modifiers, chords over the held modifiers are tried
    first (largest set first, so Alt+Shift+Enter still finds ``ALT+ENTER``)
    and the bare key last.

    Example usage:
        mapper = InputMapper.default()
        mapper.translate_key("w")                        # -> InputAction.MOVE_UP
        mapper.translate_key("enter", modifiers={"alt"})  # -> TOGGLE_FULLSCREEN
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    @staticmethod
    def _normalize(key: Optional[str]) -> Optional[str]:
        if not isinstance(key, str):
            return None
        k = key.strip().upper()
        return k or None

    def _chord(self, key: str, modifiers: Iterable[str]) -> str:
        mods = {m for m in (self._normalize(x) for x in modifiers) if m}
        ordered = [m for m in MODIFIER_ORDER if m in mods]
        return "+".join(ordered + [key])

    def bind(self, key: str, action: InputAction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str, canonical_name: str) -> None:
        """Treat ``physical`` as ``canonical_name``, e.g. set_alias("ESC", "ESCAPE")."""
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate_key(self, key: str, modifiers: Iterable[str] = ()) -> Optional[InputAction]:
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        held = {m for m in (self._normalize(x) for x in modifiers) if m}
        ordered = [m for m in MODIFIER_ORDER if m in held]
        for size in range(len(ordered), 0, -1):
            for subset in combinations(ordered, size):
                action = self._bindings.get(self._chord(canonical, subset))
                if action is not None:
                    return action
        return self._bindings.get(canonical)

    @classmethod
    def default(cls) -> "InputMapper":
        """Arrows/WASD move, Alt+Enter toggles fullscreen, Escape exits."""
        mapper = cls()
        mapper.bind_many(["UP", "W"], InputAction.MOVE_UP)
        mapper.bind_many(["DOWN", "S"], InputAction.MOVE_DOWN)
        mapper.bind_many(["LEFT", "A"], InputAction.MOVE_LEFT)
        mapper.bind_many(["RIGHT", "D"], InputAction.MOVE_RIGHT)
        mapper.bind("ALT+ENTER", InputAction.TOGGLE_FULLSCREEN)
        mapper.set_alias("RETURN", "ENTER")
        mapper.bind("ESCAPE", InputAction.EXIT)
        mapper.set_alias("ESC", "ESCAPE")
        return mapper


__all__ = ["InputAction", "InputMapper", "MOVE_DELTAS"]
