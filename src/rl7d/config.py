from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "RL7D_"
CONFIG_PATH_ENV = "RL7D_CONFIG"


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey values into a bool.

    Accepts: True/False, 1/0, "true"/"false", "yes"/"no", "on"/"off" (case-insensitive).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off", ""}:
            return False
    raise ConfigurationError(f"Not a boolean: {value!r}")


def _as_seed(value: Any) -> Optional[Union[int, str]]:
    if value is None or isinstance(value, int):
        return value
    s = str(value).strip()
    if not s:
        return None
    try:
        return int(s)
    except ValueError:
        return s


@dataclass
class GenerationSettings:
    """Parameters of one map generation run."""

    width: int = 80
    height: int = 45
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30
    seed: Optional[Union[int, str]] = None

    def validate(self) -> None:
        """Raise ConfigurationError unless rooms of every sampled size fit the grid."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"Map dimensions must be positive, got {self.width}x{self.height}")
        if self.room_min_size < 2:
            raise ConfigurationError(f"room_min_size must be at least 2, got {self.room_min_size}")
        if self.room_min_size > self.room_max_size:
            raise ConfigurationError(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        if self.room_max_size > self.width - 1 or self.room_max_size > self.height - 1:
            raise ConfigurationError(
                f"room_max_size {self.room_max_size} does not fit a {self.width}x{self.height} map"
            )
        if self.max_rooms < 0:
            raise ConfigurationError(f"max_rooms must not be negative, got {self.max_rooms}")


@dataclass
class WindowSettings:
    """Display options for the interactive window."""

    title: str = "rl7d playground"
    columns: int = 80
    rows: int = 50
    tile_px: int = 10
    fps: int = 20
    fullscreen: bool = False

    def validate(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ConfigurationError(f"Window size must be positive, got {self.columns}x{self.rows} tiles")
        if self.tile_px <= 0:
            raise ConfigurationError(f"tile_px must be positive, got {self.tile_px}")
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return self.columns * self.tile_px, self.rows * self.tile_px


# env var -> (section, field, caster)
_ENV_MAPPING: Dict[str, Tuple[str, str, Callable[[Any], Any]]] = {
    "RL7D_WIDTH": ("generation", "width", int),
    "RL7D_HEIGHT": ("generation", "height", int),
    "RL7D_ROOM_MIN_SIZE": ("generation", "room_min_size", int),
    "RL7D_ROOM_MAX_SIZE": ("generation", "room_max_size", int),
    "RL7D_MAX_ROOMS": ("generation", "max_rooms", int),
    "RL7D_SEED": ("generation", "seed", _as_seed),
    "RL7D_FPS": ("window", "fps", int),
    "RL7D_TILE_PX": ("window", "tile_px", int),
    "RL7D_FULLSCREEN": ("window", "fullscreen", _as_bool),
}

_CASTERS: Dict[str, Dict[str, Callable[[Any], Any]]] = {
    "generation": {
        "width": int,
        "height": int,
        "room_min_size": int,
        "room_max_size": int,
        "max_rooms": int,
        "seed": _as_seed,
    },
    "window": {
        "title": str,
        "columns": int,
        "rows": int,
        "tile_px": int,
        "fps": int,
        "fullscreen": _as_bool,
    },
}


def _parse_yaml(text: str, origin: str) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Malformed YAML in {origin}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Top level of {origin} must be a mapping")
    return raw


def _merge_section(target: Dict[str, Any], section: str, data: Any, origin: str) -> None:
    if data is None:
        return
    if not isinstance(data, dict):
        raise ConfigurationError(f"Section '{section}' in {origin} must be a mapping")
    casters = _CASTERS[section]
    for key, value in data.items():
        caster = casters.get(key)
        if caster is None:
            logger.warning("Ignoring unknown %s setting %r in %s", section, key, origin)
            continue
        try:
            target[key] = caster(value)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid value for {section}.{key} in {origin}: {value!r}") from exc


def load_default_document() -> Dict[str, Any]:
    text = resource_files("rl7d.data").joinpath("defaults.yaml").read_text(encoding="utf-8")
    logger.debug("Loaded packaged default settings")
    return _parse_yaml(text, "packaged defaults")


def load_yaml_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        text = f.read()
    logger.debug("Loaded settings from %s", path)
    return _parse_yaml(text, str(path))


def env_overrides(env: Optional[Mapping[str, str]] = None) -> Dict[str, Dict[str, Any]]:
    env = os.environ if env is None else env
    out: Dict[str, Dict[str, Any]] = {"generation": {}, "window": {}}
    for env_key, (section, field_name, caster) in _ENV_MAPPING.items():
        if env_key in env and env[env_key] != "":
            try:
                out[section][field_name] = caster(env[env_key])
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"Invalid value for {env_key}: {env[env_key]!r}") from exc
    return out


def load_settings(
    path: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
    validate: bool = True,
) -> Tuple[GenerationSettings, WindowSettings]:
    """Resolve settings from packaged defaults, a YAML file and the environment.

    Later sources win: defaults, then ``path`` (or ``$RL7D_CONFIG``), then
    ``RL7D_*`` variables. Both results are validated before being returned
    unless ``validate`` is False, for callers that apply further overrides
    and validate afterwards.
    """
    env = os.environ if env is None else env
    merged: Dict[str, Dict[str, Any]] = {"generation": {}, "window": {}}

    documents = [("packaged defaults", load_default_document())]
    if path is None and env.get(CONFIG_PATH_ENV):
        path = env[CONFIG_PATH_ENV]
    if path is not None:
        p = Path(path).expanduser()
        documents.append((str(p), load_yaml_file(p)))

    for origin, doc in documents:
        for section in merged:
            _merge_section(merged[section], section, doc.get(section), origin)
        for key in doc:
            if key not in merged:
                logger.warning("Ignoring unknown settings section %r in %s", key, origin)

    for section, values in env_overrides(env).items():
        merged[section].update(values)

    generation = GenerationSettings(**merged["generation"])
    window = WindowSettings(**merged["window"])
    if validate:
        generation.validate()
        window.validate()
    logger.debug("Resolved settings: %s %s", generation, window)
    return generation, window


def with_overrides(settings: GenerationSettings, **overrides: Any) -> GenerationSettings:
    """Copy ``settings`` replacing every override that is not None."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(settings, **changes)


__all__ = [
    "GenerationSettings",
    "WindowSettings",
    "load_settings",
    "load_yaml_file",
    "env_overrides",
    "with_overrides",
]
