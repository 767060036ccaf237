"""Runtime configuration read from environment variables.

Entry points call ``load_dotenv()`` first, so values may also come from a
``.env`` file in the working directory.
"""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

_PREFIX = "SKYDOME_"
_THEMES = ("light", "dark")
_LANGS = ("en", "ko")


class SettingsError(ValueError):
    """An environment variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    body_count: int = 200
    night_start: int = 18
    night_end: int = 6
    surface_width: float = 800.0
    surface_height: float = 500.0
    padding: float = 30.0
    theme: str = "light"
    lang: str = "en"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build Settings from ``SKYDOME_*`` variables, falling back to defaults.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            SettingsError: When a value is malformed or out of range.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        body_count = _read_int(env, "BODY_COUNT", defaults.body_count)
        if body_count < 0:
            raise SettingsError(f"{_PREFIX}BODY_COUNT must be >= 0, got {body_count}")

        night_start = _read_int(env, "NIGHT_START", defaults.night_start)
        night_end = _read_int(env, "NIGHT_END", defaults.night_end)
        for key, hour in (("NIGHT_START", night_start), ("NIGHT_END", night_end)):
            if not 0 <= hour <= 23:
                raise SettingsError(f"{_PREFIX}{key} must be an hour 0-23, got {hour}")

        theme = env.get(_PREFIX + "THEME", defaults.theme).strip().lower()
        if theme not in _THEMES:
            raise SettingsError(f"{_PREFIX}THEME must be one of {_THEMES}, got {theme!r}")
        lang = env.get(_PREFIX + "LANG", defaults.lang).strip().lower()
        if lang not in _LANGS:
            raise SettingsError(f"{_PREFIX}LANG must be one of {_LANGS}, got {lang!r}")

        return cls(
            body_count=body_count,
            night_start=night_start,
            night_end=night_end,
            surface_width=_read_float(env, "SURFACE_WIDTH", defaults.surface_width),
            surface_height=_read_float(env, "SURFACE_HEIGHT", defaults.surface_height),
            padding=_read_float(env, "PADDING", defaults.padding),
            theme=theme,
            lang=lang,
        )


def _read_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise SettingsError(f"{_PREFIX}{key} must be an integer, got {raw!r}") from exc


def _read_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise SettingsError(f"{_PREFIX}{key} must be a number, got {raw!r}") from exc
    if not math.isfinite(value):
        raise SettingsError(f"{_PREFIX}{key} must be finite, got {raw!r}")
    return value
