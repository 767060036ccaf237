"""Simple two-language (en/ko) translation helper for chart text."""

_STRINGS: dict[str, dict[str, str]] = {
    "cardinal_n": {
        "en": "N",
        "ko": "북",
    },
    "cardinal_e": {
        "en": "E",
        "ko": "동",
    },
    "cardinal_s": {
        "en": "S",
        "ko": "남",
    },
    "cardinal_w": {
        "en": "W",
        "ko": "서",
    },
    "chart_title": {
        "en": "Night sky over {place}",
        "ko": "{place}의 밤하늘",
    },
    "saved": {
        "en": "Saved: {path}",
        "ko": "저장됨: {path}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
