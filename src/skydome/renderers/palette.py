"""Theme palettes. Styling lives here and in the renderers, never in the scene."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    background: str
    star: str
    line: str
    line_opacity: float
    guide: str
    text: str


PALETTES: dict[str, Palette] = {
    "light": Palette(
        background="#ffffff",
        star="#000000",
        line="#000000",
        line_opacity=1.0,
        guide="#000000",
        text="#000000",
    ),
    "dark": Palette(
        background="#0d1b35",
        star="#f0e0b0",
        line="#c9a96e",
        line_opacity=0.55,
        guide="#c9a96e",
        text="#e8d5a3",
    ),
}

# Opacity of the horizon rim vs. the altitude rings
GUIDE_OPACITY = {"horizon": 0.5, "altitude": 0.3}
LABEL_FONT_SIZE = {"star": 10, "constellation": 12, "altitude": 10, "cardinal": 12}


def get_palette(theme: str) -> Palette:
    try:
        return PALETTES[theme]
    except KeyError:
        raise ValueError(f"Unknown theme {theme!r}; expected one of {sorted(PALETTES)}") from None
