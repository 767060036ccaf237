"""SVG star chart renderer.

Produces a standalone SVG document (and an HTML page wrapping it) in the
scene's own surface coordinates: ``viewBox="0 0 width height"``, y downward.
"""

from __future__ import annotations

from html import escape

from skydome.models import GuideCircle, LineSegment, RenderableScene, StarPoint, TextLabel
from skydome.renderers.palette import GUIDE_OPACITY, LABEL_FONT_SIZE, get_palette

# Shared radialGradient levels keyed by intensity bucket, so glow halos don't
# need one gradient per star.
_N_GLOW_LEVELS = 10
_MIN_INTENSITY = 0.35


def _glow_level(intensity: float) -> int:
    lvl = round((intensity - _MIN_INTENSITY) / (1 - _MIN_INTENSITY) * (_N_GLOW_LEVELS - 1))
    return max(0, min(_N_GLOW_LEVELS - 1, lvl))


def render_svg(scene: RenderableScene, theme: str = "light") -> str:
    """Return an SVG document for the scene.

    Draw order follows the scene: stars (with halos for bright ones), star
    labels, constellation lines and labels, then guides.

    Args:
        scene: Composed scene.
        theme: Palette name ("light" or "dark").

    Returns:
        SVG markup as a string.
    """
    palette = get_palette(theme)

    grad_defs: list[str] = []
    for lvl in range(_N_GLOW_LEVELS):
        op_lvl = _MIN_INTENSITY + lvl * ((1 - _MIN_INTENSITY) / (_N_GLOW_LEVELS - 1))
        grad_defs.append(
            f'<radialGradient id="sg{lvl}" cx="50%" cy="50%" r="50%">'
            f'<stop offset="0%" stop-color="{palette.star}" stop-opacity="{op_lvl * 0.55:.2f}"/>'
            f'<stop offset="40%" stop-color="{palette.star}" stop-opacity="{op_lvl * 0.18:.2f}"/>'
            f'<stop offset="100%" stop-color="{palette.star}" stop-opacity="0"/>'
            f"</radialGradient>"
        )

    parts: list[str] = []
    for item in scene.instructions:
        if isinstance(item, StarPoint):
            if item.glow:
                parts.append(
                    f'<circle cx="{item.x:.2f}" cy="{item.y:.2f}" r="{item.radius * 3:.2f}"'
                    f' fill="url(#sg{_glow_level(item.intensity)})"/>'
                )
            parts.append(
                f'<circle cx="{item.x:.2f}" cy="{item.y:.2f}" r="{item.radius:.2f}"'
                f' fill="{palette.star}" opacity="{item.intensity:.2f}"'
                f' data-body="{escape(item.body_id)}"/>'
            )
        elif isinstance(item, LineSegment):
            parts.append(
                f'<line x1="{item.x1:.2f}" y1="{item.y1:.2f}" x2="{item.x2:.2f}" y2="{item.y2:.2f}"'
                f' stroke="{palette.line}" stroke-width="1" stroke-opacity="{palette.line_opacity}"/>'
            )
        elif isinstance(item, GuideCircle):
            parts.append(
                f'<circle cx="{item.cx:.2f}" cy="{item.cy:.2f}" r="{item.radius:.2f}" fill="none"'
                f' stroke="{palette.guide}" stroke-width="1" stroke-opacity="{GUIDE_OPACITY[item.kind]}"/>'
            )
        elif isinstance(item, TextLabel):
            parts.append(
                f'<text x="{item.x:.2f}" y="{item.y:.2f}" fill="{palette.text}"'
                f' font-size="{LABEL_FONT_SIZE[item.kind]}" font-family="Arial, sans-serif"'
                f' text-anchor="middle" dominant-baseline="middle"'
                f' class="{item.kind}">{escape(item.text)}</text>'
            )

    defs_svg = "\n    ".join(grad_defs)
    body_svg = "\n  ".join(parts)
    return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {scene.width:g} {scene.height:g}" width="{scene.width:g}" height="{scene.height:g}">
  <defs>
    {defs_svg}
  </defs>
  <rect x="0" y="0" width="{scene.width:g}" height="{scene.height:g}" fill="{palette.background}"/>
  {body_svg}
</svg>"""


def render_svg_html(scene: RenderableScene, theme: str = "light", title: str = "") -> str:
    """Return a self-contained HTML page embedding the SVG chart."""
    palette = get_palette(theme)
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(title)}</title>
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
html, body {{
    background: {palette.background};
}}
svg {{
    display: block;
    margin: 1rem auto;
    max-width: 100%;
    height: auto;
}}
</style>
</head>
<body>
{render_svg(scene, theme)}
</body>
</html>"""
