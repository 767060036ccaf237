"""Scene composition: turns a Frame into an ordered list of draw instructions.

The scene decides what is drawn and where. Colours, fonts and strokes belong
to the renderers.
"""

import logging
from collections.abc import Sequence

from skydome.i18n import t
from skydome.models import (
    DrawInstruction,
    Frame,
    GuideCircle,
    LineSegment,
    RenderableScene,
    StarPoint,
    TextLabel,
)
from skydome.projection import SurfaceGeometry, altitude_ring_radius, project_on
from skydome.visibility import is_label_eligible, is_line_visible, is_visible

LOG = logging.getLogger(__name__)

FAINTEST_MAGNITUDE = 6.0
GLOW_MAGNITUDE = 2.0

_STAR_LABEL_OFFSET = 12.0
# (label key, unit direction x, unit direction y, gap beyond the rim)
_CARDINALS: tuple[tuple[str, float, float, float], ...] = (
    ("cardinal_n", 0.0, -1.0, 5.0),
    ("cardinal_e", 1.0, 0.0, 5.0),
    ("cardinal_s", 0.0, 1.0, 15.0),
    ("cardinal_w", -1.0, 0.0, 5.0),
)


class SceneCompositionError(ValueError):
    """The frame is internally inconsistent (a line references an unknown body)."""


def star_radius(magnitude: float, scale: float = 3.0, brightness: float = 0.8) -> float:
    """Point radius; brighter (lower magnitude) bodies are larger, never below 1."""
    return max(1.0, scale * brightness * (FAINTEST_MAGNITUDE - magnitude) / FAINTEST_MAGNITUDE)


def star_intensity(magnitude: float) -> float:
    """Dimmer bodies are more transparent."""
    return max(0.35, min(1.0, (FAINTEST_MAGNITUDE - magnitude) / FAINTEST_MAGNITUDE))


def _check_integrity(frame: Frame) -> None:
    known = {b.id: b for b in frame.bodies}
    for constellation in frame.constellations:
        for line in constellation.lines:
            for body in (line.start, line.end):
                if known.get(body.id) != body:
                    raise SceneCompositionError(
                        f"{constellation.name}: line endpoint {body.id!r} is not a body of this frame"
                    )


def _guides(
    surface: SurfaceGeometry, guide_altitudes: Sequence[float], lang: str
) -> list[DrawInstruction]:
    cx, cy, r = surface.center_x, surface.center_y, surface.radius
    guides: list[DrawInstruction] = [
        GuideCircle(cx=cx, cy=cy, radius=r, kind="horizon", altitude=0.0)
    ]
    for altitude in guide_altitudes:
        ring = altitude_ring_radius(surface, altitude)
        guides.append(GuideCircle(cx=cx, cy=cy, radius=ring, kind="altitude", altitude=altitude))
        guides.append(TextLabel(x=cx + ring, y=cy, text=f"{altitude:g}°", kind="altitude"))
    for key, dx, dy, gap in _CARDINALS:
        reach = r + gap
        guides.append(TextLabel(x=cx + dx * reach, y=cy + dy * reach, text=t(key, lang), kind="cardinal"))
    return guides


def compose(
    frame: Frame,
    width: float,
    height: float,
    padding: float,
    *,
    include_guides: bool = True,
    guide_altitudes: Sequence[float] = (30, 60),
    lang: str = "en",
) -> RenderableScene:
    """Project a frame onto a surface and list what to draw, in draw order.

    Order: visible bodies (each named body followed by its name label), then
    per constellation its visible lines and, if eligible, its name label, then
    the horizon, altitude rings and cardinal labels when ``include_guides``.

    Args:
        frame: Fully generated frame.
        width: Surface width.
        height: Surface height.
        padding: Gap between the horizon rim and the nearer surface edge.
        include_guides: Add horizon, altitude rings and cardinal labels.
        guide_altitudes: Altitudes of the ring guides, in degrees.
        lang: Language code for cardinal labels.

    Returns:
        RenderableScene with only visible elements.

    Raises:
        SurfaceConfigError: When the surface leaves no positive radius.
        SceneCompositionError: When a line references a body outside the frame.
    """
    surface = SurfaceGeometry(width=width, height=height, padding=padding)
    _check_integrity(frame)

    instructions: list[DrawInstruction] = []
    for body in frame.bodies:
        if not is_visible(body):
            continue
        x, y = project_on(surface, body.altitude, body.azimuth)
        instructions.append(
            StarPoint(
                x=x,
                y=y,
                radius=star_radius(body.magnitude),
                intensity=star_intensity(body.magnitude),
                glow=body.magnitude < GLOW_MAGNITUDE,
                body_id=body.id,
            )
        )
        if body.name:
            instructions.append(TextLabel(x=x, y=y + _STAR_LABEL_OFFSET, text=body.name, kind="star"))

    for constellation in frame.constellations:
        for line in constellation.lines:
            if not is_line_visible(line):
                continue
            x1, y1 = project_on(surface, line.start.altitude, line.start.azimuth)
            x2, y2 = project_on(surface, line.end.altitude, line.end.azimuth)
            instructions.append(
                LineSegment(
                    x1=x1,
                    y1=y1,
                    x2=x2,
                    y2=y2,
                    start_id=line.start.id,
                    end_id=line.end.id,
                    constellation=constellation.name,
                )
            )
        if is_label_eligible(constellation):
            x, y = project_on(surface, constellation.center.altitude, constellation.center.azimuth)
            instructions.append(TextLabel(x=x, y=y, text=constellation.name, kind="constellation"))

    if include_guides:
        instructions.extend(_guides(surface, guide_altitudes, lang))

    scene = RenderableScene(
        width=surface.width,
        height=surface.height,
        padding=surface.padding,
        radius=surface.radius,
        center_x=surface.center_x,
        center_y=surface.center_y,
        instructions=tuple(instructions),
    )
    LOG.debug(
        "Composed %d instructions (%d points, %d segments) on %gx%g",
        len(scene.instructions),
        len(scene.points),
        len(scene.segments),
        width,
        height,
    )
    return scene
