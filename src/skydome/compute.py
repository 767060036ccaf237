"""Pipeline layer: frame generation, constellation assembly, and scene composition.

Every function here is pure; results are memoized on their (hashable) inputs so
re-rendering the same sky at the same size does no work twice.
"""

import logging
from datetime import datetime, tzinfo
from functools import lru_cache

from skydome.constellations import DEFAULT_CONSTELLATIONS, assemble
from skydome.generator import DEFAULT_NIGHT_WINDOW, NightWindow, generate
from skydome.models import (
    ConstellationDef,
    Frame,
    Location,
    QueryInput,
    RenderableScene,
)
from skydome.observer import resolve_query
from skydome.scene import compose
from skydome.settings import Settings

LOG = logging.getLogger(__name__)


def build_frame(
    time: datetime,
    location: Location,
    count: int = 200,
    night_window: NightWindow = DEFAULT_NIGHT_WINDOW,
    defs: tuple[ConstellationDef, ...] = DEFAULT_CONSTELLATIONS,
) -> Frame:
    """Generate bodies and constellations for one (time, location).

    Args:
        time: Naive (observer wall clock) or aware datetime.
        location: Validated observer location.
        count: Number of procedural bodies.
        night_window: Local hours treated as night.
        defs: Constellation definitions.

    Returns:
        An internally consistent Frame.
    """
    # Equal aware datetimes in different zones hash alike; keying on tzinfo
    # keeps Frame.time identical to the caller's value.
    return _build_frame(time, time.tzinfo, location, count, night_window, defs)


@lru_cache(maxsize=32)
def _build_frame(
    time: datetime,
    zone: tzinfo | None,
    location: Location,
    count: int,
    night_window: NightWindow,
    defs: tuple[ConstellationDef, ...],
) -> Frame:
    bodies = generate(time, location, count, night_window)
    constellations = assemble(bodies, defs)
    LOG.debug(
        "Frame for %s: %d bodies, %d/%d constellations with lines",
        location.name or location,
        len(bodies),
        sum(1 for c in constellations if c.lines),
        len(constellations),
    )
    return Frame(bodies=bodies, constellations=constellations, time=time, location=location)


def frame_for(time: datetime, location: Location, settings: Settings) -> Frame:
    night_window = NightWindow(start_hour=settings.night_start, end_hour=settings.night_end)
    return build_frame(time, location, settings.body_count, night_window)


@lru_cache(maxsize=32)
def sky_scene(
    time: datetime,
    location: Location,
    width: float,
    height: float,
    padding: float,
    settings: Settings = Settings(),
) -> RenderableScene:
    """Frame + composition in one memoized call keyed on inputs and surface size."""
    frame = frame_for(time, location, settings)
    return compose(frame, width, height, padding, lang=settings.lang)


def run(query: QueryInput, settings: Settings | None = None) -> RenderableScene:
    """Top-level entry point: takes a QueryInput and returns a RenderableScene.

    Args:
        query: User input (place, time string).
        settings: Generation and surface settings. Defaults to ``Settings()``.

    Returns:
        Scene sized to ``settings.surface_width`` x ``settings.surface_height``.

    Raises:
        InvalidInputError: On out-of-range coordinates or an unparseable time.
        LocationNotFoundError: When the place matches no preset.
        SurfaceConfigError: When the surface is too small for the padding.
    """
    settings = settings or Settings()
    context = resolve_query(query)
    return sky_scene(
        context.when,
        context.location,
        settings.surface_width,
        settings.surface_height,
        settings.padding,
        settings,
    )
