"""Constellation assembly: named path graphs over the visible bodies of a frame."""

import logging
import math
from collections.abc import Sequence

from skydome.models import (
    CelestialBody,
    Constellation,
    ConstellationDef,
    ConstellationLine,
    SkyPosition,
)
from skydome.visibility import visible_bodies

LOG = logging.getLogger(__name__)

DEFAULT_CONSTELLATIONS: tuple[ConstellationDef, ...] = (
    ConstellationDef(name="Ursa Major", star_count=7, start_index=0),
    ConstellationDef(name="Orion", star_count=7, start_index=10),
    ConstellationDef(name="Cassiopeia", star_count=5, start_index=20),
    ConstellationDef(name="Cygnus", star_count=5, start_index=30),
    ConstellationDef(name="Lyra", star_count=4, start_index=40),
)

MIN_MEMBERS = 3

# Below the horizon so every consumer skips empty constellations the same way
EMPTY_CENTER = SkyPosition(altitude=-10.0, azimuth=0.0)


def _mean_position(members: Sequence[CelestialBody], circular_azimuth: bool) -> SkyPosition:
    """Mean altitude and azimuth of the members.

    The arithmetic azimuth mean is wrong for groups straddling north (0°/360°);
    ``circular_azimuth`` switches to the sin/cos mean.
    """
    n = len(members)
    altitude = sum(b.altitude for b in members) / n
    if circular_azimuth:
        sin_sum = sum(math.sin(math.radians(b.azimuth)) for b in members)
        cos_sum = sum(math.cos(math.radians(b.azimuth)) for b in members)
        azimuth = math.degrees(math.atan2(sin_sum / n, cos_sum / n)) % 360
    else:
        azimuth = sum(b.azimuth for b in members) / n
    return SkyPosition(altitude=altitude, azimuth=azimuth)


def assemble(
    bodies: Sequence[CelestialBody],
    defs: Sequence[ConstellationDef] = DEFAULT_CONSTELLATIONS,
    circular_azimuth: bool = False,
) -> tuple[Constellation, ...]:
    """Build one Constellation per definition.

    Each definition takes the slice ``[start_index, start_index + star_count)``
    of the *visible* bodies (altitude > 0, original order) and chains
    consecutive members into lines. With fewer than ``MIN_MEMBERS`` visible
    members the constellation is returned empty, centred below the horizon.

    Args:
        bodies: All bodies of the frame.
        defs: Constellation definitions, in output order.
        circular_azimuth: Use the circular mean for the center azimuth.

    Returns:
        Tuple of constellations, one per definition.
    """
    visible = visible_bodies(bodies)
    constellations: list[Constellation] = []
    for definition in defs:
        members = visible[definition.start_index : definition.start_index + definition.star_count]
        if len(members) < MIN_MEMBERS:
            LOG.debug(
                "%s: %d visible members at index %d, emitting empty constellation",
                definition.name,
                len(members),
                definition.start_index,
            )
            constellations.append(
                Constellation(name=definition.name, lines=(), center=EMPTY_CENTER)
            )
            continue

        lines = tuple(
            ConstellationLine(start=members[i], end=members[i + 1])
            for i in range(len(members) - 1)
        )
        constellations.append(
            Constellation(
                name=definition.name,
                lines=lines,
                center=_mean_position(members, circular_azimuth),
            )
        )
    return tuple(constellations)
