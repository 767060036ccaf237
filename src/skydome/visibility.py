"""Horizon culling rules shared by assembly and scene composition."""

from collections.abc import Iterable
from typing import Protocol

from skydome.models import CelestialBody, Constellation, ConstellationLine


class _HasAltitude(Protocol):
    altitude: float


def is_visible(item: _HasAltitude) -> bool:
    """Above the horizon, strictly. Bodies exactly at altitude 0 are culled."""
    return item.altitude > 0


def is_line_visible(line: ConstellationLine) -> bool:
    """A line is drawn whole or not at all."""
    return is_visible(line.start) and is_visible(line.end)


def is_label_eligible(constellation: Constellation) -> bool:
    """Label only constellations with a visible center and at least one line."""
    return is_visible(constellation.center) and bool(constellation.lines)


def visible_bodies(bodies: Iterable[CelestialBody]) -> tuple[CelestialBody, ...]:
    return tuple(b for b in bodies if is_visible(b))
