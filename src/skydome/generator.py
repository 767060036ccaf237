"""Seeded field generator: a reproducible set of bodies for one (time, location).

Positions are a pseudo-random approximation, not ephemeris output. The same
(time, location, count, night window) always yields bit-identical bodies.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from skydome.models import CelestialBody, Location
from skydome.observer import local_time

LOG = logging.getLogger(__name__)

# Name → fixed apparent magnitude
REFERENCE_STARS: tuple[tuple[str, float], ...] = (
    ("Polaris", 2.0),
    ("Vega", 0.03),
    ("Sirius", -1.46),
    ("Betelgeuse", 0.5),
    ("Rigel", 0.13),
    ("Arcturus", -0.05),
    ("Antares", 1.09),
    ("Aldebaran", 0.87),
    ("Spica", 1.04),
    ("Deneb", 1.25),
)

_REFERENCE_ALT_MIN = 30.0
_REFERENCE_ALT_SPAN = 50.0

# Daytime compression: fewer bodies end up above the horizon
_DAY_ALT_SCALE = 0.7
_DAY_ALT_OFFSET = -20.0


@dataclass(frozen=True)
class NightWindow:
    """Local hours treated as night. Both ends inclusive; wraps past midnight."""

    start_hour: int = 18
    end_hour: int = 6

    def contains(self, hour: int) -> bool:
        if self.start_hour <= self.end_hour:
            return self.start_hour <= hour <= self.end_hour
        return hour >= self.start_hour or hour <= self.end_hour


DEFAULT_NIGHT_WINDOW = NightWindow()


def epoch_ms(time: datetime, location: Location) -> int:
    """Milliseconds since the Unix epoch, reading naive times as observer-local."""
    return round(local_time(time, location).timestamp() * 1000)


def frame_seed(time: datetime, location: Location) -> float:
    """Single scalar combining time and location."""
    return _seed_at(local_time(time, location), location)


def _seed_at(local: datetime, location: Location) -> float:
    return round(local.timestamp() * 1000) + location.latitude * 100 + location.longitude


def _seed_entropy(seed: float) -> int:
    """IEEE-754 bit pattern of the seed as a non-negative integer."""
    return int(np.array([seed], dtype=np.float64).view(np.uint64)[0])


def generate(
    time: datetime,
    location: Location,
    count: int = 200,
    night_window: NightWindow = DEFAULT_NIGHT_WINDOW,
) -> tuple[CelestialBody, ...]:
    """Generate the bodies for one frame.

    Procedural bodies come first (``star-0`` … ``star-{count-1}``), followed by
    the reference stars in definition order. Row ``i`` of the procedural draw
    belongs to body ``i``, so a body's values depend only on the seed and its
    index.

    Args:
        time: Naive (observer wall clock) or aware datetime.
        location: Observer location, already range-checked.
        count: Number of procedural bodies.
        night_window: Local hours during which altitudes are left uncompressed.

    Returns:
        Tuple of ``count + len(REFERENCE_STARS)`` bodies.

    Raises:
        ValueError: On a negative count or non-finite coordinates.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if not (math.isfinite(location.latitude) and math.isfinite(location.longitude)):
        raise ValueError(f"Non-finite location: {location}")

    local = local_time(time, location)
    seed = _seed_at(local, location)
    is_night = night_window.contains(local.hour)
    procedural_seq, reference_seq = np.random.SeedSequence(_seed_entropy(seed)).spawn(2)

    draws = np.random.default_rng(procedural_seq).random((count, 3))
    altitudes = 90.0 - np.abs(draws[:, 0] * 180.0 - 90.0)
    if not is_night:
        altitudes = altitudes * _DAY_ALT_SCALE + _DAY_ALT_OFFSET
    azimuths = draws[:, 1] * 360.0
    magnitudes = draws[:, 2] * 5.0 + 1.0

    bodies: list[CelestialBody] = [
        CelestialBody(
            id=f"star-{i}",
            magnitude=float(magnitudes[i]),
            altitude=float(altitudes[i]),
            azimuth=float(azimuths[i]),
        )
        for i in range(count)
    ]

    reference_draws = np.random.default_rng(reference_seq).random(len(REFERENCE_STARS))
    for i, (name, magnitude) in enumerate(REFERENCE_STARS):
        bodies.append(
            CelestialBody(
                id=f"named-star-{i}",
                name=name,
                magnitude=magnitude,
                altitude=_REFERENCE_ALT_MIN + float(reference_draws[i]) * _REFERENCE_ALT_SPAN,
                azimuth=i / len(REFERENCE_STARS) * 360.0,
            )
        )

    LOG.debug(
        "Generated %d bodies for %s at %s (seed=%r, night=%s)",
        len(bodies),
        location.name or location,
        local.isoformat(),
        seed,
        is_night,
    )
    return tuple(bodies)
